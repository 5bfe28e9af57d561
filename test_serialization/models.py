from django.db import models


class Author(models.Model):
    first_name = models.CharField(max_length=255)
    last_name = models.CharField(max_length=255, blank=True)


class Article(models.Model):
    title = models.CharField(max_length=255)
    author = models.ForeignKey(
        Author, on_delete=models.CASCADE, related_name='articles')
    is_published = models.BooleanField(default=False)


class FeaturedArticle(Article):
    featured_until = models.DateField(null=True, blank=True)


class Tag(models.Model):
    """ Model without a registered serializer """

    label_text = models.CharField(max_length=255)


class Point:
    """ Plain resource with generic JSON conversion """

    def __init__(self, pos_x, pos_y):
        self.pos_x = pos_x
        self.pos_y = pos_y

    def as_json(self):
        return {'pos_x': self.pos_x, 'pos_y': self.pos_y}


class Opaque:
    """ Resource supporting neither serializers nor generic conversion """
