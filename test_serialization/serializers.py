from rest_framework import serializers

from serializer_dispatch.api.registry import register
from serializer_dispatch.api.serializers import ScopedSerializerMixIn
from .models import Article, Author


@register(Author)
class AuthorSerializer(ScopedSerializerMixIn, serializers.ModelSerializer):
    full_name = serializers.SerializerMethodField()
    viewed_by = serializers.SerializerMethodField()

    class Meta:
        model = Author
        fields = ('first_name', 'last_name', 'full_name', 'viewed_by')

    @staticmethod
    def get_full_name(obj) -> str:
        return f'{obj.first_name} {obj.last_name}'.strip()

    def get_viewed_by(self, obj):
        return getattr(self.scope, 'username', None)


@register(Article)
class ArticleSerializer(serializers.ModelSerializer):
    root_key = 'article'

    author_name = serializers.CharField(source='author.first_name')

    class Meta:
        model = Article
        fields = ('title', 'is_published', 'author_name')


class AuthorNameSerializer(serializers.Serializer):  # noqa: abstract-method
    first_name = serializers.CharField()
