from rest_framework.views import APIView

from serializer_dispatch.api.responses import SerializedResponse
from serializer_dispatch.api.viewsets import SerializationViewMixIn
from .models import Author, Tag


class AuthorView(SerializationViewMixIn, APIView):
    def get(self, request, first_name):
        return SerializedResponse(Author(first_name=first_name))


class RenderedAuthorView(SerializationViewMixIn, APIView):
    def get(self, request, first_name):
        return self.render_json(Author(first_name=first_name))


class TagView(SerializationViewMixIn, APIView):
    def get(self, request, label_text):
        return SerializedResponse(
            Tag(pk=1, label_text=label_text), camel_case=True)


class RenderedTagView(SerializationViewMixIn, APIView):
    def get(self, request, label_text):
        return self.render_json(
            Tag(pk=1, label_text=label_text), camel_case=True)


class SerializationView(SerializationViewMixIn, APIView):
    pass
