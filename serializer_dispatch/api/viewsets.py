from django.http import HttpResponse

from serializer_dispatch.api_settings import api_settings
from .dispatch import render_json
from .options import (
    SerializationConfig, get_serializer_options, resolve_scope)
from .renderers import SerializationJSONRenderer


class SerializationViewMixIn:
    """ Renders returned resources through their dedicated serializers

        Handlers either return `SerializedResponse(resource, **options)`
        which is serialized by `SerializationJSONRenderer`, or call
        `self.render_json(resource, **options)` directly. Both produce the
        same body.

        Scope passed to serializers is the result of the view method named
        by `serialization_config.scope_name`, `current_user` by default.
        Override `get_serialization_scope()` for anything more complex.
    """

    renderer_classes = [
        SerializationJSONRenderer]

    serialization_config = SerializationConfig.from_settings()

    def current_user(self):
        user = getattr(self.request, 'user', None)
        if user is None or not user.is_authenticated:
            return None
        return user

    def get_serialization_scope(self):
        return resolve_scope(self, self.serialization_config.scope_name)

    def get_serializer_options(self, options=None):
        return get_serializer_options(self, options)

    def render_json(self, resource, status=None, headers=None, **options):
        renderer = api_settings.RENDERER_CLASS()
        renderer_context = self.get_renderer_context()
        accepted_media_type = getattr(
            self.request, 'accepted_media_type', None) or renderer.media_type

        def render_body(data, _options):
            content = renderer.render(
                data, accepted_media_type, renderer_context)
            response = HttpResponse(
                content, status=status, headers=headers,
                content_type=renderer.media_type)
            if not content:
                del response['Content-Type']
            return response

        return render_json(self, resource, options, render_body)


def get_serialization_viewset(viewset):
    return type(
        f'Serialization{viewset.__name__}',
        (SerializationViewMixIn, viewset), {})
