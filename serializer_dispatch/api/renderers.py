from serializer_dispatch.api_settings import api_settings
from .dispatch import render_json


class SerializationJSONRenderer(api_settings.RENDERER_CLASS):
    """ JSON renderer routing response data through the serializer dispatch

        The view is taken from the renderer context, per call options from
        `SerializedResponse.serializer_options`.
    """

    format = 'json'

    def render(self, data, accepted_media_type=None, renderer_context=None):
        renderer_context = renderer_context or {}
        view = renderer_context.get('view')
        response = renderer_context.get('response')
        options = getattr(response, 'serializer_options', None)

        base_render = super().render

        def render_body(value, _options):
            return base_render(value, accepted_media_type, renderer_context)

        return render_json(view, data, options, render_body)
