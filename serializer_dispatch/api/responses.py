from rest_framework.response import Response


class SerializedResponse(Response):
    """ Response carrying per call serializer options to the renderer

        >>> SerializedResponse({'a': 1}, camel_case=True).serializer_options
        {'camel_case': True}
    """

    def __init__(self, data=None, status=None,  # noqa: too-many-arguments
                 template_name=None, headers=None,
                 exception=False, content_type=None, **serializer_options):
        super().__init__(
            data=data, status=status, template_name=template_name,
            headers=headers, exception=exception, content_type=content_type)
        self.serializer_options = serializer_options
