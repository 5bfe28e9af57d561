from types import MappingProxyType
from typing import Optional

from serializer_dispatch.api_settings import api_settings


class SerializationConfig:
    """ Read only serialization setup of a view class

        Subclasses derive their own config from the parent one, the parent
        config stays untouched:

            class ApplicationView(SerializationViewMixIn, APIView):
                serialization_config = SerializationConfig.from_settings(
                    ).derive(default_options={'camel_case': True})

            class AdminView(ApplicationView):
                serialization_config = ApplicationView.serialization_config \\
                    .derive(scope_name='current_admin')

        >>> base = SerializationConfig({'root': 'x'}, 'current_user')
        >>> child = base.derive(default_options={'camel_case': True})
        >>> dict(child.default_options)
        {'root': 'x', 'camel_case': True}
        >>> dict(base.default_options)
        {'root': 'x'}
        >>> base.derive(scope_name=None).scope_name
    """

    def __init__(self, default_options=None, scope_name: Optional[str] = None):
        self._default_options = MappingProxyType(dict(default_options or {}))
        self._scope_name = scope_name

    def __repr__(self):
        return (
            f"{type(self).__name__}("
            f"default_options={dict(self._default_options)!r}, "
            f"scope_name={self._scope_name!r})")

    @property
    def default_options(self):
        return self._default_options

    @property
    def scope_name(self):
        return self._scope_name

    @classmethod
    def from_settings(cls):
        return cls(
            api_settings.DEFAULT_SERIALIZER_OPTIONS,
            api_settings.SERIALIZATION_SCOPE)

    def derive(self, **changes):
        default_options = merge_options(
            changes.get('default_options'), self.default_options)
        scope_name = changes.get('scope_name', self.scope_name)
        return type(self)(default_options, scope_name)


def merge_options(call_options, default_options) -> dict:
    """ Shallow merge, call site options win

        >>> merge_options({'camel_case': True}, {'root': 'x', 'camel_case': 0})
        {'root': 'x', 'camel_case': True}
        >>> merge_options(None, {'root': 'x'})
        {'root': 'x'}
    """
    return {**(default_options or {}), **(call_options or {})}


def resolve_scope(context, provider_name):
    """ Result of the `provider_name` accessor of `context` or `None`

        >>> class View:
        ...     def _current_user(self):
        ...         return 'alice'
        >>> resolve_scope(View(), '_current_user')
        'alice'
        >>> resolve_scope(View(), 'current_user')
        >>> resolve_scope(View(), None)
    """
    if not provider_name:
        return None
    provider = getattr(context, provider_name, None)
    if not callable(provider):
        return None
    return provider()


def get_serialization_config(view) -> SerializationConfig:
    config = getattr(view, 'serialization_config', None)
    if config is None:
        return SerializationConfig.from_settings()
    return config


def get_serialization_scope(view):
    if hasattr(view, 'get_serialization_scope'):
        return view.get_serialization_scope()
    return resolve_scope(view, get_serialization_config(view).scope_name)


def get_serializer_options(view, options=None) -> dict:
    config = get_serialization_config(view)
    serializer_options = merge_options(options, config.default_options)
    if 'scope' not in serializer_options:
        serializer_options['scope'] = get_serialization_scope(view)
    if 'scope_name' not in serializer_options:
        serializer_options['scope_name'] = config.scope_name
    return serializer_options
