from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from rest_framework.settings import APISettings

USER_SETTINGS = getattr(settings, "SERIALIZER_DISPATCH", {})

DEFAULTS = {
    "RENDERER_CLASS": "rest_framework.renderers.JSONRenderer",
    "DEFAULT_SERIALIZER_OPTIONS": {},
    "SERIALIZATION_SCOPE": "current_user",
}

# List of settings that may be in string import notation.
IMPORT_STRINGS = ("RENDERER_CLASS", )

VALID_SETTINGS = {
    "DEFAULT_SERIALIZER_OPTIONS": (dict, ),
    "SERIALIZATION_SCOPE": (str, type(None)),
}


def validate_settings(input_settings, valid_settings):
    for setting_name, valid_types in valid_settings.items():
        if setting_name not in input_settings:
            continue
        if not isinstance(input_settings[setting_name], valid_types):
            raise ImproperlyConfigured(setting_name)


validate_settings(USER_SETTINGS, VALID_SETTINGS)

api_settings = APISettings(USER_SETTINGS, DEFAULTS, IMPORT_STRINGS)
