import pytest
from django.core.exceptions import ImproperlyConfigured
from rest_framework.renderers import JSONRenderer

from serializer_dispatch.api_settings import (
    VALID_SETTINGS, api_settings, validate_settings)


def test_defaults():
    assert api_settings.RENDERER_CLASS is JSONRenderer
    assert api_settings.DEFAULT_SERIALIZER_OPTIONS == {}
    assert api_settings.SERIALIZATION_SCOPE == 'current_user'


@pytest.mark.parametrize('user_settings', [
    {},
    {'DEFAULT_SERIALIZER_OPTIONS': {'camel_case': True}},
    {'SERIALIZATION_SCOPE': None},
    {'SERIALIZATION_SCOPE': 'current_admin'},
])
def test_validate_settings(user_settings):
    validate_settings(user_settings, VALID_SETTINGS)


@pytest.mark.parametrize('setting_name, value', [
    ('DEFAULT_SERIALIZER_OPTIONS', [('camel_case', True)]),
    ('DEFAULT_SERIALIZER_OPTIONS', None),
    ('SERIALIZATION_SCOPE', 1),
])
def test_validate_settings_fail(setting_name, value):
    with pytest.raises(ImproperlyConfigured, match=setting_name):
        validate_settings({setting_name: value}, VALID_SETTINGS)
