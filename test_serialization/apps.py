from django.apps import AppConfig


class TestSerializationConfig(AppConfig):
    name = 'test_serialization'

    def ready(self):
        from . import serializers  # noqa: registers serializers
