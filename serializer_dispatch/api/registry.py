import logging

from .exceptions import SerializerNotFound, SerializerRegistrationConflict


logger = logging.getLogger(__name__)


class SerializerRegistry:
    """ Explicit resource type to serializer class binding

        Usage:
            registry.register(Author, AuthorSerializer)

            @registry.register(Article)
            class ArticleSerializer(ModelSerializer):
                ...

        >>> class Point: pass
        >>> class Point3D(Point): pass
        >>> class PointSerializer: pass
        >>> points = SerializerRegistry()
        >>> points.register(Point, PointSerializer)
        <class 'serializer_dispatch.api.registry.PointSerializer'>
        >>> points.get_serializer_class(Point3D)
        <class 'serializer_dispatch.api.registry.PointSerializer'>
        >>> points.get_serializer_class(dict)

        >>> points.register(Point, dict)
        Traceback (most recent call last):
            ...
        serializer_dispatch.api.exceptions.SerializerRegistrationConflict: ...
    """

    def __init__(self):
        self._serializers = {}

    def register(self, model, serializer_class=None):
        if serializer_class is None:
            def decorator(cls):
                return self.register(model, cls)
            return decorator

        registered = self._serializers.get(model)
        if registered is not None and registered is not serializer_class:
            raise SerializerRegistrationConflict((model, registered))
        logger.debug(
            'Registering %s serializer for %s',
            serializer_class.__name__, model.__name__)
        self._serializers[model] = serializer_class
        return serializer_class

    def unregister(self, model):
        self._serializers.pop(model, None)

    def get_serializer_class(self, resource_type):
        for klass in resource_type.__mro__:
            if klass in self._serializers:
                return self._serializers[klass]
        return None

    def get_by_name(self, name):
        for serializer_class in self._serializers.values():
            if serializer_class.__name__ == name:
                return serializer_class
        raise SerializerNotFound(name)

    def __contains__(self, model):
        return model in self._serializers


registry = SerializerRegistry()
register = registry.register
