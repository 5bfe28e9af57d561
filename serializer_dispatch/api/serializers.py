import logging

from django.db.models import QuerySet
from django.utils.module_loading import import_string
from rest_framework.serializers import ListSerializer

from serializer_dispatch.utils.case_utils import as_json, supports_as_json
from .registry import registry


logger = logging.getLogger(__name__)

COLLECTION_TYPES = (list, tuple, QuerySet)


class NoSerializer:
    """ Marks the absence of a dedicated serializer for a resource """

    def __repr__(self):
        return 'NO_SERIALIZER'

    def __bool__(self):
        return False


NO_SERIALIZER = NoSerializer()


def resolve_serializer(serializer):
    """ Serializer class by class, import path or registered class name

        >>> resolve_serializer('rest_framework.serializers.Serializer')
        <class 'rest_framework.serializers.Serializer'>
        >>> resolve_serializer(None)

        >>> resolve_serializer('UnknownSerializer')
        Traceback (most recent call last):
            ...
        serializer_dispatch.api.exceptions.SerializerNotFound: Unknown...
    """
    if not isinstance(serializer, str):
        return serializer
    if '.' in serializer:
        return import_string(serializer)
    return registry.get_by_name(serializer)


def get_serializer_class(resource, serializer=None, each_serializer=None):
    if isinstance(resource, COLLECTION_TYPES):
        explicit = each_serializer or serializer
        if explicit:
            return resolve_serializer(explicit)
        if isinstance(resource, QuerySet):
            return registry.get_serializer_class(resource.model)
        if resource:
            return registry.get_serializer_class(type(resource[0]))
        return None

    if serializer:
        return resolve_serializer(serializer)
    serializer_class = getattr(resource, 'serializer_class', None)
    if serializer_class is not None and not isinstance(resource, type):
        return resolve_serializer(serializer_class)
    return registry.get_serializer_class(type(resource))


def get_serializer_context(view, options):
    context = {
        'request': getattr(view, 'request', None),
        'format': getattr(view, 'format_kwarg', None),
        'view': view,
    }
    context.update(options)
    return context


def build_json(view, resource, options):
    """ JSON ready representation of `resource` built by its' dedicated
        serializer or `NO_SERIALIZER`

        Recognized options:
            serializer: serializer class, import path or registered name,
            each_serializer: element serializer for collections,
            root: key to wrap the data with, `False` disables wrapping.

        Every other option, `scope` and `scope_name` included, is passed to
        the serializer through its' context.
    """

    options = dict(options)
    serializer = options.pop('serializer', None)
    each_serializer = options.pop('each_serializer', None)
    has_root = 'root' in options
    root = options.pop('root', None)

    serializer_class = get_serializer_class(
        resource, serializer=serializer, each_serializer=each_serializer)
    if serializer_class is None:
        return NO_SERIALIZER

    context = get_serializer_context(view, options)
    many = (
        isinstance(resource, COLLECTION_TYPES)
        and not issubclass(serializer_class, ListSerializer))
    logger.debug(
        'Serializing %s with %s (many=%s)',
        type(resource).__name__, serializer_class.__name__, many)
    if many:
        data = serializer_class(resource, many=True, context=context).data
    else:
        data = serializer_class(resource, context=context).data

    if not has_root:
        root = getattr(serializer_class, 'root_key', None)
    if root:
        return {root: data}
    return data


class ScopedSerializerMixIn:
    """ Serializer access to the scope provided by the rendering view """

    @property
    def scope(self):
        return self.context.get('scope')

    @property
    def scope_name(self):
        return self.context.get('scope_name')


class BatchSerializer:
    """ Homogeneous collection serialized element by element into a single
        JSON array

        Rendered as is, regardless of camel casing or serializers bound to
        the collection itself:

            return SerializedResponse(BatchSerializer(authors))

        >>> batch = BatchSerializer([{'a': 1}, 'b'])
        >>> len(batch)
        2
        >>> batch.to_json()
        [{'a': 1}, 'b']
    """

    def __init__(self, objects, serializer_class=None):
        self.objects = list(objects)
        self.serializer_class = serializer_class

    def __iter__(self):
        return iter(self.objects)

    def __len__(self):
        return len(self.objects)

    def get_serializer_class(self, obj):
        if self.serializer_class is not None:
            return resolve_serializer(self.serializer_class)
        return registry.get_serializer_class(type(obj))

    def to_json(self, **options):
        result = []
        for obj in self.objects:
            serializer_class = self.get_serializer_class(obj)
            if serializer_class is not None:
                result.append(serializer_class(obj, context=options).data)
            elif supports_as_json(obj):
                result.append(as_json(obj))
            else:
                result.append(obj)
        return result
