import re
from collections import OrderedDict
from collections.abc import Mapping

from django.db.models import Model, QuerySet
from django.forms.models import model_to_dict
from django.utils.encoding import force_str
from django.utils.functional import Promise

from rest_framework.utils.serializer_helpers import ReturnDict


CAMELIZE_RE = re.compile(r"_+([a-zA-Z0-9]*)")

SEQUENCE_TYPES = (list, tuple, QuerySet)


def capitalize(match):
    return match.group(1).capitalize()


def underscore_to_camel(value: str) -> str:
    """ Lower camel case form of the underscored `value`

        >>> underscore_to_camel('first_name')
        'firstName'
        >>> underscore_to_camel('user_id')
        'userId'
        >>> underscore_to_camel('profile_data_v2')
        'profileDataV2'
        >>> underscore_to_camel('FullName')
        'fullName'
        >>> underscore_to_camel('created__gte')
        'createdGte'
        >>> underscore_to_camel('_id')
        'id'
        >>> underscore_to_camel('firstName')
        'firstName'
        >>> underscore_to_camel('')
        ''
    """
    value = re.sub(CAMELIZE_RE, capitalize, value)
    return f'{value[:1].lower()}{value[1:]}'


def supports_as_json(value) -> bool:
    if isinstance(value, (str, bytes)):
        return False
    if callable(getattr(value, 'as_json', None)):
        return True
    return isinstance(value, (Mapping, Model) + SEQUENCE_TYPES)


def as_json(value):
    """ Generic, serializer agnostic conversion to a JSON compatible structure

        >>> as_json({'a': 1})
        {'a': 1}
        >>> as_json(('a', 'b'))
        ['a', 'b']
    """
    as_json_method = getattr(value, 'as_json', None)
    if callable(as_json_method):
        return as_json_method()
    if isinstance(value, Model):
        return model_to_dict(value)
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, SEQUENCE_TYPES):
        return list(value)
    return value


def camelize_keys(data, **options):
    """ Deep rewrites mapping keys to lower camel case

        >>> dict(camelize_keys({'user_id': 1}))
        {'userId': 1}
        >>> camelize_keys([{'a_b': 1}])[0]['aB']
        1
        >>> dict(camelize_keys({'a_b': {'c_d': 1}}, ignore_fields=('a_b', )))
        {'aB': {'c_d': 1}}
    """
    ignore_fields = options.get("ignore_fields") or ()
    # Handle lazy translated strings.
    if isinstance(data, Promise):
        data = force_str(data)
    if isinstance(data, Mapping):
        if isinstance(data, ReturnDict):
            new_dict = ReturnDict(serializer=data.serializer)
        else:
            new_dict = OrderedDict()
        for key, value in data.items():
            if isinstance(key, Promise):
                key = force_str(key)
            if isinstance(key, str):
                new_key = underscore_to_camel(key)
            else:
                new_key = key
            if key not in ignore_fields and new_key not in ignore_fields:
                new_dict[new_key] = camelize_keys(value, **options)
            else:
                new_dict[new_key] = value
        return new_dict
    if isinstance(data, SEQUENCE_TYPES):
        return [camelize_keys(item, **options) for item in data]
    if supports_as_json(data):
        return camelize_keys(as_json(data), **options)
    return data


def camelize(value):
    """ Generic conversion of `value` with lower camel cased keys

        >>> camelize('first_name')
        'first_name'
        >>> camelize(10)
        10
        >>> [dict(item) for item in camelize([{'a_b': 1}, {'a_b': 2}])]
        [{'aB': 1}, {'aB': 2}]
    """
    if isinstance(value, SEQUENCE_TYPES):
        return [camelize(item) for item in value]
    if isinstance(value, str):
        return value
    if supports_as_json(value):
        return camelize_keys(as_json(value))
    return value
