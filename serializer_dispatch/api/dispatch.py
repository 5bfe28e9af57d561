import logging

from serializer_dispatch.utils.case_utils import camelize, supports_as_json
from .options import get_serializer_options
from .serializers import NO_SERIALIZER, BatchSerializer, build_json


logger = logging.getLogger(__name__)


def prepare_json(view, resource, options=None):
    """ JSON ready value to send for `resource`

        Paths are checked in order, the first match wins:
            1. `BatchSerializer` renders itself,
            2. the dedicated serializer of the resource,
            3. camel cased generic conversion if `camel_case` is requested,
            4. the resource as is.
    """
    serializer_options = get_serializer_options(view, options)

    if isinstance(resource, BatchSerializer):
        logger.debug('Rendering %s', type(resource).__name__)
        return resource.to_json(**serializer_options)

    data = build_json(view, resource, serializer_options)
    if data is not NO_SERIALIZER:
        return data

    if serializer_options.get('camel_case') and supports_as_json(resource):
        logger.debug('Rendering camelized %s', type(resource).__name__)
        return camelize(resource)

    logger.debug('Rendering %s as is', type(resource).__name__)
    return resource


def render_json(view, resource, options, render_body):
    """ Passes the prepared value of `resource` to `render_body` once

        `render_body(data, options)` is the base JSON body renderer, it
        receives the call site `options` untouched.
    """
    return render_body(prepare_json(view, resource, options), options)
