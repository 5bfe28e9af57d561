import pytest


@pytest.fixture(name='dispatch_module', params=[
    'api', 'api.dispatch', 'api.options', 'api.registry', 'api.renderers',
    'api.responses', 'api.serializers', 'api.viewsets', 'utils.case_utils',
])
def dispatch_module_fixture(request):
    return request.param


def test_import_serializer_dispatch_namespace():
    assert __import__('serializer_dispatch')


def test_import_serializer_dispatch_packages(dispatch_module):
    assert __import__(f'serializer_dispatch.{dispatch_module}')
