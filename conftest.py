import pytest
from django.contrib.auth.models import User
from rest_framework.test import APIRequestFactory, force_authenticate

from test_serialization.views import SerializationView


@pytest.fixture(name='user')
def user_fixture():
    return User(username='alice')


@pytest.fixture(name='make_view')
def make_view_fixture():
    def _make_view(view_class=SerializationView, user=None, **attrs):
        request = APIRequestFactory().get('/')
        if user is not None:
            force_authenticate(request, user=user)
        view = view_class(**attrs)
        view.args = ()
        view.kwargs = {}
        view.format_kwarg = None
        view.headers = {}
        view.request = view.initialize_request(request)
        return view

    return _make_view
