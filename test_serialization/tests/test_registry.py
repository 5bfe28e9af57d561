import pytest

from serializer_dispatch.api.exceptions import (
    SerializerNotFound, SerializerRegistrationConflict)
from serializer_dispatch.api.registry import SerializerRegistry, registry
from test_serialization.models import (
    Article, Author, FeaturedArticle, Tag)
from test_serialization.serializers import (
    ArticleSerializer, AuthorNameSerializer, AuthorSerializer)


@pytest.fixture(name='local_registry')
def local_registry_fixture():
    return SerializerRegistry()


def test_registered_serializers():
    assert registry.get_serializer_class(Author) is AuthorSerializer
    assert registry.get_serializer_class(Article) is ArticleSerializer
    assert registry.get_serializer_class(Tag) is None


def test_subclass_inherits_binding():
    assert registry.get_serializer_class(FeaturedArticle) is ArticleSerializer


def test_register_decorator(local_registry):
    @local_registry.register(Tag)
    class TagSerializer:
        pass

    assert local_registry.get_serializer_class(Tag) is TagSerializer
    assert Tag in local_registry


def test_register_same_serializer_twice(local_registry):
    local_registry.register(Author, AuthorSerializer)
    local_registry.register(Author, AuthorSerializer)
    assert local_registry.get_serializer_class(Author) is AuthorSerializer


def test_register_conflict(local_registry):
    local_registry.register(Author, AuthorSerializer)
    with pytest.raises(SerializerRegistrationConflict):
        local_registry.register(Author, AuthorNameSerializer)


def test_unregister(local_registry):
    local_registry.register(Author, AuthorSerializer)
    local_registry.unregister(Author)
    local_registry.unregister(Author)
    assert local_registry.get_serializer_class(Author) is None
    assert Author not in local_registry


def test_subclass_binding_wins(local_registry):
    local_registry.register(Article, ArticleSerializer)
    local_registry.register(FeaturedArticle, AuthorNameSerializer)
    assert local_registry.get_serializer_class(
        FeaturedArticle) is AuthorNameSerializer
    assert local_registry.get_serializer_class(Article) is ArticleSerializer


def test_get_by_name(local_registry):
    local_registry.register(Author, AuthorSerializer)
    assert local_registry.get_by_name('AuthorSerializer') is AuthorSerializer
    with pytest.raises(SerializerNotFound):
        local_registry.get_by_name('ArticleSerializer')
