"""
Unit tests for the DI container.
"""
import pytest

from shop_api.di.base_container import BaseContainer


class Service:
    pass


def test_singleton_returns_same_instance():
    container = BaseContainer()
    instance = Service()
    container.register_singleton(Service, instance)
    assert container.get(Service) is instance


def test_factory_builds_fresh_instances():
    container = BaseContainer()
    container.register_factory(Service, Service)
    assert container.get(Service) is not container.get(Service)


def test_string_keys():
    container = BaseContainer()
    container.register_singleton("user_collection", "collection")
    assert container.get("user_collection") == "collection"


def test_missing_registration_raises():
    with pytest.raises(KeyError, match="Service"):
        BaseContainer().get(Service)
