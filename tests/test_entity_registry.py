"""
Tests for the category kind registry
"""
import pytest

from entity_registry import (
    CATEGORY_CONFIGS, CATEGORY_MAP, CategoryKind, DEFAULT_KIND, resolve_category,
)
from errors import ConfigurationError


def test_every_kind_is_registered():
    assert set(CATEGORY_MAP) == set(CategoryKind)
    assert len(CATEGORY_CONFIGS) == 3


def test_default_kind_is_business():
    assert DEFAULT_KIND is CategoryKind.BUSINESS


@pytest.mark.parametrize("kind, list_ep, create_ep, update_ep, delete_ep, key, field", [
    ("business", "/category/get-business", "/category/create-business",
     "/category/update-business/42", "/category/delete-business/42", "business", "business"),
    ("service", "/category/get-service", "/category/create-service",
     "/category/update-service/42", "/category/delete-service/42", "services", "service"),
    ("product", "/category/get-product", "/category/create-product",
     "/category/update-product/42", "/category/delete-product/42", "products", "products"),
])
def test_resolve_category_endpoints(kind, list_ep, create_ep, update_ep, delete_ep, key, field):
    cfg = resolve_category(kind)
    assert cfg.list_endpoint == list_ep
    assert cfg.create_endpoint == create_ep
    assert cfg.update_endpoint("42") == update_ep
    assert cfg.delete_endpoint("42") == delete_ep
    assert cfg.list_response_key == key
    assert cfg.name_field == field


def test_resolve_accepts_enum_members():
    assert resolve_category(CategoryKind.SERVICE) is resolve_category("service")


@pytest.mark.parametrize("bad", ["products", "Business", "", None, 3])
def test_unknown_kind_raises_configuration_error(bad):
    with pytest.raises(ConfigurationError):
        resolve_category(bad)
