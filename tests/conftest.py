"""
Shared fixtures: a mocked HTTP client and notifier wired into a layout.
"""
from unittest.mock import Mock

import pytest

from category_layout import CategoryLayout


BUSINESSES = [
    {"id": "b1a2c3d4e5", "business": "Acme Corp", "createdAt": "2024-03-01T10:00:00.000Z"},
    {"id": "b2b2c3d4e5", "business": "Blue Ocean", "createdAt": "2024-03-02T10:00:00.000Z"},
    {"id": "b3a2c3d4e5", "business": "acme labs", "createdAt": "2024-03-03T10:00:00.000Z"},
]
SERVICES = [
    {"id": "s1", "service": "Plumbing", "createdAt": "2024-01-01T00:00:00Z"},
]
PRODUCTS = [
    {"id": "p1", "products": "Widgets", "createdAt": "2024-01-01T00:00:00Z"},
    {"id": "p2", "products": "Gadgets", "createdAt": "2024-01-02T00:00:00Z"},
]

LIST_RESPONSES = {
    "/category/get-business": {"business": BUSINESSES},
    "/category/get-service": {"services": SERVICES},
    "/category/get-product": {"products": PRODUCTS},
}


@pytest.fixture
def api():
    """HTTP client double answering the three list endpoints"""
    client = Mock()
    client.get.side_effect = lambda path: {
        key: [dict(item) for item in items]
        for key, items in LIST_RESPONSES[path].items()
    }
    client.post.return_value = {"message": "Created"}
    client.put.return_value = {"message": "Updated"}
    client.delete.return_value = {"message": "Deleted"}
    return client


@pytest.fixture
def notifier():
    return Mock()


@pytest.fixture
def layout(api, notifier):
    return CategoryLayout(api, notifier)


@pytest.fixture
def loaded_layout(layout, api):
    """Layout with the business list already fetched and call history cleared"""
    layout.fetch_list()
    api.reset_mock()
    return layout
