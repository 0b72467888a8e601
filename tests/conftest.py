"""Pytest fixtures for the hypermedia renderer tests."""

import pytest

from models.resource import Cardinality, add_relationship, new_resource
from services.renderers.registry import RendererRegistry
from utils.hateoas import LinkResolver, LinkTemplates


@pytest.fixture
def templates():
    """Link templates for a small order/item/customer domain."""
    return LinkTemplates(
        resource_paths={
            "order": "/orders/{id}",
            "item": "/items/{id}",
            "customer": "/customers/{id}",
        },
        related_paths={
            ("order", "items"): "/orders/{id}/items",
        },
        collection_paths={
            "order": "/orders",
        },
    )


@pytest.fixture
def resolver(templates):
    return LinkResolver(templates)


@pytest.fixture
def registry(resolver):
    return RendererRegistry(resolver)


@pytest.fixture
def items():
    return [
        new_resource("item", "10", {"sku": "A-1", "qty": 2}),
        new_resource("item", "11", {"sku": "B-7", "qty": 1}),
    ]


@pytest.fixture
def order():
    """The order from the HAL scenario: one to-many relationship, nothing resolved."""
    resource = new_resource("order", "1", {"total": 42})
    return add_relationship(resource, "items", Cardinality.MANY, "item", ["10", "11"])


@pytest.fixture
def resolved_order(items):
    """Order with resolved items and a resolved customer."""
    resource = new_resource("order", "1", {"total": 42})
    resource = add_relationship(resource, "items", "many", "item", ["10", "11"], resolved_targets=items)
    customer = new_resource("customer", "7", {"name": "Ada"})
    return add_relationship(resource, "customer", "one", "customer", ["7"], resolved_targets=[customer])
