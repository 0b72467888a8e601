"""Tests for the link resolver."""

import pytest

from models.errors import (
    MissingCollectionLinkError,
    MissingRelatedLinkError,
    MissingSelfLinkError,
    UnknownRelationshipError,
)
from models.resource import add_relationship, new_resource
from utils.hateoas import LinkResolver, LinkTemplates


class TestResolveSelf:
    """Tests for self links."""

    def test_self_link(self, resolver, order):
        assert resolver.resolve_self(order) == "/orders/1"

    def test_base_url_prefix(self):
        """The base URL is prepended once, without a doubled slash."""
        resolver = LinkResolver(LinkTemplates(
            base_url="https://api.example.com/",
            resource_paths={"order": "/orders/{id}"},
        ))

        assert resolver.resolve_self(new_resource("order", "1")) == "https://api.example.com/orders/1"

    def test_id_is_percent_encoded(self, resolver):
        resource = new_resource("order", "a/b c")

        assert resolver.resolve_self(resource) == "/orders/a%2Fb%20c"

    def test_missing_id(self, resolver):
        with pytest.raises(MissingSelfLinkError):
            resolver.resolve_self(new_resource("order", None))

    def test_unconfigured_type(self, resolver):
        with pytest.raises(MissingSelfLinkError) as exc_info:
            resolver.resolve_self(new_resource("invoice", "3"))

        assert exc_info.value.details["type"] == "invoice"

    def test_type_token(self):
        resolver = LinkResolver({"resource_paths": {"order": "/{type}s/{id}"}})

        assert resolver.resolve_self(new_resource("order", "5")) == "/orders/5"


class TestResolveRelated:
    """Tests for related links."""

    def test_configured_pattern(self, resolver, order):
        assert resolver.resolve_related(order, "items") == "/orders/1/items"

    def test_jsonapi_style_pattern(self):
        """The path shape comes from configuration, not from the format."""
        resolver = LinkResolver(LinkTemplates(
            resource_paths={"order": "/orders/{id}"},
            related_paths={"order.items": "/orders/{id}/relationships/items"},
        ))
        order = add_relationship(new_resource("order", "1"), "items", "many", "item", [])

        assert resolver.resolve_related(order, "items") == "/orders/1/relationships/items"

    def test_fallback_pattern(self, resolver):
        """Without a specific pattern, the fallback appends the name to the self path."""
        order = add_relationship(new_resource("order", "1"), "customer", "one", "customer", ["7"])

        assert resolver.resolve_related(order, "customer") == "/orders/1/customer"

    def test_fallback_disabled(self):
        resolver = LinkResolver(LinkTemplates(
            resource_paths={"order": "/orders/{id}"},
            related_fallback=None,
        ))
        order = add_relationship(new_resource("order", "1"), "customer", "one", "customer", ["7"])

        with pytest.raises(MissingRelatedLinkError):
            resolver.resolve_related(order, "customer")

    def test_unknown_relationship(self, resolver, order):
        with pytest.raises(UnknownRelationshipError):
            resolver.resolve_related(order, "payments")

    def test_dotted_key_must_have_two_parts(self):
        with pytest.raises(ValueError):
            LinkTemplates(related_paths={"orderitems": "/x"})


class TestResolveCollection:
    """Tests for collection links."""

    def test_collection_link(self, resolver):
        assert resolver.resolve_collection("order") == "/orders"

    def test_unconfigured_collection(self, resolver):
        with pytest.raises(MissingCollectionLinkError):
            resolver.resolve_collection("item")
