"""Tests for settings-driven link templates."""

from config.settings import Settings, build_link_templates
from models.resource import add_relationship, new_resource
from utils.hateoas import LinkResolver


class TestBuildLinkTemplates:
    """Tests for turning settings into a resolver configuration."""

    def test_from_environment(self, monkeypatch):
        """Dict settings are read as JSON from the environment."""
        monkeypatch.setenv("BASE_URL", "https://api.example.com")
        monkeypatch.setenv("RESOURCE_PATHS", '{"order": "/orders/{id}"}')
        monkeypatch.setenv("RELATED_PATHS", '{"order.items": "/orders/{id}/relationships/items"}')

        templates = build_link_templates(Settings(_env_file=None))
        resolver = LinkResolver(templates)
        order = add_relationship(new_resource("order", "1"), "items", "many", "item", [])

        assert resolver.resolve_self(order) == "https://api.example.com/orders/1"
        assert resolver.resolve_related(order, "items") == "https://api.example.com/orders/1/relationships/items"

    def test_defaults(self):
        config = Settings(_env_file=None)

        assert config.DEFAULT_FORMAT == "hal"
        assert build_link_templates(config).related_fallback == "{self}/{relationship}"
