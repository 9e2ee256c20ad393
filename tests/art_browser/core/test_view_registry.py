import pytest

from art_browser.core.dataset import Dataset
from art_browser.core.view_registry import ViewRegistry
from art_browser.views import DecadeView, MapView, NeighbourhoodView, TypeView


def _make_registry() -> ViewRegistry:
    registry = ViewRegistry()
    registry.register(NeighbourhoodView)
    registry.register(TypeView)
    registry.register(DecadeView)
    registry.register(MapView)
    return registry


def test_registry_keeps_registration_order():
    registry = _make_registry()

    assert [cls.id for cls in registry.all_classes()] == ["neighbourhood", "type", "year", "map"]


def test_registry_create_returns_fresh_instances():
    registry = _make_registry()
    ds = Dataset(name="empty", records=[])

    first = registry.create("type", ds)
    second = registry.create("type", ds)

    assert isinstance(first, TypeView)
    assert first is not second
    assert first.dataset is ds


def test_registry_rejects_duplicates():
    registry = _make_registry()

    with pytest.raises(ValueError, match="already registered"):
        registry.register(TypeView)


def test_registry_rejects_non_views():
    registry = ViewRegistry()

    with pytest.raises(TypeError):
        registry.register(dict)


def test_registry_unknown_view():
    registry = _make_registry()

    with pytest.raises(KeyError, match="pie"):
        registry.create("pie", Dataset(name="empty", records=[]))


def test_registry_contains():
    registry = _make_registry()

    assert "map" in registry
    assert "pie" not in registry
