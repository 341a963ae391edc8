"""Tests for the indicator registry."""

from pine_app.data.models import IndicatorDescriptor, LinePoint
from pine_app.runtime.registry import IndicatorRegistry


def make_indicator(name: str, *values: float) -> IndicatorDescriptor:
    return IndicatorDescriptor(
        name=name,
        data=tuple(LinePoint(i, v) for i, v in enumerate(values)),
        color="#2962FF",
    )


class TestIndicatorRegistry:
    """Test registry operations."""

    def test_starts_empty(self):
        assert IndicatorRegistry().list() == []

    def test_add_and_list(self):
        registry = IndicatorRegistry()
        registry.add(make_indicator("A", 1.0))
        registry.add(make_indicator("B", 2.0))

        assert sorted(i.name for i in registry.list()) == ["A", "B"]
        assert len(registry) == 2
        assert "A" in registry

    def test_add_then_remove_is_empty(self):
        registry = IndicatorRegistry()
        registry.add(make_indicator("A", 1.0))
        registry.remove("A")

        assert registry.list() == []

    def test_remove_unknown_name(self):
        registry = IndicatorRegistry()
        registry.remove("missing")
        assert len(registry) == 0

    def test_clear(self):
        registry = IndicatorRegistry()
        registry.add(make_indicator("A", 1.0))
        registry.add(make_indicator("B", 2.0))
        registry.clear()

        assert registry.list() == []

    def test_last_write_wins(self):
        registry = IndicatorRegistry()
        registry.add(make_indicator("A", 1.0))
        registry.add(make_indicator("A", 9.0, 8.0))

        assert len(registry) == 1
        assert registry.get("A").values == [9.0, 8.0]
