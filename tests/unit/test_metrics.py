"""Unit tests for Prometheus metrics module."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from prometheus_client import REGISTRY, CollectorRegistry

from cisadex.config.settings import Settings
from cisadex.observability.metrics import (
    ENTITY_COUNT,
    GRAPH_EDGE_COUNT,
    get_metrics,
    observe_build_duration,
    record_relationship_query,
    record_search,
    set_entity_count,
    set_graph_edge_count,
)


def _sample(name: str, labels: dict[str, str] | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


@pytest.fixture
def metrics_enabled():
    """Enable metrics regardless of the environment."""
    settings = Settings(_env_file=None, metrics_enabled=True)
    with patch("cisadex.observability.metrics.get_settings", return_value=settings):
        yield


@pytest.fixture
def metrics_disabled():
    """Disable metrics regardless of the environment."""
    settings = Settings(_env_file=None, metrics_enabled=False)
    with patch("cisadex.observability.metrics.get_settings", return_value=settings):
        yield


class TestGetMetrics:
    """Tests for get_metrics."""

    def test_exposition_format(self) -> None:
        """Test metrics are exported in text format."""
        output = get_metrics()
        assert b"cisadex_search_duration_seconds" in output
        assert b"cisadex_relationship_queries" in output

    def test_custom_registry(self) -> None:
        """Test a custom registry is rendered instead of the global one."""
        assert b"cisadex_" not in get_metrics(CollectorRegistry())


class TestRecording:
    """Tests for metric recording helpers."""

    def test_record_search(self, metrics_enabled) -> None:
        """Test a search adds one observation to each histogram."""
        before = _sample("cisadex_search_duration_seconds_count")
        record_search(0.002, 12)
        assert _sample("cisadex_search_duration_seconds_count") == before + 1

    def test_record_relationship_query(self, metrics_enabled) -> None:
        """Test the per-operation counter."""
        labels = {"operation": "coordination_network"}
        before = _sample("cisadex_relationship_queries_total", labels)
        record_relationship_query("coordination_network")
        assert _sample("cisadex_relationship_queries_total", labels) == before + 1

    def test_observe_build_duration(self, metrics_enabled) -> None:
        """Test build phases are timed per component."""
        labels = {"component": "unit_test"}
        before = _sample("cisadex_build_duration_seconds_count", labels)
        with observe_build_duration("unit_test"):
            pass
        assert _sample("cisadex_build_duration_seconds_count", labels) == before + 1

    def test_observe_build_duration_with_error(self, metrics_enabled) -> None:
        """Test failed builds are still timed and the error propagates."""
        labels = {"component": "failing_build"}
        before = _sample("cisadex_build_duration_seconds_count", labels)
        with pytest.raises(RuntimeError):
            with observe_build_duration("failing_build"):
                raise RuntimeError("boom")
        assert _sample("cisadex_build_duration_seconds_count", labels) == before + 1

    def test_gauges(self, metrics_enabled) -> None:
        """Test entity and edge gauges."""
        set_entity_count(42)
        set_graph_edge_count(17)
        assert ENTITY_COUNT._value.get() == 42
        assert GRAPH_EDGE_COUNT._value.get() == 17

    def test_disabled(self, metrics_disabled) -> None:
        """Test nothing is recorded when metrics are off."""
        before = _sample("cisadex_search_duration_seconds_count")
        record_search(0.5, 1)
        record_relationship_query("disabled_check")
        assert _sample("cisadex_search_duration_seconds_count") == before
        assert _sample("cisadex_relationship_queries_total", {"operation": "disabled_check"}) == 0
