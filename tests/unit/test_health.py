"""Unit tests for the health reporter."""

from unittest.mock import MagicMock

import pytest

from humadero.core.errors import PersistenceError
from humadero.db.repositories import MenuRepository
from humadero.services.health import HealthReporter, memory_usage


@pytest.mark.unit
class TestHealthReporter:
    """Test suite for HealthReporter.report."""

    def test_without_database(self) -> None:
        """No backend configured is still healthy."""
        report = HealthReporter().report()

        assert report.status == "ok"
        assert report.database == "not_configured"
        assert report.uptime >= 0
        assert report.timestamp

    def test_reachable_database(self) -> None:
        """A successful probe reports connected."""
        repo = MagicMock(spec=MenuRepository)

        report = HealthReporter(repo).report()

        repo.ping.assert_called_once()
        assert report.status == "ok"
        assert report.database == "connected"

    def test_probe_failure_is_reduced_to_disconnected(self) -> None:
        """Probe errors are mapped to a state, never raised."""
        repo = MagicMock(spec=MenuRepository)
        repo.ping.side_effect = PersistenceError("Base de datos no disponible", detail="timeout")

        report = HealthReporter(repo).report()

        assert report.status == "unhealthy"
        assert report.database == "disconnected"

    def test_uptime_counts_from_start(self) -> None:
        """Uptime is measured from the given monotonic start."""
        reporter = HealthReporter(started_at=0.0)

        assert reporter.report().uptime > 0

    def test_memory_usage_reports_rss(self) -> None:
        """Memory is reported in megabytes."""
        assert memory_usage()["max_rss_mb"] > 0
