import logging
import resource
import sys
import time
from datetime import datetime, timezone
from typing import Dict, Optional

from humadero.core.errors import PersistenceError
from humadero.db.repositories import MenuRepository
from humadero.schemas.health import HealthReport

logger = logging.getLogger(__name__)


def memory_usage() -> Dict[str, float]:
    usage = resource.getrusage(resource.RUSAGE_SELF)
    # ru_maxrss is bytes on macOS, kilobytes elsewhere
    divisor = 1024 * 1024 if sys.platform == "darwin" else 1024
    return {"max_rss_mb": round(usage.ru_maxrss / divisor, 2)}


class HealthReporter:
    def __init__(self, repository: Optional[MenuRepository] = None, started_at: Optional[float] = None) -> None:
        self.repository = repository
        self.started_at = time.monotonic() if started_at is None else started_at

    def database_state(self) -> str:
        if self.repository is None:
            return "not_configured"
        try:
            self.repository.ping()
        except PersistenceError as e:
            logger.warning(f"Health probe failed: {e.detail or e.message}")
            return "disconnected"
        return "connected"

    def report(self) -> HealthReport:
        database = self.database_state()
        return HealthReport(
            status="unhealthy" if database == "disconnected" else "ok",
            timestamp=datetime.now(timezone.utc).isoformat(),
            uptime=round(time.monotonic() - self.started_at, 3),
            memory=memory_usage(),
            database=database,
        )
