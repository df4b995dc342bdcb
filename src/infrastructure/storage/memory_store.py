import logging
import threading
from typing import Any, Dict, List

from src.application.ports import ReportStore
from src.domain.errors import PersistenceError


logger = logging.getLogger(__name__)


class InMemoryReportStore(ReportStore):
    """Keeps reports in process memory; used when no report store URL is configured."""

    def __init__(self):
        self.media: Dict[str, str] = {}
        self.reports: List[Dict[str, Any]] = []
        self._lock = threading.Lock()

    def upload_media(self, user_id: str, report_id: str, kind: str, uri: str) -> str:
        if not uri:
            raise PersistenceError(f"No {kind} media to upload")
        path = f"{user_id}/{report_id}/{kind}"
        with self._lock:
            self.media[path] = uri
        return path

    def insert_report(self, payload: Dict[str, Any]) -> None:
        with self._lock:
            if any(r["id"] == payload["id"] for r in self.reports):
                raise PersistenceError(f"Report {payload['id']} already exists")
            self.reports.append(dict(payload))
        logger.info("Stored report %s in memory", payload["id"])

    def reports_for(self, user_id: str) -> List[Dict[str, Any]]:
        with self._lock:
            return [r for r in self.reports if r.get("user_id") == user_id]
