import logging
from typing import Any, Dict, Optional

import requests

from src.application.ports import ReportStore
from src.domain.errors import AuthSessionError, PersistenceError
from src.infrastructure.config import Settings


logger = logging.getLogger(__name__)

REPORTS_TABLE = "health_reports_new"
LEGACY_REPORTS_TABLE = "health_reports"
SUBMIT_RPC = "submit_diagnosis_report"

# kind -> (file extension, content type)
MEDIA_FORMATS = {
    "tongue": ("jpg", "image/jpeg"),
    "face": ("jpg", "image/jpeg"),
    "voice": ("m4a", "audio/mpeg"),
}

# PostgREST codes for a table that does not exist
_MISSING_TABLE_CODES = {"42P01", "PGRST205"}


def _error_details(resp: requests.Response) -> Dict[str, Any]:
    try:
        data = resp.json()
    except ValueError:
        return {"message": resp.text}
    return data if isinstance(data, dict) else {"message": str(data)}


class SupabaseReportStore(ReportStore):
    """Report persistence over the Supabase storage and PostgREST HTTP APIs."""

    def __init__(
        self,
        settings: Settings | None = None,
        access_token: Optional[str] = None,
        timeout: float = 30,
    ):
        self.settings = settings or Settings()
        self.base_url = (self.settings.report_store_url or "").rstrip("/")
        self.api_key = self.settings.report_store_key or ""
        self.bucket = self.settings.report_media_bucket
        self.access_token = access_token
        self.timeout = timeout

    def _headers(self, **extra: str) -> Dict[str, str]:
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.access_token or self.api_key}",
        }
        headers.update(extra)
        return headers

    def _check(self, resp: requests.Response, action: str) -> None:
        if resp.status_code in (401, 403):
            details = _error_details(resp)
            raise AuthSessionError(f"{action} rejected: {details.get('message', resp.status_code)}")
        if resp.status_code >= 400:
            details = _error_details(resp)
            raise PersistenceError(
                f"{action} failed ({resp.status_code}): {details.get('message', '')}",
                code=details.get("code"),
            )

    def _post(self, url: str, action: str, **kwargs) -> requests.Response:
        try:
            resp = requests.post(url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.exception("%s request failed: %s", action, e)
            raise PersistenceError(f"{action} request failed: {e}") from e
        self._check(resp, action)
        return resp

    def upload_media(self, user_id: str, report_id: str, kind: str, uri: str) -> str:
        ext, content_type = MEDIA_FORMATS.get(kind, ("bin", "application/octet-stream"))
        path = f"{user_id}/{report_id}/{kind}.{ext}"
        try:
            with open(uri, "rb") as f:
                body = f.read()
        except OSError as e:
            raise PersistenceError(f"Cannot read {kind} media at {uri}") from e

        self._post(
            f"{self.base_url}/storage/v1/object/{self.bucket}/{path}",
            f"Upload {kind}",
            data=body,
            headers=self._headers(**{"Content-Type": content_type, "x-upsert": "true"}),
        )
        logger.info("Uploaded %s media to %s", kind, path)
        return path

    def _insert(self, table: str, payload: Dict[str, Any]) -> None:
        self._post(
            f"{self.base_url}/rest/v1/{table}",
            f"Insert into {table}",
            json=payload,
            headers=self._headers(Prefer="return=minimal"),
        )

    def insert_report(self, payload: Dict[str, Any]) -> None:
        """Inserts into the current table, the legacy table if it is missing, then the RPC."""
        try:
            try:
                self._insert(REPORTS_TABLE, payload)
            except AuthSessionError:
                raise
            except PersistenceError as e:
                if e.code not in _MISSING_TABLE_CODES:
                    raise
                logger.warning("%s not found, trying %s", REPORTS_TABLE, LEGACY_REPORTS_TABLE)
                self._insert(LEGACY_REPORTS_TABLE, payload)
        except AuthSessionError:
            raise
        except PersistenceError as insert_error:
            logger.warning("Direct insert failed, trying RPC: %s", insert_error)
            try:
                self._post(
                    f"{self.base_url}/rest/v1/rpc/{SUBMIT_RPC}",
                    "Submit report RPC",
                    json={"payload": payload},
                    headers=self._headers(),
                )
            except AuthSessionError:
                raise
            except PersistenceError as rpc_error:
                logger.error("RPC submission failed: %s", rpc_error)
                raise insert_error from rpc_error
