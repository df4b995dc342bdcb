"""Per-browser-session objects shared by the wizard screens."""
import base64
import logging
import mimetypes
import os
import uuid
from typing import Any, Callable, Dict, NamedTuple, Optional

import streamlit as st

from src.application.ports import CompletionProvider, ReportStore
from src.application.pulse import PulseMeasurement
from src.application.wizard import WizardController
from src.domain.errors import CaptureError
from src.domain.i18n import TranslationKey, translate
from src.domain.models import CapturedMedia, FormData
from src.infrastructure.auth.user_manager import UserManager
from src.infrastructure.config import Settings


logger = logging.getLogger(__name__)


class Services(NamedTuple):
    settings: Settings
    provider: CompletionProvider
    store: ReportStore
    users: UserManager


def wizard() -> WizardController:
    return st.session_state.wizard


def services() -> Services:
    return st.session_state.services


def t(key: TranslationKey, **params: str) -> str:
    return translate(key, wizard().language, **params)


def commit(form: FormData) -> None:
    wizard().commit(form)


def step_state(name: str, factory: Callable[[], Any]) -> Any:
    """State owned by the mounted step; dropped when the step is remounted."""
    store: Dict[str, Any] = st.session_state.setdefault("step_state", {})
    if name not in store:
        store[name] = factory()
    return store[name]


def sync_mount() -> None:
    """Clears step state after a forced remount or a step change."""
    key = (wizard().current_step, wizard().mount_key)
    if st.session_state.get("mounted_key") != key:
        st.session_state.mounted_key = key
        for value in st.session_state.get("step_state", {}).values():
            if isinstance(value, PulseMeasurement):
                value.cancel()
        st.session_state.step_state = {}


def user_id() -> Optional[str]:
    user = st.session_state.get("user_data")
    return user["id"] if user else None


def save_upload(upload, kind: str, default_mime: str = "image/jpeg") -> CapturedMedia:
    """Writes a Streamlit upload into MEDIA_DIR and returns it as captured media."""
    data = upload.getvalue()
    mime_type = getattr(upload, "type", None) or default_mime
    ext = os.path.splitext(getattr(upload, "name", "") or "")[1] or mimetypes.guess_extension(mime_type) or ""
    media_dir = services().settings.media_dir
    os.makedirs(media_dir, exist_ok=True)
    path = os.path.join(media_dir, f"{kind}_{uuid.uuid4().hex}{ext}")
    with open(path, "wb") as f:
        f.write(data)
    return CapturedMedia(uri=path, base64=base64.b64encode(data).decode("ascii"), mime_type=mime_type)


def producer_for(upload, kind: str, default_mime: str = "image/jpeg") -> Callable[[], CapturedMedia]:
    def produce() -> CapturedMedia:
        if upload is None:
            raise CaptureError(f"No {kind} media captured")
        try:
            return save_upload(upload, kind, default_mime)
        except OSError as e:
            logger.exception("Failed to store %s media", kind)
            raise CaptureError(str(e)) from e
    return produce
