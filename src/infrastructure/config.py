import os
import logging

try:
    import streamlit as st  # type: ignore
    _HAS_STREAMLIT = True
except Exception:
    _HAS_STREAMLIT = False

logger = logging.getLogger(__name__)


def get_secret(name: str, default: str | None = None) -> str | None:
    # Prefer Streamlit secrets if available
    if _HAS_STREAMLIT:
        try:
            if name in st.secrets:
                return str(st.secrets.get(name))
        except Exception as e:
            # No secrets.toml; fall through to the environment
            logger.debug("Streamlit secrets unavailable for %s: %s", name, e)
    return os.environ.get(name, default)


class Settings:
    @property
    def mistral_api_key(self) -> str | None:
        return get_secret("MISTRAL_API_KEY")

    @property
    def mistral_model(self) -> str:
        return get_secret("MISTRAL_MODEL", "mistral-small-latest") or "mistral-small-latest"

    @property
    def mistral_vision_model(self) -> str:
        return get_secret("MISTRAL_VISION_MODEL", "pixtral-12b-latest") or "pixtral-12b-latest"

    @property
    def mistral_audio_model(self) -> str:
        return get_secret("MISTRAL_AUDIO_MODEL", "voxtral-small-latest") or "voxtral-small-latest"

    @property
    def report_store_url(self) -> str | None:
        return get_secret("REPORT_STORE_URL")

    @property
    def report_store_key(self) -> str | None:
        return get_secret("REPORT_STORE_KEY")

    @property
    def report_media_bucket(self) -> str:
        return get_secret("REPORT_MEDIA_BUCKET", "diagnosis-media") or "diagnosis-media"

    @property
    def user_store_path(self) -> str:
        return get_secret("USER_STORE_PATH", "users.json") or "users.json"

    @property
    def media_dir(self) -> str:
        return get_secret("MEDIA_DIR", "media") or "media"

    @property
    def default_language(self) -> str:
        return get_secret("DEFAULT_LANGUAGE", "en") or "en"
