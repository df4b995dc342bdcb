from unittest.mock import patch

from src.infrastructure.config import Settings, get_secret


def test_environment_values(monkeypatch):
    monkeypatch.setenv("MISTRAL_MODEL", "mistral-medium-latest")
    monkeypatch.setenv("REPORT_STORE_URL", "https://example.supabase.co")
    with patch("src.infrastructure.config._HAS_STREAMLIT", False):
        settings = Settings()
        assert settings.mistral_model == "mistral-medium-latest"
        assert settings.report_store_url == "https://example.supabase.co"


def test_defaults(monkeypatch):
    for name in ("MISTRAL_MODEL", "MISTRAL_VISION_MODEL", "REPORT_MEDIA_BUCKET", "USER_STORE_PATH", "DEFAULT_LANGUAGE"):
        monkeypatch.delenv(name, raising=False)
    with patch("src.infrastructure.config._HAS_STREAMLIT", False):
        settings = Settings()
        assert settings.mistral_model == "mistral-small-latest"
        assert settings.mistral_vision_model == "pixtral-12b-latest"
        assert settings.report_media_bucket == "diagnosis-media"
        assert settings.user_store_path == "users.json"
        assert settings.default_language == "en"


def test_get_secret_default(monkeypatch):
    monkeypatch.delenv("NOT_CONFIGURED", raising=False)
    with patch("src.infrastructure.config._HAS_STREAMLIT", False):
        assert get_secret("NOT_CONFIGURED", "fallback") == "fallback"
