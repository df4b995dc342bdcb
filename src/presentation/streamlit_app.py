import logging
import os

import streamlit as st

from src.application.wizard import WizardController
from src.domain.i18n import Language, TranslationKey as K, translate
from src.infrastructure.auth.user_manager import UserManager
from src.infrastructure.config import Settings
from src.infrastructure.llm.mistral_client import MistralCompletionProvider
from src.infrastructure.storage.memory_store import InMemoryReportStore
from src.infrastructure.storage.supabase_store import SupabaseReportStore
from src.presentation.auth_screens import logout, show_auth_screen
from src.presentation.session import Services, services, wizard
from src.presentation.wizard_screen import show_wizard


logger = logging.getLogger(__name__)


DISCLAIMER = (
    "⚕️ **DISCLAIMER:** This TCM assessment offers wellness guidance and is not a medical diagnosis. "
    "For chest pain, difficulty breathing or other emergencies, contact your local emergency number now."
)

_LANGUAGE_NAMES = {Language.EN: "English", Language.ZH: "中文", Language.MS: "Bahasa Melayu"}

_STYLE = """
<style>
[data-testid="stChatMessageContainer"], [data-testid="stMetric"] {
    max-width: 720px;
}
div[data-testid="stProgress"] > div {
    height: 6px;
}
</style>
"""


def _missing_configuration(settings: Settings) -> list[str]:
    return [name for name, value in (("MISTRAL_API_KEY", settings.mistral_api_key),) if not value]


def _build_services(settings: Settings) -> Services:
    if settings.report_store_url:
        store = SupabaseReportStore(settings=settings)
    else:
        logger.info("REPORT_STORE_URL not set; reports are kept in memory")
        store = InMemoryReportStore()
    return Services(
        settings=settings,
        provider=MistralCompletionProvider(settings=settings),
        store=store,
        users=UserManager(settings.user_store_path),
    )


def _show_home() -> None:
    st.session_state.view = "home"


def _init_session_state(settings: Settings) -> None:
    if "services" not in st.session_state:
        st.session_state.services = _build_services(settings)
    if "wizard" not in st.session_state:
        try:
            language = Language(settings.default_language)
        except ValueError:
            logger.warning("Unsupported DEFAULT_LANGUAGE %r, using English", settings.default_language)
            language = Language.EN
        st.session_state.wizard = WizardController(
            is_logged_in=not st.session_state.get("is_guest", False),
            language=language,
            on_transition=lambda direction: logger.debug("Wizard transition: %s", direction),
            on_exit_to_dashboard=_show_home,
            on_exit_to_login=logout,
        )
        st.session_state.view = "wizard"


def _render_sidebar(settings: Settings) -> None:
    controller = wizard()
    st.sidebar.title(f"⚙️ {translate(K.APP_TITLE, controller.language)}")

    languages = list(Language)
    language = st.sidebar.selectbox(
        translate(K.LANGUAGE, controller.language),
        languages,
        index=languages.index(controller.language),
        format_func=_LANGUAGE_NAMES.get,
    )
    if language != controller.language:
        controller.set_language(language)
        st.rerun()

    st.sidebar.caption(f"🤖 {settings.mistral_model} · 👁️ {settings.mistral_vision_model} · 🎙️ {settings.mistral_audio_model}")
    if isinstance(services().store, InMemoryReportStore):
        st.sidebar.warning("⚠️ Reports are not persisted (no report store configured)")

    user = st.session_state.get("user_data")
    if user:
        st.sidebar.caption(f"👤 {user['name']}")
    st.sidebar.divider()
    if st.sidebar.button(f"🚪 {translate(K.LOGOUT, controller.language)}", use_container_width=True):
        logout()


def _render_home() -> None:
    controller = wizard()
    st.markdown(f"# {translate(K.HOME_TITLE, controller.language)}")
    user = st.session_state.get("user_data") or {}
    if user:
        st.markdown(f"👋 {user.get('firstname', '')}")
    if st.button(translate(K.HOME_START, controller.language), type="primary", use_container_width=True):
        controller.start_new_assessment(lambda: True)
        st.session_state.view = "wizard"
        st.rerun()


def main():
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))

    st.set_page_config(
        page_title="TCM Health Assessment",
        page_icon="🌿",
        layout="centered",
        initial_sidebar_state="expanded",
    )

    st.markdown(_STYLE, unsafe_allow_html=True)

    settings = Settings()
    missing = _missing_configuration(settings)
    if missing:
        st.error(f"❌ Missing configuration: {', '.join(missing)}. Set it in `.streamlit/secrets.toml` or the environment.")
        st.stop()

    if not show_auth_screen():
        st.stop()

    _init_session_state(settings)
    _render_sidebar(settings)
    st.info(DISCLAIMER)

    if st.session_state.get("view") == "home":
        _render_home()
    else:
        show_wizard()


if __name__ == "__main__":
    main()
