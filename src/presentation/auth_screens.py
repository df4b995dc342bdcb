"""Login, registration and guest entry screens."""
import logging
import time
from typing import List

import streamlit as st

from src.domain.i18n import Language, TranslationKey as K, translate
from src.infrastructure.auth.user_manager import UserManager
from src.infrastructure.auth.validators import (
    passwords_match,
    validate_email,
    validate_name,
    validate_password,
)
from src.infrastructure.config import Settings


logger = logging.getLogger(__name__)

# Session keys owned by the assessment; cleared on logout
ASSESSMENT_KEYS = ("wizard", "services", "step_state", "mounted_key", "pending_confirm", "submission")


def _user_manager() -> UserManager:
    return UserManager(Settings().user_store_path)


def _text(key: K, **params: str) -> str:
    controller = st.session_state.get("wizard")
    if controller is not None:
        return translate(key, controller.language, **params)
    try:
        language = Language(Settings().default_language)
    except ValueError:
        language = Language.EN
    return translate(key, language, **params)


def _switch_mode(mode: str) -> None:
    st.session_state.auth_mode = mode
    st.rerun()


def continue_as_guest() -> None:
    st.session_state.authenticated = True
    st.session_state.is_guest = True
    st.session_state.user_data = None


def registration_errors(firstname: str, lastname: str, email: str, password: str, confirm: str) -> List[str]:
    """Collect every validation message for the registration form, in field order."""
    checks = [
        validate_name(firstname, "First name"),
        validate_name(lastname, "Last name"),
        validate_email(email),
    ]
    password_check = validate_password(password)
    checks.append(password_check)
    if password_check[0]:
        checks.append(passwords_match(password, confirm))
    return [message for valid, message in checks if not valid]


def show_login_screen() -> bool:
    """
    Display the login form with a guest shortcut.

    Returns:
        True once the user is signed in or continues as guest
    """
    st.markdown(f"# 🔐 {_text(K.LOGIN_TITLE)}")
    st.markdown(_text(K.LOGIN_SUBTITLE))

    with st.form("login_form"):
        email = st.text_input(_text(K.EMAIL), placeholder="mei.tan@example.com")
        password = st.text_input(_text(K.PASSWORD), type="password")

        left, right = st.columns(2)
        submitted = left.form_submit_button(_text(K.LOGIN), use_container_width=True)
        wants_register = right.form_submit_button(_text(K.TO_REGISTER), use_container_width=True)

    if wants_register:
        _switch_mode("register")

    if submitted:
        if not email or not password:
            st.error(f"❌ {_text(K.MISSING_CREDENTIALS)}")
            return False
        email_ok, email_error = validate_email(email)
        if not email_ok:
            st.error(f"❌ {email_error}")
            return False

        success, user_data = _user_manager().authenticate_user(email, password)
        if not success:
            st.error(f"❌ {_text(K.INVALID_CREDENTIALS)}")
            return False
        st.session_state.authenticated = True
        st.session_state.is_guest = False
        st.session_state.user_data = user_data
        logger.info("User %s signed in", user_data["id"])
        st.success(f"✅ {_text(K.WELCOME_BACK, name=user_data['firstname'])}")
        st.rerun()
        return True

    if st.button(_text(K.CONTINUE_AS_GUEST), use_container_width=True):
        continue_as_guest()
        st.rerun()
        return True
    st.caption(_text(K.GUEST_NOT_SAVED))
    return False


def show_register_screen() -> bool:
    st.markdown(f"# ✍️ {_text(K.REGISTER_TITLE)}")

    with st.form("register_form"):
        firstname = st.text_input(_text(K.FIRST_NAME), placeholder="Mei")
        lastname = st.text_input(_text(K.LAST_NAME), placeholder="Tan")
        email = st.text_input(_text(K.EMAIL), placeholder="mei.tan@example.com")
        password = st.text_input(_text(K.PASSWORD), type="password")
        confirm = st.text_input(_text(K.CONFIRM_PASSWORD), type="password")
        st.caption(_text(K.PASSWORD_RULES))

        left, right = st.columns(2)
        submitted = left.form_submit_button(_text(K.REGISTER), use_container_width=True)
        wants_login = right.form_submit_button(_text(K.TO_LOGIN), use_container_width=True)

    if wants_login:
        _switch_mode("login")

    if not submitted:
        return False

    errors = registration_errors(firstname, lastname, email, password, confirm)
    for error in errors:
        st.error(f"❌ {error}")
    if errors:
        return False

    success, message = _user_manager().register_user(
        firstname=firstname, lastname=lastname, email=email, password=password
    )
    if not success:
        st.error(f"❌ {message}")
        return False
    st.success(f"✅ {_text(K.REGISTERED)}")
    time.sleep(2)
    _switch_mode("login")
    return True


def show_auth_screen() -> bool:
    """
    Gate the app behind login, registration or guest entry.

    Returns:
        True if a signed-in or guest session already exists
    """
    st.session_state.setdefault("auth_mode", "login")
    if st.session_state.get("authenticated", False):
        return True
    if st.session_state.auth_mode == "register":
        return show_register_screen()
    return show_login_screen()


def logout():
    """End the session and drop any assessment in progress."""
    st.session_state.authenticated = False
    st.session_state.is_guest = False
    st.session_state.user_data = None
    st.session_state.auth_mode = "login"
    for key in ASSESSMENT_KEYS:
        st.session_state.pop(key, None)
    st.rerun()
