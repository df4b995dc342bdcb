"""Tests for the login gate, guest mode and logout."""
from unittest.mock import Mock, patch

import pytest

from src.presentation.auth_screens import ASSESSMENT_KEYS


class MockSessionState(dict):
    """Mock Streamlit session state."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.__dict__ = self


@pytest.fixture
def mock_streamlit():
    with patch('src.presentation.auth_screens.st') as mock_st:
        mock_st.session_state = MockSessionState()
        mock_st.rerun = Mock(side_effect=Exception("rerun called"))
        yield mock_st


class TestAuthGate:

    def test_defaults_to_login_mode(self, mock_streamlit):
        from src.presentation.auth_screens import show_auth_screen

        with patch('src.presentation.auth_screens.show_login_screen', return_value=False) as login:
            assert show_auth_screen() is False
        login.assert_called_once()
        assert mock_streamlit.session_state['auth_mode'] == 'login'

    def test_register_mode(self, mock_streamlit):
        from src.presentation.auth_screens import show_auth_screen

        mock_streamlit.session_state['auth_mode'] = 'register'
        with patch('src.presentation.auth_screens.show_register_screen', return_value=False) as register:
            show_auth_screen()
        register.assert_called_once()

    def test_existing_session_bypasses_forms(self, mock_streamlit):
        from src.presentation.auth_screens import show_auth_screen

        mock_streamlit.session_state['authenticated'] = True
        with patch('src.presentation.auth_screens.show_login_screen') as login:
            assert show_auth_screen() is True
        login.assert_not_called()


class TestGuestMode:

    def test_continue_as_guest(self, mock_streamlit):
        from src.presentation.auth_screens import continue_as_guest

        mock_streamlit.session_state['user_data'] = {'id': 'stale'}
        continue_as_guest()

        assert mock_streamlit.session_state['authenticated'] is True
        assert mock_streamlit.session_state['is_guest'] is True
        assert mock_streamlit.session_state['user_data'] is None


class TestLogout:

    def test_logout_drops_assessment(self, mock_streamlit):
        from src.presentation.auth_screens import logout

        mock_streamlit.session_state.update({
            'authenticated': True,
            'is_guest': False,
            'user_data': {'id': 'u1', 'firstname': 'Mei'},
            'auth_mode': 'login',
            'wizard': Mock(),
            'services': Mock(),
            'step_state': {'tongue': Mock()},
            'mounted_key': (3, 0),
            'pending_confirm': 'exit',
            'language_hint': 'zh',
        })

        with pytest.raises(Exception, match="rerun called"):
            logout()

        state = mock_streamlit.session_state
        assert state['authenticated'] is False
        assert state['user_data'] is None
        assert state['auth_mode'] == 'login'
        for key in ASSESSMENT_KEYS:
            assert key not in state
        assert state['language_hint'] == 'zh'

    def test_logout_without_assessment(self, mock_streamlit):
        from src.presentation.auth_screens import logout

        with pytest.raises(Exception, match="rerun called"):
            logout()
        assert mock_streamlit.session_state['is_guest'] is False


class TestRegistrationErrors:

    def test_valid_form(self):
        from src.presentation.auth_screens import registration_errors

        assert registration_errors("Mei", "Tan", "mei@example.com", "Herbal#2024", "Herbal#2024") == []

    def test_errors_in_field_order(self):
        from src.presentation.auth_screens import registration_errors

        errors = registration_errors("", "Tan2", "mei", "Herbal#2024", "Herbal#2024")
        assert errors[0] == "First name is required"
        assert "Last name" in errors[1]
        assert len(errors) == 3

    def test_mismatch_only_checked_for_valid_password(self):
        from src.presentation.auth_screens import registration_errors

        assert registration_errors("Mei", "Tan", "mei@example.com", "Herbal#2024", "Herbal#2025") == [
            "Passwords do not match"
        ]
        errors = registration_errors("Mei", "Tan", "mei@example.com", "weak", "other")
        assert len(errors) == 1
        assert "at least 8 characters" in errors[0]
