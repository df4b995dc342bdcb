"""Tests for the per-session helpers behind the step screens."""
import base64
import os
import tempfile
from unittest.mock import Mock, patch

import pytest

from src.application.pulse import PulseMeasurement
from src.domain.errors import CaptureError


class MockSessionState(dict):
    """Mock Streamlit session state."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.__dict__ = self


class FakeUpload:
    def __init__(self, data=b"hello", name="tongue.png", type="image/png"):
        self._data = data
        self.name = name
        self.type = type

    def getvalue(self):
        return self._data


@pytest.fixture
def media_dir():
    with tempfile.TemporaryDirectory() as tmp:
        yield os.path.join(tmp, "media")


@pytest.fixture
def mock_streamlit(media_dir):
    with patch('src.presentation.session.st') as mock_st:
        services = Mock()
        services.settings.media_dir = media_dir
        mock_st.session_state = MockSessionState(services=services)
        yield mock_st


class TestProducerFor:

    def test_upload_saved_as_captured_media(self, mock_streamlit, media_dir):
        from src.presentation.session import producer_for

        media = producer_for(FakeUpload(), "tongue")()
        assert media.uri.startswith(media_dir)
        assert media.uri.endswith(".png")
        assert media.mime_type == "image/png"
        assert base64.b64decode(media.base64) == b"hello"
        assert os.path.exists(media.uri)

    def test_missing_upload(self, mock_streamlit):
        from src.presentation.session import producer_for

        with pytest.raises(CaptureError, match="No medicine media"):
            producer_for(None, "medicine")()

    def test_storage_failure_becomes_capture_error(self, mock_streamlit):
        from src.presentation.session import producer_for

        with patch('src.presentation.session.save_upload', side_effect=PermissionError("read-only")):
            with pytest.raises(CaptureError, match="read-only"):
                producer_for(FakeUpload(), "medicine")()


class TestSyncMount:

    def test_remount_drops_step_state_and_stops_timer(self, mock_streamlit):
        from src.presentation.session import step_state, sync_mount

        controller = Mock(current_step=3, mount_key=0)
        mock_streamlit.session_state['wizard'] = controller
        sync_mount()
        measurement = step_state("pulse_measurement", lambda: Mock(spec=PulseMeasurement))

        sync_mount()
        measurement.cancel.assert_not_called()

        controller.mount_key = 1
        sync_mount()
        measurement.cancel.assert_called_once()
        assert mock_streamlit.session_state['step_state'] == {}
