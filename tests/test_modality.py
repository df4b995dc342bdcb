"""Tests for the capture-then-analyse step controllers."""
import json

import pytest

from src.application.modality import (
    AnalysisState,
    FaceAnalyzer,
    ListeningAnalyzer,
    ReportExtractor,
    TongueAnalyzer,
)
from src.domain.errors import (
    AnalysisError,
    CaptureError,
    CompletionError,
    InvalidSubjectError,
    PermissionDeniedError,
    StepBusyError,
)
from src.domain.models import CapturedMedia, FormData


class DummyProvider:
    """Returns queued replies; an exception in the queue is raised instead."""

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def complete(self, prompt, media=None, system_prompt=None, model=None):
        self.calls.append({"prompt": prompt, "media": media, "model": model})
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def start_chat(self, system_prompt, model=None):
        raise NotImplementedError


TONGUE_OK = json.dumps({
    "observation": "Pale tongue with a thin white coating",
    "potential_issues": ["Qi Deficiency"],
    "confidence": 75,
    "tongue_color": "pale",
    "is_valid_image": True,
})

NOT_A_TONGUE = json.dumps({
    "observation": "The image shows a cup of tea",
    "is_valid_image": False,
})


def _photo(uri="media/tongue.jpg"):
    return lambda: CapturedMedia(uri=uri, base64="aGVsbG8=", mime_type="image/jpeg")


def _denied():
    raise PermissionDeniedError("camera denied")


class TestTongueAnalyzer:

    def test_success_merges_media_and_analysis(self):
        provider = DummyProvider(TONGUE_OK)
        analyzer = TongueAnalyzer(provider)
        form = analyzer.capture_and_analyze(_photo(), FormData())

        assert analyzer.state == AnalysisState.DONE
        assert form.tongue_image == "media/tongue.jpg"
        assert form.tongue_analysis["tongue_color"] == "pale"
        assert form.tongue_analysis["potential_issues"] == ["Qi Deficiency"]
        assert provider.calls[0]["media"].base64 == "aGVsbG8="

    def test_invalid_subject_keeps_form_and_media(self):
        analyzer = TongueAnalyzer(DummyProvider(NOT_A_TONGUE))
        form = FormData(name="Mei")
        result = analyzer.capture_and_analyze(_photo(), form)

        assert result is form
        assert analyzer.state == AnalysisState.ERROR
        assert isinstance(analyzer.failure, InvalidSubjectError)
        assert analyzer.failure.observation == "The image shows a cup of tea"
        assert analyzer.media is not None
        assert "does not appear to be a tongue" in analyzer.error_message

    def test_completion_error_becomes_retryable_analysis_error(self):
        analyzer = TongueAnalyzer(DummyProvider(CompletionError("timeout")))
        form = analyzer.capture_and_analyze(_photo(), FormData())

        assert form.tongue_image is None
        assert analyzer.state == AnalysisState.ERROR
        assert isinstance(analyzer.failure, AnalysisError)
        assert analyzer.failure.retryable

    def test_unparseable_reply(self):
        analyzer = TongueAnalyzer(DummyProvider("Sorry, I can't help with that."))
        analyzer.capture_and_analyze(_photo(), FormData())
        assert analyzer.state == AnalysisState.ERROR
        assert analyzer.error_message == "Failed to analyze. Please try again."

    def test_retry_reuses_captured_media(self):
        provider = DummyProvider(CompletionError("timeout"), TONGUE_OK)
        analyzer = TongueAnalyzer(provider)
        form = analyzer.capture_and_analyze(_photo(), FormData())
        form = analyzer.retry(form)

        assert analyzer.state == AnalysisState.DONE
        assert form.tongue_analysis is not None
        assert provider.calls[0]["media"] is provider.calls[1]["media"]

    def test_retry_without_media(self):
        with pytest.raises(CaptureError):
            TongueAnalyzer(DummyProvider()).retry(FormData())

    def test_permission_denied_returns_to_idle(self):
        provider = DummyProvider()
        analyzer = TongueAnalyzer(provider)
        form = FormData()
        assert analyzer.capture_and_analyze(_denied, form) is form
        assert analyzer.state == AnalysisState.IDLE
        assert provider.calls == []
        assert "Camera permission" in analyzer.error_message

    def test_unexpected_capture_error_releases_step(self):
        def broken():
            raise ValueError("decoder crashed")

        analyzer = TongueAnalyzer(DummyProvider(TONGUE_OK))
        with pytest.raises(ValueError):
            analyzer.capture_and_analyze(broken, FormData())
        assert analyzer.state == AnalysisState.ERROR
        assert not analyzer.busy

        form = analyzer.capture_and_analyze(_photo(), FormData())
        assert form.tongue_image == "media/tongue.jpg"

    def test_unexpected_analysis_error_releases_step(self):
        analyzer = TongueAnalyzer(DummyProvider(KeyError("choices"), TONGUE_OK))
        with pytest.raises(KeyError):
            analyzer.capture_and_analyze(_photo(), FormData())
        assert analyzer.state == AnalysisState.ERROR
        assert isinstance(analyzer.failure, AnalysisError)

        form = analyzer.retry(FormData())
        assert analyzer.state == AnalysisState.DONE
        assert form.tongue_analysis["confidence"] == 75

    def test_busy_rejects_second_request(self):
        analyzer = TongueAnalyzer(DummyProvider())
        analyzer.state = AnalysisState.ANALYZING
        assert analyzer.busy
        with pytest.raises(StepBusyError):
            analyzer.capture_and_analyze(_photo(), FormData())

    def test_reset(self):
        analyzer = TongueAnalyzer(DummyProvider(NOT_A_TONGUE))
        analyzer.capture_and_analyze(_photo(), FormData())
        analyzer.reset()
        assert analyzer.state == AnalysisState.IDLE
        assert analyzer.media is None
        assert analyzer.failure is None

    def test_language_of_error_message(self):
        analyzer = TongueAnalyzer(DummyProvider(NOT_A_TONGUE), language="zh")
        analyzer.capture_and_analyze(_photo(), FormData())
        assert analyzer.error_message == "这张图片似乎不是舌头，请拍摄清晰的舌头照片。"


def test_face_analyzer_writes_face_fields():
    reply = json.dumps({"observation": "Sallow complexion", "complexion": "yellow", "is_valid_image": True})
    form = FaceAnalyzer(DummyProvider(reply)).capture_and_analyze(_photo("media/face.jpg"), FormData())
    assert form.face_image == "media/face.jpg"
    assert form.face_analysis["complexion"] == "yellow"
    assert form.tongue_image is None


class TestListeningAnalyzer:

    def test_success(self):
        reply = json.dumps({
            "overall_observation": "Weak, low voice",
            "pattern_suggestions": ["Lung Qi Deficiency"],
            "is_valid_audio": True,
        })
        recording = lambda: CapturedMedia(uri="media/voice.wav", base64="UklGRg==", mime_type="audio/wav")
        form = ListeningAnalyzer(DummyProvider(reply)).capture_and_analyze(recording, FormData())
        assert form.audio_recording == "media/voice.wav"
        assert form.audio_analysis["overall_observation"] == "Weak, low voice"

    def test_invalid_audio(self):
        analyzer = ListeningAnalyzer(DummyProvider(json.dumps({"is_valid_audio": False})))
        analyzer.capture_and_analyze(_photo("media/voice.wav"), FormData())
        assert isinstance(analyzer.failure, InvalidSubjectError)
        assert "recording could not be used" in analyzer.error_message

    def test_microphone_permission_message(self):
        analyzer = ListeningAnalyzer(DummyProvider())
        analyzer.capture_and_analyze(_denied, FormData())
        assert "Microphone permission" in analyzer.error_message


class TestReportExtractor:

    def test_json_text_appended(self):
        extractor = ReportExtractor(DummyProvider('{"text": "HbA1c 6.1%"}'))
        form = extractor.capture_and_analyze(_photo("media/report_1.jpg"), FormData())

        assert len(form.files) == 1
        assert form.files[0].name == "report_1.jpg"
        assert form.files[0].extracted_text == "HbA1c 6.1%"
        assert extractor.state == AnalysisState.IDLE

    def test_plain_text_reply_kept_verbatim(self):
        extractor = ReportExtractor(DummyProvider("Blood pressure 130/85"))
        form = extractor.capture_and_analyze(_photo("media/bp.jpg"), FormData())
        assert form.files[0].extracted_text == "Blood pressure 130/85"

    def test_failure_then_add_without_text(self):
        extractor = ReportExtractor(DummyProvider(CompletionError("offline")))
        form = extractor.capture_and_analyze(_photo("media/scan.jpg"), FormData())
        assert form.files == []
        assert "edit text manually" in extractor.error_message

        form = extractor.add_without_text(form)
        assert form.files[0].extracted_text == ""
        assert extractor.media is None

    def test_add_without_text_needs_media(self):
        form = FormData()
        assert ReportExtractor(DummyProvider()).add_without_text(form) is form

    def test_update_and_remove(self):
        extractor = ReportExtractor(DummyProvider("first", "second"))
        form = extractor.capture_and_analyze(_photo("media/a.jpg"), FormData())
        form = extractor.capture_and_analyze(_photo("media/b.jpg"), form)
        first, second = form.files

        form = ReportExtractor.update_text(form, first.id, "edited")
        assert form.files[0].extracted_text == "edited"
        assert form.files[1].extracted_text == "second"

        form = ReportExtractor.remove(form, first.id)
        assert [f.id for f in form.files] == [second.id]
