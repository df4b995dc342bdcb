import logging
import os
import uuid
from enum import Enum
from typing import Any, Callable, Dict, Optional, Type

from pydantic import BaseModel

from src.application.parsing import extract_json, parse_analysis
from src.application.ports import CompletionProvider
from src.application.prompts import (
    FACE_ANALYSIS_PROMPT,
    LISTENING_ANALYSIS_PROMPT,
    MEDICAL_REPORT_PROMPT,
    TONGUE_ANALYSIS_PROMPT,
)
from src.application.schemas import FaceAnalysis, ListeningAnalysis, ReportExtraction, TongueAnalysis
from src.domain.errors import (
    AnalysisError,
    CaptureError,
    CompletionError,
    DiagnosisError,
    InvalidSubjectError,
    PermissionDeniedError,
    StepBusyError,
)
from src.domain.i18n import Language, TranslationKey, translate
from src.domain.models import CapturedMedia, FormData, UploadedFile


logger = logging.getLogger(__name__)

MediaProducer = Callable[[], CapturedMedia]


class AnalysisState(str, Enum):
    IDLE = "idle"
    CAPTURING = "capturing"
    ANALYZING = "analyzing"
    DONE = "done"
    ERROR = "error"


class ModalityAnalyzer:
    """Capture-then-analyse controller shared by the media steps.

    The analyzer owns the step's transient state (captured media, result,
    last failure) and only touches the form through ``FormData.merge``.
    """

    kind = ""
    prompt = ""
    schema: Type[BaseModel] = BaseModel
    media_field = ""
    analysis_field = ""
    invalid_key = TranslationKey.ANALYSIS_FAILED
    permission_key = TranslationKey.CAMERA_PERMISSION

    def __init__(
        self,
        provider: CompletionProvider,
        language: Language = Language.EN,
        model: Optional[str] = None,
    ):
        self.provider = provider
        self.language = language
        self.model = model
        self.state = AnalysisState.IDLE
        self.media: Optional[CapturedMedia] = None
        self.result: Optional[BaseModel] = None
        self.failure: Optional[DiagnosisError] = None

    @property
    def busy(self) -> bool:
        return self.state in (AnalysisState.CAPTURING, AnalysisState.ANALYZING)

    @property
    def error_message(self) -> Optional[str]:
        if self.failure is None:
            return None
        if isinstance(self.failure, PermissionDeniedError):
            return translate(self.permission_key, self.language)
        if isinstance(self.failure, CaptureError):
            return translate(TranslationKey.CAPTURE_FAILED, self.language)
        if isinstance(self.failure, InvalidSubjectError):
            return translate(self.invalid_key, self.language)
        return translate(TranslationKey.ANALYSIS_FAILED, self.language)

    def capture_and_analyze(self, producer: MediaProducer, form: FormData) -> FormData:
        if self.state not in (AnalysisState.IDLE, AnalysisState.ERROR):
            raise StepBusyError(f"{self.kind} step is {self.state.value}")
        self.state = AnalysisState.CAPTURING
        try:
            media = producer()
        except (PermissionDeniedError, CaptureError) as e:
            logger.warning("%s capture failed: %s", self.kind, e)
            self.state = AnalysisState.IDLE
            self.failure = e
            return form
        except Exception as e:
            self.state = AnalysisState.ERROR
            self.failure = CaptureError(str(e))
            raise
        return self.analyze(media, form)

    def analyze(self, media: CapturedMedia, form: FormData) -> FormData:
        if self.state == AnalysisState.ANALYZING:
            raise StepBusyError(f"{self.kind} analysis already in progress")
        self.media = media
        self.result = None
        self.failure = None
        self.state = AnalysisState.ANALYZING
        try:
            text = self.provider.complete(self.prompt, media=media, model=self.model)
            result = self._interpret(text)
        except CompletionError as e:
            return self._fail(AnalysisError(str(e)), form)
        except AnalysisError as e:
            return self._fail(e, form)
        except Exception as e:
            self._fail(AnalysisError(str(e)), form)
            raise

        self.result = result
        self.state = AnalysisState.DONE
        return self._apply(form, media, result)

    def retry(self, form: FormData) -> FormData:
        if self.media is None:
            raise CaptureError(f"No {self.kind} media to analyze")
        if self.busy:
            raise StepBusyError(f"{self.kind} step is {self.state.value}")
        return self.analyze(self.media, form)

    def reset(self) -> None:
        self.state = AnalysisState.IDLE
        self.media = None
        self.result = None
        self.failure = None

    def _interpret(self, text: str) -> BaseModel:
        result = parse_analysis(text, self.schema)
        if not self._is_valid(result):
            observation = getattr(result, "observation", "") or ""
            raise InvalidSubjectError(f"Not a {self.kind} capture", observation=observation)
        return result

    def _is_valid(self, result: BaseModel) -> bool:
        return bool(getattr(result, "is_valid_image", True))

    def _fail(self, error: AnalysisError, form: FormData) -> FormData:
        logger.warning("%s analysis failed: %s", self.kind, error)
        self.failure = error
        self.state = AnalysisState.ERROR
        return form

    def _apply(self, form: FormData, media: CapturedMedia, result: BaseModel) -> FormData:
        return form.merge({
            self.media_field: media.uri,
            self.analysis_field: result.model_dump(exclude_none=True),
        })


class TongueAnalyzer(ModalityAnalyzer):
    kind = "tongue"
    prompt = TONGUE_ANALYSIS_PROMPT
    schema = TongueAnalysis
    media_field = "tongue_image"
    analysis_field = "tongue_analysis"
    invalid_key = TranslationKey.INVALID_TONGUE


class FaceAnalyzer(ModalityAnalyzer):
    kind = "face"
    prompt = FACE_ANALYSIS_PROMPT
    schema = FaceAnalysis
    media_field = "face_image"
    analysis_field = "face_analysis"
    invalid_key = TranslationKey.INVALID_FACE


class ListeningAnalyzer(ModalityAnalyzer):
    kind = "audio"
    prompt = LISTENING_ANALYSIS_PROMPT
    schema = ListeningAnalysis
    media_field = "audio_recording"
    analysis_field = "audio_analysis"
    invalid_key = TranslationKey.INVALID_AUDIO
    permission_key = TranslationKey.MICROPHONE_PERMISSION

    def _is_valid(self, result: BaseModel) -> bool:
        return bool(getattr(result, "is_valid_audio", True))


class ReportExtractor(ModalityAnalyzer):
    """Extracts text from an uploaded medical report and appends it to ``files``.

    Responses that are not JSON are kept verbatim as the extracted text.
    When the request itself fails the pending document can still be added
    with empty text via ``add_without_text``.
    """

    kind = "report"
    prompt = MEDICAL_REPORT_PROMPT
    schema = ReportExtraction
    invalid_key = TranslationKey.REPORT_EXTRACTION_FAILED
    permission_key = TranslationKey.CAMERA_PERMISSION

    @property
    def error_message(self) -> Optional[str]:
        if isinstance(self.failure, AnalysisError):
            return translate(TranslationKey.REPORT_EXTRACTION_FAILED, self.language)
        return super().error_message

    def _interpret(self, text: str) -> BaseModel:
        try:
            data: Dict[str, Any] = extract_json(text)
        except AnalysisError:
            return ReportExtraction(text=(text or "").strip())
        return ReportExtraction(text=str(data.get("text") or text or "").strip())

    def _apply(self, form: FormData, media: CapturedMedia, result: BaseModel) -> FormData:
        updated = self._append(form, media, result.text)
        self.reset()
        return updated

    def add_without_text(self, form: FormData) -> FormData:
        if self.media is None:
            return form
        updated = self._append(form, self.media, "")
        self.reset()
        return updated

    @staticmethod
    def _append(form: FormData, media: CapturedMedia, text: str) -> FormData:
        uploaded = UploadedFile(
            id=uuid.uuid4().hex,
            uri=media.uri,
            name=os.path.basename(media.uri) or "report",
            mime_type=media.mime_type,
            extracted_text=text,
        )
        return form.merge({"files": list(form.files) + [uploaded]})

    @staticmethod
    def update_text(form: FormData, file_id: str, text: str) -> FormData:
        files = [
            f.model_copy(update={"extracted_text": text}) if f.id == file_id else f
            for f in form.files
        ]
        return form.merge({"files": files})

    @staticmethod
    def remove(form: FormData, file_id: str) -> FormData:
        return form.merge({"files": [f for f in form.files if f.id != file_id]})
