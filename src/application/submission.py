import logging
import uuid
from concurrent.futures import ThreadPoolExecutor
from enum import Enum
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Sequence, Union

from src.application.ports import ReportStore
from src.application.schemas import HealthReportPayload, MediaData, PulseData
from src.domain.errors import AuthSessionError, PersistenceError
from src.domain.models import FormData


logger = logging.getLogger(__name__)

# Upload kind -> form field holding the local media uri
MEDIA_FIELDS = (
    ("tongue", "tongue_image"),
    ("face", "face_image"),
    ("voice", "audio_recording"),
)

PENDING_DIAGNOSIS = {"type": "Pending Analysis"}


class Uploaded(NamedTuple):
    kind: str
    path: str


class UploadFailed(NamedTuple):
    kind: str
    reason: str


class NotProvided(NamedTuple):
    kind: str


UploadOutcome = Union[Uploaded, UploadFailed, NotProvided]


class GapPolicy(str, Enum):
    SAVE_WITH_GAPS = "save_with_gaps"
    ABORT = "abort"


class SubmissionDecision(NamedTuple):
    persist: bool
    gaps: List[str]


def decide_submission(
    outcomes: Sequence[UploadOutcome],
    policy: GapPolicy = GapPolicy.SAVE_WITH_GAPS,
) -> SubmissionDecision:
    """Whether to write the report when some media uploads failed.

    Media that was never captured is not a gap.
    """
    gaps = [o.kind for o in outcomes if isinstance(o, UploadFailed)]
    if gaps and policy == GapPolicy.ABORT:
        return SubmissionDecision(False, gaps)
    return SubmissionDecision(True, gaps)


class SubmissionResult(NamedTuple):
    saved: bool
    guest: bool = False
    report_id: Optional[str] = None
    error: Optional[str] = None
    can_retry: bool = False
    gaps: List[str] = []
    # The results view is reachable whatever happened to persistence.
    proceed: bool = True


def _upload_one(store: ReportStore, user_id: str, report_id: str, kind: str, uri: Optional[str]) -> UploadOutcome:
    if not uri:
        return NotProvided(kind)
    try:
        return Uploaded(kind, store.upload_media(user_id, report_id, kind, uri))
    except AuthSessionError:
        raise
    except (PersistenceError, OSError) as e:
        logger.error("Upload failed for %s: %s", kind, e)
        return UploadFailed(kind, str(e))


def upload_media(store: ReportStore, user_id: str, report_id: str, form: FormData) -> Dict[str, UploadOutcome]:
    """Uploads tongue, face and voice media in parallel and waits for all three."""
    with ThreadPoolExecutor(max_workers=len(MEDIA_FIELDS)) as pool:
        futures = {
            kind: pool.submit(_upload_one, store, user_id, report_id, kind, getattr(form, field))
            for kind, field in MEDIA_FIELDS
        }
        return {kind: future.result() for kind, future in futures.items()}


def _media_data(outcome: Optional[UploadOutcome], local_uri: Optional[str], analysis) -> MediaData:
    path = outcome.path if isinstance(outcome, Uploaded) else None
    return MediaData(path=path, local_uri=local_uri, analysis=analysis or None)


def build_report_payload(
    report_id: str,
    user_id: str,
    form: FormData,
    outcomes: Mapping[str, UploadOutcome],
) -> Dict[str, Any]:
    report = form.report or {}
    payload = HealthReportPayload(
        id=report_id,
        user_id=user_id,
        complaint=form.main_concern or form.symptom_details or "No specific complaint provided",
        symptoms=list(form.symptoms),
        chat_log=[m.model_dump(mode="json") for m in form.inquiry_chat],
        tongue_data=_media_data(outcomes.get("tongue"), form.tongue_image, form.tongue_analysis),
        face_data=_media_data(outcomes.get("face"), form.face_image, form.face_analysis),
        voice_data=_media_data(outcomes.get("voice"), form.audio_recording, form.audio_analysis),
        pulse_data=PulseData(
            bpm=int(form.bpm) if form.bpm else 0,
            qualities=[q.model_dump() for q in form.pulse_qualities],
        ),
        diagnosis=report.get("diagnosis") or PENDING_DIAGNOSIS,
        recommendations=report.get("recommendations") or {},
    )
    return payload.model_dump(mode="json")


class ReportSubmitter:
    def __init__(self, store: ReportStore, policy: GapPolicy = GapPolicy.SAVE_WITH_GAPS):
        self.store = store
        self.policy = policy

    def submit(self, form: FormData, user_id: Optional[str]) -> SubmissionResult:
        if not user_id:
            logger.info("Guest user detected - skipping report save")
            return SubmissionResult(saved=False, guest=True)

        report_id = str(uuid.uuid4())
        try:
            outcomes = upload_media(self.store, user_id, report_id, form)
            decision = decide_submission(list(outcomes.values()), self.policy)
            if not decision.persist:
                logger.warning("Report %s not saved, missing media: %s", report_id, decision.gaps)
                return SubmissionResult(
                    saved=False,
                    report_id=report_id,
                    error="Media upload failed: " + ", ".join(decision.gaps),
                    can_retry=True,
                    gaps=decision.gaps,
                )
            self.store.insert_report(build_report_payload(report_id, user_id, form, outcomes))
        except AuthSessionError as e:
            logger.warning("Auth error during save - proceeding as guest: %s", e)
            return SubmissionResult(saved=False, guest=True)
        except PersistenceError as e:
            logger.error("Report submission failed: %s", e)
            return SubmissionResult(saved=False, report_id=report_id, error=str(e), can_retry=True)

        logger.info("Report %s saved", report_id)
        return SubmissionResult(saved=True, report_id=report_id, gaps=decision.gaps)
