from enum import Enum
from functools import lru_cache
from typing import NamedTuple, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from src.domain.i18n import Language, TranslationKey, translate


class StepId(str, Enum):
    BASIC_INFO = "basic_info"
    PROFILE_SUMMARY = "profile_summary"
    SYMPTOMS = "symptoms"
    UPLOAD_REPORTS = "upload_reports"
    UPLOAD_MEDICINE = "upload_medicine"
    SELECT_DOCTOR = "select_doctor"
    INQUIRY = "inquiry"
    INQUIRY_SUMMARY = "inquiry_summary"
    TONGUE = "tongue"
    FACE = "face"
    AUDIO = "audio"
    PULSE = "pulse"
    SMART_CONNECT = "smart_connect"
    ANALYSIS = "analysis"


class StepDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: StepId
    label: str
    icon: str


_LABELS = {
    StepId.BASIC_INFO: (TranslationKey.STEP_BASIC_INFO, "person-outline"),
    StepId.PROFILE_SUMMARY: (TranslationKey.STEP_PROFILE_SUMMARY, "checkmark-circle-outline"),
    StepId.SYMPTOMS: (TranslationKey.STEP_SYMPTOMS, "thermometer-outline"),
    StepId.UPLOAD_REPORTS: (TranslationKey.STEP_UPLOAD_REPORTS, "document-text-outline"),
    StepId.UPLOAD_MEDICINE: (TranslationKey.STEP_UPLOAD_MEDICINE, "medkit-outline"),
    StepId.SELECT_DOCTOR: (TranslationKey.STEP_SELECT_DOCTOR, "people-outline"),
    StepId.INQUIRY: (TranslationKey.STEP_INQUIRY, "chatbubbles-outline"),
    StepId.INQUIRY_SUMMARY: (TranslationKey.STEP_INQUIRY_SUMMARY, "document-text-outline"),
    StepId.TONGUE: (TranslationKey.STEP_TONGUE, "camera-outline"),
    StepId.FACE: (TranslationKey.STEP_FACE, "scan-outline"),
    StepId.AUDIO: (TranslationKey.STEP_AUDIO, "mic-outline"),
    StepId.PULSE: (TranslationKey.STEP_PULSE, "heart-outline"),
    StepId.SMART_CONNECT: (TranslationKey.STEP_SMART_CONNECT, "watch-outline"),
    StepId.ANALYSIS: (TranslationKey.STEP_ANALYSIS, "analytics-outline"),
}

# Fixed order after basic_info (and profile_summary for logged-in users)
_TAIL = (
    StepId.SYMPTOMS,
    StepId.UPLOAD_REPORTS,
    StepId.UPLOAD_MEDICINE,
    StepId.SELECT_DOCTOR,
    StepId.INQUIRY,
    StepId.INQUIRY_SUMMARY,
    StepId.TONGUE,
    StepId.FACE,
    StepId.AUDIO,
    StepId.PULSE,
    StepId.SMART_CONNECT,
    StepId.ANALYSIS,
)


def _descriptor(step_id: StepId, language: Language) -> StepDescriptor:
    key, icon = _LABELS[step_id]
    return StepDescriptor(id=step_id, label=translate(key, language), icon=icon)


@lru_cache(maxsize=None)
def build_steps(is_logged_in: bool, language: Language = Language.EN) -> Tuple[StepDescriptor, ...]:
    """Ordered step registry for one user type and language.

    The same tuple object is returned for the same arguments, so callers
    can key renders and transitions on identity. The results view is the
    virtual index ``len(steps)`` and is never part of the registry.
    """
    language = Language(language)
    ids = [StepId.BASIC_INFO]
    if is_logged_in:
        ids.append(StepId.PROFILE_SUMMARY)
    ids.extend(_TAIL)
    return tuple(_descriptor(step_id, language) for step_id in ids)


class Phase(NamedTuple):
    id: str
    label_key: TranslationKey
    step_ids: Tuple[StepId, ...]


STEP_PHASES: Tuple[Phase, ...] = (
    Phase("profile", TranslationKey.PHASE_PROFILE, (StepId.BASIC_INFO, StepId.PROFILE_SUMMARY)),
    Phase(
        "history",
        TranslationKey.PHASE_HISTORY,
        (StepId.SYMPTOMS, StepId.UPLOAD_REPORTS, StepId.UPLOAD_MEDICINE, StepId.SELECT_DOCTOR),
    ),
    Phase("inquiry", TranslationKey.PHASE_INQUIRY, (StepId.INQUIRY, StepId.INQUIRY_SUMMARY)),
    Phase(
        "vitals",
        TranslationKey.PHASE_VITALS,
        (StepId.TONGUE, StepId.FACE, StepId.AUDIO, StepId.PULSE, StepId.SMART_CONNECT),
    ),
    Phase("analysis", TranslationKey.PHASE_RESULTS, (StepId.ANALYSIS,)),
)


def phase_index(step_id: Optional[StepId]) -> int:
    """Progress phase of a step; the results view counts as the last phase."""
    if step_id is None:
        return len(STEP_PHASES) - 1
    for index, phase in enumerate(STEP_PHASES):
        if step_id in phase.step_ids:
            return index
    return 0
