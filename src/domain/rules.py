from typing import List, NamedTuple, Optional, Sequence

from .catalogs import PULSE_CONFLICTS, PULSE_TYPES_BY_ID, PulseType
from .i18n import Language, TranslationKey, translate
from .models import FormData, PulseQuality
from .steps import StepId


# Steps that advance through their own completion callback instead of the
# generic Next control.
SELF_GATED_STEPS = frozenset({
    StepId.PROFILE_SUMMARY,
    StepId.SELECT_DOCTOR,
    StepId.INQUIRY_SUMMARY,
    StepId.AUDIO,
    StepId.ANALYSIS,
})


def can_proceed(step_id: Optional[str], form: FormData) -> bool:
    """Whether the generic Next control is enabled on ``step_id``.

    Unknown ids fail open.
    """
    if step_id == StepId.BASIC_INFO:
        return bool(form.name.strip()) and bool(form.age.strip()) and form.gender is not None
    if step_id == StepId.SYMPTOMS:
        return bool(form.main_concern.strip())
    return True


class PulseToggle(NamedTuple):
    selection: List[PulseQuality]
    warning: Optional[str] = None


def _display_name(pulse: PulseType, language: Language) -> str:
    return pulse.name_zh if language == Language.ZH else pulse.name_en


def find_conflict(selected: Sequence[PulseQuality], pulse_id: str) -> Optional[str]:
    selected_ids = {q.id for q in selected}
    for conflicting_id in PULSE_CONFLICTS.get(pulse_id, ()):
        if conflicting_id in selected_ids:
            return conflicting_id
    return None


def toggle_pulse_quality(
    selected: Sequence[PulseQuality],
    pulse_id: str,
    language: Language = Language.EN,
) -> PulseToggle:
    if pulse_id not in PULSE_TYPES_BY_ID:
        raise KeyError(f"Unknown pulse type: {pulse_id}")

    if any(q.id == pulse_id for q in selected):
        return PulseToggle([q for q in selected if q.id != pulse_id])

    conflicting_id = find_conflict(selected, pulse_id)
    if conflicting_id:
        warning = translate(
            TranslationKey.PULSE_CONFLICT_WARNING,
            language,
            first=_display_name(PULSE_TYPES_BY_ID[pulse_id], language),
            second=_display_name(PULSE_TYPES_BY_ID[conflicting_id], language),
        )
        return PulseToggle(list(selected), warning)

    pulse = PULSE_TYPES_BY_ID[pulse_id]
    added = PulseQuality(id=pulse.id, name_zh=pulse.name_zh, name_en=pulse.name_en)
    return PulseToggle(list(selected) + [added])


def _to_float(value: str) -> Optional[float]:
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def calculate_bmi(height_cm: str, weight_kg: str) -> Optional[float]:
    height = _to_float(height_cm)
    weight = _to_float(weight_kg)
    if not height or not weight or height <= 0 or weight <= 0:
        return None
    return round(weight / ((height / 100) ** 2), 1)


def bmi_category(bmi: float, language: Language = Language.EN) -> str:
    if bmi < 18.5:
        key = TranslationKey.BMI_UNDERWEIGHT
    elif bmi < 25:
        key = TranslationKey.BMI_NORMAL
    elif bmi < 30:
        key = TranslationKey.BMI_OVERWEIGHT
    else:
        key = TranslationKey.BMI_OBESE
    return translate(key, language)


def bpm_category(bpm: str, language: Language = Language.EN) -> Optional[str]:
    value = _to_float(bpm)
    if not value:
        return None
    if value < 60:
        key = TranslationKey.BPM_LOW
    elif value <= 100:
        key = TranslationKey.BPM_NORMAL
    else:
        key = TranslationKey.BPM_HIGH
    return translate(key, language)


def is_profile_complete(form: FormData) -> bool:
    return all([
        form.name.strip(),
        form.age.strip(),
        form.gender is not None,
        form.height.strip(),
        form.weight.strip(),
    ])
