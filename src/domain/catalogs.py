from typing import Dict, List, NamedTuple, Tuple

from src.domain.models import DoctorLevel, SymptomDuration


class PulseType(NamedTuple):
    id: str
    name_zh: str
    name_en: str
    description: str


# Traditional 12 TCM pulse types (脉象类型)
PULSE_TYPES: Tuple[PulseType, ...] = (
    PulseType("hua", "滑脉", "Slippery", "Smooth and flowing"),
    PulseType("se", "涩脉", "Rough", "Unsmooth and hesitant"),
    PulseType("xian", "弦脉", "Wiry", "Taut like a bowstring"),
    PulseType("jin", "紧脉", "Tight", "Tight and forceful"),
    PulseType("xi", "细脉", "Thin", "Fine like a thread"),
    PulseType("hong", "洪脉", "Surging", "Large and forceful"),
    PulseType("ruo", "弱脉", "Weak", "Soft and weak"),
    PulseType("chen", "沉脉", "Deep", "Felt only with pressure"),
    PulseType("fu", "浮脉", "Floating", "Superficial, light touch"),
    PulseType("chi", "迟脉", "Slow", "Slow rate (<60)"),
    PulseType("shuo", "数脉", "Rapid", "Fast rate (>90)"),
    PulseType("normal", "平脉", "Normal", "Balanced and regular"),
)

PULSE_TYPES_BY_ID: Dict[str, PulseType] = {p.id: p for p in PULSE_TYPES}

_CONFLICTING_PAIRS = (
    ("xi", "hong"),
    ("hong", "ruo"),
    ("hua", "se"),
    ("fu", "chen"),
    ("chi", "shuo"),
)


def _symmetric(pairs) -> Dict[str, Tuple[str, ...]]:
    table: Dict[str, List[str]] = {}
    for a, b in pairs:
        table.setdefault(a, []).append(b)
        table.setdefault(b, []).append(a)
    return {k: tuple(v) for k, v in table.items()}


PULSE_CONFLICTS: Dict[str, Tuple[str, ...]] = _symmetric(_CONFLICTING_PAIRS)


DOCTOR_LEVELS: Tuple[DoctorLevel, ...] = (
    DoctorLevel(
        id="master",
        name="Master Physician",
        name_zh="国医大师",
        description="Expert consultation",
        model="mistral-large-latest",
    ),
    DoctorLevel(
        id="expert",
        name="Senior Physician",
        name_zh="主任医师",
        description="Advanced analysis",
        model="mistral-medium-latest",
    ),
    DoctorLevel(
        id="physician",
        name="Physician",
        name_zh="医师",
        description="Standard consultation",
        model="mistral-small-latest",
    ),
)

DEFAULT_DOCTOR_LEVEL_ID = "physician"


SYMPTOM_CATEGORIES: Dict[str, Dict[str, Tuple[str, ...]]] = {
    "simple": {
        "Common Symptoms": ("Fever", "Cough", "Headache", "Fatigue", "Sore Throat", "Stomach Pain"),
        "Chronic / Critical": (
            "High Blood Pressure", "Diabetes", "Heart Disease", "Shortness Of Breath",
            "Stroke", "Cancer", "Pneumonia",
        ),
    },
    "western": {
        "Respiratory": ("Cough", "Shortness Of Breath", "Sore Throat", "Pneumonia"),
        "Digestive": ("Stomach Pain",),
        "Neurological": ("Headache", "Stroke", "Fatigue"),
        "Cardiovascular": ("High Blood Pressure", "Heart Disease"),
        "General": ("Fever", "Diabetes", "Cancer"),
    },
    "tcm": {
        "Wood (Liver)": ("Headache", "Stroke", "High Blood Pressure"),
        "Fire (Heart)": ("Heart Disease", "Fever"),
        "Earth (Spleen)": ("Stomach Pain", "Fatigue", "Diabetes"),
        "Metal (Lung)": ("Cough", "Shortness Of Breath", "Sore Throat", "Pneumonia"),
        "Water (Kidney)": ("Cancer",),
    },
}

DURATION_OPTIONS: Tuple[Tuple[SymptomDuration, str], ...] = (
    (SymptomDuration.FEW_DAYS, "Few days"),
    (SymptomDuration.ONE_TWO_WEEKS, "1-2 weeks"),
    (SymptomDuration.ONE_THREE_MONTHS, "1-3 months"),
    (SymptomDuration.CHRONIC, "Chronic"),
)


class HealthService(NamedTuple):
    id: str
    name: str
    platform: str


class SyncDataType(NamedTuple):
    id: str
    label: str
    simulated_value: str
    enabled_by_default: bool


HEALTH_SERVICES: Tuple[HealthService, ...] = (
    HealthService("apple_health", "Apple Health", "ios"),
    HealthService("google_fit", "Google Fit", "android"),
)

WEARABLE_DEVICES: Tuple[HealthService, ...] = (
    HealthService("apple_watch", "Apple Watch", "ios"),
    HealthService("galaxy_watch", "Galaxy Watch", "android"),
    HealthService("fitbit", "Fitbit", "both"),
    HealthService("garmin", "Garmin", "both"),
    HealthService("xiaomi", "Mi Band", "both"),
)

SYNC_DATA_TYPES: Tuple[SyncDataType, ...] = (
    SyncDataType("steps", "Steps", "8,432", True),
    SyncDataType("sleep", "Sleep", "7h 23m", True),
    SyncDataType("heart_rate", "Avg HR", "72 bpm", True),
    SyncDataType("spo2", "SpO2", "98%", True),
    SyncDataType("activity", "Activity", "45 min", False),
    SyncDataType("stress", "Stress", "Low", False),
)


def default_sync_permissions() -> Dict[str, bool]:
    return {dt.id: dt.enabled_by_default for dt in SYNC_DATA_TYPES}


def available_for(platform: str, catalog) -> List[HealthService]:
    return [item for item in catalog if item.platform in (platform, "both")]
