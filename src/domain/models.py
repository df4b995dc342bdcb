import re
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from src.domain.errors import FormDataError


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class SymptomDuration(str, Enum):
    FEW_DAYS = "few_days"
    ONE_TWO_WEEKS = "1_2_weeks"
    ONE_THREE_MONTHS = "1_3_months"
    CHRONIC = "chronic"


class MessageRole(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class MedicineKind(str, Enum):
    TEXT = "text"
    IMAGE = "image"


class Medicine(BaseModel):
    id: str
    type: MedicineKind
    name: str
    content: Optional[str] = None
    uri: Optional[str] = None
    base64: Optional[str] = None


class PulseQuality(BaseModel):
    id: str
    name_zh: str
    name_en: str


class SmartConnectData(BaseModel):
    service: Optional[str] = None
    device: Optional[str] = None
    synced_data: Dict[str, str] = {}


class ChatMessage(BaseModel):
    id: str
    role: MessageRole
    content: str


class DoctorLevel(BaseModel):
    id: str
    name: str
    name_zh: str = ""
    description: str = ""
    model: str


class DoctorSelection(BaseModel):
    doctor_level: DoctorLevel


class UploadedFile(BaseModel):
    id: str
    uri: str
    name: str
    mime_type: str = "image/jpeg"
    extracted_text: str = ""


class CapturedMedia(BaseModel):
    """What a camera, gallery, microphone or file picker hands back."""

    uri: str
    base64: Optional[str] = None
    mime_type: str = "image/jpeg"


_DIGITS = re.compile(r"^\d*$")
_DECIMAL = re.compile(r"^\d*(\.\d+)?$")


def _numeric_text(value: Any, pattern: re.Pattern, field: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        raise ValueError(f"{field} must be numeric")
    if isinstance(value, float) and not value.is_integer() and pattern is _DIGITS:
        raise ValueError(f"{field} must be a whole number")
    if isinstance(value, (int, float)):
        value = str(int(value)) if float(value).is_integer() else str(value)
    value = str(value).strip()
    if not pattern.match(value):
        raise ValueError(f"{field} must be numeric")
    return value


class FormData(BaseModel):
    """The record every wizard step reads and patches.

    Empty values mean "not yet provided". Instances are replaced, never
    mutated: ``merge`` validates the patch and returns a new copy.
    """

    model_config = ConfigDict(extra="forbid")

    # profile
    name: str = ""
    age: str = ""
    gender: Optional[Gender] = None
    height: str = ""
    weight: str = ""

    # clinical intake
    main_concern: str = ""
    symptoms: List[str] = []
    symptom_details: str = ""
    symptom_duration: Optional[SymptomDuration] = None
    medicines: List[Medicine] = []
    files: List[UploadedFile] = []

    # modalities
    tongue_image: Optional[str] = None
    tongue_analysis: Optional[Dict[str, Any]] = None
    face_image: Optional[str] = None
    face_analysis: Optional[Dict[str, Any]] = None
    audio_recording: Optional[str] = None
    audio_analysis: Optional[Dict[str, Any]] = None
    bpm: str = ""
    pulse_qualities: List[PulseQuality] = []
    smart_connect_data: Optional[SmartConnectData] = None

    # conversation
    inquiry_chat: List[ChatMessage] = []
    inquiry_summary: str = ""

    doctor: Optional[DoctorSelection] = None
    report: Optional[Dict[str, Any]] = None

    @field_validator("name", "main_concern", "symptom_details", mode="before")
    @classmethod
    def validate_text(cls, v: Any):
        return "" if v is None else v

    @field_validator("age", "bpm", mode="before")
    @classmethod
    def validate_whole_number(cls, v: Any, info):
        text = _numeric_text(v, _DIGITS, info.field_name)
        if info.field_name == "bpm" and len(text) > 3:
            raise ValueError("bpm has at most 3 digits")
        return text

    @field_validator("height", "weight", mode="before")
    @classmethod
    def validate_measurement(cls, v: Any, info):
        return _numeric_text(v, _DECIMAL, info.field_name)

    @field_validator("gender", "symptom_duration", mode="before")
    @classmethod
    def validate_blank_enum(cls, v: Any):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("symptoms", mode="before")
    @classmethod
    def validate_symptoms(cls, v: Any):
        if v is None:
            return []
        if isinstance(v, str):
            v = v.split(",")
        tokens: List[str] = []
        seen = set()
        for item in v:
            token = str(item).strip()
            if token and token.lower() not in seen:
                seen.add(token.lower())
                tokens.append(token)
        return tokens

    def merge(self, patch: Mapping[str, Any]) -> "FormData":
        unknown = sorted(set(patch) - set(type(self).model_fields))
        if unknown:
            raise FormDataError(f"Unknown form fields: {', '.join(unknown)}")
        merged = dict(self)
        merged.update(patch)
        try:
            return type(self).model_validate(merged)
        except ValidationError as e:
            raise FormDataError(str(e)) from e

