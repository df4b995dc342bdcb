from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class VisionAnalysis(BaseModel):
    model_config = ConfigDict(extra="allow")

    observation: str = ""
    potential_issues: List[str] = []
    confidence: Optional[float] = Field(None, ge=0, le=100)
    is_valid_image: bool = True


class TongueAnalysis(VisionAnalysis):
    tongue_color: Optional[str] = None
    tongue_shape: Optional[str] = None
    tongue_coating: Optional[str] = None
    moisture: Optional[str] = None


class FaceAnalysis(VisionAnalysis):
    complexion: Optional[str] = None
    facial_zones: Optional[str] = None
    skin_quality: Optional[str] = None
    eyes: Optional[str] = None
    lips: Optional[str] = None


class SoundCategory(BaseModel):
    model_config = ConfigDict(extra="allow")

    observation: str = ""
    severity: str = "normal"
    tcm_indicators: List[str] = []
    clinical_significance: str = ""


class ListeningAnalysis(BaseModel):
    model_config = ConfigDict(extra="allow")

    overall_observation: str = ""
    voice_quality_analysis: Optional[SoundCategory] = None
    breathing_patterns: Optional[SoundCategory] = None
    speech_patterns: Optional[SoundCategory] = None
    cough_sounds: Optional[SoundCategory] = None
    pattern_suggestions: List[str] = []
    recommendations: List[str] = []
    confidence: Union[str, float, None] = None
    is_valid_audio: bool = True


class ReportExtraction(BaseModel):
    model_config = ConfigDict(extra="allow")

    text: str = ""


class DiagnosisReport(BaseModel):
    """Final TCM report. Sections stay loosely typed; models vary in detail."""

    model_config = ConfigDict(extra="allow")

    diagnosis: Dict[str, Any]
    constitution: Dict[str, Any] = {}
    analysis: Dict[str, Any] = {}
    treatment: Dict[str, Any] = {}
    recommendations: Dict[str, Any] = {}

    @property
    def primary_pattern(self) -> str:
        return str(self.diagnosis.get("primary_pattern") or self.diagnosis.get("type") or "")

    @property
    def summary(self) -> str:
        return str(self.analysis.get("summary") or "")


class MediaData(BaseModel):
    path: Optional[str] = None
    local_uri: Optional[str] = None
    analysis: Optional[Dict[str, Any]] = None


class PulseData(BaseModel):
    bpm: int = 0
    qualities: List[Dict[str, Any]] = []
    analysis: Optional[Dict[str, Any]] = None


class HealthReportPayload(BaseModel):
    id: str
    user_id: str
    status: str = "completed"
    complaint: str
    symptoms: List[str]
    chat_log: List[Dict[str, Any]]
    tongue_data: MediaData
    face_data: MediaData
    voice_data: MediaData
    pulse_data: PulseData
    diagnosis: Dict[str, Any]
    recommendations: Dict[str, Any]
