"""Field-group updates for the intake steps.

Each function builds a patch for one group of fields and returns the merged
form; the wizard commits the result.
"""
import uuid
from typing import Any, Dict, Mapping, Optional

from src.domain.catalogs import (
    DEFAULT_DOCTOR_LEVEL_ID,
    DOCTOR_LEVELS,
    HEALTH_SERVICES,
    SYNC_DATA_TYPES,
    WEARABLE_DEVICES,
    default_sync_permissions,
)
from src.domain.errors import FormDataError
from src.domain.models import (
    CapturedMedia,
    DoctorSelection,
    FormData,
    Medicine,
    MedicineKind,
    SmartConnectData,
)


PROFILE_FIELDS = ("name", "age", "gender", "height", "weight")


def update_profile(form: FormData, **fields: Any) -> FormData:
    unknown = set(fields) - set(PROFILE_FIELDS)
    if unknown:
        raise FormDataError(f"Not a profile field: {', '.join(sorted(unknown))}")
    return form.merge(fields)


def apply_profile(form: FormData, profile: Mapping[str, Any]) -> FormData:
    """Prefill empty profile fields from the logged-in account."""
    patch: Dict[str, Any] = {}
    for field in PROFILE_FIELDS:
        value = profile.get(field)
        if value in (None, ""):
            continue
        current = getattr(form, field)
        if current in (None, ""):
            patch[field] = value
    return form.merge(patch) if patch else form


def set_main_concern(form: FormData, text: str) -> FormData:
    return form.merge({"main_concern": text})


def choose_main_concern(form: FormData, label: str) -> FormData:
    """Chip press on the main concern: picks the label, or clears it when already chosen."""
    return form.merge({"main_concern": "" if form.main_concern == label else label})


def toggle_symptom(form: FormData, symptom: str) -> FormData:
    lowered = symptom.strip().lower()
    if any(s.lower() == lowered for s in form.symptoms):
        return form.merge({"symptoms": [s for s in form.symptoms if s.lower() != lowered]})
    return form.merge({"symptoms": list(form.symptoms) + [symptom]})


def set_symptom_duration(form: FormData, duration: Optional[str]) -> FormData:
    return form.merge({"symptom_duration": duration})


def add_text_medicine(form: FormData, text: str) -> FormData:
    text = (text or "").strip()
    if not text:
        return form
    medicine = Medicine(id=uuid.uuid4().hex, type=MedicineKind.TEXT, name=text, content=text)
    return form.merge({"medicines": list(form.medicines) + [medicine]})


def add_image_medicine(form: FormData, media: CapturedMedia) -> FormData:
    medicine = Medicine(
        id=uuid.uuid4().hex,
        type=MedicineKind.IMAGE,
        name=f"Medicine Photo {len(form.medicines) + 1}",
        uri=media.uri,
        base64=media.base64,
    )
    return form.merge({"medicines": list(form.medicines) + [medicine]})


def remove_medicine(form: FormData, medicine_id: str) -> FormData:
    return form.merge({"medicines": [m for m in form.medicines if m.id != medicine_id]})


def doctor_selection(level_id: str = DEFAULT_DOCTOR_LEVEL_ID) -> DoctorSelection:
    for level in DOCTOR_LEVELS:
        if level.id == level_id:
            return DoctorSelection(doctor_level=level)
    raise KeyError(f"Unknown doctor level: {level_id}")


def select_doctor(form: FormData, level_id: str = DEFAULT_DOCTOR_LEVEL_ID) -> FormData:
    return form.merge({"doctor": doctor_selection(level_id)})


def simulated_sync_data(permissions: Optional[Mapping[str, bool]] = None) -> Dict[str, str]:
    permissions = default_sync_permissions() if permissions is None else permissions
    return {dt.id: dt.simulated_value for dt in SYNC_DATA_TYPES if permissions.get(dt.id)}


def connect_health_service(
    form: FormData,
    service_id: str,
    permissions: Optional[Mapping[str, bool]] = None,
) -> FormData:
    if service_id not in {s.id for s in HEALTH_SERVICES}:
        raise KeyError(f"Unknown health service: {service_id}")
    data = SmartConnectData(service=service_id, synced_data=simulated_sync_data(permissions))
    return form.merge({"smart_connect_data": data})


def connect_device(form: FormData, device_id: str) -> FormData:
    if device_id not in {d.id for d in WEARABLE_DEVICES}:
        raise KeyError(f"Unknown wearable device: {device_id}")
    current = form.smart_connect_data or SmartConnectData()
    return form.merge({"smart_connect_data": current.model_copy(update={"device": device_id})})


def disconnect_health_service(form: FormData) -> FormData:
    return form.merge({"smart_connect_data": None})
