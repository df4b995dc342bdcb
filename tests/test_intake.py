"""Tests for the intake step updates."""
import pytest

from src.application import intake
from src.domain.errors import FormDataError
from src.domain.models import CapturedMedia, FormData, Gender, MedicineKind, SymptomDuration


class TestProfile:

    def test_update_profile(self):
        form = intake.update_profile(FormData(), name="Mei Tan", age="34", gender="female")
        assert form.name == "Mei Tan"
        assert form.gender == Gender.FEMALE

    def test_update_profile_rejects_other_fields(self):
        with pytest.raises(FormDataError):
            intake.update_profile(FormData(), main_concern="Cough")

    def test_apply_profile_fills_only_empty_fields(self):
        form = FormData(name="Mei", weight="50")
        account = {"name": "Mei Tan", "age": "34", "gender": "female", "height": "160", "weight": "52", "email": "x"}
        form = intake.apply_profile(form, account)
        assert form.name == "Mei"
        assert form.weight == "50"
        assert form.age == "34"
        assert form.height == "160"

    def test_apply_empty_profile_returns_same_form(self):
        form = FormData()
        assert intake.apply_profile(form, {"age": "", "gender": None}) is form


class TestSymptoms:

    def test_choose_main_concern_toggles(self):
        form = intake.choose_main_concern(FormData(), "Cough")
        assert form.main_concern == "Cough"
        assert intake.choose_main_concern(form, "Cough").main_concern == ""
        assert intake.choose_main_concern(form, "Fever").main_concern == "Fever"

    def test_set_main_concern(self):
        assert intake.set_main_concern(FormData(), "Back pain").main_concern == "Back pain"

    def test_toggle_symptom_case_insensitive(self):
        form = intake.toggle_symptom(FormData(), "Fatigue")
        form = intake.toggle_symptom(form, "Headache")
        form = intake.toggle_symptom(form, "fatigue")
        assert form.symptoms == ["Headache"]

    def test_duration(self):
        form = intake.set_symptom_duration(FormData(), "chronic")
        assert form.symptom_duration == SymptomDuration.CHRONIC
        assert intake.set_symptom_duration(form, None).symptom_duration is None


class TestMedicines:

    def test_text_medicine(self):
        form = intake.add_text_medicine(FormData(), "  Ginseng tea ")
        assert form.medicines[0].type == MedicineKind.TEXT
        assert form.medicines[0].name == "Ginseng tea"

    def test_blank_text_ignored(self):
        form = FormData()
        assert intake.add_text_medicine(form, "   ") is form

    def test_image_medicine_numbered(self):
        media = CapturedMedia(uri="media/pill.jpg", base64="aGk=")
        form = intake.add_text_medicine(FormData(), "Metformin")
        form = intake.add_image_medicine(form, media)
        assert form.medicines[1].name == "Medicine Photo 2"
        assert form.medicines[1].uri == "media/pill.jpg"

    def test_remove(self):
        form = intake.add_text_medicine(FormData(), "A")
        form = intake.add_text_medicine(form, "B")
        form = intake.remove_medicine(form, form.medicines[0].id)
        assert [m.name for m in form.medicines] == ["B"]


class TestDoctor:

    def test_default_doctor(self):
        selection = intake.doctor_selection()
        assert selection.doctor_level.id == "physician"
        assert selection.doctor_level.model == "mistral-small-latest"

    def test_select_doctor(self):
        assert intake.select_doctor(FormData(), "master").doctor.doctor_level.name == "Master Physician"

    def test_unknown_doctor(self):
        with pytest.raises(KeyError):
            intake.doctor_selection("intern")


class TestSmartConnect:

    def test_connect_with_default_permissions(self):
        form = intake.connect_health_service(FormData(), "apple_health")
        data = form.smart_connect_data
        assert data.service == "apple_health"
        assert data.synced_data == {"steps": "8,432", "sleep": "7h 23m", "heart_rate": "72 bpm", "spo2": "98%"}

    def test_connect_with_selected_permissions(self):
        form = intake.connect_health_service(FormData(), "google_fit", {"stress": True, "steps": False})
        assert form.smart_connect_data.synced_data == {"stress": "Low"}

    def test_connect_device_keeps_service(self):
        form = intake.connect_health_service(FormData(), "apple_health")
        form = intake.connect_device(form, "apple_watch")
        assert form.smart_connect_data.service == "apple_health"
        assert form.smart_connect_data.device == "apple_watch"

    def test_unknown_service_and_device(self):
        with pytest.raises(KeyError):
            intake.connect_health_service(FormData(), "myspace")
        with pytest.raises(KeyError):
            intake.connect_device(FormData(), "pager")

    def test_disconnect(self):
        form = intake.connect_health_service(FormData(), "apple_health")
        assert intake.disconnect_health_service(form).smart_connect_data is None
