"""Tests for step gates, pulse conflicts and vitals categories."""
import pytest

from src.domain.i18n import Language
from src.domain.models import FormData, Gender, PulseQuality
from src.domain.rules import (
    SELF_GATED_STEPS,
    bmi_category,
    bpm_category,
    calculate_bmi,
    can_proceed,
    is_profile_complete,
    toggle_pulse_quality,
)
from src.domain.steps import StepId


def _quality(pulse_id: str) -> PulseQuality:
    return PulseQuality(id=pulse_id, name_zh="", name_en=pulse_id)


class TestCanProceed:

    def test_basic_info_needs_name_age_gender(self):
        form = FormData(name="Mei", age="30")
        assert not can_proceed(StepId.BASIC_INFO, form)
        assert can_proceed(StepId.BASIC_INFO, form.merge({"gender": "female"}))

    def test_basic_info_whitespace_name_blocks(self):
        form = FormData(name="   ", age="30", gender=Gender.MALE)
        assert not can_proceed(StepId.BASIC_INFO, form)

    def test_symptoms_needs_main_concern(self):
        assert not can_proceed(StepId.SYMPTOMS, FormData())
        assert can_proceed(StepId.SYMPTOMS, FormData(main_concern="Headache"))

    def test_symptom_list_alone_does_not_unlock(self):
        assert not can_proceed(StepId.SYMPTOMS, FormData(symptoms=["Cough"]))

    @pytest.mark.parametrize("step_id", [StepId.UPLOAD_REPORTS, StepId.TONGUE, StepId.PULSE, StepId.ANALYSIS])
    def test_other_steps_open(self, step_id):
        assert can_proceed(step_id, FormData())

    def test_unknown_step_fails_open(self):
        assert can_proceed("not_a_step", FormData())

    def test_self_gated_steps(self):
        assert StepId.SELECT_DOCTOR in SELF_GATED_STEPS
        assert StepId.AUDIO in SELF_GATED_STEPS
        assert StepId.TONGUE not in SELF_GATED_STEPS


class TestTogglePulseQuality:

    def test_add(self):
        outcome = toggle_pulse_quality([], "hua")
        assert [q.id for q in outcome.selection] == ["hua"]
        assert outcome.selection[0].name_zh == "滑脉"
        assert outcome.warning is None

    def test_remove_when_selected(self):
        outcome = toggle_pulse_quality([_quality("hua"), _quality("xian")], "hua")
        assert [q.id for q in outcome.selection] == ["xian"]

    def test_conflict_leaves_selection_and_warns(self):
        selected = [_quality("fu")]
        outcome = toggle_pulse_quality(selected, "chen")
        assert [q.id for q in outcome.selection] == ["fu"]
        assert outcome.warning == "Deep cannot be selected together with Floating."

    def test_conflicts_are_symmetric(self):
        assert toggle_pulse_quality([_quality("hong")], "xi").warning
        assert toggle_pulse_quality([_quality("xi")], "hong").warning

    def test_warning_in_chinese(self):
        outcome = toggle_pulse_quality([_quality("chi")], "shuo", Language.ZH)
        assert outcome.warning == "数脉与迟脉不能同时选择。"

    def test_non_conflicting_pair(self):
        outcome = toggle_pulse_quality([_quality("xian")], "hua")
        assert [q.id for q in outcome.selection] == ["xian", "hua"]

    def test_unknown_pulse(self):
        with pytest.raises(KeyError):
            toggle_pulse_quality([], "unknown")


class TestVitals:

    def test_bmi(self):
        assert calculate_bmi("170", "65") == 22.5

    @pytest.mark.parametrize("height,weight", [("", "60"), ("170", ""), ("abc", "60"), ("0", "60")])
    def test_bmi_missing_inputs(self, height, weight):
        assert calculate_bmi(height, weight) is None

    @pytest.mark.parametrize("bmi,expected", [
        (17.0, "Underweight"),
        (18.5, "Normal"),
        (24.9, "Normal"),
        (25.0, "Overweight"),
        (30.0, "Obese"),
    ])
    def test_bmi_category(self, bmi, expected):
        assert bmi_category(bmi) == expected

    @pytest.mark.parametrize("bpm,expected", [("55", "Low"), ("60", "Normal"), ("100", "Normal"), ("101", "High")])
    def test_bpm_category(self, bpm, expected):
        assert bpm_category(bpm) == expected

    def test_bpm_category_empty(self):
        assert bpm_category("") is None

    def test_profile_complete(self):
        form = FormData(name="Mei", age="30", gender=Gender.FEMALE, height="160", weight="50")
        assert is_profile_complete(form)
        assert not is_profile_complete(form.merge({"weight": ""}))
