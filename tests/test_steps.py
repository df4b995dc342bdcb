"""Tests for the step registry and progress phases."""
from src.domain.i18n import Language
from src.domain.steps import STEP_PHASES, StepId, build_steps, phase_index


class TestBuildSteps:

    def test_guest_skips_profile_summary(self):
        steps = build_steps(False)
        ids = [s.id for s in steps]
        assert len(steps) == 13
        assert StepId.PROFILE_SUMMARY not in ids
        assert ids[0] == StepId.BASIC_INFO
        assert ids[-1] == StepId.ANALYSIS

    def test_logged_in_inserts_profile_summary_second(self):
        ids = [s.id for s in build_steps(True)]
        assert len(ids) == 14
        assert ids[1] == StepId.PROFILE_SUMMARY
        assert ids[2] == StepId.SYMPTOMS

    def test_fixed_order(self):
        ids = [s.id for s in build_steps(False)]
        assert ids == [
            StepId.BASIC_INFO,
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
        ]

    def test_same_arguments_same_object(self):
        assert build_steps(True, Language.EN) is build_steps(True, Language.EN)

    def test_labels_follow_language(self):
        en = build_steps(False, Language.EN)
        zh = build_steps(False, Language.ZH)
        assert en[0].label == "Basic Info"
        assert zh[0].label == "基本信息"
        assert [s.id for s in en] == [s.id for s in zh]

    def test_partial_language_falls_back_to_english(self):
        ms = {s.id: s.label for s in build_steps(True, Language.MS)}
        assert ms[StepId.BASIC_INFO] == "Maklumat Asas"
        assert ms[StepId.SMART_CONNECT] == "Devices"


class TestPhases:

    def test_every_step_belongs_to_one_phase(self):
        for step in build_steps(True):
            owners = [p for p in STEP_PHASES if step.id in p.step_ids]
            assert len(owners) == 1, step.id

    def test_phase_index(self):
        assert phase_index(StepId.BASIC_INFO) == 0
        assert phase_index(StepId.SELECT_DOCTOR) == 1
        assert phase_index(StepId.INQUIRY_SUMMARY) == 2
        assert phase_index(StepId.PULSE) == 3
        assert phase_index(StepId.ANALYSIS) == 4

    def test_results_view_is_last_phase(self):
        assert phase_index(None) == len(STEP_PHASES) - 1
