"""Tests for AI response parsing and suggested answers."""
import pytest

from src.application.parsing import (
    extract_json,
    extract_options,
    fallback_options,
    parse_analysis,
    strip_code_fences,
)
from src.application.schemas import ListeningAnalysis, TongueAnalysis
from src.domain.errors import AnalysisError
from src.domain.i18n import Language


class TestExtractJson:

    def test_plain_object(self):
        assert extract_json('{"observation": "pale"}') == {"observation": "pale"}

    def test_fenced_object(self):
        text = '```json\n{"observation": "red tip", "confidence": 70}\n```'
        assert extract_json(text) == {"observation": "red tip", "confidence": 70}

    def test_prose_around_object(self):
        text = 'Here is the analysis:\n{"observation": "thin coating"}\nHope this helps!'
        assert extract_json(text)["observation"] == "thin coating"

    def test_invalid_json(self):
        with pytest.raises(AnalysisError):
            extract_json("I cannot analyze this image.")

    def test_array_is_not_an_object(self):
        with pytest.raises(AnalysisError):
            extract_json("[1, 2, 3]")

    def test_strip_code_fences(self):
        assert strip_code_fences("```\nhello\n```") == "hello"


class TestParseAnalysis:

    def test_tongue_analysis(self):
        text = (
            '{"observation": "Pale tongue with teeth marks", "potential_issues": ["Spleen Qi Deficiency"],'
            ' "confidence": 80, "tongue_color": "pale", "is_valid_image": true}'
        )
        result = parse_analysis(text, TongueAnalysis)
        assert result.tongue_color == "pale"
        assert result.potential_issues == ["Spleen Qi Deficiency"]
        assert result.is_valid_image

    def test_extra_fields_are_kept(self):
        result = parse_analysis('{"observation": "ok", "tcm_pattern": "Damp Heat"}', TongueAnalysis)
        assert result.model_dump()["tcm_pattern"] == "Damp Heat"

    def test_confidence_out_of_range(self):
        with pytest.raises(AnalysisError, match="TongueAnalysis"):
            parse_analysis('{"observation": "ok", "confidence": 250}', TongueAnalysis)

    def test_listening_analysis_nested_categories(self):
        text = (
            '{"overall_observation": "Weak voice", "voice_quality_analysis":'
            ' {"observation": "low volume", "severity": "mild", "tcm_indicators": ["Lung Qi Deficiency"]},'
            ' "is_valid_audio": true}'
        )
        result = parse_analysis(text, ListeningAnalysis)
        assert result.voice_quality_analysis.tcm_indicators == ["Lung Qi Deficiency"]


class TestExtractOptions:

    def test_options_are_split_out(self):
        text = "How long have you had this headache?\n<OPTIONS>A few days, 1-2 weeks, Over a month</OPTIONS>"
        clean, options = extract_options(text)
        assert clean == "How long have you had this headache?"
        assert options == ["A few days", "1-2 weeks", "Over a month"]

    def test_case_insensitive_and_multiline(self):
        clean, options = extract_options("Any fever?\n<options>\nYes,\nNo\n</options>")
        assert clean == "Any fever?"
        assert options == ["Yes", "No"]

    def test_no_options(self):
        assert extract_options("  Tell me more.  ") == ("Tell me more.", [])

    def test_empty_options_block(self):
        clean, options = extract_options("Anything else?<OPTIONS> , </OPTIONS>")
        assert clean == "Anything else?"
        assert options == []


class TestFallbackOptions:

    @pytest.mark.parametrize("question,first", [
        ("How long have you had trouble sleeping?", "A few days"),
        ("How often do the headaches come?", "Every day"),
        ("How severe is the pain?", "Mild"),
        ("Are you sleeping well?", "Sleep well"),
        ("How is your appetite lately?", "Normal appetite"),
        ("Have you been under stress at work?", "Feeling calm"),
        ("What time of day is it worst?", "Morning"),
        ("Where do you feel the pain?", "Head/neck area"),
        ("Do you have chills at night?", "Yes, frequently"),
        ("Tell me about your family history.", "Yes"),
    ])
    def test_rules(self, question, first):
        assert fallback_options(question)[0] == first

    def test_four_options(self):
        assert len(fallback_options("How often?")) == 4

    def test_generic_options_translated(self):
        assert fallback_options("请描述一下", Language.ZH) == ["是", "否", "有时", "不确定"]
