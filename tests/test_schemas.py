"""Tests for reply models and structured parsing."""

import json

import pytest

from career_companion.ai_processing.schemas import (
    FitAnalysisPayload,
    InterviewQuestionsPayload,
    JobDetailsPayload,
    parse_structured,
    strip_code_fence,
)

GOOD_FIT = {"fitScore": 87, "summary": "Great match.", "pros": ["React"], "cons": ["No Go"]}


def fit_reply(**overrides) -> str:
    return json.dumps(dict(GOOD_FIT, **overrides))


class TestFitAnalysisPayload:
    def test_conforming_payload(self) -> None:
        payload, problem = parse_structured(fit_reply(), FitAnalysisPayload)

        assert problem is None
        assert payload.fit_score == 87
        assert payload.pros == ["React"]

    def test_missing_required_field(self) -> None:
        data = {k: v for k, v in GOOD_FIT.items() if k != "cons"}
        payload, problem = parse_structured(json.dumps(data), FitAnalysisPayload)

        assert payload is None
        assert problem.startswith("cons:")

    def test_wrong_item_type(self) -> None:
        payload, problem = parse_structured(fit_reply(pros=["React", 3]), FitAnalysisPayload)

        assert payload is None
        assert problem.startswith("pros.1:")

    @pytest.mark.parametrize("score,valid", [(87, True), (87.0, True), (87.5, False), (True, False)])
    def test_integer_rules(self, score, valid: bool) -> None:
        payload, problem = parse_structured(fit_reply(fitScore=score), FitAnalysisPayload)
        assert (problem is None) is valid
        if valid:
            assert payload.fit_score == 87

    def test_top_level_type(self) -> None:
        payload, problem = parse_structured("[]", FitAnalysisPayload)
        assert payload is None
        assert problem


class TestInterviewQuestionsPayload:
    def test_nested_location_is_reported(self) -> None:
        data = {"questions": [{"type": "Technical", "question": "Explain hooks."}]}

        payload, problem = parse_structured(json.dumps(data), InterviewQuestionsPayload)

        assert payload is None
        assert problem.startswith("questions.0.tip:")

    def test_empty_question_list_is_valid(self) -> None:
        payload, problem = parse_structured('{"questions": []}', InterviewQuestionsPayload)
        assert problem is None
        assert payload.questions == []


class TestParseStructured:
    def test_fenced_json(self) -> None:
        job = {
            "title": "Data Engineer",
            "company": "Acme",
            "location": "Remote",
            "description": "Pipelines.",
            "url": "https://acme.example/jobs/1",
        }
        text = f"```json\n{json.dumps(job)}\n```"

        payload, problem = parse_structured(text, JobDetailsPayload)

        assert problem is None
        assert payload.model_dump() == job

    def test_invalid_json(self) -> None:
        payload, problem = parse_structured("Sure! Here you go", FitAnalysisPayload)
        assert payload is None
        assert "Sure!" not in problem

    def test_empty_text(self) -> None:
        assert parse_structured("   ", FitAnalysisPayload) == (None, "empty response")


def test_strip_code_fence_leaves_bare_text() -> None:
    assert strip_code_fence('  {"a": 1}  ') == '{"a": 1}'
    assert strip_code_fence('```\n{"a": 1}\n```') == '{"a": 1}'
