"""
Response schemas for structured Gemini output.

The ``*_SCHEMA`` dicts use the OpenAPI subset accepted by ``responseSchema``
and are sent with the request. The pydantic models mirror them and validate
the reply, so a payload is only accepted when it matches the requested shape.
Job extraction runs with search grounding, which cannot carry a response
schema, so ``JobDetailsPayload`` has no dict counterpart.
"""

import re
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, Field, ValidationError, field_validator

FIT_ANALYSIS_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "fitScore": {"type": "INTEGER", "description": "A score from 0-100"},
        "summary": {"type": "STRING", "description": "A one-sentence summary"},
        "pros": {"type": "ARRAY", "items": {"type": "STRING"}, "description": "List of matching qualifications"},
        "cons": {"type": "ARRAY", "items": {"type": "STRING"}, "description": "List of potential gaps"},
    },
    "required": ["fitScore", "summary", "pros", "cons"],
}

INTERVIEW_QUESTIONS_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "questions": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "type": {"type": "STRING", "description": "Behavioral, Technical or Situational"},
                    "question": {"type": "STRING", "description": "The interview question"},
                    "tip": {"type": "STRING", "description": "How to approach answering it"},
                },
                "required": ["type", "question", "tip"],
            },
        },
    },
    "required": ["questions"],
}


class FitAnalysisPayload(BaseModel):
    """Fit analysis as returned by the model."""

    fit_score: int = Field(alias="fitScore", description="A score from 0-100")
    summary: str
    pros: List[str]
    cons: List[str]

    @field_validator("fit_score", mode="before")
    @classmethod
    def reject_boolean_score(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("fitScore must be a number")
        return value


class InterviewQuestionPayload(BaseModel):
    type: str
    question: str
    tip: str


class InterviewQuestionsPayload(BaseModel):
    questions: List[InterviewQuestionPayload]


class JobDetailsPayload(BaseModel):
    """Job posting fields read from a page via search grounding."""

    title: str
    company: str
    location: str
    description: str
    url: str


PayloadT = TypeVar("PayloadT", bound=BaseModel)

_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL | re.IGNORECASE)


def strip_code_fence(text: str) -> str:
    """Remove a surrounding markdown code fence if the model added one."""
    stripped = text.strip()
    match = _FENCE_RE.match(stripped)
    return match.group(1) if match else stripped


def describe_validation_error(error: ValidationError, limit: int = 5) -> str:
    """Summarize a ``ValidationError`` by location without echoing the input."""
    problems = []
    for detail in error.errors()[:limit]:
        location = ".".join(str(part) for part in detail["loc"]) or "$"
        problems.append(f"{location}: {detail['msg']}")
    return "; ".join(problems)


def parse_structured(text: str, model: Type[PayloadT]) -> Tuple[Optional[PayloadT], Optional[str]]:
    """Decode and validate model output against ``model``.

    Returns ``(payload, None)`` on success and ``(None, reason)`` otherwise.
    """
    if not text or not text.strip():
        return None, "empty response"
    try:
        return model.model_validate_json(strip_code_fence(text)), None
    except ValidationError as e:
        return None, describe_validation_error(e)
