"""
Career Assistant - AI orchestration for the job tracker.

This module wraps the LLM manager with one method per AI feature: fit
analysis, application content generation and improvement, interview prep,
company research, job import from a URL, document text extraction and the
free-form chat assistant. Each method issues exactly one request and returns
an ``AIResult``; transport, parse and configuration failures are reported
with an operation-specific message and never raised.
"""

from dataclasses import asdict, dataclass, field
from typing import Callable, Dict, List, Optional, Type

from pydantic import BaseModel

from .llm_manager import LLMManager, LLMRequest, LLMResponse, Part, Source, dedupe_sources
from .results import AIErrorKind, AIResult, PARSE_ERROR_MESSAGE
from .schemas import (
    FIT_ANALYSIS_SCHEMA,
    INTERVIEW_QUESTIONS_SCHEMA,
    FitAnalysisPayload,
    InterviewQuestionsPayload,
    JobDetailsPayload,
    parse_structured,
)
from . import prompts
from ..tracker.models import ContentType, FitAnalysis, InterviewPrep, InterviewQuestion
from ..utils import get_ai_logger

logger = get_ai_logger()

GENERATION_FAILED = "Failed to generate content."

FAILURE_MESSAGES = {
    "analyze_fit": "Failed to analyze job fit. Please try again.",
    "generate_cover_letter": GENERATION_FAILED,
    "generate_resume_bullets": GENERATION_FAILED,
    "generate_outreach_pitch": GENERATION_FAILED,
    "improve_content": "Failed to improve content.",
    "generate_interview_questions": "Failed to generate interview questions.",
    "research_company": "Failed to research company.",
    "extract_job_details": "Failed to extract job details from the URL.",
    "extract_text_from_file": "Failed to extract text from file.",
    "send_message_to_bot": "Sorry, I ran into an error. Please try again.",
}

NOT_CONFIGURED_MESSAGE = "The AI assistant is not configured. Add a Gemini API key to use this feature."


@dataclass
class ExtractedJob:
    """Job posting fields read from a URL."""
    title: str
    company: str
    location: str
    description: str
    url: str

    def to_job_data(self) -> Dict[str, str]:
        return asdict(self)


@dataclass
class BotReply:
    text: str
    sources: List[Source] = field(default_factory=list)


class CareerAssistant:
    """Typed client for every AI flow used by the tracker and the chat."""

    def __init__(self, llm_manager: Optional[LLMManager] = None, chat_thinking_budget: Optional[int] = None):
        self.llm = llm_manager or LLMManager()
        if chat_thinking_budget is None:
            chat_thinking_budget = self.llm.config.chat_thinking_budget
        self.chat_thinking_budget = chat_thinking_budget

    # -- plumbing -------------------------------------------------------

    async def _call(self, operation: str, request: LLMRequest) -> AIResult[LLMResponse]:
        """Send one request and map transport problems to a failed result."""
        message = FAILURE_MESSAGES[operation]

        if not self.llm.is_available():
            logger.warning(f"{operation} skipped: no AI provider configured", operation=operation)
            return AIResult.fail(operation, NOT_CONFIGURED_MESSAGE, AIErrorKind.CONFIGURATION)

        logger.operation_started(operation)
        try:
            response = await self.llm.generate(request)
        except Exception as e:
            logger.exception(f"{operation} raised unexpectedly: {e}", operation=operation)
            return AIResult.fail(operation, message, AIErrorKind.TRANSPORT)

        if not response.success:
            logger.operation_failed(operation, response.error or "unknown error")
            return AIResult.fail(operation, message, AIErrorKind.TRANSPORT)

        return AIResult.ok(operation, response)

    def _parse_failure(self, operation: str, detail: str) -> AIResult:
        """Fail with the operation message followed by the generic parse text."""
        logger.operation_failed(operation, detail)
        return AIResult.fail(
            operation, f"{FAILURE_MESSAGES[operation]} {PARSE_ERROR_MESSAGE}", AIErrorKind.PARSE
        )

    async def _text_flow(self, operation: str, request: LLMRequest) -> AIResult[str]:
        result = await self._call(operation, request)
        if not result.success:
            return result
        text = result.data.content.strip()
        if not text:
            return self._parse_failure(operation, "empty response text")
        return AIResult.ok(operation, text)

    async def _structured_flow(
        self,
        operation: str,
        request: LLMRequest,
        model: Type[BaseModel],
        build: Callable[[BaseModel], object],
    ) -> AIResult:
        result = await self._call(operation, request)
        if not result.success:
            return result

        payload, problem = parse_structured(result.data.content, model)
        if problem is not None:
            return self._parse_failure(operation, f"unparseable response: {problem}")

        try:
            return AIResult.ok(operation, build(payload))
        except ValueError as e:
            return self._parse_failure(operation, f"response could not be converted: {e}")

    # -- job-specific flows ---------------------------------------------

    async def analyze_fit(self, job_description: str, resume: str) -> AIResult[FitAnalysis]:
        """Score the resume against the job; the score is not clamped."""
        request = LLMRequest(
            contents=prompts.build_fit_analysis_prompt(job_description, resume),
            response_schema=FIT_ANALYSIS_SCHEMA,
        )

        def build(payload: FitAnalysisPayload) -> FitAnalysis:
            return FitAnalysis(
                fit_score=payload.fit_score,
                summary=payload.summary,
                pros=list(payload.pros),
                cons=list(payload.cons),
            )

        return await self._structured_flow("analyze_fit", request, FitAnalysisPayload, build)

    async def generate_cover_letter(self, job_description: str, resume: str) -> AIResult[str]:
        request = LLMRequest(contents=prompts.build_cover_letter_prompt(job_description, resume))
        return await self._text_flow("generate_cover_letter", request)

    async def generate_resume_bullets(self, job_description: str, resume: str) -> AIResult[str]:
        request = LLMRequest(contents=prompts.build_resume_bullets_prompt(job_description, resume))
        return await self._text_flow("generate_resume_bullets", request)

    async def generate_outreach_pitch(self, job_description: str, resume: str) -> AIResult[str]:
        request = LLMRequest(contents=prompts.build_outreach_pitch_prompt(job_description, resume))
        return await self._text_flow("generate_outreach_pitch", request)

    async def generate_content(self, content_type: ContentType, job_description: str, resume: str) -> AIResult[str]:
        """Dispatch to the text generator for ``content_type``."""
        generators = {
            ContentType.COVER_LETTER: self.generate_cover_letter,
            ContentType.RESUME_BULLETS: self.generate_resume_bullets,
            ContentType.OUTREACH_PITCH: self.generate_outreach_pitch,
        }
        if content_type not in generators:
            raise ValueError(f"{content_type.value} is not a text content type")
        return await generators[content_type](job_description, resume)

    async def improve_content(self, content: str) -> AIResult[str]:
        request = LLMRequest(contents=prompts.build_improve_prompt(content))
        return await self._text_flow("improve_content", request)

    async def generate_interview_questions(self, job_description: str, resume: str) -> AIResult[InterviewPrep]:
        """Likely interview questions; the item count is whatever the model returns."""
        request = LLMRequest(
            contents=prompts.build_interview_questions_prompt(job_description, resume),
            response_schema=INTERVIEW_QUESTIONS_SCHEMA,
        )
        def build(payload: InterviewQuestionsPayload) -> InterviewPrep:
            return InterviewPrep([
                InterviewQuestion(type=q.type, question=q.question, tip=q.tip) for q in payload.questions
            ])

        return await self._structured_flow(
            "generate_interview_questions", request, InterviewQuestionsPayload, build
        )

    async def research_company(self, company_name: str, job_title: str) -> AIResult[str]:
        request = LLMRequest(
            contents=prompts.build_company_research_prompt(company_name, job_title),
            use_search=True,
        )
        return await self._text_flow("research_company", request)

    async def extract_job_details(self, url: str) -> AIResult[ExtractedJob]:
        """Read a job posting behind ``url``.

        Search grounding cannot be combined with a response schema, so the
        JSON shape is requested in the prompt and validated locally.
        """
        request = LLMRequest(contents=prompts.build_job_extraction_prompt(url), use_search=True)

        def build(payload: JobDetailsPayload) -> ExtractedJob:
            if not payload.title.strip():
                raise ValueError("no job posting found at URL")
            return ExtractedJob(
                title=payload.title.strip(),
                company=payload.company.strip(),
                location=payload.location.strip(),
                description=payload.description.strip(),
                url=payload.url.strip() or url,
            )

        return await self._structured_flow("extract_job_details", request, JobDetailsPayload, build)

    # -- documents and chat ---------------------------------------------

    async def extract_text_from_file(self, data: bytes, mime_type: str) -> AIResult[str]:
        request = LLMRequest(contents=[
            Part(data=data, mime_type=mime_type),
            Part(text=prompts.build_file_extraction_prompt()),
        ])
        return await self._text_flow("extract_text_from_file", request)

    async def send_message_to_bot(
        self, message: str, preferences: Optional[str] = None, use_search: bool = True
    ) -> AIResult[BotReply]:
        """Answer a free-form chat message, optionally grounded in web search."""
        request = LLMRequest(
            contents=message,
            system_instruction=prompts.build_chat_system_instruction(preferences),
            use_search=use_search,
            thinking_budget=self.chat_thinking_budget,
        )
        result = await self._call("send_message_to_bot", request)
        if not result.success:
            return result

        text = result.data.content.strip()
        if not text:
            return self._parse_failure("send_message_to_bot", "empty response text")
        return AIResult.ok("send_message_to_bot", BotReply(text=text, sources=dedupe_sources(result.data.sources)))
