"""
Chat controller for the Career Companion assistant.

The controller owns the conversation history and a two-state mode machine:

    IDLE  --"analyze" intent-->  AWAITING_JOB_DESCRIPTION
    AWAITING_JOB_DESCRIPTION  --any message-->  IDLE   (always, even on failure)

While idle, a message that is an http(s) URL imports the job posting behind
it, an "analyze" request asks for a job description, and anything else goes
to the general assistant with web search enabled. Only one request may be in
flight per controller; further sends are rejected until it completes.
"""

from enum import Enum
from typing import Callable, Optional, Tuple
from urllib.parse import urlparse

from .messages import Message, MessageHistory
from ..ai_processing.career_assistant import CareerAssistant
from ..tracker.models import FitAnalysis
from ..tracker.repository import ApplicationRepository
from ..utils import get_chat_logger

logger = get_chat_logger()

ANALYZE_KEYWORDS = ("analyze", "analyse", "evaluate my fit", "fit analysis")

ASK_FOR_DESCRIPTION = (
    "Sure! Paste the full job description below and I'll compare it against your resume."
)


class ChatMode(Enum):
    IDLE = "idle"
    AWAITING_JOB_DESCRIPTION = "awaiting_job_description"


class ChatIntent(Enum):
    EMPTY = "empty"
    URL = "url"
    ANALYZE = "analyze"
    GENERAL = "general"
    JOB_DESCRIPTION = "job_description"


def is_job_url(text: str) -> bool:
    """True for a single absolute http(s) URL with a host."""
    candidate = text.strip()
    if not candidate or any(ch.isspace() for ch in candidate):
        return False
    try:
        parsed = urlparse(candidate)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def classify_input(text: str, mode: ChatMode) -> ChatIntent:
    if not text.strip():
        return ChatIntent.EMPTY
    if mode is ChatMode.AWAITING_JOB_DESCRIPTION:
        return ChatIntent.JOB_DESCRIPTION
    if is_job_url(text):
        return ChatIntent.URL
    lowered = text.lower()
    if any(keyword in lowered for keyword in ANALYZE_KEYWORDS):
        return ChatIntent.ANALYZE
    return ChatIntent.GENERAL


def format_fit_analysis(analysis: FitAnalysis) -> str:
    pros = "\n".join(f"- {item}" for item in analysis.pros) or "- None identified"
    cons = "\n".join(f"- {item}" for item in analysis.cons) or "- None identified"
    return (
        f"**Fit Score: {analysis.fit_score}/100**\n\n"
        f"{analysis.summary}\n\n"
        f"**Strengths:**\n{pros}\n\n"
        f"**Potential Gaps:**\n{cons}"
    )


class ChatController:
    """Routes user messages to AI flows and folds results into history."""

    def __init__(
        self,
        assistant: CareerAssistant,
        repository: ApplicationRepository,
        resume_provider: Callable[[], str],
        preferences_provider: Optional[Callable[[], str]] = None,
    ):
        self.assistant = assistant
        self.repository = repository
        self.resume_provider = resume_provider
        self.preferences_provider = preferences_provider or (lambda: "")
        self.history = MessageHistory()
        self.mode = ChatMode.IDLE
        self._in_flight = False

    @property
    def is_busy(self) -> bool:
        return self._in_flight

    @property
    def messages(self) -> Tuple[Message, ...]:
        return self.history.snapshot()

    def search(self, query: str) -> Tuple[Message, ...]:
        return self.history.search(query)

    def reset(self) -> None:
        self.history.reset()
        self.mode = ChatMode.IDLE

    async def send(self, text: str) -> bool:
        """Handle one user message. Returns False if it was not accepted."""
        intent = classify_input(text, self.mode)
        if intent is ChatIntent.EMPTY or self._in_flight:
            return False

        body = text.strip()
        self.history.append(Message.user(body))
        logger.debug(f"Chat message classified as {intent.value}", mode=self.mode.value)

        if intent is ChatIntent.ANALYZE:
            self.mode = ChatMode.AWAITING_JOB_DESCRIPTION
            self.history.append(Message.model(ASK_FOR_DESCRIPTION))
            return True

        self._in_flight = True
        try:
            if intent is ChatIntent.URL:
                await self._import_job(body)
            elif intent is ChatIntent.JOB_DESCRIPTION:
                await self._analyze_description(body)
            else:
                await self._ask_assistant(body)
        finally:
            self._in_flight = False
        return True

    async def _import_job(self, url: str) -> None:
        result = await self.assistant.extract_job_details(url)
        if not result.success:
            self.history.append(Message.model(result.error))
            return
        app = self.repository.add(result.data.to_job_data())
        self.history.append(Message.model(
            f"I've added **{app.title}** at **{app.company}** to your Discovery Hub. "
            "Open it from the board to analyze your fit or generate application materials."
        ))

    async def _analyze_description(self, description: str) -> None:
        try:
            result = await self.assistant.analyze_fit(description, self.resume_provider())
        finally:
            self.mode = ChatMode.IDLE

        if result.success:
            self.history.append(Message.model(format_fit_analysis(result.data)))
        else:
            self.history.append(Message.model(result.error))

    async def _ask_assistant(self, message: str) -> None:
        result = await self.assistant.send_message_to_bot(message, self.preferences_provider())
        if result.success:
            self.history.append(Message.model(result.data.text, result.data.sources))
        else:
            self.history.append(Message.model(result.error))
