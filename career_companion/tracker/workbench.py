"""
Application Workbench - AI actions for a single tracked application.

This module backs the job detail view: fit analysis, content generation and
improvement, interview prep and company research. It keeps loading and error
state per (application, action) so each button shows its own spinner and
retry message, and writes results back through the repository.
"""

from dataclasses import replace
from enum import Enum
from typing import Callable, Dict, Optional, Set, Tuple

from .models import Application, ContentType, TEXT_CONTENT_TYPES
from .repository import ApplicationRepository
from ..ai_processing.career_assistant import CareerAssistant
from ..ai_processing.results import AIResult
from ..utils import get_tracker_logger

logger = get_tracker_logger()


class WorkbenchAction(Enum):
    ANALYSIS = "analysis"
    COVER_LETTER = ContentType.COVER_LETTER.value
    RESUME_BULLETS = ContentType.RESUME_BULLETS.value
    OUTREACH_PITCH = ContentType.OUTREACH_PITCH.value
    INTERVIEW_PREP = ContentType.INTERVIEW_PREP.value
    RESEARCH = "research"

    @classmethod
    def for_content(cls, content_type: ContentType) -> "WorkbenchAction":
        return cls(content_type.value)


ActionKey = Tuple[str, WorkbenchAction]


class ApplicationWorkbench:
    """Runs AI actions against stored applications."""

    def __init__(
        self,
        assistant: CareerAssistant,
        repository: ApplicationRepository,
        resume_provider: Callable[[], str],
    ):
        self.assistant = assistant
        self.repository = repository
        self.resume_provider = resume_provider
        self._loading: Set[ActionKey] = set()
        self._errors: Dict[ActionKey, str] = {}
        self._research: Dict[str, str] = {}

    # -- state queries --------------------------------------------------

    def is_loading(self, app_id: str, action: WorkbenchAction) -> bool:
        return (app_id, action) in self._loading

    def is_busy(self, app_id: str) -> bool:
        return any(key[0] == app_id for key in self._loading)

    def error_for(self, app_id: str, action: WorkbenchAction) -> Optional[str]:
        return self._errors.get((app_id, action))

    def clear_error(self, app_id: str, action: WorkbenchAction) -> None:
        self._errors.pop((app_id, action), None)

    def research_for(self, app_id: str) -> Optional[str]:
        return self._research.get(app_id)

    # -- actions --------------------------------------------------------

    async def analyze_fit(self, app_id: str) -> Optional[Application]:
        """Replace the application's fit analysis as a whole."""
        app = self.repository.get(app_id)
        if app is None:
            return None

        async def run() -> AIResult:
            return await self.assistant.analyze_fit(app.description, self.resume_provider())

        result = await self._run(app_id, WorkbenchAction.ANALYSIS, run)
        if result is None or not result.success:
            return None
        return self._write_back(app_id, lambda current: replace(current, fit_analysis=result.data))

    async def generate(self, app_id: str, content_type: ContentType) -> Optional[Application]:
        """Generate one text artifact, replacing any previous version."""
        if content_type not in TEXT_CONTENT_TYPES:
            raise ValueError(f"{content_type.value} cannot be generated as text")
        app = self.repository.get(app_id)
        if app is None:
            return None

        async def run() -> AIResult:
            return await self.assistant.generate_content(content_type, app.description, self.resume_provider())

        result = await self._run(app_id, WorkbenchAction.for_content(content_type), run)
        if result is None or not result.success:
            return None
        return self._write_back(app_id, lambda current: current.with_content(content_type, result.data))

    async def improve(self, app_id: str, content_type: ContentType) -> Optional[Application]:
        """Polish existing text; does nothing when there is no text yet."""
        if content_type not in TEXT_CONTENT_TYPES:
            raise ValueError(f"{content_type.value} cannot be improved as text")
        app = self.repository.get(app_id)
        if app is None:
            return None
        existing = app.content(content_type)
        if not existing:
            return None

        async def run() -> AIResult:
            return await self.assistant.improve_content(existing)

        result = await self._run(app_id, WorkbenchAction.for_content(content_type), run)
        if result is None or not result.success:
            return None
        return self._write_back(app_id, lambda current: current.with_content(content_type, result.data))

    async def prepare_interview(self, app_id: str) -> Optional[Application]:
        app = self.repository.get(app_id)
        if app is None:
            return None

        async def run() -> AIResult:
            return await self.assistant.generate_interview_questions(app.description, self.resume_provider())

        result = await self._run(app_id, WorkbenchAction.INTERVIEW_PREP, run)
        if result is None or not result.success:
            return None
        return self._write_back(
            app_id, lambda current: current.with_content(ContentType.INTERVIEW_PREP, result.data)
        )

    async def research_company(self, app_id: str) -> Optional[str]:
        """Company briefing in markdown; cached for the session, not persisted."""
        app = self.repository.get(app_id)
        if app is None:
            return None

        async def run() -> AIResult:
            return await self.assistant.research_company(app.company, app.title)

        result = await self._run(app_id, WorkbenchAction.RESEARCH, run)
        if result is None or not result.success:
            return None
        self._research[app_id] = result.data
        return result.data

    # -- helpers --------------------------------------------------------

    async def _run(self, app_id: str, action: WorkbenchAction, call) -> Optional[AIResult]:
        key = (app_id, action)
        if key in self._loading:
            logger.debug(f"Ignoring duplicate {action.value} request", application_id=app_id)
            return None

        self._loading.add(key)
        self._errors.pop(key, None)
        try:
            result = await call()
        finally:
            self._loading.discard(key)

        if not result.success:
            self._errors[key] = result.error
            logger.warning(f"{action.value} failed: {result.error}", application_id=app_id,
                           error_kind=result.error_kind.value if result.error_kind else None)
        return result

    def _write_back(self, app_id: str, change: Callable[[Application], Application]) -> Optional[Application]:
        # Re-read so results for other fields that landed meanwhile are kept
        current = self.repository.get(app_id)
        if current is None:
            logger.info("Dropping AI result for missing application", application_id=app_id)
            return None
        updated = change(current)
        self.repository.update(updated)
        return updated
