"""
Per-citation "save to tracker" state for job listings surfaced in chat.

Each citation uri moves through a small state machine:

    IDLE -> SAVING -> SAVED
                   -> ERROR -> SAVING (retry)

A uri whose url is already stored on an application is always reported as
already saved and its button stays disabled, whatever its transient state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from ..ai_processing.career_assistant import CareerAssistant
from ..ai_processing.llm_manager import Source
from ..tracker.models import Application
from ..tracker.repository import ApplicationRepository
from ..utils import get_chat_logger

logger = get_chat_logger()


class SaveState(Enum):
    IDLE = "idle"
    SAVING = "saving"
    SAVED = "saved"
    ERROR = "error"


ALLOWED_TRANSITIONS = {
    SaveState.IDLE: {SaveState.SAVING},
    SaveState.SAVING: {SaveState.SAVED, SaveState.ERROR},
    SaveState.ERROR: {SaveState.SAVING},
    SaveState.SAVED: set(),
}


class InvalidSaveTransition(Exception):
    """Raised when a save state change is not allowed."""

    def __init__(self, uri: str, current: SaveState, target: SaveState):
        super().__init__(f"Cannot move {uri} from {current.value} to {target.value}")
        self.uri = uri
        self.current = current
        self.target = target


@dataclass(frozen=True)
class SaveButton:
    label: str
    disabled: bool
    state: SaveState
    already_saved: bool = False


_LABELS = {
    SaveState.IDLE: "Save to Tracker",
    SaveState.SAVING: "Saving...",
    SaveState.SAVED: "Saved",
    SaveState.ERROR: "Retry Save",
}


class SourceSaveTracker:
    """Tracks and performs saves of chat citations into the repository."""

    def __init__(self, assistant: CareerAssistant, repository: ApplicationRepository):
        self.assistant = assistant
        self.repository = repository
        self._states: Dict[str, SaveState] = {}
        self._errors: Dict[str, str] = {}

    def state(self, uri: str) -> SaveState:
        return self._states.get(uri, SaveState.IDLE)

    def error(self, uri: str) -> Optional[str]:
        return self._errors.get(uri)

    def is_already_saved(self, uri: str) -> bool:
        return self.repository.has_url(uri)

    def button(self, uri: str) -> SaveButton:
        if self.is_already_saved(uri):
            return SaveButton(label="Already Saved", disabled=True, state=self.state(uri), already_saved=True)
        state = self.state(uri)
        return SaveButton(
            label=_LABELS[state],
            disabled=state in (SaveState.SAVING, SaveState.SAVED),
            state=state,
        )

    def transition(self, uri: str, target: SaveState) -> None:
        current = self.state(uri)
        if target not in ALLOWED_TRANSITIONS[current]:
            raise InvalidSaveTransition(uri, current, target)
        self._states[uri] = target

    async def save(self, source: Source) -> Optional[Application]:
        """Import the job behind ``source`` and add it to the tracker.

        Returns the new application, or None when the save was refused or
        failed (the failure message is then available from ``error``).
        """
        uri = source.uri
        if self.is_already_saved(uri):
            logger.debug(f"Source already tracked: {uri}")
            return None

        self.transition(uri, SaveState.SAVING)
        self._errors.pop(uri, None)

        result = await self.assistant.extract_job_details(uri)
        if not result.success:
            self._errors[uri] = result.error
            self.transition(uri, SaveState.ERROR)
            logger.warning(f"Saving source failed: {result.error}", uri=uri)
            return None

        app = self.repository.add(result.data.to_job_data())
        self.transition(uri, SaveState.SAVED)
        logger.info(f"Saved source as application: {source.title}", uri=uri, application_id=app.id)
        return app
