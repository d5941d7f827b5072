"""Shared fixtures: a scripted LLM provider, an assistant wired to it, and stores."""

import asyncio
import copy
import json
from typing import Any, List, Optional, Sequence, Union

import pytest

from career_companion.ai_processing.career_assistant import CareerAssistant
from career_companion.ai_processing.llm_manager import (
    LLMManager,
    LLMProvider,
    LLMRequest,
    LLMResponse,
    Source,
)
from career_companion.config.settings import GeminiConfig
from career_companion.config.store import DocumentStore, PersistedState
from career_companion.tracker.models import MOCK_APPLICATIONS, MOCK_RESUME
from career_companion.tracker.repository import ApplicationRepository

ScriptedReply = Union[LLMResponse, Exception]


def text_response(text: str, sources: Sequence[Source] = ()) -> LLMResponse:
    """Successful reply carrying plain text."""
    return LLMResponse(success=True, content=text, sources=list(sources), model="gemini-test")


def json_response(data: Any) -> LLMResponse:
    """Successful reply carrying a JSON document."""
    return text_response(json.dumps(data))


def failed_response(error: str = "Gemini API error 503: unavailable") -> LLMResponse:
    return LLMResponse(success=False, model="gemini-test", error=error)


class FakeProvider(LLMProvider):
    """Provider that replays scripted replies and records every request.

    Set ``gate`` to an ``asyncio.Event`` to hold requests in flight until
    the test releases them.
    """

    def __init__(self, replies: Optional[List[ScriptedReply]] = None, available: bool = True):
        self.replies: List[ScriptedReply] = list(replies or [])
        self.requests: List[LLMRequest] = []
        self.available = available
        self.gate: Optional[asyncio.Event] = None

    def queue(self, *replies: ScriptedReply) -> None:
        self.replies.extend(replies)

    async def generate(self, request: LLMRequest) -> LLMResponse:
        self.requests.append(request)
        if self.gate is not None:
            await self.gate.wait()
        if not self.replies:
            return failed_response("no scripted reply")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def is_available(self) -> bool:
        return self.available

    def get_model_name(self) -> str:
        return "gemini-test"

    @property
    def last_request(self) -> LLMRequest:
        return self.requests[-1]


@pytest.fixture
def gemini_config() -> GeminiConfig:
    return GeminiConfig(api_key="test-key", chat_thinking_budget=0)


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def assistant(provider: FakeProvider, gemini_config: GeminiConfig) -> CareerAssistant:
    return CareerAssistant(LLMManager(config=gemini_config, provider=provider))


@pytest.fixture
def repository() -> ApplicationRepository:
    return ApplicationRepository(copy.deepcopy(MOCK_APPLICATIONS))


@pytest.fixture
def resume() -> str:
    return MOCK_RESUME


@pytest.fixture
def store(tmp_path) -> DocumentStore:
    return DocumentStore(str(tmp_path / "companion.db"))


@pytest.fixture
def persisted(store: DocumentStore) -> PersistedState:
    return PersistedState(store)
