"""
LLM Manager - Abstraction layer over the Gemini generative AI backend.

This module provides a provider interface and the Gemini REST implementation
used by every AI flow: plain generation, schema-constrained JSON output,
Google Search grounding, inline file content and thinking budget tuning.
"""

import asyncio
import base64
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Any, Union
from dataclasses import dataclass, field
import aiohttp

from ..config.settings import get_gemini_config, GeminiConfig
from ..utils import get_ai_logger

logger = get_ai_logger()

@dataclass(frozen=True)
class Source:
    """Web citation attached to a grounded response."""
    uri: str
    title: str

    def to_dict(self) -> Dict[str, str]:
        return {"uri": self.uri, "title": self.title}

@dataclass
class Part:
    """One piece of multipart request content: text or inline binary data."""
    text: Optional[str] = None
    data: Optional[bytes] = None
    mime_type: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        if self.data is not None:
            return {
                "inlineData": {
                    "mimeType": self.mime_type or "application/octet-stream",
                    "data": base64.b64encode(self.data).decode("ascii"),
                }
            }
        return {"text": self.text or ""}

@dataclass
class LLMRequest:
    """A single generateContent request."""
    contents: Union[str, List[Part]]
    system_instruction: Optional[str] = None
    response_schema: Optional[Dict[str, Any]] = None
    use_search: bool = False
    thinking_budget: Optional[int] = None
    temperature: Optional[float] = None

@dataclass
class LLMResponse:
    """Standardized response from LLM providers."""
    success: bool
    content: str = ""
    sources: List[Source] = field(default_factory=list)
    model: str = ""
    usage: Optional[Dict[str, int]] = None
    finish_reason: Optional[str] = None
    error: Optional[str] = None

def dedupe_sources(sources: List[Source]) -> List[Source]:
    """Keep the first citation for each uri, preserving order."""
    seen = set()
    unique = []
    for source in sources:
        if source.uri and source.uri not in seen:
            seen.add(source.uri)
            unique.append(source)
    return unique

def build_payload(request: LLMRequest, config: GeminiConfig) -> Dict[str, Any]:
    """Translate an ``LLMRequest`` into a generateContent JSON body."""
    if isinstance(request.contents, str):
        parts = [{"text": request.contents}]
    else:
        parts = [part.to_payload() for part in request.contents]

    generation_config: Dict[str, Any] = {
        "temperature": request.temperature if request.temperature is not None else config.temperature
    }
    if request.response_schema is not None:
        generation_config["responseMimeType"] = "application/json"
        generation_config["responseSchema"] = request.response_schema
    if request.thinking_budget is not None and request.thinking_budget >= 0:
        generation_config["thinkingConfig"] = {"thinkingBudget": request.thinking_budget}

    payload: Dict[str, Any] = {
        "contents": [{"role": "user", "parts": parts}],
        "generationConfig": generation_config,
    }
    if request.system_instruction:
        payload["systemInstruction"] = {"parts": [{"text": request.system_instruction}]}
    if request.use_search:
        payload["tools"] = [{"google_search": {}}]
    return payload

def parse_generate_response(data: Dict[str, Any], model: str = "") -> LLMResponse:
    """Extract text and grounding citations from a generateContent reply."""
    candidates = data.get("candidates") or []
    if not candidates:
        block_reason = (data.get("promptFeedback") or {}).get("blockReason")
        reason = f" (blocked: {block_reason})" if block_reason else ""
        return LLMResponse(success=False, model=model, error=f"Gemini returned no candidates{reason}")

    candidate = candidates[0]
    parts = (candidate.get("content") or {}).get("parts") or []
    # Thought summaries are flagged and never part of the answer
    text = "".join(part.get("text", "") for part in parts if not part.get("thought"))

    sources = []
    grounding = candidate.get("groundingMetadata") or {}
    for chunk in grounding.get("groundingChunks") or []:
        web = chunk.get("web") or {}
        if web.get("uri"):
            sources.append(Source(uri=web["uri"], title=web.get("title") or web["uri"]))

    return LLMResponse(
        success=True,
        content=text,
        sources=dedupe_sources(sources),
        model=data.get("modelVersion", model),
        usage=data.get("usageMetadata"),
        finish_reason=candidate.get("finishReason"),
    )

class LLMProvider(ABC):
    """Abstract base class for LLM providers."""

    @abstractmethod
    async def generate(self, request: LLMRequest) -> LLMResponse:
        """Run one generation request."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the provider is available."""
        pass

    @abstractmethod
    def get_model_name(self) -> str:
        """Get the model name being used."""
        pass

class GeminiProvider(LLMProvider):
    """Gemini API provider using the generateContent REST endpoint."""

    def __init__(self, config: GeminiConfig):
        self.config = config
        self.headers = {
            "x-goog-api-key": config.api_key or "",
            "Content-Type": "application/json"
        }

    @property
    def endpoint(self) -> str:
        return f"{self.config.base_url.rstrip('/')}/models/{self.config.model}:generateContent"

    async def generate(self, request: LLMRequest) -> LLMResponse:
        """Generate a response using the Gemini API."""
        if not self.config.api_key:
            return LLMResponse(success=False, error="Gemini API key not configured")

        payload = build_payload(request, self.config)
        timeout = aiohttp.ClientTimeout(total=self.config.timeout_seconds)

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(self.endpoint, headers=self.headers, json=payload) as response:
                    if response.status == 200:
                        data = await response.json()
                        return parse_generate_response(data, self.config.model)

                    error_text = await response.text()
                    return LLMResponse(
                        success=False,
                        model=self.config.model,
                        error=f"Gemini API error {response.status}: {error_text[:500]}"
                    )

        except asyncio.TimeoutError:
            logger.error(f"Gemini API request timed out after {self.config.timeout_seconds}s")
            return LLMResponse(success=False, model=self.config.model, error="Gemini API request timed out")
        except aiohttp.ClientError as e:
            logger.error(f"Error calling Gemini API: {e}")
            return LLMResponse(success=False, model=self.config.model, error=f"Gemini API error: {str(e)}")

    def is_available(self) -> bool:
        """Gemini is usable once an API key is configured."""
        return bool(self.config.api_key)

    def get_model_name(self) -> str:
        return self.config.model

class LLMManager:
    """Routes requests to the configured provider."""

    def __init__(self, config: Optional[GeminiConfig] = None, provider: Optional[LLMProvider] = None):
        self.config = config or get_gemini_config()
        self.provider = provider or GeminiProvider(self.config)

    def is_available(self) -> bool:
        return self.provider.is_available()

    async def generate(self, request: LLMRequest) -> LLMResponse:
        """Generate using the configured provider."""
        if not self.provider.is_available():
            return LLMResponse(success=False, error="No LLM provider available")
        return await self.provider.generate(request)

    def get_provider_info(self) -> Dict[str, Any]:
        """Get information about the active provider."""
        return {
            "name": type(self.provider).__name__,
            "available": self.provider.is_available(),
            "model": self.provider.get_model_name(),
        }

    async def test_connection(self) -> LLMResponse:
        """Send a tiny prompt to confirm the provider answers."""
        return await self.generate(LLMRequest(contents="Reply with the single word: ready", thinking_budget=0))

# Global LLM manager instance
_llm_manager = None

def get_llm_manager() -> LLMManager:
    """Get the global LLM manager instance."""
    global _llm_manager
    if _llm_manager is None:
        _llm_manager = LLMManager()
    return _llm_manager

def reset_llm_manager() -> None:
    """Drop the cached manager so the next call picks up new settings."""
    global _llm_manager
    _llm_manager = None
