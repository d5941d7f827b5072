"""Chat message history."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Sequence, Tuple

from ..ai_processing.llm_manager import Source

GREETING = "Hello! I'm your Career Companion. How can I help you with your job search today?"


class MessageRole(Enum):
    USER = "user"
    MODEL = "model"


@dataclass(frozen=True)
class Message:
    role: MessageRole
    text: str
    sources: Tuple[Source, ...] = ()

    @classmethod
    def user(cls, text: str) -> "Message":
        return cls(role=MessageRole.USER, text=text)

    @classmethod
    def model(cls, text: str, sources: Sequence[Source] = ()) -> "Message":
        return cls(role=MessageRole.MODEL, text=text, sources=tuple(sources))


class MessageHistory:
    """Append-only message log."""

    def __init__(self, greeting: str = GREETING):
        self.greeting = greeting
        self._messages: List[Message] = [Message.model(greeting)]

    def append(self, message: Message) -> Message:
        self._messages.append(message)
        return message

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(tuple(self._messages))

    def snapshot(self) -> Tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def last(self) -> Message:
        return self._messages[-1]

    def search(self, query: str) -> Tuple[Message, ...]:
        """Case-insensitive substring search; a blank query returns everything."""
        needle = query.strip().lower()
        if not needle:
            return self.snapshot()
        return tuple(m for m in self._messages if needle in m.text.lower())

    def reset(self) -> None:
        self._messages = [Message.model(self.greeting)]
