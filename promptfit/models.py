"""Section types consumed by PromptBuilder."""

from __future__ import annotations

import json
from enum import StrEnum
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict


class SectionSource(StrEnum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@runtime_checkable
class Section(Protocol):
    """Anything with a provenance tag that can render itself to text."""

    @property
    def source(self) -> Any: ...

    def get_text(self) -> str | None: ...


class PromptSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str | None = ""
    source: Any = None  # opaque; copied verbatim onto truncated replacements

    def get_text(self) -> str | None:
        return self.text


class JsonSection(BaseModel):
    """Structured content rendered as indented JSON on demand."""

    model_config = ConfigDict(frozen=True)

    content: Any = None
    source: Any = None

    def get_text(self) -> str | None:
        if self.content is None:
            return None
        return json.dumps(self.content, indent=2, ensure_ascii=False)


class ChatMessage(BaseModel):
    role: str  # "system", "user" or "assistant"
    content: str
