"""Prompt: insertion-ordered container of accepted sections.

A Prompt is owned by the PromptBuilder that fills it. Mutating it directly
bypasses the builder's length accounting.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from promptfit.exceptions import InvalidArgumentError
from promptfit.models import ChatMessage, PromptSection, Section


class Prompt:
    def __init__(self) -> None:
        self._sections: list[Section] = []

    def append(self, section: Section) -> None:
        self._sections.append(section)

    def append_text(self, source: Any, text: str) -> PromptSection:
        """Append a new section built from a source tag and text."""
        section = PromptSection(source=source, text=text)
        self._sections.append(section)
        return section

    def clear(self) -> None:
        self._sections.clear()

    def reverse(self, start: int, count: int) -> None:
        """Reverse the order of sections in [start, start + count) in place."""
        if start < 0:
            raise InvalidArgumentError("start", f"must be >= 0, got {start}")
        if count < 0:
            raise InvalidArgumentError("count", f"must be >= 0, got {count}")
        if start + count > len(self._sections):
            raise InvalidArgumentError(
                "count",
                f"range [{start}, {start + count}) exceeds {len(self._sections)} sections",
            )
        self._sections[start : start + count] = self._sections[start : start + count][::-1]

    @property
    def sections(self) -> tuple[Section, ...]:
        return tuple(self._sections)

    def text_length(self) -> int:
        """Total characters across all sections, as rendered now."""
        return sum(len(s.get_text() or "") for s in self._sections)

    def render(self, separator: str = "") -> str:
        """Join non-empty section texts.

        With the default separator the result is exactly text_length() long. Any
        other separator adds (n - 1) * len(separator) characters outside the budget.
        """
        return separator.join(text for s in self._sections if (text := s.get_text()))

    def to_messages(self, default_role: str = "user") -> list[ChatMessage]:
        """One message per non-empty section. String sources become the role."""
        messages: list[ChatMessage] = []
        for section in self._sections:
            text = section.get_text()
            if not text:
                continue
            role = section.source if isinstance(section.source, str) else default_role
            messages.append(ChatMessage(role=str(role), content=text))
        return messages

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self) -> Iterator[Section]:
        return iter(self._sections)

    def __getitem__(self, index: int) -> Section:
        return self._sections[index]

    def __repr__(self) -> str:
        return f"Prompt(sections={len(self._sections)}, length={self.text_length()})"
