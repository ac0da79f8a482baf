"""PromptBuilder: accumulates sections into a Prompt under a character budget.

Usage:
    builder = PromptBuilder(max_length=4000, extractor=extract_at_boundary)
    builder.add(PromptSection(source="system", text=instructions))
    if not builder.add_range(examples):
        logger.info("Ran out of room for examples")
    messages = builder.prompt.to_messages()

Length is always the raw character count of the text that went into the prompt.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from promptfit.exceptions import InvalidArgumentError
from promptfit.extractors import Extractor, get_extractor
from promptfit.models import PromptSection, Section
from promptfit.prompt import Prompt

if TYPE_CHECKING:
    from promptfit.config import Settings

logger = logging.getLogger(__name__)


class PromptBuilder:
    """Builds a Prompt whose total length never exceeds max_length.

    A section that fits whole is appended as-is. One that does not is passed
    through the extractor, if any, and the shorter text is appended under the
    original section's source. Without an extractor it is rejected.
    Truncated text counts toward length just like whole sections do.
    Not thread-safe: confine each builder to one task.
    """

    def __init__(self, max_length: int, extractor: Extractor | None = None) -> None:
        self._prompt = Prompt()
        self._max_length = max_length
        self._length = 0
        self._extractor = extractor

    @classmethod
    def from_settings(cls, settings: Settings) -> PromptBuilder:
        return cls(settings.max_length, get_extractor(settings.extractor))

    @property
    def prompt(self) -> Prompt:
        return self._prompt

    @property
    def length(self) -> int:
        """Characters committed to the prompt so far."""
        return self._length

    @property
    def available(self) -> int:
        return self._max_length - self._length

    @property
    def extractor(self) -> Extractor | None:
        return self._extractor

    @property
    def max_length(self) -> int:
        return self._max_length

    @max_length.setter
    def max_length(self, value: int) -> None:
        if value < self._length:
            raise InvalidArgumentError(
                "max_length", f"current length {self._length} exceeds {value}"
            )
        self._max_length = value

    def set_max_length(self, value: int) -> None:
        self.max_length = value

    def add(self, section: Section | str | None) -> bool:
        """Add a section if it fits. Returns False when it was rejected."""
        if section is None:
            raise InvalidArgumentError("section", "must not be None")
        if isinstance(section, str):
            section = PromptSection(text=section)

        text = section.get_text()
        if not text:
            return True

        available = self._max_length - self._length
        if len(text) <= available:
            self._prompt.append(section)
            self._length += len(text)
            logger.debug(
                "prompt.section.added: %d chars (%d/%d)",
                len(text),
                self._length,
                self._max_length,
            )
            return True

        if self._extractor is not None:
            extracted = self._extractor(text, available)
            self._prompt.append_text(section.source, extracted)
            self._length += len(extracted)
            logger.debug(
                "prompt.section.truncated: %d -> %d chars (available=%d)",
                len(text),
                len(extracted),
                available,
            )
            return True

        logger.debug(
            "prompt.section.rejected: %d chars (available=%d)",
            len(text),
            available,
        )
        return False

    def add_range(self, sections: Iterable[Section | str] | None) -> bool:
        """Add sections in order, stopping at the first one that is rejected.

        Sections added before the rejection stay in the prompt. A bare string
        is refused; use add() for a single text.
        """
        if sections is None:
            raise InvalidArgumentError("sections", "must not be None")
        if isinstance(sections, str):
            raise InvalidArgumentError("sections", "expected an iterable of sections, got str")
        for section in sections:
            if not self.add(section):
                return False
        return True

    def clear(self) -> None:
        self._prompt.clear()
        self._length = 0

    def reverse(self, start: int, count: int) -> None:
        """Reverse a sub-range of the prompt. Total length is unchanged."""
        self._prompt.reverse(start, count)

    def __repr__(self) -> str:
        return (
            f"PromptBuilder(length={self._length}, max_length={self._max_length}, "
            f"sections={len(self._prompt)})"
        )
