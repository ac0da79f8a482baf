"""Length-budgeted prompt assembly.

Provides:
- PromptBuilder: accumulates sections into a Prompt without exceeding a character limit
- Prompt: the ordered section container the builder owns
- extractors: truncation strategies for sections that only fit partially
"""

from promptfit.builder import PromptBuilder
from promptfit.exceptions import InvalidArgumentError, PromptFitError
from promptfit.extractors import extract_at_boundary, take_prefix
from promptfit.models import ChatMessage, JsonSection, PromptSection, Section, SectionSource
from promptfit.prompt import Prompt

__all__ = [
    "ChatMessage",
    "InvalidArgumentError",
    "JsonSection",
    "Prompt",
    "PromptBuilder",
    "PromptFitError",
    "PromptSection",
    "Section",
    "SectionSource",
    "extract_at_boundary",
    "take_prefix",
]
