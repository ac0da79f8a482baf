"""Truncation strategies for sections that do not fit whole.

An extractor takes (text, max_len) and must return a string no longer than
max_len. PromptBuilder trusts that contract and does not re-check it.

Split priority for extract_at_boundary mirrors message splitting:
paragraph break (\\n\\n) > sentence end (. ) > space > hard cut.
"""

from __future__ import annotations

from collections.abc import Callable

from promptfit.exceptions import InvalidArgumentError

Extractor = Callable[[str, int], str]


def take_prefix(text: str, max_len: int) -> str:
    """Naive fallback: the first max_len characters, no boundary awareness."""
    if max_len <= 0:
        return ""
    return text[:max_len]


def extract_at_boundary(text: str, max_len: int, ellipsis: str = "") -> str:
    """Cut text at the last natural boundary that fits within max_len.

    When ellipsis is given it is appended to the cut and its length counts
    against max_len. If the ellipsis alone does not fit, falls back to a hard cut.
    """
    if max_len <= 0:
        return ""
    if len(text) <= max_len:
        return text

    if ellipsis and len(ellipsis) < max_len:
        window = max_len - len(ellipsis)
    else:
        window = max_len
        ellipsis = ""

    segment = text[:window]

    # Priority 1: paragraph break
    pos = segment.rfind("\n\n")
    if pos > 0:
        return segment[:pos] + ellipsis

    # Priority 2: sentence end (". "), keep the period
    pos = segment.rfind(". ")
    if pos > 0:
        return segment[: pos + 1] + ellipsis

    # Priority 3: space
    pos = segment.rfind(" ")
    if pos > 0:
        return segment[:pos] + ellipsis

    # Priority 4: hard cut
    return segment + ellipsis


_EXTRACTORS: dict[str, Extractor | None] = {
    "none": None,
    "prefix": take_prefix,
    "boundary": extract_at_boundary,
}


def get_extractor(name: str) -> Extractor | None:
    """Resolve a configured extractor name. "none" means reject on overflow."""
    try:
        return _EXTRACTORS[name.lower()]
    except KeyError:
        raise InvalidArgumentError(
            "extractor", f"unknown extractor '{name}', expected one of {sorted(_EXTRACTORS)}"
        ) from None
