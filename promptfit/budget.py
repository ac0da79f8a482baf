"""Character budget reporting for a PromptBuilder.

Suitable for logging and alerting. The builder itself never exceeds its
limit unless an extractor breaks its contract.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from promptfit.builder import PromptBuilder

logger = logging.getLogger(__name__)

_NEAR_LIMIT_RATIO = 0.8

# Keys logging.makeRecord refuses in extra=.
_RESERVED_KEYS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def log_prompt_budget(builder: PromptBuilder, extra: dict | None = None) -> float:
    """Log how much of the character budget is used and warn near the limit.

    Caller extra keys that clash with LogRecord attributes are prefixed with
    "extra_". Returns the usage ratio (length / max_length), 0.0 for a
    non-positive limit.
    """
    length = builder.length
    max_length = builder.max_length
    usage = length / max_length if max_length > 0 else 0.0

    log_extra = {
        "prompt_length": length,
        "max_length": max_length,
        "section_count": len(builder.prompt),
        **{
            (f"extra_{key}" if key in _RESERVED_KEYS else key): value
            for key, value in (extra or {}).items()
        },
    }

    if length > max_length:
        logger.error(
            "prompt.budget.exceeded: %d chars (limit=%d)",
            length,
            max_length,
            extra=log_extra,
        )
    elif usage > _NEAR_LIMIT_RATIO:
        logger.warning(
            "prompt.budget.near_limit: %d chars (%.0f%% of %d)",
            length,
            usage * 100,
            max_length,
            extra=log_extra,
        )
    else:
        logger.info(
            "prompt.budget: %d chars (%d sections, limit=%d)",
            length,
            len(builder.prompt),
            max_length,
            extra=log_extra,
        )

    return usage
