"""Context-hint extraction from skill text.

Direct hints are strong signals ("requires security expertise"), subtle hints
are weak ones ("consider the caching strategy"). Each pattern family is a
separate compiled regex so it can be exercised on its own.
"""

from __future__ import annotations

import re
from typing import Any, List, Pattern

from .models import ContextHints

# "requires X expertise" / "needs Y knowledge" -> X / Y
EXPERTISE_PATTERN = re.compile(
    r"(?:requires?|needs?)\s+([^.]+?)\s+(?:expertise|knowledge)",
    re.IGNORECASE,
)

# "requires deep understanding of Z." -> "deep understanding of Z"
UNDERSTANDING_PATTERN = re.compile(
    r"(?:requires?|needs?)\s+([^.]*understanding[^.]*)",
    re.IGNORECASE,
)

# "consider X", "understand Y", "analyze Z" up to a period, comma or newline.
SUBTLE_PATTERN = re.compile(
    r"(?:consider|understand|analyze)\s+([^.,\n]+)",
    re.IGNORECASE,
)


def _captures(pattern: Pattern[str], text: str) -> List[str]:
    return [m.group(1).strip() for m in pattern.finditer(text)]


def extract_expertise_hints(text: str) -> List[str]:
    return _captures(EXPERTISE_PATTERN, text)


def extract_understanding_hints(text: str) -> List[str]:
    return _captures(UNDERSTANDING_PATTERN, text)


def extract_subtle_hints(text: str) -> List[str]:
    return _captures(SUBTLE_PATTERN, text)


def extract_context_hints(content: Any) -> ContextHints:
    """Pull direct and subtle expertise hints out of skill content.

    Anything that is not a non-empty string yields empty hints. Matches are
    kept in the order found and are not deduplicated.
    """
    if not content or not isinstance(content, str):
        return ContextHints()

    direct = extract_expertise_hints(content) + extract_understanding_hints(content)
    subtle = extract_subtle_hints(content)
    return ContextHints(direct=tuple(direct), subtle=tuple(subtle))
