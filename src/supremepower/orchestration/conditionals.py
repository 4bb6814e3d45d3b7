"""Conditional agent-activation rules embedded in skill markdown.

Two notations are recognised::

    - database schema → backend-architect + database-specialist
    If working with: auth/tokens → security-engineer

Both pattern families always run over the whole text; bullet rules come
first, inline rules after them.
"""

from __future__ import annotations

import re
from typing import Any, List, Match, Tuple

from .models import ConditionalRule

_AGENT_LIST = r"([a-z0-9-]+(?:[ \t]*\+[ \t]*[a-z0-9-]+)*)"

BULLET_PATTERN = re.compile(
    r"^[ \t]*-[ \t]*([^→\n]+)→[ \t]*" + _AGENT_LIST,
    re.MULTILINE,
)

INLINE_PATTERN = re.compile(
    r"(?i:(?:if|when)\s+working\s+with)[:\s]+([^→]+)→[ \t]*" + _AGENT_LIST,
)


def split_agents(agents_text: str) -> Tuple[str, ...]:
    parts = [p.strip() for p in (agents_text or "").split("+")]
    return tuple(p for p in parts if p)


def _to_rule(match: Match[str]) -> ConditionalRule:
    return ConditionalRule(
        condition=match.group(1).strip(),
        agents=split_agents(match.group(2)),
    )


def extract_bullet_rules(text: str) -> List[ConditionalRule]:
    return [_to_rule(m) for m in BULLET_PATTERN.finditer(text)]


def extract_inline_rules(text: str) -> List[ConditionalRule]:
    rules: List[ConditionalRule] = []
    for m in INLINE_PATTERN.finditer(text):
        rule = _to_rule(m)
        # "If working with:" followed by a bullet list is owned by the bullet pattern.
        if "\n" in rule.condition or rule.condition.startswith("-"):
            continue
        rules.append(rule)
    return rules


def extract_conditional_blocks(content: Any) -> Tuple[ConditionalRule, ...]:
    """Extract every condition → agent(s) rule, bullet rules first.

    No deduplication: a condition written in both notations yields two rules.
    """
    if not content or not isinstance(content, str):
        return ()
    return tuple(extract_bullet_rules(content) + extract_inline_rules(content))
