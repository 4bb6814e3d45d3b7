from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence

from .models import DEFAULT_POLICY, Agent, ConditionalRule, ContextHints, ScoringOutcome, ScoringPolicy


def matches_keywords(text: str, keywords: Optional[Iterable[str]]) -> bool:
    """Case-insensitive substring match: "auth" matches "Authentication"."""
    if not keywords:
        return False
    haystack = (text or "").lower()
    return any(str(k).lower() in haystack for k in keywords)


def condition_fires(condition: str, user_message: str, min_token_length: int = 2) -> bool:
    """True if any significant word of the condition appears in the message."""
    needle = (user_message or "").lower()
    for word in (condition or "").lower().split():
        if len(word) <= min_token_length:
            continue
        if word in needle:
            return True
    return False


def score_and_select_agents(
    hints: ContextHints,
    conditionals: Sequence[ConditionalRule],
    user_message: str,
    agents: Sequence[Agent],
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> ScoringOutcome:
    """Score every agent and pick those above the activation threshold.

    Direct hints, subtle hints and firing conditional rules each add their
    policy points. The returned activation list follows the input agent
    order, not score order.
    """
    scores: Dict[str, int] = {agent.name: 0 for agent in agents}

    for hint in hints.direct:
        for agent in agents:
            if matches_keywords(hint, agent.keywords):
                scores[agent.name] += policy.direct_points

    for hint in hints.subtle:
        for agent in agents:
            if matches_keywords(hint, agent.keywords):
                scores[agent.name] += policy.subtle_points

    for rule in conditionals:
        if not condition_fires(rule.condition, user_message, policy.min_token_length):
            continue
        for name in rule.agents:
            # Rules may name agents that are not installed.
            if name in scores:
                scores[name] += policy.conditional_points

    activated: List[str] = [a.name for a in agents if scores[a.name] > policy.threshold]
    return ScoringOutcome(activated_agents=tuple(activated), scores=scores)
