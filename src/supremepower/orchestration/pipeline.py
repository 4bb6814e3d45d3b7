from __future__ import annotations

from typing import Any, Sequence

from .conditionals import extract_conditional_blocks
from .hints import extract_context_hints
from .models import DEFAULT_POLICY, Agent, OrchestrationResult, ScoringPolicy
from .scoring import score_and_select_agents


def analyze_skill_and_activate_agents(
    skill_content: Any,
    user_message: str,
    agents: Sequence[Agent],
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> OrchestrationResult:
    """Run hint extraction, rule extraction and scoring in one pass."""
    hints = extract_context_hints(skill_content)
    conditionals = extract_conditional_blocks(skill_content)
    outcome = score_and_select_agents(hints, conditionals, user_message, agents, policy)
    return OrchestrationResult(
        activated_agents=outcome.activated_agents,
        hints=hints,
        conditionals=conditionals,
        scores=outcome.scores,
    )
