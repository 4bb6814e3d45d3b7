"""Skill-driven agent orchestration.

Pure functions only: skill text and a user message go in, agent scores and
an activation list come out. Loading agents and skills from disk lives in
`supremepower.agents` and `supremepower.skills`.
"""

from .conditionals import extract_conditional_blocks
from .hints import extract_context_hints
from .models import (
    DEFAULT_POLICY,
    Agent,
    ConditionalRule,
    ContextHints,
    OrchestrationResult,
    ScoringOutcome,
    ScoringPolicy,
)
from .pipeline import analyze_skill_and_activate_agents
from .scoring import matches_keywords, score_and_select_agents

__all__ = [
    "Agent",
    "ConditionalRule",
    "ContextHints",
    "DEFAULT_POLICY",
    "OrchestrationResult",
    "ScoringOutcome",
    "ScoringPolicy",
    "analyze_skill_and_activate_agents",
    "extract_conditional_blocks",
    "extract_context_hints",
    "matches_keywords",
    "score_and_select_agents",
]
