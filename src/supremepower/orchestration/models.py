from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class Agent:
    """An agent persona as seen by the scorer.

    Only `name` and `keywords` take part in scoring. The remaining fields are
    filled by the catalog loader and used for persona rendering.
    """

    name: str
    keywords: Tuple[str, ...] = ()
    expertise: Tuple[str, ...] = ()
    principles: Tuple[str, ...] = ()
    focus: str = ""
    complexity_threshold: str = "medium"
    source: str = "built-in"
    path: Optional[Path] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "keywords": list(self.keywords),
            "expertise": list(self.expertise),
            "principles": list(self.principles),
            "focus": self.focus,
            "complexity_threshold": self.complexity_threshold,
            "source": self.source,
        }


@dataclass(frozen=True)
class ContextHints:
    direct: Tuple[str, ...] = ()
    subtle: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"direct": list(self.direct), "subtle": list(self.subtle)}


@dataclass(frozen=True)
class ConditionalRule:
    """`condition → agent + agent` mapping pulled out of skill text."""

    condition: str
    agents: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"condition": self.condition, "agents": list(self.agents)}


@dataclass(frozen=True)
class ScoringPolicy:
    """Point values and activation threshold used by the agent scorer."""

    direct_points: int = 10
    subtle_points: int = 5
    conditional_points: int = 20
    # Strictly greater than: an agent sitting exactly on the threshold stays inactive.
    threshold: int = 8
    # Condition tokens of this length or shorter never fire ("a", "in", "of").
    min_token_length: int = 2

    def to_dict(self) -> Dict[str, Any]:
        return {
            "direct_points": self.direct_points,
            "subtle_points": self.subtle_points,
            "conditional_points": self.conditional_points,
            "threshold": self.threshold,
            "min_token_length": self.min_token_length,
        }


DEFAULT_POLICY = ScoringPolicy()


@dataclass(frozen=True)
class ScoringOutcome:
    activated_agents: Tuple[str, ...]
    scores: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class OrchestrationResult:
    activated_agents: Tuple[str, ...]
    hints: ContextHints
    conditionals: Tuple[ConditionalRule, ...]
    scores: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "activated_agents": list(self.activated_agents),
            "hints": self.hints.to_dict(),
            "conditionals": [c.to_dict() for c in self.conditionals],
            "scores": dict(self.scores),
        }
