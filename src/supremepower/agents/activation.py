"""Decide which agent personas join a request.

`ActivationService` glues the catalogs, the orchestration core and the
recorder together:

1. forced agents win outright;
2. otherwise the skill text is analyzed against the user message;
3. if that activates nothing, agents whose keywords appear in the message
   are used instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from supremepower.orchestration import (
    Agent,
    OrchestrationResult,
    ScoringPolicy,
    analyze_skill_and_activate_agents,
    matches_keywords,
)
from supremepower.skills import SkillRegistry
from supremepower.telemetry import OrchestrationRecorder

from .catalog import AgentCatalog
from .persona import PersonaDetail, format_personas
from .scaffold import AgentDraft, generate_agent, save_agent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActivationReport:
    activated_agents: List[str]
    personas_text: str
    strategy: str
    result: Optional[OrchestrationResult] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "activated_agents": list(self.activated_agents),
            "personas_text": self.personas_text,
            "strategy": self.strategy,
            "result": self.result.to_dict() if self.result else None,
        }


@dataclass(frozen=True)
class ScaffoldReport:
    draft: AgentDraft
    saved_path: Optional[Path] = None

    def to_dict(self) -> Dict[str, Any]:
        data = self.draft.to_dict()
        data["saved"] = self.saved_path is not None
        data["path"] = str(self.saved_path) if self.saved_path else None
        return data


def keyword_fallback(user_message: str, agents: Sequence[Agent]) -> List[str]:
    return [a.name for a in agents if matches_keywords(user_message, a.keywords)]


class ActivationService:
    def __init__(
        self,
        catalog: AgentCatalog,
        skills: SkillRegistry,
        recorder: OrchestrationRecorder,
        *,
        policy: ScoringPolicy,
        max_agents: int = 3,
        persona_detail: PersonaDetail = "full",
        custom_agents_dir: Optional[Path] = None,
        auto_save: bool = False,
    ) -> None:
        self.catalog = catalog
        self.skills = skills
        self.recorder = recorder
        self.policy = policy
        self.max_agents = int(max_agents)
        self.persona_detail = persona_detail
        self.custom_agents_dir = custom_agents_dir
        self.auto_save = auto_save

    @classmethod
    def from_settings(cls, settings: Any, recorder: Optional[OrchestrationRecorder] = None) -> "ActivationService":
        return cls(
            AgentCatalog(settings.agents_dir, settings.custom_agents_dir),
            SkillRegistry(settings.skills_dir, settings.custom_skills_dir),
            recorder or OrchestrationRecorder.from_settings(settings),
            policy=settings.scoring_policy(),
            max_agents=settings.max_agents_per_request,
            persona_detail=settings.persona_detail,
            custom_agents_dir=settings.custom_agents_dir,
            auto_save=bool(settings.auto_create_enabled and not settings.auto_create_confirm_before_save),
        )

    def analyze(self, skill_content: str, user_message: str) -> OrchestrationResult:
        return analyze_skill_and_activate_agents(skill_content, user_message, self.catalog.list_agents(), self.policy)

    def activate(
        self,
        user_message: str,
        force_agents: Optional[Sequence[str]] = None,
        skill_id: Optional[str] = None,
        skill_content: Optional[str] = None,
    ) -> ActivationReport:
        try:
            agents = self.catalog.list_agents()
            result: Optional[OrchestrationResult] = None

            forced = [n.strip() for n in (force_agents or []) if n and n.strip()]
            if forced:
                activated = forced
                strategy = "forced"
            else:
                content = skill_content
                if content is None and skill_id:
                    content = self.skills.load_content(skill_id)
                result = analyze_skill_and_activate_agents(content or "", user_message, agents, self.policy)
                activated = list(result.activated_agents)
                strategy = "orchestration"
                if not activated:
                    activated = keyword_fallback(user_message, agents)
                    strategy = "keyword-fallback" if activated else "none"

            if self.max_agents > 0:
                activated = activated[: self.max_agents]

            by_name = {a.name: a for a in agents}
            missing = [n for n in activated if n not in by_name]
            if missing:
                logger.warning(f"[activation] no definition for forced agents: {missing}")
            personas = format_personas([by_name[n] for n in activated if n in by_name], self.persona_detail)
        except Exception:
            logger.exception("[activation] activation failed")
            raise

        self.recorder.record(
            strategy=strategy,
            user_message=user_message,
            skill_id=skill_id or "",
            activated_agents=activated,
            scores=result.scores if result else {},
            hint_count=len(result.hints.direct) + len(result.hints.subtle) if result else 0,
            conditional_count=len(result.conditionals) if result else 0,
        )
        logger.info(f"[activation] strategy={strategy} agents={activated}")
        return ActivationReport(activated_agents=activated, personas_text=personas, strategy=strategy, result=result)

    def scaffold(self, purpose: str, save: Optional[bool] = None) -> ScaffoldReport:
        """Draft an agent; write it to the custom folder only when saving is allowed."""
        draft = generate_agent(purpose)
        should_save = self.auto_save if save is None else save
        if should_save and self.custom_agents_dir:
            return ScaffoldReport(draft=draft, saved_path=save_agent(draft, self.custom_agents_dir))
        return ScaffoldReport(draft=draft)
