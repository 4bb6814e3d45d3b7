"""Shared fixtures: isolated agent/skill folders and a wired ActivationService."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from supremepower.agents import ActivationService, AgentCatalog
from supremepower.config import SupremePowerSettings
from supremepower.orchestration import ScoringPolicy
from supremepower.skills import SkillRegistry
from supremepower.telemetry import OrchestrationRecorder

AGENTS = {
    "security-engineer": """\
        ---
        name: security-engineer
        expertise: [Authentication, Threat modeling, Secrets management, Cryptography]
        activation_keywords: [security, auth, encryption]
        principles:
          - Validate every input
        focus: Find the attack surface
        ---
        # Security Engineer Persona
        """,
    "database-specialist": """\
        ---
        name: database-specialist
        expertise: [Schema design, Query tuning]
        activation_keywords: [database, sql, schema]
        ---
        # Database Specialist Persona
        """,
    "frontend-architect": """\
        ---
        name: frontend-architect
        expertise: [Components]
        activation_keywords: [react, css]
        ---
        # Frontend Architect Persona
        """,
}

FEATURE_SKILL = """\
    ---
    name: Feature Work
    description: Build a feature with the right specialists
    triggers: [implement, feature]
    tags: [workflow]
    ---
    # Feature Work

    ### Design

    - database schema → database-specialist
    - authentication → security-engineer

    ### Ship

    Merge when green.
    """


def write_agent(root: Path, name: str, body: str) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    path = root / f"{name}.md"
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return path


def write_skill(root: Path, skill_id: str, body: str, filename: str = "SKILL.md") -> Path:
    skill_dir = root / skill_id
    skill_dir.mkdir(parents=True, exist_ok=True)
    path = skill_dir / filename
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return path


@pytest.fixture
def dirs(tmp_path: Path) -> dict:
    d = {
        "agents": tmp_path / "agents",
        "custom_agents": tmp_path / "custom_agents",
        "skills": tmp_path / "skills",
        "custom_skills": tmp_path / "custom_skills",
        "logs": tmp_path / "logs",
    }
    for name, body in AGENTS.items():
        write_agent(d["agents"], name, body)
    write_skill(d["skills"], "feature", FEATURE_SKILL)
    return d


@pytest.fixture
def catalog(dirs) -> AgentCatalog:
    return AgentCatalog(dirs["agents"], dirs["custom_agents"])


@pytest.fixture
def registry(dirs) -> SkillRegistry:
    return SkillRegistry(dirs["skills"], dirs["custom_skills"])


@pytest.fixture
def recorder() -> OrchestrationRecorder:
    return OrchestrationRecorder()


@pytest.fixture
def service(dirs, catalog, registry, recorder) -> ActivationService:
    return ActivationService(
        catalog,
        registry,
        recorder,
        policy=ScoringPolicy(),
        max_agents=3,
        custom_agents_dir=dirs["custom_agents"],
    )


@pytest.fixture
def test_settings(dirs) -> SupremePowerSettings:
    return SupremePowerSettings(
        agents_dir=dirs["agents"],
        custom_agents_dir=dirs["custom_agents"],
        skills_dir=dirs["skills"],
        custom_skills_dir=dirs["custom_skills"],
        logs_dir=dirs["logs"],
        verbose=False,
    )
