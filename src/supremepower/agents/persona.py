from __future__ import annotations

from typing import List, Literal, Sequence

from supremepower.orchestration.models import Agent

PersonaDetail = Literal["full", "minimal"]


def to_title_case(name: str) -> str:
    """`security-engineer` -> `Security Engineer`."""
    return " ".join(w[:1].upper() + w[1:] for w in (name or "").split("-"))


def format_personas(agents: Sequence[Agent], detail: PersonaDetail = "full") -> str:
    """Render activated agents as a markdown block for prompt injection."""
    if not agents:
        return ""

    sections: List[str] = ["# Active Expert Personas", ""]
    sections.append("The following specialized experts are available to assist with this request:")
    sections.append("")

    for agent in agents:
        sections.append(f"## {to_title_case(agent.name)}")
        if detail == "full":
            sections.append(f"**Expertise:** {', '.join(agent.expertise)}")
            if agent.principles:
                sections.append("**Working Principles:**")
                for principle in agent.principles:
                    sections.append(f"- {principle}")
            if agent.focus:
                sections.append(f"**Focus areas for this request:** {agent.focus}")
        else:
            sections.append(f"Expertise: {', '.join(agent.expertise[:3])}")
        sections.append("")

    sections.append("---")
    sections.append("")
    return "\n".join(sections)
