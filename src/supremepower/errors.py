from __future__ import annotations

from pathlib import Path
from typing import Iterable, List


class SupremePowerError(Exception):
    """Base class for errors raised outside the pure orchestration core."""


class AgentNotFoundError(SupremePowerError):
    def __init__(self, name: str, searched: Iterable[Path] = ()) -> None:
        self.name = name
        self.searched: List[Path] = list(searched)
        msg = f"Agent not found: {name}"
        if self.searched:
            msg += "\n\nSearched in:\n" + "\n".join(f"- {p}" for p in self.searched)
        super().__init__(msg)


class SkillNotFoundError(SupremePowerError):
    def __init__(self, skill_id: str) -> None:
        self.skill_id = skill_id
        super().__init__(f"Skill not found: {skill_id}")
