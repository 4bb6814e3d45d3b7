from .registry import Skill, SkillRegistry, SkillStep, parse_steps, render_skill_list
from .router import SkillRouter

__all__ = [
    "Skill",
    "SkillRegistry",
    "SkillRouter",
    "SkillStep",
    "parse_steps",
    "render_skill_list",
]
