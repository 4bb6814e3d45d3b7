from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from supremepower.agents import ActivationService
from supremepower.errors import SkillNotFoundError
from supremepower.skills import SkillRouter, parse_steps, render_skill_list

from .deps import get_activation_service

router = APIRouter(prefix="/api/skills", tags=["skills"])


@router.get("")
async def list_skills(service: ActivationService = Depends(get_activation_service)):
    skills = service.skills.list_skills()
    return {
        "skills": [s.to_dict() for s in skills],
        "markdown": render_skill_list(skills),
    }


@router.get("/route")
async def route_skill(message: str, top_k: int = 1, service: ActivationService = Depends(get_activation_service)):
    selected = SkillRouter(service.skills).select_for_message(message, top_k=top_k)
    return {"skills": [{"skill": x["skill"].to_dict(), "score": x["score"]} for x in selected]}


@router.get("/{skill_id}")
async def get_skill(skill_id: str, service: ActivationService = Depends(get_activation_service)):
    try:
        skill = service.skills.get(skill_id)
        content = service.skills.load_content(skill_id)
    except SkillNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    data = skill.to_dict()
    data["content"] = content
    data["steps"] = [{"name": s.name, "context": list(s.context)} for s in parse_steps(content)]
    return data
