from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from supremepower.agents import ActivationService
from supremepower.errors import AgentNotFoundError, SkillNotFoundError

from .deps import get_activation_service

router = APIRouter(prefix="/api/agents", tags=["agents"])


class ActivateRequest(BaseModel):
    user_message: str
    force_agents: Optional[List[str]] = None
    skill_id: Optional[str] = None
    skill_content: Optional[str] = None


class ScaffoldRequest(BaseModel):
    purpose: str
    save: Optional[bool] = None


@router.post("/activate")
async def activate_agents(request: ActivateRequest, service: ActivationService = Depends(get_activation_service)):
    try:
        report = service.activate(
            request.user_message,
            force_agents=request.force_agents,
            skill_id=request.skill_id,
            skill_content=request.skill_content,
        )
    except SkillNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return report.to_dict()


@router.get("")
async def list_agents(service: ActivationService = Depends(get_activation_service)):
    return {"agents": [a.to_dict() for a in service.catalog.list_agents()]}


@router.get("/{name}/persona")
async def get_agent_persona(name: str, service: ActivationService = Depends(get_activation_service)):
    try:
        content = service.catalog.read_persona(name)
    except AgentNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"name": name, "content": content}


@router.post("/scaffold")
async def scaffold_agent(request: ScaffoldRequest, service: ActivationService = Depends(get_activation_service)):
    try:
        report = service.scaffold(request.purpose, save=request.save)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return report.to_dict()
