from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from supremepower.agents import ActivationService
from supremepower.orchestration import Agent, analyze_skill_and_activate_agents
from supremepower.telemetry import OrchestrationRecorder

from .deps import get_activation_service, get_recorder

router = APIRouter(prefix="/api/orchestration", tags=["orchestration"])


class AgentSpec(BaseModel):
    name: str
    keywords: List[str] = []


class AnalyzeRequest(BaseModel):
    skill_content: str = ""
    user_message: str = ""
    agents: Optional[List[AgentSpec]] = Field(
        default=None,
        description="Agents to score; the installed catalog is used when omitted.",
    )


@router.post("/analyze")
async def analyze(request: AnalyzeRequest, service: ActivationService = Depends(get_activation_service)):
    if request.agents is None:
        result = service.analyze(request.skill_content, request.user_message)
    else:
        agents = [Agent(name=a.name, keywords=tuple(a.keywords)) for a in request.agents]
        result = analyze_skill_and_activate_agents(
            request.skill_content, request.user_message, agents, service.policy
        )
    return result.to_dict()


@router.get("/events")
async def orchestration_events(limit: int = 200, recorder: OrchestrationRecorder = Depends(get_recorder)):
    return {"events": recorder.events(limit=limit)}


@router.get("/summary")
async def orchestration_summary(recorder: OrchestrationRecorder = Depends(get_recorder)):
    return recorder.summary()
