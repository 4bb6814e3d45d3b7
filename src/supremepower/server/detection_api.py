from __future__ import annotations

from typing import Optional

from fastapi import APIRouter
from pydantic import BaseModel

from supremepower.config import settings
from supremepower.detection import detect_complexity

router = APIRouter(prefix="/api/detection", tags=["detection"])


class ComplexityRequest(BaseModel):
    message: str
    threshold: Optional[int] = None


@router.post("/complexity")
async def complexity(request: ComplexityRequest):
    threshold = request.threshold if request.threshold is not None else settings.complexity_threshold
    return detect_complexity(request.message, threshold=threshold).to_dict()
