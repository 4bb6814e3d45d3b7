from __future__ import annotations

from fastapi import APIRouter

from supremepower.config import settings

router = APIRouter(prefix="/api", tags=["runtime-config"])


@router.get("/runtime-config")
async def get_runtime_config():
    """Expose the non-path runtime settings that shape activation."""
    return {
        "scoring_policy": settings.scoring_policy().to_dict(),
        "max_agents_per_request": settings.max_agents_per_request,
        "complexity_threshold": settings.complexity_threshold,
        "persona_detail": settings.persona_detail,
        "auto_create_enabled": settings.auto_create_enabled,
        "auto_create_confirm_before_save": settings.auto_create_confirm_before_save,
        "verbose": settings.verbose,
    }
