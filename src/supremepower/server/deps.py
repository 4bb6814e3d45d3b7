"""Process-wide services shared by the API routers.

Routers take these through `Depends(...)`, so tests can swap them with
`app.dependency_overrides`.
"""

from __future__ import annotations

from functools import lru_cache

from supremepower.agents import ActivationService
from supremepower.config import settings
from supremepower.telemetry import OrchestrationRecorder


@lru_cache(maxsize=1)
def get_recorder() -> OrchestrationRecorder:
    return OrchestrationRecorder.from_settings(settings)


@lru_cache(maxsize=1)
def get_activation_service() -> ActivationService:
    return ActivationService.from_settings(settings, recorder=get_recorder())
