"""In-process record of orchestration decisions."""

from .recorder import LOG_FILE_NAME, OrchestrationEvent, OrchestrationRecorder

__all__ = ["LOG_FILE_NAME", "OrchestrationEvent", "OrchestrationRecorder"]
