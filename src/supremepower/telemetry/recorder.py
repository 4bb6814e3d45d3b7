from __future__ import annotations

import json
import logging
import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

LOG_FILE_NAME = "orchestration.log"


@dataclass(frozen=True)
class OrchestrationEvent:
    ts: float
    strategy: str
    user_message: str
    skill_id: str
    activated_agents: List[str]
    scores: Dict[str, int]
    hint_count: int = 0
    conditional_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ts": self.ts,
            "strategy": self.strategy,
            "user_message": self.user_message,
            "skill_id": self.skill_id,
            "activated_agents": list(self.activated_agents),
            "scores": dict(self.scores),
            "hint_count": self.hint_count,
            "conditional_count": self.conditional_count,
        }


class OrchestrationRecorder:
    """Recent activation decisions, kept in memory and optionally mirrored to disk.

    With `log_path` set, every event is appended to that file as one JSON line.
    """

    def __init__(self, max_events: int = 2000, log_path: Optional[Path] = None):
        self._lock = threading.Lock()
        self._events: List[OrchestrationEvent] = []
        self._max_events = int(max_events)
        self.log_path = Path(log_path) if log_path else None

    @classmethod
    def from_settings(cls, settings: Any) -> "OrchestrationRecorder":
        log_path = Path(settings.logs_dir) / LOG_FILE_NAME if getattr(settings, "verbose", False) else None
        return cls(log_path=log_path)

    def record(
        self,
        *,
        strategy: str,
        user_message: str = "",
        skill_id: str = "",
        activated_agents: Optional[List[str]] = None,
        scores: Optional[Dict[str, int]] = None,
        hint_count: int = 0,
        conditional_count: int = 0,
        ts: Optional[float] = None,
    ) -> OrchestrationEvent:
        event = OrchestrationEvent(
            ts=float(ts if ts is not None else time.time()),
            strategy=str(strategy or "none"),
            # Keep the ring small; the full message is the caller's concern.
            user_message=str(user_message or "")[:200],
            skill_id=str(skill_id or ""),
            activated_agents=list(activated_agents or []),
            scores=dict(scores or {}),
            hint_count=int(hint_count),
            conditional_count=int(conditional_count),
        )
        with self._lock:
            self._events.append(event)
            if len(self._events) > self._max_events:
                self._events = self._events[-self._max_events :]
            if self.log_path:
                self._append_to_file(event)
        return event

    def _append_to_file(self, event: OrchestrationEvent) -> None:
        try:
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            with self.log_path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(event.to_dict(), ensure_ascii=False) + "\n")
        except OSError as e:
            logger.warning(f"[telemetry] failed to append {self.log_path}: {e}")

    def events(self, limit: int = 200) -> List[Dict[str, Any]]:
        lim = max(1, min(int(limit), self._max_events))
        with self._lock:
            selected = list(self._events[-lim:])
        return [e.to_dict() for e in selected]

    def summary(self) -> Dict[str, Any]:
        with self._lock:
            events = list(self._events)
        by_strategy: Dict[str, int] = {}
        by_agent: Dict[str, int] = {}
        by_skill: Dict[str, int] = {}
        for e in events:
            by_strategy[e.strategy] = by_strategy.get(e.strategy, 0) + 1
            for name in e.activated_agents:
                by_agent[name] = by_agent.get(name, 0) + 1
            if e.skill_id:
                by_skill[e.skill_id] = by_skill.get(e.skill_id, 0) + 1
        return {
            "total": len(events),
            "by_strategy": by_strategy,
            "by_agent": by_agent,
            "by_skill": by_skill,
        }

    def reset(self) -> None:
        with self._lock:
            self._events.clear()
