from __future__ import annotations

from typing import Any, Dict, List

from .registry import Skill, SkillRegistry

# Raw lexical scores are mapped onto 0..1 by dividing by this ceiling.
_SCORE_CEILING = 2.5


def lexical_score(skill: Skill, needle: str) -> float:
    score = 0.0
    sid = (skill.skill_id or "").lower()
    sname = (skill.name or "").lower()
    if sid and sid in needle:
        score += 1.2
    if sname and sname in needle and sname != sid:
        score += 1.0

    # Triggers: strong signal (substring match).
    hits = 0
    for t in skill.triggers:
        tt = (t or "").strip().lower()
        if tt and tt in needle:
            hits += 1
            score += 0.45
        if hits >= 6:
            break

    # Tags: weaker signal.
    for tag in skill.tags[:20]:
        tt = (tag or "").strip().lower()
        if tt and tt in needle:
            score += 0.18

    # Description words: weakest signal.
    desc_words = {w for w in (skill.description or "").lower().split() if len(w) > 4}
    msg_words = set(needle.split())
    score += 0.05 * min(6, len(desc_words & msg_words))
    return score


class SkillRouter:
    """Pick the skills most relevant to a message when none is named."""

    def __init__(self, registry: SkillRegistry) -> None:
        self.registry = registry

    def select_for_message(self, message: str, *, top_k: int = 1, min_score: float = 0.18) -> List[Dict[str, Any]]:
        needle = (message or "").strip().lower()
        if not needle:
            return []
        scored = [{"skill": s, "score": lexical_score(s, needle)} for s in self.registry.list_skills()]
        scored.sort(key=lambda x: (x["score"], x["skill"].skill_id), reverse=True)
        for x in scored:
            x["score"] = max(0.0, min(1.0, float(x["score"]) / _SCORE_CEILING))
        # No lexical hit means no skill; never fall back to an arbitrary one.
        kept = [x for x in scored if x["score"] >= float(min_score)]
        return kept[: max(1, int(top_k))]
