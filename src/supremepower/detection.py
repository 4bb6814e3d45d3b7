"""Heuristic complexity detection for incoming user messages."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List

TECHNICAL_KEYWORDS = (
    "React", "Vue", "Angular", "API", "REST", "GraphQL",
    "database", "SQL", "MongoDB", "PostgreSQL",
    "performance", "optimization", "optimize", "benchmark",
    "security", "authentication", "encryption",
    "deployment", "CI/CD", "Docker", "Kubernetes",
    "testing", "TDD", "debugging",
    "TypeScript", "JavaScript", "Python", "Node.js",
)

_CODE_BLOCK_RE = re.compile(r"```[\s\S]*```")
_INLINE_CODE_RE = re.compile(r"`[^`]+`")
_FILE_PATH_RE = re.compile(r"/[\w\-./]+\.(js|ts|py|go|rs|java)")


@dataclass(frozen=True)
class ComplexityResult:
    is_complex: bool
    reasons: List[str] = field(default_factory=list)
    keywords: List[str] = field(default_factory=list)
    score: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_complex": self.is_complex,
            "reasons": list(self.reasons),
            "keywords": list(self.keywords),
            "score": self.score,
        }


def detect_complexity(message: str, threshold: int = 3) -> ComplexityResult:
    text = message or ""
    reasons: List[str] = []
    score = 0

    if len(text.split()) > 50:
        reasons.append("length")
        score += 2

    lower = text.lower()
    keywords = [k for k in TECHNICAL_KEYWORDS if k.lower() in lower]
    if keywords:
        reasons.append("keywords")
        score += len(keywords)

    if _CODE_BLOCK_RE.search(text) or _INLINE_CODE_RE.search(text):
        reasons.append("code-blocks")
        score += 3

    if text.count("?") > 1:
        reasons.append("multiple-questions")
        score += 2

    if _FILE_PATH_RE.search(text):
        reasons.append("file-paths")
        score += 1

    return ComplexityResult(is_complex=score >= threshold, reasons=reasons, keywords=keywords, score=score)
