"""Generate a new agent definition from a one-line purpose.

The draft is plain markdown with YAML frontmatter, in the same format the
catalog loads, so saving it into the custom agents folder makes it
immediately available for activation.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

logger = logging.getLogger(__name__)

_STOP_WORDS = frozenset(
    {
        "a", "an", "the", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "from", "as", "is", "was", "are", "were", "been",
        "be", "have", "has", "had", "do", "does", "did", "will", "would", "could",
        "should", "may", "might", "must", "can", "help", "development", "expert",
        "specialist", "engineer", "developer", "architect", "senior", "junior",
    }
)

_PHRASE_STOP_WORDS = frozenset({"the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with"})

# Case-sensitive: "Go" the language, not "go" the verb.
_TECH_PATTERNS = [
    re.compile(r"\b(React|Vue|Angular|Svelte|Next\.js|Nuxt)\b"),
    re.compile(r"\b(Node\.js|Express|Fastify|Koa)\b"),
    re.compile(r"\b(TypeScript|JavaScript|Python|Java|Rust|Go)\b|C\+\+"),
    re.compile(r"\b(PostgreSQL|MySQL|MongoDB|Redis|DynamoDB)\b"),
    re.compile(r"\b(Docker|Kubernetes|AWS|GCP|Azure)\b"),
    re.compile(r"\b(GraphQL|REST|gRPC|WebSocket)\b"),
    re.compile(r"\b(Jest|Mocha|Cypress|Playwright)\b"),
    re.compile(r"\b(Webpack|Vite|Rollup|esbuild)\b"),
]

_LOW_INDICATORS = ("basic", "simple", "beginner", "introduction", "getting started")
_HIGH_INDICATORS = ("senior", "advanced", "expert", "architect", "optimization", "performance", "security", "scale")

MAX_KEYWORDS = 15
MAX_EXPERTISE = 5


@dataclass(frozen=True)
class AgentDraft:
    name: str
    keywords: Tuple[str, ...]
    expertise: Tuple[str, ...]
    complexity_threshold: str
    content: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "keywords": list(self.keywords),
            "expertise": list(self.expertise),
            "complexity_threshold": self.complexity_threshold,
            "content": self.content,
        }


def generate_agent_name(purpose: str) -> str:
    name = re.sub(r"[^a-z0-9\s-]", "", (purpose or "").lower()).strip()
    name = re.sub(r"\s+", "-", name)
    name = re.sub(r"-+", "-", name)
    return name.strip("-")


def extract_keywords(purpose: str) -> List[str]:
    keywords: List[str] = []
    for word in re.sub(r"[^a-z0-9\s]", " ", (purpose or "").lower()).split():
        if len(word) > 2 and word not in _STOP_WORDS and word not in keywords:
            keywords.append(word)

    for pattern in _TECH_PATTERNS:
        for m in pattern.finditer(purpose or ""):
            tech = m.group(0)
            if tech.lower() not in keywords:
                keywords.append(tech)

    return keywords[:MAX_KEYWORDS]


def determine_complexity(purpose: str) -> str:
    lower = (purpose or "").lower()
    if any(ind in lower for ind in _HIGH_INDICATORS):
        return "high"
    if any(ind in lower for ind in _LOW_INDICATORS):
        return "low"
    return "medium"


def capitalize_words(text: str) -> str:
    return " ".join(w[:1].upper() + w[1:].lower() for w in (text or "").split())


def _is_significant_phrase(phrase: str) -> bool:
    return any(w not in _PHRASE_STOP_WORDS and len(w) > 2 for w in phrase.lower().split())


def generate_expertise(purpose: str) -> List[str]:
    expertise: List[str] = []
    words = (purpose or "").split()
    for i in range(len(words)):
        if i + 2 < len(words):
            phrase = " ".join(words[i : i + 3])
            if _is_significant_phrase(phrase):
                expertise.append(capitalize_words(phrase))
        if i + 1 < len(words):
            phrase = " ".join(words[i : i + 2])
            if _is_significant_phrase(phrase) and len(expertise) < MAX_EXPERTISE:
                expertise.append(capitalize_words(phrase))

    if len(expertise) < 3:
        for keyword in extract_keywords(purpose)[: MAX_EXPERTISE - len(expertise)]:
            expertise.append(capitalize_words(keyword))

    return expertise[:MAX_EXPERTISE]


def render_agent_markdown(purpose: str, name: str, keywords: List[str], expertise: List[str], complexity: str) -> str:
    frontmatter = yaml.safe_dump(
        {
            "name": name,
            "expertise": expertise,
            "activation_keywords": keywords,
            "complexity_threshold": complexity,
        },
        sort_keys=False,
        allow_unicode=True,
    )
    focus = (purpose or "").lower()
    expertise_blocks = "\n\n".join(
        f"**{e}:**\n- [Specific skill or knowledge area]\n- [Specific skill or knowledge area]" for e in expertise
    )
    activation = "\n".join(f"- {k}" for k in keywords[:5])
    return (
        f"---\n{frontmatter}---\n\n"
        f"# {capitalize_words(purpose)} Persona\n\n"
        f"You are a specialized agent focused on {focus}.\n\n"
        f"## Core Expertise\n\n{expertise_blocks}\n\n"
        "## Approach\n\n"
        "When activated, you should:\n\n"
        f"1. **Analyze Requirements**: Understand the specific needs related to {focus}\n"
        "2. **Apply Best Practices**: Leverage industry standards and proven patterns\n"
        "3. **Provide Guidance**: Offer clear, actionable recommendations\n"
        "4. **Ensure Quality**: Focus on maintainability, scalability, and performance\n\n"
        "## Activation Context\n\n"
        "You are activated when the user's request involves:\n"
        f"{activation}\n"
    )


def generate_agent(purpose: str) -> AgentDraft:
    name = generate_agent_name(purpose)
    if not name:
        raise ValueError("purpose must contain at least one letter or digit")
    keywords = extract_keywords(purpose)
    expertise = generate_expertise(purpose)
    complexity = determine_complexity(purpose)
    return AgentDraft(
        name=name,
        keywords=tuple(keywords),
        expertise=tuple(expertise),
        complexity_threshold=complexity,
        content=render_agent_markdown(purpose, name, keywords, expertise, complexity),
    )


def save_agent(draft: AgentDraft, custom_dir: Path) -> Path:
    dest = Path(custom_dir).expanduser()
    dest.mkdir(parents=True, exist_ok=True)
    path = dest / f"{draft.name}.md"
    path.write_text(draft.content, encoding="utf-8")
    logger.info(f"[agents] scaffolded agent saved: {path}")
    return path
