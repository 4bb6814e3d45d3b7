"""Agent definitions loaded from markdown files.

Each agent is a `<name>.md` file with YAML frontmatter::

    ---
    name: security-engineer
    expertise:
      - Authentication
    activation_keywords:
      - security
      - auth
    complexity_threshold: high
    ---
    # Security Engineer Persona
    ...

Frontmatter is validated here, at the boundary, so the orchestration core
only ever sees well-formed `Agent` records.
"""

from __future__ import annotations

import logging
import re
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from supremepower.errors import AgentNotFoundError
from supremepower.orchestration.models import Agent

logger = logging.getLogger(__name__)

_FRONTMATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)


class AgentFrontmatter(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    activation_keywords: List[str] = Field(default_factory=list)
    expertise: List[str] = Field(default_factory=list)
    principles: List[str] = Field(default_factory=list)
    focus: str = ""
    complexity_threshold: str = "medium"

    @field_validator("activation_keywords", "expertise", "principles", mode="before")
    @classmethod
    def _coerce_list(cls, v):
        return _coerce_str_list(v)

    @field_validator("name", "focus", "complexity_threshold", mode="before")
    @classmethod
    def _coerce_scalar(cls, v):
        if v is None:
            return v
        return str(v).strip()


def parse_agent_frontmatter(content: str) -> Dict[str, Any]:
    """Return the YAML frontmatter of an agent file as a dict ({} if absent or invalid)."""
    text = (content or "").lstrip("\ufeff")
    m = _FRONTMATTER_RE.match(text)
    if not m:
        return {}
    try:
        data = yaml.safe_load(m.group(1))
    except yaml.YAMLError as e:
        logger.warning(f"[agents] invalid frontmatter yaml: {e}")
        return {}
    return data if isinstance(data, dict) else {}


def agent_from_markdown(content: str, *, default_name: str, source: str = "built-in", path: Optional[Path] = None) -> Agent:
    fm = AgentFrontmatter.model_validate(parse_agent_frontmatter(content))
    return Agent(
        name=fm.name or default_name,
        keywords=tuple(fm.activation_keywords),
        expertise=tuple(fm.expertise),
        principles=tuple(fm.principles),
        focus=fm.focus,
        complexity_threshold=fm.complexity_threshold or "medium",
        source=source,
        path=path,
    )


def load_agent_definitions(agents_dir: Path, source: str = "built-in") -> List[Agent]:
    """Load every `*.md` agent in a directory, sorted by file name.

    A missing directory yields an empty list; unreadable or invalid files are
    logged and skipped.
    """
    root = Path(agents_dir).expanduser()
    if not root.exists() or not root.is_dir():
        return []

    agents: List[Agent] = []
    for path in sorted(root.glob("*.md"), key=lambda p: p.name.lower()):
        if not path.is_file():
            continue
        try:
            content = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.warning(f"[agents] failed to read {path}: {e}")
            continue
        try:
            agents.append(agent_from_markdown(content, default_name=path.stem, source=source, path=path))
        except ValidationError as e:
            logger.warning(f"[agents] invalid agent definition skipped: {path} errors={e.errors()}")
    return agents


class AgentCatalog:
    """Built-in plus custom agents, reloaded when any file changes.

    Custom agents shadow built-in ones with the same name; the built-in
    position in the list is kept so activation order stays stable.
    """

    def __init__(self, builtin_dir: Path, custom_dir: Optional[Path] = None) -> None:
        self.builtin_dir = Path(builtin_dir)
        self.custom_dir = Path(custom_dir) if custom_dir else None
        self._lock = threading.Lock()
        self._fingerprint: Optional[Tuple[Tuple[str, float, int], ...]] = None
        self._agents: List[Agent] = []

    def search_paths(self) -> List[Path]:
        """Persona lookup order: custom first, then built-in."""
        paths: List[Path] = []
        if self.custom_dir:
            paths.append(self.custom_dir)
        paths.append(self.builtin_dir)
        return paths

    def list_agents(self) -> List[Agent]:
        self._reload_if_changed()
        return list(self._agents)

    def get(self, name: str) -> Agent:
        for agent in self.list_agents():
            if agent.name == name:
                return agent
        raise AgentNotFoundError(name, self.search_paths())

    def names(self) -> List[str]:
        return [a.name for a in self.list_agents()]

    def read_persona(self, name: str) -> str:
        """Return the raw markdown of an agent definition."""
        for root in self.search_paths():
            path = root / f"{name}.md"
            if path.is_file():
                return path.read_text(encoding="utf-8", errors="replace")
        # Fall back to frontmatter names that differ from the file stem.
        for agent in self.list_agents():
            if agent.name == name and agent.path and agent.path.is_file():
                return agent.path.read_text(encoding="utf-8", errors="replace")
        raise AgentNotFoundError(name, self.search_paths())

    def _reload_if_changed(self) -> None:
        with self._lock:
            fp = self._compute_fingerprint()
            if fp == self._fingerprint:
                return
            self._fingerprint = fp
            self._agents = self._load_agents()
            logger.info(
                "[agents] loaded=%s builtin=%s custom=%s",
                len(self._agents),
                self.builtin_dir,
                self.custom_dir,
            )

    def _load_agents(self) -> List[Agent]:
        merged: List[Agent] = load_agent_definitions(self.builtin_dir, source="built-in")
        if not self.custom_dir:
            return merged
        index: Dict[str, int] = {a.name: i for i, a in enumerate(merged)}
        for agent in load_agent_definitions(self.custom_dir, source="custom"):
            if agent.name in index:
                merged[index[agent.name]] = agent
            else:
                index[agent.name] = len(merged)
                merged.append(agent)
        return merged

    def _compute_fingerprint(self) -> Tuple[Tuple[str, float, int], ...]:
        files: List[Tuple[str, float, int]] = []
        for root in self.search_paths():
            if not root.exists() or not root.is_dir():
                continue
            for path in root.glob("*.md"):
                try:
                    st = path.stat()
                    files.append((str(path.resolve()), st.st_mtime, st.st_size))
                except OSError:
                    continue
        files.sort(key=lambda x: x[0])
        return tuple(files)


def _coerce_str_list(v: Any) -> List[str]:
    if v is None:
        return []
    if isinstance(v, (list, tuple)):
        out: List[str] = []
        for x in v:
            s = str(x).strip()
            if s:
                out.append(s)
        return out
    if isinstance(v, str):
        # Support comma/semicolon separated strings for convenience.
        parts = [p.strip() for p in v.replace(";", ",").split(",")]
        return [p for p in parts if p]
    return [str(v).strip()] if str(v).strip() else []
