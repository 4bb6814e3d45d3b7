from __future__ import annotations

import logging
import re
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import yaml

from supremepower.errors import SkillNotFoundError

logger = logging.getLogger(__name__)

_SKILL_ID_RE = re.compile(r"^[a-z0-9][a-z0-9\-_]{0,63}$")
_FRONTMATTER_RE = re.compile(r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)

# First existing file wins.
_PROMPT_FILES = ("SKILL.md", "SKILL.txt", "SKILL.docx")


@dataclass(frozen=True)
class Skill:
    """A workflow skill: markdown guidance that drives agent orchestration."""

    skill_id: str
    name: str
    description: str = ""
    source: str = "built-in"
    triggers: Tuple[str, ...] = ()
    tags: Tuple[str, ...] = ()
    root: Path = Path(".")
    prompt_path: Optional[Path] = None

    def load_content(self) -> str:
        if not self.prompt_path:
            return ""
        return _read_text(self.prompt_path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "skill_id": self.skill_id,
            "name": self.name,
            "description": self.description,
            "source": self.source,
            "triggers": list(self.triggers),
            "tags": list(self.tags),
        }


@dataclass(frozen=True)
class SkillStep:
    name: str
    context: Tuple[str, ...] = ()


class SkillRegistry:
    """Built-in and custom skills, hot-loaded on demand.

    Directory layout::

        <root>/<skill-id>/SKILL.md   (or SKILL.txt / SKILL.docx)

    The folder is rescanned on each call but only re-parsed when a watched
    file's mtime/size changes. A custom skill with the same id as a built-in
    one replaces it.
    """

    def __init__(self, builtin_dir: Path, custom_dir: Optional[Path] = None) -> None:
        self.builtin_dir = Path(builtin_dir)
        self.custom_dir = Path(custom_dir) if custom_dir else None
        self._lock = threading.Lock()
        self._fingerprint: Optional[Tuple[Tuple[str, float, int], ...]] = None
        self._skills: List[Skill] = []

    def list_skills(self) -> List[Skill]:
        self._reload_if_changed()
        return list(self._skills)

    def get(self, skill_id: str) -> Skill:
        sid = (skill_id or "").strip()
        for s in self.list_skills():
            if s.skill_id == sid:
                return s
        raise SkillNotFoundError(sid)

    def load_content(self, skill_id: str) -> str:
        skill = self.get(skill_id)
        try:
            return skill.load_content()
        except OSError as e:
            logger.warning(f"[skills] failed to read {skill.prompt_path}: {e}")
            raise SkillNotFoundError(skill.skill_id) from e

    def _reload_if_changed(self) -> None:
        with self._lock:
            fp = self._compute_fingerprint()
            if fp == self._fingerprint:
                return
            self._fingerprint = fp
            self._skills = self._load_skills()
            logger.info(
                "[skills] loaded=%s builtin=%s custom=%s",
                len(self._skills),
                self.builtin_dir,
                self.custom_dir,
            )

    def _roots(self) -> List[Tuple[Path, str]]:
        roots = [(self.builtin_dir, "built-in")]
        if self.custom_dir:
            roots.append((self.custom_dir, "custom"))
        return roots

    def _compute_fingerprint(self) -> Tuple[Tuple[str, float, int], ...]:
        files: List[Tuple[str, float, int]] = []
        watched = {n.lower() for n in _PROMPT_FILES}
        for root, _ in self._roots():
            if not root.exists() or not root.is_dir():
                continue
            for path in root.glob("*/*"):
                if not path.is_file() or path.name.lower() not in watched:
                    continue
                try:
                    st = path.stat()
                    files.append((str(path.resolve()), st.st_mtime, st.st_size))
                except OSError:
                    continue
        files.sort(key=lambda x: x[0])
        return tuple(files)

    def _load_skills(self) -> List[Skill]:
        by_id: Dict[str, Skill] = {}
        for root, source in self._roots():
            if not root.exists() or not root.is_dir():
                continue
            for skill_dir in sorted(root.iterdir()):
                if not skill_dir.is_dir():
                    continue
                skill = self._load_one(skill_dir, source)
                if skill:
                    by_id[skill.skill_id] = skill
        return sorted(by_id.values(), key=lambda s: (s.name.lower(), s.skill_id))

    def _load_one(self, skill_dir: Path, source: str) -> Optional[Skill]:
        prompt_path = next((skill_dir / n for n in _PROMPT_FILES if (skill_dir / n).is_file()), None)
        if prompt_path is None:
            return None

        skill_id = skill_dir.name.strip().lower()
        if not _SKILL_ID_RE.match(skill_id):
            logger.warning(f"[skills] skip invalid skill id: {skill_dir}")
            return None

        try:
            text = _read_text(prompt_path)
        except Exception as e:
            logger.warning(f"[skills] failed to read {prompt_path}: {e}")
            return None

        meta = parse_skill_frontmatter(text)
        name = str(meta.get("name") or skill_id).strip() or skill_id
        return Skill(
            skill_id=skill_id,
            name=name,
            description=str(meta.get("description") or "").strip(),
            source=source,
            triggers=tuple(_coerce_str_list(meta.get("triggers"))),
            tags=tuple(_coerce_str_list(meta.get("tags"))),
            root=skill_dir,
            prompt_path=prompt_path,
        )


def parse_skill_frontmatter(content: str) -> Dict[str, Any]:
    text = (content or "").lstrip("\ufeff")
    m = _FRONTMATTER_RE.match(text)
    if not m:
        return {}
    try:
        data = yaml.safe_load(m.group(1))
    except yaml.YAMLError as e:
        logger.warning(f"[skills] invalid frontmatter yaml: {e}")
        return {}
    return data if isinstance(data, dict) else {}


def parse_steps(markdown: str) -> List[SkillStep]:
    """Split a skill into workflow steps at `### ` headings.

    Non-empty lines after a heading become that step's context; anything
    before the first heading is ignored.
    """
    steps: List[SkillStep] = []
    name: Optional[str] = None
    context: List[str] = []
    for line in (markdown or "").split("\n"):
        stripped = line.strip()
        if stripped.startswith("### "):
            if name is not None:
                steps.append(SkillStep(name=name, context=tuple(context)))
            name = stripped[4:].strip()
            context = []
        elif name is not None and stripped:
            context.append(stripped)
    if name is not None:
        steps.append(SkillStep(name=name, context=tuple(context)))
    return steps


def render_skill_list(skills: Sequence[Skill]) -> str:
    lines: List[str] = ["## Available Skills", ""]
    if not skills:
        lines.append("No skills found.")
    else:
        for source, title in (("built-in", "Built-in Skills"), ("custom", "Custom Skills")):
            group = [s for s in skills if s.source == source]
            if not group:
                continue
            lines.append(f"### {title}")
            lines.append("")
            for s in group:
                lines.append(f"- **{s.name}**: {s.description}" if s.description else f"- **{s.name}**")
            lines.append("")
    total = len(skills)
    lines.append("")
    lines.append(f"Total: {total} skill{'' if total == 1 else 's'}")
    return "\n".join(lines) + "\n"


def _coerce_str_list(v: Any) -> List[str]:
    if v is None:
        return []
    if isinstance(v, (list, tuple)):
        return [str(x).strip() for x in v if str(x).strip()]
    if isinstance(v, str):
        parts = [p.strip() for p in v.replace(";", ",").split(",")]
        return [p for p in parts if p]
    return [str(v).strip()] if str(v).strip() else []


def _read_text(path: Path) -> str:
    """Read skill text from md/txt, or the paragraphs of a docx."""
    suffix = path.suffix.lower()
    if suffix == ".docx":
        from docx import Document  # python-docx

        doc = Document(str(path))
        return "\n".join(p.text.strip() for p in doc.paragraphs if (p.text or "").strip())
    return path.read_text(encoding="utf-8", errors="replace")
