"""Centralized settings for SupremePower."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from supremepower.orchestration.models import ScoringPolicy
from supremepower.runtime_paths import assets_root, runtime_root, user_home_root

logger = logging.getLogger(__name__)

try:
    from dotenv import load_dotenv
except ImportError as e:
    raise RuntimeError("python-dotenv is required to load .env; please install it.") from e

# .env is optional here: every setting has a usable default.
env_file = runtime_root() / ".env"
if env_file.exists():
    # Use utf-8-sig to gracefully handle BOM written by some Windows editors.
    load_dotenv(env_file, override=False, encoding="utf-8-sig")


_PATH_DEFAULTS = {
    "agents_dir": lambda: assets_root() / "agents",
    "skills_dir": lambda: assets_root() / "skills",
    "custom_agents_dir": lambda: user_home_root() / "agents",
    "custom_skills_dir": lambda: user_home_root() / "skills",
    "logs_dir": lambda: user_home_root() / "logs",
}


class SupremePowerSettings(BaseSettings):
    """Application level settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_prefix="SUPREMEPOWER_", extra="ignore")

    # Catalog locations
    agents_dir: Path = Field(
        default_factory=_PATH_DEFAULTS["agents_dir"],
        description="Built-in agent definitions (*.md with YAML frontmatter).",
    )
    custom_agents_dir: Path = Field(
        default_factory=_PATH_DEFAULTS["custom_agents_dir"],
        description="User agent definitions; an agent here replaces a built-in one with the same name.",
    )
    skills_dir: Path = Field(
        default_factory=_PATH_DEFAULTS["skills_dir"],
        description="Built-in skills (<skill-id>/SKILL.md).",
    )
    custom_skills_dir: Path = Field(
        default_factory=_PATH_DEFAULTS["custom_skills_dir"],
        description="User-installed skills, hot-loaded on each request.",
    )
    logs_dir: Path = Field(
        default_factory=_PATH_DEFAULTS["logs_dir"],
        description="Folder for orchestration.log when verbose mode is on.",
    )

    # Orchestration policy
    agent_activation_threshold: int = Field(
        default=8,
        description="An agent activates when its score is strictly greater than this value.",
    )
    direct_hint_points: int = Field(default=10, ge=0)
    subtle_hint_points: int = Field(default=5, ge=0)
    conditional_points: int = Field(default=20, ge=0)
    max_agents_per_request: int = Field(
        default=3,
        ge=0,
        description="Cap on activated agents per request (0 = no cap).",
    )
    complexity_threshold: int = Field(default=3, ge=0)

    # Agents
    persona_detail: Literal["full", "minimal"] = Field(default="full")
    auto_create_enabled: bool = Field(default=True)
    auto_create_confirm_before_save: bool = Field(
        default=True,
        description="When true, scaffolded agents are returned but never written to disk.",
    )

    # Display / logging
    verbose: bool = Field(default=False, description="Append orchestration events to orchestration.log.")
    log_level: str = Field(default="INFO")

    server_host: str = Field(default="127.0.0.1")
    server_port: int = Field(default=5130)

    @field_validator(*_PATH_DEFAULTS.keys(), mode="before")
    @classmethod
    def _coerce_paths(cls, v, info):
        # Treat empty env vars as "unset" so we keep the intended default.
        if v is None or (isinstance(v, str) and not v.strip()):
            return _PATH_DEFAULTS[info.field_name]()
        return Path(v).expanduser()

    @field_validator("server_port", mode="after")
    @classmethod
    def _validate_server_port(cls, v):
        if not (1 <= v <= 65535):
            raise ValueError("server_port must be between 1 and 65535")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v):
        level = str(v or "INFO").strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            logger.warning("[config] unknown log_level=%s, using INFO", v)
            return "INFO"
        return level

    def scoring_policy(self) -> ScoringPolicy:
        return ScoringPolicy(
            direct_points=self.direct_hint_points,
            subtle_points=self.subtle_hint_points,
            conditional_points=self.conditional_points,
            threshold=self.agent_activation_threshold,
        )

    def ensure_directories(self) -> None:
        """Create user folders if they don't exist."""
        for path in (self.custom_agents_dir, self.custom_skills_dir, self.logs_dir):
            try:
                path.mkdir(parents=True, exist_ok=True)
            except OSError:
                # Don't block startup on a non-critical folder.
                logger.warning("[config] create dir failed (ignored): %s", path, exc_info=True)


settings = SupremePowerSettings()
