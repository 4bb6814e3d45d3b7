import pytest
from pydantic import ValidationError

from supremepower.config import SupremePowerSettings
from supremepower.runtime_paths import assets_root


def test_defaults(monkeypatch):
    for name in ("AGENTS_DIR", "AGENT_ACTIVATION_THRESHOLD", "MAX_AGENTS_PER_REQUEST", "PERSONA_DETAIL"):
        monkeypatch.delenv(f"SUPREMEPOWER_{name}", raising=False)
    s = SupremePowerSettings()
    assert s.agents_dir == assets_root() / "agents"
    assert s.max_agents_per_request == 3
    assert s.persona_detail == "full"
    policy = s.scoring_policy()
    assert (policy.direct_points, policy.subtle_points, policy.conditional_points, policy.threshold) == (10, 5, 20, 8)


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("SUPREMEPOWER_AGENT_ACTIVATION_THRESHOLD", "12")
    monkeypatch.setenv("SUPREMEPOWER_CONDITIONAL_POINTS", "30")
    monkeypatch.setenv("SUPREMEPOWER_CUSTOM_AGENTS_DIR", str(tmp_path / "mine"))
    monkeypatch.setenv("SUPREMEPOWER_PERSONA_DETAIL", "minimal")
    s = SupremePowerSettings()
    assert s.scoring_policy().threshold == 12
    assert s.scoring_policy().conditional_points == 30
    assert s.custom_agents_dir == tmp_path / "mine"
    assert s.persona_detail == "minimal"


def test_empty_path_env_keeps_default(monkeypatch):
    monkeypatch.setenv("SUPREMEPOWER_SKILLS_DIR", "")
    assert SupremePowerSettings().skills_dir == assets_root() / "skills"


def test_invalid_values(monkeypatch):
    monkeypatch.setenv("SUPREMEPOWER_SERVER_PORT", "70000")
    with pytest.raises(ValidationError):
        SupremePowerSettings()


def test_unknown_log_level_falls_back_to_info():
    assert SupremePowerSettings(log_level="chatty").log_level == "INFO"
    assert SupremePowerSettings(log_level="debug").log_level == "DEBUG"


def test_ensure_directories(tmp_path):
    s = SupremePowerSettings(
        custom_agents_dir=tmp_path / "a",
        custom_skills_dir=tmp_path / "s",
        logs_dir=tmp_path / "l",
    )
    s.ensure_directories()
    assert (tmp_path / "a").is_dir() and (tmp_path / "s").is_dir() and (tmp_path / "l").is_dir()
