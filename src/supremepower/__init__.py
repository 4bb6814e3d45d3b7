"""SupremePower runtime package: skill-driven agent orchestration."""

from importlib import metadata

from .config import SupremePowerSettings, settings

__all__ = ["SupremePowerSettings", "settings", "__version__"]


def _load_version() -> str:
    try:
        version = metadata.version("supremepower")
    except metadata.PackageNotFoundError:
        return "0.0.0"
    return str(version) if version is not None else "0.0.0"


__version__ = _load_version()
