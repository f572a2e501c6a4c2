"""Runtime configuration for EDA toolkit reports and scripts."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

try:  # Python 3.11+
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for older interpreters
    import tomli as tomllib

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _default_project_root() -> Path:
    return Path(__file__).resolve().parents[2]


def _load_tool_config(pyproject_path: Path) -> Mapping[str, Any]:
    if not pyproject_path.is_file():
        return {}
    with pyproject_path.open("rb") as handle:
        pyproject = tomllib.load(handle)
    tool_config = pyproject.get("tool", {}).get("eda_toolkit", {})
    if not isinstance(tool_config, Mapping):
        return {}
    return tool_config


def _resolve_path(base: Path, value: str | None) -> Path:
    if not value:
        return base
    candidate = Path(value)
    if candidate.is_absolute():
        return candidate
    return (base / candidate).resolve()


@dataclass(frozen=True)
class EdaToolkitSettings:
    """Container for top-level runtime configuration values."""

    project_root: Path
    reports_dir: Path
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "EdaToolkitSettings":
        project_root = Path(
            os.environ.get("EDA_TOOLKIT_PROJECT_ROOT", _default_project_root())
        ).resolve()
        tool_config = _load_tool_config(project_root / "pyproject.toml")

        reports_dir_name = os.environ.get(
            "EDA_TOOLKIT_REPORTS_DIR", str(tool_config.get("reports-dir", "data/reports"))
        )
        log_level = os.environ.get(
            "EDA_TOOLKIT_LOG_LEVEL", str(tool_config.get("log-level", "INFO"))
        ).upper()
        if log_level not in LOG_LEVELS:
            msg = f"Unsupported log level {log_level!r}; expected one of {list(LOG_LEVELS)}"
            raise ValueError(msg)

        return cls(
            project_root=project_root,
            reports_dir=_resolve_path(project_root, reports_dir_name),
            log_level=log_level,
        )

    def ensure_directories(self) -> None:
        """Create the reports directory when missing."""

        self.reports_dir.mkdir(parents=True, exist_ok=True)

    def to_dict(self) -> Mapping[str, Any]:
        """Serialize settings as a JSON-friendly dictionary."""

        return {
            "project_root": str(self.project_root),
            "reports_dir": str(self.reports_dir),
            "log_level": self.log_level,
        }


@lru_cache(maxsize=1)
def get_settings() -> EdaToolkitSettings:
    """Return cached application settings."""

    return EdaToolkitSettings.from_env()


__all__ = ["EdaToolkitSettings", "get_settings"]
