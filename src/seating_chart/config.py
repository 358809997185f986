"""Settings for the seating chart, optionally loaded from YAML."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

PATH_KEYS = ["layout_path", "report_dir"]


class Settings(BaseModel):
    """Runtime configuration."""

    admin_password: str = Field("admin123", description="Password required to enter Admin mode.")
    layout_path: Path = Field(Path("layout.json"), description="Where the seat layout is saved.")
    report_dir: Path = Field(Path("."), description="Directory the session report is written to.")
    report_filename: str = Field("session_report.csv", description="Filename for the CSV session report.")
    alert_threshold_minutes: float = Field(
        90.0, gt=0, description="Occupancy duration in minutes after which a seat raises an alert."
    )


def resolve_config_paths(config_data: dict, config_path: Path) -> dict:
    """Resolve relative paths against the configuration file directory."""
    resolved = dict(config_data or {})
    base_dir = config_path.parent
    for key in PATH_KEYS:
        value = resolved.get(key)
        if not value:
            continue
        path = Path(value)
        if not path.is_absolute():
            resolved[key] = str((base_dir / path).resolve())
    return resolved


def load_settings(path: Optional[Path | str] = None) -> Settings:
    """Load settings from a YAML file, or defaults when ``path`` is None."""
    if path is None:
        return Settings()
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return Settings(**resolve_config_paths(data, path))
