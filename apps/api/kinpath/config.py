"""Engine configuration utilities."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel, Field, ValidationError


class EngineConfig(BaseModel):
    """Strongly typed tuning knobs loaded from config.json."""

    suggestion_horizon_weeks: int = Field(default=26, ge=0)
    upcoming_milestone_limit: int = Field(default=5, ge=0)
    age_score_max: float = Field(default=100.0, ge=0)
    topic_match_weight: float = Field(default=20.0)
    tag_match_weight: float = Field(default=15.0)
    validate_catalogs: bool = Field(default=True)


def _config_path() -> Path:
    override = os.getenv("KINPATH_CONFIG")
    if override:
        return Path(override).expanduser().resolve()
    return Path(__file__).resolve().parents[1] / "config.json"


def load_config() -> EngineConfig:
    """Load configuration from config.json, falling back to defaults when absent."""

    config_file = _config_path()
    if not config_file.exists():
        return EngineConfig()

    try:
        contents: Dict[str, Any] = json.loads(config_file.read_text())
    except json.JSONDecodeError as exc:
        example = config_file.with_name("config.example.json")
        raise ValueError(
            f"config.json at {config_file} is not valid JSON ({exc.msg})."
            f" Compare against {example}."
        ) from exc

    try:
        return EngineConfig(**contents)
    except ValidationError as exc:
        raise ValueError(f"Invalid engine settings in {config_file}: {exc}") from exc


CONFIG = load_config()
