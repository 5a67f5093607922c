"""Game settings: optional YAML file merged with command-line overrides, validated by pydantic."""

# config.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from solver.generator import DEFAULT_MAX_ATTEMPTS
from types_sudoku import Difficulty

DIFFICULTY_NAMES = ("easy", "medium", "hard")


class GameSettings(BaseModel):
    difficulty: str = "medium"
    seed: Optional[int] = None
    max_attempts: int = Field(DEFAULT_MAX_ATTEMPTS, ge=1)
    cell_px: int = Field(100, ge=20)
    prompt: str = "> "

    @field_validator("difficulty")
    @classmethod
    def _known_difficulty(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in DIFFICULTY_NAMES:
            raise ValueError(f"difficulty must be one of {', '.join(DIFFICULTY_NAMES)}")
        return v

    @property
    def level(self) -> Difficulty:
        return Difficulty.from_string(self.difficulty)


def load_yaml(path: str | Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at top level")
    return data


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


def load_settings(path: str | Path | None = None, **overrides) -> GameSettings:
    cfg = load_yaml(path) if path else {}
    return GameSettings.model_validate(merge_overrides(cfg, **overrides))
