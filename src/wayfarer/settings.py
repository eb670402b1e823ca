from __future__ import annotations

import dataclasses
import json
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from jsonschema import Draft202012Validator

from .errors import SettingsError

logger = logging.getLogger(__name__)

CONFIG_PACKAGE = "wayfarer.config"


@dataclass
class PlayerSettings:
    starting_health: int = 10
    max_health: int = 10
    starting_weapon: str = "fists"


@dataclass
class PacingSettings:
    enabled: bool = True
    speed: float = 1.0


@dataclass
class BattleSettings:
    """
    Battle rules.

    - retaliate_on_killing_blow: the enemy still strikes on the turn it is
      defeated ("last hit still takes one").
    - punish_failed_flee: a failed run attempt lets the enemy act that turn.
    - pre_attack_pause_ms: pause before the enemy acts.
    - seed: RNG seed for flee rolls and random enemy damage; None is unseeded.
    """

    retaliate_on_killing_blow: bool = False
    punish_failed_flee: bool = False
    pre_attack_pause_ms: int = 600
    seed: Optional[int] = None


@dataclass
class DisplaySettings:
    color: bool = True


@dataclass
class Settings:
    player: PlayerSettings = field(default_factory=PlayerSettings)
    pacing: PacingSettings = field(default_factory=PacingSettings)
    battle: BattleSettings = field(default_factory=BattleSettings)
    display: DisplaySettings = field(default_factory=DisplaySettings)

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise SettingsError(f"Could not parse settings file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {path} must contain a mapping at the top level")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def _from_dict(cls, data: dict) -> "Settings":
        return Settings(
            player=PlayerSettings(**data.get("player", {})),
            pacing=PacingSettings(**data.get("pacing", {})),
            battle=BattleSettings(**data.get("battle", {})),
            display=DisplaySettings(**data.get("display", {})),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Validate a (possibly partial) settings mapping and overlay it on the defaults."""
        merged = cls._deep_merge(dataclasses.asdict(Settings()), data)
        validate_settings_dict(merged)
        return cls._from_dict(merged)

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "Settings":
        """Load settings from built-in defaults and optional user override file.

        If user_path is provided and exists, overlay values onto defaults.
        """
        try:
            with resources.files(CONFIG_PACKAGE).joinpath("default_settings.yaml").open("r", encoding="utf-8") as f:
                default_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = dataclasses.asdict(Settings())

        user_data = {}
        if user_path is not None:
            if user_path.exists():
                user_data = cls._load_yaml(user_path)
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)

        merged = cls._deep_merge(default_data, user_data)
        validate_settings_dict(merged)
        settings = cls._from_dict(merged)
        logger.debug("Settings merged: %s", settings)
        return settings

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


@lru_cache(maxsize=1)
def _load_settings_schema() -> Dict[str, Any]:
    with resources.files(CONFIG_PACKAGE).joinpath("settings.schema.json").open("r", encoding="utf-8") as f:
        return json.load(f)


def validate_settings_dict(data: Dict[str, Any]) -> None:
    """
    Validate a merged settings mapping against the packaged JSON schema.

    Raises:
        SettingsError: listing the first validation error; every error is logged.
    """
    validator = Draft202012Validator(_load_settings_schema())
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
    if errors:
        for err in errors:
            logger.error("Settings validation error at %s: %s", list(err.path), err.message)
        first = errors[0]
        location = ".".join(str(p) for p in first.path) or "<root>"
        raise SettingsError(f"Invalid settings at {location}: {first.message}")
