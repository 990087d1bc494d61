"""
Settings for fluent code generation.

Settings come from three places, later ones winning:
1. Defaults on FluentCodesSettings
2. A YAML file (explicit path or $FLUENT_CODES_CONFIG)
3. $FLUENT_CODES_STORE for the word database path

A .env file in the working directory is loaded first, so either variable
can live there.

Example settings.yaml:

    joiner: "_"
    min_length: 4
    max_length: 7
    store_path: data/words_release.db
    recipes:
      container: [adjective, noun]
      ticket: [adjective, noun, six_digits]
"""

import logging
import os
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .digits import SIX_DIGITS_STEP
from .exceptions import ConfigurationError
from .models import LengthRange, WordCategory

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "FLUENT_CODES_CONFIG"
STORE_ENV_VAR = "FLUENT_CODES_STORE"

DEFAULT_JOINER = "-"
DEFAULT_MIN_LENGTH = 6
DEFAULT_MAX_LENGTH = 6
DEFAULT_STORE_PATH = Path("db") / "words_release.db"


class FluentCodesSettings(BaseModel):
    """Builder defaults, store location and user-defined recipes."""

    joiner: str = DEFAULT_JOINER
    min_length: int = Field(default=DEFAULT_MIN_LENGTH, ge=0)
    max_length: int = Field(default=DEFAULT_MAX_LENGTH, ge=0)
    store_path: Path = DEFAULT_STORE_PATH
    recipes: Dict[str, List[str]] = Field(default_factory=dict)

    @field_validator("recipes")
    @classmethod
    def _check_recipe_steps(cls, recipes: Dict[str, List[str]]) -> Dict[str, List[str]]:
        for name, steps in recipes.items():
            if not steps:
                raise ValueError(f"Recipe '{name}' has no steps")
            for step in steps:
                if step == SIX_DIGITS_STEP:
                    continue
                WordCategory.parse(step)
        return recipes

    @model_validator(mode="after")
    def _check_length_bounds(self) -> "FluentCodesSettings":
        if self.min_length > self.max_length:
            raise ValueError(
                f"min_length ({self.min_length}) exceeds max_length ({self.max_length})"
            )
        return self

    @property
    def length_range(self) -> LengthRange:
        return LengthRange(self.min_length, self.max_length)


def _read_yaml(path: Path) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read settings {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Settings {path} are not valid YAML: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings {path} must be a mapping")
    return data


def load_settings(config_path: Optional[Union[str, Path]] = None) -> FluentCodesSettings:
    """
    Build settings from defaults, a YAML file and the environment.

    Args:
        config_path: Settings file. Falls back to $FLUENT_CODES_CONFIG.

    Returns:
        Validated settings

    Raises:
        ConfigurationError: If an explicit file is missing, or any source
            holds invalid values
    """
    load_dotenv(find_dotenv(usecwd=True))

    data: dict = {}
    env_path = os.getenv(CONFIG_ENV_VAR)

    if config_path is not None:
        path = Path(config_path)
        if not path.is_file():
            raise ConfigurationError(f"Settings file not found: {path}")
        data = _read_yaml(path)
    elif env_path:
        path = Path(env_path)
        if path.is_file():
            data = _read_yaml(path)
        else:
            logger.warning(
                "%s points to missing file %s, using defaults", CONFIG_ENV_VAR, path
            )

    store_override = os.getenv(STORE_ENV_VAR)
    if store_override:
        data["store_path"] = store_override

    try:
        return FluentCodesSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e


_SETTINGS: Optional[FluentCodesSettings] = None


def get_settings() -> FluentCodesSettings:
    """Process-wide settings, loaded on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = load_settings()
    return _SETTINGS


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() reloads them."""
    global _SETTINGS
    _SETTINGS = None
