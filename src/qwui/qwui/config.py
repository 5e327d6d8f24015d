"""Engine configuration.

Example qwui.yaml:

    reserved_keys: [tag, class, variants, append, prepend, parent, wrap_content, delegate, merge]
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from qwui.engine.attributes import RESERVED_KEYS
from qwui.exceptions import ConfigurationError

log = logging.getLogger(__name__)

CONFIG_ENV_VAR = "QWUI_CONFIG"


class EngineConfig(BaseModel):
    """Static lookup tables consulted by the engine."""

    model_config = {"frozen": True}

    reserved_keys: tuple[str, ...] = RESERVED_KEYS

    @field_validator("reserved_keys")
    @classmethod
    def keep_core_keys(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        missing = [key for key in RESERVED_KEYS if key not in value]
        if missing:
            raise ValueError(f"reserved_keys must include {', '.join(missing)}")
        return value

    @classmethod
    def load(cls, path: Path) -> "EngineConfig":
        """Load config from yaml file"""
        if not path.exists():
            log.debug("No config at %s, using defaults", path)
            return cls()

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid config {path}: {e}") from e


def resolve_config(path: Path | None = None) -> EngineConfig:
    """Resolve the engine config.

    Resolution order:
    1. Explicit path argument
    2. QWUI_CONFIG environment variable
    3. Defaults
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            return EngineConfig()
        path = Path(env_path).expanduser()
    return EngineConfig.load(path)
