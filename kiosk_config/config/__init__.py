"""Configuration loading and schema.

- YAML-first kiosk configuration (see configs/kiosk.yaml)
- Strict ${ENV_VAR} expansion (missing/empty env vars are errors)
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

from kiosk_config.config.loader import load_config
from kiosk_config.config.model import model_from_mapping
from kiosk_config.core.errors import ConfigError
from kiosk_config.core.types import ConfigurationModel

__all__ = ["ConfigError", "load_config", "load_model", "model_from_mapping"]


def load_model(paths: str | Path | Sequence[str | Path], **kwargs: Any) -> ConfigurationModel:
    """Load YAML config file(s) and build the ConfigurationModel snapshot."""

    return model_from_mapping(load_config(paths, **kwargs))
