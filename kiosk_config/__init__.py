"""Kiosk session configurator core.

- launch: application family classification and the kiosk launch-argument codec
- validation: cross-field rules and the readiness checklist
- config: YAML loading into an immutable ConfigurationModel snapshot
"""

from __future__ import annotations

from kiosk_config.core import __version__
from kiosk_config.core.types import (
    ConfigurationModel,
    DecodedLaunch,
    LaunchSpec,
    PinDescriptor,
    ReadinessCheck,
    ValidationError,
)
from kiosk_config.launch import classify, decode, encode, supports_kiosk
from kiosk_config.validation import summarize, validate, validate_field

__all__ = [
    "ConfigurationModel",
    "DecodedLaunch",
    "LaunchSpec",
    "PinDescriptor",
    "ReadinessCheck",
    "ValidationError",
    "__version__",
    "classify",
    "decode",
    "encode",
    "summarize",
    "supports_kiosk",
    "validate",
    "validate_field",
]
