"""Cross-field validation of kiosk configurations and the readiness checklist."""

from kiosk_config.validation.engine import ValidationEngine, validate, validate_field
from kiosk_config.validation.readiness import ValidationReport, build_report, render_text, summarize
from kiosk_config.validation.rules import (
    DEFAULT_RULES,
    is_start_menu_shortcut_path,
    is_valid_profile_guid,
)

__all__ = [
    "DEFAULT_RULES",
    "ValidationEngine",
    "ValidationReport",
    "build_report",
    "is_start_menu_shortcut_path",
    "is_valid_profile_guid",
    "render_text",
    "summarize",
    "validate",
    "validate_field",
]
