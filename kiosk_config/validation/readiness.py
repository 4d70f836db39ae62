"""Readiness checklist and the combined validation report.

The checklist is derived directly from the model (it does not read the
validation engine's output) and drives progressive disclosure in the UI:
each of the five fixed checks is `ok`, `optional-missing` or `error`.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from kiosk_config.core.types import (
    STATUS_ERROR,
    STATUS_OK,
    STATUS_OPTIONAL_MISSING,
    ConfigurationModel,
    ReadinessCheck,
    ValidationError,
)

from .engine import ValidationEngine, validate
from .rules import account_field, is_valid_profile_guid, single_app_field

LABEL_CONFIG_NAME = "Configuration Name"
LABEL_PROFILE_GUID = "Profile GUID"
LABEL_ACCOUNT = "Account configured"
LABEL_APP = "App configured"
LABEL_START_PINS = "Start pins"

_MARKERS = {STATUS_OK: "OK", STATUS_OPTIONAL_MISSING: "--", STATUS_ERROR: "!!"}


def _has_account(model: ConfigurationModel) -> bool:
    if model.account_type == "global":
        return True
    required = account_field(model)
    if required is None:
        return False
    return bool(model.field_value(required[0]).strip())


def _has_app(model: ConfigurationModel) -> bool:
    if model.mode != "single":
        return len(model.allowed_apps) > 0
    required = single_app_field(model)
    if required is None:
        return False
    return bool(model.field_value(required[0]).strip())


def _status(ok: bool, *, optional: bool = False) -> str:
    if ok:
        return STATUS_OK
    return STATUS_OPTIONAL_MISSING if optional else STATUS_ERROR


def summarize(model: ConfigurationModel) -> list[ReadinessCheck]:
    # Start pins are not applicable (auto-satisfied) in single-app mode.
    has_pins = model.mode == "single" or len(model.start_pins) > 0
    return [
        ReadinessCheck(LABEL_CONFIG_NAME, _status(bool(model.config_name.strip()))),
        ReadinessCheck(LABEL_PROFILE_GUID, _status(is_valid_profile_guid(model.profile_id))),
        ReadinessCheck(LABEL_ACCOUNT, _status(_has_account(model))),
        ReadinessCheck(LABEL_APP, _status(_has_app(model))),
        ReadinessCheck(LABEL_START_PINS, _status(has_pins, optional=model.mode != "single")),
    ]


@dataclass(frozen=True, slots=True)
class ValidationReport:
    checks: list[ReadinessCheck] = field(default_factory=list)
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def failing(self) -> list[ReadinessCheck]:
        return [c for c in self.checks if c.status == STATUS_ERROR]

    @property
    def optional_missing(self) -> list[ReadinessCheck]:
        return [c for c in self.checks if c.status == STATUS_OPTIONAL_MISSING]

    def to_dict(self) -> dict[str, object]:
        return {
            "ok": self.ok,
            "checks": [{"label": c.label, "status": c.status} for c in self.checks],
            "errors": [{"message": e.message, "field": e.field, "tab": e.tab} for e in self.errors],
        }


def build_report(model: ConfigurationModel, *, engine: ValidationEngine | None = None) -> ValidationReport:
    errors = engine.validate(model) if engine is not None else validate(model)
    return ValidationReport(checks=summarize(model), errors=errors)


def render_text(report: ValidationReport) -> str:
    lines = [f"[{_MARKERS.get(c.status, '??')}] {c.label}" for c in report.checks]
    if report.errors:
        lines.append("")
        lines.append("Errors:")
        lines.extend(f"  - {e.message}" for e in report.errors)
    return "\n".join(lines)
