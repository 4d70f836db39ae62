"""Cross-field validation rules.

Each rule is a pure function over a ConfigurationModel snapshot returning zero
or more ValidationError records. Presence checks ignore surrounding whitespace
so the rules agree with the readiness summary.
"""

from __future__ import annotations

import re
from typing import Callable

from kiosk_config.core.types import SOURCE_URL, ConfigurationModel, ValidationError

Rule = Callable[[ConfigurationModel], list[ValidationError]]

TAB_SETUP = "setup"
TAB_APPLICATION = "application"
TAB_STARTMENU = "startmenu"

PIN_DESKTOP_APP_LINK = "desktopAppLink"

_GUID_RE = re.compile(
    r"^\{[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}\}$",
    re.IGNORECASE,
)

START_MENU_FRAGMENT = "\\microsoft\\windows\\start menu\\programs\\"
START_MENU_ROOTS = (
    "%appdata%",
    "%allusersprofile%",
    "%programdata%",
    "c:\\users\\",
    "c:\\programdata\\",
)

# account type -> (field id, message)
_ACCOUNT_FIELDS = {
    "auto": ("displayName", "Display Name is required for auto-logon account"),
    "existing": ("accountName", "Account Name is required"),
    "group": ("groupName", "Group Name is required"),
}


def is_valid_profile_guid(value: str | None) -> bool:
    return bool(value) and _GUID_RE.fullmatch(value.strip()) is not None


def is_start_menu_shortcut_path(path: str | None) -> bool:
    if not path:
        return False
    normalized = path.replace("/", "\\").lower()
    return START_MENU_FRAGMENT in normalized and normalized.startswith(START_MENU_ROOTS)


def _present(model: ConfigurationModel, field_id: str) -> bool:
    return bool(model.field_value(field_id).strip())


def single_app_field(model: ConfigurationModel) -> tuple[str, str] | None:
    """(field id, message) of the input that must be filled in single-app mode."""

    if model.app_type == "edge":
        if model.edge_source_type == SOURCE_URL:
            return "edgeUrl", "Edge URL is required"
        return "edgeFilePath", "Edge file path is required"
    if model.app_type == "uwp":
        return "uwpAumid", "UWP App AUMID is required"
    if model.app_type == "win32":
        return "win32Path", "Win32 Application Path is required"
    return None


def account_field(model: ConfigurationModel) -> tuple[str, str] | None:
    """(field id, message) required by the account type; None for `global`."""

    return _ACCOUNT_FIELDS.get(model.account_type)


def identity_rule(model: ConfigurationModel) -> list[ValidationError]:
    errs: list[ValidationError] = []
    if not _present(model, "configName"):
        errs.append(ValidationError("Configuration Name is required", "configName", TAB_SETUP))

    if not _present(model, "profileId"):
        errs.append(ValidationError("Profile GUID is required", "profileId", TAB_SETUP))
    elif not is_valid_profile_guid(model.field_value("profileId")):
        errs.append(ValidationError("Profile GUID format is invalid", "profileId", TAB_SETUP))
    return errs


def account_rule(model: ConfigurationModel) -> list[ValidationError]:
    required = account_field(model)
    if required is None:
        return []
    field_id, message = required
    if _present(model, field_id):
        return []
    return [ValidationError(message, field_id, TAB_SETUP)]


def single_app_rule(model: ConfigurationModel) -> list[ValidationError]:
    if model.mode != "single":
        return []
    required = single_app_field(model)
    if required is None:
        return []
    field_id, message = required
    if _present(model, field_id):
        return []
    return [ValidationError(message, field_id, TAB_SETUP)]


def multi_app_rule(model: ConfigurationModel) -> list[ValidationError]:
    errs: list[ValidationError] = []
    if model.mode not in ("multi", "restricted"):
        return errs

    if not model.allowed_apps:
        errs.append(ValidationError("At least one allowed app is required", None, TAB_APPLICATION))

    missing_targets = [
        p for p in model.start_pins
        if p.pin_type == PIN_DESKTOP_APP_LINK and not p.target and not p.system_shortcut
    ]
    if missing_targets:
        names = ", ".join(p.name for p in missing_targets)
        errs.append(
            ValidationError(
                f"{len(missing_targets)} shortcut(s) missing target path: {names}",
                None,
                TAB_STARTMENU,
            )
        )

    invalid_shortcuts = [
        p for p in model.start_pins
        if p.system_shortcut and not is_start_menu_shortcut_path(p.system_shortcut)
    ]
    if invalid_shortcuts:
        names = ", ".join(p.name for p in invalid_shortcuts)
        errs.append(
            ValidationError(
                "Start menu pin shortcuts must live under the Start Menu Programs folder "
                f"(%APPDATA% or %ALLUSERSPROFILE%): {names}",
                None,
                TAB_STARTMENU,
            )
        )

    return errs


DEFAULT_RULES: tuple[Rule, ...] = (identity_rule, account_rule, single_app_rule, multi_app_rule)
