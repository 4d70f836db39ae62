from __future__ import annotations

from typing import Any, Mapping

from kiosk_config.core.errors import ConfigError
from kiosk_config.core.types import (
    ACCOUNT_TYPES,
    KIOSK_MODES,
    MODE_KIOSK_FULLSCREEN,
    SESSION_MODES,
    SINGLE_APP_TYPES,
    SOURCE_TYPES,
    SOURCE_URL,
    ConfigurationModel,
    PinDescriptor,
)


def _mapping(raw: Mapping[str, Any], key: str, *, path: str) -> Mapping[str, Any]:
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError("must be a mapping", path=path)
    return value


def _str(value: Any, *, path: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise ConfigError("must be a string", path=path)
    return str(value)


def _choice(value: Any, choices: frozenset[str], default: str, *, path: str) -> str:
    if value is None:
        return default
    if not isinstance(value, str) or value not in choices:
        raise ConfigError(f"unsupported value {value!r} (expected one of: {', '.join(sorted(choices))})", path=path)
    return value


def _non_negative_int(value: Any, *, path: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ConfigError("must be an integer >= 0", path=path)
    try:
        n = int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError("must be an integer >= 0", path=path) from e
    if n < 0:
        raise ConfigError("must be an integer >= 0", path=path)
    return n


def _pins(value: Any, *, path: str) -> tuple[PinDescriptor, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ConfigError("must be a list", path=path)

    pins: list[PinDescriptor] = []
    for i, item in enumerate(value):
        item_path = f"{path}[{i}]"
        if not isinstance(item, Mapping):
            raise ConfigError("must be a mapping", path=item_path)
        pin_type = _str(item.get("pin_type"), path=f"{item_path}.pin_type")
        if not pin_type:
            raise ConfigError("missing required field", path=f"{item_path}.pin_type")
        pins.append(
            PinDescriptor(
                pin_type=pin_type,
                name=_str(item.get("name"), path=f"{item_path}.name"),
                target=_str(item.get("target"), path=f"{item_path}.target"),
                system_shortcut=_str(item.get("system_shortcut"), path=f"{item_path}.system_shortcut"),
            )
        )
    return tuple(pins)


def model_from_mapping(raw: Mapping[str, Any]) -> ConfigurationModel:
    """Map a loaded config dict into an immutable ConfigurationModel.

    Shape errors (wrong types, unknown account/mode/app types) raise ConfigError.
    Missing values are left empty; reporting them is the validation engine's job.
    """

    if not isinstance(raw, Mapping):
        raise ConfigError("top-level config must be a mapping")

    account = _mapping(raw, "account", path="account")
    app = _mapping(raw, "app", path="app")

    allowed_raw = raw.get("allowed_apps")
    if allowed_raw is None:
        allowed_raw = []
    if not isinstance(allowed_raw, list):
        raise ConfigError("must be a list of strings", path="allowed_apps")
    allowed_apps = tuple(_str(v, path=f"allowed_apps[{i}]") for i, v in enumerate(allowed_raw))

    return ConfigurationModel(
        config_name=_str(raw.get("name"), path="name"),
        profile_id=_str(raw.get("profile_id"), path="profile_id"),
        account_type=_choice(account.get("type"), ACCOUNT_TYPES, "auto", path="account.type"),
        display_name=_str(account.get("display_name"), path="account.display_name"),
        account_name=_str(account.get("account_name"), path="account.account_name"),
        group_name=_str(account.get("group_name"), path="account.group_name"),
        mode=_choice(raw.get("mode"), SESSION_MODES, "single", path="mode"),
        app_type=_choice(app.get("type"), SINGLE_APP_TYPES, "edge", path="app.type"),
        edge_source_type=_choice(app.get("source_type"), SOURCE_TYPES, SOURCE_URL, path="app.source_type"),
        edge_url=_str(app.get("url"), path="app.url"),
        edge_file_path=_str(app.get("file_path"), path="app.file_path"),
        edge_kiosk_mode=_choice(app.get("kiosk_mode"), KIOSK_MODES, MODE_KIOSK_FULLSCREEN, path="app.kiosk_mode"),
        edge_idle_timeout_minutes=_non_negative_int(
            app.get("idle_timeout_minutes"), path="app.idle_timeout_minutes"
        ),
        uwp_aumid=_str(app.get("aumid"), path="app.aumid"),
        win32_path=_str(app.get("path"), path="app.path"),
        allowed_apps=allowed_apps,
        start_pins=_pins(raw.get("start_pins"), path="start_pins"),
    )
