from __future__ import annotations

from dataclasses import dataclass, field

# Application families, in classification priority order.
FAMILY_EDGE = "edge"
FAMILY_CHROME = "chrome"
FAMILY_FIREFOX = "firefox"
FAMILY_BRAVE = "brave"
FAMILY_ISLAND = "island"
FAMILY_OTHER = "other"

FAMILY_PRIORITY = (FAMILY_EDGE, FAMILY_CHROME, FAMILY_FIREFOX, FAMILY_BRAVE, FAMILY_ISLAND)

SOURCE_URL = "url"
SOURCE_FILE = "file"
SOURCE_TYPES = frozenset({SOURCE_URL, SOURCE_FILE})

MODE_STANDARD = "standard"
MODE_KIOSK_FULLSCREEN = "kioskFullscreen"
MODE_KIOSK_PUBLIC = "kioskPublic"
KIOSK_MODES = frozenset({MODE_STANDARD, MODE_KIOSK_FULLSCREEN, MODE_KIOSK_PUBLIC})

ACCOUNT_TYPES = frozenset({"auto", "existing", "group", "global"})
SESSION_MODES = frozenset({"single", "multi", "restricted"})
SINGLE_APP_TYPES = frozenset({"edge", "uwp", "win32"})

STATUS_OK = "ok"
STATUS_OPTIONAL_MISSING = "optional-missing"
STATUS_ERROR = "error"


@dataclass(frozen=True, slots=True)
class LaunchSpec:
    """Structured kiosk launch intent for one application."""

    family: str
    source_type: str = SOURCE_URL
    target: str = ""
    # Only meaningful for edge; other families have a single implicit kiosk mode.
    kiosk_mode: str = MODE_STANDARD
    idle_timeout_minutes: int = 0


@dataclass(frozen=True, slots=True)
class DecodedLaunch:
    """Family-agnostic result of decoding a launch-argument string."""

    mode: str = MODE_STANDARD
    url: str = ""
    source_type: str = SOURCE_URL
    idle_timeout_minutes: int = 0

    def to_spec(self, family: str) -> LaunchSpec:
        """Attach an out-of-band family; the argument grammar does not carry one."""

        return LaunchSpec(
            family=family,
            source_type=self.source_type,
            target=self.url,
            kiosk_mode=self.mode,
            idle_timeout_minutes=self.idle_timeout_minutes,
        )


@dataclass(frozen=True, slots=True)
class PinDescriptor:
    pin_type: str
    name: str
    target: str = ""
    system_shortcut: str = ""


@dataclass(frozen=True, slots=True)
class ValidationError:
    message: str
    # None means the error is scoped to a list rather than a single control.
    field: str | None
    tab: str


@dataclass(frozen=True, slots=True)
class ReadinessCheck:
    label: str
    status: str

    @property
    def ok(self) -> bool:
        return self.status == STATUS_OK


# UI field id -> ConfigurationModel attribute.
_FIELD_ATTRS = {
    "configName": "config_name",
    "profileId": "profile_id",
    "displayName": "display_name",
    "accountName": "account_name",
    "groupName": "group_name",
    "appType": "app_type",
    "edgeSourceType": "edge_source_type",
    "edgeUrl": "edge_url",
    "edgeFilePath": "edge_file_path",
    "uwpAumid": "uwp_aumid",
    "win32Path": "win32_path",
}


@dataclass(frozen=True, slots=True)
class ConfigurationModel:
    """Read-only snapshot of the configurator state.

    Validators and the readiness summary only read from this object; it is
    rebuilt from the current form (or config file) on every call.
    """

    config_name: str = ""
    profile_id: str = ""
    account_type: str = "auto"
    display_name: str = ""
    account_name: str = ""
    group_name: str = ""
    mode: str = "single"
    app_type: str = "edge"
    edge_source_type: str = SOURCE_URL
    edge_url: str = ""
    edge_file_path: str = ""
    edge_kiosk_mode: str = MODE_KIOSK_FULLSCREEN
    edge_idle_timeout_minutes: int = 0
    uwp_aumid: str = ""
    win32_path: str = ""
    allowed_apps: tuple[str, ...] = field(default_factory=tuple)
    start_pins: tuple[PinDescriptor, ...] = field(default_factory=tuple)

    def field_value(self, field_id: str) -> str:
        attr = _FIELD_ATTRS.get(field_id)
        if attr is None:
            return ""
        value = getattr(self, attr)
        return value if isinstance(value, str) else ""

    def edge_launch_spec(self) -> LaunchSpec | None:
        """LaunchSpec for the single-app Edge kiosk, or None when not applicable."""

        if self.mode != "single" or self.app_type != "edge":
            return None
        target = self.edge_file_path if self.edge_source_type == SOURCE_FILE else self.edge_url
        return LaunchSpec(
            family=FAMILY_EDGE,
            source_type=self.edge_source_type,
            target=target.strip(),
            kiosk_mode=self.edge_kiosk_mode,
            idle_timeout_minutes=self.edge_idle_timeout_minutes,
        )
