"""Application family classification by path/command signature.

A path or command line is classified by case-insensitive substring match. When
signatures of several families match, the first family in FAMILY_PRIORITY wins
(e.g. a command mentioning both chrome.exe and msedge is edge).
"""

from __future__ import annotations

from kiosk_config.core.types import (
    FAMILY_BRAVE,
    FAMILY_CHROME,
    FAMILY_EDGE,
    FAMILY_FIREFOX,
    FAMILY_ISLAND,
    FAMILY_OTHER,
    FAMILY_PRIORITY,
)

SIGNATURES: dict[str, tuple[str, ...]] = {
    FAMILY_EDGE: ("msedge", "microsoftedge", "edge\\application"),
    FAMILY_CHROME: ("chrome.exe", "\\chrome\\application"),
    FAMILY_FIREFOX: ("firefox.exe", "\\mozilla firefox\\"),
    FAMILY_BRAVE: ("brave.exe", "\\bravesoftware\\"),
    FAMILY_ISLAND: ("island.exe", "\\island\\island\\"),
}


def _matches(value: str | None, family: str) -> bool:
    if not value or not isinstance(value, str):
        return False
    lowered = value.lower()
    return any(sig in lowered for sig in SIGNATURES[family])


def classify(path_or_command: str | None) -> str:
    for family in FAMILY_PRIORITY:
        if _matches(path_or_command, family):
            return family
    return FAMILY_OTHER


def is_edge_app(value: str | None) -> bool:
    return _matches(value, FAMILY_EDGE)


def is_chrome_app(value: str | None) -> bool:
    return _matches(value, FAMILY_CHROME)


def is_firefox_app(value: str | None) -> bool:
    return _matches(value, FAMILY_FIREFOX)


def is_brave_app(value: str | None) -> bool:
    return _matches(value, FAMILY_BRAVE)


def is_island_app(value: str | None) -> bool:
    return _matches(value, FAMILY_ISLAND)


def supports_kiosk(path_or_command: str | None) -> bool:
    """True when the application is a browser with a known kiosk argument form."""

    return classify(path_or_command) != FAMILY_OTHER
