from __future__ import annotations

import pytest

from kiosk_config.launch.families import (
    classify,
    is_brave_app,
    is_chrome_app,
    is_edge_app,
    is_firefox_app,
    is_island_app,
    supports_kiosk,
)


@pytest.mark.parametrize(
    ("path", "family"),
    [
        (r"C:\Program Files (x86)\Microsoft\Edge\Application\msedge.exe", "edge"),
        ("Microsoft.MicrosoftEdge_8wekyb3d8bbwe!MicrosoftEdge", "edge"),
        (r"C:\Program Files\Google\Chrome\Application\chrome.exe", "chrome"),
        (r"C:\Program Files\Mozilla Firefox\firefox.exe", "firefox"),
        (r"C:\Program Files\BraveSoftware\Brave-Browser\Application\brave.exe", "brave"),
        (r"C:\Program Files\Island\Island\Application\Island.exe", "island"),
        (r"C:\Windows\System32\notepad.exe", "other"),
    ],
)
def test_classify_known_paths(path: str, family: str) -> None:
    assert classify(path) == family


def test_classify_is_case_insensitive() -> None:
    assert classify(r"C:\PROGRAM FILES\GOOGLE\CHROME\APPLICATION\CHROME.EXE") == "chrome"


def test_first_family_in_priority_order_wins() -> None:
    assert classify("chrome.exe --proxy-for msedge") == "edge"
    assert classify("firefox.exe chrome.exe") == "chrome"


@pytest.mark.parametrize("value", ["", None])
def test_empty_input_is_other(value: str | None) -> None:
    assert classify(value) == "other"
    assert supports_kiosk(value) is False


def test_family_predicates() -> None:
    assert is_edge_app("msedge.exe")
    assert is_chrome_app(r"C:\x\Chrome\Application\launcher.exe")
    assert is_firefox_app("FIREFOX.EXE")
    assert is_brave_app(r"C:\BraveSoftware\brave")
    assert is_island_app("island.exe")
    assert not is_edge_app("chrome.exe")
    assert not is_island_app(None)


def test_supports_kiosk() -> None:
    assert supports_kiosk("brave.exe")
    assert not supports_kiosk(r"C:\Tools\putty.exe")
