"""Kiosk launch-argument codec.

`encode` formats a LaunchSpec into the argument string the target browser
expects. `decode` recovers a family-agnostic DecodedLaunch from such a string.
The two are independent: the argument grammar is shared by the non-Edge
families, so the family is never recoverable from a string alone.

Argument grammar (whitespace separated tokens):
- `--kiosk <url>`
- `--edge-kiosk-type=<fullscreen|public-browsing>` (edge only)
- `--kiosk-idle-timeout-minutes=<n>` (edge only, n > 0)
- `--no-first-run`

Both functions are total: malformed input degrades to defaults, never raises.
"""

from __future__ import annotations

import re
from typing import Iterator
from urllib.parse import quote

from kiosk_config.core.types import (
    FAMILY_BRAVE,
    FAMILY_CHROME,
    FAMILY_EDGE,
    FAMILY_FIREFOX,
    FAMILY_ISLAND,
    MODE_KIOSK_FULLSCREEN,
    MODE_KIOSK_PUBLIC,
    SOURCE_FILE,
    SOURCE_URL,
    DecodedLaunch,
    LaunchSpec,
)

from .families import classify

DEFAULT_FILE_PATH = "C:/Kiosk/index.html"

FILE_URL_PREFIX = "file:///"

KIOSK_FLAG = "--kiosk"
EDGE_KIOSK_TYPE_FLAG = "--edge-kiosk-type"
IDLE_TIMEOUT_FLAG = "--kiosk-idle-timeout-minutes"
NO_FIRST_RUN_FLAG = "--no-first-run"

EDGE_TYPE_FULLSCREEN = "fullscreen"
EDGE_TYPE_PUBLIC = "public-browsing"

_DRIVE_RE = re.compile(r"^[A-Za-z]:$")
_DIGITS_RE = re.compile(r"[0-9]+")

# encodeURIComponent leaves these unescaped in addition to letters, digits and `-_.~`.
_URI_COMPONENT_SAFE = "!*'()"


def build_file_url(file_path: str | None) -> str:
    """Turn a Windows/posix path into a `file:///` URL.

    Each path segment is percent-encoded, except a leading drive letter (`C:`).
    Values already in `file:///` form are returned unchanged.
    """

    if not file_path or not isinstance(file_path, str):
        return ""
    normalized = file_path.strip()
    if not normalized:
        return ""
    if normalized.lower().startswith(FILE_URL_PREFIX):
        return normalized

    segments = normalized.replace("\\", "/").split("/")
    encoded = [
        seg
        if i == 0 and _DRIVE_RE.fullmatch(seg)
        else quote(seg, safe=_URI_COMPONENT_SAFE, errors="surrogatepass")
        for i, seg in enumerate(segments)
    ]
    return FILE_URL_PREFIX + "/".join(encoded)


def build_launch_url(
    source_type: str,
    url: str | None,
    file_path: str | None,
    default_url: str | None = None,
) -> str:
    if source_type == SOURCE_FILE:
        return build_file_url(file_path) or build_file_url(DEFAULT_FILE_PATH)
    return url or default_url or ""


def build_edge_kiosk_args(url: str, kiosk_type: str, idle_timeout_minutes: int = 0) -> str:
    args = f"{KIOSK_FLAG} {url} {EDGE_KIOSK_TYPE_FLAG}={kiosk_type} {NO_FIRST_RUN_FLAG}"
    if idle_timeout_minutes and idle_timeout_minutes > 0:
        args += f" {IDLE_TIMEOUT_FLAG}={idle_timeout_minutes}"
    return args


def encode(spec: LaunchSpec, *, default_url: str | None = None) -> str:
    """Format the launch-argument string for `spec`.

    Returns "" when the resolved target is empty or the family has no kiosk
    argument form.
    """

    url = build_launch_url(spec.source_type, spec.target, spec.target, default_url)
    if not url:
        return ""

    if spec.family == FAMILY_EDGE:
        kiosk_type = EDGE_TYPE_PUBLIC if spec.kiosk_mode == MODE_KIOSK_PUBLIC else EDGE_TYPE_FULLSCREEN
        idle = spec.idle_timeout_minutes if isinstance(spec.idle_timeout_minutes, int) else 0
        return build_edge_kiosk_args(url, kiosk_type, idle)
    if spec.family in (FAMILY_CHROME, FAMILY_BRAVE, FAMILY_ISLAND):
        return f"{KIOSK_FLAG} {url} {NO_FIRST_RUN_FLAG}"
    if spec.family == FAMILY_FIREFOX:
        return f"{KIOSK_FLAG} {url}"
    return ""


def encode_for_application(
    app_path: str | None,
    *,
    source_type: str = SOURCE_URL,
    target: str = "",
    kiosk_mode: str = MODE_KIOSK_FULLSCREEN,
    idle_timeout_minutes: int = 0,
    default_url: str | None = None,
) -> str:
    """Classify `app_path` and encode kiosk arguments for it."""

    spec = LaunchSpec(
        family=classify(app_path),
        source_type=source_type,
        target=target,
        kiosk_mode=kiosk_mode,
        idle_timeout_minutes=idle_timeout_minutes,
    )
    return encode(spec, default_url=default_url)


def _flag_values(tokens: list[str], flag: str) -> Iterator[str]:
    """Yield the non-empty values of `flag=value` tokens, in order."""

    prefix = flag + "="
    for tok in tokens:
        if tok.startswith(prefix) and len(tok) > len(prefix):
            yield tok[len(prefix):]


def decode(args: str | None) -> DecodedLaunch:
    """Recover a best-effort DecodedLaunch from a launch-argument string."""

    if not args or not isinstance(args, str):
        return DecodedLaunch()

    tokens = args.split()
    try:
        idx = tokens.index(KIOSK_FLAG)
    except ValueError:
        return DecodedLaunch()
    # A trailing `--kiosk` with no value counts as no kiosk flag at all.
    if idx + 1 >= len(tokens):
        return DecodedLaunch()

    url = tokens[idx + 1]
    source_type = SOURCE_FILE if url.lower().startswith(FILE_URL_PREFIX) else SOURCE_URL

    # Non-Edge families carry no type flag but are still in fullscreen kiosk.
    kiosk_type = next(_flag_values(tokens, EDGE_KIOSK_TYPE_FLAG), None)
    mode = MODE_KIOSK_PUBLIC if kiosk_type == EDGE_TYPE_PUBLIC else MODE_KIOSK_FULLSCREEN

    # Leading digits only: `=5min` reads as 5.
    idle_match = next(
        (m for m in (_DIGITS_RE.match(v) for v in _flag_values(tokens, IDLE_TIMEOUT_FLAG)) if m is not None),
        None,
    )
    idle = int(idle_match.group(0), 10) if idle_match is not None else 0

    return DecodedLaunch(mode=mode, url=url, source_type=source_type, idle_timeout_minutes=idle)
