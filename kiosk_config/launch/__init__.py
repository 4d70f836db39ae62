"""Application family classification and the kiosk launch-argument codec."""

from kiosk_config.launch.codec import (
    build_edge_kiosk_args,
    build_file_url,
    build_launch_url,
    decode,
    encode,
    encode_for_application,
)
from kiosk_config.launch.families import (
    classify,
    is_brave_app,
    is_chrome_app,
    is_edge_app,
    is_firefox_app,
    is_island_app,
    supports_kiosk,
)

__all__ = [
    "build_edge_kiosk_args",
    "build_file_url",
    "build_launch_url",
    "classify",
    "decode",
    "encode",
    "encode_for_application",
    "is_brave_app",
    "is_chrome_app",
    "is_edge_app",
    "is_firefox_app",
    "is_island_app",
    "supports_kiosk",
]
