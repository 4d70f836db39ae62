"""Project core.

This package hosts the stable building blocks shared by the launch codec, the
validation engine and the config loader (errors and snapshot types).
"""

from __future__ import annotations

__all__ = [
    "__version__",
]

__version__ = "0.1.0"
