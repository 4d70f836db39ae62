from __future__ import annotations

from .context import add_config_path, bind_context
from .ids import new_run_id
from .logging import configure_logging, get_logger

__all__ = ["add_config_path", "bind_context", "configure_logging", "get_logger", "new_run_id"]
