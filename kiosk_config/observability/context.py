from __future__ import annotations

from contextvars import ContextVar


_run_id: ContextVar[str | None] = ContextVar("run_id", default=None)
_command: ContextVar[str | None] = ContextVar("command", default=None)
_config_paths: ContextVar[list[str] | None] = ContextVar("config_paths", default=None)


def bind_context(*, run_id: str, command: str) -> None:
    _run_id.set(run_id)
    _command.set(command)
    _config_paths.set([])


def add_config_path(path: str) -> None:
    paths = list(_config_paths.get() or [])
    paths.append(path)
    _config_paths.set(paths)


def snapshot() -> dict[str, object]:
    """Return a snapshot of current observability context for logging."""

    out: dict[str, object] = {}
    if (v := _run_id.get()) is not None:
        out["run_id"] = v
    if (v := _command.get()) is not None:
        out["command"] = v
    if paths := _config_paths.get():
        out["config_paths"] = list(paths)
    return out
