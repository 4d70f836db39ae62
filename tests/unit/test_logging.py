from __future__ import annotations

import json
import logging

from kiosk_config.observability import add_config_path, bind_context, new_run_id
from kiosk_config.observability.context import snapshot
from kiosk_config.observability.logging import JsonFormatter, KVLogger


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.lines: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.lines.append(self.format(record))


def test_kv_logger_emits_json_with_context() -> None:
    handler = _ListHandler()
    handler.setFormatter(JsonFormatter())
    base = logging.getLogger("kiosk_config.test_logging")
    base.propagate = False
    base.setLevel(logging.DEBUG)
    base.addHandler(handler)

    run_id = new_run_id()
    bind_context(run_id=run_id, command="validate")
    add_config_path("configs/kiosk.yaml")

    try:
        KVLogger(base).info("validate_done", ok=False, failing=["App configured"], obj=object())
    finally:
        base.removeHandler(handler)

    payload = json.loads(handler.lines[0])
    assert payload["message"] == "validate_done"
    assert payload["level"] == "INFO"
    assert payload["run_id"] == run_id
    assert payload["command"] == "validate"
    assert payload["config_paths"] == ["configs/kiosk.yaml"]
    assert payload["ok"] is False
    assert payload["failing"] == ["App configured"]
    assert payload["obj"].startswith("<object object")


def test_bind_context_resets_config_paths() -> None:
    bind_context(run_id="a", command="encode")
    add_config_path("x.yaml")
    bind_context(run_id="b", command="decode")
    snap = snapshot()
    assert snap == {"run_id": "b", "command": "decode"}


def test_new_run_id_is_hex() -> None:
    run_id = new_run_id()
    assert len(run_id) == 16
    int(run_id, 16)
