from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from kiosk_config.config import load_model
from kiosk_config.core.errors import ConfigError
from kiosk_config.core.types import (
    FAMILY_OTHER,
    FAMILY_PRIORITY,
    KIOSK_MODES,
    MODE_KIOSK_FULLSCREEN,
    SOURCE_FILE,
    SOURCE_URL,
    LaunchSpec,
)
from kiosk_config.launch import classify, decode, encode, supports_kiosk
from kiosk_config.observability import add_config_path, bind_context, get_logger, new_run_id
from kiosk_config.text import escape_attr, escape_xml, truncate
from kiosk_config.validation import ValidationReport, build_report, render_text

_LOG_ARGS_MAX = 120


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="kiosk-config", description="Kiosk launch arguments and configuration checks")
    p.add_argument("--log-level", default="INFO", help="log level for the JSON logs on stderr")
    sub = p.add_subparsers(dest="command", required=True)

    c = sub.add_parser("classify", help="classify an application path or command line")
    c.add_argument("path")

    e = sub.add_parser("encode", help="build kiosk launch arguments")
    app = e.add_mutually_exclusive_group(required=True)
    app.add_argument("--family", choices=[*FAMILY_PRIORITY, FAMILY_OTHER])
    app.add_argument("--app", help="application path; the family is classified from it")
    target = e.add_mutually_exclusive_group()
    target.add_argument("--url", default=None)
    target.add_argument("--file", default=None, help="local file, encoded as a file:/// URL")
    e.add_argument("--kiosk-mode", choices=sorted(KIOSK_MODES), default=MODE_KIOSK_FULLSCREEN)
    e.add_argument("--idle-timeout", type=int, default=0, help="edge only: idle timeout in minutes")
    e.add_argument("--default-url", default=None, help="fallback when no URL is given")

    d = sub.add_parser("decode", help="parse a launch-argument string ('-' reads stdin)")
    d.add_argument("args")
    d.add_argument("--family", default=None, help="attach a family (not recoverable from the string)")

    v = sub.add_parser("validate", help="validate a YAML kiosk configuration")
    v.add_argument("--config", action="append", required=True, help="YAML file; repeat to merge overrides")
    fmt = v.add_mutually_exclusive_group()
    fmt.add_argument("--json", action="store_true", help="machine-readable output")
    fmt.add_argument("--xml", action="store_true", help="XML fragment for the exported configuration")
    v.add_argument("--no-dotenv", action="store_true", help="do not load .env before ${ENV} expansion")
    return p


def _cmd_classify(args: argparse.Namespace) -> int:
    family = classify(args.path)
    print(json.dumps({"family": family, "supports_kiosk": supports_kiosk(args.path)}))
    return 0


def _cmd_encode(args: argparse.Namespace) -> int:
    family = args.family or classify(args.app)
    source_type = SOURCE_FILE if args.file is not None else SOURCE_URL
    spec = LaunchSpec(
        family=family,
        source_type=source_type,
        target=(args.file if source_type == SOURCE_FILE else args.url) or "",
        kiosk_mode=args.kiosk_mode,
        idle_timeout_minutes=args.idle_timeout,
    )
    out = encode(spec, default_url=args.default_url)
    get_logger("kiosk_config.cli").info("encode_done", family=family, empty=not out)
    print(out)
    return 0


def _cmd_decode(args: argparse.Namespace) -> int:
    raw = sys.stdin.read() if args.args == "-" else args.args
    decoded = decode(raw)
    out: dict[str, object] = {
        "mode": decoded.mode,
        "url": decoded.url,
        "source_type": decoded.source_type,
        "idle_timeout_minutes": decoded.idle_timeout_minutes,
    }
    if args.family:
        out["family"] = decoded.to_spec(args.family).family
    print(json.dumps(out))
    return 0


def _report_xml(config_name: str, report: ValidationReport, launch_args: str | None) -> str:
    lines = [f'<KioskConfiguration Name="{escape_attr(config_name)}" Valid="{str(report.ok).lower()}">']
    for c in report.checks:
        lines.append(f'  <Check Label="{escape_attr(c.label)}" Status="{c.status}"/>')
    for e in report.errors:
        field_attr = f' Field="{escape_attr(e.field)}"' if e.field else ""
        lines.append(f'  <Error Tab="{escape_attr(e.tab)}"{field_attr}>{escape_xml(e.message)}</Error>')
    if launch_args:
        lines.append(f"  <EdgeArguments>{escape_xml(launch_args)}</EdgeArguments>")
    lines.append("</KioskConfiguration>")
    return "\n".join(lines)


def _cmd_validate(args: argparse.Namespace) -> int:
    log = get_logger("kiosk_config.cli")
    paths = [Path(p) for p in args.config]
    for p in paths:
        add_config_path(str(p))

    model = load_model(paths, load_dotenv_file=not args.no_dotenv)
    report = build_report(model)

    spec = model.edge_launch_spec()
    launch_args = encode(spec) if spec is not None else None

    if args.json:
        out = report.to_dict()
        out["launch_args"] = launch_args
        print(json.dumps(out, ensure_ascii=False))
    elif args.xml:
        print(_report_xml(model.config_name, report, launch_args))
    else:
        print(render_text(report))
        if launch_args:
            print()
            print(f"Edge launch arguments: {launch_args}")

    log.info(
        "validate_done",
        ok=report.ok,
        error_count=len(report.errors),
        failing=[c.label for c in report.failing],
        launch_args=truncate(launch_args, _LOG_ARGS_MAX),
    )
    return 0 if report.ok else 1


_COMMANDS = {
    "classify": _cmd_classify,
    "encode": _cmd_encode,
    "decode": _cmd_decode,
    "validate": _cmd_validate,
}


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    log = get_logger("kiosk_config.cli", level=args.log_level)
    bind_context(run_id=new_run_id(), command=args.command)

    try:
        return _COMMANDS[args.command](args)
    except ConfigError as e:
        log.error("config_error", path=e.path)
        print(f"config error: {e}", file=sys.stderr)
        return 2
