from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from kiosk_config.cli import main

REPO_ROOT = Path(__file__).resolve().parents[1]


def _run(capsys: pytest.CaptureFixture[str], *argv: str) -> tuple[int, str, str]:
    code = main(["--log-level", "WARNING", *argv])
    out, err = capsys.readouterr()
    return code, out, err


def test_classify(capsys: pytest.CaptureFixture[str]) -> None:
    code, out, _ = _run(capsys, "classify", r"C:\Program Files\Mozilla Firefox\firefox.exe")
    assert code == 0
    assert json.loads(out) == {"family": "firefox", "supports_kiosk": True}


def test_encode_with_family(capsys: pytest.CaptureFixture[str]) -> None:
    code, out, _ = _run(
        capsys,
        "encode",
        "--family",
        "edge",
        "--url",
        "https://example.com",
        "--kiosk-mode",
        "kioskPublic",
        "--idle-timeout",
        "5",
    )
    assert code == 0
    assert out.strip() == (
        "--kiosk https://example.com --edge-kiosk-type=public-browsing --no-first-run "
        "--kiosk-idle-timeout-minutes=5"
    )


def test_encode_classifies_app_path(capsys: pytest.CaptureFixture[str]) -> None:
    code, out, _ = _run(
        capsys,
        "encode",
        "--app",
        r"C:\Program Files\BraveSoftware\Brave-Browser\Application\brave.exe",
        "--file",
        r"C:\Kiosk\index file.html",
    )
    assert code == 0
    assert out.strip() == "--kiosk file:///C:/Kiosk/index%20file.html --no-first-run"


def test_decode(capsys: pytest.CaptureFixture[str]) -> None:
    code, out, _ = _run(capsys, "decode", "--kiosk https://example.com --no-first-run", "--family", "chrome")
    assert code == 0
    assert json.loads(out) == {
        "mode": "kioskFullscreen",
        "url": "https://example.com",
        "source_type": "url",
        "idle_timeout_minutes": 0,
        "family": "chrome",
    }


def test_decode_reads_stdin(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("--kiosk file:///C:/k.html --kiosk-idle-timeout-minutes=3\n"))
    code, out, _ = _run(capsys, "decode", "-")
    assert code == 0
    decoded = json.loads(out)
    assert decoded["source_type"] == "file"
    assert decoded["idle_timeout_minutes"] == 3


def test_validate_example_config(capsys: pytest.CaptureFixture[str]) -> None:
    code, out, _ = _run(capsys, "validate", "--no-dotenv", "--config", str(REPO_ROOT / "configs" / "kiosk.yaml"))
    assert code == 0
    assert "[OK] Configuration Name" in out
    assert "Edge launch arguments: --kiosk https://intranet.example.com/lobby" in out


def test_validate_reports_errors_as_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "kiosk.yaml"
    p.write_text(
        """
name: ""
profile_id: not-a-guid
account:
  type: global
mode: multi
""".lstrip(),
        encoding="utf-8",
    )

    code, out, _ = _run(capsys, "validate", "--no-dotenv", "--json", "--config", str(p))
    assert code == 1
    report = json.loads(out)
    assert report["ok"] is False
    assert report["launch_args"] is None
    assert [e["message"] for e in report["errors"]] == [
        "Configuration Name is required",
        "Profile GUID format is invalid",
        "At least one allowed app is required",
    ]
    assert [c["status"] for c in report["checks"]] == ["error", "error", "ok", "error", "optional-missing"]


def test_validate_xml_escapes_launch_args(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "kiosk.yaml"
    p.write_text(
        """
name: Lobby "A" & B
profile_id: "{5a6b7c8d-1e2f-4a3b-9c8d-0e1f2a3b4c5d}"
account:
  type: global
mode: single
app:
  type: edge
  source_type: url
  url: https://intranet.example.com/?a=1&b=<2>
  kiosk_mode: kioskFullscreen
""".lstrip(),
        encoding="utf-8",
    )

    code, out, _ = _run(capsys, "validate", "--no-dotenv", "--xml", "--config", str(p))
    assert code == 0
    lines = out.splitlines()
    assert lines[0] == '<KioskConfiguration Name="Lobby &quot;A&quot; &amp; B" Valid="true">'
    assert '  <Check Label="Configuration Name" Status="ok"/>' in lines
    assert (
        "  <EdgeArguments>--kiosk https://intranet.example.com/?a=1&amp;b=&lt;2&gt; "
        "--edge-kiosk-type=fullscreen --no-first-run</EdgeArguments>"
    ) in lines
    assert lines[-1] == "</KioskConfiguration>"


def test_validate_xml_lists_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "kiosk.yaml"
    p.write_text("name: Lobby\nprofile_id: nope\naccount:\n  type: global\nmode: multi\n", encoding="utf-8")

    code, out, _ = _run(capsys, "validate", "--no-dotenv", "--xml", "--config", str(p))
    assert code == 1
    assert '  <Error Tab="setup" Field="profileId">Profile GUID format is invalid</Error>' in out
    assert '  <Error Tab="application">At least one allowed app is required</Error>' in out
    assert "<EdgeArguments>" not in out


def test_validate_json_and_xml_are_exclusive(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        main(["validate", "--json", "--xml", "--config", "x.yaml"])


def test_validate_config_error_exit_code(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    p = tmp_path / "kiosk.yaml"
    p.write_text("mode: kiosk\n", encoding="utf-8")

    code, out, err = _run(capsys, "validate", "--no-dotenv", "--config", str(p))
    assert code == 2
    assert out == ""
    assert "config error: mode: unsupported value 'kiosk'" in err
