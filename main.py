from __future__ import annotations

import sys
from pathlib import Path


def _ensure_repo_on_path() -> None:
    root = Path(__file__).resolve().parent
    # Append (not prepend) so an installed kiosk_config takes precedence.
    sys.path.append(str(root))


def main() -> int:
    _ensure_repo_on_path()
    from kiosk_config.cli import main as cli_main

    return cli_main()


if __name__ == "__main__":
    raise SystemExit(main())
