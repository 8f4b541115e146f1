"""Wrapper script to invoke the issue synchronisation CLI from a checkout."""
from __future__ import annotations

import sys
from pathlib import Path

SOURCE_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SOURCE_ROOT) not in sys.path:
    sys.path.insert(0, str(SOURCE_ROOT))

from issue_sync.cli import main


if __name__ == "__main__":  # pragma: no cover - convenience wrapper
    raise SystemExit(main())
