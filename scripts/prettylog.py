#!/usr/bin/env python3
"""
CLI: pretty print JSON log lines from stdin (run from a checkout, no install needed).
Usage:
  tail -f app.log | python scripts/prettylog.py
  tail -f app.log | python scripts/prettylog.py --color-scheme chalk
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from prettylog.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
