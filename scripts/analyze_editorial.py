#!/usr/bin/env python3
"""Standalone editorial analysis script.

Lists today's editorials, or fetches one and prints its PREP analysis.

Usage:
    uv run python scripts/analyze_editorial.py list
    uv run python scripts/analyze_editorial.py analyze https://www.mk.co.kr/news/editorial/11234567
    uv run python scripts/analyze_editorial.py analyze URL --save
"""

import sys
from pathlib import Path

# Ensure project root is importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from prepmaster.cli import run

if __name__ == "__main__":
    run()
