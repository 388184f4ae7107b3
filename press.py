#!/usr/bin/env python3
"""
Column Press - two-column PDF layout for HTML-styled articles

Simple usage:
    python press.py article.json                 # Writes the job's outputFile
    python press.py article.json -o article.pdf  # Explicit output path
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from column_press.cli import app

if __name__ == "__main__":
    app()
