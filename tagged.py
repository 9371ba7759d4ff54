#!/usr/bin/env python3
"""
Tagged Text - render text marked up with semantic tags

Simple usage:
    python tagged.py "Tap <hl>Save</hl> to continue" -t "hl=bold yellow"
    python tagged.py -f message.txt -t "warn=bold red"
    python tagged.py "<x>oops</x>" --verbose     # Shows the missing builder
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from tagged_text.cli import app

if __name__ == "__main__":
    app()
