#!/usr/bin/env python3
#
# PROJECT: term3d
# MODULE: preview.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 6.5
# LOG_REF: 2026-10-19
#

import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from term3d.cli import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass
