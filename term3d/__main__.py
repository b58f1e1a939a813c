#
# PROJECT: term3d
# MODULE: term3d/__main__.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 6.5
# LOG_REF: 2026-10-19
#

import sys

from .cli import main

sys.exit(main())
