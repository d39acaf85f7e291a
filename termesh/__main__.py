#
# PROJECT: termesh
# MODULE: termesh/__main__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .cli import main

main()
