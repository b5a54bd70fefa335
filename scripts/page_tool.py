#!/usr/bin/env python3
"""
Page title tool.

Converts page titles between Wiki and URL form, splits subpage paths, and
prepares page creation requests from stdin without sending them.

Usage:
    python scripts/page_tool.py to-uri "Help:Getting there & away"
    python scripts/page_tool.py --config config.json url "Main Page"
    cat page.txt | python scripts/page_tool.py --config config.json create -a "Sandbox"
"""

import sys
from pathlib import Path

# Add project root to path for the shared package
SCRIPT_DIR = Path(__file__).parent
PROJECT_ROOT = SCRIPT_DIR.parent
sys.path.insert(0, str(PROJECT_ROOT))

from mwgateway.cli import main

if __name__ == "__main__":
    sys.exit(main())
