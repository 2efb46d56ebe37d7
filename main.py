#!/usr/bin/env python3
"""
Main entry point for the Argus live viewer
"""

import sys

from argus.main import check_config, run

if __name__ == "__main__":
    # Configuration check mode
    if len(sys.argv) > 1 and sys.argv[1] == "--check-config":
        sys.exit(check_config())

    run()
