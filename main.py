"""Command-line entry point for the hello-world mock data."""

from __future__ import annotations

import sys

from hello_world.cli import main

if __name__ == "__main__":
    sys.exit(main())
