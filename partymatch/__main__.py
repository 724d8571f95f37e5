"""
Entry point for running partymatch as a module.

Usage:
    python -m partymatch rank --input example.json
    python -m partymatch make-example
    python -m partymatch serve --port 8000
"""

import sys

from partymatch.cli.main import cli

if __name__ == "__main__":
    sys.exit(cli())
