"""
Quick formatter for ranking.json to make it easier to skim.

Usage:
    python pretty_example_output.py
    python pretty_example_output.py --input path/to/ranking.json --max-packages 5
"""

from __future__ import annotations

import argparse
from pathlib import Path

from partymatch.cli.readable_output import print_readable_output


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Print a readable summary of ranking.json"
    )
    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        default=Path("ranking.json"),
        help="Path to a ranking JSON file (default: ranking.json)",
    )
    parser.add_argument(
        "--max-packages",
        type=int,
        default=10,
        help="Max ranked packages to show",
    )
    args = parser.parse_args()

    print_readable_output(json_path=args.input, max_packages=args.max_packages)


if __name__ == "__main__":
    main()
