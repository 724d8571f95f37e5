"""
Helpers to turn JSON ranking outputs into a compact, human-readable
console summary. Useful for quickly scanning ranking.json files.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from partymatch.pricing.price import format_price


def _fmt_tags(tags: list[str] | None) -> str:
    """Join a tag list, or 'n/a' when empty."""
    if not tags:
        return "n/a"
    return ", ".join(str(t) for t in tags)


def _fmt_price(cents: Any) -> str:
    """Safely format a cents value as a price."""
    try:
        return format_price(int(cents))
    except (TypeError, ValueError):
        return "n/a"


def _fmt_rating(rating: Any, reviews: Any) -> str:
    try:
        return f"{float(rating):.1f} ({int(reviews)} reviews)"
    except (TypeError, ValueError):
        return "n/a"


def print_readable_output(json_path: Path, max_packages: int = 10) -> None:
    """
    Print a human-friendly summary of a ranking JSON file.

    Args:
        json_path: Path to the JSON output of `partymatch rank`.
        max_packages: Max number of ranked packages to show.
    """
    data = json.loads(Path(json_path).read_text())
    packages = data.get("packages", [])

    print(f"Packages: {len(packages)} | Average score: {data.get('average_score', 0)}")

    best = data.get("best_match")
    if best:
        print(f"Best match: {best.get('name') or best.get('id', '?')} score {best.get('match_score')}")
    else:
        print("Best match: none")

    for idx, package in enumerate(packages[:max_packages], 1):
        badge = " [BEST MATCH]" if package.get("is_best_match") else ""
        print(
            f"\n[{idx}] {package.get('name') or package.get('id', '?')}{badge} | "
            f"score {package.get('match_score', 0)} | "
            f"rating {_fmt_rating(package.get('rating'), package.get('review_count', 0))}"
        )
        print(
            f"  Audience: size {_fmt_tags(package.get('ideal_gathering_sizes'))}; "
            f"energy {_fmt_tags(package.get('ideal_energy_levels'))}; "
            f"vibes {_fmt_tags(package.get('ideal_vibes'))}"
        )
        if package.get("price_per_person_cents") is not None:
            print(
                f"  Price: {_fmt_price(package.get('price_per_person_cents'))} per person, "
                f"{_fmt_price(package.get('base_price_cents'))} base"
            )

    if len(packages) > max_packages:
        print(f"\n... {len(packages) - max_packages} more")
