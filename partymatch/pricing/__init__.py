"""
Pricing helpers for displaying packages.
"""

from partymatch.pricing.price import format_price, per_person_price_cents

__all__ = ["format_price", "per_person_price_cents"]
