"""
Price helpers for package cards.

All amounts are integer cents.
"""

from partymatch.scoring.scorer import round_half_up

CURRENCY_SYMBOLS = {
    "EUR": "€",
    "USD": "$",
    "GBP": "£",
}


def per_person_price_cents(total_price_cents: int, participant_count: int) -> int:
    """
    Split a total price across participants, rounding up to the next cent.

    With no participants the total is returned unchanged.
    """
    if participant_count <= 0:
        return total_price_cents
    return -(-total_price_cents // participant_count)


def format_price(cents: int, currency: str = "EUR") -> str:
    """
    Format cents as a whole-unit display price.

    Examples:
        >>> format_price(123456)
        '€1,235'
        >>> format_price(5000, "CHF")
        'CHF 50'
    """
    code = currency.upper()
    amount = round_half_up(abs(cents) / 100)
    sign = "-" if cents < 0 and amount else ""
    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol is None:
        return f"{sign}{code} {amount:,}"
    return f"{sign}{symbol}{amount:,}"
