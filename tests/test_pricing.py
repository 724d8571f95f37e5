"""
Tests for pricing helpers.
"""

from partymatch.pricing.price import format_price, per_person_price_cents


class TestPerPersonPrice:
    """Tests for per_person_price_cents."""

    def test_even_split(self):
        """Test a total that divides evenly."""
        assert per_person_price_cents(10000, 4) == 2500

    def test_rounds_up(self):
        """Test leftover cents round the share up."""
        assert per_person_price_cents(10000, 3) == 3334

    def test_no_participants(self):
        """Test zero or negative participants return the total."""
        assert per_person_price_cents(10000, 0) == 10000
        assert per_person_price_cents(10000, -2) == 10000


class TestFormatPrice:
    """Tests for format_price."""

    def test_euro_default(self):
        """Test euros are the default currency."""
        assert format_price(8900) == "€89"

    def test_thousands_separator(self):
        """Test large amounts get separators and round to whole units."""
        assert format_price(123456) == "€1,235"

    def test_known_symbols(self):
        """Test dollar and pound symbols."""
        assert format_price(5000, "USD") == "$50"
        assert format_price(5000, "gbp") == "£50"

    def test_unknown_currency_uses_code(self):
        """Test unknown currencies fall back to their code."""
        assert format_price(5000, "CHF") == "CHF 50"

    def test_half_rounds_up(self):
        """Test 50 cents round up to the next unit."""
        assert format_price(150) == "€2"

    def test_zero(self):
        """Test a free package."""
        assert format_price(0) == "€0"
