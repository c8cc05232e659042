"""Display formatting for generated criteria."""

from catalog_filters.config import settings


def format_amount(value: float) -> str:
    """Round to 2 decimal places for machine-readable criterion values."""
    return f"{value:.2f}"


def display_price(value: float, currency_sign: str | None = None) -> str:
    """Format a price with the shop currency sign, e.g. ``€1,250.00``."""
    sign = settings.currency_sign if currency_sign is None else currency_sign
    return f"{sign}{value:,.2f}"


def format_number(value: float) -> str:
    """Render a number without float noise or a trailing ``.0``."""
    value = round(float(value), 6)
    if value.is_integer():
        return str(int(value))
    return str(value)


def range_value(min_value: float, max_value: float, rounded: bool = False) -> str:
    """Build the ``min:max`` value a range criterion submits."""
    if rounded:
        return f"{format_amount(min_value)}:{format_amount(max_value)}"
    return f"{format_number(min_value)}:{format_number(max_value)}"
