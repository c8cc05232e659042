"""Filter types, styles and the static rules attached to them."""

from enum import IntEnum


class FilterType(IntEnum):
    ATTRIBUTE_GROUP = 1
    FEATURE = 2
    PRICE = 3
    MANUFACTURER = 4
    QUANTITY = 5
    WEIGHT = 6
    CATEGORY = 7


class FilterStyle(IntEnum):
    INPUT = 1
    SLIDER = 2
    CHECKBOX = 3
    LIST_OF_VALUES = 4


# Styles that want the raw {min_value, max_value} record
RANGE_STYLES: frozenset[FilterStyle] = frozenset({FilterStyle.INPUT, FilterStyle.SLIDER})

# Labels for filter types that are not named after a catalog entity
FILTER_TYPE_LABELS: dict[FilterType, str] = {
    FilterType.PRICE: "Price",
    FilterType.CATEGORY: "Category",
    FilterType.QUANTITY: "Availability",
    FilterType.WEIGHT: "Weight",
    FilterType.MANUFACTURER: "Manufacturer",
}

# Stock status buckets, matched against product quantity
STOCK_CRITERIAS: list[dict[str, int | str]] = [
    {"name": "In stock", "value": 1},
    {"name": "Out of stock", "value": 0},
]


def get_stock_criterias() -> list[dict[str, int | str]]:
    """Return a fresh copy of the stock status criteria."""
    return [dict(criteria) for criteria in STOCK_CRITERIAS]


def parse_filter_type(value: int) -> FilterType | None:
    """Map a stored filter type to the enum, or None if unrecognized."""
    try:
        return FilterType(value)
    except ValueError:
        return None


def parse_filter_style(value: int) -> FilterStyle | None:
    """Map a stored filter style to the enum, or None if unrecognized."""
    try:
        return FilterStyle(value)
    except ValueError:
        return None
