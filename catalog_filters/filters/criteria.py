"""Criteria strategies, one per filter type.

Each strategy exposes one method per style group. ``build_dispatch_table``
flattens them into a ``(FilterType, FilterStyle) -> handler`` table, so a new
type or style is a table entry rather than another branch.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from catalog_filters.config import settings
from catalog_filters.exceptions import LookupMissError
from catalog_filters.filters.constants import FilterStyle, FilterType, get_stock_criterias
from catalog_filters.filters.formatting import display_price, format_number, range_value
from catalog_filters.filters.interfaces import (
    AGGS_MAX,
    AGGS_MIN,
    AttributeGroupStore,
    CategoryStore,
    CustomCriteriaStore,
    FeatureStore,
    ManufacturerStore,
    ProductAggregator,
)
from catalog_filters.filters.models import (
    BuildContext,
    CriteriaFields,
    FilterTemplate,
    RangeCriteria,
)
from catalog_filters.filters.ranges import split_into_ranges

logger = logging.getLogger(__name__)

CriteriaPayload = RangeCriteria | list[dict]
CriteriaResult = tuple[CriteriaPayload, CriteriaFields | None]
Handler = Callable[[FilterTemplate, BuildContext], CriteriaResult]

NAME_VALUE = CriteriaFields(label_field="name", value_field="value")


@dataclass
class CriteriaSources:
    """Stores and services the strategies read from during one build."""

    features: FeatureStore
    attribute_groups: AttributeGroupStore
    manufacturers: ManufacturerStore
    categories: CategoryStore
    custom_criterias: CustomCriteriaStore
    aggregator: ProductAggregator
    price_bucket_count: int = field(default_factory=lambda: settings.price_bucket_count)
    weight_bucket_count: int = field(
        default_factory=lambda: settings.weight_bucket_count
    )
    _custom_rows: dict[int, list[dict]] | None = field(
        default=None, init=False, repr=False
    )

    def custom_rows(self, template: FilterTemplate) -> list[dict]:
        """Custom ``{min_value, max_value}`` rows defined for ``template``.

        All rows are loaded on first use and reused for the rest of the build.
        A filter without rows yields an empty list.
        """
        if self._custom_rows is None:
            self._custom_rows = self.custom_criterias.find_all_criterias()

        rows = self._custom_rows.get(template.id_filter)
        if not rows:
            logger.warning(
                "No custom criteria defined for list filter",
                extra={"id_filter": template.id_filter},
            )
            return []
        return rows

    def reset(self) -> None:
        self._custom_rows = None


def bounds_criteria(
    bounds: Iterable[tuple[float, float]],
    format_bound: Callable[[float], str],
    rounded: bool = False,
) -> list[dict]:
    """Turn ``(min, max)`` pairs into ``{name, value}`` criteria."""
    return [
        {
            "name": f"{format_bound(low)} - {format_bound(high)}",
            "value": range_value(low, high, rounded=rounded),
        }
        for low, high in bounds
    ]


def bucket_bounds(min_value: float, max_value: float, n: int) -> list[tuple[float, float]]:
    """Evenly spaced bucket bounds; a degenerate domain yields one bucket.

    Bounds of ``(0, 0)`` are what an empty product index aggregates to, so
    they yield no buckets at all.
    """
    if min_value == max_value == 0:
        logger.debug("No product bounds to bucket")
        return []
    if min_value == max_value:
        n = 1
    return [
        (r["min_range"], r["max_range"])
        for r in split_into_ranges(min_value, max_value, n)
    ]


def row_bounds(rows: list[dict]) -> list[tuple[float, float]]:
    return [(float(row["min_value"]), float(row["max_value"])) for row in rows]


def require_bounds(
    min_value: float | None, max_value: float | None, what: str
) -> RangeCriteria:
    if min_value is None or max_value is None:
        raise LookupMissError(f"No value range for {what}")
    return RangeCriteria(min_value=min_value, max_value=max_value)


class CriteriaStrategy(ABC):
    """Base strategy: maps each style of one filter type to a handler."""

    filter_type: FilterType

    def __init__(self, sources: CriteriaSources):
        self.sources = sources

    @abstractmethod
    def style_handlers(self) -> dict[FilterStyle, Handler]:
        ...


class StyledCriteriaStrategy(CriteriaStrategy):
    """Strategy with range, checkbox and custom list handlers per style."""

    def style_handlers(self) -> dict[FilterStyle, Handler]:
        # Input and slider both want the raw bounds
        return {
            FilterStyle.INPUT: self.range_criteria,
            FilterStyle.SLIDER: self.range_criteria,
            FilterStyle.CHECKBOX: self.checkbox_criteria,
            FilterStyle.LIST_OF_VALUES: self.list_criteria,
        }

    @abstractmethod
    def range_criteria(
        self, template: FilterTemplate, context: BuildContext
    ) -> CriteriaResult:
        ...

    @abstractmethod
    def checkbox_criteria(
        self, template: FilterTemplate, context: BuildContext
    ) -> CriteriaResult:
        ...

    def list_criteria(
        self, template: FilterTemplate, context: BuildContext
    ) -> CriteriaResult:
        rows = self.sources.custom_rows(template)
        return bounds_criteria(row_bounds(rows), format_number), NAME_VALUE


class ListingCriteriaStrategy(CriteriaStrategy):
    """Strategy for types that list entities regardless of style."""

    def style_handlers(self) -> dict[FilterStyle, Handler]:
        return {style: self.listing_criteria for style in FilterStyle}

    @abstractmethod
    def listing_criteria(
        self, template: FilterTemplate, context: BuildContext
    ) -> CriteriaResult:
        ...


class AttributeGroupCriteria(StyledCriteriaStrategy):
    filter_type = FilterType.ATTRIBUTE_GROUP

    def range_criteria(self, template, context):
        store = self.sources.attribute_groups
        args = (template.id_key, context.id_lang, context.id_shop)
        criteria = require_bounds(
            store.find_min_attribute_group_value(*args),
            store.find_max_attribute_group_value(*args),
            f"attribute group {template.id_key}",
        )
        return criteria, None

    def checkbox_criteria(self, template, context):
        values = self.sources.attribute_groups.find_attributes_groups_values(
            context.id_lang, context.id_shop
        )
        fields = CriteriaFields(label_field="name", value_field="id_attribute")
        return values.get(template.id_key, []), fields


class FeatureCriteria(StyledCriteriaStrategy):
    filter_type = FilterType.FEATURE

    def range_criteria(self, template, context):
        store = self.sources.features
        criteria = require_bounds(
            store.find_min_feature_value(template.id_key, context.id_shop),
            store.find_max_feature_value(template.id_key, context.id_shop),
            f"feature {template.id_key}",
        )
        return criteria, None

    def checkbox_criteria(self, template, context):
        values = self.sources.features.find_features_values(context.id_lang)
        fields = CriteriaFields(label_field="name", value_field="id_feature_value")
        return values.get(template.id_key, []), fields


class PriceCriteria(StyledCriteriaStrategy):
    filter_type = FilterType.PRICE

    def _bounds(self) -> tuple[float, float]:
        aggregator = self.sources.aggregator
        return (
            aggregator.get_aggregated_product_price(AGGS_MIN),
            aggregator.get_aggregated_product_price(AGGS_MAX),
        )

    def range_criteria(self, template, context):
        min_price, max_price = self._bounds()
        return RangeCriteria(min_value=min_price, max_value=max_price), None

    def checkbox_criteria(self, template, context):
        bounds = bucket_bounds(*self._bounds(), self.sources.price_bucket_count)
        return bounds_criteria(bounds, display_price, rounded=True), NAME_VALUE

    def list_criteria(self, template, context):
        bounds = row_bounds(self.sources.custom_rows(template))
        return bounds_criteria(bounds, display_price, rounded=True), NAME_VALUE


class WeightCriteria(StyledCriteriaStrategy):
    filter_type = FilterType.WEIGHT

    def _bounds(self) -> tuple[float, float]:
        aggregator = self.sources.aggregator
        return (
            aggregator.get_aggregated_product_weight(AGGS_MIN),
            aggregator.get_aggregated_product_weight(AGGS_MAX),
        )

    @staticmethod
    def _formatter(template: FilterTemplate) -> Callable[[float], str]:
        suffix = template.criteria_suffix
        if not suffix:
            return format_number
        return lambda value: f"{format_number(value)} {suffix}"

    def range_criteria(self, template, context):
        min_weight, max_weight = self._bounds()
        return RangeCriteria(min_value=min_weight, max_value=max_weight), None

    def checkbox_criteria(self, template, context):
        bounds = bucket_bounds(*self._bounds(), self.sources.weight_bucket_count)
        return bounds_criteria(bounds, self._formatter(template)), NAME_VALUE

    def list_criteria(self, template, context):
        bounds = row_bounds(self.sources.custom_rows(template))
        return bounds_criteria(bounds, self._formatter(template)), NAME_VALUE


class ManufacturerCriteria(ListingCriteriaStrategy):
    filter_type = FilterType.MANUFACTURER

    def listing_criteria(self, template, context):
        manufacturers = self.sources.manufacturers.find_all_by_shop_id(context.id_shop)
        return manufacturers, CriteriaFields(value_field="id_manufacturer")


class QuantityCriteria(ListingCriteriaStrategy):
    filter_type = FilterType.QUANTITY

    def listing_criteria(self, template, context):
        return get_stock_criterias(), NAME_VALUE


class CategoryCriteria(ListingCriteriaStrategy):
    filter_type = FilterType.CATEGORY

    def listing_criteria(self, template, context):
        children = self.sources.categories.find_child_categories(
            context.id_category, context.id_lang, context.id_shop
        )
        return children, CriteriaFields(value_field="id_category")


STRATEGY_CLASSES: tuple[type[CriteriaStrategy], ...] = (
    AttributeGroupCriteria,
    FeatureCriteria,
    PriceCriteria,
    ManufacturerCriteria,
    QuantityCriteria,
    WeightCriteria,
    CategoryCriteria,
)


def build_dispatch_table(
    strategies: Iterable[CriteriaStrategy],
) -> dict[tuple[FilterType, FilterStyle], Handler]:
    """Flatten strategies into a ``(type, style) -> handler`` table."""
    table: dict[tuple[FilterType, FilterStyle], Handler] = {}
    for strategy in strategies:
        for style, handler in strategy.style_handlers().items():
            table[(strategy.filter_type, style)] = handler
    return table


def default_strategies(sources: CriteriaSources) -> list[CriteriaStrategy]:
    return [strategy_class(sources) for strategy_class in STRATEGY_CLASSES]
