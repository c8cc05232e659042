"""Collaborators the filter builder reads from."""

from typing import Literal, Protocol

from catalog_filters.filters.models import FilterTemplate

AggregationKind = Literal["min", "max"]

AGGS_MIN: AggregationKind = "min"
AGGS_MAX: AggregationKind = "max"


class TemplateStore(Protocol):
    def find_template_filters(
        self, id_category: int, id_shop: int
    ) -> list[FilterTemplate]: ...


class FeatureStore(Protocol):
    def find_names(self, id_lang: int, id_shop: int) -> dict[int, str]: ...

    def find_min_feature_value(self, id_feature: int, id_shop: int) -> float | None: ...

    def find_max_feature_value(self, id_feature: int, id_shop: int) -> float | None: ...

    def find_features_values(self, id_lang: int) -> dict[int, list[dict]]: ...


class AttributeGroupStore(Protocol):
    def find_names(self, id_lang: int, id_shop: int) -> dict[int, str]: ...

    def find_min_attribute_group_value(
        self, id_attribute_group: int, id_lang: int, id_shop: int
    ) -> float | None: ...

    def find_max_attribute_group_value(
        self, id_attribute_group: int, id_lang: int, id_shop: int
    ) -> float | None: ...

    def find_attributes_groups_values(
        self, id_lang: int, id_shop: int
    ) -> dict[int, list[dict]]: ...


class ManufacturerStore(Protocol):
    def find_all_by_shop_id(self, id_shop: int) -> list[dict]: ...


class CategoryStore(Protocol):
    def find_child_categories(
        self, id_category: int, id_lang: int, id_shop: int
    ) -> list[dict]: ...


class CustomCriteriaStore(Protocol):
    def find_all_criterias(self) -> dict[int, list[dict]]: ...


class ProductAggregator(Protocol):
    def get_aggregated_product_price(self, aggregation: AggregationKind) -> float: ...

    def get_aggregated_product_weight(self, aggregation: AggregationKind) -> float: ...
