"""Shared test fixtures."""

import pytest

from catalog_filters.filters.criteria import CriteriaSources
from catalog_filters.filters.models import FilterTemplate


class FakeTemplateStore:
    def __init__(self, templates: dict[tuple[int, int], list[FilterTemplate]] | None = None):
        self.templates = templates or {}

    def find_template_filters(self, id_category: int, id_shop: int) -> list[FilterTemplate]:
        return list(self.templates.get((id_category, id_shop), []))


class FakeFeatureStore:
    def __init__(self):
        self.names = {7: "Screen size", 8: "Material"}
        # id_feature -> observed numeric values
        self.numeric_values = {7: [3.0, 5.0, 9.0]}
        self.values = {
            8: [
                {"id_feature_value": 81, "name": "Steel"},
                {"id_feature_value": 82, "name": "Wood"},
            ]
        }
        self.name_calls = 0

    def find_names(self, id_lang, id_shop):
        self.name_calls += 1
        return dict(self.names)

    def find_min_feature_value(self, id_feature, id_shop):
        values = self.numeric_values.get(id_feature)
        return min(values) if values else None

    def find_max_feature_value(self, id_feature, id_shop):
        values = self.numeric_values.get(id_feature)
        return max(values) if values else None

    def find_features_values(self, id_lang):
        return {k: list(v) for k, v in self.values.items()}


class FakeAttributeGroupStore:
    def __init__(self):
        self.names = {3: "Size", 4: "Color"}
        self.numeric_values = {3: [36.0, 38.0, 44.0]}
        self.values = {
            4: [
                {"id_attribute": 41, "name": "Red"},
                {"id_attribute": 42, "name": "Blue"},
            ]
        }

    def find_names(self, id_lang, id_shop):
        return dict(self.names)

    def find_min_attribute_group_value(self, id_attribute_group, id_lang, id_shop):
        values = self.numeric_values.get(id_attribute_group)
        return min(values) if values else None

    def find_max_attribute_group_value(self, id_attribute_group, id_lang, id_shop):
        values = self.numeric_values.get(id_attribute_group)
        return max(values) if values else None

    def find_attributes_groups_values(self, id_lang, id_shop):
        return {k: list(v) for k, v in self.values.items()}


class FakeManufacturerStore:
    def find_all_by_shop_id(self, id_shop):
        return [
            {"id_manufacturer": 1, "name": "Acme"},
            {"id_manufacturer": 2, "name": "Globex"},
        ]


class FakeCategoryStore:
    def __init__(self):
        # id_category -> id_parent
        self.parents = {42: 2, 43: 42, 44: 42, 45: 43}
        self.names = {42: "Shoes", 43: "Boots", 44: "Sandals", 45: "Hiking boots"}

    def find_child_categories(self, id_category, id_lang, id_shop):
        return [
            {"id_category": child, "name": self.names[child]}
            for child, parent in self.parents.items()
            if parent == id_category
        ]


class FakeCustomCriteriaStore:
    def __init__(self, criterias: dict[int, list[dict]] | None = None):
        self.criterias = criterias or {}
        self.calls = 0

    def find_all_criterias(self):
        self.calls += 1
        return self.criterias


class FakeAggregator:
    def __init__(self, price=(10.0, 100.0), weight=(0.0, 5.0)):
        self.price = dict(zip(("min", "max"), price))
        self.weight = dict(zip(("min", "max"), weight))

    def get_aggregated_product_price(self, aggregation):
        return self.price[aggregation]

    def get_aggregated_product_weight(self, aggregation):
        return self.weight[aggregation]


@pytest.fixture
def custom_criterias() -> FakeCustomCriteriaStore:
    return FakeCustomCriteriaStore(
        {
            30: [
                {"min_value": 0, "max_value": 49.999},
                {"min_value": 50, "max_value": 100},
            ],
            60: [
                {"min_value": 0, "max_value": 1.5},
                {"min_value": 1.5, "max_value": 3},
            ],
            20: [{"min_value": 10, "max_value": 20}],
        }
    )


@pytest.fixture
def aggregator() -> FakeAggregator:
    return FakeAggregator()


@pytest.fixture
def sources(custom_criterias, aggregator) -> CriteriaSources:
    return CriteriaSources(
        features=FakeFeatureStore(),
        attribute_groups=FakeAttributeGroupStore(),
        manufacturers=FakeManufacturerStore(),
        categories=FakeCategoryStore(),
        custom_criterias=custom_criterias,
        aggregator=aggregator,
        price_bucket_count=10,
        weight_bucket_count=10,
    )


def make_template(
    filter_type: int,
    filter_style: int,
    id_filter: int = 1,
    id_key: int | None = None,
    criteria_suffix: str | None = None,
    position: int = 0,
) -> FilterTemplate:
    return FilterTemplate(
        id_filter=id_filter,
        filter_type=filter_type,
        filter_style=filter_style,
        id_key=id_key,
        criteria_suffix=criteria_suffix,
        position=position,
    )
