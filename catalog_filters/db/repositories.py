"""Read-only repositories backing the filter builder."""

from collections import defaultdict
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from catalog_filters.db.models import (
    Attribute,
    AttributeGroupLang,
    AttributeGroupShop,
    AttributeLang,
    AttributeShop,
    Category,
    CategoryLang,
    CategoryShop,
    FeatureLang,
    FeatureShop,
    FeatureValue,
    FeatureValueLang,
    Filter,
    FilterCriteria,
    FilterTemplate,
    FilterTemplateCategory,
    FilterTemplateFilter,
    Manufacturer,
    ManufacturerShop,
)
from catalog_filters.filters import models


def to_float(value: Decimal | None) -> float | None:
    return float(value) if value is not None else None


class SessionRepository:
    def __init__(self, session: Session):
        self.session = session


class FilterTemplateRepository(SessionRepository):
    def find_template_filters(
        self, id_category: int, id_shop: int
    ) -> list[models.FilterTemplate]:
        """Filters of the template assigned to a category in a shop.

        If several templates match, the one with the lowest ID wins.
        """
        template_id = self.session.scalar(
            select(FilterTemplate.id_filter_template)
            .join(FilterTemplateCategory)
            .where(
                FilterTemplateCategory.id_category == id_category,
                FilterTemplate.id_shop == id_shop,
            )
            .order_by(FilterTemplate.id_filter_template)
            .limit(1)
        )
        if template_id is None:
            return []

        stmt = (
            select(Filter, FilterTemplateFilter.position)
            .join(FilterTemplateFilter, FilterTemplateFilter.id_filter == Filter.id_filter)
            .where(FilterTemplateFilter.id_filter_template == template_id)
            .order_by(FilterTemplateFilter.position, Filter.id_filter)
        )
        return [
            models.FilterTemplate(
                id_filter=f.id_filter,
                filter_type=f.filter_type,
                filter_style=f.filter_style,
                id_key=f.id_key,
                criteria_suffix=f.criteria_suffix,
                position=position,
            )
            for f, position in self.session.execute(stmt)
        ]


class FilterRepository(SessionRepository):
    def find_all_criterias(self) -> dict[int, list[dict]]:
        """Custom min/max rows of every filter, keyed by filter ID."""
        stmt = select(FilterCriteria).order_by(
            FilterCriteria.id_filter,
            FilterCriteria.position,
            FilterCriteria.id_filter_criteria,
        )
        criterias: dict[int, list[dict]] = defaultdict(list)
        for row in self.session.scalars(stmt):
            criterias[row.id_filter].append(
                {"min_value": float(row.min_value), "max_value": float(row.max_value)}
            )
        return dict(criterias)


class FeatureRepository(SessionRepository):
    def find_names(self, id_lang: int, id_shop: int) -> dict[int, str]:
        stmt = (
            select(FeatureLang.id_feature, FeatureLang.name)
            .join(FeatureShop, FeatureShop.id_feature == FeatureLang.id_feature)
            .where(FeatureLang.id_lang == id_lang, FeatureShop.id_shop == id_shop)
        )
        return {id_feature: name for id_feature, name in self.session.execute(stmt)}

    def _aggregate_value(self, aggregate, id_feature: int, id_shop: int) -> float | None:
        stmt = (
            select(aggregate(FeatureValue.numeric_value))
            .join(FeatureShop, FeatureShop.id_feature == FeatureValue.id_feature)
            .where(FeatureValue.id_feature == id_feature, FeatureShop.id_shop == id_shop)
        )
        return to_float(self.session.scalar(stmt))

    def find_min_feature_value(self, id_feature: int, id_shop: int) -> float | None:
        return self._aggregate_value(func.min, id_feature, id_shop)

    def find_max_feature_value(self, id_feature: int, id_shop: int) -> float | None:
        return self._aggregate_value(func.max, id_feature, id_shop)

    def find_features_values(self, id_lang: int) -> dict[int, list[dict]]:
        """Feature values grouped by feature, as ``{id_feature_value, name}``."""
        stmt = (
            select(FeatureValue.id_feature, FeatureValue.id_feature_value, FeatureValueLang.value)
            .join(
                FeatureValueLang,
                FeatureValueLang.id_feature_value == FeatureValue.id_feature_value,
            )
            .where(FeatureValueLang.id_lang == id_lang)
            .order_by(FeatureValue.id_feature, FeatureValueLang.value)
        )
        values: dict[int, list[dict]] = defaultdict(list)
        for id_feature, id_feature_value, name in self.session.execute(stmt):
            values[id_feature].append({"id_feature_value": id_feature_value, "name": name})
        return dict(values)


class AttributeGroupRepository(SessionRepository):
    def find_names(self, id_lang: int, id_shop: int) -> dict[int, str]:
        stmt = (
            select(AttributeGroupLang.id_attribute_group, AttributeGroupLang.name)
            .join(
                AttributeGroupShop,
                AttributeGroupShop.id_attribute_group
                == AttributeGroupLang.id_attribute_group,
            )
            .where(
                AttributeGroupLang.id_lang == id_lang,
                AttributeGroupShop.id_shop == id_shop,
            )
        )
        return {id_group: name for id_group, name in self.session.execute(stmt)}

    def _shop_scoped(self, stmt, id_lang: int, id_shop: int):
        return (
            stmt.join(AttributeLang, AttributeLang.id_attribute == Attribute.id_attribute)
            .join(AttributeShop, AttributeShop.id_attribute == Attribute.id_attribute)
            .where(AttributeLang.id_lang == id_lang, AttributeShop.id_shop == id_shop)
        )

    def _aggregate_value(
        self, aggregate, id_attribute_group: int, id_lang: int, id_shop: int
    ) -> float | None:
        stmt = select(aggregate(Attribute.numeric_value)).where(
            Attribute.id_attribute_group == id_attribute_group
        )
        return to_float(self.session.scalar(self._shop_scoped(stmt, id_lang, id_shop)))

    def find_min_attribute_group_value(
        self, id_attribute_group: int, id_lang: int, id_shop: int
    ) -> float | None:
        return self._aggregate_value(func.min, id_attribute_group, id_lang, id_shop)

    def find_max_attribute_group_value(
        self, id_attribute_group: int, id_lang: int, id_shop: int
    ) -> float | None:
        return self._aggregate_value(func.max, id_attribute_group, id_lang, id_shop)

    def find_attributes_groups_values(
        self, id_lang: int, id_shop: int
    ) -> dict[int, list[dict]]:
        """Attributes grouped by attribute group, as ``{id_attribute, name}``."""
        stmt = select(
            Attribute.id_attribute_group, Attribute.id_attribute, AttributeLang.name
        ).order_by(Attribute.id_attribute_group, Attribute.position, Attribute.id_attribute)
        values: dict[int, list[dict]] = defaultdict(list)
        for id_group, id_attribute, name in self.session.execute(
            self._shop_scoped(stmt, id_lang, id_shop)
        ):
            values[id_group].append({"id_attribute": id_attribute, "name": name})
        return dict(values)


class ManufacturerRepository(SessionRepository):
    def find_all_by_shop_id(self, id_shop: int) -> list[dict]:
        stmt = (
            select(Manufacturer.id_manufacturer, Manufacturer.name)
            .join(
                ManufacturerShop,
                ManufacturerShop.id_manufacturer == Manufacturer.id_manufacturer,
            )
            .where(ManufacturerShop.id_shop == id_shop, Manufacturer.active.is_(True))
            .order_by(Manufacturer.name)
        )
        return [
            {"id_manufacturer": id_manufacturer, "name": name}
            for id_manufacturer, name in self.session.execute(stmt)
        ]


class CategoryRepository(SessionRepository):
    def find_child_categories(
        self, id_category: int, id_lang: int, id_shop: int
    ) -> list[dict]:
        """Active direct children of a category, as ``{id_category, name}``."""
        stmt = (
            select(Category.id_category, CategoryLang.name)
            .join(CategoryLang, CategoryLang.id_category == Category.id_category)
            .join(CategoryShop, CategoryShop.id_category == Category.id_category)
            .where(
                Category.id_parent == id_category,
                Category.active.is_(True),
                CategoryLang.id_lang == id_lang,
                CategoryLang.id_shop == id_shop,
                CategoryShop.id_shop == id_shop,
            )
            .order_by(Category.position, Category.id_category)
        )
        return [
            {"id_category": child_id, "name": name}
            for child_id, name in self.session.execute(stmt)
        ]
