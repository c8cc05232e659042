"""SQLAlchemy models for filter configuration and catalog lookups."""

from decimal import Decimal

from sqlalchemy import (
    Boolean,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


# === Filter configuration ===


class FilterTemplate(Base):
    __tablename__ = "filter_templates"

    id_filter_template: Mapped[int] = mapped_column(Integer, primary_key=True)
    id_shop: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    categories: Mapped[list["FilterTemplateCategory"]] = relationship(
        back_populates="template", cascade="all, delete-orphan"
    )
    filters: Mapped[list["FilterTemplateFilter"]] = relationship(
        back_populates="template",
        cascade="all, delete-orphan",
        order_by="FilterTemplateFilter.position",
    )

    __table_args__ = (Index("ix_filter_templates_id_shop", "id_shop"),)


class FilterTemplateCategory(Base):
    __tablename__ = "filter_template_categories"

    id_filter_template: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("filter_templates.id_filter_template", ondelete="CASCADE"),
        primary_key=True,
    )
    id_category: Mapped[int] = mapped_column(Integer, primary_key=True)

    template: Mapped["FilterTemplate"] = relationship(back_populates="categories")

    __table_args__ = (
        Index("ix_filter_template_categories_id_category", "id_category"),
    )


class Filter(Base):
    __tablename__ = "filters"

    id_filter: Mapped[int] = mapped_column(Integer, primary_key=True)
    filter_type: Mapped[int] = mapped_column(Integer, nullable=False)
    filter_style: Mapped[int] = mapped_column(Integer, nullable=False)
    # Referenced feature or attribute group
    id_key: Mapped[int | None] = mapped_column(Integer)
    criteria_suffix: Mapped[str | None] = mapped_column(String(32))

    criterias: Mapped[list["FilterCriteria"]] = relationship(
        back_populates="filter",
        cascade="all, delete-orphan",
        order_by="FilterCriteria.position",
    )


class FilterTemplateFilter(Base):
    __tablename__ = "filter_template_filters"

    id_filter_template: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("filter_templates.id_filter_template", ondelete="CASCADE"),
        primary_key=True,
    )
    id_filter: Mapped[int] = mapped_column(
        Integer, ForeignKey("filters.id_filter", ondelete="CASCADE"), primary_key=True
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    template: Mapped["FilterTemplate"] = relationship(back_populates="filters")
    filter: Mapped["Filter"] = relationship()


class FilterCriteria(Base):
    """Custom min/max row of a list-of-values filter."""

    __tablename__ = "filter_criterias"

    id_filter_criteria: Mapped[int] = mapped_column(Integer, primary_key=True)
    id_filter: Mapped[int] = mapped_column(
        Integer, ForeignKey("filters.id_filter", ondelete="CASCADE"), nullable=False
    )
    min_value: Mapped[Decimal] = mapped_column(Numeric(20, 6), nullable=False)
    max_value: Mapped[Decimal] = mapped_column(Numeric(20, 6), nullable=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    filter: Mapped["Filter"] = relationship(back_populates="criterias")

    __table_args__ = (Index("ix_filter_criterias_id_filter", "id_filter"),)


# === Catalog ===


class Feature(Base):
    __tablename__ = "features"

    id_feature: Mapped[int] = mapped_column(Integer, primary_key=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class FeatureLang(Base):
    __tablename__ = "feature_lang"

    id_feature: Mapped[int] = mapped_column(
        Integer, ForeignKey("features.id_feature", ondelete="CASCADE"), primary_key=True
    )
    id_lang: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)


class FeatureShop(Base):
    __tablename__ = "feature_shop"

    id_feature: Mapped[int] = mapped_column(
        Integer, ForeignKey("features.id_feature", ondelete="CASCADE"), primary_key=True
    )
    id_shop: Mapped[int] = mapped_column(Integer, primary_key=True)


class FeatureValue(Base):
    __tablename__ = "feature_values"

    id_feature_value: Mapped[int] = mapped_column(Integer, primary_key=True)
    id_feature: Mapped[int] = mapped_column(
        Integer, ForeignKey("features.id_feature", ondelete="CASCADE"), nullable=False
    )
    # Parsed numeric value, NULL for non-numeric values
    numeric_value: Mapped[Decimal | None] = mapped_column(Numeric(20, 6))

    __table_args__ = (Index("ix_feature_values_id_feature", "id_feature"),)


class FeatureValueLang(Base):
    __tablename__ = "feature_value_lang"

    id_feature_value: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("feature_values.id_feature_value", ondelete="CASCADE"),
        primary_key=True,
    )
    id_lang: Mapped[int] = mapped_column(Integer, primary_key=True)
    value: Mapped[str] = mapped_column(String(255), nullable=False)


class AttributeGroup(Base):
    __tablename__ = "attribute_groups"

    id_attribute_group: Mapped[int] = mapped_column(Integer, primary_key=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class AttributeGroupLang(Base):
    __tablename__ = "attribute_group_lang"

    id_attribute_group: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("attribute_groups.id_attribute_group", ondelete="CASCADE"),
        primary_key=True,
    )
    id_lang: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)


class AttributeGroupShop(Base):
    __tablename__ = "attribute_group_shop"

    id_attribute_group: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("attribute_groups.id_attribute_group", ondelete="CASCADE"),
        primary_key=True,
    )
    id_shop: Mapped[int] = mapped_column(Integer, primary_key=True)


class Attribute(Base):
    __tablename__ = "attributes"

    id_attribute: Mapped[int] = mapped_column(Integer, primary_key=True)
    id_attribute_group: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("attribute_groups.id_attribute_group", ondelete="CASCADE"),
        nullable=False,
    )
    numeric_value: Mapped[Decimal | None] = mapped_column(Numeric(20, 6))
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (Index("ix_attributes_id_attribute_group", "id_attribute_group"),)


class AttributeLang(Base):
    __tablename__ = "attribute_lang"

    id_attribute: Mapped[int] = mapped_column(
        Integer, ForeignKey("attributes.id_attribute", ondelete="CASCADE"), primary_key=True
    )
    id_lang: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)


class AttributeShop(Base):
    __tablename__ = "attribute_shop"

    id_attribute: Mapped[int] = mapped_column(
        Integer, ForeignKey("attributes.id_attribute", ondelete="CASCADE"), primary_key=True
    )
    id_shop: Mapped[int] = mapped_column(Integer, primary_key=True)


class Manufacturer(Base):
    __tablename__ = "manufacturers"

    id_manufacturer: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(64), nullable=False)
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class ManufacturerShop(Base):
    __tablename__ = "manufacturer_shop"

    id_manufacturer: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("manufacturers.id_manufacturer", ondelete="CASCADE"),
        primary_key=True,
    )
    id_shop: Mapped[int] = mapped_column(Integer, primary_key=True)


class Category(Base):
    __tablename__ = "categories"

    id_category: Mapped[int] = mapped_column(Integer, primary_key=True)
    id_parent: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("categories.id_category", ondelete="CASCADE")
    )
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    __table_args__ = (Index("ix_categories_id_parent", "id_parent"),)


class CategoryLang(Base):
    __tablename__ = "category_lang"

    id_category: Mapped[int] = mapped_column(
        Integer, ForeignKey("categories.id_category", ondelete="CASCADE"), primary_key=True
    )
    id_shop: Mapped[int] = mapped_column(Integer, primary_key=True)
    id_lang: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(128), nullable=False)


class CategoryShop(Base):
    __tablename__ = "category_shop"

    id_category: Mapped[int] = mapped_column(
        Integer, ForeignKey("categories.id_category", ondelete="CASCADE"), primary_key=True
    )
    id_shop: Mapped[int] = mapped_column(Integer, primary_key=True)
