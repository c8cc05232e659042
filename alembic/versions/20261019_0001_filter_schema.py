"""Filter templates, custom criteria and catalog lookup tables.

Revision ID: 20261019_0001
Revises:
Create Date: 2026-10-19
"""
from __future__ import annotations

import sqlalchemy as sa

from alembic import op

revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


def _shop_table(name: str, key: str, parent: str) -> None:
    op.create_table(
        name,
        sa.Column(
            key,
            sa.Integer(),
            sa.ForeignKey(f"{parent}.{key}", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("id_shop", sa.Integer(), primary_key=True),
    )


def upgrade() -> None:
    # Filter configuration
    op.create_table(
        "filter_templates",
        sa.Column("id_filter_template", sa.Integer(), primary_key=True),
        sa.Column("id_shop", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
    )
    op.create_index("ix_filter_templates_id_shop", "filter_templates", ["id_shop"])

    op.create_table(
        "filter_template_categories",
        sa.Column(
            "id_filter_template",
            sa.Integer(),
            sa.ForeignKey("filter_templates.id_filter_template", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("id_category", sa.Integer(), primary_key=True),
    )
    op.create_index(
        "ix_filter_template_categories_id_category",
        "filter_template_categories",
        ["id_category"],
    )

    op.create_table(
        "filters",
        sa.Column("id_filter", sa.Integer(), primary_key=True),
        sa.Column("filter_type", sa.Integer(), nullable=False),
        sa.Column("filter_style", sa.Integer(), nullable=False),
        sa.Column("id_key", sa.Integer(), nullable=True),
        sa.Column("criteria_suffix", sa.String(length=32), nullable=True),
    )

    op.create_table(
        "filter_template_filters",
        sa.Column(
            "id_filter_template",
            sa.Integer(),
            sa.ForeignKey("filter_templates.id_filter_template", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "id_filter",
            sa.Integer(),
            sa.ForeignKey("filters.id_filter", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
    )

    op.create_table(
        "filter_criterias",
        sa.Column("id_filter_criteria", sa.Integer(), primary_key=True),
        sa.Column(
            "id_filter",
            sa.Integer(),
            sa.ForeignKey("filters.id_filter", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("min_value", sa.Numeric(20, 6), nullable=False),
        sa.Column("max_value", sa.Numeric(20, 6), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index("ix_filter_criterias_id_filter", "filter_criterias", ["id_filter"])

    # Features
    op.create_table(
        "features",
        sa.Column("id_feature", sa.Integer(), primary_key=True),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_table(
        "feature_lang",
        sa.Column(
            "id_feature",
            sa.Integer(),
            sa.ForeignKey("features.id_feature", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("id_lang", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=128), nullable=False),
    )
    _shop_table("feature_shop", "id_feature", "features")
    op.create_table(
        "feature_values",
        sa.Column("id_feature_value", sa.Integer(), primary_key=True),
        sa.Column(
            "id_feature",
            sa.Integer(),
            sa.ForeignKey("features.id_feature", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("numeric_value", sa.Numeric(20, 6), nullable=True),
    )
    op.create_index("ix_feature_values_id_feature", "feature_values", ["id_feature"])
    op.create_table(
        "feature_value_lang",
        sa.Column(
            "id_feature_value",
            sa.Integer(),
            sa.ForeignKey("feature_values.id_feature_value", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("id_lang", sa.Integer(), primary_key=True),
        sa.Column("value", sa.String(length=255), nullable=False),
    )

    # Attribute groups
    op.create_table(
        "attribute_groups",
        sa.Column("id_attribute_group", sa.Integer(), primary_key=True),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_table(
        "attribute_group_lang",
        sa.Column(
            "id_attribute_group",
            sa.Integer(),
            sa.ForeignKey("attribute_groups.id_attribute_group", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("id_lang", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=128), nullable=False),
    )
    _shop_table("attribute_group_shop", "id_attribute_group", "attribute_groups")
    op.create_table(
        "attributes",
        sa.Column("id_attribute", sa.Integer(), primary_key=True),
        sa.Column(
            "id_attribute_group",
            sa.Integer(),
            sa.ForeignKey("attribute_groups.id_attribute_group", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("numeric_value", sa.Numeric(20, 6), nullable=True),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index(
        "ix_attributes_id_attribute_group", "attributes", ["id_attribute_group"]
    )
    op.create_table(
        "attribute_lang",
        sa.Column(
            "id_attribute",
            sa.Integer(),
            sa.ForeignKey("attributes.id_attribute", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("id_lang", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=128), nullable=False),
    )
    _shop_table("attribute_shop", "id_attribute", "attributes")

    # Manufacturers
    op.create_table(
        "manufacturers",
        sa.Column("id_manufacturer", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=64), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    _shop_table("manufacturer_shop", "id_manufacturer", "manufacturers")

    # Categories
    op.create_table(
        "categories",
        sa.Column("id_category", sa.Integer(), primary_key=True),
        sa.Column(
            "id_parent",
            sa.Integer(),
            sa.ForeignKey("categories.id_category", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
    )
    op.create_index("ix_categories_id_parent", "categories", ["id_parent"])
    op.create_table(
        "category_lang",
        sa.Column(
            "id_category",
            sa.Integer(),
            sa.ForeignKey("categories.id_category", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("id_shop", sa.Integer(), primary_key=True),
        sa.Column("id_lang", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=128), nullable=False),
    )
    _shop_table("category_shop", "id_category", "categories")


def downgrade() -> None:
    for table in (
        "category_shop",
        "category_lang",
        "categories",
        "manufacturer_shop",
        "manufacturers",
        "attribute_shop",
        "attribute_lang",
        "attributes",
        "attribute_group_shop",
        "attribute_group_lang",
        "attribute_groups",
        "feature_value_lang",
        "feature_values",
        "feature_shop",
        "feature_lang",
        "features",
        "filter_criterias",
        "filter_template_filters",
        "filters",
        "filter_template_categories",
        "filter_templates",
    ):
        op.drop_table(table)
