"""Build the populated filters shown for a category."""

import logging

from catalog_filters.filters.constants import parse_filter_style, parse_filter_type
from catalog_filters.filters.criteria import (
    CriteriaSources,
    CriteriaStrategy,
    build_dispatch_table,
    default_strategies,
)
from catalog_filters.filters.interfaces import TemplateStore
from catalog_filters.filters.models import BuildContext, Filter, FilterTemplate
from catalog_filters.filters.naming import FilterNamer

logger = logging.getLogger(__name__)


class FilterBuilder:
    """Resolves filter templates of a category into named, populated filters.

    Templates come from the template store in display order. Each one is
    named, then dispatched on ``(filter_type, filter_style)`` to the strategy
    that computes its criteria. Templates with an unrecognized type or style
    pass through without criteria.
    """

    def __init__(
        self,
        templates: TemplateStore,
        sources: CriteriaSources,
        strategies: list[CriteriaStrategy] | None = None,
    ):
        self.templates = templates
        self.sources = sources
        if strategies is None:
            strategies = default_strategies(sources)
        self.handlers = build_dispatch_table(strategies)

    def build(self, id_category: int, id_shop: int, id_lang: int) -> list[Filter]:
        """Build filters for a category in a shop and language.

        Returns:
            Filters in the order the template store returned them; an empty
            list if the category has no filter template.

        Raises:
            LookupMissError: If a filter references a feature or attribute
                group without a name or value range.
        """
        context = BuildContext(id_category=id_category, id_shop=id_shop, id_lang=id_lang)
        templates = self.templates.find_template_filters(id_category, id_shop)

        if not templates:
            logger.debug(
                "No filter template for category",
                extra={"id_category": id_category, "id_shop": id_shop},
            )
            return []

        self.sources.reset()
        namer = self._namer(context)
        filters = [
            self._build_filter(template, namer.resolve_name(template), context)
            for template in templates
        ]

        logger.info(
            "Built filters",
            extra={"id_category": id_category, "id_shop": id_shop, "count": len(filters)},
        )
        return filters

    def _namer(self, context: BuildContext) -> FilterNamer:
        return FilterNamer(
            feature_names=self.sources.features.find_names(
                context.id_lang, context.id_shop
            ),
            attribute_group_names=self.sources.attribute_groups.find_names(
                context.id_lang, context.id_shop
            ),
        )

    def _build_filter(
        self, template: FilterTemplate, name: str, context: BuildContext
    ) -> Filter:
        built = Filter(**template.model_dump(), name=name)

        filter_type = parse_filter_type(template.filter_type)
        filter_style = parse_filter_style(template.filter_style)
        handler = self.handlers.get((filter_type, filter_style))
        if handler is None:
            logger.debug(
                "Skipping criteria for unrecognized filter",
                extra={
                    "id_filter": template.id_filter,
                    "filter_type": template.filter_type,
                    "filter_style": template.filter_style,
                },
            )
            return built

        built.criteria, built.criteria_fields = handler(template, context)
        return built
