"""Faceted filter building for category pages."""

from catalog_filters.filters.builder import FilterBuilder
from catalog_filters.filters.criteria import CriteriaSources
from catalog_filters.filters.models import CriteriaFields, Filter, FilterTemplate, RangeCriteria
from catalog_filters.filters.ranges import split_into_ranges

__all__ = [
    "CriteriaFields",
    "CriteriaSources",
    "Filter",
    "FilterBuilder",
    "FilterTemplate",
    "RangeCriteria",
    "split_into_ranges",
]
