"""Resolve display names for filter templates."""

from catalog_filters.exceptions import LookupMissError
from catalog_filters.filters.constants import (
    FILTER_TYPE_LABELS,
    FilterType,
    parse_filter_type,
)
from catalog_filters.filters.models import FilterTemplate


class FilterNamer:
    """Names filters from a static label table or prefetched localized names.

    Feature and attribute group names are fetched once per build by the
    caller and handed in, so naming never queries per filter.
    """

    def __init__(
        self,
        feature_names: dict[int, str],
        attribute_group_names: dict[int, str],
        labels: dict[FilterType, str] | None = None,
    ):
        self.feature_names = feature_names
        self.attribute_group_names = attribute_group_names
        self.labels = FILTER_TYPE_LABELS if labels is None else labels

    def resolve_name(self, template: FilterTemplate) -> str:
        """Return the display name for ``template``.

        Raises:
            LookupMissError: If a feature or attribute group filter references
                an ID with no localized name.
        """
        filter_type = parse_filter_type(template.filter_type)

        if filter_type is FilterType.FEATURE:
            return self._lookup(self.feature_names, template, "feature")
        if filter_type is FilterType.ATTRIBUTE_GROUP:
            return self._lookup(self.attribute_group_names, template, "attribute group")
        if filter_type is None:
            return ""
        return self.labels[filter_type]

    @staticmethod
    def _lookup(names: dict[int, str], template: FilterTemplate, kind: str) -> str:
        try:
            return names[template.id_key]
        except KeyError:
            raise LookupMissError(
                f"No name for {kind} {template.id_key} "
                f"referenced by filter {template.id_filter}"
            ) from None
