"""Catalog-wide min/max aggregations over the product index."""

import logging

from opensearchpy import OpenSearch

from catalog_filters.config import settings
from catalog_filters.filters.interfaces import AGGS_MAX, AGGS_MIN, AggregationKind

logger = logging.getLogger(__name__)

AGGREGATIONS: frozenset[str] = frozenset({AGGS_MIN, AGGS_MAX})


def build_aggregation_body(field: str, aggregation: str, id_shop: int) -> dict:
    """Build a hits-free search body computing one metric over a shop's products."""
    if aggregation not in AGGREGATIONS:
        raise ValueError(
            f"Unsupported aggregation '{aggregation}'. Supported: {', '.join(sorted(AGGREGATIONS))}"
        )
    return {
        "size": 0,
        "query": {"bool": {"filter": [{"term": {settings.shop_field: id_shop}}]}},
        "aggs": {"result": {aggregation: {"field": field}}},
    }


class AggregationHelper:
    """Reads aggregated product price and weight for one shop.

    Transport errors from the client propagate unchanged.
    """

    def __init__(self, client: OpenSearch, id_shop: int, index: str | None = None):
        self.client = client
        self.id_shop = id_shop
        self.index = index or settings.opensearch_index

    def get_aggregated_product_price(self, aggregation: AggregationKind) -> float:
        return self._aggregate(settings.price_field, aggregation)

    def get_aggregated_product_weight(self, aggregation: AggregationKind) -> float:
        return self._aggregate(settings.weight_field, aggregation)

    def _aggregate(self, field: str, aggregation: AggregationKind) -> float:
        body = build_aggregation_body(field, aggregation, self.id_shop)
        response = self.client.search(index=self.index, body=body)

        value = response.get("aggregations", {}).get("result", {}).get("value")
        if value is None:
            # No indexed products for the shop
            logger.warning(
                "Empty product aggregation",
                extra={
                    "index": self.index,
                    "field": field,
                    "aggregation": aggregation,
                    "id_shop": self.id_shop,
                },
            )
            return 0.0
        return float(value)
