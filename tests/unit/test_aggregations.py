"""Unit tests for catalog aggregations against a stubbed OpenSearch client."""

import pytest
from opensearchpy.exceptions import ConnectionError as OpenSearchConnectionError

from catalog_filters.config import settings
from catalog_filters.search.aggregations import AggregationHelper, build_aggregation_body


class StubClient:
    """Records search calls and answers with canned aggregation values."""

    def __init__(self, values: dict[tuple[str, str], float | None]):
        self.values = values
        self.calls: list[dict] = []

    def search(self, index, body):
        self.calls.append({"index": index, "body": body})
        (aggregation, metric), = body["aggs"]["result"].items()
        value = self.values.get((metric["field"], aggregation))
        return {"hits": {"hits": []}, "aggregations": {"result": {"value": value}}}


@pytest.mark.unit
class TestBuildAggregationBody:
    def test_min_body(self):
        body = build_aggregation_body("price", "min", 3)
        assert body == {
            "size": 0,
            "query": {"bool": {"filter": [{"term": {settings.shop_field: 3}}]}},
            "aggs": {"result": {"min": {"field": "price"}}},
        }

    def test_unsupported_aggregation(self):
        with pytest.raises(ValueError, match="Unsupported aggregation 'avg'"):
            build_aggregation_body("price", "avg", 1)


@pytest.mark.unit
class TestAggregationHelper:
    def test_price_bounds(self):
        client = StubClient(
            {(settings.price_field, "min"): 9.5, (settings.price_field, "max"): 120.0}
        )
        helper = AggregationHelper(client, id_shop=1, index="products_test")

        assert helper.get_aggregated_product_price("min") == 9.5
        assert helper.get_aggregated_product_price("max") == 120.0
        assert all(call["index"] == "products_test" for call in client.calls)

    def test_weight_bounds(self):
        client = StubClient({(settings.weight_field, "max"): 12})
        helper = AggregationHelper(client, id_shop=2)

        assert helper.get_aggregated_product_weight("max") == 12.0
        assert isinstance(helper.get_aggregated_product_weight("max"), float)
        assert client.calls[0]["index"] == settings.opensearch_index
        assert client.calls[0]["body"]["query"]["bool"]["filter"] == [
            {"term": {settings.shop_field: 2}}
        ]

    def test_empty_index_yields_zero(self, caplog):
        helper = AggregationHelper(StubClient({}), id_shop=1)

        assert helper.get_aggregated_product_price("min") == 0.0
        assert "Empty product aggregation" in caplog.text

    def test_transport_error_propagates(self):
        class FailingClient:
            def search(self, index, body):
                raise OpenSearchConnectionError("N/A", "connection refused", None)

        helper = AggregationHelper(FailingClient(), id_shop=1)
        with pytest.raises(OpenSearchConnectionError):
            helper.get_aggregated_product_weight("min")
