"""OpenSearch index mapping for the product fields filters aggregate on."""

from catalog_filters.config import settings

INDEX_SETTINGS = {
    "settings": {
        "number_of_shards": 1,
        "number_of_replicas": 0,
    },
    "mappings": {
        "properties": {
            "id_product": {"type": "integer"},
            settings.shop_field: {"type": "integer"},
            "id_category_default": {"type": "integer"},
            "name": {"type": "text"},
            # Tax-included sale price in the shop's default currency
            settings.price_field: {"type": "scaled_float", "scaling_factor": 100},
            settings.weight_field: {"type": "float"},
            "quantity": {"type": "integer"},
        }
    },
}
