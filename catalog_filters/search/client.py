"""OpenSearch client setup."""

import logging

from opensearchpy import OpenSearch

from catalog_filters.config import settings
from catalog_filters.search.mapping import INDEX_SETTINGS

logger = logging.getLogger(__name__)

client = OpenSearch(
    hosts=[{"host": settings.opensearch_host, "port": settings.opensearch_port}],
    http_compress=True,
    use_ssl=settings.opensearch_use_ssl,
    verify_certs=settings.opensearch_verify_certs,
)


def create_index(delete_existing: bool = False) -> None:
    """Create the products index with mapping."""
    index_name = settings.opensearch_index

    if client.indices.exists(index=index_name):
        if delete_existing:
            client.indices.delete(index=index_name)
        else:
            logger.info(
                "Index already exists; skipping create "
                "(set delete_existing=True to recreate)",
                extra={"index": index_name},
            )
            return

    client.indices.create(index=index_name, body=INDEX_SETTINGS)
    logger.info("Created index", extra={"index": index_name})
