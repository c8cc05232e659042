"""FastAPI application."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_filters.api.routes.filters import router as filters_router

DESCRIPTION = """
## Category Filter API

Builds the faceted filters shown on a category page.

### Filter types

* **Attribute group / feature** - values or numeric range of a catalog attribute
* **Price / weight** - catalog-wide bounds, evenly spaced buckets or custom ranges
* **Manufacturer / category** - manufacturers of the shop, child categories
* **Quantity** - stock availability

### Data Source

Filter templates and catalog entities are read from PostgreSQL. Price and
weight bounds are aggregated from the product index in OpenSearch.
"""

app = FastAPI(
    title="Category Filter API",
    description=DESCRIPTION,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {
            "name": "filters",
            "description": "Filter building for category pages",
        },
    ],
    license_info={
        "name": "MIT",
    },
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routes
app.include_router(filters_router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}
