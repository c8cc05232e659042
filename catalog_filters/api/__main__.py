"""Run the API server: python -m catalog_filters.api"""

import uvicorn

from catalog_filters.config import settings

if __name__ == "__main__":
    uvicorn.run("catalog_filters.api.app:app", host=settings.api_host, port=settings.api_port)
