"""Application configuration via environment variables.

Default values are intended for local development only.
Production deployments should override via .env file or environment variables.

Security considerations:
- postgres_password: Override with a strong password in production
- api_host: Consider restricting to specific IPs in production
- opensearch_use_ssl: Enable SSL/TLS in production
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")

    # PostgreSQL
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "shop"
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"

    # OpenSearch
    opensearch_host: str = "localhost"
    opensearch_port: int = 9200
    opensearch_index: str = "products"
    opensearch_use_ssl: bool = False
    opensearch_verify_certs: bool = False

    # Indexed product fields used for catalog-wide aggregations
    price_field: str = "price"
    weight_field: str = "weight"
    shop_field: str = "id_shop"

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 9019

    # Filter criteria
    price_bucket_count: int = 10
    weight_bucket_count: int = 10
    currency_sign: str = "€"

    @property
    def postgres_url_sync(self) -> str:
        return f"postgresql+psycopg://{self.postgres_user}:{self.postgres_password}@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"


settings = Settings()
