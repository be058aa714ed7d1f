from typing import List, Optional
from urllib.parse import quote_plus
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # --- Basic configuration ---
    APP_NAME: str = "Catalog API"
    APP_DESCRIPTION: str = "Product catalog API: categories, products and token authentication"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = "development"  # development, production, testing
    DEBUG: bool = True
    SECRET_KEY: str = "your-super-secret-key-change-it-in-production"

    # --- Database (SQLModel) ---
    DB_URL: Optional[str] = None  # Full URL; overrides the DB_* parts below
    DB_HOST: str = "localhost"
    DB_PORT: int = 3306
    DB_USER: str = "root"
    DB_PASSWORD: str = "root"
    DB_NAME: str = "catalog_db"
    DB_CREATE_TABLES: bool = False  # create_all at startup (development only)

    @property
    def DATABASE_URL(self) -> str:
        if self.DB_URL:
            return self.DB_URL
        # Build async MySQL connection URL
        safe_password = quote_plus(self.DB_PASSWORD)
        return f"mysql+aiomysql://{self.DB_USER}:{safe_password}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # --- JWT ---
    JWT_ALGORITHM: str = "HS256"
    JWT_ISSUER: str = "catalog-api"
    JWT_AUDIENCE: str = "catalog-api-clients"
    ACCESS_TOKEN_EXPIRE_HOURS: int = 1

    # --- Pagination ---
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 50

    # --- Product business rules ---
    VALIDATE_POSITIVE_STOCK: bool = True
    VALIDATE_NAME_CAPITALIZATION: bool = True

    # --- CORS ---
    CORS_ORIGINS: List[str] = ["https://www.apirequest.io", "https://apirequest.io"]

    # --- Logging ---
    LOG_DIR: str = "logs"

    # --- API route prefixes (optional, overridable per deployment) ---
    API_AUTH_PREFIX: str = "/api/autoriza"
    API_CATEGORIES_PREFIX: str = "/categorias"
    API_PRODUCTS_PREFIX: str = "/produtos"

    # --- Gunicorn process name (optional) ---
    GUNICORN_PROC_NAME: Optional[str] = None  # Fallback to APP_NAME when empty

    # --- Pydantic ---
    # Load env from project root .env; priority: env vars > .env > defaults
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_ignore_empty=True,
    )


# Singleton settings instance
settings = Settings()
