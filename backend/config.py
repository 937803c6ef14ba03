# backend/config.py
from pydantic_settings import BaseSettings
from typing import ClassVar, Literal, Optional
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./stock_browser.db"

    # Which data store backs the screen: local/remote SQL or the REST data API
    STORE_BACKEND: Literal["sql", "rest"] = "sql"
    SUPABASE_URL: Optional[str] = None
    SUPABASE_KEY: Optional[str] = None
    REQUEST_TIMEOUT: float = 10.0

    PRODUCTS_TABLE: str = "productos"
    MOVEMENTS_TABLE: str = "movimientos_inventario"

    # Strip leading/trailing whitespace from the search box before matching
    SEARCH_TRIM: bool = False

    FRONTEND_URL: Optional[str] = None
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file: ClassVar[str] = str(env_path)
        extra: ClassVar[str] = "ignore"

settings = Settings()
