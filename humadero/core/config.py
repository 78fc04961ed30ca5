import os
from typing import List, Optional
from pydantic import BaseModel
from dotenv import load_dotenv
from functools import lru_cache

load_dotenv()

DEFAULT_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


def _split_origins(raw: Optional[str]) -> List[str]:
    origins = [o.strip() for o in (raw or "").split(",") if o.strip()]
    return origins or list(DEFAULT_ORIGINS)


class Settings(BaseModel):
    PROJECT_NAME: str = "Humadero API"
    VERSION: str = "1.0.0"
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    SUPABASE_URL: Optional[str] = os.getenv("SUPABASE_URL")
    # Prefer service role key when available to bypass RLS for server-side inserts
    SUPABASE_KEY: Optional[str] = os.getenv("SUPABASE_SERVICE_ROLE") or os.getenv("SUPABASE_KEY")
    SUPABASE_MENU_TABLE: str = os.getenv("SUPABASE_MENU_TABLE", "menu")
    SUPABASE_ORDERS_TABLE: str = os.getenv("SUPABASE_ORDERS_TABLE", "pedidos")
    DB_TIMEOUT_SECONDS: float = float(os.getenv("DB_TIMEOUT_SECONDS", "5"))
    CORS_ALLOW_ORIGINS: List[str] = _split_origins(os.getenv("CORS_ALLOW_ORIGINS"))

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.strip().lower() == "development"

    @property
    def database_configured(self) -> bool:
        return bool(self.SUPABASE_URL and self.SUPABASE_KEY)


@lru_cache
def get_settings():
    return Settings()
