from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Literal

StoreBackend = Literal['sqlite', 'memory']

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8')

    PROJECT_NAME: str = 'RimWorld Guides API'
    API_PREFIX: str = '/api'
    # 'memory' sirve los datos de ejemplo sin tocar disco
    STORE_BACKEND: StoreBackend = 'sqlite'
    DATABASE_PATH: str = 'content/database/rimworld.db'
    SEED_ON_STARTUP: bool = True
    # --- Paginación ---
    DEFAULT_PAGE_LIMIT: int = 10
    MAX_PAGE_LIMIT: int = 100
    # Si se define, POST /db/init exige la cabecera X-Admin-Token
    ADMIN_TOKEN: str | None = None
    LOG_LEVEL: str = 'INFO'
    # --- CORS ---
    FRONTEND_ORIGINS: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000"
    ]

@lru_cache
def get_settings() -> Settings:
    return Settings()
