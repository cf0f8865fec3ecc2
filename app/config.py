from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    DATABASE_URL: str = "sqlite+aiosqlite:///./assets.db"
    DB_ECHO: bool = False
    APP_NAME: str = "RWA Backend API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: List[str] = ["*"]

    # Defaults applied to newly minted assets
    DEFAULT_ASSET_TYPE: str = "Real Estate"
    DEFAULT_BLOCKCHAIN: str = "Lisk"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
