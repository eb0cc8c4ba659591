from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./vural.db"
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 8000
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"
    RESET_DB: bool = False

    SECRET_KEY: str = "change-this-secret"
    SESSION_TTL_SECONDS: int = 86400
    FRONTEND_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    ADMIN_EMAIL: str = "admin@vuralenerji.com"
    ADMIN_PASSWORD: str = "admin"
    ADMIN_NAME: str = "Vural Admin"
    SEED_DEMO_DATA: bool = True

    STORAGE_DIR: str = "./storage"
    STORAGE_MIRROR_ENABLED: bool = True
    STORAGE_QUOTA_BYTES: int = 5 * 1024 * 1024

    SCHEDULER_ENABLED: bool = True
    TOKEN_PURGE_INTERVAL_SECONDS: int = 300

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

settings = Settings()
