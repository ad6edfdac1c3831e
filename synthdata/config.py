# synthdata/config.py
import os
from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Application settings
    APP_TITLE: str = "SynthData Kenya API"
    APP_VERSION: str = "1.0.0"
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", 8008))
    CORS_ORIGINS: List[str] = ["*"]

    # Database settings
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./synthdata.db")
    DB_ECHO: bool = os.getenv("DB_ECHO", "false").lower() == "true"

    # Auth settings
    SECRET_KEY: str = os.getenv("SECRET_KEY", "super_secret_key_123")
    ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60))

    # Dataset templates
    SEED_TEMPLATES: bool = os.getenv("SEED_TEMPLATES", "true").lower() == "true"
    TEMPLATE_ROW_COUNT: int = int(os.getenv("TEMPLATE_ROW_COUNT", 1000))

    # Dashboard
    # When true, the dataset count covers every dataset in the store instead of the caller's.
    STATS_SHARED_DATASET_COUNT: bool = os.getenv("STATS_SHARED_DATASET_COUNT", "false").lower() == "true"

    # Compliance reports
    REPORT_VALIDITY_DAYS: int = 365
    REPORT_REGULATION: str = "Kenya Data Protection Act, 2019"

    class Config:
        env_file = Path(__file__).resolve().parents[1] / ".env"
        env_file_encoding = "utf-8"
        extra = "allow"


settings = Settings()
