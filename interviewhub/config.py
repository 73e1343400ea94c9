# interviewhub/config.py

from dotenv import load_dotenv
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()  # .env first, then real environment variables win

BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    # environment
    app_env: str = "local"
    log_level: str = "INFO"

    # database
    database_url: str                        # DATABASE_URL
    db_pool_size: int = 10                   # ignored for sqlite
    db_pool_timeout: int = 30

    # identity provider (HS256 bearer tokens)
    auth_jwt_secret: str                     # AUTH_JWT_SECRET
    auth_jwt_audience: str | None = None     # AUTH_JWT_AUDIENCE
    auth_jwt_issuer: str | None = None       # AUTH_JWT_ISSUER

    # http
    cors_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
