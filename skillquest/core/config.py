# skillquest/core/config.py
from typing import Optional
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # App
    APP_ENV: str = "production"
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    SECRET_KEY: str = "change-me"  # override in .env / secrets
    CORS_ORIGINS: str = "*"

    # Auth
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # MongoDB
    MONGODB_URI: str = "mongodb://localhost:27017/skill-quest"
    MONGODB_DB: str = "skill-quest"

    # Aptitude question API
    APTITUDE_API_URL: str = "https://aptitude-api.vercel.app"
    QUESTION_FETCH_TIMEOUT_SEC: float = 10.0
    # bound on the whole per-topic fan-out of one session start
    SESSION_ASSEMBLY_TIMEOUT_SEC: float = 30.0

    # Rate limiting (fixed window per client address)
    RATE_LIMIT_MAX_REQUESTS: int = 100
    RATE_LIMIT_WINDOW_SEC: int = 15 * 60
    # peers allowed to set X-Forwarded-For (comma-separated addresses)
    TRUSTED_PROXIES: str = ""

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # Pydantic v2 settings: read from .env file
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @property
    def is_development(self) -> bool:
        return self.APP_ENV.lower() == "development"

    @property
    def trusted_proxies(self) -> list[str]:
        return [p.strip() for p in self.TRUSTED_PROXIES.split(",") if p.strip()]

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

# single shared settings instance
settings = Settings()
