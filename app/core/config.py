from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "local"
    APP_NAME: str = "TransitBooker API"
    # Comma-separated origins for CORS (e.g. https://transitbooker.in,https://app.transitbooker.in). If empty, uses localhost defaults.
    CORS_ORIGINS: str = ""

    DATABASE_URL: str = "sqlite:///./transitbooker.db"

    @field_validator("DATABASE_URL", mode="after")
    @classmethod
    def normalize_database_url(cls, v: str) -> str:
        """Render and others give postgres://; SQLAlchemy expects postgresql+psycopg2://."""
        if v and v.startswith("postgres://"):
            return "postgresql+psycopg2://" + v[11:]
        return v

    LOG_LEVEL: str = "INFO"

    # Demo dataset is inserted by start_api.py when the providers table is empty
    SEED_ON_STARTUP: bool = True

    # When False, bookings only check availability and never decrement available_seats
    BOOKING_DECREMENTS_SEATS: bool = True


settings = Settings()
