from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",  # Ignore extra fields from .env that we don't define
        env_ignore_empty=True
    )

    app_name: str = "TravelBuddy Destinations"
    debug: bool = False
    log_level: str = "INFO"

    # Year used for itinerary dates; unset means the year stated in each date label
    default_year: Optional[int] = None

    # Registration
    max_participants: int = 10

    # Destination page opens with the first city, month and day already chosen
    auto_select_defaults: bool = True

    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise the configured level."""
        if self.debug:
            return "DEBUG"
        return (self.log_level or "INFO").upper()
