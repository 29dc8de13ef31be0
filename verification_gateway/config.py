# verification_gateway/config.py
import logging
import sys
from pathlib import Path
from typing import List, Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_PRICES_FILE = str(Path(__file__).resolve().parent.parent / "prices.json")

REQUIRED_ENV = ("TWILIO_ACCOUNT_SID", "TWILIO_AUTH_TOKEN", "TWILIO_VERIFY_SERVICE_SID")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application Settings
    APP_NAME: str = "Verification Gateway"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    DOCS_ENABLED: bool = True

    # Server Settings
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Twilio Settings (required, no defaults)
    TWILIO_ACCOUNT_SID: str = Field(min_length=1)
    TWILIO_AUTH_TOKEN: str = Field(min_length=1)
    TWILIO_VERIFY_SERVICE_SID: str = Field(min_length=1)
    TWILIO_HTTP_TIMEOUT: float = 15
    VERIFICATION_CHANNEL: str = "sms"

    # Pricing snapshot
    PRICES_FILE: str = DEFAULT_PRICES_FILE

    # CORS Settings (comma-separated to avoid JSON parsing in env)
    ALLOWED_ORIGINS: str = "*"

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = DEFAULT_LOG_FORMAT

    def _split_csv(self, value: str) -> List[str]:
        if value is None:
            return []
        value = value.strip()
        if value == "":
            return []
        return [item.strip() for item in value.split(",")]

    @property
    def allowed_origins_list(self) -> List[str]:
        return self._split_csv(self.ALLOWED_ORIGINS)


def configure_logging(settings: Optional[Settings] = None) -> None:
    level = settings.LOG_LEVEL if settings else "INFO"
    fmt = settings.LOG_FORMAT if settings else DEFAULT_LOG_FORMAT
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=fmt, force=True)


def load_settings(**overrides) -> Settings:
    """Build the settings once at startup.

    Exits the process with status 1 when a required Twilio value is
    missing or empty, after logging every offending variable.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        problems = []
        for err in e.errors():
            name = str(err["loc"][0]) if err.get("loc") else "<settings>"
            problems.append(name)
            if name.upper() in REQUIRED_ENV:
                logger.critical(f"Error: {name.upper()} is not defined in the environment")
            else:
                logger.critical(f"Error: invalid value for {name}: {err.get('msg')}")
        logger.critical(f"Refusing to start, configuration incomplete: {', '.join(problems)}")
        sys.exit(1)
