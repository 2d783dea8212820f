import logging
import os
from dataclasses import dataclass
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Application Settings
    app_name: str = os.getenv("APP_NAME", "Library Management System")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "False").lower() in ("true", "1", "yes")

    # CLI Settings
    output_mode: str = os.getenv("LIB_CLI_OUTPUT", "plain")

    # Logging Settings
    log_level: str = os.getenv("LOG_LEVEL", "WARNING")


settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging from settings (DEBUG wins when debug is on)."""
    if settings.debug:
        level = "DEBUG"
    level_name = (level or settings.log_level or "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
