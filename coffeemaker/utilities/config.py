"""Configuration management for the CoffeeMaker."""
import logging
import os
from pathlib import Path
from typing import Final

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Inventory Alerts Configuration
LOW_STOCK_THRESHOLD: Final[int] = int(os.getenv('LOW_STOCK_THRESHOLD', '3'))


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging for whoever embeds the dispenser (module loggers inherit this)."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
