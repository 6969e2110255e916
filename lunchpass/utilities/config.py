"""Configuration management for the LunchPass service."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Entitlement defaults (used when a membership carries no allotment)
DEFAULT_MEALS_PER_WEEK: Final[int] = int(os.getenv('DEFAULT_MEALS_PER_WEEK', '2'))
WEEKS_PER_MONTH: Final[int] = 4

# Display fallbacks for restaurants without configured hours
DEFAULT_LUNCH_LABEL: Final[str] = os.getenv('DEFAULT_LUNCH_LABEL', 'Lunch: 12 pm - 2 pm')
DEFAULT_OPENING_HOURS: Final[str] = os.getenv('DEFAULT_OPENING_HOURS', '9 am - 5 pm')
