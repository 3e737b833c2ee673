"""Configuration management for the Meal Planner application."""
import os
from typing import Final, Optional
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Completion service (recipe text -> ingredients)
OPENAI_API_KEY: Final[Optional[str]] = os.getenv('OPENAI_API_KEY') or None
OPENAI_MODEL: Final[str] = os.getenv('OPENAI_MODEL', 'gpt-3.5-turbo-1106')
OPENAI_CHAT_URL: Final[str] = os.getenv('OPENAI_CHAT_URL', 'https://api.openai.com/v1/chat/completions')
OPENAI_TIMEOUT: Final[float] = float(os.getenv('OPENAI_TIMEOUT', '30'))

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'


def get_api_key() -> Optional[str]:
    """Return the completion service key, re-reading the environment so tests can patch it."""
    return os.environ.get('OPENAI_API_KEY') or OPENAI_API_KEY
