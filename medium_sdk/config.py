from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from dotenv import load_dotenv
from functools import lru_cache

# Load environment variables
load_dotenv()

DEFAULT_HOST = "https://api.medium.com"
DEFAULT_TIMEOUT = 5.0

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # API Configuration
    MEDIUM_HOST: str = DEFAULT_HOST
    MEDIUM_TIMEOUT: float = DEFAULT_TIMEOUT

    # OAuth Credentials
    MEDIUM_CLIENT_ID: str = ""
    MEDIUM_CLIENT_SECRET: str = ""
    MEDIUM_ACCESS_TOKEN: str = ""

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    LOG_FILE: Optional[str] = None

# Create cached settings instance
@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
