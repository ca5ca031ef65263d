"""Centralized configuration management using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Defines application settings, loaded from environment variables or .env file.

    Attributes
    ----------
    api_base_url : str
        Base URL of the infections search service.
    api_key : str
        Static bearer credential attached to every request.
    default_page_size : int
        Number of records requested per page when none is given.
    verbosity_level : str
        Logger level name (INFO, VERBOSE, DEBUG, SPAM).
    """

    api_base_url: str = "https://api3.twilightcyber.com"
    api_key: str = ""
    default_page_size: int = 10
    verbosity_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding='utf-8', extra='ignore')
