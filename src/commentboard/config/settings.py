"""
Application configuration settings for the comment board.
"""

import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Application settings configuration."""

    # Application Configuration
    APP_NAME = "Comment Board"
    APP_VERSION = "1.0.0"
    DEBUG = os.getenv("DEBUG", "False").lower() == "true"

    # Data Configuration
    DATA_DIRECTORY = os.getenv("COMMENTBOARD_DATA_DIR", "data")
    COMMENTS_FILE = os.getenv("COMMENTS_FILE", "comments.json")
    FEEDBACK_FILE = os.getenv("FEEDBACK_FILE", "feedback.json")

    # Logging Configuration
    LOG_DIRECTORY = os.getenv("LOG_DIR", "logs")
    LOG_FILE = os.getenv("LOG_FILE", "commentboard.log")

    # Server Configuration
    API_HOST = os.getenv("API_HOST", "0.0.0.0")
    API_PORT = int(os.getenv("API_PORT", "8000"))
    API_RELOAD = os.getenv("API_RELOAD", "false").lower() == "true"
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:3000")

    # Client Configuration
    API_URL = os.getenv("COMMENTBOARD_API_URL", "http://localhost:8000")
    CLIENT_TIMEOUT = float(os.getenv("COMMENTBOARD_CLIENT_TIMEOUT", "10"))

    @classmethod
    def data_directory(cls, override: Optional[Path] = None) -> Path:
        """Get the data directory, preferring an explicit override."""
        return Path(override) if override is not None else Path(cls.DATA_DIRECTORY)

    @classmethod
    def comments_path(cls, data_dir: Optional[Path] = None) -> Path:
        """Get the path of the comment log."""
        return cls.data_directory(data_dir) / cls.COMMENTS_FILE

    @classmethod
    def feedback_path(cls, data_dir: Optional[Path] = None) -> Path:
        """Get the path of the feedback log."""
        return cls.data_directory(data_dir) / cls.FEEDBACK_FILE

    @classmethod
    def log_path(cls) -> Path:
        """Get the path of the structured log file."""
        return Path(cls.LOG_DIRECTORY) / cls.LOG_FILE

    @classmethod
    def cors_origins(cls) -> List[str]:
        """Get allowed CORS origins (comma-separated in the environment)."""
        return [origin.strip() for origin in cls.CORS_ORIGINS.split(",") if origin.strip()]
