"""
Configuration module for the OpenAI Web Search Bridge.
Handles environment variables and application settings.
"""
import os
from dotenv import load_dotenv

from utils.logger import app_logger, register_secret, set_log_level

load_dotenv()


class Config:
    """Application configuration class."""

    # API Keys
    OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
    BRIDGE_API_KEY: str = os.getenv("BRIDGE_API_KEY", "")

    # API Configuration
    OPENAI_BASE_URL: str = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
    CHAT_COMPLETIONS_PATH: str = "/chat/completions"
    RESPONSES_PATH: str = "/responses"

    # Application Settings
    APP_TITLE: str = "OpenAI Web Search Bridge"
    SERVER_NAME: str = "openai-websearch-mcp-server"
    VERSION: str = "1.0.0"
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Timeouts (in seconds)
    OPENAI_TIMEOUT: float = float(os.getenv("OPENAI_TIMEOUT", "60.0"))

    # Connection pool
    MAX_CONNECTIONS: int = 20
    MAX_KEEPALIVE_CONNECTIONS: int = 5

    @classmethod
    def chat_completions_url(cls) -> str:
        """Full URL of the Chat Completions endpoint."""
        return cls.OPENAI_BASE_URL.rstrip("/") + cls.CHAT_COMPLETIONS_PATH

    @classmethod
    def responses_url(cls) -> str:
        """Full URL of the Responses endpoint."""
        return cls.OPENAI_BASE_URL.rstrip("/") + cls.RESPONSES_PATH

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and log warnings for missing keys."""
        if not cls.OPENAI_API_KEY:
            app_logger.warning("OPENAI_API_KEY not found in environment or .env file")
            app_logger.warning("Tool calls will fail until a key is configured. Get one from: https://platform.openai.com/api-keys")

        if not cls.BRIDGE_API_KEY:
            app_logger.info("BRIDGE_API_KEY not set, HTTP tool endpoints accept unauthenticated requests")


set_log_level(app_logger, Config.LOG_LEVEL)
register_secret(Config.OPENAI_API_KEY)
register_secret(Config.BRIDGE_API_KEY)
Config.validate()
