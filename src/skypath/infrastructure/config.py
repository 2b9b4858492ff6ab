"""
Configuração da aplicação
"""
import logging
import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Configuração centralizada"""

    # Serviço de busca
    SKYPATH_API_URL = os.getenv("SKYPATH_API_URL", "http://localhost:8080").rstrip("/")
    REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))

    # Defaults
    DEFAULT_LOCALE = os.getenv("DEFAULT_LOCALE", "en-US")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"

    def __init__(self, api_url: str = None, locale: str = None):
        if api_url:
            self.SKYPATH_API_URL = api_url.rstrip("/")
        if locale:
            self.DEFAULT_LOCALE = locale

    def get_search_url(self) -> str:
        return f"{self.SKYPATH_API_URL}/api/search"

    def get_health_url(self) -> str:
        return f"{self.SKYPATH_API_URL}/api/health"

    def get_log_level(self) -> int:
        """Nível de log efetivo; DEBUG=true tem precedência."""
        if self.DEBUG:
            return logging.DEBUG
        level = logging.getLevelName(self.LOG_LEVEL)
        return level if isinstance(level, int) else logging.WARNING
