"""
MedHistory — API Configuration

Налаштування FastAPI сервера та сесій форм.
"""

from dataclasses import dataclass, field
from typing import Optional
import os


@dataclass
class APIConfig:
    """Конфігурація API сервера"""

    # Сервер
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = True
    reload: bool = False

    # CORS
    cors_origins: list = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list = field(default_factory=lambda: ["*"])
    cors_allow_headers: list = field(default_factory=lambda: ["*"])

    # YAML з MedHistoryConfig (експорт/імпорт/seed)
    config_path: Optional[str] = None

    # Сесії форм
    max_sessions: int = 1000
    session_timeout_minutes: int = 60

    # API
    api_prefix: str = "/api"
    api_title: str = "MedHistory API"
    api_description: str = "Форма анамнезу пацієнта з експортом/імпортом JSON"

    @classmethod
    def from_env(cls) -> 'APIConfig':
        """Створити конфігурацію з environment variables"""
        return cls(
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=int(os.getenv("API_PORT", "8000")),
            debug=os.getenv("API_DEBUG", "true").lower() == "true",
            config_path=os.getenv("MED_HISTORY_CONFIG"),
            max_sessions=int(os.getenv("MAX_SESSIONS", "1000")),
            session_timeout_minutes=int(os.getenv("SESSION_TIMEOUT_MINUTES", "60")),
        )


# Глобальна конфігурація
config = APIConfig.from_env()
