"""
MedHistory — API Dependencies

Dependency Injection для FastAPI.
Зберігання сесій форм (RecordStore на кожну форму) в пам'яті.
"""

from pathlib import Path
from typing import Dict, Optional
from datetime import datetime, timedelta
import threading
import uuid

from med_history.config import MedHistoryConfig, get_default_config, load_config
from med_history.record_store import RecordStore
from med_history.serializer import DocumentImporter

from .config import config


def load_history_config() -> MedHistoryConfig:
    """Конфігурація експорту/імпорту: з YAML, якщо задано шлях"""
    if config.config_path and Path(config.config_path).exists():
        print(f"⚙️ Config: {config.config_path}")
        return load_config(config.config_path)
    return get_default_config()


class FormSession:
    """
    Сесія форми анамнезу.
    Обгортка над RecordStore та DocumentImporter для одного пацієнта.
    """

    def __init__(self, form_id: str, settings: MedHistoryConfig, seed: bool = True):
        self.form_id = form_id
        self.settings = settings

        self.store = RecordStore.from_seed() if seed else RecordStore()
        self.importer = DocumentImporter(settings.import_)

        self.created_at = datetime.now()
        self.updated_at = datetime.now()

    def touch(self) -> None:
        """Позначити зміну стану"""
        self.updated_at = datetime.now()

    def to_dict(self) -> dict:
        """Конвертувати в словник для API"""
        return {
            "form_id": self.form_id,
            "active_count": self.store.active_count,
            "total_entries": len(self.store),
            "entries": [e.model_dump(mode="json") for e in self.store.active_entries()],
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


class FormSessionManager:
    """
    Менеджер сесій форм.
    Зберігає активні форми в пам'яті.
    Singleton pattern.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.sessions: Dict[str, FormSession] = {}
        self.settings = load_history_config()
        self.lock = threading.Lock()

    def create_session(self, seed: Optional[bool] = None) -> FormSession:
        """Створити нову форму"""
        if seed is None:
            seed = self.settings.store.seed_defaults

        form_id = str(uuid.uuid4())[:8]
        session = FormSession(form_id=form_id, settings=self.settings, seed=seed)

        with self.lock:
            # Очистка старих сесій
            self._cleanup_old_sessions()

            if len(self.sessions) >= config.max_sessions:
                oldest = min(self.sessions.values(), key=lambda s: s.updated_at)
                del self.sessions[oldest.form_id]

            self.sessions[form_id] = session

        return session

    def get_session(self, form_id: str) -> Optional[FormSession]:
        """Отримати форму"""
        return self.sessions.get(form_id)

    def delete_session(self, form_id: str) -> bool:
        """Видалити форму"""
        with self.lock:
            if form_id in self.sessions:
                del self.sessions[form_id]
                return True
        return False

    def get_active_count(self) -> int:
        """Кількість відкритих форм"""
        return len(self.sessions)

    def _cleanup_old_sessions(self):
        """Видалити застарілі форми"""
        timeout = timedelta(minutes=config.session_timeout_minutes)
        now = datetime.now()

        expired = [
            sid for sid, session in self.sessions.items()
            if now - session.updated_at > timeout
        ]

        for sid in expired:
            del self.sessions[sid]


# Глобальний менеджер
session_manager = FormSessionManager()


# Dependency functions для FastAPI
def get_sessions() -> FormSessionManager:
    """Dependency: отримати менеджер форм"""
    return session_manager
