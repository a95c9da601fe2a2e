"""
MedHistory — Форма анамнезу пацієнта

Список захворювань зі статусом Yes/No, початком ("since") та нотатками;
експорт/імпорт у JSON файл.

Модулі:
- config: Конфігурація системи
- schemas: Pydantic моделі записів та файлу
- record_store: Записи в пам'яті
- serializer: Експорт / імпорт JSON
- api: Backend API
- web_ui: Веб-форма (Streamlit)
"""

__version__ = "0.1.0"

from .config import MedHistoryConfig, get_default_config
