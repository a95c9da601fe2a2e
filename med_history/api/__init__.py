"""
MedHistory — REST API модуль

FastAPI REST API для форми анамнезу.

Компоненти:
- app.py: FastAPI application
- routes/: API endpoints
- models.py: Pydantic models
- dependencies.py: Сесії форм

Запуск:
    uvicorn med_history.api.app:app --reload --port 8000

Документація:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)

Endpoints:
    GET    /health                                  - Health check

    POST   /api/forms                               - Нова форма
    GET    /api/forms/{id}                          - Стан форми
    DELETE /api/forms/{id}                          - Закрити форму

    POST   /api/forms/{id}/entries                  - Додати запис
    PATCH  /api/forms/{id}/entries/{entry_id}       - Змінити поля
    DELETE /api/forms/{id}/entries/{entry_id}       - М'яко видалити
    POST   /api/forms/{id}/prune                    - Очистити видалені

    GET    /api/forms/{id}/export                   - Завантажити JSON
    POST   /api/forms/{id}/import                   - Імпортувати JSON
"""

from .app import app
from .dependencies import session_manager, get_sessions


__all__ = [
    "app",
    "session_manager",
    "get_sessions",
]
