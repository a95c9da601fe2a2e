"""
MedHistory — API Models

Pydantic моделі для запитів та відповідей API.
"""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from med_history.schemas import ConditionEntry, ConditionStatus
from med_history.serializer import ImportState


# ============================================================
# Form Models
# ============================================================

class CreateFormRequest(BaseModel):
    """Запит на створення форми"""
    seed: Optional[bool] = None  # None = з конфігурації


class FormState(BaseModel):
    """Поточний стан форми (видимі записи)"""
    form_id: str
    active_count: int
    total_entries: int  # включно з м'яко видаленими
    entries: List[ConditionEntry]

    created_at: datetime
    updated_at: datetime


# ============================================================
# Entry Models
# ============================================================

class UpdateEntryRequest(BaseModel):
    """Редагування полів запису (передаються лише змінені)"""
    name: Optional[str] = None
    status: Optional[ConditionStatus] = None
    since: Optional[str] = None
    notes: Optional[str] = None


class EntryResponse(BaseModel):
    """Результат операції над записом"""
    updated: bool
    entry: Optional[ConditionEntry] = None
    form: FormState


class PruneResponse(BaseModel):
    """Результат очистки м'яко видалених записів"""
    pruned: int = Field(..., ge=0)
    form: FormState


# ============================================================
# Import Models
# ============================================================

class ImportResponse(BaseModel):
    """Результат імпорту"""
    state: ImportState
    entry_count: int
    active_count: int
    form: FormState


# ============================================================
# Health Models
# ============================================================

class HealthResponse(BaseModel):
    """Відповідь health check"""
    status: str = "ok"
    version: str
    active_forms: int


class ErrorResponse(BaseModel):
    """Відповідь з помилкою"""
    error: str
    detail: Optional[str] = None
