"""
MedHistory — Модуль схем даних (schemas)

Pydantic моделі для валідації та серіалізації даних.

Приклад використання:
    from med_history.schemas import ConditionEntry, ConditionStatus, SavedDocument

    entry = ConditionEntry(id=1, name="Asthma", status=ConditionStatus.NO)

    # Десеріалізація з JSON
    doc = SavedDocument.model_validate_json(text)
"""

from .history import (
    ConditionStatus,
    ConditionEntry,
    SavedDocument,
)


__all__ = [
    "ConditionStatus",
    "ConditionEntry",
    "SavedDocument",
]
