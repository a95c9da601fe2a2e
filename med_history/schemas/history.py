"""
MedHistory — Схеми даних анамнезу

Pydantic моделі для:
- ConditionStatus: Yes / No
- ConditionEntry: один запис захворювання
- SavedDocument: JSON-конверт експорту/імпорту
"""

import json
from typing import List
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConditionStatus(str, Enum):
    """Статус захворювання"""
    YES = "Yes"
    NO = "No"


class ConditionEntry(BaseModel):
    """
    Запис захворювання в анамнезі.

    Змінюється на місці (редагування полів), тому присвоєння валідується:
    entry.status = "Yes" перетворюється на ConditionStatus.YES.

    Приклад:
        entry = ConditionEntry(
            id=1,
            name="Diabetes",
            status=ConditionStatus.YES,
            since="2018",
            notes="Type 1"
        )
    """
    model_config = ConfigDict(
        validate_assignment=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Diabetes",
                "status": "Yes",
                "since": "2018",
                "notes": "Type 1",
                "active": True
            }
        },
    )

    id: int = Field(..., description="Унікальний ID запису")
    name: str = Field(default="", description="Назва захворювання")
    status: ConditionStatus = Field(default=ConditionStatus.NO)
    since: str = Field(default="", description="З якого часу (вільний текст)")
    notes: str = Field(default="", description="Нотатки")
    active: bool = Field(default=True, description="False = м'яко видалений")


class SavedDocument(BaseModel):
    """
    Конверт збереженого файлу.

    Ключі JSON: timestamp, activeCount, entries.
    """
    model_config = ConfigDict(populate_by_name=True)

    timestamp: str = Field(default="", description="ISO-8601 час експорту")
    active_count: int = Field(..., alias="activeCount", ge=0)
    entries: List[ConditionEntry] = Field(...)

    @field_validator("entries")
    @classmethod
    def unique_ids(cls, v: List[ConditionEntry]) -> List[ConditionEntry]:
        """ID записів мають бути унікальними"""
        seen = set()
        for entry in v:
            if entry.id in seen:
                raise ValueError(f"duplicate entry id: {entry.id}")
            seen.add(entry.id)
        return v

    def to_json(self, indent: int = 2, ensure_ascii: bool = False) -> str:
        """Серіалізація з ключами у форматі файлу"""
        return json.dumps(
            self.model_dump(mode="json", by_alias=True),
            indent=indent,
            ensure_ascii=ensure_ascii,
        )
