"""
MedHistory — Record Store

Впорядкована колекція записів анамнезу в пам'яті.

Операції:
- set_name / set_status / set_since / set_notes: редагування поля (no-op для невідомого id)
- add: новий запис з новим id
- remove: м'яке видалення (active=False)
- replace: повна заміна вмісту (імпорт)
- prune_inactive: фізичне видалення м'яко видалених записів
"""

import logging
from typing import Dict, Iterable, List, Optional, Union

from med_history.schemas import ConditionEntry, ConditionStatus

from .seed import DEFAULT_SEED


logger = logging.getLogger(__name__)


class RecordStore:
    """
    Record Store анамнезу.

    Порядок записів = порядок створення. Жодна операція не змінює порядок.
    М'яко видалені записи залишаються в пам'яті до імпорту нового документа
    або до явного prune_inactive().

    Приклад:
        store = RecordStore.from_seed()

        entry = store.add()
        store.set_name(entry.id, "Gout")
        store.set_status(entry.id, "Yes")

        store.remove(entry.id)
        print(store.active_count)
    """

    def __init__(
        self,
        entries: Optional[Iterable[ConditionEntry]] = None,
        active_count: Optional[int] = None
    ):
        self._load(list(entries or []), active_count)

    @classmethod
    def from_seed(cls, seed: Optional[Iterable[dict]] = None) -> "RecordStore":
        """
        Створити store зі стартового списку.

        active_count рахується за фактичними активними записами seed.
        """
        if seed is None:
            seed = DEFAULT_SEED
        return cls(ConditionEntry(**item) for item in seed)

    # =========================================================================
    # Читання
    # =========================================================================

    @property
    def entries(self) -> List[ConditionEntry]:
        """Всі записи, включно з м'яко видаленими"""
        return list(self._entries)

    def active_entries(self) -> List[ConditionEntry]:
        """Видимі записи в порядку створення"""
        return [e for e in self._entries if e.active]

    def get(self, entry_id: int) -> Optional[ConditionEntry]:
        """Отримати запис (активний чи ні)"""
        return self._index.get(entry_id)

    def next_id(self) -> int:
        """ID, який отримає наступний add()"""
        return self._last_id + 1

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, entry_id: int) -> bool:
        return entry_id in self._index

    def __repr__(self) -> str:
        return (
            f"RecordStore(entries={len(self._entries)}, "
            f"active_count={self.active_count})"
        )

    # =========================================================================
    # Редагування полів
    # =========================================================================

    def set_name(self, entry_id: int, value: str) -> bool:
        return self._set_field(entry_id, "name", value)

    def set_status(self, entry_id: int, value: Union[ConditionStatus, str]) -> bool:
        return self._set_field(entry_id, "status", value)

    def set_since(self, entry_id: int, value: str) -> bool:
        return self._set_field(entry_id, "since", value)

    def set_notes(self, entry_id: int, value: str) -> bool:
        return self._set_field(entry_id, "notes", value)

    def _set_field(self, entry_id: int, field_name: str, value) -> bool:
        entry = self._index.get(entry_id)
        if entry is None:
            return False
        setattr(entry, field_name, value)
        return True

    # =========================================================================
    # Додавання / видалення
    # =========================================================================

    def add(self) -> ConditionEntry:
        """Додати порожній запис зі статусом No"""
        entry = ConditionEntry(id=self.next_id())
        self._append(entry)
        self.active_count += 1
        return entry

    def remove(self, entry_id: int) -> bool:
        """
        М'яке видалення.

        Повторне видалення або невідомий id нічого не змінюють.
        """
        entry = self._index.get(entry_id)
        if entry is None or not entry.active:
            return False
        entry.active = False
        self.active_count -= 1
        return True

    def prune_inactive(self) -> int:
        """
        Фізично видалити м'яко видалені записи.

        Лічильник id не зменшується: нові записи не отримають старі id.
        """
        removed = [e for e in self._entries if not e.active]
        if not removed:
            return 0

        self._entries = [e for e in self._entries if e.active]
        for entry in removed:
            del self._index[entry.id]

        logger.info("Pruned %d inactive entries", len(removed))
        return len(removed)

    # =========================================================================
    # Повна заміна
    # =========================================================================

    def replace(self, entries: Iterable[ConditionEntry], active_count: int) -> None:
        """
        Замінити весь вміст store (без злиття).

        Попередні записи та їх id відкидаються.
        """
        self._load(list(entries), active_count)

    def _load(self, entries: List[ConditionEntry], active_count: Optional[int]) -> None:
        index: Dict[int, ConditionEntry] = {}
        for entry in entries:
            if entry.id in index:
                raise ValueError(f"duplicate entry id: {entry.id}")
            index[entry.id] = entry

        # Стан змінюється лише після успішної перевірки
        self._entries = entries
        self._index = index
        self._last_id = max(index, default=0)

        if active_count is None:
            active_count = sum(1 for e in entries if e.active)
        self.active_count = active_count

    def _append(self, entry: ConditionEntry) -> None:
        self._entries.append(entry)
        self._index[entry.id] = entry
        self._last_id = max(self._last_id, entry.id)
