"""
MedHistory — Модуль Record Store

Компоненти:
- store.py: RecordStore — записи анамнезу в пам'яті
- seed.py: DEFAULT_SEED — стартовий список захворювань

Приклад використання:
    from med_history.record_store import RecordStore

    store = RecordStore.from_seed()
    print(store.active_count)  # 11
"""

from .store import RecordStore
from .seed import DEFAULT_SEED

__all__ = [
    "RecordStore",
    "DEFAULT_SEED",
]
