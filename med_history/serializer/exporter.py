"""
MedHistory — Експорт анамнезу в JSON

Активні записи загортаються в SavedDocument з часом експорту
та кількістю активних записів.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from med_history.config import ExportConfig
from med_history.record_store import RecordStore
from med_history.schemas import SavedDocument


logger = logging.getLogger(__name__)


def _utc_now(now: Optional[datetime] = None) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def format_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 у UTC з мілісекундами: 2026-10-19T08:30:00.000Z"""
    now = _utc_now(now)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


def export_filename(
    now: Optional[datetime] = None,
    config: Optional[ExportConfig] = None
) -> str:
    """Ім'я файлу: medical-history-YYYY-MM-DD.json"""
    config = config or ExportConfig()
    return f"{config.filename_prefix}-{_utc_now(now).date().isoformat()}.json"


def build_document(store: RecordStore, now: Optional[datetime] = None) -> SavedDocument:
    """Зібрати SavedDocument з активних записів"""
    entries = [e.model_copy() for e in store.active_entries()]

    if store.active_count != len(entries):
        logger.warning(
            "Active counter (%d) differs from active entries (%d); exporting %d",
            store.active_count, len(entries), len(entries)
        )

    return SavedDocument(
        timestamp=format_timestamp(now),
        active_count=len(entries),
        entries=entries,
    )


def export_json(
    store: RecordStore,
    now: Optional[datetime] = None,
    config: Optional[ExportConfig] = None
) -> str:
    """Pretty-printed JSON (відступ 2 пробіли за замовчуванням)"""
    config = config or ExportConfig()
    document = build_document(store, now)
    return document.to_json(indent=config.indent, ensure_ascii=config.ensure_ascii)


def save_to_file(
    store: RecordStore,
    directory: Union[str, Path],
    now: Optional[datetime] = None,
    config: Optional[ExportConfig] = None
) -> Path:
    """Записати експорт у directory/medical-history-YYYY-MM-DD.json"""
    directory = Path(directory)
    now = _utc_now(now)
    directory.mkdir(parents=True, exist_ok=True)

    path = directory / export_filename(now, config)
    path.write_text(export_json(store, now, config), encoding="utf-8")

    logger.info("Exported %d entries to %s", len(store.active_entries()), path)
    return path
