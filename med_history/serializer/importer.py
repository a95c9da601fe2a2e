"""
MedHistory — Імпорт анамнезу з JSON

Файл читається повністю, парситься як JSON і перевіряється на структуру
SavedDocument. Успішний імпорт замінює весь Record Store; при помилці
store не змінюється.

Стани: IDLE → READING → {APPLIED | REJECTED} → IDLE
"""

import json
import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import IO, Optional, Union

from pydantic import ValidationError

from med_history.config import ImportConfig
from med_history.record_store import RecordStore
from med_history.schemas import SavedDocument


logger = logging.getLogger(__name__)

LEGACY_ENTRIES_KEY = "diseases"

ImportSource = Union[str, bytes, os.PathLike, IO]


class ImportState(str, Enum):
    """Стан імпорту"""
    IDLE = "idle"
    READING = "reading"
    APPLIED = "applied"
    REJECTED = "rejected"


class DocumentImportError(ValueError):
    """
    Некоректний або не-JSON файл імпорту.

    message — текст для користувача, detail — причина (parser/validation).
    """

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail


@dataclass
class ImportResult:
    """Результат однієї спроби імпорту"""
    state: ImportState
    entry_count: int = 0
    active_count: int = 0
    error: Optional[str] = None
    detail: Optional[str] = None

    @property
    def applied(self) -> bool:
        return self.state == ImportState.APPLIED


def parse_document(
    content: Union[str, bytes],
    config: Optional[ImportConfig] = None
) -> SavedDocument:
    """
    Розпарсити вміст файлу в SavedDocument.

    Raises:
        DocumentImportError: не UTF-8, не JSON або неправильна структура
    """
    config = config or ImportConfig()

    if isinstance(content, bytes):
        try:
            content = content.decode(config.encoding)
        except UnicodeDecodeError as e:
            raise DocumentImportError(config.error_message, f"decode error: {e}") from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise DocumentImportError(config.error_message, f"JSON parse error: {e}") from e

    if not isinstance(data, dict):
        raise DocumentImportError(
            config.error_message,
            f"expected a JSON object, got {type(data).__name__}"
        )

    # Файли старого формату зберігали записи під ключем "diseases"
    if config.accept_legacy_key and "entries" not in data and LEGACY_ENTRIES_KEY in data:
        data = dict(data)
        data["entries"] = data.pop(LEGACY_ENTRIES_KEY)

    # Strict JSON: "9", true, "no" не перетворюються на int/bool
    try:
        return SavedDocument.model_validate_json(json.dumps(data), strict=True)
    except ValidationError as e:
        raise DocumentImportError(config.error_message, str(e)) from e


def read_source(source: ImportSource) -> Union[str, bytes]:
    """
    Прочитати весь вміст джерела.

    str/bytes — вже вміст файлу, Path — шлях, інше — file-like з read().
    """
    if isinstance(source, (str, bytes)):
        return source
    if isinstance(source, os.PathLike):
        return Path(source).read_bytes()
    return source.read()


class DocumentImporter:
    """
    Імпорт SavedDocument у RecordStore.

    Між викликами importer завжди в стані IDLE. Документ застосовується
    повністю або не застосовується взагалі.

    Приклад:
        importer = DocumentImporter()
        result = importer.load(store, Path("medical-history-2026-10-19.json"))

        if not result.applied:
            print(result.error)
    """

    def __init__(self, config: Optional[ImportConfig] = None):
        self.config = config or ImportConfig()
        self.state = ImportState.IDLE
        self.last_result: Optional[ImportResult] = None

    def load(self, store: RecordStore, source: ImportSource) -> ImportResult:
        """Прочитати, перевірити й застосувати документ"""
        self.state = ImportState.READING
        try:
            result = self._load(store, source)
        finally:
            self.state = ImportState.IDLE

        self.last_result = result
        return result

    def _load(self, store: RecordStore, source: ImportSource) -> ImportResult:
        try:
            content = read_source(source)
        except OSError as e:
            logger.warning("Import rejected: cannot read source: %s", e)
            return ImportResult(
                state=ImportState.REJECTED,
                error=self.config.error_message,
                detail=f"read error: {e}",
            )

        try:
            document = parse_document(content, self.config)
        except DocumentImportError as e:
            logger.warning("Import rejected: %s", e.detail)
            return ImportResult(
                state=ImportState.REJECTED,
                error=e.message,
                detail=e.detail,
            )

        store.replace(document.entries, document.active_count)

        logger.info(
            "Imported %d entries (activeCount=%d, timestamp=%s)",
            len(document.entries), document.active_count, document.timestamp
        )
        return ImportResult(
            state=ImportState.APPLIED,
            entry_count=len(document.entries),
            active_count=document.active_count,
        )


def load_from_file(
    store: RecordStore,
    path: Union[str, os.PathLike],
    config: Optional[ImportConfig] = None
) -> ImportResult:
    """
    Імпортувати файл за шляхом.

    Raises:
        DocumentImportError: якщо файл не прочитано або він некоректний
    """
    result = DocumentImporter(config).load(store, Path(path))
    if not result.applied:
        raise DocumentImportError(result.error, result.detail)
    return result
