"""
MedHistory — Модуль серіалізації

Компоненти:
- exporter.py: RecordStore → SavedDocument → JSON файл
- importer.py: JSON файл → SavedDocument → RecordStore (повна заміна)

Приклад використання:
    from med_history.serializer import save_to_file, load_from_file

    path = save_to_file(store, "exports")
    load_from_file(store, path)
"""

from .exporter import (
    format_timestamp,
    export_filename,
    build_document,
    export_json,
    save_to_file,
)
from .importer import (
    ImportState,
    ImportResult,
    DocumentImportError,
    DocumentImporter,
    parse_document,
    read_source,
    load_from_file,
)

__all__ = [
    # Export
    "format_timestamp",
    "export_filename",
    "build_document",
    "export_json",
    "save_to_file",

    # Import
    "ImportState",
    "ImportResult",
    "DocumentImportError",
    "DocumentImporter",
    "parse_document",
    "read_source",
    "load_from_file",
]
