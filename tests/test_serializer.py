"""
Тести для модуля serializer

Запуск: pytest tests/test_serializer.py -v
"""

import io
import json
from datetime import datetime, timezone

import pytest

from med_history.config import ImportConfig
from med_history.record_store import RecordStore
from med_history.serializer import (
    DocumentImportError,
    DocumentImporter,
    ImportState,
    build_document,
    export_filename,
    export_json,
    format_timestamp,
    load_from_file,
    parse_document,
    save_to_file,
)


NOW = datetime(2026, 10, 19, 8, 30, 15, 123456, tzinfo=timezone.utc)


def _store_9_of_11() -> RecordStore:
    """11 записів: 9 активних, 2 м'яко видалені"""
    store = RecordStore.from_seed()
    store.remove(3)
    store.remove(10)
    return store


# =============================================================================
# Export
# =============================================================================

def test_format_timestamp():
    """Тест ISO-8601 з мілісекундами та Z"""
    assert format_timestamp(NOW) == "2026-10-19T08:30:15.123Z"


def test_export_filename():
    """Тест імені файлу"""
    assert export_filename(NOW) == "medical-history-2026-10-19.json"


def test_build_document_filters_inactive():
    """Тест: експортуються лише активні записи"""
    store = _store_9_of_11()

    doc = build_document(store, NOW)

    assert doc.active_count == 9
    assert len(doc.entries) == 9
    assert all(e.active for e in doc.entries)
    assert 3 not in [e.id for e in doc.entries]
    assert doc.timestamp == "2026-10-19T08:30:15.123Z"


def test_build_document_detached_from_store():
    """Тест: документ не посилається на записи store"""
    store = RecordStore.from_seed()
    doc = build_document(store, NOW)

    store.set_name(1, "changed")

    assert doc.entries[0].name == "Diabetes"


def test_export_json_format():
    """Тест формату JSON: відступ 2 пробіли, ключі файлу"""
    store = _store_9_of_11()

    text = export_json(store, NOW)
    data = json.loads(text)

    assert '\n  "activeCount": 9' in text
    assert data["activeCount"] == 9
    assert len(data["entries"]) == 9
    assert data["entries"][0]["status"] == "Yes"
    assert all(e["active"] is True for e in data["entries"])


def test_export_keeps_unicode():
    """Тест: не-ASCII текст зберігається як є"""
    store = RecordStore()
    entry = store.add()
    store.set_notes(entry.id, "цукровий діабет")

    assert "цукровий діабет" in export_json(store, NOW)


def test_save_to_file(tmp_path):
    """Тест запису файлу"""
    store = RecordStore.from_seed()

    path = save_to_file(store, tmp_path / "exports", NOW)

    assert path.name == "medical-history-2026-10-19.json"
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["activeCount"] == 11


# =============================================================================
# Import
# =============================================================================

def test_parse_document_invalid_json():
    """Тест: синтаксично некоректний JSON"""
    with pytest.raises(DocumentImportError) as exc_info:
        parse_document("{not json")

    assert exc_info.value.message == ImportConfig().error_message
    assert "JSON parse error" in exc_info.value.detail


@pytest.mark.parametrize("content", [
    "[]",
    '{"timestamp": "t", "activeCount": 1}',
    '{"timestamp": "t", "activeCount": 1, "entries": {}}',
    '{"timestamp": "t", "activeCount": "many", "entries": []}',
    '{"timestamp": "t", "activeCount": 1, "entries": [{"name": "no id"}]}',
    '{"timestamp": "t", "activeCount": 1, "entries": [{"id": 1, "status": "Maybe"}]}',
    '{"timestamp": "t", "activeCount": 2, "entries": [{"id": 1}, {"id": 1}]}',
    # Рядки та bool не приймаються замість int/bool
    '{"activeCount": "9", "entries": []}',
    '{"activeCount": true, "entries": [{"id": 1}]}',
    '{"activeCount": 1, "entries": [{"id": "5"}]}',
    '{"activeCount": 1, "entries": [{"id": 1, "active": "no"}]}',
])
def test_parse_document_malformed_shape(content):
    """Тест: неправильна структура документа"""
    with pytest.raises(DocumentImportError):
        parse_document(content)


def test_parse_document_bytes_with_bom():
    """Тест: bytes з UTF-8 BOM"""
    content = b"\xef\xbb\xbf" + b'{"timestamp": "t", "activeCount": 0, "entries": []}'

    doc = parse_document(content)

    assert doc.active_count == 0


def test_parse_document_not_utf8():
    """Тест: не UTF-8"""
    with pytest.raises(DocumentImportError):
        parse_document(b"\xff\xfe\x00garbage")


def test_parse_document_legacy_key():
    """Тест: старий формат з ключем diseases"""
    content = json.dumps({
        "timestamp": "2025-01-01T00:00:00.000Z",
        "activeCount": 1,
        "diseases": [{"id": 1, "name": "Asthma", "status": "No",
                      "since": "", "notes": "", "active": True}],
    })

    doc = parse_document(content)
    assert doc.entries[0].name == "Asthma"

    with pytest.raises(DocumentImportError):
        parse_document(content, ImportConfig(accept_legacy_key=False))


def test_importer_invalid_leaves_store_unchanged():
    """Тест: некоректний файл не змінює store та лічильник"""
    store = _store_9_of_11()
    snapshot = [e.model_dump() for e in store.entries]
    importer = DocumentImporter()

    result = importer.load(store, b"{oops")

    assert result.state == ImportState.REJECTED
    assert not result.applied
    assert result.error == "Error loading file. Please ensure it's a valid JSON file."
    assert importer.state == ImportState.IDLE

    assert [e.model_dump() for e in store.entries] == snapshot
    assert store.active_count == 9


def test_importer_missing_file(tmp_path):
    """Тест: файл не існує"""
    store = RecordStore.from_seed()

    result = DocumentImporter().load(store, tmp_path / "missing.json")

    assert result.state == ImportState.REJECTED
    assert store.active_count == 11


def test_importer_replaces_store():
    """Тест: імпорт замінює store повністю, activeCount з файлу"""
    store = RecordStore.from_seed()
    content = json.dumps({
        "timestamp": "2026-10-19T08:30:15.123Z",
        "activeCount": 5,
        "entries": [
            {"id": 20, "name": "Gout", "status": "Yes", "since": "2019", "notes": "", "active": True},
            {"id": 21, "name": "Anemia", "status": "No", "since": "", "notes": "", "active": True},
        ],
    })

    result = DocumentImporter().load(store, content)

    assert result.applied
    assert result.entry_count == 2
    assert [e.id for e in store.entries] == [20, 21]
    assert store.get(1) is None
    # Лічильник береться з документа як є
    assert store.active_count == 5
    assert store.add().id == 22


def test_importer_file_like():
    """Тест: file-like джерело (upload)"""
    store = RecordStore()
    source = io.BytesIO(export_json(RecordStore.from_seed(), NOW).encode("utf-8"))

    result = DocumentImporter().load(store, source)

    assert result.applied
    assert store.active_count == 11


def test_load_from_file_raises(tmp_path):
    """Тест: load_from_file піднімає DocumentImportError"""
    path = tmp_path / "bad.json"
    path.write_text("not json", encoding="utf-8")
    store = RecordStore.from_seed()

    with pytest.raises(DocumentImportError):
        load_from_file(store, path)

    assert len(store) == 11


# =============================================================================
# Round-trip
# =============================================================================

def test_export_import_roundtrip(tmp_path):
    """Тест: експорт → імпорт повертає ті самі активні записи"""
    store = RecordStore.from_seed()
    entry = store.add()
    store.set_name(entry.id, "Gout")
    store.set_status(entry.id, "Yes")
    store.set_notes(2, "controlled")
    store.remove(6)

    expected = [e.model_dump() for e in store.active_entries()]

    path = save_to_file(store, tmp_path, NOW)

    restored = RecordStore()
    result = load_from_file(restored, path)

    assert result.applied
    assert [e.model_dump() for e in restored.active_entries()] == expected
    assert restored.active_count == json.loads(path.read_text(encoding="utf-8"))["activeCount"]


def test_scenario_9_active_of_11(tmp_path):
    """Сценарій: 9 активних / 2 неактивні → експорт 9 → імпорт 9"""
    store = _store_9_of_11()
    assert len(store) == 11

    path = save_to_file(store, tmp_path, NOW)
    data = json.loads(path.read_text(encoding="utf-8"))
    assert len(data["entries"]) == 9

    load_from_file(store, path)

    assert len(store.active_entries()) == 9
    assert store.active_count == 9
    # Неактивні записи зникли разом зі старим вмістом
    assert len(store) == 9
    assert store.get(3) is None
    assert store.get(10) is None
