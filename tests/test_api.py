"""
Тести для модуля api

Запуск: pytest tests/test_api.py -v
"""

import json

from fastapi import FastAPI
from fastapi.testclient import TestClient

from med_history.api import app


client = TestClient(app)


def _new_form(seed=True) -> dict:
    response = client.post("/api/forms", json={"seed": seed})
    assert response.status_code == 200
    return response.json()


def test_app_creation():
    """Тест створення FastAPI app"""
    assert isinstance(app, FastAPI)
    assert app.title == "MedHistory API"


def test_root_and_health():
    """Тест кореневого endpoint та health check"""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["name"] == "MedHistory API"

    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["active_forms"] >= 0


def test_create_form_seeded():
    """Тест створення форми зі стартовим списком"""
    form = _new_form()

    assert form["active_count"] == 11
    assert form["total_entries"] == 11
    assert form["entries"][0]["name"] == "Diabetes"

    print(f"✓ Form created: {form['form_id']}")


def test_create_form_without_body():
    """Тест: тіло запиту необов'язкове"""
    response = client.post("/api/forms")

    assert response.status_code == 200
    assert response.json()["active_count"] == 11


def test_create_form_empty():
    """Тест порожньої форми"""
    form = _new_form(seed=False)

    assert form["active_count"] == 0
    assert form["entries"] == []


def test_unknown_form():
    """Тест: невідома форма — 404"""
    assert client.get("/api/forms/nope").status_code == 404
    assert client.post("/api/forms/nope/entries").status_code == 404
    assert client.get("/api/forms/nope/export").status_code == 404


def test_add_update_remove_entry():
    """Тест додавання, редагування та видалення запису"""
    form_id = _new_form()["form_id"]

    response = client.post(f"/api/forms/{form_id}/entries")
    assert response.status_code == 200
    data = response.json()
    entry_id = data["entry"]["id"]
    assert entry_id == 12
    assert data["form"]["active_count"] == 12

    response = client.patch(
        f"/api/forms/{form_id}/entries/{entry_id}",
        json={"name": "Gout", "status": "Yes", "since": "2019"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["updated"] is True
    assert data["entry"]["name"] == "Gout"
    assert data["entry"]["status"] == "Yes"
    assert data["entry"]["notes"] == ""

    response = client.delete(f"/api/forms/{form_id}/entries/{entry_id}")
    data = response.json()
    assert data["updated"] is True
    assert data["entry"]["active"] is False
    assert data["form"]["active_count"] == 11
    assert data["form"]["total_entries"] == 12
    assert entry_id not in [e["id"] for e in data["form"]["entries"]]


def test_update_unknown_entry_is_noop():
    """Тест: редагування невідомого запису нічого не змінює"""
    form = _new_form()

    response = client.patch(
        f"/api/forms/{form['form_id']}/entries/999",
        json={"name": "ghost"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["updated"] is False
    assert data["entry"] is None
    assert data["form"]["entries"] == form["entries"]


def test_update_invalid_status():
    """Тест: статус поза Yes/No — 422"""
    form_id = _new_form()["form_id"]

    response = client.patch(f"/api/forms/{form_id}/entries/1", json={"status": "Maybe"})

    assert response.status_code == 422


def test_prune():
    """Тест очистки м'яко видалених"""
    form_id = _new_form()["form_id"]
    client.delete(f"/api/forms/{form_id}/entries/1")

    data = client.post(f"/api/forms/{form_id}/prune").json()

    assert data["pruned"] == 1
    assert data["form"]["total_entries"] == 10


def test_export():
    """Тест завантаження JSON файлу"""
    form_id = _new_form()["form_id"]
    client.delete(f"/api/forms/{form_id}/entries/3")
    client.delete(f"/api/forms/{form_id}/entries/10")

    response = client.get(f"/api/forms/{form_id}/export")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert 'filename="medical-history-' in response.headers["content-disposition"]

    data = json.loads(response.content)
    assert data["activeCount"] == 9
    assert len(data["entries"]) == 9


def test_export_import_scenario():
    """Сценарій: 9 з 11 → експорт → імпорт у нову форму"""
    source_id = _new_form()["form_id"]
    client.delete(f"/api/forms/{source_id}/entries/3")
    client.delete(f"/api/forms/{source_id}/entries/10")
    exported = client.get(f"/api/forms/{source_id}/export").content

    target_id = _new_form()["form_id"]
    response = client.post(
        f"/api/forms/{target_id}/import",
        files={"file": ("history.json", exported, "application/json")}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["state"] == "applied"
    assert data["active_count"] == 9
    assert data["form"]["total_entries"] == 9
    assert data["form"]["entries"] == json.loads(exported)["entries"]


def test_import_invalid_file():
    """Тест: некоректний файл — 400, форма не змінилась"""
    form = _new_form()
    form_id = form["form_id"]

    response = client.post(
        f"/api/forms/{form_id}/import",
        files={"file": ("broken.json", b"{broken", "application/json")}
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Error loading file. Please ensure it's a valid JSON file."

    after = client.get(f"/api/forms/{form_id}").json()
    assert after["entries"] == form["entries"]
    assert after["active_count"] == form["active_count"]


def test_delete_form():
    """Тест закриття форми"""
    form_id = _new_form()["form_id"]

    assert client.delete(f"/api/forms/{form_id}").json()["deleted"] is True
    assert client.get(f"/api/forms/{form_id}").status_code == 404
    assert client.delete(f"/api/forms/{form_id}").status_code == 404
