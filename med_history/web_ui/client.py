"""
MedHistory — API Client

HTTP клієнт для Web UI. Працює з requests.Session або з будь-яким
об'єктом з тим самим інтерфейсом (наприклад, fastapi.testclient.TestClient).
"""

from typing import Optional, Tuple
import os
import re

import requests

from med_history.serializer import DocumentImportError


# Адресу API можна задати через MED_HISTORY_API_URL (див. scripts/run_web.py)
API_URL = os.getenv("MED_HISTORY_API_URL", "http://localhost:8000")

_FILENAME_RE = re.compile(r'filename="?([^";]+)"?')


class APIClientError(RuntimeError):
    """Неочікувана відповідь API"""

    def __init__(self, status_code: int, detail: str):
        super().__init__(f"API error {status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class HistoryAPIClient:
    """
    Клієнт MedHistory API.

    Приклад:
        client = HistoryAPIClient()
        form = client.create_form()

        entry = client.add_entry(form["form_id"])["entry"]
        client.update_entry(form["form_id"], entry["id"], name="Gout")

        filename, content = client.export_form(form["form_id"])
    """

    def __init__(self, base_url: str = API_URL, session=None, timeout: float = 5.0):
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _check(self, response, expected: int = 200):
        if response.status_code != expected:
            try:
                data = response.json()
            except ValueError:
                data = None
            detail = data.get("detail") if isinstance(data, dict) else response.text
            raise APIClientError(response.status_code, str(detail))
        return response

    # =========================================================================
    # Health
    # =========================================================================

    def is_online(self) -> bool:
        """Чи доступний API сервер"""
        try:
            r = self.session.get(self._url("/health"), timeout=2)
            return r.status_code == 200
        except requests.RequestException:
            return False

    # =========================================================================
    # Forms
    # =========================================================================

    def create_form(self, seed: Optional[bool] = None) -> dict:
        r = self.session.post(self._url("/api/forms"), json={"seed": seed}, timeout=self.timeout)
        return self._check(r).json()

    def get_form(self, form_id: str) -> Optional[dict]:
        """Стан форми або None, якщо форму не знайдено"""
        r = self.session.get(self._url(f"/api/forms/{form_id}"), timeout=self.timeout)
        if r.status_code == 404:
            return None
        return self._check(r).json()

    # =========================================================================
    # Entries
    # =========================================================================

    def add_entry(self, form_id: str) -> dict:
        r = self.session.post(self._url(f"/api/forms/{form_id}/entries"), timeout=self.timeout)
        return self._check(r).json()

    def update_entry(self, form_id: str, entry_id: int, **fields) -> dict:
        """Змінити поля: name, status, since, notes"""
        r = self.session.patch(
            self._url(f"/api/forms/{form_id}/entries/{entry_id}"),
            json=fields,
            timeout=self.timeout
        )
        return self._check(r).json()

    def remove_entry(self, form_id: str, entry_id: int) -> dict:
        r = self.session.delete(
            self._url(f"/api/forms/{form_id}/entries/{entry_id}"),
            timeout=self.timeout
        )
        return self._check(r).json()

    # =========================================================================
    # Export / Import
    # =========================================================================

    def export_form(self, form_id: str) -> Tuple[str, bytes]:
        """Повертає (ім'я файлу, вміст)"""
        r = self.session.get(self._url(f"/api/forms/{form_id}/export"), timeout=self.timeout)
        self._check(r)

        match = _FILENAME_RE.search(r.headers.get("content-disposition", ""))
        filename = match.group(1) if match else "medical-history.json"
        return filename, r.content

    def import_form(self, form_id: str, filename: str, content: bytes) -> dict:
        """
        Імпортувати файл у форму.

        Raises:
            DocumentImportError: файл відхилено (форма не змінилась)
        """
        r = self.session.post(
            self._url(f"/api/forms/{form_id}/import"),
            files={"file": (filename, content, "application/json")},
            timeout=self.timeout
        )
        if r.status_code == 400:
            data = r.json()
            raise DocumentImportError(data.get("error"), data.get("detail"))
        return self._check(r).json()
