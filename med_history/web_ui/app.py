"""
MedHistory — Web UI (Streamlit)

Форма анамнезу: список захворювань, Save (експорт JSON), Load (імпорт JSON), Add.

Запуск:
    streamlit run med_history/web_ui/app.py

    або:

    python scripts/run_web.py
"""

import streamlit as st
import sys
from pathlib import Path

# Додаємо корінь проекту
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from med_history.serializer import DocumentImportError
from med_history.web_ui.client import HistoryAPIClient, APIClientError


STATUS_OPTIONS = ["Yes", "No"]


def get_client() -> HistoryAPIClient:
    if "client" not in st.session_state:
        st.session_state.client = HistoryAPIClient()
    return st.session_state.client


def get_form(client: HistoryAPIClient) -> dict:
    """Поточна форма; нова, якщо сервер її вже не знає"""
    form = None
    if "form_id" in st.session_state:
        form = client.get_form(st.session_state.form_id)

    if form is None:
        form = client.create_form()
        st.session_state.form_id = form["form_id"]
        st.session_state.generation = st.session_state.get("generation", 0) + 1

    return form


# Callbacks — викликаються до наступного rerun

def on_field_change(field: str, entry_id: int, key: str):
    client = get_client()
    client.update_entry(st.session_state.form_id, entry_id, **{field: st.session_state[key]})


def on_remove(entry_id: int):
    client = get_client()
    client.remove_entry(st.session_state.form_id, entry_id)


def on_add():
    client = get_client()
    client.add_entry(st.session_state.form_id)


def handle_upload(client: HistoryAPIClient, uploaded) -> None:
    try:
        client.import_form(st.session_state.form_id, uploaded.name, uploaded.getvalue())
        st.session_state.import_message = ("success", f"Завантажено: {uploaded.name}")
        # Нові записи — нові ключі віджетів
        st.session_state.generation = st.session_state.get("generation", 0) + 1
    except DocumentImportError as e:
        st.session_state.import_message = ("error", e.message)
    except APIClientError as e:
        st.session_state.import_message = ("error", f"Помилка: {e}")
    finally:
        # Скидаємо file_uploader, щоб можна було обрати той самий файл
        st.session_state.uploader_key = st.session_state.get("uploader_key", 0) + 1
        st.rerun()


def render_row(entry: dict, generation: int):
    entry_id = entry["id"]
    prefix = f"{generation}_{entry_id}"

    col_name, col_status, col_since, col_notes, col_remove = st.columns([4, 2, 2, 3, 1])

    col_name.text_input(
        "Disease",
        value=entry["name"],
        key=f"name_{prefix}",
        placeholder="Disease name",
        label_visibility="collapsed",
        on_change=on_field_change,
        args=("name", entry_id, f"name_{prefix}"),
    )
    col_status.selectbox(
        "Status",
        STATUS_OPTIONS,
        index=STATUS_OPTIONS.index(entry["status"]),
        key=f"status_{prefix}",
        label_visibility="collapsed",
        on_change=on_field_change,
        args=("status", entry_id, f"status_{prefix}"),
    )
    col_since.text_input(
        "Since",
        value=entry["since"],
        key=f"since_{prefix}",
        placeholder="e.g. 2020",
        label_visibility="collapsed",
        on_change=on_field_change,
        args=("since", entry_id, f"since_{prefix}"),
    )
    col_notes.text_input(
        "Notes",
        value=entry["notes"],
        key=f"notes_{prefix}",
        placeholder="Notes",
        label_visibility="collapsed",
        on_change=on_field_change,
        args=("notes", entry_id, f"notes_{prefix}"),
    )
    col_remove.button(
        "✖",
        key=f"remove_{prefix}",
        help="Remove",
        on_click=on_remove,
        args=(entry_id,),
    )


def main():
    # Налаштування сторінки
    st.set_page_config(
        page_title="MedHistory — Past History",
        page_icon="🏥",
        layout="wide",
    )

    client = get_client()

    if not client.is_online():
        st.error("❌ API сервер недоступний!")
        st.info("Запустіть: `python scripts/run_api.py`")
        st.stop()

    try:
        form = get_form(client)
    except APIClientError as e:
        st.error(f"Помилка: {e}")
        st.stop()

    generation = st.session_state.get("generation", 0)

    # Header
    col_title, col_save, col_load, col_add = st.columns([6, 1, 3, 1])

    col_title.markdown(f"### 🕒 PAST HISTORY &nbsp; `{form['active_count']} active`")

    filename, content = client.export_form(form["form_id"])
    col_save.download_button(
        "⬇️ Save",
        data=content,
        file_name=filename,
        mime="application/json",
    )

    uploaded = col_load.file_uploader(
        "Load",
        type=["json"],
        key=f"uploader_{st.session_state.get('uploader_key', 0)}",
        label_visibility="collapsed",
    )
    if uploaded is not None:
        handle_upload(client, uploaded)

    col_add.button("➕ Add", on_click=on_add)

    message = st.session_state.pop("import_message", None)
    if message:
        kind, text = message
        if kind == "error":
            st.error(text)
        else:
            st.success(text)

    st.divider()

    # Table header
    cols = st.columns([4, 2, 2, 3, 1])
    for col, title in zip(cols, ["DISEASE", "STATUS", "SINCE", "NOTES", ""]):
        col.caption(title)

    for entry in form["entries"]:
        render_row(entry, generation)

    st.divider()
    st.caption(
        'Data is saved when you click "Save". '
        'Use "Load" to import previously saved data.'
    )


if __name__ == "__main__":
    main()
