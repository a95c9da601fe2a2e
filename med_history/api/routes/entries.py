"""
MedHistory — Entries Routes

Endpoints для записів форми:
- Додавання запису
- Редагування полів (name / status / since / notes)
- М'яке видалення
- Очистка м'яко видалених
"""

from fastapi import APIRouter, Depends

from ..dependencies import get_sessions, FormSessionManager
from ..models import UpdateEntryRequest, EntryResponse, PruneResponse
from .forms import get_form_or_404, session_to_response

router = APIRouter(prefix="/forms/{form_id}", tags=["Entries"])


@router.post("/entries", response_model=EntryResponse)
async def add_entry(
    form_id: str,
    sessions: FormSessionManager = Depends(get_sessions)
) -> EntryResponse:
    """Додати порожній запис (status = No)."""
    session = get_form_or_404(form_id, sessions)

    entry = session.store.add()
    session.touch()

    return EntryResponse(
        updated=True,
        entry=entry,
        form=session_to_response(session)
    )


@router.patch("/entries/{entry_id}", response_model=EntryResponse)
async def update_entry(
    form_id: str,
    entry_id: int,
    request: UpdateEntryRequest,
    sessions: FormSessionManager = Depends(get_sessions)
) -> EntryResponse:
    """
    Змінити поля запису.

    Невідомий entry_id — нічого не змінюється (updated = false).

    Приклад:
    ```json
    {
        "status": "Yes",
        "since": "2020"
    }
    ```
    """
    session = get_form_or_404(form_id, sessions)
    store = session.store

    updated = False
    if request.name is not None:
        updated = store.set_name(entry_id, request.name) or updated
    if request.status is not None:
        updated = store.set_status(entry_id, request.status) or updated
    if request.since is not None:
        updated = store.set_since(entry_id, request.since) or updated
    if request.notes is not None:
        updated = store.set_notes(entry_id, request.notes) or updated

    if updated:
        session.touch()

    return EntryResponse(
        updated=updated,
        entry=store.get(entry_id),
        form=session_to_response(session)
    )


@router.delete("/entries/{entry_id}", response_model=EntryResponse)
async def remove_entry(
    form_id: str,
    entry_id: int,
    sessions: FormSessionManager = Depends(get_sessions)
) -> EntryResponse:
    """М'яко видалити запис (прихований, але залишається в пам'яті)."""
    session = get_form_or_404(form_id, sessions)

    removed = session.store.remove(entry_id)
    if removed:
        session.touch()

    return EntryResponse(
        updated=removed,
        entry=session.store.get(entry_id),
        form=session_to_response(session)
    )


@router.post("/prune", response_model=PruneResponse)
async def prune_entries(
    form_id: str,
    sessions: FormSessionManager = Depends(get_sessions)
) -> PruneResponse:
    """Фізично видалити м'яко видалені записи."""
    session = get_form_or_404(form_id, sessions)

    pruned = session.store.prune_inactive()
    if pruned:
        session.touch()

    return PruneResponse(pruned=pruned, form=session_to_response(session))
