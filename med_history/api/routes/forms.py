"""
MedHistory — Forms Routes

Endpoints для форм анамнезу:
- Створення форми
- Отримання стану
- Закриття форми
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import get_sessions, FormSession, FormSessionManager
from ..models import CreateFormRequest, FormState

router = APIRouter(prefix="/forms", tags=["Forms"])


def session_to_response(session: FormSession) -> FormState:
    """Конвертувати сесію в Pydantic модель"""
    return FormState(**session.to_dict())


def get_form_or_404(form_id: str, sessions: FormSessionManager) -> FormSession:
    """Знайти форму або повернути 404"""
    session = sessions.get_session(form_id)

    if not session:
        raise HTTPException(
            status_code=404,
            detail=f"Form {form_id} not found"
        )

    return session


@router.post("", response_model=FormState)
async def create_form(
    request: Optional[CreateFormRequest] = None,
    sessions: FormSessionManager = Depends(get_sessions)
) -> FormState:
    """
    Створити нову форму анамнезу.

    - **seed**: заповнити стандартним списком захворювань (за замовчуванням з конфігурації)
    """
    seed = request.seed if request else None
    session = sessions.create_session(seed=seed)
    return session_to_response(session)


@router.get("/{form_id}", response_model=FormState)
async def get_form(
    form_id: str,
    sessions: FormSessionManager = Depends(get_sessions)
) -> FormState:
    """
    Отримати поточний стан форми.

    Повертає лише активні записи в порядку створення.
    """
    session = get_form_or_404(form_id, sessions)
    return session_to_response(session)


@router.delete("/{form_id}")
async def delete_form(
    form_id: str,
    sessions: FormSessionManager = Depends(get_sessions)
) -> dict:
    """Закрити та видалити форму."""
    success = sessions.delete_session(form_id)

    if not success:
        raise HTTPException(
            status_code=404,
            detail=f"Form {form_id} not found"
        )

    return {"deleted": True, "form_id": form_id}


@router.get("")
async def list_forms(
    sessions: FormSessionManager = Depends(get_sessions)
) -> dict:
    """Список відкритих форм (для адміністрування)."""
    return {
        "active_forms": sessions.get_active_count(),
        "form_ids": list(sessions.sessions.keys())
    }
