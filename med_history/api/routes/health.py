"""
MedHistory — Health Routes

Health check та інформація про систему.
"""

from fastapi import APIRouter, Depends

from med_history import __version__

from ..dependencies import get_sessions, FormSessionManager
from ..models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    sessions: FormSessionManager = Depends(get_sessions)
) -> HealthResponse:
    """
    Перевірка стану сервера.

    Повертає статус та кількість відкритих форм.
    """
    return HealthResponse(
        status="ok",
        version=__version__,
        active_forms=sessions.get_active_count()
    )


@router.get("/")
async def root():
    """Головна сторінка API"""
    return {
        "name": "MedHistory API",
        "version": __version__,
        "description": "Форма анамнезу пацієнта",
        "docs": "/docs",
        "health": "/health",
    }
