"""
MedHistory — API Routes

Експорт всіх роутерів.
"""

from .health import router as health_router
from .forms import router as forms_router
from .entries import router as entries_router
from .transfer import router as transfer_router

__all__ = [
    'health_router',
    'forms_router',
    'entries_router',
    'transfer_router',
]
