"""
MedHistory — Transfer Routes

Експорт форми у JSON файл та імпорт з файлу.
"""

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse, Response

from med_history.serializer import export_filename, export_json

from ..dependencies import get_sessions, FormSessionManager
from ..models import ImportResponse, ErrorResponse
from .forms import get_form_or_404, session_to_response

router = APIRouter(prefix="/forms/{form_id}", tags=["Transfer"])


@router.get("/export")
async def export_form(
    form_id: str,
    sessions: FormSessionManager = Depends(get_sessions)
) -> Response:
    """
    Завантажити активні записи як medical-history-YYYY-MM-DD.json.
    """
    session = get_form_or_404(form_id, sessions)
    settings = session.settings.export

    content = export_json(session.store, config=settings)
    filename = export_filename(config=settings)

    return Response(
        content=content.encode("utf-8"),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post(
    "/import",
    response_model=ImportResponse,
    responses={400: {"model": ErrorResponse}},
)
async def import_form(
    form_id: str,
    file: UploadFile = File(...),
    sessions: FormSessionManager = Depends(get_sessions)
):
    """
    Замінити вміст форми документом з файлу.

    При помилці повертається 400, форма не змінюється.
    """
    session = get_form_or_404(form_id, sessions)

    content = await file.read()
    result = session.importer.load(session.store, content)

    if not result.applied:
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error=result.error, detail=result.detail).model_dump()
        )

    session.touch()

    return ImportResponse(
        state=result.state,
        entry_count=result.entry_count,
        active_count=result.active_count,
        form=session_to_response(session)
    )
