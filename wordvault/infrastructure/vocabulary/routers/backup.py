import logging

from fastapi import APIRouter, Depends, Request, Response

from wordvault.application.common.result import Failure
from wordvault.application.vocabulary.vocabulary_app import VocabularyApp
from wordvault.infrastructure.common.di import get_vocabulary_app
from wordvault.infrastructure.common.errors import raise_failure
from wordvault.infrastructure.vocabulary.schemas import (
    BackupLinkRequest,
    BackupLinkResponse,
    ImportResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/backup", tags=["backup"])


@router.post("/link", response_model=BackupLinkResponse)
async def link_backup_file(
    request: BackupLinkRequest,
    app: VocabularyApp = Depends(get_vocabulary_app),
) -> BackupLinkResponse:
    """
    Link the JSON file that mirrors every change, and write it right away.

    Raises:
        BackupPermissionError: If the file cannot be written (409)
    """
    result = await app.link_backup_target(request.path)
    if isinstance(result, Failure):
        raise_failure(app, result)

    target = app.synchronizer.target
    return BackupLinkResponse(
        path=target.reference if target else request.path,
        outcome=result.unwrap().value,
        message=app.status,
    )


@router.get("/export")
async def export_words(app: VocabularyApp = Depends(get_vocabulary_app)) -> Response:
    """Download every word as a pretty-printed JSON array."""
    data = app.export_snapshot()
    return Response(
        content=data,
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{app.backup_file_name}"'},
    )


@router.post("/import", response_model=ImportResponse)
async def import_words(
    request: Request,
    app: VocabularyApp = Depends(get_vocabulary_app),
) -> ImportResponse:
    """
    Import a JSON array of words from the raw request body.

    Duplicates of stored words and rows without word or meaning are skipped.

    Raises:
        FormatError: If the body is not a JSON array (400)
    """
    payload = await request.body()
    result = await app.import_snapshot(payload)
    if isinstance(result, Failure):
        raise_failure(app, result)

    inserted = result.unwrap()
    logger.info(f"Imported {inserted} words")
    return ImportResponse(inserted=inserted, message=app.status)
