"""Upload endpoint: store one file from a multipart form under a generated name."""

import logging
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from rolegate.api.auth import require_role
from rolegate.core.config import Settings
from rolegate.core.state import get_app_settings
from rolegate.schemas.auth import ADMIN_ROLE, TokenClaims
from rolegate.services.uploads import UPLOAD_FIELD_NAME, save_upload

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/upload", response_class=PlainTextResponse)
async def upload_file(
    request: Request,
    admin: Annotated[TokenClaims, Depends(require_role(ADMIN_ROLE))],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> str:
    """
    Accept a single file sent as `multipart/form-data` in a field named `file`.

    Any size, type, or extension is accepted. The file is written to UPLOAD_DIR as
    `file-<epoch millis><ext>` and the stored path is returned as plain text.
    """
    async with request.form() as form:
        upload = form.get(UPLOAD_FIELD_NAME)
        # Plain text fields come back as str; only a real file part counts.
        if not isinstance(upload, UploadFile):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="No file uploaded",
            )
        await upload.seek(0)
        stored = await run_in_threadpool(
            save_upload,
            upload.file,
            settings.UPLOAD_DIR,
            UPLOAD_FIELD_NAME,
            upload.filename,
        )

    relative = Path(settings.UPLOAD_DIR, stored.name).as_posix()
    logger.info(
        "File uploaded",
        extra={"path": relative, "size": stored.stat().st_size, "username": admin.username},
    )
    return f"File uploaded: {relative}"
