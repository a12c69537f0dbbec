"""Admin-only placeholder data endpoint."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from rolegate.api.auth import require_role
from rolegate.schemas.auth import ADMIN_ROLE, TokenClaims

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/data", response_class=PlainTextResponse)
def get_data(
    admin: Annotated[TokenClaims, Depends(require_role(ADMIN_ROLE))],
) -> str:
    logger.info("Protected data served", extra={"username": admin.username})
    return "Protected data"
