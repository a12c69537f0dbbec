"""Admin-only user listing."""

from typing import Annotated

from fastapi import APIRouter, Depends

from rolegate.api.auth import require_role
from rolegate.core.state import get_user_store
from rolegate.models.user import UserRecord
from rolegate.schemas.auth import ADMIN_ROLE, TokenClaims
from rolegate.services.user_store import UserStore

router = APIRouter()


@router.get("/listofusers", response_model=list[UserRecord])
def list_users(
    _admin: Annotated[TokenClaims, Depends(require_role(ADMIN_ROLE))],
    store: Annotated[UserStore, Depends(get_user_store)],
) -> list[UserRecord]:
    """
    List all users (admin only), in registration order.

    Records include password hashes.
    """
    return store.list_users()
