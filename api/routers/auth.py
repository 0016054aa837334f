"""
Auth router.

Identity itself is handled by the external provider; this endpoint only
derives the role and display name the frontend shows after login.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.deps import get_sync_auth_use_case
from application.use_cases import SyncAuthUseCase

router = APIRouter(
    prefix="/auth",
    tags=["Auth"],
)


class AuthSyncRequest(BaseModel):
    """Request model for POST /auth/sync."""
    auth_id: Optional[str] = None
    email: Optional[str] = None


@router.post("/sync")
def sync_auth(
    request: AuthSyncRequest,
    use_case: SyncAuthUseCase = Depends(get_sync_auth_use_case),
):
    """
    Resolve `{auth_id, email, display_name, role}` for a login.

    Role is "admin" when the email matches ADMIN_EMAIL, otherwise "user".
    """
    return use_case.execute(auth_id=request.auth_id, email=request.email)
