"""
Profile router.

This router contains endpoints for:
- POST /profile/ensure - Find or create the Users row for an identity
- POST /profile/update - Partial profile update
- POST /profile/avatar - Upload a profile picture (multipart)
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from pydantic import BaseModel

from api.deps import (
    get_ensure_profile_use_case,
    get_update_profile_use_case,
    get_upload_avatar_use_case,
)
from application.use_cases import (
    EnsureProfileUseCase,
    ProfileChanges,
    UpdateProfileUseCase,
    UploadAvatarUseCase,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/profile",
    tags=["Profile"],
)


class EnsureProfileRequest(BaseModel):
    """Request model for POST /profile/ensure."""
    auth_id: Optional[str] = None
    email: Optional[str] = None


class UpdateProfileRequest(ProfileChanges):
    """Request model for POST /profile/update: user_id plus the changed fields."""
    user_id: Optional[str] = None


@router.post("/ensure")
def ensure_profile(
    request: EnsureProfileRequest,
    use_case: EnsureProfileUseCase = Depends(get_ensure_profile_use_case),
):
    """
    Return the user's profile, creating it on first login.

    Returns:
        Users row
    """
    return use_case.execute(auth_id=request.auth_id, email=request.email)


@router.post("/update")
def update_profile(
    request: UpdateProfileRequest,
    use_case: UpdateProfileUseCase = Depends(get_update_profile_use_case),
):
    """
    Update profile fields.

    Only fields present in the body are changed. Out-of-range age, height
    or weight and unknown goals are rejected with 400.
    """
    changes = ProfileChanges.model_validate(
        request.model_dump(exclude_unset=True, exclude={"user_id"})
    )
    return use_case.execute(user_id=request.user_id, changes=changes)


@router.post("/avatar")
def upload_avatar(
    avatar: Optional[UploadFile] = File(None),
    auth_id: Optional[str] = Form(None),
    user_id: Optional[str] = Form(None),
    use_case: UploadAvatarUseCase = Depends(get_upload_avatar_use_case),
):
    """
    Upload a profile picture for the caller's own profile.

    Returns:
        {avatar_url}
    """
    content = avatar.file.read() if avatar is not None else None
    content_type = avatar.content_type if avatar is not None else None
    return use_case.execute(
        user_id=user_id,
        auth_id=auth_id,
        content=content,
        content_type=content_type,
    )
