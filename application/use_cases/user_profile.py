"""
User profile use cases.

- EnsureProfileUseCase: find-or-create the Users row for an identity
- UpdateProfileUseCase: partial profile update with field validation
- UploadAvatarUseCase: ownership-checked profile picture upload
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from application.exceptions import Forbidden, InvalidArgument, NotFound, UpstreamFailure
from application.ports import AvatarStorage, UserRepository

logger = logging.getLogger(__name__)

DEFAULT_DISPLAY_NAME = "User"
DEFAULT_AVATAR_URL = "https://api.dicebear.com/9.x/identicon/svg?seed={seed}"
AVATAR_PATH = "{auth_id}/avatar.png"
DEFAULT_AVATAR_MAX_BYTES = 5 * 1024 * 1024


class Goal(str, Enum):
    """Training goal shown on the profile page."""

    MAINTAIN_WEIGHT = "Maintain Weight"
    WEIGHT_LOSS = "Weight loss"
    GAIN_WEIGHT = "Gain Weight"


# =============================================================================
# Ensure
# =============================================================================


class EnsureProfileUseCase:
    """
    Find-or-create the Users row for an authenticated identity.

    Lookup order:
    1. By auth_id (the normal case after the first login)
    2. By email, attaching auth_id to a row created before identities existed
    3. Insert a new row

    Step 3 is an upsert on auth_id that ignores duplicates followed by a
    re-read, so concurrent first logins for the same identity end up on one
    row. auth_id is never overwritten once set.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, auth_id: Optional[str], email: Optional[str]) -> Dict[str, Any]:
        """
        Return the Users row for `auth_id`, creating it if needed.

        Raises:
            InvalidArgument: If auth_id or email is missing
            Forbidden: If the email belongs to a row linked to another identity
            UpstreamFailure: If the row cannot be created
        """
        auth_id = auth_id.strip() if isinstance(auth_id, str) else ""
        email = email.strip() if isinstance(email, str) else ""
        if not auth_id or not email:
            raise InvalidArgument("auth_id and email are required")

        row = self._user_repo.get_by_auth_id(auth_id)
        if row:
            return row

        by_email = self._user_repo.get_by_email(email)
        if by_email:
            return self._attach(by_email, auth_id)

        self._user_repo.insert_if_absent(
            {
                "auth_id": auth_id,
                "email": email,
                "display_name": email.split("@")[0] or DEFAULT_DISPLAY_NAME,
                "goal": Goal.MAINTAIN_WEIGHT.value,
                "avatar_url": DEFAULT_AVATAR_URL.format(seed=auth_id),
            }
        )
        row = self._user_repo.get_by_auth_id(auth_id)
        if row is None:
            raise UpstreamFailure("Failed to create user profile")

        logger.info(f"Created user profile {row.get('id')} for auth_id {auth_id}")
        return row

    def _attach(self, row: Dict[str, Any], auth_id: str) -> Dict[str, Any]:
        linked = row.get("auth_id")
        if linked and linked != auth_id:
            raise Forbidden("Email is already linked to another account")

        attached = self._user_repo.attach_auth_id(row["id"], auth_id)
        if attached:
            logger.info(f"Attached auth_id {auth_id} to existing user {row['id']}")
            return attached

        # Another request attached an identity in between; accept it only if it is ours.
        current = self._user_repo.get_by_auth_id(auth_id)
        if current:
            return current
        raise Forbidden("Email is already linked to another account")


# =============================================================================
# Update
# =============================================================================


class ProfileChanges(BaseModel):
    """
    Editable profile fields. Only fields present in the request are applied;
    an explicit null clears the column.
    """

    model_config = ConfigDict(extra="ignore")

    display_name: Optional[str] = Field(default=None, max_length=80)
    bio: Optional[str] = Field(default=None, max_length=500)
    age: Optional[int] = Field(default=None, ge=0, le=120)
    weight: Optional[float] = Field(default=None, ge=20, le=400, description="kg")
    height: Optional[float] = Field(default=None, ge=50, le=250, description="cm")
    goal: Optional[Goal] = None

    @field_validator("display_name", "bio", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("age", "weight", "height", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        """Empty form inputs clear the value."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("goal", mode="before")
    @classmethod
    def goal_not_null(cls, v):
        """The goal column is required; it can be changed but not cleared."""
        if v is None or (isinstance(v, str) and not v.strip()):
            raise ValueError("goal cannot be empty")
        return v

    def to_update(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_unset=True)


class UpdateProfileUseCase:
    """Partial profile update."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def execute(self, user_id: Optional[str], changes: ProfileChanges) -> Dict[str, Any]:
        """
        Apply `changes` to the user and return the updated row.

        Raises:
            InvalidArgument: If user_id is missing
            NotFound: If the user does not exist
        """
        if not user_id or not str(user_id).strip():
            raise InvalidArgument("user_id is required")

        fields = changes.to_update()
        if fields:
            row = self._user_repo.update(user_id, fields)
        else:
            row = self._user_repo.get_by_id(user_id)

        if row is None:
            raise NotFound(f"User {user_id} not found")

        if fields:
            logger.info(f"Updated profile {user_id}: {sorted(fields)}")
        return row


# =============================================================================
# Avatar
# =============================================================================


class UploadAvatarUseCase:
    """
    Replace a user's profile picture.

    The caller must present the auth_id of the profile it uploads to. Images
    are stored at a fixed path per identity, so a new upload replaces the
    previous one.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        storage: AvatarStorage,
        max_bytes: int = DEFAULT_AVATAR_MAX_BYTES,
    ) -> None:
        self._user_repo = user_repo
        self._storage = storage
        self._max_bytes = max_bytes

    def execute(
        self,
        user_id: Optional[str],
        auth_id: Optional[str],
        content: Optional[bytes],
        content_type: Optional[str],
    ) -> Dict[str, str]:
        """
        Upload an avatar and store its public URL on the profile.

        Returns:
            {"avatar_url": <public url>}

        Raises:
            InvalidArgument: Missing ids/file, non-image content, or file too large
            NotFound: If the user does not exist
            Forbidden: If auth_id does not own the profile
            UpstreamFailure: If storage or the profile update fails
        """
        if not auth_id or not user_id:
            raise InvalidArgument("auth_id and user_id are required")
        if content is None:
            raise InvalidArgument("avatar file is required")

        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise NotFound(f"User {user_id} not found")
        if user.get("auth_id") != auth_id:
            raise Forbidden("Forbidden (not your profile)")

        mime = content_type or ""
        if not mime.startswith("image/"):
            raise InvalidArgument("Only image files are allowed")
        if not content:
            raise InvalidArgument("avatar file is empty")
        if len(content) > self._max_bytes:
            raise InvalidArgument(f"Max file size is {self._max_bytes // (1024 * 1024)}MB")

        public_url = self._storage.upload(AVATAR_PATH.format(auth_id=auth_id), content, mime)

        updated = self._user_repo.update(user_id, {"avatar_url": public_url})
        if updated is None:
            raise UpstreamFailure("Failed to save avatar URL")

        logger.info(f"Avatar updated for user {user_id}")
        return {"avatar_url": updated["avatar_url"]}
