"""
SyncAuth Use Case.

Maps an identity-provider login to the role and display name the frontend
uses. Nothing is persisted; the Users row is created separately by
EnsureProfileUseCase.
"""

from typing import Dict, Optional

from application.exceptions import InvalidArgument

ADMIN_ROLE = "admin"
USER_ROLE = "user"


class SyncAuthUseCase:
    """Derive `{auth_id, email, display_name, role}` for a login."""

    def __init__(self, admin_email: Optional[str] = None) -> None:
        """
        Args:
            admin_email: Address granted the admin role (case-insensitive).
                When unset nobody is admin.
        """
        self._admin_email = (admin_email or "").strip().lower()

    def execute(self, auth_id: Optional[str], email: Optional[str]) -> Dict[str, str]:
        if not auth_id or not email:
            raise InvalidArgument("auth_id and email are required")

        role = ADMIN_ROLE if self._admin_email and email.strip().lower() == self._admin_email else USER_ROLE
        return {
            "auth_id": auth_id,
            "email": email,
            "display_name": email.split("@")[0],
            "role": role,
        }
