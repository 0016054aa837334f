"""
User Repository Interface (Port).

Users are one-to-one with an external identity (`auth_id`). Rows are created
lazily on first authenticated access and never hard-deleted by the API.
"""
from typing import Protocol, Optional, Dict, Any


USER_COLUMNS = "id, email, display_name, bio, age, weight, height, goal, auth_id, avatar_url"


class UserRepository(Protocol):
    """Abstract interface for user profile persistence."""

    def get_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        """Get a user by Users.id, or None."""
        ...

    def get_by_auth_id(self, auth_id: str) -> Optional[Dict[str, Any]]:
        """Get a user by identity-provider ID, or None."""
        ...

    def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """Get a user by email, or None."""
        ...

    def attach_auth_id(self, user_id: str, auth_id: str) -> Optional[Dict[str, Any]]:
        """
        Set auth_id on a row that has none yet.

        Returns:
            The updated row, or None if the row already carried an auth_id
        """
        ...

    def insert_if_absent(self, row: Dict[str, Any]) -> None:
        """
        Insert a user unless a row with the same auth_id already exists.

        Implemented as an upsert on auth_id that ignores duplicates, so two
        concurrent first logins converge on one row.
        """
        ...

    def update(self, user_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Partially update a user.

        Returns:
            The updated row, or None if the user does not exist
        """
        ...
