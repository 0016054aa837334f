"""
Supabase implementation of UserRepository.

Users rows are keyed by the identity provider's `auth_id`. Creation is an
upsert on auth_id with duplicates ignored, so concurrent first logins for
one identity never produce two rows.
"""
import logging
from typing import Optional, Dict, Any

from supabase import Client

from application.exceptions import UpstreamFailure
from application.ports.user_repository import USER_COLUMNS

logger = logging.getLogger(__name__)

USERS_TABLE = "Users"


class SupabaseUserRepository:
    """
    Supabase implementation of UserRepository protocol.

    Only USER_COLUMNS are ever selected or returned.
    """

    def __init__(self, client: Client):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected, not global)
        """
        self._client = client

    def _get_one(self, column: str, value: Any) -> Optional[Dict[str, Any]]:
        try:
            result = (
                self._client.table(USERS_TABLE)
                .select(USER_COLUMNS)
                .eq(column, value)
                .limit(1)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to get user by {column}: {e}")
            raise UpstreamFailure(str(e)) from e
        return result.data[0] if result.data else None

    def get_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        return self._get_one("id", user_id)

    def get_by_auth_id(self, auth_id: str) -> Optional[Dict[str, Any]]:
        return self._get_one("auth_id", auth_id)

    def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        return self._get_one("email", email)

    def attach_auth_id(self, user_id: str, auth_id: str) -> Optional[Dict[str, Any]]:
        """
        Set auth_id on a row that has none.

        The `is null` guard makes this a compare-and-set: a row that was
        linked concurrently is left untouched and None is returned.
        """
        try:
            result = (
                self._client.table(USERS_TABLE)
                .update({"auth_id": auth_id})
                .eq("id", user_id)
                .is_("auth_id", "null")
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to attach auth_id to user {user_id}: {e}")
            raise UpstreamFailure(str(e)) from e

        if not result.data:
            return None
        return self.get_by_id(user_id)

    def insert_if_absent(self, row: Dict[str, Any]) -> None:
        try:
            (
                self._client.table(USERS_TABLE)
                .upsert(row, on_conflict="auth_id", ignore_duplicates=True)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to create user for auth_id {row.get('auth_id')}: {e}")
            raise UpstreamFailure(str(e)) from e

    def update(self, user_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            result = (
                self._client.table(USERS_TABLE)
                .update(fields)
                .eq("id", user_id)
                .execute()
            )
        except Exception as e:
            logger.error(f"Failed to update user {user_id}: {e}")
            raise UpstreamFailure(str(e)) from e

        if not result.data:
            return None
        return self.get_by_id(user_id)
