"""
Infrastructure Storage Layer.

Supabase Storage implementations of the file storage ports.
"""

from infrastructure.storage.avatar_storage import SupabaseAvatarStorage

__all__ = [
    "SupabaseAvatarStorage",
]
