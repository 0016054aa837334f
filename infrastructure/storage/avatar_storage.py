"""
Supabase Storage implementation of AvatarStorage.
"""
import logging

from supabase import Client

from application.exceptions import UpstreamFailure

logger = logging.getLogger(__name__)

DEFAULT_BUCKET = "avatars"


class SupabaseAvatarStorage:
    """
    Stores profile pictures in a public Supabase Storage bucket.

    Uploads use upsert so a user's fixed avatar path is overwritten in place;
    cache-control is 0 so the replaced image is served immediately.
    """

    def __init__(self, client: Client, bucket: str = DEFAULT_BUCKET):
        self._client = client
        self._bucket = bucket

    def upload(self, path: str, content: bytes, content_type: str) -> str:
        bucket = self._client.storage.from_(self._bucket)
        try:
            bucket.upload(
                path,
                content,
                file_options={
                    "content-type": content_type,
                    "cache-control": "0",
                    "upsert": "true",
                },
            )
        except Exception as e:
            logger.error(f"Avatar upload to {self._bucket}/{path} failed: {e}")
            raise UpstreamFailure(str(e)) from e

        public_url = bucket.get_public_url(path)
        if not public_url:
            raise UpstreamFailure("Could not get public URL")
        return public_url
