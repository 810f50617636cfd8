"""Supabase Storage implementation for profile pictures."""

import logging
from dataclasses import dataclass

from supabase import Client

from talent_manager.domain.errors import ObjectStoreError
from talent_manager.services.artists import PictureStore

logger = logging.getLogger(__name__)


@dataclass
class SupabasePictureStore(PictureStore):
    """Upload profile pictures to a public Supabase bucket."""

    client: Client
    bucket: str = "profile-pictures"

    def upload(self, key: str, content: bytes, content_type: str | None) -> str:
        """Upload a file and return its public URL."""
        bucket = self.client.storage.from_(self.bucket)
        file_options = {"content-type": content_type} if content_type else None
        try:
            bucket.upload(path=key, file=content, file_options=file_options)
            public_url = bucket.get_public_url(key)
        except Exception as exc:
            raise ObjectStoreError(str(exc)) from exc
        logger.info("Uploaded profile picture", extra={"key": key})
        return public_url
