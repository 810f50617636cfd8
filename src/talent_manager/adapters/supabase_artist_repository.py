"""Supabase-backed artist repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from talent_manager.domain.artists import Artist
from talent_manager.domain.errors import RecordInsertError, StoreError
from talent_manager.services.artists import ArtistRepository

ARTIST_LIST_COLUMNS = (
    "*, "
    "user:user_id (id, email, raw_user_meta_data), "
    "manager:manager_id (id, email, raw_user_meta_data)"
)


@dataclass
class SupabaseArtistRepository(ArtistRepository):
    """Supabase implementation for artist persistence."""

    client: Client

    def list_artists(self, manager_id: UUID | None) -> list[Artist]:
        """Return artists ordered by last name, optionally for one manager."""
        query = self.client.table("artists").select(ARTIST_LIST_COLUMNS)
        if manager_id is not None:
            query = query.eq("manager_id", str(manager_id))
        try:
            response = query.order("last_name").execute()
        except Exception as exc:
            raise StoreError(str(exc)) from exc
        return [_parse_artist(row) for row in response.data or []]

    def get_artist(self, artist_id: UUID) -> Artist | None:
        """Return an artist by id, if present."""
        try:
            response = (
                self.client.table("artists")
                .select("*")
                .eq("id", str(artist_id))
                .limit(1)
                .execute()
            )
        except Exception as exc:
            raise StoreError(str(exc)) from exc
        if not response.data:
            return None
        return _parse_artist(response.data[0])

    def create_artist(self, payload: dict[str, object]) -> Artist:
        """Insert an artist row and return it."""
        try:
            response = self.client.table("artists").insert(payload).execute()
        except Exception as exc:
            raise RecordInsertError(str(exc)) from exc
        if not response.data:
            raise RecordInsertError("Failed to create artist")
        return _parse_artist(response.data[0])

    def update_artist(
        self, artist_id: UUID, payload: dict[str, object]
    ) -> Artist | None:
        """Update an artist row and return it, or None when no row matched."""
        try:
            response = (
                self.client.table("artists")
                .update(payload)
                .eq("id", str(artist_id))
                .execute()
            )
        except Exception as exc:
            raise StoreError(str(exc)) from exc
        if not response.data:
            return None
        return _parse_artist(response.data[0])

    def delete_artist(self, artist_id: UUID) -> None:
        """Delete an artist row."""
        try:
            self.client.table("artists").delete().eq("id", str(artist_id)).execute()
        except Exception as exc:
            raise StoreError(str(exc)) from exc


def _parse_artist(row: dict[str, object]) -> Artist:
    """Parse an artist row into a domain model."""
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None
    )
    return Artist(
        id=UUID(str(row["id"])),
        user_id=_optional_uuid(row.get("user_id")),
        first_name=str(row.get("first_name") or ""),
        last_name=str(row.get("last_name") or ""),
        email=row.get("email"),
        phone_number=row.get("phone_number"),
        social=row.get("social"),
        website=row.get("website"),
        bio=row.get("bio"),
        address=row.get("address"),
        profile_picture=str(row.get("profile_picture") or ""),
        manager_id=_optional_uuid(row.get("manager_id")),
        created_at=created_at,
        user=row.get("user"),
        manager=row.get("manager"),
    )


def _optional_uuid(value: object) -> UUID | None:
    if not value:
        return None
    return UUID(str(value))
