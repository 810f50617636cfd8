"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import Client, ClientOptions, create_client

from talent_manager.adapters.smtp_mailer import SmtpMailer
from talent_manager.adapters.supabase_artist_repository import (
    SupabaseArtistRepository,
)
from talent_manager.adapters.supabase_booking_repository import (
    SupabaseBookingRepository,
)
from talent_manager.adapters.supabase_identity_provider import (
    SupabaseIdentityProvider,
)
from talent_manager.adapters.supabase_picture_store import SupabasePictureStore
from talent_manager.config import Settings
from talent_manager.services.artists import ArtistService
from talent_manager.services.auth import AuthService
from talent_manager.services.bookings import BookingService
from talent_manager.services.notifications import NotificationService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_service: AuthService
    artist_service: ArtistService
    booking_service: BookingService
    notification_service: NotificationService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )

    def session_client() -> Client:
        return create_client(
            resolved_settings.supabase_url,
            resolved_settings.session_key,
            options=ClientOptions(auto_refresh_token=False, persist_session=False),
        )

    identity_provider = SupabaseIdentityProvider(
        client=supabase_client,
        session_client_factory=session_client,
        lookup_client=session_client(),
    )
    notification_service = NotificationService(
        SmtpMailer.from_settings(resolved_settings)
    )
    artist_service = ArtistService(
        repository=SupabaseArtistRepository(supabase_client),
        identity_provider=identity_provider,
        picture_store=SupabasePictureStore(
            supabase_client, bucket=resolved_settings.profile_picture_bucket
        ),
        notification_service=notification_service,
        compensate_failed_provisioning=(
            resolved_settings.compensate_failed_provisioning
        ),
    )
    booking_service = BookingService(SupabaseBookingRepository(supabase_client))
    auth_service = AuthService(identity_provider)

    async def close_resources() -> None:
        await notification_service.drain()

    return AppContainer(
        settings=resolved_settings,
        auth_service=auth_service,
        artist_service=artist_service,
        booking_service=booking_service,
        notification_service=notification_service,
        close_resources=close_resources,
    )
