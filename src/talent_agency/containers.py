"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from talent_agency.adapters.cloudinary_client import HttpxCloudinaryClient
from talent_agency.adapters.supabase_model_repository import SupabaseModelRepository
from talent_agency.config import Settings
from talent_agency.services.assets import AssetService
from talent_agency.services.auth import SessionGuard
from talent_agency.services.models import ModelService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session_guard: SessionGuard
    asset_service: AssetService
    model_service: ModelService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    model_repository = SupabaseModelRepository(supabase_client)
    cloudinary_client = None
    if resolved_settings.cloudinary_configured:
        cloudinary_client = HttpxCloudinaryClient.create(
            cloud_name=resolved_settings.cloudinary_cloud_name,
            api_key=resolved_settings.cloudinary_api_key,
            api_secret=resolved_settings.cloudinary_api_secret,
            folder=resolved_settings.cloudinary_folder,
        )
    asset_service = AssetService(cloudinary_client)
    model_service = ModelService(
        repository=model_repository,
        asset_service=asset_service,
        require_surname=resolved_settings.require_surname,
    )
    session_guard = SessionGuard(resolved_settings.admin_password)

    async def close_resources() -> None:
        if cloudinary_client is not None:
            await cloudinary_client.close()

    return AppContainer(
        settings=resolved_settings,
        session_guard=session_guard,
        asset_service=asset_service,
        model_service=model_service,
        close_resources=close_resources,
    )
