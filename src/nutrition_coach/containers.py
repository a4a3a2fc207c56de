"""Dependency container wiring for the application."""

from dataclasses import dataclass

from nutrition_coach.config import Settings
from nutrition_coach.services.cache import Cache, InMemoryCache
from nutrition_coach.services.coaching import CoachingService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    cache: Cache
    coaching_service: CoachingService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    cache = InMemoryCache()
    coaching_service = CoachingService(settings=resolved_settings, cache=cache)
    return AppContainer(
        settings=resolved_settings,
        cache=cache,
        coaching_service=coaching_service,
    )
