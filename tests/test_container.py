"""Tests for container wiring."""

from nutrition_coach.containers import build_container
from nutrition_coach.domain.profile import Profile


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.settings is settings
    assert container.coaching_service.cache is container.cache
    goals = container.coaching_service.goals_for("user-1", Profile())
    assert container.cache.get("goals:user-1") == goals
