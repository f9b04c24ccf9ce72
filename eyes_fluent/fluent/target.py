"""Entry points for building check settings."""

from __future__ import annotations

from eyes_fluent.fluent.check_settings import CheckSettings, TargetResolver
from eyes_fluent.models.geometry import Region


class Target:
    """Factory for :class:`CheckSettings`.

    ``Target.window().fully().ignore(Region(0, 0, 200, 40))``
    """

    @staticmethod
    def window() -> CheckSettings:
        return CheckSettings()

    @staticmethod
    def region(region: Region) -> CheckSettings:
        return CheckSettings(region)

    @staticmethod
    def deferred(resolver: TargetResolver) -> CheckSettings:
        """Target a region that is only known when the check runs."""
        return CheckSettings(resolver)
