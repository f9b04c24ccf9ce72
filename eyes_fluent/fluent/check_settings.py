"""Fluent check settings: accumulate the parameters of one screenshot comparison."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Union

from eyes_fluent.models.geometry import MatchLevel, Region
from eyes_fluent.models.match_settings import ImageMatchSettings
from eyes_fluent.models.regions import (
    FloatingBounds,
    FloatingRegionsByRectangle,
    RegionsByRectangle,
)
from eyes_fluent.utils import argument_guard

logger = logging.getLogger(__name__)

# Computes the target region on demand, e.g. from an element's bounds.
TargetResolver = Callable[[], Region]

UNSET_TIMEOUT = -1


class CheckSettings:
    """Chainable settings for a single check.

    Every mutator returns the instance so calls can be chained::

        CheckSettings().ignore(Region(0, 0, 100, 20)).layout().timeout(5000)

    The target is either absent (whole window), a literal region, or a
    resolver that is called once, the first time the target is read.
    """

    def __init__(self, target: Union[Region, TargetResolver, None] = None):
        self._target_region: Optional[Region] = None
        self._target_resolver: Optional[TargetResolver] = None
        if isinstance(target, Region):
            self._target_region = target
        elif callable(target):
            self._target_resolver = target
        elif target is not None:
            raise ValueError(f"target must be a Region or a callable returning one, got {target!r}")

        self._match_level: Optional[MatchLevel] = None
        self._ignore_caret: Optional[bool] = None
        self._stitch_content = False
        self._timeout_seconds: Optional[float] = None

        self._ignore_regions: list[RegionsByRectangle] = []
        self._floating_regions: list[FloatingRegionsByRectangle] = []
        self._layout_regions: list[RegionsByRectangle] = []
        self._content_regions: list[RegionsByRectangle] = []
        self._exact_regions: list[RegionsByRectangle] = []
        self._strict_regions: list[RegionsByRectangle] = []

    # -- mutators ---------------------------------------------------------

    def _append_regions(self, bucket: list, regions: tuple, kind: str) -> "CheckSettings":
        for region in regions:
            if isinstance(region, Region):
                bucket.append(RegionsByRectangle(region))
            else:
                logger.debug("Skipping non-rectangle %s region: %r", kind, region)
        return self

    def ignore(self, *regions: Region) -> "CheckSettings":
        """Add regions to ignore when validating the screenshot."""
        return self._append_regions(self._ignore_regions, regions, "ignore")

    def fully(self, stitch: bool = True) -> "CheckSettings":
        """Capture the entire element or region, even if it's outside the view."""
        self._stitch_content = stitch
        return self

    def floating(self, max_offset: int, *regions: Region) -> "CheckSettings":
        """Add floating regions that may move up to ``max_offset`` in any direction."""
        for region in regions:
            self.add_floating_region(region, max_offset, max_offset, max_offset, max_offset)
        return self

    def add_floating_region(
        self,
        region: Region,
        max_up_offset: int,
        max_down_offset: int,
        max_left_offset: int,
        max_right_offset: int,
    ) -> "CheckSettings":
        """Add a floating region with independent tolerances per direction."""
        rect = Region.from_ltrb(
            region.left,
            region.top,
            region.left + region.width,
            region.top + region.height,
        )
        bounds = FloatingBounds(
            max_up_offset=max_up_offset,
            max_down_offset=max_down_offset,
            max_left_offset=max_left_offset,
            max_right_offset=max_right_offset,
        )
        self._floating_regions.append(FloatingRegionsByRectangle(rect, bounds))
        return self

    def timeout(self, timeout_ms: float) -> "CheckSettings":
        """Set the timeout for acquiring and comparing screenshots, in milliseconds."""
        argument_guard.greater_than_or_equal_to_zero(timeout_ms, "timeout_ms")
        self._timeout_seconds = timeout_ms / 1000.0
        return self

    def layout(self) -> "CheckSettings":
        return self.match_level(MatchLevel.LAYOUT)

    def exact(self) -> "CheckSettings":
        return self.match_level(MatchLevel.EXACT)

    def strict(self) -> "CheckSettings":
        return self.match_level(MatchLevel.STRICT)

    def content(self) -> "CheckSettings":
        return self.match_level(MatchLevel.CONTENT)

    def match_level(self, level: Union[MatchLevel, str]) -> "CheckSettings":
        self._match_level = MatchLevel(level)
        return self

    def add_layout_region(self, *regions: Region) -> "CheckSettings":
        return self._append_regions(self._layout_regions, regions, "layout")

    def add_exact_region(self, *regions: Region) -> "CheckSettings":
        return self._append_regions(self._exact_regions, regions, "exact")

    def add_content_region(self, *regions: Region) -> "CheckSettings":
        return self._append_regions(self._content_regions, regions, "content")

    def add_strict_region(self, *regions: Region) -> "CheckSettings":
        return self._append_regions(self._strict_regions, regions, "strict")

    def set_ignore_caret(self, ignore_caret: bool) -> "CheckSettings":
        """Detect and ignore a blinking caret in the screenshot."""
        self._ignore_caret = ignore_caret
        return self

    def update_target_region(self, region: Region) -> None:
        self._target_region = region

    def resolve_target(self) -> Optional[Region]:
        """Run the deferred target resolver, if any, and keep its result."""
        if self._target_resolver is not None:
            # Cleared only after a successful call.
            region = self._target_resolver()
            self._target_resolver = None
            logger.debug("Resolved deferred target region: %s", region)
            self.update_target_region(region)
        return self._target_region

    # -- accessors --------------------------------------------------------

    def get_target_region(self) -> Optional[Region]:
        return self.resolve_target()

    def get_match_level(self) -> Optional[MatchLevel]:
        return self._match_level

    def get_ignore_caret(self) -> Optional[bool]:
        return self._ignore_caret

    def get_stitch_content(self) -> bool:
        return self._stitch_content

    def get_timeout(self) -> float:
        """Timeout in seconds, or -1 when not set."""
        if self._timeout_seconds is None:
            return UNSET_TIMEOUT
        return self._timeout_seconds

    def get_ignore_regions(self) -> list[RegionsByRectangle]:
        return list(self._ignore_regions)

    def get_floating_regions(self) -> list[FloatingRegionsByRectangle]:
        return list(self._floating_regions)

    def get_layout_regions(self) -> list[RegionsByRectangle]:
        return list(self._layout_regions)

    def get_content_regions(self) -> list[RegionsByRectangle]:
        return list(self._content_regions)

    def get_exact_regions(self) -> list[RegionsByRectangle]:
        return list(self._exact_regions)

    def get_strict_regions(self) -> list[RegionsByRectangle]:
        return list(self._strict_regions)

    # -- output -----------------------------------------------------------

    def to_match_settings(
        self, default_match_level: MatchLevel = MatchLevel.STRICT
    ) -> ImageMatchSettings:
        """Flatten the accumulated selectors into a match request payload."""

        def flatten(selectors):
            return [r for s in selectors for r in s.get_regions()]

        return ImageMatchSettings(
            match_level=self._match_level or default_match_level,
            ignore_caret=self._ignore_caret,
            ignore=flatten(self._ignore_regions),
            layout=flatten(self._layout_regions),
            strict=flatten(self._strict_regions),
            content=flatten(self._content_regions),
            exact=flatten(self._exact_regions),
            floating=flatten(self._floating_regions),
        )

    def __str__(self) -> str:
        level = self._match_level.value if self._match_level else "default"
        return (
            f"{type(self).__name__} - timeout: {self.get_timeout()}, "
            f"match level: {level}, stitch: {self._stitch_content}"
        )
