"""Region selectors stored by check settings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from eyes_fluent.models.geometry import Region


class FloatingBounds(BaseModel):
    max_up_offset: int = Field(default=0, ge=0)
    max_down_offset: int = Field(default=0, ge=0)
    max_left_offset: int = Field(default=0, ge=0)
    max_right_offset: int = Field(default=0, ge=0)


class FloatingMatchSettings(BaseModel):
    """A floating region as it appears in a match request."""
    model_config = ConfigDict(populate_by_name=True)

    left: int
    top: int
    width: int
    height: int
    max_up_offset: int = Field(default=0, alias="maxUpOffset")
    max_down_offset: int = Field(default=0, alias="maxDownOffset")
    max_left_offset: int = Field(default=0, alias="maxLeftOffset")
    max_right_offset: int = Field(default=0, alias="maxRightOffset")


class RegionsByRectangle:
    """Literal rectangle region selector."""

    def __init__(self, region: Region):
        self.region = region

    def get_regions(self) -> list[Region]:
        return [self.region]

    def __eq__(self, other: object) -> bool:
        return isinstance(other, RegionsByRectangle) and other.region == self.region

    def __repr__(self) -> str:
        return f"RegionsByRectangle({self.region})"


class FloatingRegionsByRectangle:
    """Literal rectangle that may float within the given bounds."""

    def __init__(self, rect: Region, bounds: FloatingBounds):
        self.rect = rect
        self.bounds = bounds

    def get_regions(self) -> list[FloatingMatchSettings]:
        return [
            FloatingMatchSettings(
                left=self.rect.left,
                top=self.rect.top,
                width=self.rect.width,
                height=self.rect.height,
                max_up_offset=self.bounds.max_up_offset,
                max_down_offset=self.bounds.max_down_offset,
                max_left_offset=self.bounds.max_left_offset,
                max_right_offset=self.bounds.max_right_offset,
            )
        ]

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, FloatingRegionsByRectangle)
            and other.rect == self.rect
            and other.bounds == self.bounds
        )

    def __repr__(self) -> str:
        return f"FloatingRegionsByRectangle({self.rect}, {self.bounds})"
