"""Geometry primitives and enumerations shared by check settings and scaling."""

from __future__ import annotations

from enum import Enum

from PIL import Image
from pydantic import BaseModel, Field


class MatchLevel(str, Enum):
    NONE = "None"
    LAYOUT = "Layout"
    LAYOUT2 = "Layout2"
    CONTENT = "Content"
    STRICT = "Strict"
    EXACT = "Exact"


class ScaleMethod(str, Enum):
    SPEED = "speed"
    QUALITY = "quality"
    ULTRA_QUALITY = "ultra_quality"

    @property
    def resample(self) -> Image.Resampling:
        """Pillow resampling filter used for this method."""
        return {
            ScaleMethod.SPEED: Image.Resampling.BILINEAR,
            ScaleMethod.QUALITY: Image.Resampling.BICUBIC,
            ScaleMethod.ULTRA_QUALITY: Image.Resampling.LANCZOS,
        }[self]


class RectangleSize(BaseModel):
    width: int = Field(ge=0)
    height: int = Field(ge=0)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"

    @classmethod
    def parse(cls, text: str) -> "RectangleSize":
        """Parse a ``WIDTHxHEIGHT`` string such as ``1280x720``."""
        width, sep, height = text.lower().partition("x")
        if not sep:
            raise ValueError(f"Expected WIDTHxHEIGHT, got '{text}'")
        return cls(width=int(width), height=int(height))


class Region(BaseModel):
    left: int = 0
    top: int = 0
    width: int = Field(default=0, ge=0)
    height: int = Field(default=0, ge=0)

    def __init__(self, left: int = 0, top: int = 0, width: int = 0, height: int = 0, **data):
        # Allow Region(left, top, width, height)
        super().__init__(left=left, top=top, width=width, height=height, **data)

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    @property
    def size(self) -> RectangleSize:
        return RectangleSize(width=self.width, height=self.height)

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    @classmethod
    def from_ltrb(cls, left: int, top: int, right: int, bottom: int) -> "Region":
        """Build a region from its edges."""
        if right < left or bottom < top:
            raise ValueError(
                f"Invalid edges: left={left} top={top} right={right} bottom={bottom}"
            )
        return cls(left, top, right - left, bottom - top)

    def __str__(self) -> str:
        return f"({self.left}, {self.top}) {self.width}x{self.height}"
