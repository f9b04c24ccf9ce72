"""Match settings payload built from a populated CheckSettings."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from eyes_fluent.models.geometry import MatchLevel, Region
from eyes_fluent.models.regions import FloatingMatchSettings


class ImageMatchSettings(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    match_level: MatchLevel = Field(default=MatchLevel.STRICT, alias="matchLevel")
    ignore_caret: Optional[bool] = Field(default=None, alias="ignoreCaret")
    ignore: list[Region] = Field(default_factory=list)
    layout: list[Region] = Field(default_factory=list)
    strict: list[Region] = Field(default_factory=list)
    content: list[Region] = Field(default_factory=list)
    exact: list[Region] = Field(default_factory=list)
    floating: list[FloatingMatchSettings] = Field(default_factory=list)
