"""Scale providers that decide how much to shrink a screenshot before comparison.

Drivers return screenshots either in CSS pixels or in device pixels depending
on platform. A context based provider compares the captured width against the
two widths it already knows (viewport and top level content) to tell the two
cases apart.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from PIL import Image

from eyes_fluent.capture import image_utils
from eyes_fluent.models.geometry import RectangleSize, ScaleMethod
from eyes_fluent.utils import argument_guard

logger = logging.getLogger(__name__)

# Allowed deviations for the viewport width and the top level content width.
ALLOWED_VS_DEVIATION = 1
ALLOWED_DCES_DEVIATION = 10


class ScaleProvider(ABC):
    """Supplies the ratio used to normalize captured screenshots."""

    @abstractmethod
    def update_scale_ratio(self, image_to_scale_width: float) -> None:
        ...

    @abstractmethod
    def get_scale_ratio(self) -> float:
        ...

    @abstractmethod
    def scale_image(self, image: Image.Image) -> Image.Image:
        ...


class ContextBasedScaleProvider(ScaleProvider):
    """Determines the scale ratio from the viewport and top level context sizes."""

    def __init__(
        self,
        top_level_context_entire_size: RectangleSize,
        viewport_size: RectangleSize,
        scale_method: ScaleMethod,
        device_pixel_ratio: float,
    ):
        argument_guard.not_none(top_level_context_entire_size, "top_level_context_entire_size")
        argument_guard.not_none(viewport_size, "viewport_size")
        argument_guard.not_none(scale_method, "scale_method")
        argument_guard.greater_than_zero(top_level_context_entire_size.width, "top_level_context_entire_size.width")
        argument_guard.greater_than_zero(top_level_context_entire_size.height, "top_level_context_entire_size.height")
        argument_guard.greater_than_zero(viewport_size.width, "viewport_size.width")
        argument_guard.greater_than_zero(viewport_size.height, "viewport_size.height")
        argument_guard.greater_than_zero(device_pixel_ratio, "device_pixel_ratio")

        self.top_level_context_entire_size = top_level_context_entire_size
        self.viewport_size = viewport_size
        self.scale_method = ScaleMethod(scale_method)
        self.device_pixel_ratio = float(device_pixel_ratio)
        # Unknown until we see the first image.
        self._scale_ratio: Optional[float] = None

    @property
    def is_ratio_known(self) -> bool:
        return self._scale_ratio is not None

    def update_scale_ratio(self, image_to_scale_width: float) -> None:
        """Set the scale ratio based on the width of a captured image."""
        viewport_width = self.viewport_size.width
        dces_width = self.top_level_context_entire_size.width

        # An image as wide as the viewport or the whole content needs no scaling.
        if (
            abs(image_to_scale_width - viewport_width) <= ALLOWED_VS_DEVIATION
            or abs(image_to_scale_width - dces_width) <= ALLOWED_DCES_DEVIATION
        ):
            self._scale_ratio = 1.0
        else:
            self._scale_ratio = 1.0 / self.device_pixel_ratio

        logger.debug(
            "Scale ratio %.3f for image width %s (viewport %d, content %d, dpr %.2f)",
            self._scale_ratio, image_to_scale_width, viewport_width, dces_width,
            self.device_pixel_ratio,
        )

    def get_scale_ratio(self) -> float:
        argument_guard.is_valid_state(self._scale_ratio is not None, "scale_ratio not defined yet")
        return self._scale_ratio

    def scale_image(self, image: Image.Image) -> Image.Image:
        return image_utils.scale_image(image, self.get_scale_ratio(), self.scale_method)


class FixedScaleProvider(ScaleProvider):
    """Always scales by the ratio given at construction."""

    def __init__(self, scale_ratio: float, scale_method: ScaleMethod = ScaleMethod.SPEED):
        argument_guard.greater_than_zero(scale_ratio, "scale_ratio")
        self.scale_ratio = float(scale_ratio)
        self.scale_method = ScaleMethod(scale_method)

    def update_scale_ratio(self, image_to_scale_width: float) -> None:
        pass

    def get_scale_ratio(self) -> float:
        return self.scale_ratio

    def scale_image(self, image: Image.Image) -> Image.Image:
        return image_utils.scale_image(image, self.scale_ratio, self.scale_method)


class NullScaleProvider(FixedScaleProvider):
    """Leaves images untouched."""

    def __init__(self):
        super().__init__(1.0)
