"""Pillow helpers for loading and resizing screenshots."""

from __future__ import annotations

import io
import logging
import math
from pathlib import Path
from typing import Union

from PIL import Image

from eyes_fluent.models.geometry import ScaleMethod
from eyes_fluent.utils import argument_guard

logger = logging.getLogger(__name__)


def load_image(source: Union[str, Path, bytes]) -> Image.Image:
    """Open a screenshot from a file path or raw PNG bytes."""
    if isinstance(source, bytes):
        image = Image.open(io.BytesIO(source))
    else:
        image = Image.open(source)
    image.load()
    return image


def scale_image(
    image: Image.Image, scale_ratio: float, scale_method: ScaleMethod = ScaleMethod.SPEED
) -> Image.Image:
    """Resize ``image`` by ``scale_ratio``; a ratio of 1 returns it unchanged."""
    argument_guard.not_none(image, "image")
    argument_guard.greater_than_zero(scale_ratio, "scale_ratio")
    if scale_ratio == 1:
        return image

    width, height = image.size
    new_size = (max(1, math.ceil(width * scale_ratio)), max(1, math.ceil(height * scale_ratio)))
    logger.debug(
        "Scaling image %dx%d -> %dx%d (ratio %.3f, %s)",
        width, height, new_size[0], new_size[1], scale_ratio, scale_method.value,
    )
    return image.resize(new_size, resample=scale_method.resample)
