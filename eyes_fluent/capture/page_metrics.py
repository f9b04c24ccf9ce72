"""Read the sizes a scale provider needs from a live page."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from PIL import Image
from playwright.async_api import Page

from eyes_fluent.capture import image_utils
from eyes_fluent.capture.scale_provider import ContextBasedScaleProvider, ScaleProvider
from eyes_fluent.models.geometry import RectangleSize, ScaleMethod

logger = logging.getLogger(__name__)

_METRICS_SCRIPT = """() => {
    const doc = document.documentElement;
    const body = document.body || doc;
    return {
        viewportWidth: window.innerWidth,
        viewportHeight: window.innerHeight,
        contentWidth: Math.max(doc.scrollWidth, body.scrollWidth),
        contentHeight: Math.max(doc.scrollHeight, body.scrollHeight),
        devicePixelRatio: window.devicePixelRatio || 1,
    };
}"""


@dataclass
class PageMetrics:
    viewport_size: RectangleSize
    content_size: RectangleSize
    device_pixel_ratio: float


async def read_page_metrics(page: Page) -> PageMetrics:
    """Measure viewport, full content size and device pixel ratio."""
    raw = await page.evaluate(_METRICS_SCRIPT)
    viewport = page.viewport_size
    if viewport:
        viewport_size = RectangleSize(width=viewport["width"], height=viewport["height"])
    else:
        viewport_size = RectangleSize(width=raw["viewportWidth"], height=raw["viewportHeight"])

    metrics = PageMetrics(
        viewport_size=viewport_size,
        content_size=RectangleSize(width=raw["contentWidth"], height=raw["contentHeight"]),
        device_pixel_ratio=float(raw["devicePixelRatio"]),
    )
    logger.debug(
        "Page metrics: viewport %s, content %s, dpr %.2f",
        metrics.viewport_size, metrics.content_size, metrics.device_pixel_ratio,
    )
    return metrics


async def create_scale_provider(
    page: Page, scale_method: ScaleMethod = ScaleMethod.SPEED
) -> ContextBasedScaleProvider:
    metrics = await read_page_metrics(page)
    return ContextBasedScaleProvider(
        metrics.content_size, metrics.viewport_size, scale_method, metrics.device_pixel_ratio
    )


async def capture_scaled_screenshot(page: Page, provider: ScaleProvider) -> Image.Image:
    """Take a viewport screenshot and normalize it with ``provider``."""
    png = await page.screenshot(full_page=False)
    image = image_utils.load_image(png)
    provider.update_scale_ratio(image.width)
    return provider.scale_image(image)
