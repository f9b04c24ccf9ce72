"""Pytest configuration and shared fixtures."""

from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest
from PIL import Image

from eyes_fluent.capture.scale_provider import ContextBasedScaleProvider
from eyes_fluent.fluent.check_settings import CheckSettings
from eyes_fluent.models.config import SdkConfig
from eyes_fluent.models.geometry import RectangleSize, Region, ScaleMethod


# ============================================================================
# Geometry Fixtures
# ============================================================================


@pytest.fixture
def region_a() -> Region:
    return Region(10, 20, 30, 40)


@pytest.fixture
def region_b() -> Region:
    return Region(100, 200, 50, 60)


@pytest.fixture
def viewport_size() -> RectangleSize:
    return RectangleSize(width=1000, height=800)


@pytest.fixture
def content_size() -> RectangleSize:
    return RectangleSize(width=2000, height=5000)


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def check_settings() -> CheckSettings:
    return CheckSettings()


@pytest.fixture
def sdk_config() -> SdkConfig:
    return SdkConfig(
        app_name="Demo App",
        api_key="secret-key",
        default_timeout_ms=5000,
        force_full_page_screenshot=True,
    )


@pytest.fixture
def temp_config_file(sdk_config: SdkConfig, tmp_path: Path) -> Path:
    config_file = tmp_path / "eyes-config.json"
    sdk_config.save(config_file)
    return config_file


# ============================================================================
# Capture Fixtures
# ============================================================================


@pytest.fixture
def scale_provider(content_size: RectangleSize, viewport_size: RectangleSize) -> ContextBasedScaleProvider:
    """Viewport 1000 wide, content 2000 wide, retina display."""
    return ContextBasedScaleProvider(content_size, viewport_size, ScaleMethod.SPEED, 2.0)


@pytest.fixture
def retina_screenshot() -> Image.Image:
    """A device-pixel capture of a 1000x800 viewport at DPR 2."""
    return Image.new("RGB", (2000, 1600), color=(255, 0, 0))


@pytest.fixture
def mock_page() -> Mock:
    """Playwright page stub reporting a 1000x800 viewport at DPR 2."""
    page = Mock()
    page.viewport_size = {"width": 1000, "height": 800}
    page.evaluate = AsyncMock(return_value={
        "viewportWidth": 1000,
        "viewportHeight": 800,
        "contentWidth": 1000,
        "contentHeight": 3000,
        "devicePixelRatio": 2,
    })
    return page
