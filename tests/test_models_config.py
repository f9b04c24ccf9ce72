"""Tests for configuration models."""

import json
import os

import pytest
from pydantic import ValidationError

from eyes_fluent.models.config import SdkConfig
from eyes_fluent.models.geometry import MatchLevel, RectangleSize, ScaleMethod


class TestSdkConfig:
    """Tests for SdkConfig model."""

    def test_default_values(self):
        config = SdkConfig()
        assert config.server_url == "https://eyesapi.applitools.com"
        assert config.api_key is None
        assert config.default_match_level == MatchLevel.STRICT
        assert config.default_timeout_ms is None
        assert config.force_full_page_screenshot is False
        assert config.scale_method == ScaleMethod.SPEED
        assert config.viewport == RectangleSize(width=1280, height=720)

    def test_env_api_key_resolution(self):
        os.environ["TEST_EYES_API_KEY"] = "key_from_env"
        try:
            config = SdkConfig(api_key="env:TEST_EYES_API_KEY")
            assert config.api_key == "key_from_env"
        finally:
            del os.environ["TEST_EYES_API_KEY"]

    def test_env_api_key_missing(self):
        os.environ.pop("MISSING_EYES_KEY", None)
        with pytest.raises(ValidationError, match="MISSING_EYES_KEY"):
            SdkConfig(api_key="env:MISSING_EYES_KEY")

    def test_match_level_from_wire_string(self):
        config = SdkConfig(default_match_level="Layout")
        assert config.default_match_level is MatchLevel.LAYOUT

    def test_negative_timeout_rejected(self):
        with pytest.raises(ValidationError):
            SdkConfig(default_timeout_ms=-5)


class TestLoadSave:

    def test_save_and_load(self, sdk_config, temp_config_file):
        loaded = SdkConfig.load(temp_config_file)
        assert loaded == sdk_config

    def test_saved_file_is_plain_json(self, temp_config_file):
        data = json.loads(temp_config_file.read_text())
        assert data["default_match_level"] == "Strict"
        assert data["scale_method"] == "speed"
        assert data["viewport"] == {"width": 1280, "height": 720}

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            SdkConfig.load(tmp_path / "nope.json")

    def test_save_creates_parent_dirs(self, sdk_config, tmp_path):
        path = tmp_path / "deep" / "nested" / "eyes-config.json"
        sdk_config.save(path)
        assert path.exists()


class TestDefaultCheckSettings:

    def test_seeded_from_config(self, sdk_config):
        settings = sdk_config.default_check_settings()
        assert settings.get_match_level() == MatchLevel.STRICT
        assert settings.get_stitch_content() is True
        assert settings.get_timeout() == 5.0

    def test_unset_timeout_stays_unset(self):
        settings = SdkConfig().default_check_settings()
        assert settings.get_timeout() == -1
        assert settings.get_stitch_content() is False

    def test_each_call_returns_fresh_settings(self, sdk_config):
        first = sdk_config.default_check_settings()
        first.layout()
        assert sdk_config.default_check_settings().get_match_level() == MatchLevel.STRICT
