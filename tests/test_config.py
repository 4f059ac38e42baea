"""
Configuration Tests
===================
"""

import logging

import pytest
from pydantic import ValidationError

from foveated_pano.config import (
    FoveationConfig,
    LoggingConfig,
    Settings,
    load_config,
    setup_logging,
)


class TestFoveationConfig:
    """Tests for foveation policy validation."""

    def test_defaults(self):
        config = FoveationConfig()
        assert config.crop_angle == 120
        assert config.h_focus_angle == 20
        assert config.v_focus_angle == 20
        assert config.blur_factor == 5
        assert config.fill_value == 0

    def test_focus_equal_to_crop_rejected(self):
        with pytest.raises(ValidationError, match="h_focus_angle"):
            FoveationConfig(crop_angle=20, h_focus_angle=20)

    def test_focus_wider_than_crop_rejected(self):
        with pytest.raises(ValidationError):
            FoveationConfig(crop_angle=60, h_focus_angle=90)

    def test_focus_just_inside_crop_accepted(self):
        config = FoveationConfig(crop_angle=20.5, h_focus_angle=20)
        assert config.crop_angle == 20.5

    @pytest.mark.parametrize(
        "overrides",
        [
            {"blur_factor": 0},
            {"crop_angle": 0},
            {"crop_angle": 361},
            {"v_focus_angle": 181},
            {"h_focus_angle": -1},
            {"fill_value": 256},
        ],
    )
    def test_out_of_range_values_rejected(self, overrides):
        with pytest.raises(ValidationError):
            FoveationConfig(**overrides)


class TestLoadConfig:
    """Tests for YAML and environment loading."""

    def test_missing_file_uses_defaults(self, clean_env, tmp_path):
        settings = load_config(str(tmp_path / "missing.yaml"))
        assert settings.foveation == FoveationConfig()
        assert settings.logging.level == "INFO"

    def test_yaml_values(self, clean_env, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "foveation:\n"
            "  crop_angle: 90\n"
            "  blur_factor: 4\n"
            "logging:\n"
            "  level: DEBUG\n"
        )
        settings = load_config(str(path))
        assert settings.foveation.crop_angle == 90
        assert settings.foveation.blur_factor == 4
        assert settings.foveation.h_focus_angle == 20
        assert settings.logging.level == "DEBUG"

    def test_empty_yaml(self, clean_env, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(str(path)) == Settings()

    def test_env_overrides_yaml(self, clean_env, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("foveation:\n  blur_factor: 4\n")
        clean_env.setenv("FOVEA_BLUR_FACTOR", "8")
        clean_env.setenv("FOVEA_CROP_ANGLE", "150")
        clean_env.setenv("FOVEA_LOG_LEVEL", "WARNING")

        settings = load_config(str(path))
        assert settings.foveation.blur_factor == 8
        assert settings.foveation.crop_angle == 150
        assert settings.logging.level == "WARNING"

    def test_invalid_env_rejected(self, clean_env, tmp_path):
        clean_env.setenv("FOVEA_H_FOCUS_ANGLE", "200")
        with pytest.raises(ValidationError):
            load_config(str(tmp_path / "missing.yaml"))


class TestSetupLogging:
    """Tests for logging configuration."""

    def test_setup_logging_accepts_both_formats(self):
        for fmt in ("json", "text"):
            setup_logging(Settings(logging=LoggingConfig(level="debug", format=fmt)))
        assert logging.getLogger("foveated_pano").getEffectiveLevel() <= logging.WARNING
