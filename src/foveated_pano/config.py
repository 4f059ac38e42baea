"""
Foveated Pano Configuration
===========================

This module handles configuration loading for the foveated codec.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. config.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    FOVEA_CROP_ANGLE     -> foveation.crop_angle
    FOVEA_H_FOCUS_ANGLE  -> foveation.h_focus_angle
    FOVEA_V_FOCUS_ANGLE  -> foveation.v_focus_angle
    FOVEA_BLUR_FACTOR    -> foveation.blur_factor
    FOVEA_FILL_VALUE     -> foveation.fill_value
    FOVEA_LOG_LEVEL      -> logging.level
    FOVEA_LOG_FORMAT     -> logging.format

Example:
    from foveated_pano.config import settings

    print(settings.foveation.crop_angle)
    print(settings.foveation.blur_factor)
"""

import os
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, model_validator


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class FoveationConfig(BaseModel):
    """
    Fixed foveation policy.

    All angles are in degrees. The horizontal field of the panorama
    spans 360°, the vertical field spans 180°.

    Invariant:
        h_focus_angle < crop_angle. A focus band as wide as the crop
        window would leave no room for the left/right bands.
    """

    crop_angle: float = Field(
        default=120.0,
        gt=0,
        le=360,
        description="Horizontal field of view of the crop window",
    )
    h_focus_angle: float = Field(
        default=20.0,
        gt=0,
        description="Horizontal extent of the full-resolution focus patch",
    )
    v_focus_angle: float = Field(
        default=20.0,
        gt=0,
        le=180,
        description="Vertical extent of the full-resolution focus patch",
    )
    blur_factor: int = Field(
        default=5,
        ge=1,
        description="Integer downsample factor applied to peripheral bands",
    )
    fill_value: int = Field(
        default=0,
        ge=0,
        le=255,
        description="Fill intensity for the area outside the crop window",
    )

    @model_validator(mode="after")
    def validate_focus_inside_crop(self) -> "FoveationConfig":
        """Reject a focus band that is not narrower than the crop window."""
        if self.h_focus_angle >= self.crop_angle:
            raise ValueError(
                f"h_focus_angle ({self.h_focus_angle}) must be smaller than "
                f"crop_angle ({self.crop_angle})"
            )
        return self


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="text", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for foveated-pano.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    foveation: FoveationConfig = Field(default_factory=FoveationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to config.yaml. If None, searches common locations.

    Returns:
        Settings: Loaded configuration

    Raises:
        pydantic.ValidationError: If the merged configuration is invalid
    """
    if config_path is None:
        search_paths = [
            Path("config.yaml"),
            Path("config.yml"),
            Path(__file__).parent.parent.parent / "config.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break

    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.debug("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    # Foveation policy
    if env_crop := os.environ.get("FOVEA_CROP_ANGLE"):
        config_data.setdefault("foveation", {})["crop_angle"] = float(env_crop)
    if env_hfocus := os.environ.get("FOVEA_H_FOCUS_ANGLE"):
        config_data.setdefault("foveation", {})["h_focus_angle"] = float(env_hfocus)
    if env_vfocus := os.environ.get("FOVEA_V_FOCUS_ANGLE"):
        config_data.setdefault("foveation", {})["v_focus_angle"] = float(env_vfocus)
    if env_blur := os.environ.get("FOVEA_BLUR_FACTOR"):
        config_data.setdefault("foveation", {})["blur_factor"] = int(env_blur)
    if env_fill := os.environ.get("FOVEA_FILL_VALUE"):
        config_data.setdefault("foveation", {})["fill_value"] = int(env_fill)

    # Logging settings
    if env_log := os.environ.get("FOVEA_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log
    if env_fmt := os.environ.get("FOVEA_LOG_FORMAT"):
        config_data.setdefault("logging", {})["format"] = env_fmt


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


# =============================================================================
# Global Settings Instance
# =============================================================================

# Global settings instance - loaded on import
settings = load_config()
