"""
Foveated Optimizer
==================

Public entry points for the codec.

    encode(frame, horizontal_angle, vertical_angle) -> OptimizedImage
    decode(record) -> frame

Without an explicit FoveationConfig, every entry point uses the policy
loaded into foveated_pano.config.settings (config.yaml plus FOVEA_*
overrides).

FoveatedOptimizer binds a FoveationConfig and an ImageBackend so callers
processing many frames configure them once. It holds no per-frame state
and can be shared between threads.
"""

import logging
from typing import Optional

import numpy as np

from foveated_pano import config as fovea_config
from foveated_pano.config import FoveationConfig
from foveated_pano.geometry.angles import Number
from foveated_pano.imaging.backend import ImageBackend, OpenCVBackend
from foveated_pano.models.record import OptimizedImage
from foveated_pano.optimizer.decoder import extract_image
from foveated_pano.optimizer.encoder import optimize_image


logger = logging.getLogger(__name__)


class FoveatedOptimizer:
    """
    Encoder/decoder pair bound to one foveation policy.

    Attributes:
        config: Foveation policy
        backend: Image-buffer backend

    Example:
        optimizer = FoveatedOptimizer(FoveationConfig(blur_factor=4))
        record = optimizer.optimize_image(frame, h_angle=90, v_angle=90)
        restored = optimizer.extract_image(record)
    """

    def __init__(
        self,
        config: Optional[FoveationConfig] = None,
        backend: Optional[ImageBackend] = None,
    ) -> None:
        self.config = config or fovea_config.settings.foveation
        self.backend = backend or OpenCVBackend()

        logger.info(
            f"FoveatedOptimizer initialized: crop={self.config.crop_angle}°, "
            f"focus={self.config.h_focus_angle}°x{self.config.v_focus_angle}°, "
            f"blur_factor={self.config.blur_factor}"
        )

    def optimize_image(self, frame: np.ndarray, h_angle: Number, v_angle: Number) -> OptimizedImage:
        """Encode frame around (h_angle, v_angle)."""
        return optimize_image(frame, h_angle, v_angle, self.config, self.backend)

    def extract_image(self, record: OptimizedImage) -> np.ndarray:
        """Decode record back to a full-size frame."""
        return extract_image(record, self.config.fill_value, self.backend)


def encode(
    frame: np.ndarray,
    horizontal_angle: Number,
    vertical_angle: Number,
    config: Optional[FoveationConfig] = None,
) -> OptimizedImage:
    """Encode a frame with the given (or configured) foveation policy."""
    config = config or fovea_config.settings.foveation
    return optimize_image(frame, horizontal_angle, vertical_angle, config)


def decode(record: OptimizedImage, config: Optional[FoveationConfig] = None) -> np.ndarray:
    """Decode a record, filling the uncropped area with the policy's fill value."""
    config = config or fovea_config.settings.foveation
    return extract_image(record, config.fill_value)
