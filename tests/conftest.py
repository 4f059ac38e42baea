"""
Test Configuration
==================

Pytest fixtures and test configuration for foveated-pano.
"""

import numpy as np
import pytest


@pytest.fixture
def column_index_frame():
    """
    720x360 frame whose pixel value is its column index.

    uint16 so every column of the 720-wide frame is distinct.
    2 px per degree horizontally and vertically.
    """
    columns = np.arange(720, dtype=np.uint16)
    return np.tile(columns, (360, 1))


@pytest.fixture
def color_frame():
    """Deterministic random 720x360 BGR frame."""
    rng = np.random.default_rng(seed=42)
    return rng.integers(1, 256, size=(360, 720, 3), dtype=np.uint8)


@pytest.fixture
def two_tone_frame():
    """3600x1800 BGR frame: gray 100 on the left half, gray 200 on the right."""
    frame = np.full((1800, 3600, 3), 100, dtype=np.uint8)
    frame[:, 1800:] = 200
    return frame


@pytest.fixture
def clean_env(monkeypatch):
    """Remove FOVEA_* overrides from the environment."""
    for key in (
        "FOVEA_CROP_ANGLE",
        "FOVEA_H_FOCUS_ANGLE",
        "FOVEA_V_FOCUS_ANGLE",
        "FOVEA_BLUR_FACTOR",
        "FOVEA_FILL_VALUE",
        "FOVEA_LOG_LEVEL",
        "FOVEA_LOG_FORMAT",
    ):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def make_record():
    """
    Factory for a hand-built record of a 60x30 frame.

    Focus patch 6x10 (value 200), left/right bands 12x30 (value 100),
    top/bottom bands 6x10 (value 150), all downsampled by 2.
    Crop window width 30. Keyword arguments override fields.
    """
    from foveated_pano.models.record import OptimizedImage
    from foveated_pano.models.size import ImageSize

    def build(**overrides):
        fields = dict(
            focused=np.full((10, 6), 200, dtype=np.uint8),
            blurred_left=np.full((15, 6), 100, dtype=np.uint8),
            blurred_right=np.full((15, 6), 100, dtype=np.uint8),
            blurred_top=np.full((5, 3), 150, dtype=np.uint8),
            blurred_bottom=np.full((5, 3), 150, dtype=np.uint8),
            orig_h_size=(ImageSize(12, 30), ImageSize(12, 30)),
            orig_v_size=(ImageSize(6, 10), ImageSize(6, 10)),
            full_size=ImageSize(60, 30),
            left_buffer=10,
            blur_factor=2,
        )
        fields.update(overrides)
        return OptimizedImage(**fields)

    return build
