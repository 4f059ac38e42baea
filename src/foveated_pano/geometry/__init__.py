"""
Geometry Module
===============

Angle normalization and angle-to-pixel mapping for equirectangular frames.
"""

from foveated_pano.geometry.angles import (
    CropColumns,
    FoveationError,
    angle_to_column,
    constrain_angle,
    crop_columns,
    pixels_per_degree,
    pixels_per_degree_vertical,
)

__all__ = [
    "CropColumns",
    "FoveationError",
    "angle_to_column",
    "constrain_angle",
    "crop_columns",
    "pixels_per_degree",
    "pixels_per_degree_vertical",
]
