"""
Angle Geometry
==============

Maps viewing angles onto equirectangular pixel coordinates.

Conventions:
    - Horizontal angles cover 360° across the frame width
    - Vertical angles cover 180° across the frame height (0° = top row)
    - Every horizontal angle is normalized into [0, 360) before use, so
      the wraparound math never sees a negative angle
"""

import math
from dataclasses import dataclass
from typing import Union


Number = Union[int, float]


class FoveationError(ValueError):
    """Raised when a frame or gaze direction violates the codec's preconditions."""
    pass


def constrain_angle(x: Number) -> Number:
    """
    Reduce an angle into [0, 360).

    Integers stay integers. For floats, a tiny negative input whose sign
    correction rounds up to exactly 360.0 maps to 0.0.

    Args:
        x: Angle in degrees

    Returns:
        Equivalent angle in [0, 360)
    """
    if isinstance(x, int):
        x %= 360
        if x < 0:
            x += 360
    else:
        x = math.fmod(x, 360.0)
        if x < 0:
            x += 360.0
        if x >= 360.0:
            x = 0.0

    if not 0 <= x < 360:
        raise FoveationError(f"Angle normalization produced {x}, outside [0, 360)")
    return x


def pixels_per_degree(width: int) -> float:
    """Horizontal pixel density of an equirectangular frame."""
    return width / 360.0


def pixels_per_degree_vertical(height: int) -> float:
    """Vertical pixel density; the vertical field spans 180°."""
    return height / 180.0


def angle_to_column(angle: Number, width: int) -> int:
    """
    Convert a normalized horizontal angle to a pixel column.

    Args:
        angle: Angle in [0, 360)
        width: Frame width in pixels

    Returns:
        Column in [0, width)

    Raises:
        FoveationError: If the column falls outside the frame
    """
    col = int(angle * pixels_per_degree(width))
    if not 0 <= col < width:
        raise FoveationError(f"Angle {angle} maps to column {col}, outside [0, {width})")
    return col


@dataclass(frozen=True, slots=True)
class CropColumns:
    """
    Column bounds of the crop window.

    Attributes:
        left_col: First column of the window
        right_col: Column just past the window (after wrapping)
        width: Frame width the columns refer to
    """

    left_col: int
    right_col: int
    width: int

    @property
    def wraps(self) -> bool:
        """True if the window runs past the right edge and resumes at column 0."""
        return self.left_col >= self.right_col

    @property
    def window_width(self) -> int:
        if self.wraps:
            return self.width - self.left_col + self.right_col
        return self.right_col - self.left_col


def crop_columns(h_angle: Number, width: int, crop_angle: Number) -> CropColumns:
    """
    Compute the crop window columns centered on a horizontal gaze angle.

    Args:
        h_angle: Horizontal gaze angle in degrees (any value)
        width: Frame width in pixels
        crop_angle: Horizontal field of view of the window in degrees

    Returns:
        CropColumns with left/right bounds in [0, width)
    """
    h_angle = constrain_angle(h_angle)
    half = crop_angle / 2 if isinstance(crop_angle, float) else crop_angle // 2

    left_angle = constrain_angle(h_angle - half)
    right_angle = constrain_angle(h_angle + half)

    return CropColumns(
        left_col=angle_to_column(left_angle, width),
        right_col=angle_to_column(right_angle, width),
        width=width,
    )
