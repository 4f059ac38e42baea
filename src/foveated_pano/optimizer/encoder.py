"""
Foveated Encoder
================

Turns a full equirectangular frame and a gaze direction into an
OptimizedImage.

Pipeline:
    1. Crop a crop_angle-wide window centered on the horizontal gaze,
       wrapping past the right edge when the window crosses the seam
    2. Split the window into left | focus band | right
    3. Downsample left and right by blur_factor
    4. Split the focus band into top | focused | bottom around the
       vertical gaze
    5. Downsample top and bottom by blur_factor
    6. Package the focus patch, the four bands and their original sizes

Frame layout is (H, W) or (H, W, C). Horizontal angles span 360° over
the width, vertical angles span 180° over the height.
"""

import logging
from typing import Optional, Tuple

import numpy as np

from foveated_pano.config import FoveationConfig
from foveated_pano.geometry.angles import (
    FoveationError,
    Number,
    crop_columns,
    pixels_per_degree,
    pixels_per_degree_vertical,
)
from foveated_pano.imaging.backend import ImageBackend, OpenCVBackend
from foveated_pano.models.record import OptimizedImage
from foveated_pano.models.size import ImageSize
from foveated_pano.observability.timing import StageTimer


logger = logging.getLogger(__name__)


# Element types cv2.resize accepts
SUPPORTED_DTYPES = (np.uint8, np.uint16, np.int16, np.float32, np.float64)


def _validate_frame(frame: np.ndarray) -> None:
    if not isinstance(frame, np.ndarray):
        raise FoveationError(f"Frame must be a numpy array, got {type(frame).__name__}")
    if frame.ndim not in (2, 3):
        raise FoveationError(f"Frame must be (H, W) or (H, W, C), got shape {frame.shape}")
    if frame.shape[0] == 0 or frame.shape[1] == 0:
        raise FoveationError(f"Frame must have positive width and height, got shape {frame.shape}")
    if frame.dtype.type not in SUPPORTED_DTYPES:
        supported = ", ".join(np.dtype(t).name for t in SUPPORTED_DTYPES)
        raise FoveationError(f"Unsupported frame dtype {frame.dtype}; expected one of {supported}")


def _downsample(
    name: str,
    band: np.ndarray,
    factor: int,
    backend: ImageBackend,
) -> Tuple[np.ndarray, ImageSize]:
    """Shrink a band by factor, returning the result and the band's original size."""
    orig = ImageSize.from_array(band)
    small = orig.scaled_down(factor)
    if small.is_empty:
        raise FoveationError(
            f"{name} band {orig} is too small to downsample by {factor}; "
            f"frame is too small or gaze is too close to the edge"
        )
    return backend.resize(band, small), orig


def crop_window(
    frame: np.ndarray,
    h_angle: Number,
    crop_angle: Number,
    backend: Optional[ImageBackend] = None,
) -> Tuple[np.ndarray, int]:
    """
    Cut the horizontal crop window centered on h_angle.

    Args:
        frame: Full equirectangular frame
        h_angle: Horizontal gaze angle in degrees
        crop_angle: Window field of view in degrees
        backend: Image backend (OpenCVBackend if None)

    Returns:
        (window, left_col) where left_col is the window's first column
        in the original frame
    """
    backend = backend or OpenCVBackend()
    width = frame.shape[1]
    cols = crop_columns(h_angle, width, crop_angle)

    if not cols.wraps:
        window = backend.crop_columns(frame, cols.left_col, cols.right_col)
    else:
        # Window crosses the seam: tail of the frame followed by its head
        window = backend.hconcat([
            backend.crop_columns(frame, cols.left_col, width),
            backend.crop_columns(frame, 0, cols.right_col),
        ])

    return window, cols.left_col


def optimize_image(
    frame: np.ndarray,
    h_angle: Number,
    v_angle: Number,
    config: Optional[FoveationConfig] = None,
    backend: Optional[ImageBackend] = None,
) -> OptimizedImage:
    """
    Encode a panoramic frame around a gaze direction.

    Args:
        frame: Equirectangular frame (H, W) or (H, W, C)
        h_angle: Horizontal gaze angle in degrees (any value, wrapped)
        v_angle: Vertical gaze angle in degrees, 0 at the top row
        config: Foveation policy (defaults if None)
        backend: Image backend (OpenCVBackend if None)

    Returns:
        OptimizedImage record

    Raises:
        FoveationError: If the frame is malformed or the gaze leaves a
            band too small to downsample
    """
    config = config or FoveationConfig()
    backend = backend or OpenCVBackend()
    _validate_frame(frame)

    height, width = frame.shape[:2]
    timer = StageTimer("encode")

    with timer.stage("Cropping"):
        cropped, left_col = crop_window(frame, h_angle, config.crop_angle, backend)

    window_width = cropped.shape[1]
    focus_width = int(config.h_focus_angle * pixels_per_degree(width))
    focus_left_col = window_width // 2 - focus_width // 2
    focus_right_col = window_width // 2 + focus_width // 2

    if not 0 <= focus_left_col < focus_right_col < window_width:
        raise FoveationError(
            f"Focus band [{focus_left_col}, {focus_right_col}) does not fit "
            f"inside crop window of width {window_width}"
        )

    with timer.stage("Splitting (H)"):
        middle = backend.crop_columns(cropped, focus_left_col, focus_right_col)
        left = backend.crop_columns(cropped, 0, focus_left_col)
        right = backend.crop_columns(cropped, focus_right_col, window_width)

    with timer.stage("Blurring (H)"):
        blurred_left, orig_left = _downsample("left", left, config.blur_factor, backend)
        blurred_right, orig_right = _downsample("right", right, config.blur_factor, backend)

    angle_to_height = pixels_per_degree_vertical(height)
    focus_height = int(config.v_focus_angle * angle_to_height)
    focus_middle_row = int(v_angle * angle_to_height)
    focus_top_row = focus_middle_row - focus_height // 2
    focus_bottom_row = focus_middle_row + focus_height // 2

    if not 0 <= focus_top_row < focus_bottom_row <= height:
        raise FoveationError(
            f"Vertical angle {v_angle} puts focus rows [{focus_top_row}, "
            f"{focus_bottom_row}) outside frame height {height}"
        )

    with timer.stage("Splitting (V)"):
        top = backend.crop_rows(middle, 0, focus_top_row)
        focused = backend.crop_rows(middle, focus_top_row, focus_bottom_row)
        bottom = backend.crop_rows(middle, focus_bottom_row, height)

    with timer.stage("Blurring (V)"):
        blurred_top, orig_top = _downsample("top", top, config.blur_factor, backend)
        blurred_bottom, orig_bottom = _downsample("bottom", bottom, config.blur_factor, backend)

    record = OptimizedImage(
        focused=focused,
        blurred_left=blurred_left,
        blurred_right=blurred_right,
        blurred_top=blurred_top,
        blurred_bottom=blurred_bottom,
        orig_h_size=(orig_left, orig_right),
        orig_v_size=(orig_top, orig_bottom),
        full_size=ImageSize(width=width, height=height),
        left_buffer=left_col,
        blur_factor=config.blur_factor,
    )

    logger.debug(timer.summary())
    return record
