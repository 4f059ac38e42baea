"""
Foveated Decoder
================

Rebuilds a full-size frame from an OptimizedImage.

Pipeline:
    1. Upsample each band to its recorded original size
    2. Stack top | focused | bottom vertically (middle band)
    3. Join left | middle | right horizontally (crop window)
    4. Reinsert the crop window at left_buffer in a fill-colored canvas,
       splitting it at the seam when it wraps

Sizes come from the record only; angles are never re-derived.
"""

import logging
from typing import Optional

import numpy as np

from foveated_pano.geometry.angles import FoveationError
from foveated_pano.imaging.backend import ImageBackend, OpenCVBackend
from foveated_pano.imaging.compose import hconcat3, vconcat3
from foveated_pano.models.layout import (
    ContainedLayout,
    WrapsLayout,
    plan_reconstruction,
)
from foveated_pano.models.record import OptimizedImage
from foveated_pano.models.size import ImageSize
from foveated_pano.observability.timing import StageTimer


logger = logging.getLogger(__name__)


def reconstruct_window(
    record: OptimizedImage,
    backend: Optional[ImageBackend] = None,
    timer: Optional[StageTimer] = None,
) -> np.ndarray:
    """
    Reassemble the crop window (left | top/focused/bottom | right).

    Returns:
        Crop window with full frame height and record.window_width columns
    """
    backend = backend or OpenCVBackend()
    timer = timer or StageTimer("window")
    orig_left, orig_right = record.orig_h_size
    orig_top, orig_bottom = record.orig_v_size

    with timer.stage("Resizing (H)"):
        left = backend.resize(record.blurred_left, orig_left)
        right = backend.resize(record.blurred_right, orig_right)

    with timer.stage("Resizing (V)"):
        top = backend.resize(record.blurred_top, orig_top)
        bottom = backend.resize(record.blurred_bottom, orig_bottom)

    with timer.stage("Reconstructing"):
        middle = vconcat3(top, record.focused, bottom, backend)
        cropped = hconcat3(left, middle, right, backend)

    return cropped


def extract_image(
    record: OptimizedImage,
    fill_value: int = 0,
    backend: Optional[ImageBackend] = None,
) -> np.ndarray:
    """
    Decode a record into a frame of the original size.

    Columns outside the crop window are filled with fill_value.

    Args:
        record: Record produced by optimize_image
        fill_value: Intensity for the uncropped area (black by default)
        backend: Image backend (OpenCVBackend if None)

    Returns:
        Frame with shape (full_size.height, full_size.width[, C])
    """
    backend = backend or OpenCVBackend()
    timer = StageTimer("decode")

    cropped = reconstruct_window(record, backend, timer)

    full = record.full_size
    num_rows = cropped.shape[0]
    window_width = cropped.shape[1]

    with timer.stage("Full image"):
        layout = plan_reconstruction(window_width, record.left_buffer, full.width)

        if isinstance(layout, WrapsLayout):
            # Window head belongs at the right edge, its tail at column 0
            head = backend.crop_columns(cropped, 0, layout.right_piece_width)
            tail = backend.crop_columns(cropped, layout.right_piece_width, window_width)
            gap = backend.fill(ImageSize(layout.gap_width, num_rows), cropped, fill_value)
            full_image = hconcat3(tail, gap, head, backend)
        elif isinstance(layout, ContainedLayout):
            pad_left = backend.fill(ImageSize(layout.left_pad, num_rows), cropped, fill_value)
            pad_right = backend.fill(ImageSize(layout.right_pad, num_rows), cropped, fill_value)
            full_image = hconcat3(pad_left, cropped, pad_right, backend)
        else:
            raise TypeError(f"Unknown reconstruction layout: {layout!r}")

    restored = ImageSize.from_array(full_image)
    if restored != full:
        raise FoveationError(f"Reconstructed frame is {restored}, expected {full}")

    logger.debug(timer.summary())
    return full_image
