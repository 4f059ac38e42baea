"""
Optimized Image Record
======================

The compact record produced by the encoder and consumed by the decoder.

A record carries:
    - focused: full-resolution patch at the gaze point
    - blurred_left / blurred_right: downsampled bands flanking the focus
      horizontally (full frame height)
    - blurred_top / blurred_bottom: downsampled bands flanking the focus
      vertically (cut from the horizontal focus band)
    - the pre-downsample size of every band, so the decoder can upsample
      back exactly
    - the size of the uncropped frame and the column where the crop
      window starts (left_buffer)

Design Rules:
    - Immutable after construction
    - Owns read-only copies of all five buffers
    - Validates layout invariants on construction
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from foveated_pano.models.size import ImageSize


def _channels(image: np.ndarray) -> int:
    return 1 if image.ndim == 2 else int(image.shape[2])


def _frozen_copy(image: np.ndarray) -> np.ndarray:
    copy = np.array(image, copy=True)
    copy.setflags(write=False)
    return copy


@dataclass(frozen=True, slots=True, eq=False)
class OptimizedImage:
    """
    Foveated representation of a single panoramic frame.

    Attributes:
        focused: Full-resolution focus patch
        blurred_left: Downsampled band left of the focus
        blurred_right: Downsampled band right of the focus
        blurred_top: Downsampled band above the focus
        blurred_bottom: Downsampled band below the focus
        orig_h_size: Original (left, right) band sizes before downsampling
        orig_v_size: Original (top, bottom) band sizes before downsampling
        full_size: Size of the original uncropped frame
        left_buffer: Column in the original frame where the crop window begins
        blur_factor: Integer factor the bands were downsampled by
    """

    focused: np.ndarray
    blurred_left: np.ndarray
    blurred_right: np.ndarray
    blurred_top: np.ndarray
    blurred_bottom: np.ndarray
    orig_h_size: Tuple[ImageSize, ImageSize]
    orig_v_size: Tuple[ImageSize, ImageSize]
    full_size: ImageSize
    left_buffer: int
    blur_factor: int

    def __post_init__(self) -> None:
        """Copy buffers and validate invariants."""
        for name in self.buffer_names():
            object.__setattr__(self, name, _frozen_copy(getattr(self, name)))

        reference = self.focused
        for name, image in self.buffers().items():
            if image.ndim not in (2, 3) or image.size == 0:
                raise ValueError(f"{name} must be a non-empty 2D or 3D array, got shape {image.shape}")
            if image.dtype != reference.dtype:
                raise ValueError(f"{name} dtype {image.dtype} does not match focused dtype {reference.dtype}")
            if _channels(image) != _channels(reference):
                raise ValueError(f"{name} channel count does not match focused")

        if not 0 <= self.left_buffer < self.full_size.width:
            raise ValueError(
                f"left_buffer must be in [0, {self.full_size.width}), got {self.left_buffer}"
            )

        left, right = self.orig_h_size
        top, bottom = self.orig_v_size
        focus = ImageSize.from_array(self.focused)

        if top.width != focus.width or bottom.width != focus.width:
            raise ValueError("top/bottom bands must be as wide as the focus patch")
        if top.height + focus.height + bottom.height != self.full_size.height:
            raise ValueError(
                f"top + focused + bottom heights ({top.height} + {focus.height} + "
                f"{bottom.height}) must equal full height {self.full_size.height}"
            )
        if left.height != self.full_size.height or right.height != self.full_size.height:
            raise ValueError("left/right bands must span the full frame height")
        if self.window_width > self.full_size.width:
            raise ValueError(
                f"crop window width {self.window_width} exceeds full width {self.full_size.width}"
            )

        if self.blur_factor < 1:
            raise ValueError(f"blur_factor must be at least 1, got {self.blur_factor}")

        for name, orig in zip(self.band_names(), (left, right, top, bottom)):
            blurred = ImageSize.from_array(getattr(self, name))
            expected = orig.scaled_down(self.blur_factor)
            if blurred != expected:
                raise ValueError(
                    f"{name} is {blurred}, expected {expected} "
                    f"(original {orig} downsampled by {self.blur_factor})"
                )

    @staticmethod
    def band_names() -> Tuple[str, ...]:
        return ("blurred_left", "blurred_right", "blurred_top", "blurred_bottom")

    @classmethod
    def buffer_names(cls) -> Tuple[str, ...]:
        return ("focused",) + cls.band_names()

    def buffers(self) -> dict:
        """Map buffer name to array, focus patch first."""
        return {name: getattr(self, name) for name in self.buffer_names()}

    @property
    def window_width(self) -> int:
        """Width of the reconstructed crop window."""
        left, right = self.orig_h_size
        return left.width + self.focused.shape[1] + right.width

    @property
    def nbytes(self) -> int:
        """Byte footprint of the five stored buffers."""
        return sum(image.nbytes for image in self.buffers().values())

    @property
    def original_nbytes(self) -> int:
        """Byte footprint of the uncropped source frame."""
        return self.full_size.area * _channels(self.focused) * self.focused.itemsize

    @property
    def compression_ratio(self) -> float:
        """Stored footprint as a fraction of the original frame footprint."""
        return self.nbytes / self.original_nbytes

    def to_dict(self) -> dict:
        """Export metadata (no pixel data) for logging."""
        left, right = self.orig_h_size
        top, bottom = self.orig_v_size
        return {
            "full_size": [self.full_size.width, self.full_size.height],
            "left_buffer": self.left_buffer,
            "blur_factor": self.blur_factor,
            "focused": list(self.focused.shape),
            "orig_left": [left.width, left.height],
            "orig_right": [right.width, right.height],
            "orig_top": [top.width, top.height],
            "orig_bottom": [bottom.width, bottom.height],
            "nbytes": self.nbytes,
            "compression_ratio": round(self.compression_ratio, 4),
        }

    def __repr__(self) -> str:
        """Compact repr that doesn't dump pixel data."""
        return (
            f"OptimizedImage(full_size={self.full_size!r}, "
            f"left_buffer={self.left_buffer}, "
            f"focused={self.focused.shape}, "
            f"ratio={self.compression_ratio:.3f})"
        )
