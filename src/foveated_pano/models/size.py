"""
Image Size
==========

Pixel dimensions of an image buffer.

numpy reports shapes as (rows, cols) while cv2.resize takes its target
as (width, height). ImageSize keeps the two orders from being mixed up.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass(frozen=True, slots=True)
class ImageSize:
    """
    Width and height of an image in pixels.

    Attributes:
        width: Number of columns
        height: Number of rows
    """

    width: int
    height: int

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Image size must be non-negative, got {self.width}x{self.height}")

    @classmethod
    def from_array(cls, image: np.ndarray) -> "ImageSize":
        """Read the size of a (H, W) or (H, W, C) array."""
        return cls(width=int(image.shape[1]), height=int(image.shape[0]))

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    @property
    def area(self) -> int:
        return self.width * self.height

    def as_cv(self) -> Tuple[int, int]:
        """Return (width, height), the dsize order expected by cv2.resize."""
        return (self.width, self.height)

    def scaled_down(self, factor: int) -> "ImageSize":
        """Integer-divide both dimensions by factor."""
        return ImageSize(width=self.width // factor, height=self.height // factor)

    def __repr__(self) -> str:
        return f"ImageSize({self.width}x{self.height})"
