"""
Image Backend
=============

Capability interface for the image-buffer operations the codec needs.

The encoder and decoder never touch pixels directly; they go through
an ImageBackend. OpenCVBackend is the default implementation.

Operations:
    - crop_columns / crop_rows: region views
    - resize: downsample (area) or upsample (linear) to an exact size
    - hconcat / vconcat: concatenation, zero-width pieces allowed
    - fill: solid-colored buffer
    - nbytes: byte footprint
"""

import logging
from typing import Protocol, Sequence

import cv2
import numpy as np

from foveated_pano.models.size import ImageSize


logger = logging.getLogger(__name__)


class ImageBackend(Protocol):
    """
    Protocol for image-buffer backends.

    Buffers are numpy arrays shaped (H, W) or (H, W, C).
    """

    def crop_columns(self, image: np.ndarray, start: int, stop: int) -> np.ndarray:
        """Return columns [start, stop) of image."""
        ...

    def crop_rows(self, image: np.ndarray, start: int, stop: int) -> np.ndarray:
        """Return rows [start, stop) of image."""
        ...

    def resize(self, image: np.ndarray, size: ImageSize) -> np.ndarray:
        """Resize image to exactly size."""
        ...

    def hconcat(self, images: Sequence[np.ndarray]) -> np.ndarray:
        """Concatenate images left to right."""
        ...

    def vconcat(self, images: Sequence[np.ndarray]) -> np.ndarray:
        """Concatenate images top to bottom."""
        ...

    def fill(self, size: ImageSize, like: np.ndarray, value: int) -> np.ndarray:
        """Create a buffer of size with the dtype/channels of like, filled with value."""
        ...

    def nbytes(self, image: np.ndarray) -> int:
        """Byte footprint of image."""
        ...


class OpenCVBackend:
    """
    numpy/OpenCV implementation of ImageBackend.

    Crops are numpy views. Resizing uses cv2.resize with INTER_AREA when
    shrinking and INTER_LINEAR when enlarging. Concatenation uses numpy
    so zero-width pieces (which cv2.hconcat rejects) are allowed.
    """

    def __init__(
        self,
        downsample_interpolation: int = cv2.INTER_AREA,
        upsample_interpolation: int = cv2.INTER_LINEAR,
    ) -> None:
        self.downsample_interpolation = downsample_interpolation
        self.upsample_interpolation = upsample_interpolation

    def crop_columns(self, image: np.ndarray, start: int, stop: int) -> np.ndarray:
        if not 0 <= start <= stop <= image.shape[1]:
            raise ValueError(f"Column range [{start}, {stop}) outside width {image.shape[1]}")
        return image[:, start:stop]

    def crop_rows(self, image: np.ndarray, start: int, stop: int) -> np.ndarray:
        if not 0 <= start <= stop <= image.shape[0]:
            raise ValueError(f"Row range [{start}, {stop}) outside height {image.shape[0]}")
        return image[start:stop]

    def resize(self, image: np.ndarray, size: ImageSize) -> np.ndarray:
        if size.is_empty:
            raise ValueError(f"Cannot resize to empty size {size}")

        current = ImageSize.from_array(image)
        if size == current:
            return image.copy()

        if size.area < current.area:
            interpolation = self.downsample_interpolation
        else:
            interpolation = self.upsample_interpolation

        # cv2 wants contiguous, writeable input; record buffers are read-only views
        source = np.require(image, requirements=["C_CONTIGUOUS", "WRITEABLE"])
        # cv2.resize drops a singleton channel axis
        resized = cv2.resize(source, size.as_cv(), interpolation=interpolation)
        if image.ndim == 3 and resized.ndim == 2:
            resized = resized[:, :, np.newaxis]
        return resized

    def hconcat(self, images: Sequence[np.ndarray]) -> np.ndarray:
        return np.concatenate(list(images), axis=1)

    def vconcat(self, images: Sequence[np.ndarray]) -> np.ndarray:
        return np.concatenate(list(images), axis=0)

    def fill(self, size: ImageSize, like: np.ndarray, value: int) -> np.ndarray:
        shape = (size.height, size.width) + tuple(like.shape[2:])
        return np.full(shape, value, dtype=like.dtype)

    def nbytes(self, image: np.ndarray) -> int:
        return int(image.nbytes)
