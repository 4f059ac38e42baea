"""
Buffer Composition
==================

Three-way concatenation and size accounting shared by the encoder
and decoder.
"""

from typing import Optional

import numpy as np

from foveated_pano.imaging.backend import ImageBackend, OpenCVBackend


_DEFAULT_BACKEND = OpenCVBackend()


def hconcat3(
    left: np.ndarray,
    middle: np.ndarray,
    right: np.ndarray,
    backend: Optional[ImageBackend] = None,
) -> np.ndarray:
    """
    Join three buffers left to right with no overlap and no gap.

    Raises:
        ValueError: If the row counts differ
    """
    if not left.shape[0] == middle.shape[0] == right.shape[0]:
        raise ValueError(
            f"hconcat3 needs equal heights, got {left.shape[0]}, {middle.shape[0]}, {right.shape[0]}"
        )
    return (backend or _DEFAULT_BACKEND).hconcat([left, middle, right])


def vconcat3(
    top: np.ndarray,
    middle: np.ndarray,
    bottom: np.ndarray,
    backend: Optional[ImageBackend] = None,
) -> np.ndarray:
    """
    Join three buffers top to bottom with no overlap and no gap.

    Raises:
        ValueError: If the column counts differ
    """
    if not top.shape[1] == middle.shape[1] == bottom.shape[1]:
        raise ValueError(
            f"vconcat3 needs equal widths, got {top.shape[1]}, {middle.shape[1]}, {bottom.shape[1]}"
        )
    return (backend or _DEFAULT_BACKEND).vconcat([top, middle, bottom])


def image_nbytes(*images: np.ndarray, backend: Optional[ImageBackend] = None) -> int:
    """Sum the byte footprint of any number of buffers."""
    backend = backend or _DEFAULT_BACKEND
    return sum(backend.nbytes(image) for image in images)
