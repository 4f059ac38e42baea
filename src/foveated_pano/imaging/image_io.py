"""
Image File I/O
==============

Reads and writes panoramic frames from disk.

Design Rules:
    - This is the ONLY place in the codebase that touches image files
    - Validates shape after decoding
    - Fails fast on unreadable or corrupt files
"""

import logging
from pathlib import Path
from typing import Union

import cv2
import numpy as np


logger = logging.getLogger(__name__)


class ImageReadError(Exception):
    """Raised when an image file cannot be read or decoded."""
    pass


class ImageWriteError(Exception):
    """Raised when an image file cannot be written."""
    pass


def read_image(path: Union[str, Path]) -> np.ndarray:
    """
    Read an image file as a BGR numpy array.

    Args:
        path: Image file path (any format OpenCV can decode)

    Returns:
        Image as np.ndarray (H, W, 3), dtype=uint8

    Raises:
        ImageReadError: If the file is missing or cannot be decoded
    """
    file_path = Path(path)
    if not file_path.exists():
        raise ImageReadError(f"Image file not found: {path}")

    image = cv2.imread(str(file_path), cv2.IMREAD_COLOR)
    if image is None:
        raise ImageReadError(f"Failed to decode image {path}: cv2.imread returned None")

    if image.ndim != 3 or image.shape[2] != 3:
        raise ImageReadError(f"Invalid image shape for {path}: {image.shape}")

    logger.debug(f"Read {path}: {image.shape[1]}x{image.shape[0]}")
    return image


def write_image(path: Union[str, Path], image: np.ndarray) -> None:
    """
    Write a numpy image to disk. The format follows the file extension.

    Raises:
        ImageWriteError: If OpenCV cannot encode or write the file
    """
    try:
        ok = cv2.imwrite(str(path), image)
    except cv2.error as e:
        raise ImageWriteError(f"Failed to write image {path}: {e}") from e

    if not ok:
        raise ImageWriteError(f"Failed to write image {path}: cv2.imwrite returned False")

    logger.debug(f"Wrote {path}: {image.shape[1]}x{image.shape[0]}")
