"""
Imaging Module
==============

Image-buffer operations used by the codec.

Components:
    - ImageBackend: Protocol for crop/resize/concat/fill
    - OpenCVBackend: numpy + OpenCV implementation
    - hconcat3, vconcat3, image_nbytes: composition helpers
    - read_image, write_image: file I/O
"""

from foveated_pano.imaging.backend import ImageBackend, OpenCVBackend
from foveated_pano.imaging.compose import hconcat3, image_nbytes, vconcat3
from foveated_pano.imaging.image_io import (
    ImageReadError,
    ImageWriteError,
    read_image,
    write_image,
)

__all__ = [
    "ImageBackend",
    "OpenCVBackend",
    "hconcat3",
    "vconcat3",
    "image_nbytes",
    "ImageReadError",
    "ImageWriteError",
    "read_image",
    "write_image",
]
