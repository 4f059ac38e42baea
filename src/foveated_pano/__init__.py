"""
foveated-pano
=============

Foveated compression for 360° equirectangular frames.

Given a panoramic frame and a gaze direction, the encoder keeps a small
patch around the gaze at full resolution, downsamples the surrounding
bands, and drops everything outside a 120° crop window. The decoder
rebuilds a frame of the original size, with the crop window placed back
at its original rotation and the rest filled black.

Components:
    - geometry: Angle normalization and angle-to-pixel mapping
    - models: ImageSize, OptimizedImage record, reconstruction layouts
    - imaging: Image-buffer backend, composition helpers, file I/O
    - optimizer: The encode/decode transforms
    - storage: .npz persistence of records
    - observability: Stage timings

Example:
    from foveated_pano import encode, decode

    record = encode(frame, horizontal_angle=90, vertical_angle=90)
    print(record.compression_ratio)
    restored = decode(record)
"""

__version__ = "0.1.0"

from foveated_pano.config import FoveationConfig
from foveated_pano.geometry.angles import FoveationError, constrain_angle
from foveated_pano.models.record import OptimizedImage
from foveated_pano.models.size import ImageSize
from foveated_pano.optimizer.core import FoveatedOptimizer, decode, encode

__all__ = [
    "__version__",
    "FoveationConfig",
    "FoveationError",
    "FoveatedOptimizer",
    "ImageSize",
    "OptimizedImage",
    "constrain_angle",
    "decode",
    "encode",
]
