"""
Optimizer Module
================

The foveated encode/decode transforms.

Components:
    - optimize_image / encode: frame + gaze -> OptimizedImage
    - extract_image / decode: OptimizedImage -> full-size frame
    - FoveatedOptimizer: both, bound to one config and backend
"""

from foveated_pano.optimizer.encoder import crop_window, optimize_image
from foveated_pano.optimizer.decoder import extract_image, reconstruct_window
from foveated_pano.optimizer.core import FoveatedOptimizer, decode, encode

__all__ = [
    "FoveatedOptimizer",
    "optimize_image",
    "extract_image",
    "crop_window",
    "reconstruct_window",
    "encode",
    "decode",
]
