"""
Data Models
===========

Value types shared by the encoder and decoder.

Models:
    - ImageSize: Width/height pair with OpenCV dsize conversion
    - OptimizedImage: The compact foveated record
    - ContainedLayout, WrapsLayout: Crop window reinsertion layouts
"""

from foveated_pano.models.size import ImageSize
from foveated_pano.models.record import OptimizedImage
from foveated_pano.models.layout import (
    ContainedLayout,
    ReconstructionLayout,
    WrapsLayout,
    plan_reconstruction,
)

__all__ = [
    "ImageSize",
    "OptimizedImage",
    "ContainedLayout",
    "WrapsLayout",
    "ReconstructionLayout",
    "plan_reconstruction",
]
