"""
Observability Module
====================

Stage timing for diagnostics. Does not influence codec output.
"""

from foveated_pano.observability.timing import StageTimer

__all__ = [
    "StageTimer",
]
