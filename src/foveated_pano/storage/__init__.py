"""
Storage Module
==============

Persistence of OptimizedImage records.
"""

from foveated_pano.storage.record_io import (
    FORMAT_VERSION,
    RecordFormatError,
    load_record,
    save_record,
)

__all__ = [
    "FORMAT_VERSION",
    "RecordFormatError",
    "load_record",
    "save_record",
]
