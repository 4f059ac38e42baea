"""
Record Storage
==============

Saves and loads OptimizedImage records as numpy .npz archives.

Archive layout:
    focused, blurred_left, blurred_right, blurred_top, blurred_bottom:
        raw pixel buffers (uncompressed)
    meta: int64 vector
        [format_version, full_width, full_height, left_buffer, blur_factor,
         left_w, left_h, right_w, right_h, top_w, top_h, bottom_w, bottom_h]

Loading rebuilds the record through its constructor, so a tampered
archive fails the same invariant checks as a bad encode and is reported
as a RecordFormatError.
"""

import logging
from pathlib import Path
from typing import Union

import numpy as np

from foveated_pano.models.record import OptimizedImage
from foveated_pano.models.size import ImageSize


logger = logging.getLogger(__name__)

FORMAT_VERSION = 2
_META_LENGTH = 13


class RecordFormatError(Exception):
    """Raised when a stored archive cannot be rebuilt into a valid record."""
    pass


def save_record(path: Union[str, Path], record: OptimizedImage) -> None:
    """
    Write a record to an .npz archive.

    Args:
        path: Destination path (numpy appends .npz if missing)
        record: Record to store
    """
    left, right = record.orig_h_size
    top, bottom = record.orig_v_size
    meta = np.array(
        [
            FORMAT_VERSION,
            record.full_size.width, record.full_size.height,
            record.left_buffer, record.blur_factor,
            left.width, left.height, right.width, right.height,
            top.width, top.height, bottom.width, bottom.height,
        ],
        dtype=np.int64,
    )

    np.savez(str(path), meta=meta, **record.buffers())
    logger.info(f"Saved record to {path}: {record.nbytes} bytes of pixel data")


def load_record(path: Union[str, Path]) -> OptimizedImage:
    """
    Read a record written by save_record.

    Raises:
        FileNotFoundError: If the archive does not exist
        RecordFormatError: If the archive is malformed or its buffers
            violate record invariants
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Record file not found: {path}")

    with np.load(str(file_path), allow_pickle=False) as archive:
        missing = [
            key for key in ("meta",) + OptimizedImage.buffer_names()
            if key not in archive.files
        ]
        if missing:
            raise RecordFormatError(f"Record {path} is missing fields: {missing}")

        meta = archive["meta"]
        if meta.shape != (_META_LENGTH,):
            raise RecordFormatError(f"Record {path} has malformed metadata of shape {meta.shape}")
        if int(meta[0]) != FORMAT_VERSION:
            raise RecordFormatError(
                f"Record {path} has format version {int(meta[0])}, expected {FORMAT_VERSION}"
            )

        buffers = {name: archive[name] for name in OptimizedImage.buffer_names()}

    values = [int(v) for v in meta[1:]]
    full_w, full_h, left_buffer, blur_factor = values[0:4]

    try:
        sizes = [ImageSize(values[i], values[i + 1]) for i in range(4, 12, 2)]
        record = OptimizedImage(
            orig_h_size=(sizes[0], sizes[1]),
            orig_v_size=(sizes[2], sizes[3]),
            full_size=ImageSize(full_w, full_h),
            left_buffer=left_buffer,
            blur_factor=blur_factor,
            **buffers,
        )
    except ValueError as e:
        raise RecordFormatError(f"Record {path} is invalid: {e}") from e

    logger.debug(f"Loaded record from {path}: {record!r}")
    return record
