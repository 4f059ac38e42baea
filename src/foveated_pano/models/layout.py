"""
Reconstruction Layout
=====================

How the decoded crop window is placed back into a full-width canvas.

The crop window starts at column left_buffer of the original frame. Two
layouts exist:

    Contained: the window fits before the right edge.
        [ fill (left_pad) | window | fill (right_pad) ]

    Wraps: the window runs past the right edge and continues at column 0.
        The window is split at the seam; the tail goes to the start of
        the canvas, the head to the end.
        [ tail (left_piece) | fill (gap) | head (right_piece) ]

Tie-break:
    window_width + left_buffer == full_width ends exactly at the seam.
    This is Contained with a zero-width right pad.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class ContainedLayout:
    """
    Window lies fully inside [left_buffer, full_width).

    Attributes:
        left_pad: Fill columns before the window (== left_buffer)
        right_pad: Fill columns after the window
    """

    left_pad: int
    right_pad: int


@dataclass(frozen=True, slots=True)
class WrapsLayout:
    """
    Window straddles the 360°/0° seam.

    Attributes:
        right_piece_width: Window columns [0, right_piece_width) that land
            at the right end of the canvas
        left_piece_width: Remaining window columns that land at column 0
        gap_width: Fill columns between the two pieces
    """

    right_piece_width: int
    left_piece_width: int
    gap_width: int


ReconstructionLayout = Union[ContainedLayout, WrapsLayout]


def plan_reconstruction(
    window_width: int,
    left_buffer: int,
    full_width: int,
) -> ReconstructionLayout:
    """
    Choose where the crop window lands in the full canvas.

    Args:
        window_width: Width of the reconstructed crop window
        left_buffer: Column where the window begins in the original frame
        full_width: Width of the original frame

    Returns:
        ContainedLayout or WrapsLayout

    Raises:
        ValueError: If the window cannot fit the canvas
    """
    if not 0 <= left_buffer < full_width:
        raise ValueError(f"left_buffer must be in [0, {full_width}), got {left_buffer}")
    if not 0 < window_width <= full_width:
        raise ValueError(f"window_width must be in (0, {full_width}], got {window_width}")

    if window_width + left_buffer > full_width:
        right_piece_width = full_width - left_buffer
        left_piece_width = window_width - right_piece_width
        return WrapsLayout(
            right_piece_width=right_piece_width,
            left_piece_width=left_piece_width,
            gap_width=full_width - right_piece_width - left_piece_width,
        )

    return ContainedLayout(
        left_pad=left_buffer,
        right_pad=full_width - left_buffer - window_width,
    )
