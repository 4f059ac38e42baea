"""
Stage Timing
============

Diagnostic timings for encode/decode stages.

Timings are for observability ONLY. Nothing in the codec reads them
back, so a missing log handler never changes a result.
"""

import logging
import time
from contextlib import contextmanager
from typing import Dict, Iterator


logger = logging.getLogger(__name__)


class StageTimer:
    """
    Collects wall-clock durations of named stages.

    Uses time.perf_counter (monotonic). One timer per encode/decode call;
    timers are not shared between calls.

    Example:
        timer = StageTimer("encode")
        with timer.stage("Cropping"):
            cropped = crop(frame)
        logger.debug(timer.summary())
    """

    def __init__(self, label: str) -> None:
        self.label = label
        self.timings: Dict[str, float] = {}

    @contextmanager
    def stage(self, name: str) -> Iterator[None]:
        """Time the enclosed block and log '<name>: <ms> ms' at DEBUG."""
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000.0
            self.timings[name] = elapsed_ms
            logger.debug(f"{name}: {elapsed_ms:.3f} ms")

    @property
    def total_ms(self) -> float:
        return sum(self.timings.values())

    def summary(self) -> str:
        stages = ", ".join(f"{name}={ms:.2f}ms" for name, ms in self.timings.items())
        return f"{self.label} total={self.total_ms:.2f}ms ({stages})"
