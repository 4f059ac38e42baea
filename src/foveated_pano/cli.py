"""
Command-Line Interface
======================

Encode, decode and round-trip panoramic frames from the shell.

Usage:
    foveated-pano encode pano.jpg record.npz --h-angle 90 --v-angle 90
    foveated-pano decode record.npz restored.png
    foveated-pano roundtrip pano.jpg restored.png --h-angle 0 --v-angle 90
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

from foveated_pano.config import Settings, load_config, setup_logging
from foveated_pano.geometry.angles import FoveationError
from foveated_pano.imaging.image_io import (
    ImageReadError,
    ImageWriteError,
    read_image,
    write_image,
)
from foveated_pano.models.record import OptimizedImage
from foveated_pano.optimizer.core import FoveatedOptimizer
from foveated_pano.storage.record_io import RecordFormatError, load_record, save_record


logger = logging.getLogger(__name__)


def _report(record: OptimizedImage) -> None:
    logger.info(
        f"Record: {record.nbytes} bytes vs {record.original_nbytes} bytes original "
        f"({record.compression_ratio:.1%})"
    )
    logger.debug(f"Record metadata: {record.to_dict()}")


def _cmd_encode(args: argparse.Namespace, optimizer: FoveatedOptimizer) -> None:
    frame = read_image(args.input)
    start = time.perf_counter()
    record = optimizer.optimize_image(frame, args.h_angle, args.v_angle)
    logger.info(f"Encoded in {(time.perf_counter() - start) * 1000:.2f} ms")
    _report(record)
    save_record(args.output, record)


def _cmd_decode(args: argparse.Namespace, optimizer: FoveatedOptimizer) -> None:
    record = load_record(args.input)
    start = time.perf_counter()
    image = optimizer.extract_image(record)
    logger.info(f"Decoded in {(time.perf_counter() - start) * 1000:.2f} ms")
    write_image(args.output, image)


def _cmd_roundtrip(args: argparse.Namespace, optimizer: FoveatedOptimizer) -> None:
    frame = read_image(args.input)

    start = time.perf_counter()
    record = optimizer.optimize_image(frame, args.h_angle, args.v_angle)
    encoded = time.perf_counter()
    image = optimizer.extract_image(record)
    decoded = time.perf_counter()

    logger.info(
        f"Encode: {(encoded - start) * 1000:.2f} ms, "
        f"Decode: {(decoded - encoded) * 1000:.2f} ms"
    )
    _report(record)
    write_image(args.output, image)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="foveated-pano",
        description="Foveated compression for 360° equirectangular frames",
    )
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    parser.add_argument("--log-level", default=None, help="Override log level (DEBUG shows stage timings)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_gaze(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("--h-angle", type=float, default=0.0, help="Horizontal gaze angle (degrees)")
        sub.add_argument("--v-angle", type=float, default=90.0, help="Vertical gaze angle (degrees, 0 = top)")

    encode = subparsers.add_parser("encode", help="Encode an image into a record (.npz)")
    encode.add_argument("input", help="Input panorama image")
    encode.add_argument("output", help="Output record path (.npz)")
    add_gaze(encode)
    encode.set_defaults(handler=_cmd_encode)

    decode = subparsers.add_parser("decode", help="Decode a record into an image")
    decode.add_argument("input", help="Input record path (.npz)")
    decode.add_argument("output", help="Output image path")
    decode.set_defaults(handler=_cmd_decode)

    roundtrip = subparsers.add_parser("roundtrip", help="Encode then decode an image")
    roundtrip.add_argument("input", help="Input panorama image")
    roundtrip.add_argument("output", help="Output image path")
    add_gaze(roundtrip)
    roundtrip.set_defaults(handler=_cmd_roundtrip)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Returns:
        Process exit code (0 on success, 1 on error)
    """
    args = build_parser().parse_args(argv)

    settings: Settings = load_config(args.config)
    if args.log_level:
        settings.logging.level = args.log_level
    setup_logging(settings)

    optimizer = FoveatedOptimizer(settings.foveation)

    try:
        args.handler(args, optimizer)
    except (FoveationError, ImageReadError, ImageWriteError, RecordFormatError, FileNotFoundError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
