#!/usr/bin/env python3
"""
Command-line entry point: shrink an image file by seam carving.
"""

import argparse
import logging
import sys

from .carving import resize
from .errors import InvalidTarget, SeamCarvingError
from .io import load_image, save_image
from .visualize import SeamRecorder

logger = logging.getLogger(__name__)


def _prompt_dimension(label: str, maximum: int) -> int:
    try:
        answer = input(f"Enter new {label}: ").strip()
    except EOFError as ex:
        raise InvalidTarget(label, None, maximum) from ex
    try:
        return int(answer)
    except ValueError as ex:
        raise InvalidTarget(label, answer, maximum) from ex


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='seamcarve',
        description="Content-aware image shrinking by seam carving"
    )
    parser.add_argument(
        'input',
        type=str,
        help='Path of the image to resize'
    )
    parser.add_argument(
        '--width',
        type=int,
        help='Target width in pixels (prompted for if omitted)'
    )
    parser.add_argument(
        '--height',
        type=int,
        help='Target height in pixels (prompted for if omitted)'
    )
    parser.add_argument(
        '-o', '--output',
        type=str,
        default='resizeImg.jpeg',
        help='Output image path (default: resizeImg.jpeg)'
    )
    parser.add_argument(
        '--seam-gif',
        type=str,
        help='Also write a GIF showing every removed seam'
    )
    parser.add_argument(
        '--fps',
        type=_positive_int,
        default=5,
        help='Frames per second for --seam-gif (default: 5)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log progress'
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        image = load_image(args.input)
        _, H, W = image.shape

        width = args.width if args.width is not None else _prompt_dimension('width', W)
        height = args.height if args.height is not None else _prompt_dimension('height', H)

        recorder = SeamRecorder() if args.seam_gif else None
        carved = resize(image, width, height, callback=recorder)
        save_image(carved, args.output)

        if recorder is not None and not recorder.frames:
            logger.warning("No seams removed, not writing %s", args.seam_gif)
        elif recorder is not None:
            recorder.save_gif(args.seam_gif, fps=args.fps)
    except SeamCarvingError as ex:
        print(f"Error: {ex}", file=sys.stderr)
        return 1

    print(f"Saved: {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
