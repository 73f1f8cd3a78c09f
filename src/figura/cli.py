"""Command line entry point for the gradient demo."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import GradientConfig
from .errors import FiguraError
from .gradient import vertical_gradient
from .png import write

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a vertical color gradient to a PNG file")
    parser.add_argument(
        "config",
        nargs="?",
        type=Path,
        help="Optional YAML configuration (size, colors, gamma, output)",
    )
    parser.add_argument("-o", "--output", type=Path, help="Destination PNG path")
    parser.add_argument("--width", type=int, help="Image width in pixels")
    parser.add_argument("--height", type=int, help="Image height in pixels")
    parser.add_argument("--top", help="Hex color of the first row (e.g. #00ff00)")
    parser.add_argument("--bottom", help="Hex color the gradient fades towards")
    parser.add_argument(
        "--gamma",
        action="store_true",
        default=None,
        help="Gamma-correct every color before encoding",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.config:
            # A relative output in the file lands next to the file.
            config = GradientConfig.load(args.config, base_path=args.config.parent)
        else:
            config = GradientConfig()
        config = config.with_overrides(
            width=args.width,
            height=args.height,
            top=args.top,
            bottom=args.bottom,
            gamma=args.gamma,
            output=str(args.output) if args.output else None,
        )
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    colors = vertical_gradient(
        config.width,
        config.height,
        top=config.top_color(),
        bottom=config.bottom_color(),
        gamma=config.gamma,
    )
    try:
        path = write(config.output_path, colors, config.width, config.height)
    except FiguraError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    logger.info(f"Saved {config.width}x{config.height} gradient to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
