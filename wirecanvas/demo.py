"""Draw a clock face of radial lines and save it as a PGM image."""

from __future__ import annotations

import argparse
import math
import sys

from .canvas import Canvas

DEFAULT_SIZE = 200
DEFAULT_OUTPUT = "clock_lines.pgm"


def draw_clock(canvas: Canvas, radius: float = 80.0, thickness: float = 1.0) -> None:
    """Draw lines from the canvas centre outwards every 15 degrees."""
    cx = canvas.width / 2.0
    cy = canvas.height / 2.0
    for angle in range(0, 360, 15):
        radians = math.radians(angle)
        end_x = cx + radius * math.cos(radians)
        end_y = cy + radius * math.sin(radians)
        canvas.draw_line(cx, cy, end_x, end_y, thickness)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Draw a clock face to a PGM file.")
    parser.add_argument(
        "-o", "--output", default=DEFAULT_OUTPUT, help="where to write the image"
    )
    args = parser.parse_args(argv)

    canvas = Canvas(DEFAULT_SIZE, DEFAULT_SIZE)
    draw_clock(canvas)

    try:
        canvas.save_pgm(args.output)
    except OSError as exc:
        print(f"Failed to open file: {exc}", file=sys.stderr)
        return 1

    print(f"Clock face saved to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())