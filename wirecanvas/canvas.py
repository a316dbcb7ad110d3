"""A grayscale drawing surface with sub-pixel plotting and line drawing."""

from __future__ import annotations

import math
import os


def _clamp(value: float) -> float:
    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value


class Canvas:
    """A grid of brightness values in the range 0.0 to 1.0, indexed pixels[y][x]."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"canvas size must not be negative: {width}x{height}")
        self.width = width
        self.height = height
        self.pixels: list[list[float]] = [[0.0] * width for _ in range(height)]

    def __repr__(self) -> str:
        return f"Canvas(width={self.width}, height={self.height})"

    def _add(self, x: int, y: int, amount: float) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            row = self.pixels[y]
            row[x] = _clamp(row[x] + amount)

    def set_pixel(self, x: float, y: float, intensity: float) -> None:
        """Add intensity at a fractional position, spread over four pixels bilinearly."""
        x0 = math.floor(x)
        y0 = math.floor(y)
        dx = x - x0
        dy = y - y0

        self._add(x0, y0, intensity * (1 - dx) * (1 - dy))
        self._add(x0 + 1, y0, intensity * dx * (1 - dy))
        self._add(x0, y0 + 1, intensity * (1 - dx) * dy)
        self._add(x0 + 1, y0 + 1, intensity * dx * dy)

    def draw_line(
        self, x0: float, y0: float, x1: float, y1: float, thickness: float = 1.0
    ) -> None:
        """Draw a line by stepping along its major axis and stamping a round brush."""
        dx = x1 - x0
        dy = y1 - y0
        length = max(abs(dx), abs(dy))
        if length == 0:
            return

        step_x = dx / length
        step_y = dy / length
        half = thickness / 2.0
        radius = int(half)
        offsets = [
            (ox, oy)
            for oy in range(-radius, radius + 1)
            for ox in range(-radius, radius + 1)
            if math.sqrt(ox * ox + oy * oy) <= half
        ]

        for i in range(int(length) + 1):
            x = x0 + step_x * i
            y = y0 + step_y * i
            for ox, oy in offsets:
                self.set_pixel(x + ox, y + oy, 1.0)

    def to_pgm(self) -> str:
        """Render as plain-text PGM, with drawn pixels dark on a white background."""
        lines = [f"P2\n{self.width} {self.height}\n255\n"]
        for row in self.pixels:
            lines.append("".join(f"{int((1.0 - value) * 255.0)} " for value in row))
            lines.append("\n")
        return "".join(lines)

    def save_pgm(self, path: str | os.PathLike[str]) -> None:
        """Write the canvas to a plain-text PGM file."""
        with open(path, "w", encoding="ascii") as handle:
            handle.write(self.to_pgm())