"""Projection of 3D vertices onto a canvas and wireframe drawing."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .canvas import Canvas
from .math3d import Mat4, Vec3


def project_vertex(v: Vec3, mvp: Mat4, width: int, height: int) -> Vec3:
    """Map a vertex through mvp into screen space, y pointing down.

    The perspective divide is skipped when w is zero. The spherical fields
    of the result are left at zero.
    """
    m = mvp.m
    x, y, z = v.x, v.y, v.z
    tx = m[0] * x + m[4] * y + m[8] * z + m[12]
    ty = m[1] * x + m[5] * y + m[9] * z + m[13]
    tz = m[2] * x + m[6] * y + m[10] * z + m[14]
    tw = m[3] * x + m[7] * y + m[11] * z + m[15]

    if tw != 0.0:
        tx /= tw
        ty /= tw
        tz /= tw

    return Vec3(
        (tx * 0.5 + 0.5) * width,
        (1.0 - (ty * 0.5 + 0.5)) * height,
        tz,
    )


def clip_to_circular_viewport(canvas: Canvas, x: float, y: float) -> bool:
    """Tell whether (x, y) lies inside the largest circle centred on the canvas."""
    cx = canvas.width / 2.0
    cy = canvas.height / 2.0
    radius = min(cx, cy)
    dx = x - cx
    dy = y - cy
    return dx * dx + dy * dy <= radius * radius


def render_wireframe(
    canvas: Canvas,
    vertices: Sequence[Vec3],
    edges: Iterable[tuple[int, int]],
    mvp: Mat4,
) -> None:
    """Draw each edge whose endpoints project to valid vertices.

    Edges with an out-of-range index are skipped, as are edges with both
    endpoints outside the circular viewport.
    """
    if not vertices:
        return

    projected = [project_vertex(v, mvp, canvas.width, canvas.height) for v in vertices]
    count = len(projected)

    for a, b in edges:
        if not (0 <= a < count and 0 <= b < count):
            continue
        p0 = projected[a]
        p1 = projected[b]
        if clip_to_circular_viewport(canvas, p0.x, p0.y) or clip_to_circular_viewport(
            canvas, p1.x, p1.y
        ):
            canvas.draw_line(p0.x, p0.y, p1.x, p1.y, 1.0)