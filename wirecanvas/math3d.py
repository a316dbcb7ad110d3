"""Small 3D vector and 4x4 matrix toolkit used by the wireframe renderer."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field

_FLOAT32_MAX = 3.4028234663852886e38
_RSQRT_MAGIC = 0x5F3759DF


def _to_float32(value: float) -> float:
    """Round a Python float to the nearest single-precision value."""
    if math.isfinite(value) and abs(value) > _FLOAT32_MAX:
        value = math.copysign(math.inf, value)
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _fast_inverse_sqrt(number: float) -> float:
    """Approximate 1/sqrt(number) with the bit-level trick and one Newton step."""
    number = _to_float32(number)
    (bits,) = struct.unpack("<I", struct.pack("<f", number))
    bits = (_RSQRT_MAGIC - (bits >> 1)) & 0xFFFFFFFF
    (guess,) = struct.unpack("<f", struct.pack("<I", bits))
    return guess * (1.5 - 0.5 * number * guess * guess)


@dataclass
class Vec3:
    """A point or direction with cached spherical coordinates."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    r: float = 0.0
    theta: float = 0.0
    phi: float = 0.0

    @classmethod
    def from_spherical(cls, r: float, theta: float, phi: float) -> Vec3:
        """Build a vector from radius, polar angle and azimuth."""
        return cls(
            x=r * math.sin(theta) * math.cos(phi),
            y=r * math.sin(theta) * math.sin(phi),
            z=r * math.cos(theta),
            r=r,
            theta=theta,
            phi=phi,
        )

    def update_spherical(self) -> None:
        """Recompute r, theta and phi from the Cartesian coordinates."""
        self.r = math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
        if self.r == 0.0:
            self.theta = 0.0
            self.phi = 0.0
        else:
            self.theta = math.acos(max(-1.0, min(1.0, self.z / self.r)))
            self.phi = math.atan2(self.y, self.x)

    def normalize_fast(self) -> Vec3:
        """Return an approximately unit-length copy using a fast inverse square root."""
        inv_len = _fast_inverse_sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
        result = Vec3(self.x * inv_len, self.y * inv_len, self.z * inv_len)
        result.update_spherical()
        return result

    def slerp(self, other: Vec3, t: float) -> Vec3:
        """Spherically interpolate between the directions of self and other.

        The spherical fields of the result are left at zero.
        """
        a = self.normalize_fast()
        b = other.normalize_fast()

        dot = max(-1.0, min(1.0, a.x * b.x + a.y * b.y + a.z * b.z))
        angle = math.acos(dot) * t

        relative = Vec3(b.x - a.x * dot, b.y - a.y * dot, b.z - a.z * dot).normalize_fast()

        c, s = math.cos(angle), math.sin(angle)
        return Vec3(
            a.x * c + relative.x * s,
            a.y * c + relative.y * s,
            a.z * c + relative.z * s,
        )


def _zeros() -> list[float]:
    return [0.0] * 16


@dataclass(frozen=True)
class Mat4:
    """A 4x4 matrix stored as 16 floats in column-major order."""

    m: tuple[float, ...] = field(default_factory=lambda: tuple(_zeros()))

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.m)
        if len(values) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 values, got {len(values)}")
        object.__setattr__(self, "m", values)

    @classmethod
    def identity(cls) -> Mat4:
        m = _zeros()
        m[0] = m[5] = m[10] = m[15] = 1.0
        return cls(tuple(m))

    @classmethod
    def translate(cls, tx: float, ty: float, tz: float) -> Mat4:
        m = list(cls.identity().m)
        m[12], m[13], m[14] = tx, ty, tz
        return cls(tuple(m))

    @classmethod
    def scale(cls, sx: float, sy: float, sz: float) -> Mat4:
        m = _zeros()
        m[0], m[5], m[10], m[15] = sx, sy, sz, 1.0
        return cls(tuple(m))

    @classmethod
    def rotate_xyz(cls, rx: float, ry: float, rz: float) -> Mat4:
        """Rotation about the x, then y, then z axes (angles in radians)."""
        cx, sx = math.cos(rx), math.sin(rx)
        cy, sy = math.cos(ry), math.sin(ry)
        cz, sz = math.cos(rz), math.sin(rz)

        m = _zeros()
        m[0] = cy * cz
        m[1] = cx * sz + sx * sy * cz
        m[2] = sx * sz - cx * sy * cz
        m[4] = -cy * sz
        m[5] = cx * cz - sx * sy * sz
        m[6] = sx * cz + cx * sy * sz
        m[8] = sy
        m[9] = -sx * cy
        m[10] = cx * cy
        m[15] = 1.0
        return cls(tuple(m))

    @classmethod
    def frustum_asymmetric(
        cls,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near: float,
        far: float,
    ) -> Mat4:
        """Perspective projection for an off-centre viewing frustum."""
        if right == left or top == bottom or far == near:
            raise ValueError("frustum planes must not coincide")

        m = _zeros()
        m[0] = (2 * near) / (right - left)
        m[5] = (2 * near) / (top - bottom)
        m[8] = (right + left) / (right - left)
        m[9] = (top + bottom) / (top - bottom)
        m[10] = -(far + near) / (far - near)
        m[11] = -1.0
        m[14] = -(2 * far * near) / (far - near)
        return cls(tuple(m))

    def transform(self, v: Vec3) -> Vec3:
        """Apply the matrix to a point, dividing by w when it is non-zero."""
        m = self.m
        x, y, z = v.x, v.y, v.z

        w = m[3] * x + m[7] * y + m[11] * z + m[15]
        if w == 0.0:
            w = 1.0

        result = Vec3(
            (m[0] * x + m[4] * y + m[8] * z + m[12]) / w,
            (m[1] * x + m[5] * y + m[9] * z + m[13]) / w,
            (m[2] * x + m[6] * y + m[10] * z + m[14]) / w,
        )
        result.update_spherical()
        return result