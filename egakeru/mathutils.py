"""Vector helpers, bounding extents, planes, frustums and small numeric utilities."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

Vector = Tuple[float, ...]

INVALID_ID_64 = (1 << 63) - 1
INVALID_ID_64U = (1 << 64) - 1
INVALID_ID_32 = (1 << 32) - 1
INVALID_ID_16 = (1 << 16) - 1
INVALID_ID_8 = (1 << 8) - 1

_UINT64_MASK = (1 << 64) - 1
_C_WHITESPACE = " \t\n\v\f\r"


def add(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Component-wise sum of two vectors."""
    return tuple(x + y for x, y in zip(a, b, strict=True))


def sub(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Component-wise difference ``a - b``."""
    return tuple(x - y for x, y in zip(a, b, strict=True))


def scale(v: Sequence[float], factor: float) -> Vector:
    """Multiply every component of ``v`` by ``factor``."""
    return tuple(x * factor for x in v)


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product of two vectors of equal length."""
    return sum(x * y for x, y in zip(a, b, strict=True))


def cross(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Cross product of two 3-component vectors."""
    ax, ay, az = a
    bx, by, bz = b
    return (ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx)


def normalize(v: Sequence[float]) -> Vector:
    """Return ``v`` scaled to unit length."""
    length = math.sqrt(dot(v, v))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return tuple(x / length for x in v)


@dataclass
class Extent2D:
    """Axis-aligned 2D bounds."""

    min: Vector = (0.0, 0.0)
    max: Vector = (0.0, 0.0)


@dataclass
class Extent3D:
    """Axis-aligned 3D bounds."""

    min: Vector = (0.0, 0.0, 0.0)
    max: Vector = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Plane:
    """A plane given by a unit normal and its distance from the origin."""

    normal: Vector = (0.0, 0.0, 0.0)
    distance: float = 0.0

    @classmethod
    def create(cls, position: Sequence[float], normal: Sequence[float]) -> "Plane":
        """Build the plane through ``position`` facing along ``normal``."""
        norm = normalize(normal)
        return cls(norm, dot(norm, position))

    def signed_distance(self, position: Sequence[float]) -> float:
        return dot(self.normal, position) - self.distance

    def intersects_sphere(self, center: Sequence[float], radius: float) -> bool:
        return self.signed_distance(center) > -radius

    def intersects_aabb(self, center: Sequence[float], half_extents: Sequence[float]) -> bool:
        r = sum(h * abs(n) for h, n in zip(half_extents, self.normal))
        return -r <= self.signed_distance(center)


class Frustum:
    """A view frustum bounded by six planes."""

    def __init__(
        self,
        position: Sequence[float],
        forward: Sequence[float],
        right: Sequence[float],
        up: Sequence[float],
        aspect: float,
        fov: float,
        near: float,
        far: float,
    ) -> None:
        self.position: Vector = tuple(position)
        self.forward: Vector = tuple(forward)
        self.right: Vector = tuple(right)
        self.up: Vector = tuple(up)
        self.aspect = aspect
        self.fov = fov
        self.near = near
        self.far = far

        half_v = far * math.tan(0.5 * fov)
        half_h = half_v * aspect

        forward_far = scale(forward, far)
        half_right = scale(right, half_h)
        half_up = scale(up, half_v)

        self.sides: tuple[Plane, ...] = (
            Plane.create(add(position, scale(forward, near)), forward),
            Plane.create(add(position, forward_far), scale(forward, -1.0)),
            Plane.create(position, cross(up, add(half_right, forward_far))),
            Plane.create(position, cross(sub(forward_far, half_right), up)),
            Plane.create(position, cross(right, sub(forward_far, half_up))),
            Plane.create(position, cross(add(half_up, forward_far), right)),
        )

    def intersects_sphere(self, center: Sequence[float], radius: float) -> bool:
        return all(side.intersects_sphere(center, radius) for side in self.sides)

    def intersects_aabb(self, center: Sequence[float], half_extents: Sequence[float]) -> bool:
        return all(side.intersects_aabb(center, half_extents) for side in self.sides)


def trim(s: str) -> str:
    """Strip surrounding whitespace and remove every tab character."""
    return s.strip(_C_WHITESPACE).replace("\t", "")


def get_aligned(operand: int, granularity: int) -> int:
    """Round ``operand`` up to a multiple of the power-of-two ``granularity``."""
    return ((operand + granularity - 1) & ~(granularity - 1)) & _UINT64_MASK


def convert_range(
    value: float, old_min: float, old_max: float, new_min: float, new_max: float
) -> float:
    """Map ``value`` linearly from one range onto another."""
    return ((value - old_min) * (new_max - new_min)) / (old_max - old_min) + new_min


def rgb_to_u32(r: int, g: int, b: int) -> int:
    """Pack three 8-bit channels into one integer."""
    return ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def u32_to_rgb(value: int) -> tuple[int, int, int]:
    """Unpack an integer made by :func:`rgb_to_u32`."""
    return ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


def rgbu_to_float3(r: int, g: int, b: int) -> Vector:
    """Convert 0-255 channels to 0.0-1.0 floats."""
    return (r / 255.0, g / 255.0, b / 255.0)