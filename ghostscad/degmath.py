"""Trigonometry in degrees and Bezier curve evaluation."""

from __future__ import annotations

import math
from typing import Sequence, Tuple

Vec3 = Tuple[float, float, float]


def deg_to_rad(angle: float) -> float:
    """Convert degrees to radians."""
    return math.radians(angle)


def rad_to_deg(angle: float) -> float:
    """Convert radians to degrees."""
    return math.degrees(angle)


def atan(x: float) -> float:
    """Arc tangent in degrees."""
    return rad_to_deg(math.atan(x))


def atan2(y: float, x: float) -> float:
    """Two-argument arc tangent in degrees."""
    return rad_to_deg(math.atan2(y, x))


def sin(x: float) -> float:
    """Sine of an angle in degrees."""
    return math.sin(deg_to_rad(x))


def cos(x: float) -> float:
    """Cosine of an angle in degrees."""
    return math.cos(deg_to_rad(x))


def bezier_curve_3d(t: float, points: Sequence[Sequence[float]]) -> Vec3:
    """Point at parameter t in [0, 1] on the Bezier curve with the given control points."""
    if t < 0 or t > 1:
        raise ValueError("t must be in the range [0, 1]")
    if not points:
        raise ValueError("at least one control point is required")
    n = len(points) - 1
    result = [0.0, 0.0, 0.0]
    for i, point in enumerate(points):
        if len(point) != 3:
            raise ValueError("control points must have 3 components")
        weight = math.comb(n, i) * (1 - t) ** (n - i) * t**i
        for axis in range(3):
            result[axis] += point[axis] * weight
    return (result[0], result[1], result[2])