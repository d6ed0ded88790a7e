"""Compound shapes built from primitives: arcs, sectors, curves, graphs and more."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from itertools import pairwise
from typing import Callable, Optional, Sequence, Tuple

from ghostscad import degmath
from ghostscad.base import List, Primitive, _uint16, _vector
from ghostscad.operations import RotationExtrusion, difference, hull, minkowski
from ghostscad.solids import Circle, Cube, Polygon, Polyhedron, Sphere
from ghostscad.transform import Anchor, rotation, translation

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]


@dataclass
class Sector:
    """A pie slice of a circle between two angles in degrees."""

    radius: float
    start_angle: float
    end_angle: float
    fn: int = 24
    primitive: Optional[Primitive] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.fn = _uint16(self.fn, "fn")
        if self.fn == 0:
            raise ValueError("fn must be positive")

    def build(self) -> Primitive:
        """Build the sector and remember it in ``primitive``."""
        r = self.radius / math.cos(math.pi / self.fn)
        step = 360.0 / self.fn
        points: list[Vec2] = [(0.0, 0.0)]
        a = float(self.start_angle)
        while a >= self.end_angle - 360:
            points.append((r * degmath.cos(a), r * degmath.sin(a)))
            a -= step
        points.append(
            (r * degmath.cos(self.end_angle), r * degmath.sin(self.end_angle))
        )
        self.primitive = difference(Circle(self.radius, fn=self.fn), Polygon(points))
        return self.primitive


@dataclass
class Arc:
    """A band of the given width along a circle between two angles in degrees."""

    radius: float
    start_angle: float
    end_angle: float
    width: float = 1.0
    fn: int = 24
    primitive: Optional[Primitive] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.fn = _uint16(self.fn, "fn")
        if self.fn == 0:
            raise ValueError("fn must be positive")

    def build(self) -> Primitive:
        """Build the arc and remember it in ``primitive``."""
        outer = Sector(
            self.radius + 0.5 * self.width, self.start_angle, self.end_angle, fn=self.fn
        )
        inner = Sector(
            self.radius - 0.5 * self.width,
            self.start_angle - 0.1,
            self.end_angle + 0.1,
            fn=self.fn,
        )
        self.primitive = difference(outer.build(), inner.build())
        return self.primitive


@dataclass
class Polyline3d:
    """A chain of round-ended rods through 3D points."""

    points: Sequence[Sequence[float]]
    thickness: float
    fn: int = 24
    primitive: Optional[Primitive] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.points = [_vector(p, 3, "point") for p in self.points]
        self.fn = _uint16(self.fn, "fn")

    def _segment(self, p1: Vec3, p2: Vec3) -> Primitive:
        radius = self.thickness / 2
        return hull(
            translation(p1, Sphere(radius, fn=self.fn)),
            translation(p2, Sphere(radius, fn=self.fn)),
        )

    def build(self) -> Primitive:
        """Build the rods and remember them in ``primitive``."""
        segments = List()
        for p1, p2 in pairwise(self.points):
            segments.add(self._segment(p1, p2))
        self.primitive = segments
        return self.primitive


@dataclass
class Bezier:
    """A rod of the given thickness along a Bezier curve."""

    points: Sequence[Sequence[float]]
    thickness: float
    fn: int = 48
    primitive: Optional[Primitive] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.points = [_vector(p, 3, "point") for p in self.points]
        self.fn = _uint16(self.fn, "fn")

    def build(self) -> Primitive:
        """Build the curve and remember it in ``primitive``."""
        step = 1 / self.fn if self.fn else math.inf
        samples: list[Vec3] = []
        t = 0.0
        while t < 1:
            samples.append(degmath.bezier_curve_3d(t, self.points))
            t += step
        samples.append(degmath.bezier_curve_3d(1, self.points))
        self.primitive = Polyline3d(samples, self.thickness).build()
        return self.primitive


def _slope(dy: float, dx: float) -> float:
    if dx == 0:
        return math.copysign(math.inf, dy) if dy else math.nan
    return dy / dx


def _line(p1: Vec2, p2: Vec2, width: float, round_ends: bool) -> Primitive:
    angle = 90 - degmath.atan(_slope(p2[1] - p1[1], p2[0] - p1[0]))
    offset_x = 0.5 * width * degmath.cos(angle)
    offset_y = 0.5 * width * degmath.sin(angle)

    def shifted(p: Vec2, dx: float, dy: float) -> Vec2:
        return (p[0] + dx, p[1] + dy)

    points = [
        shifted(p1, -offset_x, offset_y),
        shifted(p2, -offset_x, offset_y),
        shifted(p2, offset_x, -offset_y),
        shifted(p1, offset_x, -offset_y),
    ]
    ret = List(Polygon(points))
    if round_ends:
        ret.add(
            translation((p1[0], p1[1], 0.0), Circle(width / 2, fn=48)),
            translation((p2[0], p2[1], 0.0), Circle(width / 2, fn=48)),
        )
    return ret


@dataclass
class Polyline:
    """A chain of flat strips of the given width through 2D points."""

    points: Sequence[Sequence[float]]
    width: float
    round: bool = False
    primitive: Optional[Primitive] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.points = [_vector(p, 2, "point") for p in self.points]

    def build(self) -> Primitive:
        """Build the strips and remember them in ``primitive``."""
        segments = List()
        for p1, p2 in pairwise(self.points):
            segments.add(_line(p1, p2, self.width, self.round))
        self.primitive = segments
        return self.primitive


@dataclass
class Graph:
    """A slab of the given thickness following a surface function."""

    func: Optional[Callable[[float, float], float]]
    range_x: Sequence[float]
    range_y: Sequence[float]
    resolution: Sequence[float]
    thickness: float = 1.0
    convexity: int = 0
    func_t: Optional[Callable[[float, float], Sequence[float]]] = None
    primitive: Optional[Primitive] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.range_x = _vector(self.range_x, 2, "range_x")
        self.range_y = _vector(self.range_y, 2, "range_y")
        self.resolution = _vector(self.resolution, 2, "resolution")
        if 0 in self.resolution:
            raise ValueError("resolution must be non-zero")

    @classmethod
    def from_parametric(
        cls, func: Callable[[float, float], Sequence[float]], resolution: float
    ) -> "Graph":
        """Graph a function of parameters tx and ty, both in [0, 1], returning points."""
        return cls(
            None, (0.0, 1.0), (0.0, 1.0), (resolution, resolution), func_t=func
        )

    def _point(self, x: float, y: float) -> Vec3:
        if self.func is not None:
            return (x, y, float(self.func(x, y)))
        if self.func_t is not None:
            return _vector(self.func_t(x, y), 3, "point")
        raise ValueError("graph has no function")

    def build(self) -> Primitive:
        """Build the polyhedron and remember it in ``primitive``."""
        iters_x = int((self.range_x[1] - self.range_x[0]) / self.resolution[0]) + 1
        iters_y = int((self.range_y[1] - self.range_y[0]) / self.resolution[1]) + 1
        count = iters_x * iters_y

        def up(i: int, j: int) -> float:
            return float(i * iters_y + j)

        def down(i: int, j: int) -> float:
            return up(i, j) + count

        half = 0.5 * self.thickness
        points_up: list[Vec3] = []
        points_down: list[Vec3] = []
        faces: list[Vec3] = []

        for i in range(iters_x):
            for j in range(iters_y):
                x = self.range_x[0] + i * self.resolution[0]
                y = self.range_y[0] + j * self.resolution[1]
                px, py, pz = self._point(x, y)
                points_up.append((px, py, pz + half))
                points_down.append((px, py, pz - half))
                if i > 0 and j > 0:
                    faces += [
                        (up(i - 1, j), up(i, j), up(i, j - 1)),
                        (up(i, j - 1), up(i - 1, j - 1), up(i - 1, j)),
                        (down(i, j - 1), down(i, j), down(i - 1, j)),
                        (down(i - 1, j), down(i - 1, j - 1), down(i, j - 1)),
                    ]

        last = iters_x - 1
        for j in range(1, iters_y):
            faces += [
                (up(0, j), up(0, j - 1), down(0, j)),
                (down(0, j), up(0, j - 1), down(0, j - 1)),
                (up(last, j - 1), up(last, j), down(last, j)),
                (down(last, j), down(last, j - 1), up(last, j - 1)),
            ]

        last = iters_y - 1
        for i in range(1, iters_x):
            faces += [
                (up(i - 1, 0), up(i, 0), down(i - 1, 0)),
                (down(i - 1, 0), up(i, 0), down(i, 0)),
                (up(i - 1, last), up(i, last), down(i, last)),
                (down(i, last), down(i - 1, last), up(i - 1, last)),
            ]

        self.primitive = Polyhedron(
            points_up + points_down, faces, convexity=self.convexity
        )
        return self.primitive


@dataclass
class Ring:
    """A torus section with anchors at its start and end."""

    radius1: float
    radius2: float
    start_angle: float = 0.0
    ring_angle: float = 360.0
    primitive: Optional[Primitive] = field(default=None, init=False)
    start_anchor: Optional[Anchor] = field(default=None, init=False)
    end_anchor: Optional[Anchor] = field(default=None, init=False)

    def build(self) -> Primitive:
        """Build the ring and its anchors and remember them."""
        self.start_anchor = Anchor()
        self.end_anchor = Anchor()
        offset = (self.radius1, 0.0, 0.0)
        self.primitive = rotation(
            (0.0, 0.0, self.start_angle),
            translation(offset, self.start_anchor),
            RotationExtrusion(
                translation(offset, Circle(self.radius2)), angle=self.ring_angle
            ),
            rotation(
                (0.0, 0.0, self.ring_angle),
                translation(offset, self.end_anchor),
            ),
        )
        return self.primitive


@dataclass
class SmoothedCube:
    """A box with edges and corners rounded by the given radius."""

    dims: Sequence[float]
    radius: float
    center: bool = True
    primitive: Optional[Primitive] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.dims = _vector(self.dims, 3, "dims")

    def build(self) -> Primitive:
        """Build the box and remember it in ``primitive``."""
        r = self.radius
        shift = tuple(r - (0.5 * d if self.center else 0.0) for d in self.dims)
        core = tuple(d - 2 * r for d in self.dims)
        self.primitive = translation(
            shift, minkowski(Cube(core, center=False), Sphere(r))
        )
        return self.primitive