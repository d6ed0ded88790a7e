"""Example models, each built as a tree of primitives, and a command to render them."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Union

from ghostscad import degmath, output
from ghostscad.base import List, Primitive
from ghostscad.operations import (
    Color,
    LinearExtrusion,
    Offset,
    Render,
    RotationExtrusion,
    Scale,
    difference,
    intersection,
    minkowski,
    union,
)
from ghostscad.output import RenderError, Shape, ShapeFlags
from ghostscad.shapes import Arc, Bezier, Graph, Polyline, Polyline3d, Ring, Sector
from ghostscad.solids import (
    Circle,
    Cube,
    Cylinder,
    Import,
    Polygon,
    Polyhedron,
    Sphere,
    Square,
    Surface,
    Text,
)
from ghostscad.transform import Anchor, align, align_origin, rotation, translation

Vec3 = tuple[float, float, float]


def _empty_triangle() -> Primitive:
    points = [
        (0, -10, 60), (0, 10, 60), (0, 10, 0), (0, -10, 0),
        (60, -10, 60), (60, 10, 60), (10, -10, 50), (10, 10, 50),
        (10, 10, 30), (10, -10, 30), (30, -10, 50), (30, 10, 50),
    ]
    faces = [
        (0, 3, 2), (0, 2, 1), (4, 0, 5), (5, 0, 1), (5, 2, 4), (4, 2, 3),
        (6, 8, 9), (6, 7, 8), (6, 10, 11), (6, 11, 7), (10, 8, 11), (10, 9, 8),
        (3, 0, 9), (9, 0, 6), (10, 6, 0), (0, 4, 10), (3, 9, 10), (3, 10, 4),
        (1, 7, 11), (1, 11, 5), (1, 8, 7), (2, 8, 1), (8, 2, 11), (5, 11, 2),
    ]
    sixth = 1.0 / 6
    return translation(
        (-5, 0, -5),
        Scale((sixth, sixth, sixth), Polyhedron(points, faces)),
    )


def _wave() -> Primitive:
    sv = 0.2173
    return Scale((sv, sv, sv), Surface("wave.dat", convexity=5))


def three_d_shapes() -> Primitive:
    """A row of the basic 3D shapes."""
    return translation(
        (-50, 0, 0),
        Sphere(5, fs=1, fn=0),
        translation((20, 0, 0), Cube((10, 10, 10))),
        translation((40, 0, 0), Import("die.stl").highlight()),
        translation((60, 0, 0), Cylinder(10, 3, r_bottom=5).transparent()),
        translation((80, 0, 0), _empty_triangle()),
        translation((100, 0, 0), _wave()),
    )


def _serpentine() -> Primitive:
    return LinearExtrusion(
        50,
        translation((4.5, 0, 0), Circle(1)),
        fn=96,
        twist=720,
        slices=100,
    )


def _rotated_profile() -> Primitive:
    profile = Polygon([(0, 0), (2, 1), (1, 2), (1, 3), (3, 4), (0, 5)])
    return translation(
        (-20, 0, -25),
        Scale((2, 2, 10), RotationExtrusion(profile, fn=200)),
    )


def _complex_polygon() -> Primitive:
    outlines = [
        [(0, 0), (100, 0), (130, 50), (30, 50)],
        [(20, 20), (40, 20), (30, 30)],
        [(50, 20), (60, 20), (40, 30)],
        [(65, 10), (80, 10), (80, 40), (65, 40)],
        [(98, 10), (115, 40), (85, 40), (85, 10)],
    ]
    points = [pt for outline in outlines for pt in outline]
    paths = [
        [1, 0, 3, 2],
        [4, 5, 6],
        [7, 8, 9],
        [10, 11, 12, 13],
        [14, 15, 16, 17],
    ]
    return translation(
        (20, 0, 0),
        rotation(
            (0, 0, 90),
            LinearExtrusion(
                50,
                Scale(
                    (0.25, 0.25, 1),
                    translation((-75, -25, 0), Polygon(points, paths=paths)),
                ),
            ),
        ),
    )


def _screw() -> Primitive:
    return translation(
        (-40, 0, 0),
        LinearExtrusion(
            50, Square((10, 10)), twist=180, convexity=25, fn=96, slices=250
        ),
    )


def _text() -> Primitive:
    return translation((40, -5, 0), LinearExtrusion(50, Text("A")))


def two_d_shapes_extrusion() -> Primitive:
    """2D shapes turned into solids by linear and rotational extrusion."""
    return List(
        _serpentine(),
        _rotated_profile(),
        _complex_polygon(),
        _screw(),
        _text(),
    )


def _crossed_cylinders() -> tuple[Primitive, Primitive]:
    return Cylinder(4, 1), rotation((90, 0, 0), Cylinder(4, 0.9))


def booleans() -> Primitive:
    """Intersection, union and difference of two crossed cylinders."""
    return List(
        intersection(*_crossed_cylinders()),
        translation((-5, 0, 0), union(*_crossed_cylinders())),
        translation((5, 0, 0), Render(10, difference(*_crossed_cylinders()))),
    )


def _colour_byte(angle: float) -> int:
    return int(255 * (0.5 + degmath.sin(angle) / 2))


def _colour_grid() -> Primitive:
    grid = List()
    for i in range(36):
        for j in range(36):
            height = 11 + 10 * degmath.cos(10 * i) * degmath.sin(10 * j)
            grid.add(
                Color.from_rgba(
                    _colour_byte(10 * i),
                    _colour_byte(10 * j),
                    _colour_byte(10 * (i + j)),
                    255,
                    translation(
                        (float(i), float(j), 0.0),
                        Cube((1, 1, height), center=False),
                    ),
                )
            )
    return translation((-18, -18, 0), grid)


def _offset_tube() -> Primitive:
    base = difference(
        Offset(Square((20, 20)), r=10),
        Offset(Square((20, 20)), r=8),
    )
    extruded = LinearExtrusion(20, twist=90, slices=250).add(base)
    return translation((60, 0, 10), extruded)


def _rounded_box() -> Primitive:
    body = minkowski(Cube((30, 30, 20), center=False), Cylinder(1, 2))
    return translation((-75, -15, 0), body)


def fancy() -> Primitive:
    """A coloured height field, a twisted offset tube and a Minkowski sum."""
    return List(_colour_grid(), _offset_tube(), _rounded_box())


def anchors() -> Primitive:
    """Spheres placed at the ends of two ring sections by aligning anchors."""
    ring1 = Ring(20, 5, start_angle=30, ring_angle=90)
    ring1.build()
    ring2 = Ring(20, 5, start_angle=220, ring_angle=45)
    ring2.build()

    a1 = Anchor()
    sphere21 = translation(
        (32, 41, 53), rotation((32, 443, 12), a1, Sphere(5))
    )
    a2 = Anchor()
    sphere22 = translation(
        (-43, 1, -322), rotation((-443, 2, -74), a2, Sphere(5))
    )

    return List(
        align_origin(ring1.start_anchor).add(Sphere(5)),
        ring1.primitive,
        align_origin(ring1.end_anchor).add(Sphere(5)),
        align(ring2.start_anchor, a1).add(sphere21),
        ring2.primitive,
        align(ring2.end_anchor, a2).add(sphere22),
    )


def bezier_surface(
    ctrl_points: Sequence[Sequence[Sequence[float]]],
) -> Callable[[float, float], Vec3]:
    """A function of (tx, ty) in [0, 1] giving points of a Bezier surface."""
    rows = [[tuple(pt) for pt in row] for row in ctrl_points]

    def surface(tx: float, ty: float) -> Vec3:
        column = [degmath.bezier_curve_3d(tx, row) for row in rows]
        return degmath.bezier_curve_3d(ty, column)

    return surface


_SURFACE_CONTROL_POINTS = [
    [(0, 0, 20), (60, 0, -35), (90, 0, 60), (200, 0, 5)],
    [(0, 50, 30), (100, 60, -25), (120, 50, 120), (200, 50, 5)],
    [(0, 100, 0), (60, 120, 35), (90, 100, 60), (200, 100, 45)],
    [(0, 150, 0), (60, 150, -35), (90, 180, 60), (200, 150, 45)],
]


def bezier_surface_example() -> Primitive:
    """A slab following a Bezier surface."""
    return Graph.from_parametric(bezier_surface(_SURFACE_CONTROL_POINTS), 0.02).build()


def bezier_example() -> Primitive:
    """A rod following a cubic Bezier curve."""
    points = [(0, 0, 0), (40, 60, 0), (-50, 90, 0), (0, 200, 0)]
    return Bezier(points, 2).build()


def graph_example() -> Primitive:
    """A saddle surface z = y^2/4 - x^2/4."""
    return Graph(
        lambda x, y: (y**2) / 4 - (x**2) / 4,
        (-3, 3),
        (-3, 3),
        (0.25, 0.25),
    ).build()


def polyline_example() -> Primitive:
    """A flat polyline with round joints."""
    points = [(1, 2), (-5, -4), (-5, 3), (5, 5)]
    return Polyline(points, 1, round=True).build()


def polyline3d_example() -> Primitive:
    """Eight spiral rods around the Z axis."""
    r = 50.0
    points = [
        (
            r * degmath.cos(-90.0 + a) * degmath.cos(a),
            r * degmath.cos(-90.0 + a) * degmath.sin(a),
            r * degmath.sin(-90.0 + a),
        )
        for a in map(float, range(181))
    ]
    return List(
        *(
            rotation((0, 0, float(i * 45)), Polyline3d(points, 2).build())
            for i in range(8)
        )
    )


def sector_and_arc() -> list[Shape]:
    """A sector, an arc, and both together as the default shape."""
    sector = Sector(20, 45, 135, fn=72).build()
    arc = Arc(25, 45, 290, width=2, fn=72).build()
    return [
        Shape("sector", sector, ShapeFlags.NONE),
        Shape("arc", arc, ShapeFlags.NONE),
        Shape("sector-and-arc", List(sector, arc), ShapeFlags.DEFAULT),
    ]


@dataclass(frozen=True)
class _Example:
    build: Callable[[], Union[Primitive, list[Shape]]]
    fn: int = 0


EXAMPLES: dict[str, _Example] = {
    "3d-shapes": _Example(three_d_shapes, 360),
    "2d-shapes-extrusion": _Example(two_d_shapes_extrusion, 360),
    "booleans": _Example(booleans, 360),
    "fancy": _Example(fancy, 360),
    "anchors": _Example(anchors, 120),
    "bezier-surface": _Example(bezier_surface_example),
    "bezier": _Example(bezier_example),
    "graph": _Example(graph_example),
    "polyline": _Example(polyline_example, 120),
    "polyline3d": _Example(polyline3d_example),
    "sector-and-arc": _Example(sector_and_arc),
}


def _usage() -> str:
    names = ", ".join(EXAMPLES)
    return f"usage: <example> [render options]\nexamples: {names}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the example named by the first argument; the rest are render options."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or args[0] not in EXAMPLES:
        print(_usage(), file=sys.stderr)
        return 2

    example = EXAMPLES[args[0]]
    rest = args[1:]
    output.set_fn(example.fn)
    try:
        result = example.build()
        if isinstance(result, list):
            output.render_multiple(result, rest)
        else:
            output.render_one(result, rest)
    except RenderError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())