import math

import pytest

from ghostscad.base import List
from ghostscad.operations import ListOp, RotationExtrusion
from ghostscad.solids import Circle, Cube, Polygon, Polyhedron, Sphere
from ghostscad.shapes import (
    Arc,
    Bezier,
    Graph,
    Polyline,
    Polyline3d,
    Ring,
    Sector,
    SmoothedCube,
)
from ghostscad.transform import Transform


def _children(node):
    return list(node.items)


def _dist_to_line(p, a, b):
    ax, ay = a
    bx, by = b
    px, py = p
    return abs((bx - ax) * (ay - py) - (ax - px) * (by - ay)) / math.hypot(bx - ax, by - ay)


def test_sector_structure():
    prim = Sector(20, 45, 135, fn=72).build()
    assert isinstance(prim, ListOp)
    assert prim.name == "difference"
    circle, polygon = _children(prim)
    assert isinstance(circle, Circle)
    assert circle.radius == 20
    assert isinstance(polygon, Polygon)
    assert polygon.points[0] == (0.0, 0.0)
    radii = [math.hypot(x, y) for x, y in polygon.points[1:]]
    assert all(r == pytest.approx(radii[0]) for r in radii)
    assert radii[0] > 20


def test_sector_scad_mentions_circle():
    text = Sector(20, 45, 135, fn=72).build().to_scad()
    assert text.startswith("difference(){\n")
    assert "circle(r=20.000000, $fn=72);\n" in text


def test_sector_rejects_zero_fn():
    with pytest.raises(ValueError):
        Sector(10, 0, 90, fn=0)


def test_sector_stores_primitive():
    sector = Sector(5, 0, 90)
    built = sector.build()
    assert sector.primitive is built


def test_arc_radii():
    arc = Arc(25, 45, 290, width=2, fn=72)
    prim = arc.build()
    assert prim.name == "difference"
    outer, inner = _children(prim)
    outer_circle = _children(outer)[0]
    inner_circle = _children(inner)[0]
    assert outer_circle.radius - inner_circle.radius == pytest.approx(2)
    assert (outer_circle.radius + inner_circle.radius) / 2 == pytest.approx(25)
    assert outer_circle.circular.fn == 72


def test_polyline3d_segments():
    points = [(0, 0, 0), (1, 2, 3), (4, 5, 6), (7, 8, 9)]
    prim = Polyline3d(points, 2, fn=10).build()
    segments = _children(prim)
    assert len(segments) == len(points) - 1
    for seg, (p1, p2) in zip(segments, zip(points, points[1:])):
        assert seg.name == "hull"
        t1, t2 = _children(seg)
        assert t1.steps[0].vector == tuple(float(v) for v in p1)
        assert t2.steps[0].vector == tuple(float(v) for v in p2)
        sphere = _children(t1)[0]
        assert isinstance(sphere, Sphere)
        assert sphere.radius == 1.0
        assert sphere.circular.fn == 10


def test_bezier_endpoints_and_count():
    ctrl = [(0, 0, 0), (40, 60, 0), (-50, 90, 0), (0, 200, 0)]
    prim = Bezier(ctrl, 2, fn=4).build()
    segments = _children(prim)
    assert len(segments) == 4
    first = _children(segments[0])[0].steps[0].vector
    last = _children(segments[-1])[1].steps[0].vector
    assert first == pytest.approx((0.0, 0.0, 0.0))
    assert last == pytest.approx((0.0, 200.0, 0.0))


def test_bezier_segments_connect():
    ctrl = [(0, 0, 0), (1, 1, 0), (2, 0, 0)]
    segments = _children(Bezier(ctrl, 1, fn=8).build())
    for a, b in zip(segments, segments[1:]):
        assert _children(a)[1].steps[0].vector == _children(b)[0].steps[0].vector


def test_polyline_strip_width():
    p1, p2 = (1.0, 2.0), (-5.0, -4.0)
    prim = Polyline([p1, p2], 1).build()
    segments = _children(prim)
    assert len(segments) == 1
    polygon = _children(segments[0])[0]
    assert isinstance(polygon, Polygon)
    assert len(polygon.points) == 4
    for p in polygon.points:
        assert _dist_to_line(p, p1, p2) == pytest.approx(0.5)


def test_polyline_vertical_segment():
    p1, p2 = (3.0, 0.0), (3.0, 4.0)
    polygon = _children(_children(Polyline([p1, p2], 2).build())[0])[0]
    for x, y in polygon.points:
        assert math.isfinite(x) and math.isfinite(y)
        assert abs(x - 3.0) == pytest.approx(1.0)


def test_polyline_round_adds_circles():
    points = [(1, 2), (-5, -4), (-5, 3), (5, 5)]
    prim = Polyline(points, 1, round=True).build()
    segments = _children(prim)
    assert len(segments) == len(points) - 1
    for seg in segments:
        items = _children(seg)
        assert len(items) == 3
        circle = _children(items[1])[0]
        assert isinstance(circle, Circle)
        assert circle.radius == 0.5
        assert circle.circular.fn == 48


def test_graph_closed_mesh():
    graph = Graph(lambda x, y: x + y, (0, 1), (0, 1), (0.5, 0.5), convexity=3)
    prim = graph.build()
    assert isinstance(prim, Polyhedron)
    assert prim.convexity == 3
    # a closed triangulated surface of genus zero has F = 2V - 4
    assert len(prim.faces) == 2 * len(prim.points) - 4
    assert all(0 <= idx < len(prim.points) for face in prim.faces for idx in face)


def test_graph_thickness_offsets():
    graph = Graph(lambda x, y: x * y, (-1, 1), (-1, 1), (0.5, 1), thickness=2)
    prim = graph.build()
    half = len(prim.points) // 2
    for up, down in zip(prim.points[:half], prim.points[half:]):
        assert up[:2] == down[:2]
        assert up[2] - down[2] == pytest.approx(2)
        assert (up[2] + down[2]) / 2 == pytest.approx(up[0] * up[1])


def test_graph_parametric():
    graph = Graph.from_parametric(lambda tx, ty: (2 * tx, 3 * ty, tx - ty), 0.25)
    assert graph.range_x == (0.0, 1.0)
    prim = graph.build()
    half = len(prim.points) // 2
    for up in prim.points[:half]:
        tx, ty = up[0] / 2, up[1] / 3
        assert up[2] - 0.5 == pytest.approx(tx - ty)
    assert len(prim.faces) == 2 * len(prim.points) - 4


def test_graph_without_function():
    graph = Graph(None, (0, 1), (0, 1), (0.5, 0.5))
    with pytest.raises(ValueError):
        graph.build()


def test_graph_zero_resolution():
    with pytest.raises(ValueError):
        Graph(lambda x, y: 0.0, (0, 1), (0, 1), (0, 0.5))


def test_ring_anchors():
    ring = Ring(20, 5, start_angle=30, ring_angle=90)
    prim = ring.build()
    assert isinstance(prim, Transform)
    start = ring.start_anchor.transform()
    end = ring.end_anchor.transform()
    assert len(start.steps) == 4
    assert len(end.steps) == 7
    assert start.steps[-1].vector == (20.0, 0.0, 0.0)
    assert end.steps[-1].vector == (20.0, 0.0, 0.0)
    assert start.steps[0].angle == (0.0, 0.0, 30.0)
    assert end.steps[3].angle == (0.0, 0.0, 90.0)


def test_ring_extrusion():
    ring = Ring(20, 5, ring_angle=45)
    prim = ring.build()
    extrusions = [c for c in _children(prim) if isinstance(c, RotationExtrusion)]
    assert len(extrusions) == 1
    assert extrusions[0].angle == 45.0
    assert "rotate_extrude(angle=45.000000" in prim.to_scad()


def test_smoothed_cube_centered():
    dims = (10.0, 20.0, 30.0)
    prim = SmoothedCube(dims, 2).build()
    shift = prim.steps[0].vector
    for s, d in zip(shift, dims):
        assert s + d / 2 == pytest.approx(2)
    mink = _children(prim)[0]
    assert mink.name == "minkowski"
    cube, sphere = _children(mink)
    assert isinstance(cube, Cube)
    assert cube.center is False
    assert tuple(c + 4 for c in cube.dims) == dims
    assert sphere.radius == 2


def test_smoothed_cube_not_centered():
    prim = SmoothedCube((10, 20, 30), 2, center=False).build()
    assert prim.steps[0].vector == (2.0, 2.0, 2.0)


def test_built_lists_are_lists():
    prim = Polyline3d([(0, 0, 0)], 1).build()
    assert isinstance(prim, List)
    assert len(prim) == 0