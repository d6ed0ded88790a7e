import pytest

from ghostscad.base import List
from ghostscad.operations import Scale
from ghostscad.solids import Sphere
from ghostscad.transform import (
    Anchor,
    Transform,
    align,
    align_here,
    align_origin,
    rotation,
    rotation_by_axis,
    translation,
)


def test_translation_render():
    node = translation((1, 2, 3), Sphere(1))
    assert node.to_scad() == "translate([1.000000, 2.000000, 3.000000]) " + node.items.to_scad()


def test_rotation_order_is_z_y_x():
    out = rotation((10, 20, 30)).to_scad()
    z = out.index(f"rotate([{0:f}, {0:f}, {30:f}])")
    y = out.index(f"rotate([{0:f}, {20:f}, {0:f}])")
    x = out.index(f"rotate([{10:f}, {0:f}, {0:f}])")
    assert z < y < x


def test_rotation_by_axis_render():
    out = rotation_by_axis(30, (0, 0, 1)).to_scad()
    assert out.startswith(f"rotate(a = {30:f}, v = [{0:f}, {0:f}, {1:f}]) ")


def test_inverse_of_translation_negates():
    assert translation((1, 2, 3)).inverse().to_scad() == translation((-1, -2, -3)).to_scad()


def test_inverse_of_rotation_reverses_and_negates():
    out = rotation((10, 20, 30)).inverse().to_scad()
    x = out.index(f"rotate([{-10:f}, ")
    z = out.index(f"{-30:f}])")
    assert x < z


def test_double_inverse_round_trip():
    t = translation((1, -2, 3))
    t.append(rotation((5, 6, 7)))
    t.append(rotation_by_axis(45, (1, 0, 0)))
    assert t.inverse().inverse().to_scad() == t.to_scad()


def test_inverse_has_no_children():
    t = translation((1, 1, 1), Sphere(1))
    assert len(t.inverse().items) == 0


def test_append_keeps_order():
    t = translation((1, 0, 0))
    t.append(rotation_by_axis(90, (0, 1, 0)))
    out = t.to_scad()
    assert out.index("translate(") < out.index("rotate(a =")


def test_vector_size_checked():
    with pytest.raises(ValueError):
        translation((1, 2))


def test_anchor_collects_transforms_outermost_first():
    anchor = Anchor()
    translation((1, 2, 3), Scale((2, 2, 2), rotation((4, 5, 6), anchor, Sphere(1))))
    expected = translation((1, 2, 3))
    expected.append(rotation((4, 5, 6)))
    assert anchor.transform().to_scad() == expected.to_scad()


def test_anchor_without_parent_has_no_steps():
    assert Anchor().transform().to_scad() == Transform().to_scad()


def test_anchor_render_ignores_prefix():
    anchor = Anchor().disable()
    assert anchor.prefix == "*"
    assert anchor.to_scad() == "/* Anchor */\n"


def test_align_composes_with_inverse():
    a = Anchor()
    b = Anchor()
    List(translation((1, 0, 0), a), rotation((0, 0, 90), b))
    expected = a.transform()
    expected.append(b.transform().inverse())
    assert align(a, b).to_scad() == expected.to_scad()


def test_align_origin_and_here():
    a = Anchor()
    translation((3, 4, 5), a)
    assert align_origin(a).to_scad() == translation((3, 4, 5)).to_scad()
    assert align_here(a).to_scad() == translation((-3, -4, -5)).to_scad()


def test_align_origin_accepts_children():
    a = Anchor()
    translation((1, 1, 1), a)
    sphere = Sphere(2)
    node = align_origin(a).add(sphere)
    assert sphere.parent is node.items
    assert node.to_scad().endswith(sphere.to_scad() + "}\n")