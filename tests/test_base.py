import io

import pytest

from ghostscad.base import Circular, Container, Custom, List, Nothing, Primitive


@pytest.mark.parametrize(
    "method, prefix",
    [("disable", "*"), ("show_only", "!"), ("highlight", "#"), ("transparent", "%")],
)
def test_modifiers_set_prefix_and_return_self(method, prefix):
    node = Custom("x;")
    result = getattr(node, method)()
    assert result is node
    assert node.prefix == prefix
    assert node.to_scad() == prefix + "x;"


def test_nothing_ignores_prefix():
    node = Nothing().disable()
    assert node.to_scad() == "/* Nothing */\n"


def test_list_wraps_items_in_braces():
    lst = List(Custom("a;\n"), Custom("b;\n"))
    assert lst.to_scad() == "{\na;\nb;\n}\n"


def test_list_prefix_comes_before_brace():
    assert List().highlight().to_scad().startswith("#{")


def test_list_sets_parent_and_iterates():
    a, b = Nothing(), Nothing()
    lst = List(a).add(b)
    assert a.parent is lst and b.parent is lst
    assert len(lst) == 2
    assert list(lst) == [a, b]


def test_list_rejects_non_primitive():
    with pytest.raises(TypeError):
        List().add("cube")


def test_container_parent_chain():
    child = Nothing()
    container = Container(child)
    assert container.items.parent is container
    assert child.parent is container.items
    assert container.add(Nothing()) is container
    assert len(container.items) == 2


def test_container_renders_items_block():
    container = Container(Custom("c;\n")).disable()
    assert container.to_scad() == "*" + List(Custom("c;\n")).to_scad()


def test_to_scad_matches_render():
    node = List(Nothing(), Custom("y;"))
    buffer = io.StringIO()
    node.render(buffer)
    assert node.to_scad() == buffer.getvalue()


def test_primitive_is_abstract():
    with pytest.raises(TypeError):
        Primitive()


def test_circular_unset_renders_nothing():
    assert str(Circular()) == ""


def test_circular_fn_only():
    assert str(Circular(fn=360)) == ", $fn=360"


def test_circular_order_is_fa_fs_fn():
    text = str(Circular(fa=1, fs=2, fn=3))
    assert text.index("$fa") < text.index("$fs") < text.index("$fn")
    assert text.endswith("$fn=3")


def test_circular_fn_range_checked():
    with pytest.raises(ValueError):
        Circular(fn=70000)