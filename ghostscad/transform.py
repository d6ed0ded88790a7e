"""Translations, rotations, anchors and alignment of reference frames."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Iterable, Sequence, Tuple

from ghostscad.base import Container, Primitive, _coords, _num, _vector

Vec3 = Tuple[float, float, float]
_ZERO: Vec3 = (0.0, 0.0, 0.0)


class _Kind(enum.Enum):
    TRANSLATE = "translate"
    ROTATE = "rotate"
    ROTATE_AXIS = "rotateAngle"


@dataclass(frozen=True)
class _Step:
    kind: _Kind
    vector: Vec3 = _ZERO
    angle: Vec3 = _ZERO

    def inverted(self) -> "_Step":
        if self.kind is _Kind.TRANSLATE:
            return replace(self, vector=tuple(-v for v in self.vector))
        return replace(self, angle=tuple(-a for a in self.angle))

    def __str__(self) -> str:
        if self.kind is _Kind.TRANSLATE:
            return f"translate([{_coords(self.vector)}]) "
        if self.kind is _Kind.ROTATE:
            return f"rotate([{_coords(self.angle)}]) "
        return f"rotate(a = {_num(self.angle[0])}, v = [{_coords(self.vector)}]) "


class Transform(Container):
    """A chain of translations and rotations applied to its children."""

    def __init__(self, *items: Primitive) -> None:
        super().__init__(*items)
        self.steps: list[_Step] = []

    @classmethod
    def _of(cls, steps: Iterable[_Step], items: Sequence[Primitive]) -> "Transform":
        ret = cls(*items)
        ret.steps.extend(steps)
        return ret

    def inverse(self) -> "Transform":
        """A new, empty transform that undoes this one."""
        return Transform._of((s.inverted() for s in reversed(self.steps)), ())

    def append(self, other: "Transform") -> None:
        """Apply the steps of another transform after these."""
        self.steps.extend(other.steps)

    def _header(self) -> str:
        return "".join(str(step) for step in self.steps)

    def render(self, out) -> None:
        super().render(out)


def translation(vector: Sequence[float], *items: Primitive) -> Transform:
    """Move the children by a vector."""
    return Transform._of([_Step(_Kind.TRANSLATE, vector=_vector(vector, 3))], items)


def rotation(angle: Sequence[float], *items: Primitive) -> Transform:
    """Rotate the children about Z, then Y, then X, by angles in degrees."""
    x, y, z = _vector(angle, 3, "angle")
    steps = [
        _Step(_Kind.ROTATE, angle=(0.0, 0.0, z)),
        _Step(_Kind.ROTATE, angle=(0.0, y, 0.0)),
        _Step(_Kind.ROTATE, angle=(x, 0.0, 0.0)),
    ]
    return Transform._of(steps, items)


def rotation_by_axis(angle: float, vector: Sequence[float], *items: Primitive) -> Transform:
    """Rotate the children by an angle in degrees about an axis."""
    step = _Step(
        _Kind.ROTATE_AXIS, vector=_vector(vector, 3), angle=(float(angle), 0.0, 0.0)
    )
    return Transform._of([step], items)


class Anchor(Primitive):
    """A marker that records the transforms leading to its place in the tree."""

    def transform(self) -> Transform:
        """An empty transform made of every transform above the anchor, outermost first."""
        ancestors = []
        node = self.parent
        while node is not None:
            ancestors.append(node)
            node = node.parent
        result = Transform()
        for node in reversed(ancestors):
            if isinstance(node, Transform):
                result.append(node)
        return result

    def render(self, out) -> None:
        out.write("/* Anchor */\n")


def align(a: Anchor, b: Anchor) -> Transform:
    """A transform that brings anchor ``b`` onto anchor ``a``."""
    result = a.transform()
    result.append(b.transform().inverse())
    return result


def align_origin(a: Anchor) -> Transform:
    """A transform that brings the origin onto anchor ``a``."""
    return a.transform()


def align_here(a: Anchor) -> Transform:
    """A transform that brings anchor ``a`` onto the origin."""
    return a.transform().inverse()