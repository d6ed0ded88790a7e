"""Nodes that apply an operation to a group of child nodes."""

from __future__ import annotations

from typing import Optional, Sequence

from ghostscad.base import (
    Circular,
    Container,
    Primitive,
    _coords,
    _num,
    _quote,
    _uint16,
    _vector,
)


def _flag(value: bool) -> str:
    return "true" if value else "false"


def _byte(value: int, name: str) -> int:
    value = int(value)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be between 0 and 255, got {value}")
    return value


class Color(Container):
    """Paints its children with a named or hexadecimal colour."""

    def __init__(self, color: str, *items: Primitive) -> None:
        super().__init__(*items)
        self.color = color

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: int, *items: Primitive) -> "Color":
        """Build a colour node from byte components."""
        components = (_byte(r, "r"), _byte(g, "g"), _byte(b, "b"), _byte(a, "a"))
        return cls("#" + "".join(f"{c:02x}" for c in components), *items)

    def _header(self) -> str:
        return f"color({_quote(self.color)})"

    def render(self, out) -> None:
        super().render(out)


class _Unmodifiable(Container):
    """A node that ignores modifiers and is never attached to a parent."""

    @property
    def parent(self) -> Optional[Primitive]:
        return None

    @parent.setter
    def parent(self, value: Optional[Primitive]) -> None:
        pass

    def disable(self) -> "_Unmodifiable":
        return self

    def highlight(self) -> "_Unmodifiable":
        return self

    def show_only(self) -> "_Unmodifiable":
        return self

    def transparent(self) -> "_Unmodifiable":
        return self


class Fill(_Unmodifiable):
    """Removes holes from its 2D children."""

    def __init__(self, *items: Primitive) -> None:
        super().__init__(*items)

    def _header(self) -> str:
        return "fill()"

    def render(self, out) -> None:
        out.write(self._header())
        self.items.render(out)

    def disable(self) -> "Fill":
        return self

    def highlight(self) -> "Fill":
        return self

    def show_only(self) -> "Fill":
        return self

    def transparent(self) -> "Fill":
        return self


class Resize(_Unmodifiable):
    """Resizes its children to the given dimensions."""

    def __init__(self, auto: bool, dims: Sequence[float], *items: Primitive) -> None:
        super().__init__(*items)
        self.auto = auto
        self.dims = _vector(dims, 3, "dims")

    def _header(self) -> str:
        return f"resize(\n\t[{_coords(self.dims)}], auto={_flag(self.auto)}\n)"

    def render(self, out) -> None:
        out.write(self._header())
        self.items.render(out)

    def disable(self) -> "Resize":
        return self

    def highlight(self) -> "Resize":
        return self

    def show_only(self) -> "Resize":
        return self

    def transparent(self) -> "Resize":
        return self


class LinearExtrusion(Container):
    """Extrudes 2D children along the Z axis; zero-valued options are omitted."""

    def __init__(
        self,
        height: float,
        *items: Primitive,
        center: bool = True,
        convexity: int = 10,
        twist: int = 0,
        slices: int = 20,
        scale: float = 1.0,
        fn: int = 16,
    ) -> None:
        super().__init__(*items)
        self.height = float(height)
        self.center = center
        self.convexity = _uint16(convexity, "convexity")
        self.twist = _uint16(twist, "twist")
        self.slices = _uint16(slices, "slices")
        self.scale = float(scale)
        self.fn = _uint16(fn, "fn")

    @classmethod
    def zero(cls, height: float, *items: Primitive) -> "LinearExtrusion":
        """An extrusion with every option but the scale left unset."""
        return cls(
            height, *items, center=False, convexity=0, twist=0, slices=0, scale=1.0, fn=0
        )

    def _header(self) -> str:
        parts = [f"linear_extrude(height={_num(self.height)}"]
        if self.center:
            parts.append(f", center={_flag(self.center)}")
        if self.convexity != 0:
            parts.append(f", convexity={self.convexity}")
        if self.twist != 0:
            parts.append(f", twist={self.twist}")
        if self.slices != 0:
            parts.append(f", slices={self.slices}")
        if self.scale != 0:
            parts.append(f", scale={_num(self.scale)}")
        if self.fn != 0:
            parts.append(f", $fn={self.fn}")
        parts.append(")")
        return "".join(parts)

    def render(self, out) -> None:
        super().render(out)


class ListOp(Container):
    """A named operation over its children, such as union or hull."""

    def __init__(self, name: str, *items: Primitive) -> None:
        super().__init__(*items)
        self.name = name

    def _header(self) -> str:
        return f"{self.name}()"

    def render(self, out) -> None:
        super().render(out)


def intersection(*items: Primitive) -> ListOp:
    """Intersection of the given nodes."""
    return ListOp("intersection", *items)


def union(*items: Primitive) -> ListOp:
    """Union of the given nodes."""
    return ListOp("union", *items)


def difference(*items: Primitive) -> ListOp:
    """The first node minus all the others."""
    return ListOp("difference", *items)


def hull(*items: Primitive) -> ListOp:
    """Convex hull of the given nodes."""
    return ListOp("hull", *items)


def minkowski(*items: Primitive) -> ListOp:
    """Minkowski sum of the given nodes."""
    return ListOp("minkowski", *items)


class Offset(Container):
    """Grows or shrinks 2D children by a radius or a delta."""

    def __init__(
        self,
        *items: Primitive,
        r: float = 0.0,
        delta: float = 0.0,
        chamfer: bool = False,
        zero_delta: bool = False,
    ) -> None:
        super().__init__(*items)
        self.r = float(r)
        self.delta = float(delta)
        self.chamfer = chamfer
        self.zero_delta = zero_delta

    def _header(self) -> str:
        parts = ["offset("]
        if self.r != 0:
            parts.append(f"r = {_num(self.r)}")
        if self.delta != 0:
            parts.append(f"delta = {_num(self.delta)}")
            if self.chamfer:
                parts.append(f", chamfer={_flag(self.chamfer)}")
        if self.zero_delta:
            parts.append("delta = 0")
        parts.append(")")
        return "".join(parts)

    def render(self, out) -> None:
        super().render(out)


class Render(Container):
    """Forces full rendering of its children."""

    def __init__(self, convexity: int, *items: Primitive) -> None:
        super().__init__(*items)
        self.convexity = _uint16(convexity, "convexity")

    def _header(self) -> str:
        return f"render(convexity = {self.convexity})"

    def render(self, out) -> None:
        super().render(out)


class RotationExtrusion(Container):
    """Sweeps 2D children around the Z axis."""

    def __init__(
        self,
        *items: Primitive,
        angle: float = 360.0,
        convexity: int = 10,
        fa: Optional[float] = None,
        fs: Optional[float] = None,
        fn: Optional[int] = None,
    ) -> None:
        super().__init__(*items)
        self.angle = float(angle)
        self.convexity = _uint16(convexity, "convexity")
        self.circular = Circular(fa, fs, fn)

    def _header(self) -> str:
        return (
            f"rotate_extrude(angle={_num(self.angle)}, "
            f"convexity={self.convexity}{self.circular})"
        )

    def render(self, out) -> None:
        super().render(out)


class Scale(Container):
    """Scales its children along each axis."""

    def __init__(self, scale: Sequence[float], *items: Primitive) -> None:
        super().__init__(*items)
        self.scale = _vector(scale, 3, "scale")

    def _header(self) -> str:
        return f"scale([{_coords(self.scale)}]) "

    def render(self, out) -> None:
        super().render(out)