"""Basic 2D and 3D shapes and geometry read from files."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ghostscad.base import (
    Circular,
    Primitive,
    _bool_arg,
    _coords,
    _num,
    _quote,
    _uint16,
    _vector,
    _Writer,
)


class Cube(Primitive):
    """A box with the given dimensions."""

    def __init__(self, dims: Sequence[float], center: bool = True) -> None:
        super().__init__()
        self.dims = _vector(dims, 3, "dims")
        self.center = center

    def render(self, out: _Writer) -> None:
        out.write(self.prefix)
        out.write(f"cube([{_coords(self.dims)}]{_bool_arg('center', self.center)});\n")


class Cylinder(Primitive):
    """A cylinder or cone; ``r`` is the top radius, ``r_bottom`` defaults to it."""

    def __init__(
        self,
        h: float,
        r: float,
        r_bottom: Optional[float] = None,
        center: bool = True,
        fa: Optional[float] = None,
        fs: Optional[float] = None,
        fn: Optional[int] = None,
    ) -> None:
        super().__init__()
        self.h = float(h)
        self.r_top = float(r)
        self.r_bottom = float(r if r_bottom is None else r_bottom)
        self.center = center
        self.circular = Circular(fa, fs, fn)

    def render(self, out: _Writer) -> None:
        out.write(self.prefix)
        out.write(
            f"cylinder(h={_num(self.h)}, r1={_num(self.r_bottom)}, "
            f"r2={_num(self.r_top)}{_bool_arg('center', self.center)}{self.circular});\n"
        )


class Sphere(Primitive):
    """A sphere of the given radius."""

    _name = "sphere"

    def __init__(
        self,
        radius: float,
        fa: Optional[float] = None,
        fs: Optional[float] = None,
        fn: Optional[int] = None,
    ) -> None:
        super().__init__()
        self.radius = float(radius)
        self.circular = Circular(fa, fs, fn)

    def render(self, out: _Writer) -> None:
        out.write(self.prefix)
        out.write(f"{self._name}(r={_num(self.radius)}{self.circular});\n")


class Circle(Sphere):
    """A circle of the given radius."""

    _name = "circle"


class Square(Primitive):
    """A rectangle with the given dimensions."""

    def __init__(self, dims: Sequence[float], center: bool = True) -> None:
        super().__init__()
        self.dims = _vector(dims, 2, "dims")
        self.center = center

    def render(self, out: _Writer) -> None:
        out.write(self.prefix)
        out.write(f"square([{_coords(self.dims)}]{_bool_arg('center', self.center)});\n")


class Polygon(Primitive):
    """A polygon from 2D points, optionally with index paths."""

    def __init__(
        self,
        points: Iterable[Sequence[float]],
        paths: Optional[Iterable[Iterable[int]]] = None,
        convexity: int = 0,
    ) -> None:
        super().__init__()
        self.points = [_vector(p, 2, "point") for p in points]
        self.paths = [[int(i) for i in path] for path in paths] if paths else []
        self.convexity = int(convexity)

    def render(self, out: _Writer) -> None:
        out.write(self.prefix)
        points = ", ".join(f"[{_coords(p)}]" for p in self.points)
        out.write(f"polygon(points=[{points}]")
        if self.paths:
            paths = ", ".join(
                "[" + ", ".join(str(i) for i in path) + "]" for path in self.paths
            )
            out.write(f", paths=[{paths}]")
        if self.convexity != 0:
            out.write(f", convexity={self.convexity}")
        out.write(");\n")


class Polyhedron(Primitive):
    """A polyhedron from 3D points and triangular faces given as point indices."""

    def __init__(
        self,
        points: Iterable[Sequence[float]],
        faces: Iterable[Sequence[float]],
        convexity: int = 0,
    ) -> None:
        super().__init__()
        self.points = [_vector(p, 3, "point") for p in points]
        self.faces = [_vector(f, 3, "face") for f in faces]
        self.convexity = int(convexity)

    def render(self, out: _Writer) -> None:
        out.write(self.prefix)
        points = ", ".join(f"[{_coords(p)}]" for p in self.points)
        faces = ", ".join(f"[{_coords(f)}]" for f in self.faces)
        out.write(f"polyhedron(points=[{points}], faces=[{faces}]")
        if self.convexity != 0:
            out.write(f", convexity={self.convexity}")
        out.write(");\n")


class Import(Primitive):
    """Geometry read from an STL, OFF, DXF or SVG file."""

    def __init__(
        self, file: str, convexity: int = 0, layer: str = "", center: bool = False
    ) -> None:
        super().__init__()
        self.file = file
        self.convexity = int(convexity)
        self.layer = layer
        self.center = center

    def render(self, out: _Writer) -> None:
        out.write(self.prefix)
        out.write(f'import("{self.file}"')
        if self.convexity != 0:
            out.write(f", convexity={self.convexity}")
        if self.layer:
            out.write(f", layer={_quote(self.layer)}")
        if self.center:
            out.write(_bool_arg("center", self.center))
        out.write(");\n")


class Surface(Primitive):
    """A height map read from a file."""

    def __init__(
        self, file: str, center: bool = True, invert: bool = False, convexity: int = 0
    ) -> None:
        super().__init__()
        self.file = file
        self.center = center
        self.invert = invert
        self.convexity = int(convexity)

    def render(self, out: _Writer) -> None:
        out.write(self.prefix)
        out.write(f'surface(file="{self.file}"')
        out.write(_bool_arg("center", self.center))
        out.write(_bool_arg("invert", self.invert))
        if self.convexity != 0:
            out.write(f", convexity={self.convexity}")
        out.write(");\n")


class Text(Primitive):
    """A piece of 2D text."""

    def __init__(
        self,
        text: str,
        size: int = 10,
        font: str = "",
        halign: str = "left",
        valign: str = "baseline",
        spacing: float = 1.0,
        direction: str = "ltr",
        language: str = "en",
        script: str = "latin",
        fn: int = 0,
    ) -> None:
        super().__init__()
        self.text = text
        self.size = _uint16(size, "size")
        self.font = font
        self.halign = halign
        self.valign = valign
        self.spacing = float(spacing)
        self.direction = direction
        self.language = language
        self.script = script
        self.fn = _uint16(fn, "fn")

    def render(self, out: _Writer) -> None:
        out.write(self.prefix)
        out.write(
            f"text({_quote(self.text)}"
            f", size={self.size}"
            f", font={_quote(self.font)}"
            f", halign={_quote(self.halign)}"
            f", valign={_quote(self.valign)}"
            f", spacing={self.spacing:.6f}"
            f", direction={_quote(self.direction)}"
            f", language={_quote(self.language)}"
            f", script={_quote(self.script)}"
            f", $fn={self.fn}"
            ");"
        )