"""Core nodes of the SCAD tree and the formatting helpers they share."""

from __future__ import annotations

import abc
import io
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Protocol, Tuple

_UINT16_MAX = 0xFFFF

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


class _Writer(Protocol):
    def write(self, text: str) -> object:
        ...


def _num(value: float) -> str:
    """Format a number with six decimal places."""
    return f"{float(value):f}"


def _bool_arg(name: str, value: bool) -> str:
    """Format a boolean keyword argument, preceded by a comma, as SCAD spells it."""
    word = "true" if value else "false"
    return f", {name}={word}"


def _quote(text: str) -> str:
    """Return text as a double-quoted string literal with escapes."""
    parts = []
    for ch in text:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        elif ord(ch) < 0x80:
            parts.append(f"\\x{ord(ch):02x}")
        elif ord(ch) <= 0xFFFF:
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(f"\\U{ord(ch):08x}")
    return '"' + "".join(parts) + '"'


def _vector(values: Iterable[float], size: int, name: str = "vector") -> Tuple[float, ...]:
    """Convert values to a tuple of floats of exactly the given size."""
    vec = tuple(float(v) for v in values)
    if len(vec) != size:
        raise ValueError(f"{name} must have {size} components, got {len(vec)}")
    return vec


def _coords(vec: Iterable[float]) -> str:
    return ", ".join(_num(v) for v in vec)


def _uint16(value: int, name: str) -> int:
    value = int(value)
    if not 0 <= value <= _UINT16_MAX:
        raise ValueError(f"{name} must be between 0 and {_UINT16_MAX}, got {value}")
    return value


class Primitive(abc.ABC):
    """A node of the SCAD tree."""

    def __init__(self) -> None:
        self.parent: Optional[Primitive] = None
        self.prefix = ""

    def _set_prefix(self, prefix: str) -> "Primitive":
        self.prefix = prefix
        return self

    def disable(self) -> "Primitive":
        """Mark the node as disabled (``*``)."""
        return self._set_prefix("*")

    def highlight(self) -> "Primitive":
        """Mark the node as highlighted (``#``)."""
        return self._set_prefix("#")

    def show_only(self) -> "Primitive":
        """Mark the node as the only one shown (``!``)."""
        return self._set_prefix("!")

    def transparent(self) -> "Primitive":
        """Mark the node as transparent (``%``)."""
        return self._set_prefix("%")

    @abc.abstractmethod
    def render(self, out: _Writer) -> None:
        """Write the SCAD code of this node to ``out``."""

    def to_scad(self) -> str:
        """Return the SCAD code of this node as a string."""
        buffer = io.StringIO()
        self.render(buffer)
        return buffer.getvalue()


@dataclass
class Circular:
    """Fragment settings of a round shape; unset values are not rendered."""

    fa: Optional[float] = None
    fs: Optional[float] = None
    fn: Optional[int] = None

    def __post_init__(self) -> None:
        if self.fn is not None:
            self.fn = _uint16(self.fn, "fn")

    def __str__(self) -> str:
        parts = []
        if self.fa is not None:
            parts.append(f", $fa={_num(self.fa)}")
        if self.fs is not None:
            parts.append(f", $fs={_num(self.fs)}")
        if self.fn is not None:
            parts.append(f", $fn={self.fn}")
        return "".join(parts)


class List(Primitive):
    """A group of nodes rendered between curly brackets."""

    def __init__(self, *items: Primitive) -> None:
        super().__init__()
        self.items: list[Primitive] = []
        self.add(*items)

    def add(self, *items: Primitive) -> "List":
        """Append items, making this list their parent."""
        for item in items:
            if not isinstance(item, Primitive):
                raise TypeError(f"expected a Primitive, got {type(item).__name__}")
        for item in items:
            item.parent = self
        self.items.extend(items)
        return self

    def render(self, out: _Writer) -> None:
        out.write(self.prefix)
        out.write("{\n")
        for item in self.items:
            item.render(out)
        out.write("}\n")

    def __iter__(self) -> Iterator[Primitive]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


class Container(Primitive):
    """A node that applies an operation to a list of child nodes."""

    def __init__(self, *items: Primitive) -> None:
        super().__init__()
        self.items = List()
        self.items.parent = self
        self.items.add(*items)

    def add(self, *items: Primitive) -> "Container":
        """Append children to the node."""
        self.items.add(*items)
        return self

    def _header(self) -> str:
        return ""

    def render(self, out: _Writer) -> None:
        out.write(self.prefix)
        out.write(self._header())
        self.items.render(out)


class Nothing(Primitive):
    """An empty node; it renders a comment."""

    def render(self, out: _Writer) -> None:
        out.write("/* Nothing */\n")


class Custom(Primitive):
    """Arbitrary code placed verbatim in the SCAD output."""

    def __init__(self, code: str) -> None:
        super().__init__()
        self.code = code

    def render(self, out: _Writer) -> None:
        out.write(self.prefix)
        out.write(self.code)