"""Global SCAD settings and writing shapes to SCAD or STL files."""

from __future__ import annotations

import argparse
import enum
import logging
import os
import subprocess
import sys
import tempfile
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from ghostscad.base import Primitive, _num, _quote, _uint16, _Writer

_MIN_FRAGMENT = 0.01

_LEVELS = {
    "panic": logging.CRITICAL,
    "fatal": logging.CRITICAL,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": logging.DEBUG,
}

log = logging.getLogger("ghostscad")


class RenderError(Exception):
    """Raised when shapes cannot be selected or written."""


@dataclass
class GlobalSettings:
    """Fragment settings and ``use`` statements written before every shape."""

    fa: float = 12.0
    fs: float = 2.0
    fn: int = 0
    uses: List[str] = field(default_factory=list)

    def set_fa(self, val: float) -> None:
        """Minimum angle of a fragment; ignored when the fragment count is non-zero."""
        self.fa = max(float(val), _MIN_FRAGMENT)

    def set_fs(self, val: float) -> None:
        """Minimum size of a fragment; ignored when the fragment count is non-zero."""
        self.fs = max(float(val), _MIN_FRAGMENT)

    def set_fn(self, val: int) -> None:
        """Number of fragments of a full circle; zero lets the other settings apply."""
        self.fn = _uint16(val, "fn")

    def use(self, file: str) -> None:
        """Import a SCAD file or font."""
        self.uses.append(file)

    def render(self, out: _Writer) -> None:
        """Write the settings as SCAD statements."""
        out.write(f"$fa={_num(self.fa)};\n")
        out.write(f"$fs={_num(self.fs)};\n")
        out.write(f"$fn={self.fn};\n")
        for file in self.uses:
            out.write(f"use <{file}>;\n")


_shared_settings = GlobalSettings()
settings = _shared_settings


def set_fa(val: float) -> None:
    """Set the minimum fragment angle of the shared settings."""
    _shared_settings.set_fa(val)


def set_fs(val: float) -> None:
    """Set the minimum fragment size of the shared settings."""
    _shared_settings.set_fs(val)


def set_fn(val: int) -> None:
    """Set the fragment count of the shared settings."""
    _shared_settings.set_fn(val)


def use(file: str) -> None:
    """Add a ``use`` statement to the shared settings."""
    _shared_settings.use(file)


class ShapeFlags(enum.IntFlag):
    """How a shape is treated when several are rendered."""

    NONE = 0
    DEFAULT = 1 << 1
    SKIP_IN_BULK = 1 << 2


_FLAG_NAMES = {
    int(ShapeFlags.DEFAULT): "Default",
    int(ShapeFlags.SKIP_IN_BULK): "SkipInBulk",
}


@dataclass
class Shape:
    """A named shape offered for rendering."""

    name: str
    primitive: Primitive
    flags: ShapeFlags = ShapeFlags.NONE


@dataclass
class Options:
    """Command-line options controlling what is rendered and where."""

    out: str = ""
    log_file: str = ""
    log_level: str = "Info"
    list_shapes: bool = False
    shape: str = ""
    stl: bool = False
    all: bool = False


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser()
    parser.add_argument("-out", "--out", default="", help="output file")
    parser.add_argument(
        "-log-file", "--log-file", dest="log_file", default="",
        help="output file for diagnostics",
    )
    parser.add_argument(
        "-log-level", "--log-level", dest="log_level", default="Info",
        help="verbosity of the diagnostic information",
    )
    parser.add_argument(
        "-list-shapes", "--list-shapes", dest="list_shapes", action="store_true",
        help="list the available shapes",
    )
    parser.add_argument("-shape", "--shape", default="", help="shape to render if not default")
    parser.add_argument("-stl", "--stl", action="store_true", help="produce an STL file")
    parser.add_argument("-all", "--all", action="store_true", help="process all shapes")
    return parser


def parse_options(argv: Optional[Sequence[str]] = None) -> Options:
    """Parse command-line arguments into options."""
    args = _parser().parse_args(sys.argv[1:] if argv is None else list(argv))
    return Options(
        out=args.out,
        log_file=args.log_file,
        log_level=args.log_level,
        list_shapes=args.list_shapes,
        shape=args.shape,
        stl=args.stl,
        all=args.all,
    )


def configure_logging(options: Options) -> None:
    """Set the level and destination of diagnostic messages."""
    level = logging.INFO
    if options.log_level:
        try:
            level = _LEVELS[options.log_level.lower()]
        except KeyError:
            raise RenderError(f"not a valid log level: {options.log_level!r}") from None

    for handler in [h for h in log.handlers if getattr(h, "_ghostscad", False)]:
        log.removeHandler(handler)
        handler.close()

    if options.log_file:
        try:
            handler: logging.Handler = logging.FileHandler(options.log_file, mode="a")
        except OSError as exc:
            raise RenderError(str(exc)) from exc
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(message)s", "%Y-%m-%d %H:%M:%S")
    )
    handler._ghostscad = True  # type: ignore[attr-defined]
    log.addHandler(handler)
    log.setLevel(level)


def output_name(shape_name: str, options: Options) -> str:
    """The file a shape is written to."""
    if options.out:
        return options.out
    return f"{shape_name}.stl" if options.stl else f"{shape_name}.scad"


def flags_to_string(flags: ShapeFlags) -> str:
    """Describe the flags as shown in shape listings."""
    flags = int(flags)
    if flags == 0:
        return ""
    names = []
    for shift in range(32):
        bit = (int(ShapeFlags.DEFAULT) << shift) & 0xFFFFFFFF
        if bit and flags & bit:
            names.append(_FLAG_NAMES.get(bit, f"ShapeFlags({bit})"))
    return " " + (f"({', '.join(names)})" if names else "")


def _write_scad(path: str, shape: Primitive, settings_: GlobalSettings) -> None:
    with open(path, "w", encoding="utf-8") as out:
        settings_.render(out)
        shape.render(out)


def render_to_file(
    shape: Primitive,
    file_name: str,
    options: Optional[Options] = None,
    settings: Optional[GlobalSettings] = None,
) -> str:
    """Write the shape to a SCAD file, or through openscad to an STL file."""
    options = options or Options()
    settings_ = settings if settings is not None else _shared_settings

    if not options.stl:
        try:
            _write_scad(file_name, shape, settings_)
        except OSError as exc:
            raise RenderError(str(exc)) from exc
        return file_name

    fd, tmp_name = tempfile.mkstemp(prefix="tmpfile-", suffix=".scad")
    os.close(fd)
    try:
        _write_scad(tmp_name, shape, settings_)
        subprocess.run(["openscad", tmp_name, "-o", file_name], check=True)
    except (OSError, subprocess.CalledProcessError) as exc:
        raise RenderError(str(exc)) from exc
    finally:
        try:
            os.remove(tmp_name)
        except OSError:
            pass
    return file_name


def _prepare(argv: Optional[Sequence[str]]) -> Options:
    options = parse_options(argv)
    configure_logging(options)
    return options


def _render_single(
    shape: Primitive, name: str, argv: Optional[Sequence[str]]
) -> Optional[str]:
    options = _prepare(argv)
    if options.list_shapes:
        print("main (default)")
        return None
    if options.shape and options.shape != "main":
        raise RenderError(f"No such shape: {_quote(options.shape)}")
    return render_to_file(shape, output_name(name, options), options)


def render_one(shape: Primitive, argv: Optional[Sequence[str]] = None) -> Optional[str]:
    """Render one shape as directed by the command line; return the file written."""
    return _render_single(shape, "main", argv)


def render_one_with_file_name(
    file_name: str, shape: Primitive, argv: Optional[Sequence[str]] = None
) -> Optional[str]:
    """Render one shape under the given base name; return the file written."""
    return _render_single(shape, file_name, argv)


def render_multiple(
    shapes: Iterable[Shape], argv: Optional[Sequence[str]] = None
) -> List[str]:
    """Render the selected, default or all shapes; return the files written."""
    options = _prepare(argv)
    shapes = list(shapes)
    if not shapes:
        raise RenderError("No defined shapes")

    by_name = {}
    default = ""
    for shape in shapes:
        by_name[shape.name] = shape
        if options.list_shapes:
            print(f"{shape.name}{flags_to_string(shape.flags)}")
        if shape.flags & ShapeFlags.DEFAULT and not default:
            default = shape.name

    if options.list_shapes:
        return []

    if not default:
        raise RenderError("Default shape not specified. There needs to be one.")

    if options.all:
        written = []
        for shape in shapes:
            if shape.flags & ShapeFlags.SKIP_IN_BULK:
                continue
            file_name = output_name(shape.name, options)
            log.info("Processing %s...", file_name)
            written.append(render_to_file(shape.primitive, file_name, options))
        log.info("Done")
        return written

    name = options.shape or default
    try:
        shape = by_name[name]
    except KeyError:
        raise RenderError(f"No such shape: {_quote(name)}") from None
    return [render_to_file(shape.primitive, output_name(name, options), options)]