# ghostscad

Describe OpenSCAD models with ordinary Python objects and write them out as
`.scad` files. If the `openscad` program is on your `PATH`, they can also be
written as `.stl` files.

Every shape and operation is a Python object. Operations such as unions,
differences and transforms hold child shapes. `to_scad()` returns the
OpenSCAD source text for a whole tree of these objects.

## Installation

```
pip install ghostscad
```

To run the test suite:

```
pip install "ghostscad[test]"
pytest
```

## A first model

```python
from ghostscad.solids import Cube, Sphere
from ghostscad.operations import difference
from ghostscad.transform import translation
from ghostscad.output import set_fn, render_one

set_fn(64)

model = difference(
    Cube((20, 20, 20)),
    translation((0, 0, 10), Sphere(8)),
)

print(model.to_scad())   # OpenSCAD source text
render_one(model)        # writes main.scad and returns its name
```

Each written file starts with the global `$fa`, `$fs` and `$fn` settings and
any `use <...>;` lines. The shape follows them.

## Command-line options

`render_one`, `render_one_with_file_name` and `render_multiple` read options
from `sys.argv`, or from an `argv` list if you pass one:

- `--out FILE`: write to this file instead of `<shape>.scad`
- `--stl`: write `<shape>.stl` by running `openscad` on a temporary SCAD file
- `--list-shapes`: print the names of the available shapes and stop
- `--shape NAME`: render the named shape instead of the default one
- `--all`: render every shape that lacks `ShapeFlags.SKIP_IN_BULK`
- `--log-file FILE`: append diagnostic messages to a file instead of stderr
- `--log-level LEVEL`: one of `panic`, `fatal`, `error`, `warn`, `warning`,
  `info`, `debug` or `trace`, in any letter case. The default is `Info`.

Each option also works with a single leading dash, for example `-out`.

`render_multiple` takes a list of `Shape` entries. Each one has a name, a
primitive and `ShapeFlags`. The first shape with `ShapeFlags.DEFAULT` is the
one rendered when no `--shape` is given, so at least one shape must carry
that flag.

An unknown shape name, a missing default shape, an empty shape list, an
invalid log level, a file that cannot be written, or a failing `openscad` run
raises `ghostscad.output.RenderError`.

## What is available

- `ghostscad.solids`: `Cube`, `Cylinder`, `Sphere`, `Circle`, `Square`,
  `Polygon`, `Polyhedron`, `Import`, `Surface`, `Text`
- `ghostscad.operations`:
  - `Color`, including `Color.from_rgba`
  - `Scale`, `Offset`, `Render`, `Resize`, `Fill`
  - `LinearExtrusion`, including `LinearExtrusion.zero`
  - `RotationExtrusion`
  - `ListOp` and the functions `union`, `difference`, `intersection`, `hull`
    and `minkowski`
- `ghostscad.transform`:
  - `Transform`, built by `translation`, `rotation` or `rotation_by_axis`
  - `Anchor`
  - `align`, `align_origin` and `align_here`
- `ghostscad.base`:
  - `List`, which groups shapes
  - `Nothing`, an empty placeholder
  - `Custom`, which holds raw OpenSCAD code
  - `Primitive` and `Container`, the base classes
- `ghostscad.shapes`: composite shapes `Arc`, `Sector`, `Ring`, `Polyline`,
  `Polyline3d`, `Bezier`, `Graph` (including `Graph.from_parametric`) and
  `SmoothedCube`. Call `build()` on any of them to make its primitive; the
  result is also stored in its `primitive` attribute.
- `ghostscad.degmath`: `sin`, `cos`, `atan` and `atan2` in degrees,
  `deg_to_rad`, `rad_to_deg` and `bezier_curve_3d`
- `ghostscad.output`:
  - the shared settings `set_fa`, `set_fs` and `set_fn` (`$fa` and `$fs`
    are never set below 0.01)
  - `use`, for including SCAD libraries and fonts
  - `GlobalSettings`, for keeping settings of your own
  - `render_to_file` and the rendering entry points described above

Most primitives can be marked with `disable()`, `highlight()`, `show_only()`
or `transparent()`. These add the OpenSCAD modifier characters `*`, `#`, `!`
and `%`. `Fill` and `Resize` ignore these modifiers.

## Anchors

An `Anchor` placed inside a tree of transforms records the transforms that
lead to it. Calling `transform()` on an anchor returns those transforms.

- `align(a, b)` returns a transform that brings anchor `b` onto anchor `a`.
- `align_origin(a)` brings the origin onto `a`.
- `align_here(a)` brings `a` back onto the origin.

After `build()`, `Ring` has `start_anchor` and `end_anchor`. Use them to
attach other parts to the ends of the ring.

## Examples

The `ghostscad-examples` command renders one of the bundled example models.
The first argument names the example, and any further arguments are the
rendering options listed above:

```
ghostscad-examples booleans
ghostscad-examples sector-and-arc --list-shapes
ghostscad-examples sector-and-arc --shape arc --out arc.scad
```

The examples are `3d-shapes`, `2d-shapes-extrusion`, `booleans`, `fancy`,
`anchors`, `bezier-surface`, `bezier`, `graph`, `polyline`, `polyline3d` and
`sector-and-arc`. If the first argument is missing or unknown, the command
prints this list and exits with status 2.

## What it does not do

ghostscad only writes OpenSCAD source. It does no geometry of its own and has
no viewer or preview. To make an STL file it needs an installed `openscad`
program.