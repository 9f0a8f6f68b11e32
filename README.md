# pmpcore

Core building blocks for polygon mesh processing in Python.

## What is inside

- `pmpcore.vectors` – small vector helpers (`dot`, `cross`, `norm`,
  `sqrnorm`, `add`, `sub`, `scale`, `all_finite`) working on sequences or
  NumPy arrays, and the `IOFlags` dataclass of options for mesh reading and
  writing.
- `pmpcore.properties` – named per-element property arrays:
  `PropertyArray`, `Property` handles and the `PropertyContainer` that keeps
  all its arrays the same length. Adding a name that already exists raises
  `ValueError`; `get` returns an invalid (falsy) `Property` when the name is
  missing or of another type.
- `pmpcore.timer` – a wall-clock `Timer` reporting milliseconds through
  `elapsed()`; it also works as a context manager.
- `pmpcore.memory_usage` – `max_size()` and `current_size()` report the
  process's peak and current resident memory in bytes (`current_size()` reads
  `/proc/self/statm` and returns 0 outside Linux).
- `pmpcore.heap` – an indexed binary min-`Heap` whose entries remember their
  position through a `HeapInterface`, so they can be updated or removed.
  The default interface orders entries by an optional `key` function.
- `pmpcore.quadric` – symmetric 4×4 error `Quadric`s, built with
  `Quadric.from_plane` or `Quadric.from_point_normal`, that can be added,
  scaled and evaluated at a point.
- `pmpcore.normal_cone` – `NormalCone`, a cone of normals that can be merged
  with another cone or a normal.
- `pmpcore.barycentric` – `barycentric_coordinates(p, u, v, w)` of a point
  with respect to a triangle; degenerate triangles give the barycenter.
- `pmpcore.colormap` – the 256-entry `cold_warm_texture()` colour map and a
  `checkerboard_texture(resolution)` image, both as `uint8` arrays.
- `pmpcore.tessellation` – `tessellate(points)` splits a polygon into
  triangles, keeping the sum of squared triangle areas (`squared_area`) as
  small as possible.
- `pmpcore.trackball` – `Trackball`, the camera math of a trackball viewer:
  draw modes, rotation, translation, zoom, scrolling, projection and
  unprojection.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from pmpcore.quadric import Quadric

q = Quadric.from_plane(0.0, 0.0, 1.0, 0.0)   # the plane z = 0
print(q((1.0, 2.0, 3.0)))                     # squared distance: 9.0
```

```python
from pmpcore.tessellation import tessellate

square = [(0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0)]
print(tessellate(square))   # two triangles as index triples
```

```python
from pmpcore.properties import PropertyContainer

container = PropertyContainer()
container.resize(3)
weights = container.add("v:weight", 1.0, float)
weights[0] = 2.5
print(container.properties())   # ['v:weight']
```

```python
from pmpcore.timer import Timer

with Timer() as timer:
    sum(range(1_000_000))
print(timer)   # e.g. "12.3 ms"
```

## What it does not do

pmpcore holds no surface mesh data structure, reads and writes no mesh
files, and draws nothing: it opens no window and talks to no graphics API.
`Trackball` only computes camera matrices from the input it is given, and the
colour maps are plain pixel arrays for whatever renderer you use. There are
no rendering material settings and no command-line tools.