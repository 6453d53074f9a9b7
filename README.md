# polyhedra

Small tools for polyhedral meshes built from the Platonic solids:

- `polyhedra.cli` classifies a pair `{p, q}` as a Platonic solid, noting
  when the solid is reached through its dual (cube → octahedron,
  dodecahedron → icosahedron);
- `polyhedra.importer` reads a polyhedron's vertices, edges, faces and cells
  from CSV files into a `PolyhedraMesh`;
- `polyhedra.triangulation` subdivides the reference triangle into `b²`
  smaller triangles (type I triangulation);
- `polyhedra.ucd` writes points, segments, polygons and polyhedra in the
  ASCII UCD format that ParaView reads.

There are no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
polyhedra P Q [B C]
```

prints the solid that the pair `{P, Q}` identifies and whether it is reached
through its dual (`1`) or not (`0`):

```
$ polyhedra 4 3
Poliedro: Ottaedro
Duale: 1
```

Accepted pairs are `{3, 3}` (Tetraedro), `{3, 4}` (Ottaedro), `{3, 5}`
(Icosaedro), `{4, 3}` (Ottaedro, dual) and `{5, 3}` (Icosaedro, dual). Any
other pair prints `Poliedro: Errore` and `Duale: 0` and exits with status 1.
All arguments must be non-negative integers. `B` and `C` are accepted but not
used.

## Library use

```python
from polyhedra.cli import classify_polyhedron
from polyhedra.importer import import_mesh
from polyhedra.triangulation import triangulation_counts, triangulate_type_one
from polyhedra.ucd import export_polygons

result = classify_polyhedron(5, 3)
# Classification(name='Icosaedro', p=3, q=5, dual=True)

mesh = import_mesh("Tetraedro", "data")   # reads data/Tetraedro_Cell*Ds.csv

print(triangulation_counts(2))            # (6, 9, 4): vertices, edges, faces
triangle = triangulate_type_one(2)

export_polygons("triangle.inp", triangle.cell0ds_coordinates, triangle.cell2ds_vertices)
```

`classify_polyhedron` raises `ValueError` for a pair that is not a Platonic
solid. For the cube and the dodecahedron it returns the dual's name with `p`
and `q` swapped and `dual` set to `True`.

### The mesh

`PolyhedraMesh` (in `polyhedra.mesh`) is a dataclass holding lists of ids and
connectivity for cells of dimension 0 to 3: `cell0ds_id`,
`cell0ds_coordinates`, `cell1ds_id`, `cell1ds_extrema`, `cell2ds_id`,
`cell2ds_vertices`, `cell2ds_edges`, `cell3ds_id`, `cell3ds_vertices`,
`cell3ds_edges` and `cell3ds_faces`. The methods `num_cell0ds()` to
`num_cell3ds()` give the number of cells of each dimension, and the
properties `cell2ds_num_vertices` and `cell2ds_num_edges` give the size of
each face.

### Mesh files

`import_mesh(polyhedron, directory=".")` reads four files named
`<polyhedron>_Cell0Ds.csv` to `<polyhedron>_Cell3Ds.csv`. The functions
`import_cell0ds` to `import_cell3ds` read one file each into an existing
mesh. Every file starts with a header line, which is skipped; blank lines are
ignored; the other lines hold whitespace-separated fields:

- `Cell0Ds`: `id x y z`
- `Cell1Ds`: `id origin end`
- `Cell2Ds`: `id nvertices v... nedges e...`
- `Cell3Ds`: `id nvertices v... nedges e... nfaces f...`

Vertex coordinates and edge extrema are stored at the position given by their
id, so those ids must be smaller than the number of rows. A file that cannot
be opened, has no data rows, or holds a missing, non-numeric, negative or
out-of-range value raises `MeshImportError`.

### Triangulation

`triangulate_type_one(b)` returns a `PolyhedraMesh` with the
`(b + 1)(b + 2) / 2` barycentric points `(i/b, j/b, k/b)`, `i + j + k = b`,
as vertices, `3b(b + 1) / 2` edges and `b²` triangular faces.
`triangulation_counts(b)` returns those three numbers. Both raise
`ValueError` when `b` is less than 1.

### UCD export

`export_points`, `export_segments`, `export_polygons` and `export_polyhedra`
write an ASCII UCD file that ParaView opens directly; `write_ucd_ascii`
writes arbitrary `UCDCell`s. Points are sequences of three coordinates.
Polygons must be triangles or quadrilaterals and polyhedra must be
tetrahedra; anything else raises `ValueError`. Point and cell properties are
given as `UCDProperty(label, unit_label, num_components, data)`, with `data`
holding `num_components` values per entity. A list of material ids with one
entry per cell may be passed; otherwise every cell gets material 0. A file
that cannot be written raises `OSError`.

## What it does not do

The package does not build the Platonic solids, their duals or geodesic
subdivisions of whole polyhedra: the command only classifies `{p, q}`, the
triangulation works on the single reference triangle, and meshes come only
from CSV files that already exist.