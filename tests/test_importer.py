import pytest

from polyhedra.importer import (
    MeshImportError,
    import_cell0ds,
    import_cell1ds,
    import_cell2ds,
    import_cell3ds,
    import_mesh,
)
from polyhedra.mesh import PolyhedraMesh

CELL0 = """Id X Y Z
0 1.0 1.0 1.0
2 -1.0 1.0 -1.0
1 1.0 -1.0 -1.0
3 -1.0 -1.0 1.0
"""

CELL1 = """Id Origin End
0 0 1
1 1 2
2 2 0
3 0 3
4 1 3
5 2 3
"""

CELL2 = """Id NumVertices Vertices NumEdges Edges
0 3 0 1 2 3 0 1 2
1 3 0 1 3 3 0 4 3
2 3 1 2 3 3 1 5 4
3 3 2 0 3 3 2 3 5
"""

CELL3 = """Id NumVertices Vertices NumEdges Edges NumFaces Faces
0 4 0 1 2 3 6 0 1 2 3 4 5 4 0 1 2 3
"""


def _write(directory, name, cell0=CELL0, cell1=CELL1, cell2=CELL2, cell3=CELL3):
    for suffix, text in (
        ("Cell0Ds", cell0),
        ("Cell1Ds", cell1),
        ("Cell2Ds", cell2),
        ("Cell3Ds", cell3),
    ):
        (directory / f"{name}_{suffix}.csv").write_text(text, encoding="utf-8")


@pytest.fixture
def tetra_dir(tmp_path):
    _write(tmp_path, "Tetraedro")
    return tmp_path


def test_cell0ds_coordinates_stored_by_id(tetra_dir):
    mesh = PolyhedraMesh()
    import_cell0ds(mesh, "Tetraedro", tetra_dir)
    assert mesh.cell0ds_id == [0, 2, 1, 3]
    assert mesh.cell0ds_coordinates[2] == (-1.0, 1.0, -1.0)
    assert mesh.cell0ds_coordinates[1] == (1.0, -1.0, -1.0)
    assert mesh.num_cell0ds() == 4


def test_cell1ds_extrema(tetra_dir):
    mesh = PolyhedraMesh()
    import_cell1ds(mesh, "Tetraedro", tetra_dir)
    assert mesh.cell1ds_id == [0, 1, 2, 3, 4, 5]
    assert mesh.cell1ds_extrema[4] == (1, 3)
    assert mesh.num_cell1ds() == 6


def test_cell2ds_faces(tetra_dir):
    mesh = PolyhedraMesh()
    import_cell2ds(mesh, "Tetraedro", tetra_dir)
    assert mesh.cell2ds_vertices[1] == [0, 1, 3]
    assert mesh.cell2ds_edges[2] == [1, 5, 4]
    assert mesh.cell2ds_num_vertices == [3, 3, 3, 3]
    assert mesh.cell2ds_num_edges == [3, 3, 3, 3]


def test_cell3ds_polyhedron(tetra_dir):
    mesh = PolyhedraMesh()
    import_cell3ds(mesh, "Tetraedro", tetra_dir)
    assert mesh.cell3ds_id == [0]
    assert mesh.cell3ds_vertices == [[0, 1, 2, 3]]
    assert mesh.cell3ds_edges == [[0, 1, 2, 3, 4, 5]]
    assert mesh.cell3ds_faces == [[0, 1, 2, 3]]


def test_import_mesh_reads_everything(tetra_dir):
    mesh = import_mesh("Tetraedro", tetra_dir)
    assert mesh.num_cell0ds() == 4
    assert mesh.num_cell1ds() == 6
    assert mesh.num_cell2ds() == 4
    assert mesh.num_cell3ds() == 1
    for origin, end in mesh.cell1ds_extrema:
        assert origin in mesh.cell0ds_id and end in mesh.cell0ds_id


def test_missing_file(tmp_path):
    with pytest.raises(MeshImportError, match="cannot be opened"):
        import_mesh("Cubo", tmp_path)


def test_header_only_file(tmp_path):
    _write(tmp_path, "Tetraedro", cell1="Id Origin End\n")
    mesh = PolyhedraMesh()
    with pytest.raises(MeshImportError, match="There is no cell 1D"):
        import_cell1ds(mesh, "Tetraedro", tmp_path)


def test_empty_file(tmp_path):
    _write(tmp_path, "Tetraedro", cell0="")
    with pytest.raises(MeshImportError, match="There is no cell 0D"):
        import_mesh("Tetraedro", tmp_path)


def test_malformed_value(tmp_path):
    _write(tmp_path, "Tetraedro", cell0="Id X Y Z\n0 1.0 abc 1.0\n")
    mesh = PolyhedraMesh()
    with pytest.raises(MeshImportError, match="not a number"):
        import_cell0ds(mesh, "Tetraedro", tmp_path)


def test_missing_value(tmp_path):
    _write(tmp_path, "Tetraedro", cell2="Id\n0 3 0 1\n")
    mesh = PolyhedraMesh()
    with pytest.raises(MeshImportError, match="missing value"):
        import_cell2ds(mesh, "Tetraedro", tmp_path)


def test_id_out_of_range(tmp_path):
    _write(tmp_path, "Tetraedro", cell1="Id Origin End\n5 0 1\n")
    mesh = PolyhedraMesh()
    with pytest.raises(MeshImportError, match="out of range"):
        import_cell1ds(mesh, "Tetraedro", tmp_path)