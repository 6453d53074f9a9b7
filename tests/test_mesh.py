from polyhedra.mesh import PolyhedraMesh


def test_empty_mesh_has_no_cells():
    mesh = PolyhedraMesh()
    assert mesh.num_cell0ds() == 0
    assert mesh.num_cell1ds() == 0
    assert mesh.num_cell2ds() == 0
    assert mesh.num_cell3ds() == 0


def test_counts_follow_ids():
    mesh = PolyhedraMesh(
        cell0ds_id=[0, 1, 2, 3],
        cell0ds_coordinates=[(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)],
        cell1ds_id=[0, 1, 2, 3, 4, 5],
        cell2ds_id=[0, 1, 2, 3],
        cell3ds_id=[0],
    )
    assert mesh.num_cell0ds() == len(mesh.cell0ds_id)
    assert mesh.num_cell1ds() == 6
    assert mesh.num_cell2ds() == 4
    assert mesh.num_cell3ds() == 1


def test_counts_update_when_appending():
    mesh = PolyhedraMesh()
    mesh.cell1ds_id.append(0)
    mesh.cell1ds_extrema.append((0, 1))
    assert mesh.num_cell1ds() == 1


def test_default_lists_are_independent():
    first = PolyhedraMesh()
    second = PolyhedraMesh()
    first.cell0ds_id.append(7)
    assert second.num_cell0ds() == 0
    assert first.num_cell0ds() == 1


def test_face_sizes_derived_from_vertices_and_edges():
    mesh = PolyhedraMesh(
        cell2ds_id=[0, 1],
        cell2ds_vertices=[[0, 1, 2], [0, 1, 2, 3]],
        cell2ds_edges=[[0, 1, 2], [3, 4, 5, 6]],
    )
    assert mesh.cell2ds_num_vertices == [3, 4]
    assert mesh.cell2ds_num_edges == [3, 4]