"""Type I subdivision of a triangular face."""

from __future__ import annotations

from polyhedra.mesh import PolyhedraMesh


def _check(b: int) -> None:
    if b < 1:
        raise ValueError("the subdivision parameter b must be at least 1")


def triangulation_counts(b: int) -> tuple[int, int, int]:
    """Numbers of vertices, edges and faces of a triangle split with parameter ``b``."""
    _check(b)
    return (b + 1) * (b + 2) // 2, 3 * b * (b + 1) // 2, b * b


def triangulate_type_one(b: int) -> PolyhedraMesh:
    """Split the reference triangle into ``b * b`` triangles.

    Vertices are the barycentric points ``(i/b, j/b, k/b)`` with ``i + j + k = b``.
    """
    _check(b)
    mesh = PolyhedraMesh()

    index: dict[tuple[int, int], int] = {}
    for i in range(b + 1):
        for j in range(b + 1 - i):
            k = b - i - j
            vertex_id = len(mesh.cell0ds_id)
            index[i, j] = vertex_id
            mesh.cell0ds_id.append(vertex_id)
            mesh.cell0ds_coordinates.append((i / b, j / b, k / b))

    edge_ids: dict[tuple[int, int], int] = {}

    def edge(u: int, v: int) -> int:
        key = (min(u, v), max(u, v))
        if key not in edge_ids:
            edge_id = len(mesh.cell1ds_id)
            edge_ids[key] = edge_id
            mesh.cell1ds_id.append(edge_id)
            mesh.cell1ds_extrema.append((u, v))
        return edge_ids[key]

    triangles: list[tuple[int, int, int]] = []
    for i in range(b):
        for j in range(b - i):
            triangles.append((index[i, j], index[i + 1, j], index[i, j + 1]))
            if i + j < b - 1:
                triangles.append((index[i + 1, j], index[i + 1, j + 1], index[i, j + 1]))

    for face_id, (first, second, third) in enumerate(triangles):
        mesh.cell2ds_id.append(face_id)
        mesh.cell2ds_vertices.append([first, second, third])
        mesh.cell2ds_edges.append([edge(first, second), edge(second, third), edge(third, first)])

    return mesh