"""In-memory representation of a polyhedral mesh."""

from __future__ import annotations

from dataclasses import dataclass, field

Point3 = tuple[float, float, float]


@dataclass
class PolyhedraMesh:
    """Cells of dimension 0 to 3 that make up a polyhedron.

    Vertex coordinates and edge extrema are stored by cell id, so
    ``cell0ds_coordinates[i]`` belongs to the vertex whose id is ``i``.
    """

    cell0ds_id: list[int] = field(default_factory=list)
    cell0ds_coordinates: list[Point3] = field(default_factory=list)

    cell1ds_id: list[int] = field(default_factory=list)
    cell1ds_extrema: list[tuple[int, int]] = field(default_factory=list)

    cell2ds_id: list[int] = field(default_factory=list)
    cell2ds_vertices: list[list[int]] = field(default_factory=list)
    cell2ds_edges: list[list[int]] = field(default_factory=list)

    cell3ds_id: list[int] = field(default_factory=list)
    cell3ds_vertices: list[list[int]] = field(default_factory=list)
    cell3ds_edges: list[list[int]] = field(default_factory=list)
    cell3ds_faces: list[list[int]] = field(default_factory=list)

    def num_cell0ds(self) -> int:
        """Number of vertices."""
        return len(self.cell0ds_id)

    def num_cell1ds(self) -> int:
        """Number of edges."""
        return len(self.cell1ds_id)

    def num_cell2ds(self) -> int:
        """Number of faces."""
        return len(self.cell2ds_id)

    def num_cell3ds(self) -> int:
        """Number of polyhedra."""
        return len(self.cell3ds_id)

    @property
    def cell2ds_num_vertices(self) -> list[int]:
        """Number of vertices of each face."""
        return [len(vertices) for vertices in self.cell2ds_vertices]

    @property
    def cell2ds_num_edges(self) -> list[int]:
        """Number of edges of each face."""
        return [len(edges) for edges in self.cell2ds_edges]