"""Loading of polyhedral meshes from the ``<name>_CellXDs.csv`` files."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator

from polyhedra.mesh import PolyhedraMesh


class MeshImportError(Exception):
    """Raised when a mesh file is missing, empty or malformed."""


class _Record:
    """Whitespace-separated values of one data line."""

    def __init__(self, tokens: list[str], where: str) -> None:
        self._tokens: Iterator[str] = iter(tokens)
        self._where = where

    def _next(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise MeshImportError(f"{self._where}: missing value") from None

    def integer(self) -> int:
        token = self._next()
        try:
            value = int(token)
        except ValueError:
            raise MeshImportError(f"{self._where}: '{token}' is not an integer") from None
        if value < 0:
            raise MeshImportError(f"{self._where}: '{token}' is negative")
        return value

    def real(self) -> float:
        token = self._next()
        try:
            return float(token)
        except ValueError:
            raise MeshImportError(f"{self._where}: '{token}' is not a number") from None

    def id_list(self) -> list[int]:
        count = self.integer()
        return [self.integer() for _ in range(count)]


def _cell_file(polyhedron: str, directory: str | os.PathLike, suffix: str) -> Path:
    return Path(directory) / f"{polyhedron}_{suffix}.csv"


def _read_records(path: Path, dimension: str) -> list[_Record]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as error:
        raise MeshImportError(f"File '{path}' cannot be opened") from error

    records = [
        _Record(line.split(), f"{path}:{number}")
        for number, line in enumerate(text.splitlines()[1:], start=2)
        if line.strip()
    ]
    if not records:
        raise MeshImportError(f"There is no cell {dimension}")
    return records


def _check_id(identifier: int, count: int, path: Path) -> None:
    if identifier >= count:
        raise MeshImportError(f"{path}: id {identifier} is out of range for {count} cells")


def import_cell0ds(
    mesh: PolyhedraMesh, polyhedron: str, directory: str | os.PathLike = "."
) -> None:
    """Read vertex ids and coordinates into ``mesh``."""
    path = _cell_file(polyhedron, directory, "Cell0Ds")
    records = _read_records(path, "0D")
    count = len(records)
    ids: list[int] = []
    coordinates: list[tuple[float, float, float]] = [(0.0, 0.0, 0.0)] * count
    for record in records:
        identifier = record.integer()
        _check_id(identifier, count, path)
        coordinates[identifier] = (record.real(), record.real(), record.real())
        ids.append(identifier)
    mesh.cell0ds_id = ids
    mesh.cell0ds_coordinates = coordinates


def import_cell1ds(
    mesh: PolyhedraMesh, polyhedron: str, directory: str | os.PathLike = "."
) -> None:
    """Read edge ids and their end points into ``mesh``."""
    path = _cell_file(polyhedron, directory, "Cell1Ds")
    records = _read_records(path, "1D")
    count = len(records)
    ids: list[int] = []
    extrema: list[tuple[int, int]] = [(0, 0)] * count
    for record in records:
        identifier = record.integer()
        _check_id(identifier, count, path)
        extrema[identifier] = (record.integer(), record.integer())
        ids.append(identifier)
    mesh.cell1ds_id = ids
    mesh.cell1ds_extrema = extrema


def import_cell2ds(
    mesh: PolyhedraMesh, polyhedron: str, directory: str | os.PathLike = "."
) -> None:
    """Read faces, with their vertex and edge ids, into ``mesh``."""
    path = _cell_file(polyhedron, directory, "Cell2Ds")
    records = _read_records(path, "2D")
    ids: list[int] = []
    vertices: list[list[int]] = []
    edges: list[list[int]] = []
    for record in records:
        ids.append(record.integer())
        vertices.append(record.id_list())
        edges.append(record.id_list())
    mesh.cell2ds_id = ids
    mesh.cell2ds_vertices = vertices
    mesh.cell2ds_edges = edges


def import_cell3ds(
    mesh: PolyhedraMesh, polyhedron: str, directory: str | os.PathLike = "."
) -> None:
    """Read polyhedra, with their vertex, edge and face ids, into ``mesh``."""
    path = _cell_file(polyhedron, directory, "Cell3Ds")
    records = _read_records(path, "3D")
    ids: list[int] = []
    vertices: list[list[int]] = []
    edges: list[list[int]] = []
    faces: list[list[int]] = []
    for record in records:
        ids.append(record.integer())
        vertices.append(record.id_list())
        edges.append(record.id_list())
        faces.append(record.id_list())
    mesh.cell3ds_id = ids
    mesh.cell3ds_vertices = vertices
    mesh.cell3ds_edges = edges
    mesh.cell3ds_faces = faces


def import_mesh(polyhedron: str, directory: str | os.PathLike = ".") -> PolyhedraMesh:
    """Load all four cell files of ``polyhedron`` found in ``directory``."""
    mesh = PolyhedraMesh()
    import_cell0ds(mesh, polyhedron, directory)
    import_cell1ds(mesh, polyhedron, directory)
    import_cell2ds(mesh, polyhedron, directory)
    import_cell3ds(mesh, polyhedron, directory)
    return mesh