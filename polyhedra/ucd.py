"""Export of points, segments, polygons and polyhedra in the ASCII UCD format."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from typing import Sequence

Points = Sequence[Sequence[float]]


class CellType(enum.Enum):
    """Kinds of UCD cells."""

    UNKNOWN = -1
    POINT = 0
    LINE = 1
    TRIANGLE = 2
    QUADRILATERAL = 3
    HEXAHEDRON = 4
    PRISM = 5
    TETRAHEDRON = 6
    PYRAMID = 7


_LABELS = {
    CellType.LINE: "line",
    CellType.TRIANGLE: "tri",
    CellType.QUADRILATERAL: "quad",
    CellType.HEXAHEDRON: "hex",
    CellType.PRISM: "prism",
    CellType.TETRAHEDRON: "tet",
    CellType.PYRAMID: "pyr",
    CellType.POINT: "pt",
}


@dataclass(frozen=True)
class UCDProperty:
    """A named field attached to points or cells.

    ``data`` holds ``num_components`` values per entity, entity after entity.
    """

    label: str
    unit_label: str
    num_components: int
    data: Sequence[float]

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class UCDCell:
    """A cell: its type, the ids of its points and its material."""

    type: CellType
    point_ids: tuple[int, ...] = field(default_factory=tuple)
    material_id: int = 0

    def label(self) -> str:
        """The UCD keyword for this cell's type."""
        try:
            return _LABELS[self.type]
        except KeyError:
            raise ValueError("Type not supported") from None


def _material(materials: Sequence[int] | None, count: int, index: int) -> int:
    if materials is not None and len(materials) == count:
        return int(materials[index])
    return 0


def point_cells(points: Points, materials: Sequence[int] | None = None) -> list[UCDCell]:
    """One point cell per point."""
    count = len(points)
    return [
        UCDCell(CellType.POINT, (index,), _material(materials, count, index))
        for index in range(count)
    ]


def line_cells(
    lines: Sequence[Sequence[int]], materials: Sequence[int] | None = None
) -> list[UCDCell]:
    """One line cell per pair of point ids."""
    count = len(lines)
    return [
        UCDCell(CellType.LINE, (int(line[0]), int(line[1])), _material(materials, count, index))
        for index, line in enumerate(lines)
    ]


def polygon_cells(
    polygons: Sequence[Sequence[int]], materials: Sequence[int] | None = None
) -> list[UCDCell]:
    """Triangle and quadrilateral cells; other polygons are rejected."""
    count = len(polygons)
    cells = []
    for index, vertices in enumerate(polygons):
        if len(vertices) == 3:
            kind = CellType.TRIANGLE
        elif len(vertices) == 4:
            kind = CellType.QUADRILATERAL
        else:
            raise ValueError("Polygon type not supported")
        cells.append(UCDCell(kind, tuple(int(v) for v in vertices), _material(materials, count, index)))
    return cells


def polyhedra_cells(
    polyhedra: Sequence[Sequence[int]], materials: Sequence[int] | None = None
) -> list[UCDCell]:
    """Tetrahedron cells; other polyhedra are rejected."""
    count = len(polyhedra)
    cells = []
    for index, vertices in enumerate(polyhedra):
        if len(vertices) != 4:
            raise ValueError("Polyhedron type not supported")
        cells.append(
            UCDCell(CellType.TETRAHEDRON, tuple(int(v) for v in vertices), _material(materials, count, index))
        )
    return cells


def _number(value: float) -> str:
    return f"{float(value):.16e}"


def _property_lines(properties: Sequence[UCDProperty], count: int) -> list[str]:
    if not properties:
        return []
    lines = [" ".join([str(len(properties))] + [str(prop.num_components) for prop in properties])]
    lines.extend(f"{prop.label}, {prop.unit_label}" for prop in properties)
    for entity in range(count):
        values = [
            _number(prop.data[prop.num_components * entity + component])
            for prop in properties
            for component in range(prop.num_components)
        ]
        lines.append(" ".join([str(entity + 1)] + values))
    return lines


def write_ucd_ascii(
    path: str | os.PathLike,
    points: Points,
    point_properties: Sequence[UCDProperty],
    cells: Sequence[UCDCell],
    cell_properties: Sequence[UCDProperty],
) -> None:
    """Write points, cells and their properties to an ASCII UCD file."""
    lines = [f"{len(points)} {len(cells)} {len(point_properties)} {len(cell_properties)} 0"]
    for index, point in enumerate(points):
        lines.append(" ".join([str(index + 1)] + [_number(point[axis]) for axis in range(3)]))
    for index, cell in enumerate(cells):
        lines.append(
            " ".join(
                [str(index + 1), str(cell.material_id), cell.label()]
                + [str(pid + 1) for pid in cell.point_ids]
            )
        )
    lines.extend(_property_lines(point_properties, len(points)))
    lines.extend(_property_lines(cell_properties, len(cells)))

    try:
        with open(path, "w", encoding="utf-8", newline="\n") as handle:
            handle.writelines(line + "\n" for line in lines)
    except OSError as error:
        raise OSError(f"File '{os.fspath(path)}' cannot be opened") from error


def export_points(
    path: str | os.PathLike,
    points: Points,
    points_properties: Sequence[UCDProperty] = (),
    materials: Sequence[int] | None = None,
) -> None:
    """Export points, each as a point cell carrying the given properties."""
    write_ucd_ascii(path, points, (), point_cells(points, materials), points_properties)


def export_segments(
    path: str | os.PathLike,
    points: Points,
    segments: Sequence[Sequence[int]],
    points_properties: Sequence[UCDProperty] = (),
    segments_properties: Sequence[UCDProperty] = (),
    materials: Sequence[int] | None = None,
) -> None:
    """Export segments between points."""
    write_ucd_ascii(path, points, points_properties, line_cells(segments, materials), segments_properties)


def export_polygons(
    path: str | os.PathLike,
    points: Points,
    polygons: Sequence[Sequence[int]],
    points_properties: Sequence[UCDProperty] = (),
    polygons_properties: Sequence[UCDProperty] = (),
    materials: Sequence[int] | None = None,
) -> None:
    """Export triangles and quadrilaterals."""
    write_ucd_ascii(path, points, points_properties, polygon_cells(polygons, materials), polygons_properties)


def export_polyhedra(
    path: str | os.PathLike,
    points: Points,
    polyhedra: Sequence[Sequence[int]],
    points_properties: Sequence[UCDProperty] = (),
    polyhedra_properties: Sequence[UCDProperty] = (),
    materials: Sequence[int] | None = None,
) -> None:
    """Export tetrahedra."""
    write_ucd_ascii(path, points, points_properties, polyhedra_cells(polyhedra, materials), polyhedra_properties)