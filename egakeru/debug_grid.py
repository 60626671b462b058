"""A tiled reference grid drawn as lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from egakeru.identifier import IdentifierRegistry
from egakeru.mathutils import INVALID_ID_32, Extent3D
from egakeru.vertex_types import ColourVertex3D

_ALT_LINE_COLOUR = (1.0, 1.0, 1.0, 0.5)


class Orientation(Enum):
    XY = "xy"
    YZ = "yz"
    ZX = "zx"


_ELEMENT_INDICES = {
    Orientation.XY: (0, 1, 2),
    Orientation.YZ: (1, 2, 0),
    Orientation.ZX: (2, 0, 1),
}


@dataclass
class GridConfiguration:
    name: str = ""
    orientation: Orientation = Orientation.XY
    tile_count_dim0: float = 1.0
    tile_count_dim1: float = 1.0
    tile_scale: float = 1.0
    use_third_axis: bool = False


class DebugGrid:
    """Axis lines plus tile lines laid out in one of the three axis planes."""

    def __init__(self, configuration: GridConfiguration, registry: IdentifierRegistry) -> None:
        self._registry = registry
        self.name = configuration.name
        self.orientation = configuration.orientation
        count0 = configuration.tile_count_dim0
        count1 = configuration.tile_count_dim1
        tile_scale = configuration.tile_scale

        e0, e1, e2 = _ELEMENT_INDICES[self.orientation]

        max0, max1 = count0 * tile_scale, count1 * tile_scale
        ext_min = [0.0, 0.0, 0.0]
        ext_max = [0.0, 0.0, 0.0]
        ext_min[e0], ext_max[e0] = -max0, max0
        ext_min[e1], ext_max[e1] = -max1, max1
        self.extents = Extent3D(min=tuple(ext_min), max=tuple(ext_max))

        vertex_count = int(((count0 * 2 + 1) * 2) + ((count1 * 2 + 1) * 2))
        if configuration.use_third_axis:
            vertex_count += 2
        start = 6 if configuration.use_third_axis else 4
        if vertex_count < start or (vertex_count - start) % 8:
            raise ValueError("tile counts do not produce a whole number of grid lines")

        positions = [[0.0, 0.0, 0.0, 1.0] for _ in range(vertex_count)]
        colours = [[0.0, 0.0, 0.0, 1.0] for _ in range(vertex_count)]

        length0 = count1 * tile_scale
        length1 = count0 * tile_scale
        length2 = max(length0, length1)

        positions[0][e0] = -length1
        colours[0][e0] = 1.0
        positions[1][e0] = length1
        colours[1][e0] = 1.0
        positions[2][e1] = length0
        colours[2][e1] = 1.0
        positions[3][e1] = -length0
        colours[3][e1] = 1.0

        if configuration.use_third_axis:
            positions[4][e2] = -length2
            colours[4][e2] = 1.0
            positions[5][e2] = length2
            colours[5][e2] = 1.0

        for j, i in enumerate(range(start, vertex_count, 8), start=1):
            offset = j * tile_scale
            lines = (
                (offset, length0), (offset, -length0),
                (-offset, length0), (-offset, -length0),
                (-length1, -offset), (length1, -offset),
                (-length1, offset), (length1, offset),
            )
            for k, (a, b) in enumerate(lines):
                positions[i + k][e0] = a
                positions[i + k][e1] = b
                colours[i + k] = list(_ALT_LINE_COLOUR)

        self._vertices = [
            ColourVertex3D(position=tuple(p), colour=tuple(c))
            for p, c in zip(positions, colours)
        ]
        self.unique_id = registry.acquire(self)

    @property
    def vertices(self) -> tuple[ColourVertex3D, ...]:
        return tuple(self._vertices)

    def destroy(self) -> None:
        """Give the grid's id back to the registry."""
        if self.unique_id != INVALID_ID_32:
            self._registry.release(self.unique_id)
            self.unique_id = INVALID_ID_32