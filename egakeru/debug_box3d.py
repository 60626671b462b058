"""A wireframe box used to visualise bounds."""

from __future__ import annotations

from typing import Sequence

from egakeru.identifier import IdentifierRegistry
from egakeru.mathutils import INVALID_ID_32, Extent3D, Vector, scale
from egakeru.vertex_types import ColourVertex3D

_LINE_COUNT = 12


class DebugBox3D:
    """Twelve line segments outlining an axis-aligned box."""

    def __init__(self, size: Sequence[float], registry: IdentifierRegistry) -> None:
        self.size: Vector = tuple(float(c) for c in size)
        if len(self.size) != 3:
            raise ValueError("a box size needs three components")
        self._registry = registry
        self._colour: Vector = (0.0, 0.0, 0.0, 1.0)
        self._vertices = [ColourVertex3D() for _ in range(2 * _LINE_COUNT)]
        self._extents = Extent3D(min=scale(self.size, -0.5), max=scale(self.size, 0.5))
        self._recalculate_extents()
        self.unique_id = registry.acquire(self)

    @property
    def vertices(self) -> tuple[ColourVertex3D, ...]:
        return tuple(self._vertices)

    @property
    def extents(self) -> Extent3D:
        return Extent3D(min=self._extents.min, max=self._extents.max)

    @property
    def colour(self) -> Vector:
        return self._colour

    def set_colour(self, colour: Sequence[float]) -> None:
        """Colour every line; a zero alpha is treated as fully opaque."""
        r, g, b, a = (float(c) for c in colour)
        if a == 0.0:
            a = 1.0
        self._colour = (r, g, b, a)
        for vertex in self._vertices:
            vertex.colour = self._colour

    def set_extents(self, extent: Extent3D) -> None:
        """Reshape the box to cover ``extent``."""
        self._extents = Extent3D(min=tuple(extent.min), max=tuple(extent.max))
        self._recalculate_extents()

    def destroy(self) -> None:
        """Give the box's id back to the registry."""
        if self.unique_id != INVALID_ID_32:
            self._registry.release(self.unique_id)
            self.unique_id = INVALID_ID_32

    def _recalculate_extents(self) -> None:
        (nx, ny, nz), (xx, xy, xz) = self._extents.min, self._extents.max
        corners = (
            (nx, ny, nz), (xx, ny, nz),
            (xx, ny, nz), (xx, xy, nz),
            (xx, xy, nz), (nx, xy, nz),
            (nx, ny, nz), (nx, xy, nz),
            (nx, ny, xz), (xx, ny, xz),
            (xx, ny, xz), (xx, xy, xz),
            (xx, xy, xz), (nx, xy, xz),
            (nx, ny, xz), (nx, xy, xz),
            (nx, ny, nz), (nx, ny, xz),
            (xx, ny, nz), (xx, ny, xz),
            (nx, xy, nz), (nx, xy, xz),
            (xx, xy, nz), (xx, xy, xz),
        )
        for vertex, corner in zip(self._vertices, corners, strict=True):
            vertex.position = (*corner, 1.0)