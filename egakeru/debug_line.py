"""A single coloured line segment."""

from __future__ import annotations

from typing import Sequence

from egakeru.mathutils import Vector
from egakeru.vertex_types import ColourVertex3D


class DebugLine:
    """A line between two points, each end coloured independently."""

    def __init__(self, point_0: Sequence[float], point_1: Sequence[float]) -> None:
        self._vertices = [ColourVertex3D(), ColourVertex3D()]
        self.set_points(point_0, point_1)

    @property
    def vertices(self) -> tuple[ColourVertex3D, ...]:
        return tuple(self._vertices)

    @property
    def points(self) -> tuple[Vector, Vector]:
        return self._point_0, self._point_1

    def set_points(self, point_0: Sequence[float], point_1: Sequence[float]) -> None:
        """Move the line's end points."""
        self._point_0: Vector = tuple(float(c) for c in point_0)
        self._point_1: Vector = tuple(float(c) for c in point_1)
        if len(self._point_0) != 3 or len(self._point_1) != 3:
            raise ValueError("line end points need three components")
        self._vertices[0].position = (*self._point_0, 1.0)
        self._vertices[1].position = (*self._point_1, 1.0)

    def set_colour(self, colour: Sequence[float], vertex_index: int | None = None) -> None:
        """Colour one end of the line, or both when no index is given."""
        value = tuple(float(c) for c in colour)
        if vertex_index is None:
            for vertex in self._vertices:
                vertex.colour = value
            return
        if not 0 <= vertex_index < len(self._vertices):
            raise IndexError(f"vertex index {vertex_index} out of range")
        self._vertices[vertex_index].colour = value