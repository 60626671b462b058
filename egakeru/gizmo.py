"""The editor gizmo: handle geometry, hover highlighting and drag maths."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Mapping, Sequence

from egakeru.identifier import IdentifierRegistry
from egakeru.mathutils import (
    INVALID_ID_8,
    INVALID_ID_32,
    Extent3D,
    Plane,
    Vector,
    dot,
    scale,
)
from egakeru.vertex_types import ColourVertex3D

SEGMENT_COUNT = 32

_YELLOW: Vector = (1.0, 1.0, 0.0, 1.0)
_RED: Vector = (1.0, 0.0, 0.0, 1.0)
_GREEN: Vector = (0.0, 1.0, 0.0, 1.0)
_BLUE: Vector = (0.0, 0.0, 1.0, 1.0)
_GRAY: Vector = (0.6, 0.6, 0.6, 1.0)
_ZERO3: Vector = (0.0, 0.0, 0.0)

_UNIT_AXES: tuple[Vector, Vector, Vector] = (
    (1.0, 0.0, 0.0),
    (0.0, 1.0, 0.0),
    (0.0, 0.0, 1.0),
)

# Axis handle index -> local normal of the plane a drag moves in.
_INTERACTION_NORMALS: dict[int, Vector] = {
    0: (0.0, 1.0, 0.0),
    5: (0.0, 1.0, 0.0),
    1: (0.0, 0.0, 1.0),
    3: (0.0, 0.0, 1.0),
    2: (1.0, 0.0, 0.0),
    4: (1.0, 0.0, 0.0),
}


class GizmoMode(Enum):
    NONE = "none"
    MOVE = "move"
    ROTATE = "rotate"
    SCALE = "scale"


class InteractionType(IntEnum):
    NONE = 0
    MOUSE_HOVER = 1
    MOUSE_DOWN = 2
    MOUSE_DRAG = 3
    MOUSE_UP = 4
    CANCEL = 5


@dataclass
class GizmoData:
    """Geometry and interaction state for one gizmo mode."""

    vertices: list[ColourVertex3D] = field(default_factory=list)
    extents: list[Extent3D] = field(default_factory=list)
    current_axis_index: int = INVALID_ID_8
    interaction_plane: Plane | None = None
    interaction_start: Vector = _ZERO3
    last_interaction_point: Vector = _ZERO3


def _axis_colour(axis: int) -> Vector:
    colour = [0.0, 0.0, 0.0, 1.0]
    colour[axis] = 1.0
    return tuple(colour)


def _paint(vertices: Sequence[ColourVertex3D], indices: Sequence[int], colour: Vector) -> None:
    for index in indices:
        vertices[index].colour = colour


def _axis_lines(axis_length: float) -> list[ColourVertex3D]:
    vertices = []
    for axis in range(3):
        start = [0.0, 0.0, 0.0, 1.0]
        start[axis] = 0.2
        end = [0.0, 0.0, 0.0, 1.0]
        end[axis] = axis_length
        colour = _axis_colour(axis)
        vertices.append(ColourVertex3D(position=tuple(start), colour=colour))
        vertices.append(ColourVertex3D(position=tuple(end), colour=colour))
    return vertices


def _axis_boxes(inner: float) -> list[Extent3D]:
    small = 0.1
    return [
        Extent3D(min=(inner, -small, -small), max=(2.1, small, small)),
        Extent3D(min=(-small, inner, -small), max=(small, 2.1, small)),
        Extent3D(min=(-small, -small, inner), max=(small, small, 2.1)),
    ]


def _centre_box() -> Extent3D:
    return Extent3D(min=(-0.1, -0.1, -0.1), max=(0.1, 0.1, 0.1))


class Gizmo:
    """Handles for moving, rotating and scaling a selected object."""

    scale_factor: float = 0.0

    def __init__(self, registry: IdentifierRegistry) -> None:
        self._registry = registry
        self._mode = GizmoMode.NONE
        self._mode_data: dict[GizmoMode, GizmoData] = {
            GizmoMode.NONE: self._setup_none(),
            GizmoMode.MOVE: self._setup_move(),
            GizmoMode.ROTATE: self._setup_rotate(),
            GizmoMode.SCALE: self._setup_scale(),
        }
        self.unique_id = registry.acquire(self)

    @property
    def mode(self) -> GizmoMode:
        return self._mode

    @property
    def mode_data(self) -> Mapping[GizmoMode, GizmoData]:
        return MappingProxyType(self._mode_data)

    @property
    def data(self) -> GizmoData:
        """State of the current mode."""
        return self._mode_data[self._mode]

    @classmethod
    def set_scale(cls, scale: float) -> None:
        """Set the on-screen scale shared by every gizmo."""
        cls.scale_factor = float(scale)

    def destroy(self) -> None:
        """Drop all mode geometry and give the id back to the registry."""
        self._mode_data.clear()
        if self.unique_id != INVALID_ID_32:
            self._registry.release(self.unique_id)
            self.unique_id = INVALID_ID_32

    def set_mode(self, mode: GizmoMode) -> None:
        self._mode = GizmoMode(mode)

    def highlight(self, axis: int) -> bool:
        """Mark handle ``axis`` as hovered in the current mode.

        ``INVALID_ID_8`` clears the hover. Returns whether the colours changed.
        """
        if self._mode is GizmoMode.NONE:
            return False
        data = self._mode_data[self._mode]
        limit = 3 if self._mode is GizmoMode.ROTATE else len(data.extents)
        if axis != INVALID_ID_8 and not 0 <= axis < limit:
            raise ValueError(f"axis {axis} is not a handle of the {self._mode.value} gizmo")
        if data.current_axis_index == axis:
            return False
        data.current_axis_index = axis
        if self._mode is GizmoMode.MOVE:
            self._highlight_move(data.vertices, axis)
        elif self._mode is GizmoMode.SCALE:
            self._highlight_scale(data.vertices, axis)
        else:
            self._highlight_rotate(data.vertices, axis)
        return True

    def interaction_normal(self) -> Vector | None:
        """Local normal of the plane a drag of the hovered handle moves in."""
        if self._mode not in (GizmoMode.MOVE, GizmoMode.SCALE):
            return None
        return _INTERACTION_NORMALS.get(self.data.current_axis_index)

    def drag_delta(self, diff: Sequence[float]) -> Vector:
        """Translation a drag by ``diff`` applies for the hovered handle."""
        diff = tuple(float(c) for c in diff)
        if len(diff) != 3:
            raise ValueError("a drag difference needs three components")
        if self._mode not in (GizmoMode.MOVE, GizmoMode.SCALE):
            return _ZERO3
        axis = self.data.current_axis_index
        if axis in (0, 1, 2):
            direction = _UNIT_AXES[axis]
            return scale(direction, dot(diff, direction))
        if axis in (3, 4, 5, 6):
            return diff
        return _ZERO3

    @staticmethod
    def _highlight_axes(vertices: list[ColourVertex3D], axis: int) -> None:
        for j in range(3):
            colour = _YELLOW if j == axis else _axis_colour(j)
            _paint(vertices, (2 * j, 2 * j + 1), colour)

    def _highlight_move(self, vertices: list[ColourVertex3D], axis: int) -> None:
        self._highlight_axes(vertices, axis)
        if axis == 3:
            _paint(vertices, (6, 7, 10, 11), _YELLOW)
        else:
            _paint(vertices, (6, 7), _RED)
            _paint(vertices, (10, 11), _GREEN)
        if axis == 4:
            _paint(vertices, (12, 13, 16, 17), _YELLOW)
        else:
            _paint(vertices, (12, 13), _GREEN)
            _paint(vertices, (16, 17), _BLUE)
        if axis == 5:
            _paint(vertices, (14, 15, 8, 9), _YELLOW)
        else:
            _paint(vertices, (14, 15), _BLUE)
            _paint(vertices, (8, 9), _RED)
        if axis == 6:
            _paint(vertices, range(len(vertices)), _YELLOW)

    def _highlight_scale(self, vertices: list[ColourVertex3D], axis: int) -> None:
        self._highlight_axes(vertices, axis)
        if axis == 3:
            _paint(vertices, range(len(vertices)), _YELLOW)
        else:
            _paint(vertices, (6, 7), _RED)
            _paint(vertices, (8, 9), _GREEN)
            _paint(vertices, (10, 11), _BLUE)

    @staticmethod
    def _highlight_rotate(vertices: list[ColourVertex3D], axis: int) -> None:
        per_ring = 2 * SEGMENT_COUNT
        for index, vertex in enumerate(vertices):
            vertex.colour = _axis_colour(index // per_ring)
        if axis != INVALID_ID_8:
            _paint(vertices, range(axis * per_ring, (axis + 1) * per_ring), _YELLOW)

    @staticmethod
    def _setup_none() -> GizmoData:
        vertices = []
        for axis in _UNIT_AXES:
            vertices.append(ColourVertex3D(position=(0.0, 0.0, 0.0, 1.0), colour=_GRAY))
            vertices.append(ColourVertex3D(position=(*axis, 1.0), colour=_GRAY))
        return GizmoData(vertices=vertices)

    @staticmethod
    def _setup_move() -> GizmoData:
        vertices = _axis_lines(2.0)
        a = 0.4
        planes = (
            ((a, 0.0, 0.0), (a, a, 0.0), _RED),
            ((a, 0.0, 0.0), (a, 0.0, a), _RED),
            ((0.0, a, 0.0), (a, a, 0.0), _GREEN),
            ((0.0, a, 0.0), (0.0, a, a), _GREEN),
            ((0.0, 0.0, a), (a, 0.0, a), _BLUE),
            ((0.0, 0.0, a), (0.0, a, a), _BLUE),
        )
        for start, end, colour in planes:
            vertices.append(ColourVertex3D(position=(*start, 1.0), colour=colour))
            vertices.append(ColourVertex3D(position=(*end, 1.0), colour=colour))
        extents = _axis_boxes(a) + [
            Extent3D(min=_ZERO3, max=(a, a, 0.1)),
            Extent3D(min=_ZERO3, max=(0.1, a, a)),
            Extent3D(min=_ZERO3, max=(a, 0.1, a)),
            _centre_box(),
        ]
        return GizmoData(vertices=vertices, extents=extents)

    @staticmethod
    def _setup_scale() -> GizmoData:
        vertices = _axis_lines(2.0)
        a = 0.4
        links = (
            ((a, 0.0, 0.0), _RED),
            ((0.0, a, 0.0), _GREEN),
            ((0.0, a, 0.0), _GREEN),
            ((0.0, 0.0, a), _BLUE),
            ((0.0, 0.0, a), _BLUE),
            ((a, 0.0, 0.0), _RED),
        )
        for position, colour in links:
            vertices.append(ColourVertex3D(position=(*position, 1.0), colour=colour))
        extents = _axis_boxes(a) + [_centre_box()]
        return GizmoData(vertices=vertices, extents=extents)

    @staticmethod
    def _setup_rotate() -> GizmoData:
        step = 2.0 * math.pi / SEGMENT_COUNT
        rings = (
            (lambda s, c: (0.0, s, c), _RED),
            (lambda s, c: (s, 0.0, c), _GREEN),
            (lambda s, c: (c, s, 0.0), _BLUE),
        )
        vertices = []
        for place, colour in rings:
            for i in range(SEGMENT_COUNT):
                for k in (i, i + 1):
                    angle = k * step
                    point = place(math.sin(angle), math.cos(angle))
                    vertices.append(ColourVertex3D(position=(*point, 1.0), colour=colour))
        return GizmoData(vertices=vertices)