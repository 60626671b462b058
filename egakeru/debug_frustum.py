"""Line outline of a view frustum."""

from __future__ import annotations

import math

from egakeru.identifier import IdentifierRegistry
from egakeru.mathutils import INVALID_ID_32, Frustum, add, normalize, scale, sub
from egakeru.vertex_types import ColourVertex3D

_YELLOW = (1.0, 1.0, 0.0, 1.0)


class DebugFrustum:
    """Twelve yellow lines tracing the edges of a frustum."""

    def __init__(self, frustum: Frustum, registry: IdentifierRegistry) -> None:
        self._registry = registry
        self._vertices = [ColourVertex3D() for _ in range(2 * 12)]
        self._recalculate_lines(frustum)
        self.unique_id = registry.acquire(self)

    @property
    def vertices(self) -> tuple[ColourVertex3D, ...]:
        return tuple(self._vertices)

    def update(self, frustum: Frustum) -> None:
        """Redraw the lines for ``frustum``."""
        self._recalculate_lines(frustum)

    def destroy(self) -> None:
        """Give the outline's id back to the registry."""
        if self.unique_id != INVALID_ID_32:
            self._registry.release(self.unique_id)
            self.unique_id = INVALID_ID_32

    def _recalculate_lines(self, frustum: Frustum) -> None:
        half_v = frustum.far * math.tan(0.5 * frustum.fov)
        half_h = half_v * frustum.aspect

        half_right = scale(frustum.right, half_h)
        half_up = scale(frustum.up, half_v)
        forward = scale(frustum.forward, frustum.far)
        pos = frustum.position

        up_right = normalize(add(add(forward, half_right), half_up))
        up_left = normalize(add(sub(forward, half_right), half_up))
        down_right = normalize(sub(add(forward, half_right), half_up))
        down_left = normalize(sub(sub(forward, half_right), half_up))

        def near(direction):
            return add(pos, scale(direction, frustum.near))

        def far(direction):
            return add(pos, scale(direction, frustum.far))

        points = (
            near(up_right), far(up_right),
            near(down_right), far(down_right),
            near(up_left), far(up_left),
            near(down_left), far(down_left),
            near(up_right), near(up_left),
            near(up_left), near(down_left),
            near(down_left), near(down_right),
            near(down_right), near(up_right),
            far(up_right), far(up_left),
            far(up_left), far(down_left),
            far(down_left), far(down_right),
            far(down_right), far(up_right),
        )
        for vertex, point in zip(self._vertices, points, strict=True):
            vertex.position = (*point, 1.0)
            vertex.colour = _YELLOW