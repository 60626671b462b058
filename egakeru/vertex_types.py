"""Vertex layouts used by geometry."""

from __future__ import annotations

from dataclasses import dataclass

from egakeru.mathutils import Vector


@dataclass
class Vertex2D:
    """A 2D vertex with texture coordinates."""

    position: Vector = (0.0, 0.0)
    tex: Vector = (0.0, 0.0)


@dataclass
class Vertex3D:
    """A lit 3D vertex."""

    position: Vector = (0.0, 0.0, 0.0)
    normal: Vector = (0.0, 0.0, 0.0)
    tex: Vector = (0.0, 0.0)
    colour: Vector = (0.0, 0.0, 0.0, 0.0)
    tangent: Vector = (0.0, 0.0, 0.0, 0.0)


@dataclass
class ColourVertex3D:
    """A 3D vertex carrying a homogeneous position and an RGBA colour."""

    position: Vector = (0.0, 0.0, 0.0, 1.0)
    colour: Vector = (0.0, 0.0, 0.0, 1.0)