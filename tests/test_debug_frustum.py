import math

import pytest

from egakeru.debug_frustum import DebugFrustum
from egakeru.identifier import IdentifierRegistry
from egakeru.mathutils import INVALID_ID_32, Frustum, sub


def make_frustum(position=(0.0, 0.0, 0.0)):
    return Frustum(
        position,
        (0.0, 0.0, -1.0),
        (1.0, 0.0, 0.0),
        (0.0, 1.0, 0.0),
        1.5,
        math.radians(60.0),
        0.5,
        10.0,
    )


@pytest.fixture
def registry():
    return IdentifierRegistry()


def _distance(a, b):
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b)))


def test_all_lines_are_yellow(registry):
    outline = DebugFrustum(make_frustum(), registry)
    assert len(outline.vertices) == 24
    assert all(v.colour == (1.0, 1.0, 0.0, 1.0) for v in outline.vertices)


def test_corner_rays_span_near_to_far(registry):
    frustum = make_frustum()
    outline = DebugFrustum(frustum, registry)
    verts = outline.vertices
    for start, end in zip(verts[0:8:2], verts[1:8:2]):
        assert math.isclose(_distance(start.position[:3], frustum.position), frustum.near)
        assert math.isclose(_distance(end.position[:3], frustum.position), frustum.far)
        assert start.position[3] == end.position[3] == 1.0


def test_outline_is_symmetric_left_right(registry):
    outline = DebugFrustum(make_frustum(), registry)
    up_right = outline.vertices[1].position
    up_left = outline.vertices[5].position
    assert math.isclose(up_right[0], -up_left[0])
    assert math.isclose(up_right[1], up_left[1])


def test_update_follows_the_frustum(registry):
    outline = DebugFrustum(make_frustum(), registry)
    before = [v.position for v in outline.vertices]
    outline.update(make_frustum(position=(2.0, 3.0, 4.0)))
    after = [v.position for v in outline.vertices]
    for old, new in zip(before, after):
        delta = sub(new[:3], old[:3])
        assert all(math.isclose(d, e) for d, e in zip(delta, (2.0, 3.0, 4.0)))


def test_destroy_releases_id(registry):
    outline = DebugFrustum(make_frustum(), registry)
    old_id = outline.unique_id
    assert registry.owner_of(old_id) is outline
    outline.destroy()
    assert outline.unique_id == INVALID_ID_32
    assert registry.owner_of(old_id) is None