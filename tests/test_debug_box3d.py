import pytest

from egakeru.debug_box3d import DebugBox3D
from egakeru.identifier import IdentifierRegistry
from egakeru.mathutils import INVALID_ID_32, Extent3D


@pytest.fixture
def registry():
    return IdentifierRegistry()


def test_extents_are_centred_on_origin(registry):
    box = DebugBox3D((2.0, 4.0, 6.0), registry)
    ext = box.extents
    assert ext.min == tuple(-c for c in ext.max)
    assert tuple(hi - lo for lo, hi in zip(ext.min, ext.max)) == (2.0, 4.0, 6.0)


def test_vertex_count_matches_twelve_lines(registry):
    box = DebugBox3D((1.0, 1.0, 1.0), registry)
    assert len(box.vertices) == 24


def test_every_vertex_is_a_corner(registry):
    box = DebugBox3D((2.0, 4.0, 6.0), registry)
    ext = box.extents
    for vertex in box.vertices:
        assert vertex.position[3] == 1.0
        for axis in range(3):
            assert vertex.position[axis] in (ext.min[axis], ext.max[axis])


def test_each_line_runs_along_one_axis(registry):
    box = DebugBox3D((2.0, 4.0, 6.0), registry)
    verts = box.vertices
    for start, end in zip(verts[0::2], verts[1::2]):
        differing = [a for a in range(3) if start.position[a] != end.position[a]]
        assert len(differing) == 1


def test_set_colour_with_zero_alpha_becomes_opaque(registry):
    box = DebugBox3D((1.0, 1.0, 1.0), registry)
    box.set_colour((1.0, 0.0, 0.0, 0.0))
    assert box.colour == (1.0, 0.0, 0.0, 1.0)
    assert all(v.colour == (1.0, 0.0, 0.0, 1.0) for v in box.vertices)


def test_set_colour_keeps_nonzero_alpha(registry):
    box = DebugBox3D((1.0, 1.0, 1.0), registry)
    box.set_colour((0.0, 1.0, 0.0, 0.5))
    assert all(v.colour == (0.0, 1.0, 0.0, 0.5) for v in box.vertices)


def test_set_extents_moves_vertices(registry):
    box = DebugBox3D((1.0, 1.0, 1.0), registry)
    new = Extent3D(min=(0.0, 0.0, 0.0), max=(3.0, 5.0, 7.0))
    box.set_extents(new)
    assert box.extents == new
    assert box.vertices[0].position == (0.0, 0.0, 0.0, 1.0)
    assert box.vertices[11].position == (3.0, 5.0, 7.0, 1.0)


def test_ids_are_unique_and_released(registry):
    first = DebugBox3D((1.0, 1.0, 1.0), registry)
    second = DebugBox3D((1.0, 1.0, 1.0), registry)
    assert first.unique_id != second.unique_id
    assert registry.owner_of(first.unique_id) is first
    old_id = first.unique_id
    first.destroy()
    assert first.unique_id == INVALID_ID_32
    assert registry.owner_of(old_id) is None


def test_bad_size_raises(registry):
    with pytest.raises(ValueError):
        DebugBox3D((1.0, 2.0), registry)