import pytest

from egakeru.identifier import IdentifierRegistry
from egakeru.mathutils import INVALID_ID_32


def test_ids_are_sequential():
    reg = IdentifierRegistry()
    ids = [reg.acquire(object()) for _ in range(3)]
    assert ids == [0, 1, 2]


def test_released_id_is_reused():
    reg = IdentifierRegistry()
    first = reg.acquire(object())
    reg.acquire(object())
    reg.release(first)
    assert reg.acquire(object()) == first


def test_owner_is_recorded_and_cleared():
    reg = IdentifierRegistry()
    owner = object()
    uid = reg.acquire(owner)
    assert reg.owner_of(uid) is owner
    reg.release(uid)
    assert reg.owner_of(uid) is None


def test_release_invalid_id_is_ignored():
    reg = IdentifierRegistry()
    owner = object()
    uid = reg.acquire(owner)
    reg.release(INVALID_ID_32)
    assert reg.owner_of(uid) is owner


def test_release_on_empty_registry_raises():
    with pytest.raises(KeyError):
        IdentifierRegistry().release(0)


def test_release_out_of_range_raises():
    reg = IdentifierRegistry()
    reg.acquire(object())
    with pytest.raises(KeyError):
        reg.release(5)


def test_none_owner_rejected():
    with pytest.raises(ValueError):
        IdentifierRegistry().acquire(None)