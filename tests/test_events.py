import pytest

from egakeru.events import EventCode, EventContext, EventSystem


def test_context_round_trip_uint16():
    ctx = EventContext()
    ctx.set("H", 0, 257)
    assert ctx.get("H", 0) == 257
    assert ctx.kind == "H"


def test_context_default_holds_int64_zeros():
    ctx = EventContext()
    assert ctx.get("q", 0) == 0
    assert ctx.get("q", 1) == 0


def test_context_get_wrong_kind_raises():
    ctx = EventContext()
    ctx.set("I", 0, 800)
    with pytest.raises(TypeError):
        ctx.get("H", 0)


def test_context_kind_change_zeroes_other_elements():
    ctx = EventContext()
    ctx.set("I", 0, 800)
    ctx.set("I", 1, 600)
    ctx.set("h", 1, -4)
    assert ctx.get("h", 0) == 0
    assert ctx.get("h", 1) == -4


def test_context_same_kind_keeps_elements():
    ctx = EventContext()
    ctx.set("I", 0, 800)
    ctx.set("I", 1, 600)
    assert (ctx.get("I", 0), ctx.get("I", 1)) == (800, 600)


def test_context_float32_round_trip():
    ctx = EventContext()
    ctx.set("f", 3, 0.5)
    assert ctx.get("f", 3) == 0.5


def test_context_index_out_of_range():
    ctx = EventContext()
    with pytest.raises(IndexError):
        ctx.set("d", 2, 1.0)
    with pytest.raises(IndexError):
        ctx.get("q", 5)


def test_context_value_out_of_range():
    ctx = EventContext()
    with pytest.raises(ValueError):
        ctx.set("B", 0, 256)


def test_context_unknown_kind():
    ctx = EventContext()
    with pytest.raises(ValueError):
        ctx.set("z", 0, 1)


def test_fire_calls_callbacks_in_order():
    system = EventSystem()
    calls = []
    system.register(EventCode.KEY_DOWN, "a", lambda c, s, l, ctx: calls.append(l) or False)
    system.register(EventCode.KEY_DOWN, "b", lambda c, s, l, ctx: calls.append(l) or False)
    handled = system.fire(EventCode.KEY_DOWN, None, EventContext())
    assert calls == ["a", "b"]
    assert handled is False


def test_fire_stops_when_handled():
    system = EventSystem()
    calls = []

    def first(code, sender, listener, ctx):
        calls.append("first")
        return True

    def second(code, sender, listener, ctx):
        calls.append("second")
        return False

    system.register(EventCode.QUIT, None, first)
    system.register(EventCode.QUIT, None, second)
    assert system.fire(EventCode.QUIT, None, EventContext()) is True
    assert calls == ["first"]


def test_fire_passes_arguments():
    system = EventSystem()
    seen = []
    system.register(
        EventCode.RESIZE, "listener", lambda c, s, l, ctx: seen.append((c, s, l, ctx.get("I", 0))) or False
    )
    ctx = EventContext()
    ctx.set("I", 0, 1024)
    system.fire(EventCode.RESIZE, "sender", ctx)
    assert seen == [(EventCode.RESIZE, "sender", "listener", 1024)]


def test_unregister_removes_listener():
    system = EventSystem()
    calls = []

    def cb(code, sender, listener, ctx):
        calls.append(listener)
        return True

    owner = object()
    system.register(EventCode.MOUSE_MOVE, owner, cb)
    assert system.fire(EventCode.MOUSE_MOVE, None, EventContext()) is True
    system.unregister(EventCode.MOUSE_MOVE, owner, cb)
    assert system.fire(EventCode.MOUSE_MOVE, None, EventContext()) is False
    assert calls == [owner]


def test_unregister_unknown_raises():
    system = EventSystem()
    with pytest.raises(KeyError):
        system.unregister(EventCode.MOUSE_MOVE, object(), lambda *a: False)


def test_codes_are_separate():
    system = EventSystem()
    calls = []
    system.register(EventCode.KEY_UP, None, lambda *a: calls.append(1) or False)
    system.fire(EventCode.KEY_DOWN, None, EventContext())
    assert calls == []