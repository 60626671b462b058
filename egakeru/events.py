"""Event codes, event payloads and a listener registry."""

from __future__ import annotations

import struct
from enum import IntEnum
from typing import Any, Callable

_KIND_COUNTS = {
    "q": 2,
    "Q": 2,
    "d": 2,
    "f": 4,
    "i": 4,
    "I": 4,
    "h": 8,
    "H": 8,
    "b": 16,
    "B": 16,
}


class EventCode(IntEnum):
    QUIT = 1
    KEY_UP = 2
    KEY_DOWN = 3
    MOUSE_UP = 4
    MOUSE_DOWN = 5
    MOUSE_MOVE = 6
    MOUSE_WHEEL = 7
    MOUSE_DRAG = 8
    MOUSE_DRAG_BEGIN = 9
    MOUSE_DRAG_END = 10
    RESIZE = 11
    RENDER_TARGET_REFRESH_REQUIRED = 12
    EVAR_CHANGED = 13
    DEBUG01 = 14
    DEBUG02 = 15
    DEBUG03 = 16
    RENDER_MODE = 17
    HOVER_ID_CHANGED = 18
    EVENT_CODE_SIZE = 19


class EventContext:
    """A 16-byte payload viewed as an array of one element type.

    The element type is named by a :mod:`struct` format code: ``q``/``Q``/``d``
    (two elements), ``f``/``i``/``I`` (four), ``h``/``H`` (eight) or ``b``/``B``
    (sixteen). Setting an element of a different type than the one held
    replaces the payload with a zeroed array of the new type.
    """

    def __init__(self) -> None:
        self._kind = "q"
        self._values: list[Any] = [0] * _KIND_COUNTS["q"]

    @property
    def kind(self) -> str:
        return self._kind

    @staticmethod
    def _count(kind: str) -> int:
        try:
            return _KIND_COUNTS[kind]
        except KeyError:
            raise ValueError(f"unsupported element kind {kind!r}") from None

    def get(self, kind: str, index: int) -> Any:
        count = self._count(kind)
        if kind != self._kind:
            raise TypeError(f"context holds {self._kind!r} elements, not {kind!r}")
        if not 0 <= index < count:
            raise IndexError(f"index {index} out of range for {count} elements")
        return self._values[index]

    def set(self, kind: str, index: int, value: Any) -> None:
        count = self._count(kind)
        if not 0 <= index < count:
            raise IndexError(f"index {index} out of range for {count} elements")
        fmt = "<" + kind
        try:
            (stored,) = struct.unpack(fmt, struct.pack(fmt, value))
        except struct.error as exc:
            raise ValueError(f"{value!r} does not fit element kind {kind!r}") from exc
        if kind != self._kind:
            zero = 0.0 if kind in "fd" else 0
            self._kind = kind
            self._values = [zero] * count
        self._values[index] = stored


Callback = Callable[[EventCode, Any, Any, EventContext], bool]


class EventSystem:
    """Routes fired events to the callbacks registered for their code."""

    def __init__(self) -> None:
        self._listeners: dict[EventCode, list[tuple[Any, Callback]]] = {
            code: [] for code in EventCode if code is not EventCode.EVENT_CODE_SIZE
        }

    def _entries(self, code: EventCode) -> list[tuple[Any, Callback]]:
        try:
            return self._listeners[EventCode(code)]
        except (KeyError, ValueError):
            raise ValueError(f"invalid event code {code!r}") from None

    def register(self, code: EventCode, listener: Any, callback: Callback) -> None:
        """Add ``callback`` for ``code`` on behalf of ``listener``."""
        self._entries(code).append((listener, callback))

    def unregister(self, code: EventCode, listener: Any, callback: Callback) -> None:
        """Remove every registration ``listener`` holds for ``code``.

        Registrations are identified by their listener alone.
        """
        entries = self._entries(code)
        kept = [entry for entry in entries if entry[0] is not listener]
        if len(kept) == len(entries):
            raise KeyError("attempted to remove an event that was not registered")
        entries[:] = kept

    def fire(self, code: EventCode, sender: Any, context: EventContext) -> bool:
        """Call the callbacks for ``code`` in order until one reports it handled.

        Returns whether a callback handled the event.
        """
        for listener, callback in list(self._entries(code)):
            if callback(EventCode(code), sender, listener, context):
                return True
        return False