"""Per-key lists of input bindings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import Any, Callable

from egakeru.keys import Key


class Modifier(IntFlag):
    NONE = 0x0
    SHIFT = 0x1
    CONTROL = 0x2
    ALT = 0x4


class BindType(IntFlag):
    UNDEFINED = 0x0
    PRESS = 0x1
    RELEASE = 0x2
    HOLD = 0x4
    UNSET = 0x8


KeybindCallback = Callable[[Key, BindType, Modifier, Any], None]


@dataclass
class Binding:
    bind_type: BindType
    modifier: Modifier
    callback: KeybindCallback
    user_data: Any = None


class Keymap:
    """Holds, for each key code, the bindings attached to it in order."""

    def __init__(self) -> None:
        self.overrides_all = False
        self._entries: list[list[Binding]] = [[] for _ in range(Key.KEY_COUNT)]

    def _entry(self, key: int) -> list[Binding]:
        index = int(key)
        if not 0 <= index < len(self._entries):
            raise IndexError(f"key {key!r} has no keymap entry")
        return self._entries[index]

    def add_binding(
        self,
        key: Key,
        bind_type: BindType,
        modifier: Modifier,
        user_data: Any,
        callback: KeybindCallback,
    ) -> None:
        """Append a binding to the end of ``key``'s list."""
        self._entry(key).append(Binding(bind_type, modifier, callback, user_data))

    def remove_binding(
        self,
        key: Key,
        bind_type: BindType,
        modifier: Modifier,
        callback: KeybindCallback,
    ) -> bool:
        """Remove the first matching binding; returns whether one was found."""
        entry = self._entry(key)
        for index, binding in enumerate(entry):
            if (
                binding.callback == callback
                and binding.modifier == modifier
                and binding.bind_type == bind_type
            ):
                del entry[index]
                return True
        return False

    def bindings_for(self, key: Key) -> tuple[Binding, ...]:
        """Return the bindings attached to ``key``, oldest first."""
        return tuple(self._entry(key))