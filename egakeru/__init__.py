"""Engine building blocks: 3D math, events, ids, a ring queue, keymaps, debug line geometry, an editor gizmo and a debug console."""

__version__ = "0.1.0"