# egakeru

Renderer-independent building blocks for a small 3D engine, in plain Python with no third-party dependencies.

## Modules

- `egakeru.mathutils`: tuple-based vector helpers (`add`, `sub`, `scale`, `dot`, `cross`, `normalize`; `normalize` raises `ValueError` on a zero-length vector), `Extent2D` and `Extent3D`, `Plane` (`Plane.create`, `signed_distance`, `intersects_sphere`, `intersects_aabb`) and `Frustum`, built from a position, forward/right/up axes, aspect, field of view and near/far distances, with `intersects_sphere` and `intersects_aabb` culling tests. Also `trim`, `get_aligned`, `convert_range`, `rgb_to_u32`, `u32_to_rgb`, `rgbu_to_float3` and the `INVALID_ID_*` sentinels.
- `egakeru.vertex_types`: the dataclasses `Vertex2D`, `Vertex3D` and `ColourVertex3D`.
- `egakeru.keys`: the `Key` enumeration of keyboard codes.
- `egakeru.events`: `EventCode`, `EventContext` and `EventSystem`.
  - `EventContext` is a 16-byte payload read and written as a typed array named by a `struct` format code (`q`, `Q`, `d`, `f`, `i`, `I`, `h`, `H`, `b`, `B`). Setting an element of another type replaces the payload with a zeroed array of that type.
  - `EventSystem.fire` calls the callbacks for a code in order until one returns true, and reports whether one did.
  - `EventSystem.unregister` removes every registration of a listener for a code, and raises `KeyError` if there was none.
- `egakeru.identifier`: `IdentifierRegistry`.
  - `acquire` hands out the lowest free id.
  - `release` frees an id, and raises `KeyError` for an id that was never handed out.
  - `owner_of` returns the object holding an id.
- `egakeru.ring_queue`: `RingQueue`, a fixed-capacity FIFO queue. `enqueue` raises `OverflowError` when the queue is full, and `dequeue`/`peek` raise `IndexError` when it is empty.
- `egakeru.keymap`: `Keymap`, `Binding`, `Modifier` and `BindType`. Each key holds an ordered list of bindings. `remove_binding` returns whether a matching binding was removed.
- Debug geometry that builds line-list `ColourVertex3D` vertices:
  - `egakeru.debug_box3d.DebugBox3D`: 12 box edges, with `set_colour` and `set_extents`.
  - `egakeru.debug_frustum.DebugFrustum`: a frustum outline, with `update`.
  - `egakeru.debug_grid.DebugGrid`: configured by `GridConfiguration` and `Orientation`.
  - `egakeru.debug_line.DebugLine`: a single line segment.

  The box, frustum and grid take an `IdentifierRegistry` and give their id back on `destroy`.
- `egakeru.gizmo`: `Gizmo`, with `GizmoMode`, `InteractionType` and `GizmoData`.
  - It builds handle geometry and hit boxes for the none, move, rotate and scale modes.
  - `highlight` recolours the hovered handle.
  - `interaction_normal` gives the local normal of the drag plane.
  - `drag_delta` turns a drag difference into a translation, limited to one axis for axis handles.
  - `Gizmo.set_scale` sets the scale factor that every gizmo shares.
- `egakeru.debug_console`: `DebugConsole` and `key_to_char`.
  - `write` adds output lines.
  - `display_text` returns the visible window of lines, and `move_up`, `move_down`, `move_to_top` and `move_to_bottom` scroll it.
  - `handle_key` edits the entry line while the console is visible. Enter records the command in `history` and passes it to the `execute` callback.

## Example

```python
from egakeru.mathutils import Frustum, Plane
from egakeru.events import EventCode, EventContext, EventSystem
from egakeru.ring_queue import RingQueue

frustum = Frustum((0, 0, 0), (0, 0, -1), (1, 0, 0), (0, 1, 0), 16 / 9, 1.0, 0.1, 100.0)
print(frustum.intersects_sphere((0, 0, -10), 1.0))

plane = Plane.create((0, 0, 0), (0, 1, 0))
print(plane.signed_distance((0, 3, 0)))  # 3.0

events = EventSystem()
events.register(EventCode.QUIT, None, lambda code, sender, listener, ctx: True)
print(events.fire(EventCode.QUIT, None, EventContext()))  # True

queue = RingQueue(4)
queue.enqueue(1)
print(queue.dequeue())  # 1
```

## What it does not do

There is no renderer, window, input polling, audio or main loop here. The debug shapes and the gizmo only compute vertex positions and colours; nothing uploads or draws them. The gizmo does not cast rays against its handles and does not move any object itself. The caller decides which handle is hovered and applies the translation that `drag_delta` returns. The console only prints text through `display_text`.

## Installation and tests

```
pip install .
pip install .[test]
pytest
```