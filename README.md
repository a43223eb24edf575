# overlayui

`overlayui` holds the parts of a touch-driven overlay UI that do not depend on
any windowing or drawing toolkit. It covers geometry and hit testing, routing
touch points to controls as events, rescaling control rectangles when the
window changes size, range-based lookup, and reading zipped UI packages.

It uses only the Python standard library and runs on Python 3.10 and later.

## Modules

| Module | Contents |
| --- | --- |
| `overlayui.geometry` | `Vector2` supports `+` and `/`. `Box` is an axis-aligned rectangle with `right`, `bottom`, `top_left`, `center`, `size`, `from_vectors`, `contains`, `contains_point` and `intersects`, plus an optional `mask`. `InputMask` is the per-point hit-test hook, `is_hitable`. |
| `overlayui.quadtree` | `Quadtree` indexes values by the box a callback returns for them. It provides `add`, `remove`, `query(box)` and `find_all_intersections()`. Adding or removing a value whose box lies outside the tree raises `ValueError`. |
| `overlayui.pool` | `ObjectPool` is a thread-safe pool with `acquire`, `release`, `release_all`, `clear` and the counters `available()` and `borrowed()`. |
| `overlayui.inputsystem` | This module holds the event types and the routing machinery. `TouchType` lists the event kinds: `DOWN`, `UP`, `PRESS`, `ENTER` and `LEAVE`. `InputMeta` is one touch point. Each control gets a `MessageQueue`. `TouchFilter` decides which events a control reacts to. `PriorityIterate` does hit testing with the topmost control first. `InputSource` supplies raw touch points, and `InputSystem` routes them to controls. |
| `overlayui.range_interpreter` | `RangeInterpreter` finds the registered intervals that contain an integer. The range can be cyclic, such as 0–360. It converts to and from plain dicts with `serialize` and `deserialize`. |
| `overlayui.layout` | `Layout` keeps one `RenderInfo` rectangle per control. It can move and resize controls and rescale them on window resize. Rescaling is either free, or keeps the aspect ratio and anchors each control to the nearest corner or the centre. `nearest_anchor` picks that anchor. |
| `overlayui.buttons` | `EmptyButton` takes input over its whole box. `MaskButton` takes input only where its pixel mask is solid. Both filter their queued events and forward them to a `TouchHandler`. |
| `overlayui.process` | `NormalProcess` drives a set of controls through `start`, then `update` and `render` each frame, then `destroy`. |
| `overlayui.package` | `PackageLoader` reads a UI package. The package is a zip archive with `E`, `T` and `I` JSON configs at its root, pages under `ui/` and images under `texture/`. Failures raise `PackageError`. |
| `overlayui.mask` | `alpha_mask` marks every RGBA pixel whose alpha is below a threshold. The work is split across threads. |
| `overlayui.cli` | `parse_options` turns `run` and `package` argument lists into `RunOptions` or `PackageOptions`. Invalid input raises `OptionsError`. |

## Examples

### Boxes

```python
from overlayui.geometry import Box

panel = Box(0, 0, 100, 50)
button = Box(10, 10, 20, 20)

assert panel.contains(button)
assert panel.contains_point(5, 5)
assert button.intersects(Box(25, 25, 10, 10))
```

### Routing a touch to a button

`InputSystem` gives each control its events in coordinates relative to the
control's top-left corner. `clear_state` empties a control's queue once the
control has handled it.

```python
from overlayui.buttons import EmptyButton, TouchHandler
from overlayui.geometry import Box
from overlayui.inputsystem import (
    InputMeta, InputSource, InputSystem, MessageQueue, TouchType,
)

box = Box(10, 10, 50, 30)
button = EmptyButton(box)
button.handler = TouchHandler(on_down=lambda x, y: print("down at", x, y))

source = InputSource([InputMeta(TouchType.DOWN, 20, 15)])
system = InputSystem(source, 800, 600)
system.add_bounds(box, 0)

queues = [MessageQueue()]
system.update(queues)
button.update(queues[0])        # down at 10 5
system.clear_state(0, queues)
```

### Angular sectors

```python
from overlayui.range_interpreter import RangeInterpreter

sectors = RangeInterpreter()
sectors.set_cyclic_range(0, 360)
sectors.add(315, 405, 0, "up")    # stored as 315..45
sectors.add(45, 135, 1, "right")

print(sectors.get_range_connector(10))   # {0}
state = sectors.serialize()              # plain, JSON-friendly dict
```

### See-through mask

```python
from overlayui.mask import alpha_mask

pixels = bytes([255, 0, 0, 255,  0, 0, 0, 0])   # one opaque, one transparent pixel
print(alpha_mask(pixels, 2, 1, 128, 2))          # [False, True]
```

### Reading a package

`PackageLoader` can be used as a context manager. Leaving the block closes the
archive. The `I` info config is kept after that, and everything else is dropped.

```python
from overlayui.package import PackageLoader

with PackageLoader() as loader:
    loader.load("project.zip")
    page = loader.ui("main.json")
    image = loader.texture("button.png")   # b"" if absent
info = loader.info()
```

### Parsing options

```python
from overlayui.cli import OptionsError, parse_options

try:
    command, options = parse_options(
        ["package", "-d", "project", "-i", "main.json", "-w", "800", "-e", "600"]
    )
except OptionsError as error:
    print(error)
```

## What this package does not do

- It draws nothing and opens no window. `render()` is only a method name that `NormalProcess` calls on your controls.
- It installs no command-line program. `parse_options` only parses and validates an argument list. Nothing in the package runs a UI or writes a package.
- It does not decode images. `MaskButton` and `alpha_mask` take pixel data and masks that have already been decoded.

## Running the tests

Install the package with its `test` extra and run `pytest` from the project
root.