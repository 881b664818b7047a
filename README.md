# gdiframe

A small, display-free 2D game framework. It keeps the state of a game
from frame to frame: scenes made of grouped objects, box colliders with
enter/stay/exit callbacks, sprite-sheet animations, per-frame keyboard
states, a camera, and a queue of events (create an object, delete an
object, change scene) applied at the end of each frame.

It has no dependencies outside the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## A frame

```python
from gdiframe.core import Engine
from gdiframe.keyboard import Key

engine = Engine()                      # 1280 x 768, starts in the start scene
status = engine.progress(pressed={Key.ENTER}, focused=True)
```

`Engine.progress` runs one frame: it measures the delta time, updates
the keyboard states, updates the current scene and its colliders, runs
collision detection, drops dead objects from the scene, counts the frame,
and finally applies the queued events. Once a second it returns a status
line of the form `FPS : <n> DT : <dt>` (also kept in `engine.title`);
otherwise it returns `None`.

The engine takes an optional `resolution`, a `clock` callable (default
`time.perf_counter`), a `max_dt` cap on the delta time, and an `rng`
callable used to place monsters, which makes runs reproducible in tests.

## Pieces

- `gdiframe.geometry`: `Vec2`, an immutable 2D vector with `length()`,
  `normalized()` (raises `ValueError` for the zero vector) and `+`, `-`,
  `*`, `/` by a vector (component-wise) or a number; division by zero
  raises `ZeroDivisionError`. `randint(low, high)` draws an integer from
  the closed range.
- `gdiframe.kinds`: the `GroupType`, `SceneType` and `EventType` enums and
  `GROUP_COUNT`, the number of group slots (32).
- `gdiframe.keyboard`: `KeyManager.update(pressed, focused)` takes the
  set of `Key`s held down this frame. `state(key)`, `is_tap`, `is_hold`
  and `is_away` then report `KeyState.TAP`, `HOLD`, `AWAY` or `NONE` for
  the rest of the frame. An update without focus resets every key to
  `NONE`.
- `gdiframe.clock`: `TimeManager.update()` returns the time since the
  previous sample, capped at `max_dt` when one is given; `tick()` counts
  a frame and returns the status line once a second has accumulated.
- `gdiframe.camera`: `Camera(resolution)` keeps `look_at` at the screen
  centre. `set_target(obj)` follows an object until it is dead;
  `render_pos(pos)` turns a world position into a screen position after
  `update()`.
- `gdiframe.paths`: `content_path(cwd)` gives `bin/content` next to the
  working directory; `Resource` records an asset's key and relative path.
- `gdiframe.animation`: `Animation.create(...)` lays out `Frame`s across
  a sprite sheet; `update(dt)` steps through them and sets `finished`
  when the last frame is reached. An `Animator` holds named animations
  (duplicate names raise `ValueError`), plays one, and restarts it from
  frame 0 when `repeat` is set.
- `gdiframe.objects`: `GameObject` with a name, position, scale, an
  optional `Collider` and `Animator`, `mark_dead()` and `clone()` (a live
  copy with its own components). A `Collider` follows its owner at an
  offset, counts its contacts and forwards collision callbacks to it.
- `gdiframe.scene`: `Scene` keeps objects by group and updates them group
  by group; `sweep_dead()` removes and returns dead objects.
  `SceneManager` calls `enter()`/`exit()` when switching scenes and raises
  `KeyError` for an unregistered scene.
- `gdiframe.collision`: `CollisionManager.check_group(left, right)`
  toggles checking between two groups; `update(scene)` fires
  `on_collision_enter`, `on_collision` and `on_collision_exit` on the
  colliders. An object already marked dead does not start a contact and
  ends any it had. `is_collision(left, right)` is the overlap test; boxes
  that only touch do not collide.
- `gdiframe.events`: `EventManager.create_object`, `delete_object` and
  `change_scene` queue events; `update(scene_manager)` applies them in
  order. A deleted object is marked dead when its event is applied and is
  held in `pending_dead` until the following update.
- `gdiframe.monster`: `Monster` patrols `max_distance` either side of
  `center_pos` and queues its own deletion after five hits from objects
  named `Missile_Player`.
- `gdiframe.scenes`: `StartScene` places eight monsters in a row, turns on
  player/monster and monster/player-missile collisions and centres the
  camera; `ToolScene` is empty. A tap of Enter in either queues a switch
  to the other.

## What it does not do

- It draws nothing and opens no window: there is no renderer, no texture
  or sound loading, and no command to launch a game. Reading the state
  and drawing it is up to you.
- Keyboard input is not read from the system; pass the held keys to
  `Engine.progress` or `KeyManager.update` yourself.
- There is no player object and no missiles. The start scene has
  monsters only, so nothing in it fires at them unless you add objects of
  your own.