# qor

Building blocks for games, in plain Python with no third-party
dependencies: input handling driven by event objects, prefab geometry,
path helpers, a headless switch and readable audio error strings.

## Modules

- `qor.switch`: `Switch`, a pressure-sensitive button whose pressure lies
  in [0, 1]. Crossing the activation threshold (0.25) records a change;
  `logic(t)` ages the newest record, so `pressed_now()` and
  `released_now()` are true for the frame in which the change happened.
  `consume_now()` and `consume()` silence a pending press.
  `CompositeSwitch` reads several switches as one.
- `qor.input`: `Input` keeps a switch per keyboard key, mouse button and
  gamepad button, axis half and hat direction. Each frame, pass it the
  elapsed time and a list of event objects (`KeyEvent`,
  `MouseButtonEvent`, `MouseMotionEvent`, `MouseWheelEvent`,
  `JoyButtonEvent`, `JoyAxisEvent`, `JoyHatEvent`, `TextInputEvent`,
  `QuitEvent`). `Input.bind` accepts strings such as `"mouse left"`,
  `"gamepad 0 analog 1"`, `"gamepad hat 2"` or a key name (`"Space"`,
  `"Escape"`, `"F1"`, `"a"`). `Input.listen` captures typed text or a
  single key into a `TextField`. A `Controller` (from `Input.plug`) groups
  named binds and forwards changes to attached `Interface` objects.
  `key_from_name` and `key_name` convert between key codes and names.
- `qor.prefab`: vertex, normal and texture-coordinate lists for quads
  (`quad`, `scaled_quad`, `quad_normals`, `quad_wrap`), one tile of a
  tileset (`tile_wrap`, with `WrapFlag.H_FLIP`) and cubes (`cube`,
  `cube_wrap`, `cube_normals`).
- `qor.filesystem`: path-string helpers (`get_file_name`, `get_path`,
  `get_extension`, `cut_extension`, `change_extension`, `has_extension`),
  helpers for embedded paths like `archive.zip:inner.txt` (`cut_internal`,
  `get_internal`, `has_internal`), `locate` to search directories with
  optional extensions, `path_compare`, `file_to_buffer` and
  `file_to_string`.
- `qor.headless`: process-wide flags (`enabled`, `enable`, `server`,
  `set_server`). When headless mode is on, `Input.logic` does nothing.
- `qor.audio_errors`: `error_string_al` and `error_string_ov` turn audio
  library and Vorbis decoder error codes into `(name, message)` pairs.

## Example

```python
from qor.input import Input, KeyEvent, key_from_name

inp = Input()
player = inp.plug(0)
player.bind("Space", "jump")

inp.logic(0.016, [KeyEvent(key_from_name("Space"), down=True)])
assert player.button("jump").pressed_now()

inp.logic(0.016)
assert player.button("jump").pressed()
assert not player.button("jump").pressed_now()
```

```python
from qor import filesystem, prefab

filesystem.get_extension("maps/level1.tmx")         # "tmx"
filesystem.cut_internal("data.zip:maps/a.tmx")       # "data.zip"
filesystem.get_internal("data.zip:maps/a.tmx")       # "maps/a.tmx"

uvs = prefab.tile_wrap((16, 16), (64, 64), index=5)  # six (u, v) pairs
```

## What it does not do

This package does not open windows, render anything, play or decode
sound, or read hardware devices: `Input` only reacts to the event objects
it is given. It has no colour or bounding-box types, no timed-event or
alarm scheduling and no collision tracking, and it provides no command to
run.

## Running the tests

```
pip install -e .[test]
pytest
```