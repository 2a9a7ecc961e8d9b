# enginebravo

Building blocks for a small 2D game engine, in plain Python with no
third-party dependencies.

## Modules

- `enginebravo.geometry`
  - `Point`: integer `x`, `y` (values are converted with `int`).
  - `Vector2`: float `x`, `y` with `+` and `-` against another `Vector2`,
    `*` by a number or component-wise by another `Vector2`, and `/` by a number.
- `enginebravo.sprites`
  - `SpriteDef`: frozen record of `texture_path`, `source_rect` `(x, y, w, h)`,
    `width` and `height`.
  - `extrapolate_sprite_def(sprite_def, num_frames)`: returns `num_frames`
    frames, each with the source rectangle moved right by one rectangle width.
- `enginebravo.bodies`
  - `FilterCategory`: the collision categories `PLAYER`, `MONSTER`,
    `WALLACTIVE`, `WALLINACTIVE`, `BULLET`.
  - `BodyID` (`body_id`, `revision`, `world0`; `body_id == -1` means not
    created) and `WorldID` (`world_id`, `revision`): frozen handles whose
    fields are range-checked (32-bit signed id, 16-bit unsigned others), raising
    `ValueError` when out of range.
  - `BodyFlags` and `BodyProperties`: plain records of body switches and
    material properties.
  - `category_bits(category)` returns `1 << category` (negative raises
    `ValueError`); `mask_bits(categories)` ORs those bits together and keeps
    the low 16 bits.
- `enginebravo.viewport`
  - `screen_viewport(window_size, aspect_ratio, viewport)`: turns a camera
    viewport given as window fractions `(x, y, w, h)` into a pixel rectangle,
    letterboxed or pillarboxed and centred to keep `aspect_ratio`.
  - `screen_to_world(screen_pos, window_size, aspect_ratio, viewport,
    camera_origin, camera_width, camera_height)`: maps a window pixel to world
    coordinates. A non-positive aspect ratio, or a viewport with no area,
    raises `ValueError`.
- `enginebravo.save.fields`
  - `IntSaveField`, `FloatSaveField`, `StringSaveField`: a `name` and a `value`.
  - `is_integer(text)` / `is_float(text)`: whether the whole text is a
    32-bit integer / a single-precision number, with no surrounding whitespace.
- `enginebravo.save.array`
  - `SaveArray(name)`: named group of fields. `add_int_field`,
    `add_float_field`, `add_string_field` and `add_any` (kind chosen from the
    value's type; anything but `int`, `float` or `str`, including `bool`,
    raises `ValueError`). Adding an existing name overwrites its value and logs
    a warning. `get_int_field` etc. return the stored field or raise `KeyError`;
    `int_fields()`, `float_fields()`, `string_fields()` list them in insertion
    order.
- `enginebravo.save.game`
  - `SaveGame(file_name)`: loads the JSON file if it can be opened. Offers the
    same `add_*` methods, plus `set_*_field` and `get_*_field` (both raise
    `KeyError` for an unknown name; getters return copies), `has_*_field`,
    `add_array` (`ValueError` if the name is taken), `set_array` and
    `get_array` (copies; `KeyError` if absent), `store()` to write indented
    JSON, and `remove()` to delete the file (`OSError` on failure).

## Save file format

```json
{
    "arrays": [
        {"fields": [{"name": "sword", "value": 1}], "name": "inventory"}
    ],
    "fields": [
        {"name": "level", "value": 3},
        {"name": "player", "value": "Ada"}
    ]
}
```

Fields are written integers first, then floats, then strings. A top-level
field missing `name` or `value`, or an array missing `name`, makes loading
raise `ValueError`; incomplete fields inside an array are skipped.

## Example

```python
from enginebravo.geometry import Vector2
from enginebravo.sprites import SpriteDef, extrapolate_sprite_def
from enginebravo.save.game import SaveGame

velocity = Vector2(2, 3) * 2          # Vector2(x=4.0, y=6.0)

first = SpriteDef(texture_path="sheet.png", source_rect=(21, 95, 16, 25), width=16, height=25)
frames = extrapolate_sprite_def(first, 3)   # source x: 21, 37, 53

save = SaveGame("slot1.json")
save.add_int_field("level", 3)
save.add_string_field("player", "Ada")
save.add_array("inventory")
save.store()
```

## What this package does not do

There is no window, renderer, scene graph or physics simulation here: the
package holds the data types and the calculations around them (viewport
fitting, collision filter bits, sprite frame layout) and the save-game
storage, but it draws nothing and steps no physics world. It has no
command-line program.

## Installation and tests

```
pip install .[test]
pytest
```