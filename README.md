# rtscene

Checks scene descriptions for a small ray tracer, and decodes XPM pixmaps.

## Scene files

A scene file has the `.rt` extension and holds one element per line, with
fields separated by spaces:

| Identifier | Fields |
|------------|--------|
| `A`  | ambient ratio, colour |
| `C`  | position, direction, field of view |
| `L`  | position, brightness ratio, colour |
| `sp` | centre, diameter, colour |
| `pl` | point, normal, colour |
| `cy` | centre, axis direction, diameter, height, colour |

The fields are checked as follows:

- position, point, centre, normal: three comma-separated decimals
  (an optional sign, digits, at most one dot);
- direction, axis direction: three comma-separated decimals, each from
  -1 to 1;
- ratio: a decimal from 0 to 1;
- colour: three comma-separated integers, each from 0 to 255;
- field of view: an integer from 0 to 180, optionally preceded by `+`;
- diameter and height: digits and dots, optionally preceded by `+`, not
  negative.

Each line must have exactly the number of fields shown. Blank lines are
ignored; any other identifier makes the scene invalid. An empty file is
invalid too.

## Command line

```
rtscene scene.rt
```

Nothing is printed and the exit status is 0 when the scene is valid.
Otherwise an error message goes to standard error and the exit status
names the failure:

| Status | Message |
|--------|---------|
| 1 | `Error: Invalid argument` (not exactly one argument) |
| 2 | `Error: Invalid path` (blank, more than one word, or not ending in `.rt`) |
| 3 | `Error: Failed to open file` |
| 4 | `Error: Invalid map` (empty file or a bad line) |

For an unknown identifier the message is preceded by a line
`Unknown identifier: <name>`.

## Library

```python
from rtscene.validation import validate_file, validate_scene
from rtscene.errors import SceneError

validate_scene(["A 0.2 255,255,255", "sp 0,0,20 12.6 10,0,255"])

try:
    validate_file("broken.rt")
except SceneError as err:
    print(err.kind, err.exit_code, err.kind.message())
```

- `rtscene.validation`: `validate_line(fields)`, `validate_scene(lines)` and
  `validate_file(path)`, which returns the file's lines when they are valid.
  All raise `SceneError` on failure.
- `rtscene.errors`: the `ErrorKind` enum and the `SceneError` exception.
- `rtscene.elements`: `is_valid_ambient`, `is_valid_camera`,
  `is_valid_light`, `is_valid_sphere`, `is_valid_plane` and
  `is_valid_cylinder`, each taking the split fields of one line.
- `rtscene.fields` and `rtscene.numbers`: the single-field checks
  (`is_valid_float`, `is_valid_rgb_argument`, `is_valid_direction_vector`,
  `is_valid_fov`, `is_valid_diameter` and the rest), plus `parse_float` and
  `parse_int`, which read the leading number of a string.
- `rtscene.files`: `open_scene_file(path)` and `read_scene_lines(stream)`.
- `rtscene.scene`: frozen dataclasses `Color`, `Vector`, `Ambient`,
  `Camera`, `Light`, `Sphere`, `Plane`, `Cylinder`, and a `Scene` with
  `add_light` and `add_object`.

## XPM images and colour names

`rtscene.xpm.xpm_file_to_image(path)` reads an XPM file, and
`rtscene.xpm.xpm_to_image(lines)` decodes XPM data given as a list of
strings. Both return an `XpmImage` with `width`, `height` and `pixels`, where
`pixels[y][x]` is a 32-bit value; the colour `None` becomes `0xFF000000`.
Malformed data raises `XpmError`.

Colour specs are either `#RRGGBB` hexadecimal or X11 colour names, looked up
case-insensitively with `rtscene.colors.lookup_color(name)`; unknown names
give black. `rtscene.words` holds the substring search and word splitting
used while reading XPM text.

## What it does not do

The package only checks scene files. It does not build a `Scene` from a
file, render anything, or open a window; the scene types are plain data for
a caller to fill in.