# mondrian

The layout core of a tiling window manager. Every new window splits the
space of an existing one in half. Windows can be swapped with a neighbour,
re-oriented and spread out in a row, and every move queues an animation.
The package also holds the rules for key bindings, pointer buttons,
scrolling, move/resize grabs and backend selection.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## The `mondrian` command

```
mondrian
mondrian --command foot
```

The command:

1. logs to standard error and to `logs/app.log` in the current directory,
   rotated at midnight;
2. picks a backend with `mondrian.backend.select_backend` (`winit` when
   `WAYLAND_DISPLAY`, `WAYLAND_SOCKET` or `DISPLAY` is set, `tty` otherwise)
   and logs the choice;
3. reads `mondrian.conf` from the package directory if that file exists,
   starts its `exec-once` commands and exports its `env` variables;
4. starts the program given with `-c` / `--command`, if any
   (`mondrian.app.parse_args`), and exits.

## What it does not do

The package does not open a Wayland display, draw anything, or read input
devices. `mondrian` performs the start-up steps above and then returns; it
does not stay running as a compositor. The layout, input and output modules
are libraries that a display server would drive.

## Configuration

Plain text, one directive per line; blank lines and lines starting with `#`
are ignored.

```
exec-once = waybar --config bar.json
env = XCURSOR_SIZE, 24
```

`mondrian.config.parse_config(text)` returns the list of
`(command, args)` pairs and the dict of environment variables.
`Configs.from_text` and `Configs.from_file` build a `Configs`, whose
`workspaces` field holds a `WorkspaceConfigs` (gap 12, `TiledScheme.DEFAULT`).
`Configs.init()` starts each command and sets each variable; a command that
cannot be started is logged, not raised.

## Layout

`mondrian.tiled_tree.TiledTree(window, gap)` keeps the binary split tree.
Windows are placed into a `Space`, which records each window's rectangle
(`element_geometry`) and the `AnimationRequest`s each change produces
(`take_animations` returns and clears them).

- `insert_window(target, new_window, direction, space)` splits `target`
  (or the first window when `target` is `None`) towards a `Direction`.
- `insert_window_spiral(new_window, space)` takes the directions in turn:
  right, down, left, up.
- `remove(target, focus, space)` gives the space of the removed window back
  to its sibling and returns `(removed, new_focus)`.
- `invert_window` turns the parent split a quarter turn clockwise.
- `resize` moves the parent split's dividing line by an offset.
- `exchange(focus, direction, space)` swaps a window with its first
  neighbour in that direction, taken from the tree's `NeighborGraph`.
- `expansion` lays every window side by side, each a third of the root's
  width; `recover` lays the tree out again.
- `split_rect` and `new_rects` are the rectangle arithmetic behind these.

`mondrian.direction.Direction` provides `opposite`, `rotate_cw` and
`orthogonal`. `mondrian.neighbor_graph.NeighborGraph` tracks which windows
touch on each side.

`mondrian.animation` holds `Rectangle`, the easing curves of
`AnimationType` (linear, ease-in-out-quad, overshoot-bounce), `interpolate`,
and `Animation`, which advances one millisecond per `tick()`.

`mondrian.json_tree.JsonTree` reads and writes layout descriptions as JSON
(`from_json`, `to_json`, `from_dict`, `to_dict`) and formats them as an
indented outline (`format_tree`). `TiledTree.from_json` loads one and logs
the outline.

## Input and output

- `mondrian.keyboard`: `KeyboardState` tracks held keys and the main
  modifier (`Control_L`); `combo_name` builds names like `Control_L+Return`
  by key priority; `ActionRunner` runs the `KeyAction` bound to a combination
  (an external command, or a `Function` handed to a dispatch callback;
  `Function.KILL` raises `SystemExit(0)`).
- `mondrian.grab`: `MoveGrab` and `ResizeGrab` follow the pointer while the
  left button is held.
- `mondrian.pointer`: `clamp_coords`, `axis_frame` for scroll frames,
  `button_action` (main modifier plus left button moves, plus right button
  resizes) and `layer_search_order` for hit-testing.
- `mondrian.backend`: `select_backend` and `seat_name`.
- `mondrian.winit_output`: `WinitOutput`, the output of the nested window,
  with `init`, `resize` and `logical_size`.