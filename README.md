# wireframe

A small perspective renderer that draws the edges of triangle meshes in a
500×500 window with pygame. It shows a unit cube placed at (1, 1, 5) in
front of the camera, which you can move and look around.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Run

```
wireframe
```

The command takes no options besides `--help`. Close the window to quit.
If the window cannot be opened or a line cannot be drawn, the command prints
the reason and pygame's last error, and exits with status 1.

### Controls

Movement keys shift every mesh by 0.1 per frame along one axis; the arrow
keys turn the camera by 1 degree per frame.

| Key           | Effect                                                        |
|---------------|---------------------------------------------------------------|
| W / S         | decrease / increase the meshes' z (toward / away from you)    |
| A / D         | increase / decrease the meshes' x                             |
| Space         | decrease the meshes' y                                        |
| Right Shift   | increase the meshes' y                                        |
| Right / Left  | turn the camera horizontally; the angle wraps between 0 and 360 degrees |
| Up / Down     | tilt the camera vertically; the angle stays between -180 and 180 degrees |

## Using it as a library

The geometry lives in `wireframe.geometry` and does not need a display.
It provides `Vertex`, `Triangle`, `Mesh` (at most 100 triangles),
`ScreenPoint`, `CamRotation`, `project_position_x`, `project_position_y`,
`project_point` and `rotate_vertex`:

```python
from wireframe.geometry import CamRotation, Vertex, project_point, rotate_vertex

point = rotate_vertex(Vertex(1.0, 1.0, 5.0), CamRotation(rotation_x=10.0, rotation_y=0.0))
screen = project_point(point)
if screen.visible:
    print(screen.x, screen.y)
```

`project_point` hides points at or behind the camera (z ≤ 0) and points
that land more than one window width or height outside the window.

`wireframe.engine` builds the cube and turns meshes into screen lines:

```python
from wireframe.engine import init_cube, mesh_lines
from wireframe.geometry import CamRotation

cube = init_cube()
for start, end in mesh_lines(cube, CamRotation(0.0, 0.0)):
    print(start, end)
```

Other pieces of `wireframe.engine`:

- `Control` — the engine's controls, each valued by its pygame key code.
- `pressed_controls(keystates)` — the controls held in a key-state table
  such as `pygame.key.get_pressed()`.
- `manage_inputs(pressed, meshes, cam_rotation)` — applies held controls to
  the meshes and the camera in place.
- `render_mesh(surface, mesh, cam_rotation)` — draws a mesh's lines in white
  on a pygame surface, raising `EngineError` if drawing fails.
- `run_engine(screen)` — runs the interactive loop on a display surface
  until the window is closed.

## Limitations

The scene is always the built-in cube: meshes cannot be loaded from files,
and only edges are drawn — no filled faces, shading or hidden-line removal.