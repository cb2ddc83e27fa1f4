# meshedit

This package is the core of a small polygon mesh editor. It provides mesh
data types and procedural primitives. It also has a fly-through camera that
casts picking rays, selection state with a gizmo matrix, an event dispatcher,
and undoable commands that create objects and select or move vertices, edges
and faces. All vector and matrix data is held in `numpy` arrays.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Modules

- `meshedit.transform`: `Transform` has a position, a rotation in Euler
  angles (radians), a scale, and a cached `transform` matrix. `translate`,
  `rotate` and `scale` set one part and refresh the cache. `matrix()` returns
  translation × rotation × scale as a new 4×4 array.
- `meshedit.mesh`: `Vertex` has a position, a normal and texture coordinates.
  Vertices compare and hash by identity. `Mesh` holds vertices, triangle
  `indices`, line `edges`, `textures` and a `Transform`. `Model` holds a list
  of meshes and has `add_mesh`.
- `meshedit.geom`: `centroid` and `average_normal` of vertices.
  `recalculate_normals_for_vertices`, `recalculate_normals_for_mesh`,
  `recalculate_normals_for_vertex` and `recalculate_normals_for_affected_faces`
  recompute normals. `generate_edges` turns triangle indices into line pairs,
  three per triangle.
- `meshedit.primitives`: `Cone`, `Cube`, `Grid`, `Plane`, `Sphere` and
  `Torus`. Each is a `Model` with one generated mesh, and each mesh's edges
  come from `generate_edges`.
- `meshedit.camera`: `perspective` and `look_at` build matrices. `Camera`
  keeps yaw and pitch in degrees and derives `front` from them. It has
  `track_mouse` and `reset_mouse`, the `move_forward`, `move_backwards`,
  `move_left` and `move_right` methods, and `focus_at`, `projection`, `view`
  and `transform`. `screen_to_world` fills `ray_origin` and `ray_direction`
  from window coordinates. `fov` is passed to `perspective` unchanged, so give
  it in radians.
- `meshedit.command_manager`: `Command` is the abstract base, with `execute`,
  `undo`, `redo` and an optional `done`. `CommandManager` keeps
  `undo_stack` and `redo_stack`. Its `execute` records a command only when the
  command returns True. `loop` and `done` drive a continuous (drag) command.
  The first `loop` call adopts the command, later calls re-execute it, and
  `done` records it.
- `meshedit.selection`: `SelectionMode` (`NONE`, `OBJECTS`, `VERTICES`,
  `EDGES`, `FACES`) and `SelectionState`. `SelectionState` holds the gizmo
  matrix, the selected mesh, and the selected vertices, edges and faces.
- `meshedit.events`: `Event`, `RepositionGizmoEvent`, `SceneRenderedEvent`,
  and `EventManager`. `EventManager` calls the listeners subscribed to an
  event's exact type, in the order they were subscribed.
- `meshedit.gizmo_listener`: `GizmoListener.listen` moves the gizmo onto the
  current selection for the event's mode. For objects it takes the mesh
  transform. For vertices, faces and edges it takes the centre of the
  selection.
- `meshedit.scene`: `SceneManager` holds the models, an optional `camera` and
  `grid`, the selection, the selection mode and `textures_enabled`. It
  subscribes a `GizmoListener` to its event manager, so
  `set_selection_mode` repositions the gizmo. It also has `add_model`,
  `set_viewport` (this needs a camera) and `clear`.
- `meshedit.selection_commands`: these commands are `CreateSceneObjectCommand`,
  `SelectVertexCommand`, `SelectEdgeCommand` and `SelectFaceCommand`. Each
  selection command picks from the camera's current picking ray when it is
  created.
- `meshedit.transform_commands`: `TranslateVertexCommand` and
  `TranslateFaceCommand` move the selection so that its centroid follows the
  gizmo. Undo and redo swap the vertices back and forth between their old and
  new positions. `TranslateMeshCommand` moves a mesh's transform to the gizmo,
  and its `done` bakes the transform into the vertex positions. Its `undo` and
  `redo` do nothing.

## Example

```python
from meshedit.command_manager import CommandManager
from meshedit.primitives import Cube
from meshedit.scene import SceneManager
from meshedit.selection_commands import CreateSceneObjectCommand

scene = SceneManager()
commands = CommandManager()

commands.execute(CreateSceneObjectCommand(scene, Cube(1.0, 2)), False)
print(len(scene.models))   # 1

commands.undo()
print(len(scene.models))   # 0

commands.redo()
print(len(scene.models))   # 1
```

The selection commands need a camera on the scene. Set `scene.camera` to a
`Camera` and call its `screen_to_world` before you create them.

## What it does not do

This is a library, not an application. It does not open a window, draw
anything, or handle keyboard and mouse events itself. It has no menus or
toolbars. It does not import meshes from files, load texture images, or save
scenes. A front end has to supply all of this and call into the package.

## Running the tests

```
pytest
```