import numpy as np

from meshedit.events import RepositionGizmoEvent, SceneRenderedEvent
from meshedit.geom import centroid
from meshedit.gizmo_listener import GizmoListener
from meshedit.mesh import Mesh, Vertex
from meshedit.selection import SelectionMode, SelectionState


def make_listener():
    state = SelectionState()
    return state, GizmoListener(state)


def test_objects_mode_copies_mesh_transform():
    state, listener = make_listener()
    mesh = Mesh()
    mesh.transform.translate((1.0, -2.0, 3.0))
    state.mesh = mesh
    listener.listen(RepositionGizmoEvent(SelectionMode.OBJECTS))
    assert np.allclose(state.gizmo, mesh.transform.transform)
    state.gizmo[0, 3] = 99.0
    assert mesh.transform.transform[0, 3] == 1.0


def test_objects_mode_without_mesh_is_identity():
    state, listener = make_listener()
    state.gizmo[:3, 3] = (4.0, 4.0, 4.0)
    listener.listen(RepositionGizmoEvent(SelectionMode.OBJECTS))
    assert np.array_equal(state.gizmo, np.identity(4))


def test_vertices_mode_moves_to_centroid():
    state, listener = make_listener()
    state.add_vertex(Vertex((0.0, 0.0, 0.0)))
    state.add_vertex(Vertex((2.0, 4.0, 6.0)))
    listener.listen(RepositionGizmoEvent(SelectionMode.VERTICES))
    assert np.allclose(state.gizmo[:3, 3], centroid(state.vertices))
    assert np.allclose(state.gizmo[:3, :3], np.identity(3))


def test_vertices_mode_without_selection_is_identity():
    state, listener = make_listener()
    state.gizmo[:3, 3] = (1.0, 1.0, 1.0)
    listener.listen(RepositionGizmoEvent(SelectionMode.VERTICES))
    assert np.array_equal(state.gizmo, np.identity(4))


def test_faces_mode_moves_to_triangle_centroid():
    state, listener = make_listener()
    face = [Vertex((0.0, 0.0, 0.0)), Vertex((3.0, 0.0, 0.0)), Vertex((0.0, 3.0, 0.0))]
    state.add_face(face)
    listener.listen(RepositionGizmoEvent(SelectionMode.FACES))
    assert np.allclose(state.gizmo[:3, 3], centroid(face))


def test_faces_mode_without_selection_is_identity():
    state, listener = make_listener()
    state.gizmo[:3, 3] = (1.0, 1.0, 1.0)
    listener.listen(RepositionGizmoEvent(SelectionMode.FACES))
    assert np.array_equal(state.gizmo, np.identity(4))


def test_edges_mode_moves_to_edge_midpoint():
    state, listener = make_listener()
    a, b = Vertex((0.0, 0.0, 0.0)), Vertex((2.0, 2.0, 2.0))
    state.add_edge((a, b))
    listener.listen(RepositionGizmoEvent(SelectionMode.EDGES))
    assert np.allclose(state.gizmo[:3, 3], centroid([a, b]))


def test_edges_mode_without_selection_gives_nan():
    state, listener = make_listener()
    listener.listen(RepositionGizmoEvent(SelectionMode.EDGES))
    assert np.isnan(state.gizmo[:3, 3]).all()


def test_none_mode_leaves_gizmo():
    state, listener = make_listener()
    state.gizmo[:3, 3] = (5.0, 6.0, 7.0)
    listener.listen(RepositionGizmoEvent(SelectionMode.NONE))
    assert list(state.gizmo[:3, 3]) == [5.0, 6.0, 7.0]


def test_other_events_are_ignored():
    state, listener = make_listener()
    state.add_vertex(Vertex((1.0, 1.0, 1.0)))
    listener.listen(SceneRenderedEvent())
    assert np.array_equal(state.gizmo, np.identity(4))