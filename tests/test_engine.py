import collections

import pygame
import pytest

from wireframe.engine import (
    BLACK,
    MOVE_STEP,
    WHITE,
    Control,
    init_cube,
    manage_inputs,
    mesh_lines,
    pressed_controls,
    render_mesh,
    run_engine,
)
from wireframe.geometry import WINDOW_H, WINDOW_W, CamRotation, Mesh


def _pixel(surface, point):
    return tuple(surface.get_at(point))[:3]


def test_cube_shape():
    cube = init_cube()
    assert len(cube.triangles) == 12
    assert (cube.x, cube.y, cube.z) == (1, 1, 5)
    assert cube.size == 1


def test_cube_vertices_are_unit_corners():
    cube = init_cube()
    vertices = {v for tri in cube.triangles for v in tri}
    assert len(vertices) == 8
    for v in vertices:
        assert {v.x, v.y, v.z} <= {0, 1}


def test_each_cube_triangle_is_non_degenerate():
    for tri in init_cube().triangles:
        assert len(set(tri)) == 3


@pytest.mark.parametrize(
    "control,axis,sign",
    [
        (Control.FORWARD, "z", -1),
        (Control.BACKWARD, "z", 1),
        (Control.LEFT, "x", 1),
        (Control.RIGHT, "x", -1),
        (Control.UP, "y", -1),
        (Control.DOWN, "y", 1),
    ],
)
def test_movement_controls(control, axis, sign):
    meshes = [init_cube(), init_cube()]
    before = [getattr(m, axis) for m in meshes]
    manage_inputs({control}, meshes, CamRotation())
    for mesh, start in zip(meshes, before):
        assert getattr(mesh, axis) == pytest.approx(start + sign * MOVE_STEP)


def test_opposite_moves_cancel():
    mesh = init_cube()
    manage_inputs({Control.FORWARD, Control.BACKWARD}, [mesh], CamRotation())
    assert mesh.z == pytest.approx(5)


def test_no_controls_changes_nothing():
    mesh = init_cube()
    cam = CamRotation(10.0, 20.0)
    manage_inputs(set(), [mesh], cam)
    assert (mesh.x, mesh.y, mesh.z) == (1, 1, 5)
    assert (cam.rotation_x, cam.rotation_y) == (10.0, 20.0)


def test_turn_right_wraps_at_zero():
    cam = CamRotation(0.0, 0.0)
    manage_inputs({Control.TURN_RIGHT}, [], cam)
    assert cam.rotation_x == 360.0
    manage_inputs({Control.TURN_RIGHT}, [], cam)
    assert cam.rotation_x == 359.0


def test_turn_left_wraps_at_full_turn():
    cam = CamRotation(360.0, 0.0)
    manage_inputs({Control.TURN_LEFT}, [], cam)
    assert cam.rotation_x == 0.0
    manage_inputs({Control.TURN_LEFT}, [], cam)
    assert cam.rotation_x == 1.0


def test_look_is_clamped():
    cam = CamRotation(0.0, 180.0)
    manage_inputs({Control.LOOK_UP}, [], cam)
    assert cam.rotation_y == 180.0
    cam = CamRotation(0.0, -180.0)
    manage_inputs({Control.LOOK_DOWN}, [], cam)
    assert cam.rotation_y == -180.0


def test_look_up_and_down():
    cam = CamRotation(0.0, 0.0)
    manage_inputs({Control.LOOK_UP}, [], cam)
    assert cam.rotation_y == 1.0
    manage_inputs({Control.LOOK_DOWN}, [], cam)
    assert cam.rotation_y == 0.0


def test_cube_in_front_gives_all_edges():
    lines = list(mesh_lines(init_cube(), CamRotation()))
    assert len(lines) == 36
    for start, end in lines:
        for x, y in (start, end):
            assert 0 <= x < WINDOW_W
            assert 0 <= y < WINDOW_H


def test_cube_behind_camera_gives_no_edges():
    cube = init_cube()
    cube.z = -10
    assert list(mesh_lines(cube, CamRotation())) == []


def test_turning_around_hides_cube():
    assert list(mesh_lines(init_cube(), CamRotation(180.0, 0.0))) == []


def test_empty_mesh_gives_no_edges():
    assert list(mesh_lines(Mesh(), CamRotation())) == []


def test_pressed_controls_reads_key_table():
    keystates = collections.defaultdict(bool, {pygame.K_w: True, pygame.K_LEFT: True})
    assert pressed_controls(keystates) == {Control.FORWARD, Control.TURN_LEFT}


def test_pressed_controls_none_held():
    assert pressed_controls(collections.defaultdict(bool)) == frozenset()


def test_render_mesh_draws_white_edges():
    surface = pygame.Surface((WINDOW_W, WINDOW_H))
    surface.fill(BLACK)
    cube = init_cube()
    cam = CamRotation()
    render_mesh(surface, cube, cam)
    for start, end in mesh_lines(cube, cam):
        assert _pixel(surface, start) == WHITE
        assert _pixel(surface, end) == WHITE


def test_render_mesh_behind_camera_draws_nothing():
    surface = pygame.Surface((WINDOW_W, WINDOW_H))
    surface.fill(BLACK)
    cube = init_cube()
    cube.z = -10
    render_mesh(surface, cube, CamRotation())
    assert surface.get_bounding_rect(min_alpha=1) == surface.get_rect()
    assert pygame.transform.average_color(surface)[:3] == BLACK


@pytest.fixture
def screen(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    try:
        yield pygame.display.set_mode((WINDOW_W, WINDOW_H))
    finally:
        pygame.display.quit()


def test_run_engine_stops_on_quit_and_draws_frame(screen):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    run_engine(screen)
    (start, end), *_ = mesh_lines(init_cube(), CamRotation())
    assert _pixel(screen, start) == WHITE
    assert _pixel(screen, (0, 0)) == BLACK