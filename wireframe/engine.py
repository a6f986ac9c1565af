"""The interactive wireframe engine: scene setup, input handling and the render loop."""

from __future__ import annotations

import argparse
import enum
import os
from typing import AbstractSet, Iterable, Iterator

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from wireframe.geometry import (  # noqa: E402
    WINDOW_H,
    WINDOW_W,
    CamRotation,
    Mesh,
    Triangle,
    Vertex,
    project_point,
    rotate_vertex,
)

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

MOVE_STEP = 0.1
ROTATION_STEP = 1.0
FRAME_DELAY_MS = 10
WINDOW_TITLE = "Engine"

Line = tuple[tuple[int, int], tuple[int, int]]


class EngineError(Exception):
    """Raised when the engine cannot create its window or draw."""


class Control(enum.Enum):
    """Engine controls, valued by the pygame key that triggers them."""

    FORWARD = pygame.K_w
    BACKWARD = pygame.K_s
    LEFT = pygame.K_a
    RIGHT = pygame.K_d
    UP = pygame.K_SPACE
    DOWN = pygame.K_RSHIFT
    TURN_RIGHT = pygame.K_RIGHT
    TURN_LEFT = pygame.K_LEFT
    LOOK_UP = pygame.K_UP
    LOOK_DOWN = pygame.K_DOWN


def init_cube() -> Mesh:
    """Build the unit cube placed at (1, 1, 5)."""
    v1 = Vertex(0, 0, 0)
    v2 = Vertex(1, 0, 0)
    v3 = Vertex(0, 1, 0)
    v4 = Vertex(1, 1, 0)
    v5 = Vertex(0, 0, 1)
    v6 = Vertex(1, 0, 1)
    v7 = Vertex(0, 1, 1)
    v8 = Vertex(1, 1, 1)

    faces = [
        # front
        (v1, v3, v2), (v2, v3, v4),
        # back
        (v5, v6, v7), (v6, v8, v7),
        # left
        (v1, v5, v7), (v1, v7, v3),
        # right
        (v2, v4, v8), (v2, v8, v6),
        # top
        (v3, v7, v4), (v4, v7, v8),
        # bottom
        (v1, v2, v5), (v2, v6, v5),
    ]
    return Mesh([Triangle(face) for face in faces], x=1, y=1, z=5, size=1)


def manage_inputs(
    pressed: AbstractSet[Control], meshes: Iterable[Mesh], cam_rotation: CamRotation
) -> None:
    """Apply held controls: move the meshes and turn the camera, in place."""
    meshes = list(meshes)
    moves = (
        (Control.FORWARD, "z", -MOVE_STEP),
        (Control.BACKWARD, "z", MOVE_STEP),
        (Control.LEFT, "x", MOVE_STEP),
        (Control.RIGHT, "x", -MOVE_STEP),
        (Control.UP, "y", -MOVE_STEP),
        (Control.DOWN, "y", MOVE_STEP),
    )
    for control, axis, step in moves:
        if control in pressed:
            for mesh in meshes:
                setattr(mesh, axis, getattr(mesh, axis) + step)

    if Control.TURN_RIGHT in pressed:
        if cam_rotation.rotation_x <= 0.0:
            cam_rotation.rotation_x = 360.0
        else:
            cam_rotation.rotation_x -= ROTATION_STEP

    if Control.TURN_LEFT in pressed:
        if cam_rotation.rotation_x >= 360.0:
            cam_rotation.rotation_x = 0.0
        else:
            cam_rotation.rotation_x += ROTATION_STEP

    if Control.LOOK_UP in pressed and cam_rotation.rotation_y < 180.0:
        cam_rotation.rotation_y += ROTATION_STEP

    if Control.LOOK_DOWN in pressed and cam_rotation.rotation_y > -180.0:
        cam_rotation.rotation_y -= ROTATION_STEP


def mesh_lines(mesh: Mesh, cam_rotation: CamRotation) -> Iterator[Line]:
    """Yield the screen-space edges of each triangle whose two ends are both visible."""
    for triangle in mesh.triangles:
        points = [
            project_point(rotate_vertex(v.translated(mesh.x, mesh.y, mesh.z), cam_rotation))
            for v in triangle
        ]
        for start, end in zip(points, points[1:] + points[:1]):
            if start.visible and end.visible:
                yield (start.x, start.y), (end.x, end.y)


def render_mesh(surface: pygame.Surface, mesh: Mesh, cam_rotation: CamRotation) -> None:
    """Draw a mesh's wireframe onto a surface in white."""
    try:
        for start, end in mesh_lines(mesh, cam_rotation):
            pygame.draw.line(surface, WHITE, start, end)
    except pygame.error as exc:
        raise EngineError("Error draw line") from exc


def pressed_controls(keystates) -> frozenset[Control]:
    """Return the controls held down in a key-state table indexed by pygame key codes."""
    return frozenset(control for control in Control if keystates[control.value])


def _open_window() -> pygame.Surface:
    try:
        screen = pygame.display.set_mode((WINDOW_W, WINDOW_H))
    except pygame.error as exc:
        raise EngineError("Error create window.") from exc
    pygame.display.set_caption(WINDOW_TITLE)
    return screen


def run_engine(screen: pygame.Surface) -> None:
    """Run the render loop on a display surface until the window is closed."""
    cam_rotation = CamRotation()
    meshes = [init_cube()]
    running = True

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

        manage_inputs(pressed_controls(pygame.key.get_pressed()), meshes, cam_rotation)

        screen.fill(BLACK)
        for mesh in meshes:
            render_mesh(screen, mesh, cam_rotation)
        pygame.display.flip()

        pygame.time.delay(FRAME_DELAY_MS)


def main(argv=None) -> int:
    """Open the engine window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="wireframe",
        description="Show a wireframe cube; W/S/A/D/Space/RShift move it, arrows turn the camera.",
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        run_engine(_open_window())
    except EngineError as exc:
        print("Engine quit for the following reason :")
        print(f"{exc}\n")
        print(f"Error : \n{pygame.get_error()}")
        return 1
    finally:
        pygame.quit()
    return 0