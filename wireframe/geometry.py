"""Vertices, meshes, camera rotation and perspective projection onto the window."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

WINDOW_W = 500
WINDOW_H = 500

FOV_X = 60
FOV_Y = 60
CAM_ROTATION_X = 0.0
CAM_ROTATION_Y = 0.0

MAX_TRIANGLES = 100

_HALF_W = WINDOW_W // 2
_HALF_H = WINDOW_H // 2


@dataclass(frozen=True)
class Vertex:
    """A point in 3D space."""

    x: float
    y: float
    z: float

    def translated(self, dx: float, dy: float, dz: float) -> Vertex:
        """Return this vertex moved by the given offsets."""
        return Vertex(self.x + dx, self.y + dy, self.z + dz)


@dataclass(frozen=True)
class Triangle:
    """Three vertices forming one face of a mesh."""

    vertices: tuple[Vertex, Vertex, Vertex]

    def __post_init__(self) -> None:
        vertices = tuple(self.vertices)
        if len(vertices) != 3:
            raise ValueError(f"a triangle needs 3 vertices, got {len(vertices)}")
        object.__setattr__(self, "vertices", vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)


@dataclass
class Mesh:
    """A set of triangles placed at a position in the world."""

    triangles: list[Triangle] = field(default_factory=list)
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    size: float = 1.0

    def __post_init__(self) -> None:
        self.triangles = list(self.triangles)
        if len(self.triangles) > MAX_TRIANGLES:
            raise ValueError(
                f"a mesh holds at most {MAX_TRIANGLES} triangles, got {len(self.triangles)}"
            )


@dataclass(frozen=True)
class ScreenPoint:
    """A projected point in window pixels, and whether it should be drawn."""

    x: int
    y: int
    visible: bool


@dataclass
class CamRotation:
    """Camera rotation in degrees: horizontal (around Y) and vertical (around X)."""

    rotation_x: float = CAM_ROTATION_X
    rotation_y: float = CAM_ROTATION_Y


_HIDDEN = ScreenPoint(0, 0, False)


def project_position_x(z: float, x: float) -> float:
    """Project a camera-space x coordinate at depth z onto the window's x axis."""
    fov = math.radians(FOV_X)
    factor = x / (math.tan(fov / 2) * z)
    return _HALF_W + _HALF_W * factor


def project_position_y(z: float, y: float) -> float:
    """Project a camera-space y coordinate at depth z onto the window's y axis."""
    fov = math.radians(FOV_Y)
    factor = y / (math.tan(fov / 2) * z)
    return _HALF_H - _HALF_H * factor


def project_point(point: Vertex) -> ScreenPoint:
    """Project a vertex to the screen; points behind the camera or far off-screen are hidden."""
    if point.z <= 0:
        return _HIDDEN
    x = project_position_x(point.z, point.x)
    y = project_position_y(point.z, point.y)
    if -WINDOW_W <= x <= 2 * WINDOW_W and -WINDOW_H <= y <= 2 * WINDOW_H:
        return ScreenPoint(int(x), int(y), True)
    return _HIDDEN


def rotate_vertex(vertex: Vertex, cam_rotation: CamRotation) -> Vertex:
    """Rotate a vertex around the Y axis, then around the X axis, by the camera's angles."""
    hor = math.radians(cam_rotation.rotation_x)
    ver = math.radians(cam_rotation.rotation_y)
    cos_h, sin_h = math.cos(hor), math.sin(hor)
    cos_v, sin_v = math.cos(ver), math.sin(ver)

    x = cos_h * vertex.x + sin_h * vertex.z
    y = vertex.y
    z = -sin_h * vertex.x + cos_h * vertex.z

    return Vertex(
        x,
        cos_v * y - sin_v * z,
        sin_v * y + cos_v * z,
    )