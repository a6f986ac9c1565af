"""Perspective wireframe rendering of triangle meshes with a movable camera."""

__version__ = "0.1.0"
__all__ = ["geometry", "engine"]