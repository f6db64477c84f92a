"""Scene trees of rectangular objects, rendered with OpenGL through pyglet."""

__version__ = "0.1.0"