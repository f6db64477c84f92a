"""Window, shader program and drawing of scenes through OpenGL."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .objects import Figure, SceneObject
from .scene import Scene

if TYPE_CHECKING:
    from .scene_manager import SceneManager

_GL_FLOAT_SIZE = 4
_GL_UINT_SIZE = 4
_WINDOW_TITLE = "Hello World"


class ShaderError(RuntimeError):
    """Raised when a shader fails to compile or the program fails to link."""


def scene_figures(scene: Scene) -> list[Figure]:
    """Figures of every object in ``scene``, in the scene's pre-order."""
    return [
        item.figure for item in scene.objects() if isinstance(item, SceneObject)
    ]


def compile_program(vertex_source: str, fragment_source: str):
    """Compile both shaders and link them into a program.

    Needs a current OpenGL context. Raises ShaderError on failure.
    """
    from pyglet.graphics.shader import Shader, ShaderException, ShaderProgram

    try:
        vertex_shader = Shader(vertex_source, "vertex")
    except ShaderException as exc:
        raise ShaderError(f"Vertex Shader Compilation Failed:\n{exc}") from exc
    try:
        fragment_shader = Shader(fragment_source, "fragment")
    except ShaderException as exc:
        vertex_shader.delete()
        raise ShaderError(f"Fragment Shader Compilation Failed:\n{exc}") from exc
    try:
        program = ShaderProgram(vertex_shader, fragment_shader)
    except ShaderException as exc:
        raise ShaderError(f"Shader Program Linking Failed:\n{exc}") from exc
    vertex_shader.delete()
    fragment_shader.delete()
    return program


def upload_figure(figure: Figure) -> None:
    """Create the vertex array and buffers for ``figure`` and fill them."""
    from pyglet import gl

    handle = (gl.GLuint * 1)()
    gl.glGenVertexArrays(1, handle)
    figure.vao = handle[0]
    gl.glGenBuffers(1, handle)
    figure.vbo = handle[0]
    gl.glGenBuffers(1, handle)
    figure.ebo = handle[0]

    gl.glBindVertexArray(figure.vao)

    vertices = (gl.GLfloat * len(figure.vertices))(*figure.vertices)
    gl.glBindBuffer(gl.GL_ARRAY_BUFFER, figure.vbo)
    gl.glBufferData(
        gl.GL_ARRAY_BUFFER,
        len(figure.vertices) * _GL_FLOAT_SIZE,
        vertices,
        gl.GL_STATIC_DRAW,
    )

    indices = (gl.GLuint * len(figure.indices))(*figure.indices)
    gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, figure.ebo)
    gl.glBufferData(
        gl.GL_ELEMENT_ARRAY_BUFFER,
        len(figure.indices) * _GL_UINT_SIZE,
        indices,
        gl.GL_STATIC_DRAW,
    )

    gl.glVertexAttribPointer(0, 2, gl.GL_FLOAT, gl.GL_FALSE, 2 * _GL_FLOAT_SIZE, 0)
    gl.glEnableVertexAttribArray(0)

    gl.glBindBuffer(gl.GL_ARRAY_BUFFER, 0)
    gl.glBindVertexArray(0)


def draw_scene(scene: Scene) -> None:
    """Draw every object of ``scene``, uploading figures not yet on the GPU."""
    from pyglet import gl

    for figure in scene_figures(scene):
        if figure.vao == 0:
            upload_figure(figure)
        gl.glBindVertexArray(figure.vao)
        gl.glDrawElements(gl.GL_TRIANGLES, len(figure.indices), gl.GL_UNSIGNED_INT, 0)
    gl.glBindVertexArray(0)


def start(
    vertex_source: str,
    fragment_source: str,
    width: int,
    height: int,
    scene_manager: "SceneManager",
) -> None:
    """Open a window and draw the scene at the manager's root until it closes.

    Escape closes the window. Raises ShaderError if the shaders are unusable.
    """
    import pyglet
    from pyglet import gl

    config = gl.Config(
        major_version=3, minor_version=3, forward_compatible=True, double_buffer=True
    )
    window = pyglet.window.Window(
        width, height, _WINDOW_TITLE, resizable=True, config=config
    )
    try:
        program = compile_program(vertex_source, fragment_source)
    except ShaderError:
        window.close()
        raise

    root_path = scene_manager.tree.path()

    @window.event
    def on_draw() -> None:
        gl.glClearColor(0.1, 0.1, 0.1, 1.0)
        window.clear()
        program.use()
        scene = scene_manager.get_scene(root_path)
        if scene is not None:
            draw_scene(scene)

    try:
        pyglet.app.run()
    finally:
        program.delete()