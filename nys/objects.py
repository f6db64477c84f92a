"""Drawable objects placed in a scene, and the geometry they are drawn with."""

from __future__ import annotations

from dataclasses import dataclass, field

_MAX_NAME_LENGTH = 63


@dataclass
class Figure:
    """Geometry of a drawable shape plus the GPU handles it is uploaded to."""

    vertices: list[float] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    vao: int = 0
    vbo: int = 0
    ebo: int = 0

    @staticmethod
    def rectangle() -> Figure:
        """Unit rectangle centred on the origin, as two triangles."""
        return Figure(
            vertices=[
                0.5, 0.5,    # top right
                0.5, -0.5,   # bottom right
                -0.5, -0.5,  # bottom left
                -0.5, 0.5,   # top left
            ],
            indices=[0, 1, 3, 1, 2, 3],
        )


@dataclass(eq=False)
class SceneObject:
    """A named, sized and positioned object that carries its own figure.

    A trailing newline on the name is dropped; names are limited to 63
    characters.
    """

    name: str
    width: float
    height: float
    pos_x: float
    pos_y: float
    figure: Figure = field(init=False)

    def __post_init__(self) -> None:
        self.name = self.name.rstrip("\n")
        if len(self.name) > _MAX_NAME_LENGTH:
            raise ValueError(
                f"object name longer than {_MAX_NAME_LENGTH} characters"
            )
        self.figure = Figure.rectangle()

    def __eq__(self, other: object) -> bool:
        # Height takes no part in equality.
        if not isinstance(other, SceneObject):
            return NotImplemented
        return (
            self.width == other.width
            and self.pos_x == other.pos_x
            and self.pos_y == other.pos_y
            and self.name == other.name
        )

    __hash__ = None  # type: ignore[assignment]

    def render(self) -> str:
        """Multi-line, bracketed description of the object."""
        return (
            f"[\n\tName: {self.name}\n"
            f"\tWidth: {self.width:f}\n"
            f"\tHeigth: {self.height:f}\n"
            f"\tPosX: {self.pos_x:f}\n"
            f"\tPosY: {self.pos_y:f}\n]"
        )