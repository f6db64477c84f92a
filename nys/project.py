"""A project: its scenes, its objects and the window that shows them."""

from __future__ import annotations

import argparse
import operator
import sys
from pathlib import Path
from typing import Optional, Sequence

from . import graphics
from .linked_list import DataType, LinkedList
from .objects import SceneObject
from .reader import read_shader
from .scene import Scene
from .scene_manager import SceneManager
from .tree import TreePathError

_WINDOW_WIDTH = 800
_WINDOW_HEIGHT = 800
_DEFAULT_SHADER_DIR = Path("../shaders")


def _keep(_item: object) -> None:
    """Items stay alive while anything else refers to them."""


class Project:
    """Owns every scene and object, and arranges scenes under ``ROOT-<name>``."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.scene_manager = SceneManager(f"ROOT-{name}")
        self.objects = LinkedList(DataType.ADT, operator.eq, _keep)
        self.scenes = LinkedList(DataType.ADT, operator.is_, _keep)

    @property
    def root_path(self) -> str:
        return self.scene_manager.tree.path()

    def create_scene(self, location_path: str, scene_name: str) -> Scene:
        """Create a scene and place it at ``location_path`` in the scene tree."""
        scene = Scene(scene_name)
        self.scenes.add(scene)
        try:
            self.scene_manager.add_scene(location_path, scene)
        except LookupError:
            self.scenes.remove(scene)
            raise
        return scene

    def add_object_to_scene(
        self,
        scene_path: str,
        object_path: str,
        object_name: str,
        width: float,
        height: float,
        pos_x: float,
        pos_y: float,
    ) -> SceneObject:
        """Create an object and put it under ``object_path`` in the scene at ``scene_path``."""
        obj = SceneObject(object_name, width, height, pos_x, pos_y)
        scene = self.scene_manager.get_scene(scene_path)
        if scene is None:
            raise TreePathError(f"no scene at {scene_path!r}")
        self.objects.add(obj)
        try:
            scene.add_object(object_path, obj)
        except LookupError:
            self.objects.remove_at(0)
            raise
        return obj

    def start(self, shader_dir: str | Path = _DEFAULT_SHADER_DIR) -> None:
        """Load the shaders from ``shader_dir`` and open the window."""
        base = Path(shader_dir)
        vertex_source = read_shader(base / "vertex-shaders" / "vertexShader.txt")
        fragment_source = read_shader(base / "fragment-shaders" / "fragmentShader.txt")
        graphics.start(
            vertex_source,
            fragment_source,
            _WINDOW_WIDTH,
            _WINDOW_HEIGHT,
            self.scene_manager,
        )

    def render(self) -> str:
        """Description of the scene tree, the objects and the scenes."""
        return (
            "NYS_printProject() called\n"
            f"PROJECT_NAME: {self.name}\n"
            f"{self.scene_manager.render()}\n"
            f"{self.objects.render(SceneObject.render)}\n"
            f"{self.scenes.render(Scene.render)}\n"
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build a demo project with one scene and one object, then show it."""
    parser = argparse.ArgumentParser(prog="nys", description=main.__doc__)
    parser.add_argument("--name", default="teste", help="project name")
    parser.add_argument(
        "--shaders",
        default=str(_DEFAULT_SHADER_DIR),
        help="directory holding vertex-shaders/ and fragment-shaders/",
    )
    args = parser.parse_args(argv)

    project = Project(args.name)
    project.create_scene(project.root_path, "cena1")
    print(project.render(), end="")
    project.add_object_to_scene(
        project.root_path, "cena1", "object1", 0.5, 0.5, 0.0, 0.0
    )
    print(project.render(), end="")

    try:
        project.start(args.shaders)
    except (OSError, graphics.ShaderError) as exc:
        print(f"nys: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())