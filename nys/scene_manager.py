"""Tree of scenes addressed by slash-separated paths."""

from __future__ import annotations

from typing import Optional

from .linked_list import DataType
from .scene import Scene
from .tree import Tree, TreePathError


def _release_scene(scene: Scene) -> None:
    scene.tree.clear()


class SceneManager:
    """Keeps scenes in a tree whose root is named after the project."""

    def __init__(self, name: str) -> None:
        self.tree = Tree(name, DataType.ADT, _release_scene)

    def add_scene(self, location_path: str, scene: Scene) -> None:
        """Store ``scene`` at the root, or in a new node below another node.

        At the root the scene replaces (and releases) any scene held there;
        elsewhere a child named after the scene is created.
        """
        node = self.tree.visit(location_path)
        if node is None:
            raise TreePathError(f"no node at {location_path!r}")
        if node.is_root():
            self.tree.add_data(location_path, scene)
            return
        child = self.tree.add_node(location_path, scene.name)
        try:
            self.tree.add_data(f"{location_path}/{scene.name}", scene)
        except LookupError:
            self.tree.remove_node(child.path())
            raise

    def remove_scene(self, location_path: str) -> None:
        """Remove the node at ``location_path`` and release its scenes."""
        self.tree.remove_node(location_path)

    def get_scene(self, location_path: str) -> Optional[Scene]:
        """Scene stored at ``location_path``, or None if the node holds none."""
        return self.tree.get_data(location_path)

    def render(self) -> str:
        """Indented listing of every node and the scene it holds."""
        return self.tree.render(0, Scene.render)