"""A scene: a named tree of objects."""

from __future__ import annotations

from typing import Any, Optional

from .linked_list import DataType
from .objects import SceneObject
from .tree import Tree


def _release_object(obj: SceneObject) -> None:
    """Objects are owned by the project, so the scene keeps nothing to free."""
    return None


class Scene:
    """Objects arranged in a tree whose root carries the scene's name.

    Objects are addressed by paths such as ``scene/box``.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.tree = Tree(name, DataType.ADT, _release_object)

    def add_object(self, location_path: str, obj: SceneObject) -> None:
        """Place ``obj`` under the node at ``location_path``, named after it."""
        node = self.tree.add_node(location_path, obj.name)
        try:
            self.tree.add_data(f"{location_path}/{obj.name}", obj)
        except LookupError:
            self.tree.remove_node(node.path())
            raise

    def remove_object(self, location_path: str) -> None:
        """Remove the object node at ``location_path`` and everything below it."""
        self.tree.remove_node(location_path)

    def get_object(self, location_path: str) -> Optional[SceneObject]:
        """Object stored at ``location_path``, or None if the node holds none."""
        return self.tree.get_data(location_path)

    def object_count(self) -> int:
        """Number of nodes in the scene tree, the root included."""
        return len(self.tree)

    def objects(self) -> list[Any]:
        """Node data in pre-order; None stands for nodes holding no object."""
        return self.tree.to_list()

    def render(self) -> str:
        """Scene name followed by the indented object tree."""
        return f"scene name: {self.name}\n" + self.tree.render(0, SceneObject.render)