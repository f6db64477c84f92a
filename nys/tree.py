"""A named tree addressed by slash-separated paths such as ``root/a/b``."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

from .linked_list import DataType, LinkedList

Release = Callable[[Any], None]


class TreePathError(LookupError):
    """Raised when a path does not name a usable node."""


def _same_path(a: "Tree", b: "Tree") -> bool:
    return a.path() == b.path()


def _release_node(node: "Tree") -> None:
    node.clear()
    node.parent = None


class Tree:
    """A tree node with a name, optional data and ordered children.

    Children are kept newest first. Nodes below this one are addressed by
    paths that start with this node's own path.
    """

    def __init__(
        self,
        name: str,
        data_type: DataType | int,
        free_data: Optional[Release] = None,
    ) -> None:
        self.data_type = DataType(data_type)
        if self.data_type is DataType.ADT and free_data is None:
            raise ValueError("ADT trees need a release callback")
        self.name = name
        self.data: Any = None
        self.parent: Optional[Tree] = None
        self.free_data = free_data
        self.children = LinkedList(DataType.ADT, _same_path, _release_node)

    def is_root(self) -> bool:
        return self.parent is None

    def is_leaf(self) -> bool:
        return self.children.is_empty()

    def is_empty(self) -> bool:
        return self.data is None

    def _lineage(self) -> list[Tree]:
        chain = []
        node: Optional[Tree] = self
        while node is not None:
            chain.append(node)
            node = node.parent
        chain.reverse()
        return chain

    def path(self) -> str:
        """Full path of this node from the root, joined with slashes."""
        return "/".join(node.name for node in self._lineage())

    def get_child(self, name: str) -> Optional[Tree]:
        """First direct child with ``name``, or None."""
        return next((child for child in self.children if child.name == name), None)

    def visit(self, location_path: str) -> Optional[Tree]:
        """Node whose full path is ``location_path``, or None."""
        parts = location_path.split("/")
        own = self.path().split("/")
        if parts[: len(own)] != own:
            return None
        node: Optional[Tree] = self
        for name in parts[len(own):]:
            node = node.get_child(name)
            if node is None:
                return None
        return node

    def _require(self, location_path: Optional[str]) -> Tree:
        if location_path is None:
            raise TreePathError("no location path given")
        node = self.visit(location_path)
        if node is None:
            raise TreePathError(f"no node at {location_path!r}")
        return node

    def add_node(self, location_path: str, name: str) -> Tree:
        """Add a child called ``name`` under ``location_path`` and return it."""
        node = self._require(location_path)
        new_node = Tree(name, self.data_type, self.free_data)
        new_node.parent = node
        node.children.add(new_node)
        return new_node

    def add_data(self, location_path: str, data: Any) -> None:
        """Store ``data`` at the node, releasing any data it held."""
        node = self._require(location_path)
        if node.data is not None and self.free_data is not None:
            self.free_data(node.data)
        node.data = data

    def get_data(self, location_path: str) -> Any:
        """Data stored at the node, or None if it holds none."""
        return self._require(location_path).data

    def remove_node(self, location_path: str) -> None:
        """Detach the node and release the data of its whole subtree."""
        node = self._require(location_path)
        parent = node.parent
        if parent is None:
            raise TreePathError("the root node cannot be removed")
        position = next(i for i, child in enumerate(parent.children) if child is node)
        parent.children.remove_at(position)

    def _walk(self) -> Iterator[Tree]:
        yield self
        for child in self.children:
            yield from child._walk()

    def __len__(self) -> int:
        return sum(1 for _ in self._walk())

    def to_list(self) -> list[Any]:
        """Data of every node in pre-order, None where a node holds nothing."""
        return [node.data for node in self._walk()]

    def render(
        self, level: int = 0, render_data: Optional[Callable[[Any], str]] = None
    ) -> str:
        """Indented listing of this subtree, one line per node."""
        lines: list[str] = []
        self._render_into(lines, level, render_data)
        return "".join(lines)

    def _render_into(
        self,
        lines: list[str],
        level: int,
        render_data: Optional[Callable[[Any], str]],
    ) -> None:
        full_path = "".join(f"/{node.name}" for node in self._lineage())
        lines.append(
            f"{'  ' * level}- {full_path} (endereco: {id(self):#x}) : "
            f"{self._describe_data(render_data)}\n"
        )
        for child in self.children:
            child._render_into(lines, level + 1, render_data)

    def _describe_data(self, render_data: Optional[Callable[[Any], str]]) -> str:
        if self.data is None:
            return "(sem dado)"
        if self.data_type is DataType.ADT:
            if render_data is None:
                return "[ADT - sem funcao de impressao]"
            return render_data(self.data)
        if self.data_type is DataType.INT:
            return f"{int(self.data)}"
        if self.data_type is DataType.FLOAT:
            return f"{float(self.data):.2f}"
        return "[tipo desconhecido]"

    def clear(self) -> None:
        """Drop every descendant and release this subtree's data."""
        self.children.clear()
        if self.data is not None and self.free_data is not None:
            self.free_data(self.data)
        self.data = None