import re

import pytest

from nys.linked_list import DataType
from nys.tree import Tree, TreePathError


def _sample_tree():
    tree = Tree("root", DataType.INT, None)
    tree.add_data("root", 1)
    tree.add_node("root", "a")
    tree.add_node("root", "b")
    tree.add_node("root/a", "c")
    tree.add_node("root/a", "d")
    tree.add_data("root/a", 10)
    tree.add_data("root/b", 20)
    tree.add_data("root/a/c", 30)
    tree.add_data("root/a/d", 40)
    return tree


def test_data_lookup_by_path():
    tree = _sample_tree()
    assert tree.get_data("root") == 1
    assert tree.get_data("root/a") == 10
    assert tree.get_data("root/b") == 20
    assert tree.get_data("root/a/c") == 30
    assert tree.get_data("root/a/d") == 40


def test_size_and_to_list():
    tree = _sample_tree()
    assert len(tree) == 5
    values = tree.to_list()
    assert values[0] == 1
    assert sorted(values) == [1, 10, 20, 30, 40]


def test_paths_and_structure():
    tree = _sample_tree()
    node = tree.visit("root/a/c")
    assert node.path() == "root/a/c"
    assert node.parent is tree.visit("root/a")
    assert tree.is_root()
    assert not node.is_root()
    assert node.is_leaf()
    assert not tree.is_leaf()
    assert tree.get_child("a") is tree.visit("root/a")
    assert tree.get_child("zzz") is None


def test_visit_missing_paths():
    tree = _sample_tree()
    assert tree.visit("root/x") is None
    assert tree.visit("other/a") is None
    assert tree.visit("root/a/") is None
    assert tree.visit("root") is tree


def test_missing_paths_raise():
    tree = _sample_tree()
    with pytest.raises(TreePathError):
        tree.add_node("root/nope", "x")
    with pytest.raises(TreePathError):
        tree.add_node(None, "x")
    with pytest.raises(TreePathError):
        tree.add_data("root/nope", 5)
    with pytest.raises(TreePathError):
        tree.get_data("root/nope")
    with pytest.raises(TreePathError):
        tree.remove_node("root/nope")


def test_empty_node_has_no_data():
    tree = Tree("root", DataType.INT, None)
    child = tree.add_node("root", "empty")
    assert child.is_empty()
    assert tree.get_data("root/empty") is None


def test_remove_node_drops_subtree():
    tree = _sample_tree()
    tree.remove_node("root/a")
    assert tree.visit("root/a") is None
    assert tree.visit("root/a/c") is None
    assert len(tree) == 2
    assert sorted(tree.to_list()) == [1, 20]


def test_root_cannot_be_removed():
    tree = _sample_tree()
    with pytest.raises(TreePathError):
        tree.remove_node("root")


def test_adt_tree_needs_release():
    with pytest.raises(ValueError):
        Tree("root", DataType.ADT, None)


def test_release_on_replace_and_remove():
    released = []
    tree = Tree("root", DataType.ADT, released.append)
    tree.add_node("root", "x")
    tree.add_node("root/x", "y")
    tree.add_data("root/x", "first")
    tree.add_data("root/x", "second")
    assert released == ["first"]
    tree.add_data("root/x/y", "leaf")
    tree.remove_node("root/x")
    assert sorted(released) == ["first", "leaf", "second"]


def test_clear_releases_everything():
    released = []
    tree = Tree("root", DataType.ADT, released.append)
    tree.add_data("root", "top")
    tree.add_node("root", "k")
    tree.add_data("root/k", "kid")
    tree.clear()
    assert sorted(released) == ["kid", "top"]
    assert len(tree) == 1
    assert tree.is_empty()


def test_render_int_tree():
    tree = Tree("root", DataType.INT, None)
    tree.add_data("root", 1)
    tree.add_node("root", "a")
    lines = tree.render().splitlines()
    assert len(lines) == 2
    assert re.fullmatch(r"- /root \(endereco: 0x[0-9a-f]+\) : 1", lines[0])
    assert re.fullmatch(r"  - /root/a \(endereco: 0x[0-9a-f]+\) : \(sem dado\)", lines[1])


def test_render_float_and_unknown_types():
    floats = Tree("f", DataType.FLOAT, None)
    floats.add_data("f", 1.5)
    assert floats.render().rstrip("\n").endswith(" : 1.50")
    doubles = Tree("d", DataType.DOUBLE, None)
    doubles.add_data("d", 2.0)
    assert doubles.render().rstrip("\n").endswith(" : [tipo desconhecido]")


def test_render_adt_data():
    tree = Tree("root", DataType.ADT, lambda item: None)
    tree.add_data("root", {"v": 3})
    assert tree.render(0, lambda d: f"<{d['v']}>").rstrip("\n").endswith(" : <3>")
    assert tree.render().rstrip("\n").endswith("[ADT - sem funcao de impressao]")
    assert tree.render(2).startswith("    - /root")