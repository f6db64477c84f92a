# nys

A small 2D scene engine. A project holds a scene manager, which is a
tree of scenes addressed by slash-separated paths. Each scene holds its
own tree of objects. Objects are rectangles with a name, a size and a
position. They are drawn in an OpenGL window through pyglet.

## Installing

```
pip install .
```

To get pytest as well, add the `test` extra:

```
pip install ".[test]"
```

## Using it from Python

```python
from nys.project import Project

project = Project("demo")          # root scene path is "ROOT-demo"
project.create_scene("ROOT-demo", "intro")
project.add_object_to_scene("ROOT-demo", "intro", "box", 0.5, 0.5, 0.0, 0.0)
print(project.render())            # text listing of scenes and objects
project.start("shaders")           # opens the window; Escape closes it
```

Every path begins with the name of its tree's root.

- A scene added at the root path becomes the root's own data, and it replaces any scene that was stored there.
- A scene added at any other path becomes a new child node named after the scene.
- Objects are placed in a scene's tree the same way. `Scene.add_object` creates a child named after the object under the given path.

When a path names no node, `nys.tree.TreePathError` is raised. It is a `LookupError`.

`Project.start(shader_dir)` reads two files from `shader_dir`:

- `vertex-shaders/vertexShader.txt`
- `fragment-shaders/fragmentShader.txt`

It compiles them and opens a resizable 800×800 window. The window draws the scene stored at the project's root. If a shader fails to compile or the program fails to link, `nys.graphics.ShaderError` is raised.

The building blocks can also be used on their own:

- `nys.linked_list.LinkedList` is a list that inserts at the head. Its equality check depends on its `DataType`.
- `nys.stack.Stack` is a last-in, first-out stack.
- `nys.tree.Tree` is a named tree addressed by paths such as `root/a/c`.
- `nys.objects.SceneObject` and `nys.objects.Figure` describe an object and its rectangle geometry.
- `nys.reader.read_shader` reads a shader file as text.

## Command line

```
nys [--name NAME] [--shaders DIR]
```

This builds a demo project with one scene (`cena1`) and one object (`object1`). It prints the project's listing before and after the object is added, then opens the render window.

- `--name` sets the project name. The default is `teste`.
- `--shaders` gives the shader directory. The default is `../shaders`.

If the shaders cannot be read or compiled, the command prints the error and exits with status 1.

## What it does not do

- The package ships no shader files. You must supply the two shader files yourself.
- Projects exist only in memory. There is no way to save them or load them.

## Running the tests

```
pytest
```