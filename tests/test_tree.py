# File: tests/test_tree.py
import io

from link_scout.tree import TraversalNode, add_child, new_node, render, write_tree


def test_add_child_keeps_discovery_order():
    root = new_node("foo")
    child = root.add_child("child of foo")
    sibling = root.add_child("sibling of foo")
    grandchild = child.add_child("grandchild of foo")

    assert root.children == [child, sibling]
    assert child.children == [grandchild]
    assert sibling.children == []
    assert grandchild.url == "grandchild of foo"


def test_add_child_on_missing_parent_is_noop():
    assert add_child(None, "http://foo.com/") is None


def test_module_add_child_appends():
    root = new_node("root")
    child = add_child(root, "a")
    assert isinstance(child, TraversalNode)
    assert root.children == [child]


def test_render_single_node():
    assert render(new_node("http://foo.com/")) == "http://foo.com/\n"


def test_render_nested_tree():
    root = new_node("root")
    a = root.add_child("a")
    a.add_child("a1")
    a.add_child("a2").add_child("a2x")
    root.add_child("b")

    assert render(root) == (
        "root\n"
        "└── a\n"
        "\t└── a1\n"
        "\t└── a2\n"
        "\t\t└── a2x\n"
        "└── b\n"
    )
    assert render(root) == render(root)


def test_write_tree_and_to_dict():
    root = new_node("root")
    root.add_child("a")
    buf = io.StringIO()
    write_tree(root, buf)

    assert buf.getvalue() == "root\n└── a\n"
    assert root.to_dict() == {"url": "root", "children": [{"url": "a", "children": []}]}
    assert len(root) == 2
