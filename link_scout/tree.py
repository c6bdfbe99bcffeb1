# File: link_scout/tree.py
"""link_scout.tree: дерево обхода (кто на кого ссылается) и его текстовое представление."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, TextIO

__all__ = ["TraversalNode", "new_node", "add_child", "render", "write_tree", "BRANCH", "INDENT"]

BRANCH = "└── "
INDENT = "\t"


@dataclass(slots=True)
class TraversalNode:
    """Узел дерева: URL и дочерние узлы в порядке обнаружения."""

    url: str
    children: List[TraversalNode] = field(default_factory=list)

    def add_child(self, url: str) -> TraversalNode:
        child = TraversalNode(url)
        self.children.append(child)
        return child

    def to_dict(self) -> Dict[str, Any]:
        return {"url": self.url, "children": [c.to_dict() for c in self.children]}

    def walk(self):
        """Обход в глубину (pre-order)."""
        yield self
        for child in self.children:
            yield from child.walk()

    def __len__(self) -> int:
        return sum(1 for _ in self.walk())


def new_node(url: str) -> TraversalNode:
    return TraversalNode(url)


def add_child(parent: Optional[TraversalNode], url: str) -> Optional[TraversalNode]:
    """Добавляет ребёнка к parent; при parent=None (дерево не строится) возвращает None."""
    if parent is None:
        return None
    return parent.add_child(url)


def _render(node: TraversalNode, depth: int, lines: List[str]) -> None:
    for child in node.children:
        lines.append(INDENT * depth + BRANCH + child.url)
        _render(child, depth + 1, lines)


def render(node: TraversalNode) -> str:
    """Текст дерева: корень без отступа, каждый уровень на один таб глубже."""
    lines = [node.url]
    _render(node, 0, lines)
    return "\n".join(lines) + "\n"


def write_tree(node: TraversalNode, stream: TextIO) -> None:
    stream.write(render(node))
