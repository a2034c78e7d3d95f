"""Labels and children for the inspected node tree."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence

from ..models import (
    Header,
    Line,
    LineGroup,
    MatrixElement,
    MatrixRow,
    Page,
    Point,
    PointGroup,
    ScalarElement,
    Triangle,
    TriangleGroup,
    VectorElement,
    VertexAttribute,
    VertexGroup,
    VertexRecord,
    top_level_nodes,
)
from ..utils import format_matrix, format_scalar, format_vector

GROUP_LABELS = {
    VertexGroup: "Vertices",
    TriangleGroup: "Triangles",
    LineGroup: "Lines",
    PointGroup: "Points",
}


def get_label(node: object) -> str:
    """Return the single-line label shown for ``node``."""

    if isinstance(node, Header):
        return node.pointer
    if isinstance(node, Page):
        return f"[{node.start_index}..{node.end_index}]"
    if isinstance(node, ScalarElement):
        return format_scalar(node.value, node.is_float)
    if isinstance(node, (VectorElement, MatrixRow)):
        return format_vector(node.values, node.is_float)
    if isinstance(node, MatrixElement):
        return format_matrix(node.rows, node.is_float)
    if isinstance(node, (VertexGroup, TriangleGroup, LineGroup, PointGroup)):
        return GROUP_LABELS[type(node)]
    if isinstance(node, VertexRecord):
        return str(node.index)
    if isinstance(node, VertexAttribute):
        return f"{node.name}: {format_vector(node.values, True)}"
    if isinstance(node, (Triangle, Line)):
        return format_vector(node.indices, False)
    if isinstance(node, Point):
        return str(node.index)
    raise TypeError(f"Invalid data node type: {type(node).__name__}")


def get_tooltip(node: object) -> Optional[str]:
    """Return ``"<index>: <label>"`` for accessor elements, ``None`` otherwise."""

    if isinstance(node, (ScalarElement, VectorElement, MatrixElement, MatrixRow)):
        return f"{node.index}: {get_label(node)}"
    return None


def get_children(node: object) -> Sequence[object]:
    """Return the direct children of ``node``; leaves have none."""

    if isinstance(node, MatrixElement):
        return node.rows
    if isinstance(node, Page):
        return node.items
    if isinstance(node, (VertexGroup, TriangleGroup, LineGroup, PointGroup)):
        return top_level_nodes(node.nodes)
    if isinstance(node, VertexRecord):
        return node.attributes
    if isinstance(
        node,
        (Header, ScalarElement, VectorElement, MatrixRow, VertexAttribute, Triangle, Line, Point),
    ):
        return ()
    raise TypeError(f"Invalid data node type: {type(node).__name__}")


def is_collapsible(node: object) -> bool:
    return bool(get_children(node))


def iter_lines(
    roots: Iterable[object], *, expand_pages: bool = False, indent: str = "  "
) -> Iterator[str]:
    """Yield an indented text rendering of the tree below ``roots``.

    Pages stay collapsed (label only) unless ``expand_pages`` is set.
    """

    stack: List[tuple] = [(node, 0) for node in reversed(list(roots))]
    while stack:
        node, depth = stack.pop()
        yield f"{indent * depth}{get_label(node)}"
        if isinstance(node, Page) and not expand_pages:
            continue
        for child in reversed(get_children(node)):
            stack.append((child, depth + 1))


def render_tree(roots: Iterable[object], *, expand_pages: bool = False) -> str:
    return "\n".join(iter_lines(roots, expand_pages=expand_pages))
