"""Translate a tree selection into a viewport highlight message."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from ..config import SELECTION_LIMIT
from ..models import Line, Point, Triangle, VertexRecord

logger = logging.getLogger(__name__)

TOO_MANY_VERTICES = f"Too many vertices selected. Only first {SELECTION_LIMIT} are shown."
TOO_MANY_PRIMITIVES = (
    f"Too many triangles, lines, or points selected. Only first {SELECTION_LIMIT} are shown."
)


@dataclass
class SelectionMessage:
    command: str
    pointer: Optional[str] = None
    vertices: List[int] = field(default_factory=list)
    triangles_lines_points: List[Tuple[int, ...]] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def to_dict(self):
        if self.command == "clear":
            return {"command": "clear"}
        return {
            "command": self.command,
            "jsonPointer": self.pointer,
            "vertices": list(self.vertices),
            "trianglesLinesPoints": [list(item) for item in self.triangles_lines_points],
        }


def build_selection(pointer: Optional[str], selection: Iterable[object]) -> Optional[SelectionMessage]:
    """Build the message describing ``selection`` for the viewport.

    Vertices and primitives are capped independently at ``SELECTION_LIMIT``,
    with a warning for each list that was cut. An empty selection clears the
    highlight; a selection without vertices or primitives yields ``None``.
    """

    nodes = list(selection)
    if not nodes:
        return SelectionMessage(command="clear")

    warnings: List[str] = []

    vertices = [node.index for node in nodes if isinstance(node, VertexRecord)]
    if len(vertices) > SELECTION_LIMIT:
        warnings.append(TOO_MANY_VERTICES)
        vertices = vertices[:SELECTION_LIMIT]

    triangles = [node.indices for node in nodes if isinstance(node, Triangle)]
    lines = [node.indices for node in nodes if isinstance(node, Line)]
    points = [(node.index,) for node in nodes if isinstance(node, Point)]
    primitives: List[Tuple[int, ...]] = [*triangles, *lines, *points]
    if len(primitives) > SELECTION_LIMIT:
        warnings.append(TOO_MANY_PRIMITIVES)
        primitives = primitives[:SELECTION_LIMIT]

    for warning in warnings:
        logger.warning(warning)

    if not vertices and not primitives:
        return None

    return SelectionMessage(
        command="select",
        pointer=pointer,
        vertices=vertices,
        triangles_lines_points=primitives,
        warnings=warnings,
    )
