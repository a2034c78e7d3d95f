"""Reconstruct triangles, lines and points of a mesh primitive."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from ..core.analyzer import InspectContext
from ..core.exceptions import UnsupportedTopologyModeError
from ..core.gltf import get_accessor
from ..core.pagination import paginate
from ..models import (
    Line,
    LineGroup,
    Point,
    PointGroup,
    PrimitiveMode,
    TopologyResult,
    Triangle,
    TriangleGroup,
)

logger = logging.getLogger(__name__)

TRIANGLE_MODES = frozenset({PrimitiveMode.TRIANGLES, PrimitiveMode.TRIANGLE_STRIP, PrimitiveMode.TRIANGLE_FAN})
LINE_MODES = frozenset({PrimitiveMode.LINES, PrimitiveMode.LINE_STRIP, PrimitiveMode.LINE_LOOP})


@dataclass(frozen=True)
class IndexSource:
    """Uniform view over explicit index data or the implicit ``i -> i`` order."""

    get: Callable[[int], int]
    length: int

    @classmethod
    def explicit(cls, indices) -> "IndexSource":
        values = [int(value) for value in indices]
        return cls(get=values.__getitem__, length=len(values))

    @classmethod
    def implicit(cls, vertex_count: int) -> "IndexSource":
        return cls(get=lambda index: index, length=vertex_count)


def resolve_index_source(
    context: InspectContext, vertex_count: int, indices: Optional[int]
) -> IndexSource:
    accessor = get_accessor(context.document, indices)
    data = context.accessor_data(context, accessor) if accessor is not None else None
    if data is None:
        if indices is not None:
            logger.debug("Index accessor %s has no data; using implicit indices", indices)
        return IndexSource.implicit(vertex_count)

    source = IndexSource.explicit(data)
    # Out-of-range indices are shown as stored; the tree only reports them.
    largest = max((source.get(i) for i in range(source.length)), default=-1)
    if largest >= vertex_count:
        logger.debug(
            "Index accessor %s references vertex %d but the primitive has %d vertices",
            indices,
            largest,
            vertex_count,
        )
    return source


def expand_triangles(mode: PrimitiveMode, source: IndexSource) -> List[Triangle]:
    get, length = source.get, source.length

    if mode == PrimitiveMode.TRIANGLES:
        return [Triangle((get(i * 3), get(i * 3 + 1), get(i * 3 + 2))) for i in range(length // 3)]

    if mode == PrimitiveMode.TRIANGLE_FAN:
        return [Triangle((get(0), get(i + 1), get(i + 2))) for i in range(length - 2)]

    if mode == PrimitiveMode.TRIANGLE_STRIP:
        triangles: List[Triangle] = []
        for i in range(length - 2):
            # Odd triangles are flipped to keep a consistent winding order.
            if i % 2:
                triangles.append(Triangle((get(i + 2), get(i + 1), get(i))))
            else:
                triangles.append(Triangle((get(i), get(i + 1), get(i + 2))))
        return triangles

    raise UnsupportedTopologyModeError(f"{mode!r} is not a triangle mode")


def expand_lines(mode: PrimitiveMode, source: IndexSource) -> List[Line]:
    get, length = source.get, source.length

    if mode == PrimitiveMode.LINES:
        return [Line((get(i * 2), get(i * 2 + 1))) for i in range(length // 2)]

    if mode == PrimitiveMode.LINE_STRIP:
        return [Line((get(i), get(i + 1))) for i in range(length - 1)]

    if mode == PrimitiveMode.LINE_LOOP:
        if length < 2:
            return []
        return [Line((get(i), get((i + 1) % length))) for i in range(length)]

    raise UnsupportedTopologyModeError(f"{mode!r} is not a line mode")


def expand_points(source: IndexSource) -> List[Point]:
    return [Point(source.get(i)) for i in range(source.length)]


def parse_mode(mode: Optional[int]) -> PrimitiveMode:
    if mode is None:
        return PrimitiveMode.TRIANGLES
    try:
        return PrimitiveMode(mode)
    except ValueError:
        raise UnsupportedTopologyModeError(f"Invalid mesh primitive mode ({mode})") from None


def build_topology(
    context: InspectContext,
    vertex_count: int,
    mode: Optional[int] = None,
    indices: Optional[int] = None,
) -> TopologyResult:
    """Expand a primitive's index data into triangles, lines or points.

    ``mode`` defaults to TRIANGLES. Without a resolvable ``indices`` accessor
    the vertices are used in order. Too few indices for the mode yield an
    empty group.
    """

    primitive_mode = parse_mode(mode)
    source = resolve_index_source(context, vertex_count, indices)

    if primitive_mode in TRIANGLE_MODES:
        triangles = expand_triangles(primitive_mode, source)
        return TriangleGroup(nodes=paginate(len(triangles), triangles.__getitem__))

    if primitive_mode in LINE_MODES:
        lines = expand_lines(primitive_mode, source)
        return LineGroup(nodes=paginate(len(lines), lines.__getitem__))

    points = expand_points(source)
    return PointGroup(nodes=paginate(len(points), points.__getitem__))
