"""Domain models used across the inspector."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Generic, List, Tuple, TypeVar, Union

T = TypeVar("T")

Number = Union[int, float]
Values = Tuple[Number, ...]


class ComponentType(IntEnum):
    BYTE = 5120
    UNSIGNED_BYTE = 5121
    SHORT = 5122
    UNSIGNED_SHORT = 5123
    INT = 5124
    UNSIGNED_INT = 5125
    FLOAT = 5126


class PrimitiveMode(IntEnum):
    POINTS = 0
    LINES = 1
    LINE_LOOP = 2
    LINE_STRIP = 3
    TRIANGLES = 4
    TRIANGLE_STRIP = 5
    TRIANGLE_FAN = 6


# Accessor elements


@dataclass(frozen=True)
class ScalarElement:
    index: int
    value: Number
    is_float: bool


@dataclass(frozen=True)
class VectorElement:
    index: int
    values: Values
    is_float: bool


@dataclass(frozen=True)
class MatrixRow:
    index: int
    values: Values
    is_float: bool


@dataclass(frozen=True)
class MatrixElement:
    index: int
    rows: Tuple[MatrixRow, ...]
    is_float: bool


DecodedElement = Union[ScalarElement, VectorElement, MatrixElement]


# Pagination


@dataclass(frozen=True)
class Page(Generic[T]):
    """A contiguous window of items; ``end_index`` is inclusive."""

    start_index: int
    end_index: int
    items: Tuple[T, ...]


@dataclass(frozen=True)
class Flat(Generic[T]):
    """All items of a result that fits in a single page."""

    items: Tuple[T, ...]

    def __len__(self) -> int:
        return len(self.items)

    def iter_items(self):
        return iter(self.items)


@dataclass(frozen=True)
class Paged(Generic[T]):
    """A result split into pages of at most ``PAGE_SIZE`` items."""

    pages: Tuple[Page[T], ...]

    def __len__(self) -> int:
        return sum(len(page.items) for page in self.pages)

    def iter_items(self):
        for page in self.pages:
            yield from page.items


PaginatedNode = Union[Flat[T], Paged[T]]


# Mesh primitive content


@dataclass(frozen=True)
class VertexAttribute:
    name: str
    values: Values


@dataclass(frozen=True)
class VertexRecord:
    index: int
    attributes: Tuple[VertexAttribute, ...] = ()

    def attribute(self, name: str) -> VertexAttribute:
        for attribute in self.attributes:
            if attribute.name == name:
                return attribute
        raise KeyError(name)

    @property
    def attribute_names(self) -> List[str]:
        return [attribute.name for attribute in self.attributes]


@dataclass(frozen=True)
class Triangle:
    indices: Tuple[int, int, int]


@dataclass(frozen=True)
class Line:
    indices: Tuple[int, int]


@dataclass(frozen=True)
class Point:
    index: int


@dataclass(frozen=True)
class VertexGroup:
    vertex_count: int
    nodes: PaginatedNode[VertexRecord]


@dataclass(frozen=True)
class TriangleGroup:
    nodes: PaginatedNode[Triangle]


@dataclass(frozen=True)
class LineGroup:
    nodes: PaginatedNode[Line]


@dataclass(frozen=True)
class PointGroup:
    nodes: PaginatedNode[Point]


TopologyResult = Union[TriangleGroup, LineGroup, PointGroup]


# Inspection roots


@dataclass(frozen=True)
class Header:
    pointer: str


@dataclass
class InspectedAccessor:
    header: Header
    elements: PaginatedNode[DecodedElement]

    @property
    def roots(self) -> List[object]:
        return [self.header, *top_level_nodes(self.elements)]


@dataclass
class InspectedPrimitive:
    header: Header
    vertices: VertexGroup
    topology: TopologyResult

    @property
    def roots(self) -> List[object]:
        return [self.header, self.vertices, self.topology]


def top_level_nodes(nodes: PaginatedNode) -> Tuple[object, ...]:
    if isinstance(nodes, Flat):
        return nodes.items
    if isinstance(nodes, Paged):
        return nodes.pages
    raise TypeError(f"Unexpected paginated node: {nodes!r}")
