"""Inspector implementations for decoding accessors and mesh primitives."""

from .accessor import AccessorInspector, build_accessor_tree
from .mesh_primitive import MeshPrimitiveInspector
from .topology import IndexSource, build_topology
from .vertices import build_vertices

__all__ = [
    "AccessorInspector",
    "MeshPrimitiveInspector",
    "IndexSource",
    "build_accessor_tree",
    "build_topology",
    "build_vertices",
]
