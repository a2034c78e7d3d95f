"""Mesh primitive inspector."""

from __future__ import annotations

from collections.abc import Mapping

from ..core.analyzer import InspectContext, Inspector
from ..core.exceptions import PointerResolutionError
from ..core.gltf import primitive_attributes, resolve_json_pointer
from ..models import Header, InspectedPrimitive
from .topology import build_topology
from .vertices import build_vertices


class MeshPrimitiveInspector(Inspector):
    """Decode the vertices and topology of the primitive a JSON pointer refers to."""

    id = "mesh_primitive"

    def __init__(self, pointer: str) -> None:
        self.pointer = pointer

    def collect(self, context: InspectContext) -> InspectedPrimitive:
        primitive = resolve_json_pointer(context.document, self.pointer)
        if isinstance(primitive, Mapping):
            mode, indices = primitive.get("mode"), primitive.get("indices")
        elif hasattr(primitive, "attributes"):
            mode, indices = primitive.mode, primitive.indices
        else:
            raise PointerResolutionError(f"{self.pointer!r} does not refer to a mesh primitive")

        vertices = build_vertices(context, primitive_attributes(primitive))
        topology = build_topology(context, vertices.vertex_count, mode, indices)
        return InspectedPrimitive(
            header=Header(pointer=self.pointer),
            vertices=vertices,
            topology=topology,
        )
