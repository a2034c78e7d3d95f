"""Assemble vertex records from a primitive's attribute accessors."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Sequence

from ..core.analyzer import InspectContext
from ..core.decoder import decode_element
from ..core.gltf import component_count, get_accessor
from ..core.pagination import paginate
from ..models import Number, VertexAttribute, VertexGroup, VertexRecord

logger = logging.getLogger(__name__)

POSITION = "POSITION"


@dataclass
class _AttributeSource:
    accessor: Any
    data: Sequence[Number]
    num_components: int


def build_vertices(context: InspectContext, attributes: Mapping[str, int]) -> VertexGroup:
    """Zip the attribute accessors of a mesh primitive into vertex records.

    Attributes whose accessor or data cannot be resolved are left out of every
    record. The vertex count comes from ``POSITION``; without it the group is
    empty.
    """

    sources: Dict[str, _AttributeSource] = {}
    vertex_count = 0

    for name, accessor_index in attributes.items():
        accessor = get_accessor(context.document, accessor_index)
        data = context.accessor_data(context, accessor) if accessor is not None else None
        if data is None:
            logger.debug("Skipping attribute %s: accessor %s has no data", name, accessor_index)
            continue

        if name == POSITION:
            vertex_count = int(accessor.count or 0)

        sources[name] = _AttributeSource(
            accessor=accessor,
            data=data,
            num_components=component_count(accessor.type),
        )

    def build_record(index: int) -> VertexRecord:
        return VertexRecord(
            index=index,
            attributes=tuple(
                VertexAttribute(
                    name=name,
                    values=tuple(
                        decode_element(
                            source.data,
                            index,
                            source.num_components,
                            source.accessor.componentType,
                            bool(source.accessor.normalized),
                        )
                    ),
                )
                for name, source in sources.items()
            ),
        )

    return VertexGroup(vertex_count=vertex_count, nodes=paginate(vertex_count, build_record))
