"""Accessor inspector."""

from __future__ import annotations

import logging
from typing import Any

from ..core.analyzer import InspectContext, Inspector
from ..core.decoder import build_element
from ..core.exceptions import DataUnavailableError, PointerResolutionError
from ..core.gltf import resolve_json_pointer
from ..core.pagination import paginate
from ..models import DecodedElement, Header, InspectedAccessor, PaginatedNode

logger = logging.getLogger(__name__)


def build_accessor_tree(context: InspectContext, accessor: Any) -> PaginatedNode[DecodedElement]:
    """Decode every element of ``accessor`` into a paginated list of nodes."""

    data = context.accessor_data(context, accessor)
    if data is None:
        raise DataUnavailableError("Unable to get accessor data")

    count = int(accessor.count or 0)
    logger.debug("Decoding %d %s elements", count, accessor.type)
    return paginate(count, lambda index: build_element(accessor, data, index))


class AccessorInspector(Inspector):
    """Decode the accessor a JSON pointer refers to."""

    id = "accessor"

    def __init__(self, pointer: str) -> None:
        self.pointer = pointer

    def collect(self, context: InspectContext) -> InspectedAccessor:
        accessor = resolve_json_pointer(context.document, self.pointer)
        if not hasattr(accessor, "componentType"):
            raise PointerResolutionError(f"{self.pointer!r} does not refer to an accessor")
        return InspectedAccessor(
            header=Header(pointer=self.pointer),
            elements=build_accessor_tree(context, accessor),
        )
