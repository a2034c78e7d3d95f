"""Inspection session holding the currently displayed tree."""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Union

from .core.analyzer import GltfAnalyzer
from .inspectors import AccessorInspector, MeshPrimitiveInspector
from .models import InspectedAccessor, InspectedPrimitive
from .view.selection import SelectionMessage, build_selection

logger = logging.getLogger(__name__)


class InspectionSession:
    """Owns the result of the latest ``show_*`` request for one document.

    Every request recomputes the tree from scratch and replaces the previous
    one; ``reset`` drops it when the document goes away.
    """

    def __init__(self, analyzer: GltfAnalyzer) -> None:
        self._analyzer = analyzer
        self._pointer: Optional[str] = None
        self._result: Optional[Union[InspectedAccessor, InspectedPrimitive]] = None

    @classmethod
    def from_document(cls, document: Any, path: Optional[str] = None) -> "InspectionSession":
        return cls(GltfAnalyzer.from_document(document, path=path))

    @property
    def pointer(self) -> Optional[str]:
        return self._pointer

    @property
    def result(self) -> Optional[Union[InspectedAccessor, InspectedPrimitive]]:
        return self._result

    @property
    def roots(self) -> List[object]:
        return self._result.roots if self._result is not None else []

    def show_accessor(self, pointer: str) -> InspectedAccessor:
        logger.debug("Inspecting accessor %s", pointer)
        return self._show(AccessorInspector(pointer))

    def show_mesh_primitive(self, pointer: str) -> InspectedPrimitive:
        logger.debug("Inspecting mesh primitive %s", pointer)
        return self._show(MeshPrimitiveInspector(pointer))

    def _show(self, inspector):
        # A failed request leaves nothing displayed rather than a stale tree.
        self.reset()
        result = self._analyzer.run([inspector])[inspector.id]
        self._pointer = inspector.pointer
        self._result = result
        return result

    def reset(self) -> None:
        self._pointer = None
        self._result = None

    def select(self, nodes: Iterable[object]) -> Optional[SelectionMessage]:
        """Describe ``nodes`` from the current tree for the viewport overlay."""

        return build_selection(self._pointer, nodes)
