"""High level analyzer orchestration."""

from __future__ import annotations

import contextlib
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional, Protocol

from . import gltf

logger = logging.getLogger(__name__)

AccessorDataFn = Callable[["InspectContext", Any], Optional[Any]]


class Inspector(Protocol):
    """Protocol defining how inspectors gather data from a glTF document."""

    id: str

    def collect(self, context: "InspectContext") -> Any:
        """Return extracted information from the document."""


@dataclass
class InspectContext:
    """Holds the document, its location and the accessor data resolver."""

    path: Optional[str]
    document: Any
    accessor_data: AccessorDataFn = gltf.get_accessor_data


class GltfAnalyzer(contextlib.AbstractContextManager["GltfAnalyzer"]):
    """Loads a glTF document and coordinates data extraction."""

    def __init__(self, path: Optional[str] = None, document: Any = None) -> None:
        self._path = path
        self._document = document

    @classmethod
    def from_document(cls, document: Any, path: Optional[str] = None) -> "GltfAnalyzer":
        """Wrap an already parsed document."""

        return cls(path=path, document=document)

    @property
    def path(self) -> Optional[str]:
        return self._path

    @property
    def document(self) -> Any:
        return self._document

    @property
    def context(self) -> InspectContext:
        if self._document is None:
            raise RuntimeError("Analyzer not loaded. Call load() before accessing context.")
        return InspectContext(path=self._path, document=self._document)

    def load(self) -> "GltfAnalyzer":
        if self._document is not None:
            return self
        if self._path is None:
            raise RuntimeError("Analyzer has neither a path nor a document to load.")

        logger.info("Loading %s", self._path)
        self._document = gltf.load_document(self._path)
        return self

    def close(self) -> None:
        self._document = None

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None

    # Allow usage as context manager via `with GltfAnalyzer(path) as analyzer:`
    def __enter__(self) -> "GltfAnalyzer":
        return self.load()

    def run(self, inspectors: Iterable[Inspector]) -> Dict[str, Any]:
        """Execute inspectors and return their aggregated results."""

        results: Dict[str, Any] = {}
        ctx = self.context
        for inspector in inspectors:
            results[inspector.id] = inspector.collect(ctx)
        return results
