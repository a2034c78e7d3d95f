"""Core infrastructure for glTF document loading and decoding."""

from .analyzer import GltfAnalyzer, InspectContext, Inspector
from .exceptions import (
    DataUnavailableError,
    DecodeError,
    GltfInspectorError,
    GltfLoadError,
    PointerResolutionError,
    UnsupportedComponentTypeError,
    UnsupportedElementTypeError,
    UnsupportedTopologyModeError,
)

__all__ = [
    "GltfAnalyzer",
    "InspectContext",
    "Inspector",
    "DataUnavailableError",
    "DecodeError",
    "GltfInspectorError",
    "GltfLoadError",
    "PointerResolutionError",
    "UnsupportedComponentTypeError",
    "UnsupportedElementTypeError",
    "UnsupportedTopologyModeError",
]
