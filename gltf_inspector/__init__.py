"""Decode glTF accessor and mesh primitive data into a browsable tree."""

from .core import GltfAnalyzer, InspectContext
from .session import InspectionSession

__all__ = ["GltfAnalyzer", "InspectContext", "InspectionSession"]
