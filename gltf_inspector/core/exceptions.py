"""Project-specific exception types."""


class GltfInspectorError(Exception):
    """Base class for every error raised by gltf_inspector."""


class GltfLoadError(GltfInspectorError, RuntimeError):
    """Raised when a glTF document fails to load."""


class PointerResolutionError(GltfInspectorError, LookupError):
    """Raised when a JSON pointer does not resolve inside the document."""


class DecodeError(GltfInspectorError, ValueError):
    """Raised when accessor or primitive data cannot be decoded."""


class DataUnavailableError(DecodeError):
    """Raised when the data backing an accessor cannot be resolved."""


class UnsupportedElementTypeError(DecodeError):
    """Raised for an accessor ``type`` outside SCALAR/VECn/MATn."""


class UnsupportedComponentTypeError(DecodeError):
    """Raised for an accessor ``componentType`` that is not a glTF value."""


class UnsupportedTopologyModeError(DecodeError):
    """Raised for a mesh primitive ``mode`` that is not a glTF value."""
