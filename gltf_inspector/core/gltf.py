"""glTF document helpers built on pygltflib and numpy."""

from __future__ import annotations

import base64
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional
from urllib.parse import unquote

import numpy as np
from pygltflib import GLTF2

from ..models import ComponentType
from .exceptions import (
    GltfLoadError,
    PointerResolutionError,
    UnsupportedComponentTypeError,
    UnsupportedElementTypeError,
)

if TYPE_CHECKING:  # pragma: no cover
    from .analyzer import InspectContext

logger = logging.getLogger(__name__)

COMPONENT_COUNTS: Dict[str, int] = {
    "SCALAR": 1,
    "VEC2": 2,
    "VEC3": 3,
    "VEC4": 4,
    "MAT2": 4,
    "MAT3": 9,
    "MAT4": 16,
}

COMPONENT_DTYPES: Dict[int, np.dtype] = {
    ComponentType.BYTE: np.dtype("<i1"),
    ComponentType.UNSIGNED_BYTE: np.dtype("<u1"),
    ComponentType.SHORT: np.dtype("<i2"),
    ComponentType.UNSIGNED_SHORT: np.dtype("<u2"),
    ComponentType.INT: np.dtype("<i4"),
    ComponentType.UNSIGNED_INT: np.dtype("<u4"),
    ComponentType.FLOAT: np.dtype("<f4"),
}


def component_count(element_type: str) -> int:
    """Return the number of components making up one ``element_type`` element."""

    try:
        return COMPONENT_COUNTS[element_type]
    except KeyError:
        raise UnsupportedElementTypeError(f"Invalid accessor type: {element_type}") from None


def component_dtype(component_type: int) -> np.dtype:
    try:
        return COMPONENT_DTYPES[component_type]
    except KeyError:
        raise UnsupportedComponentTypeError(
            f"Invalid accessor component type: {component_type}"
        ) from None


def load_document(path: str) -> GLTF2:
    """Load a ``.gltf`` or ``.glb`` file located at ``path``."""

    try:
        document = GLTF2().load(path)
    except Exception as exc:
        raise GltfLoadError(f"Failed to load glTF document from '{path}': {exc}") from exc
    if document is None:
        raise GltfLoadError(f"Failed to load glTF document from '{path}'")
    return document


def resolve_json_pointer(document: Any, pointer: str) -> Any:
    """Return the object ``pointer`` refers to inside ``document``.

    Pointers follow RFC 6901 (``/meshes/0/primitives/1``). Segments are looked
    up as list indices, mapping keys or attributes of the pygltflib dataclasses,
    so the same pointer works for parsed JSON and for ``GLTF2`` objects.
    """

    if pointer in ("", "/"):
        return document
    if not pointer.startswith("/"):
        raise PointerResolutionError(f"JSON pointer must start with '/': {pointer!r}")

    current = document
    for raw_token in pointer[1:].split("/"):
        token = raw_token.replace("~1", "/").replace("~0", "~")
        current = _step(current, token, pointer)
    return current


def _step(current: Any, token: str, pointer: str) -> Any:
    if current is None:
        raise PointerResolutionError(f"JSON pointer {pointer!r} passes through an empty value")

    if isinstance(current, (list, tuple)):
        if not token.isdigit():
            raise PointerResolutionError(f"Expected an array index in {pointer!r}, got {token!r}")
        index = int(token)
        if index >= len(current):
            raise PointerResolutionError(f"Index {index} out of range in {pointer!r}")
        value = current[index]
    elif isinstance(current, Mapping):
        if token not in current:
            raise PointerResolutionError(f"Key {token!r} not found in {pointer!r}")
        value = current[token]
    else:
        if token.startswith("_") or not hasattr(current, token):
            raise PointerResolutionError(f"Property {token!r} not found in {pointer!r}")
        value = getattr(current, token)

    if value is None:
        raise PointerResolutionError(f"JSON pointer {pointer!r} resolves to an empty value")
    return value


def primitive_attributes(primitive: Any) -> Dict[str, int]:
    """Return a mesh primitive's attribute name to accessor index mapping.

    Works with plain dictionaries and with ``pygltflib.Attributes``, whose
    unset standard semantics are ``None`` and whose custom semantics
    (``_BATCHID``, ``TEXCOORD_2`` ...) are plain instance attributes.
    """

    attributes = primitive.get("attributes") if isinstance(primitive, Mapping) else primitive.attributes
    if attributes is None:
        return {}
    items = attributes.items() if isinstance(attributes, Mapping) else vars(attributes).items()
    return {name: index for name, index in items if isinstance(index, int) and not isinstance(index, bool)}


def get_accessor(document: GLTF2, index: Optional[int]) -> Optional[Any]:
    """Return accessor ``index`` or ``None`` when it does not exist."""

    if index is None or index < 0:
        return None
    accessors = document.accessors or []
    if index >= len(accessors):
        return None
    return accessors[index]


def get_accessor_data(context: "InspectContext", accessor: Any) -> Optional[np.ndarray]:
    """Return the flat array of components backing ``accessor``.

    Applies the buffer view offset and byte stride, zero fills accessors
    without a buffer view and applies sparse substitution. Returns ``None``
    when the backing bytes are unavailable.
    """

    num_components = component_count(accessor.type)
    dtype = component_dtype(accessor.componentType)
    count = int(accessor.count or 0)

    if accessor.bufferView is None:
        data = np.zeros(count * num_components, dtype=dtype)
    else:
        data = _read_strided(context, accessor.bufferView, accessor.byteOffset or 0, count, num_components, dtype)
        if data is None:
            return None

    sparse = getattr(accessor, "sparse", None)
    if sparse is not None and sparse.count:
        data = _apply_sparse(context, data, sparse, num_components, dtype)
        if data is None:
            return None

    return data


def _read_strided(
    context: "InspectContext",
    buffer_view_index: int,
    byte_offset: int,
    count: int,
    num_components: int,
    dtype: np.dtype,
) -> Optional[np.ndarray]:
    document = context.document
    views = document.bufferViews or []
    if not 0 <= buffer_view_index < len(views):
        logger.warning("Buffer view %s does not exist", buffer_view_index)
        return None
    view = views[buffer_view_index]

    buffer = get_buffer_bytes(context, view.buffer)
    if buffer is None:
        return None

    element_size = num_components * dtype.itemsize
    stride = view.byteStride or element_size
    start = (view.byteOffset or 0) + byte_offset
    if count == 0:
        return np.zeros(0, dtype=dtype)

    required = start + stride * (count - 1) + element_size
    if required > len(buffer):
        logger.warning(
            "Buffer view %s is too short: need %d bytes, buffer has %d",
            buffer_view_index,
            required,
            len(buffer),
        )
        return None

    elements = np.ndarray(
        shape=(count, num_components),
        dtype=dtype,
        buffer=buffer,
        offset=start,
        strides=(stride, dtype.itemsize),
    )
    return elements.reshape(-1).copy()


def _apply_sparse(
    context: "InspectContext",
    data: np.ndarray,
    sparse: Any,
    num_components: int,
    dtype: np.dtype,
) -> Optional[np.ndarray]:
    index_dtype = component_dtype(sparse.indices.componentType)
    indices = _read_strided(
        context, sparse.indices.bufferView, sparse.indices.byteOffset or 0, sparse.count, 1, index_dtype
    )
    values = _read_strided(
        context, sparse.values.bufferView, sparse.values.byteOffset or 0, sparse.count, num_components, dtype
    )
    if indices is None or values is None:
        return None

    num_elements = len(data) // num_components
    if indices.size != sparse.count or int(indices.max()) >= num_elements:
        logger.warning(
            "Sparse indices out of range: %d indices, largest %d, accessor has %d elements",
            indices.size,
            int(indices.max()) if indices.size else -1,
            num_elements,
        )
        return None

    patched = data.copy().reshape(-1, num_components)
    patched[indices.astype(np.intp)] = values.reshape(-1, num_components)
    return patched.reshape(-1)


def get_buffer_bytes(context: "InspectContext", buffer_index: int) -> Optional[bytes]:
    """Return the raw bytes of buffer ``buffer_index``.

    Buffers without a URI are the GLB binary chunk, ``data:`` URIs are decoded
    inline and anything else is read relative to the document's directory.
    """

    document = context.document
    buffers = document.buffers or []
    if not 0 <= buffer_index < len(buffers):
        logger.warning("Buffer %s does not exist", buffer_index)
        return None
    uri = buffers[buffer_index].uri

    if not uri:
        blob = document.binary_blob()
        if blob is None:
            logger.warning("Buffer %s has no URI and the document has no binary chunk", buffer_index)
        return blob

    if uri.startswith("data:"):
        header, _, payload = uri.partition(",")
        if not header.endswith(";base64"):
            logger.warning("Buffer %s uses a non-base64 data URI", buffer_index)
            return None
        return base64.b64decode(payload)

    base = Path(context.path).parent if context.path else Path.cwd()
    location = base / unquote(uri)
    try:
        return location.read_bytes()
    except OSError as exc:
        logger.warning("Unable to read buffer %s from %s: %s", buffer_index, location, exc)
        return None
