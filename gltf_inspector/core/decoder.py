"""Turn flat accessor data into typed element nodes."""

from __future__ import annotations

import math
from typing import Any, Dict, List, Sequence

from ..models import (
    ComponentType,
    DecodedElement,
    MatrixElement,
    MatrixRow,
    Number,
    ScalarElement,
    VectorElement,
)
from .exceptions import UnsupportedComponentTypeError, UnsupportedElementTypeError
from .gltf import component_count

# Largest representable magnitude of each integer component type. For signed
# types that is the magnitude of the minimum value, so the minimum maps to -1.
NORMALIZATION_DIVISORS: Dict[int, int] = {
    ComponentType.BYTE: 128,
    ComponentType.UNSIGNED_BYTE: 255,
    ComponentType.SHORT: 32768,
    ComponentType.UNSIGNED_SHORT: 65535,
    ComponentType.INT: 2147483648,
    ComponentType.UNSIGNED_INT: 4294967295,
}

SIGNED_COMPONENT_TYPES = frozenset({ComponentType.BYTE, ComponentType.SHORT, ComponentType.INT})

VECTOR_TYPES = frozenset({"VEC2", "VEC3", "VEC4"})
MATRIX_TYPES = frozenset({"MAT2", "MAT3", "MAT4"})


def normalize_component(value: Number, component_type: int) -> float:
    """Map a normalized integer component to ``[0, 1]`` or ``[-1, 1]``."""

    try:
        divisor = NORMALIZATION_DIVISORS[component_type]
    except KeyError:
        raise UnsupportedComponentTypeError(
            f"Component type {component_type} cannot be normalized"
        ) from None
    if component_type in SIGNED_COMPONENT_TYPES:
        return max(value / divisor, -1.0)
    return value / divisor


def decode_element(
    data: Sequence[Number],
    index: int,
    num_components: int,
    component_type: int,
    normalized: bool,
) -> List[Number]:
    """Return the ``num_components`` values of element ``index`` in ``data``."""

    start = index * num_components
    values = data[start:start + num_components]
    values = values.tolist() if hasattr(values, "tolist") else list(values)

    if normalized and component_type != ComponentType.FLOAT:
        return [normalize_component(value, component_type) for value in values]
    return values


def is_float_element(accessor: Any) -> bool:
    return accessor.componentType == ComponentType.FLOAT or bool(accessor.normalized)


def build_element(accessor: Any, data: Sequence[Number], index: int) -> DecodedElement:
    """Decode element ``index`` of ``accessor`` into a scalar, vector or matrix node."""

    element_type = accessor.type
    num_components = component_count(element_type)
    values = decode_element(
        data, index, num_components, accessor.componentType, bool(accessor.normalized)
    )
    is_float = is_float_element(accessor)

    if element_type == "SCALAR":
        return ScalarElement(index=index, value=values[0], is_float=is_float)

    if element_type in VECTOR_TYPES:
        return VectorElement(index=index, values=tuple(values), is_float=is_float)

    if element_type in MATRIX_TYPES:
        size = math.isqrt(num_components)
        rows = tuple(
            MatrixRow(
                index=row_index,
                values=tuple(values[row_index * size:(row_index + 1) * size]),
                is_float=is_float,
            )
            for row_index in range(size)
        )
        return MatrixElement(index=index, rows=rows, is_float=is_float)

    raise UnsupportedElementTypeError(f"Invalid accessor type: {element_type}")
