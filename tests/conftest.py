# tests/conftest.py

import base64
from typing import Optional

import numpy as np
import pytest
from pygltflib import GLTF2, Accessor, Buffer, BufferView

from gltf_inspector.core.analyzer import InspectContext

COMPONENT_TYPES = {
    np.dtype(np.int8): 5120,
    np.dtype(np.uint8): 5121,
    np.dtype(np.int16): 5122,
    np.dtype(np.uint16): 5123,
    np.dtype(np.uint32): 5125,
    np.dtype(np.float32): 5126,
}


class DocumentBuilder:
    """Assemble an in-memory GLB-style document from numpy arrays."""

    def __init__(self):
        self.document = GLTF2(buffers=[Buffer(byteLength=0)])
        self._blob = bytearray()

    def add_view(self, raw: bytes, stride: Optional[int] = None) -> int:
        while len(self._blob) % 4:
            self._blob.append(0)
        offset = len(self._blob)
        self._blob.extend(raw)
        self.document.bufferViews.append(
            BufferView(buffer=0, byteOffset=offset, byteLength=len(raw), byteStride=stride)
        )
        return len(self.document.bufferViews) - 1

    def add_accessor(self, values, element_type: str, *, normalized: bool = False, **overrides) -> int:
        array = np.asarray(values)
        view = self.add_view(array.astype(array.dtype.newbyteorder("<")).tobytes())
        count = array.size // _components(element_type)
        fields = dict(
            bufferView=view,
            componentType=COMPONENT_TYPES[array.dtype],
            count=count,
            type=element_type,
            normalized=normalized,
        )
        fields.update(overrides)
        self.document.accessors.append(Accessor(**fields))
        return len(self.document.accessors) - 1

    def build(self) -> GLTF2:
        self.document.buffers[0].byteLength = len(self._blob)
        self.document.set_binary_blob(bytes(self._blob))
        return self.document

    def as_data_uri(self) -> GLTF2:
        """Move the binary blob into a base64 ``data:`` URI buffer."""

        payload = base64.b64encode(bytes(self._blob)).decode("ascii")
        self.document.buffers[0].uri = f"data:application/octet-stream;base64,{payload}"
        self.document.buffers[0].byteLength = len(self._blob)
        return self.document


def _components(element_type: str) -> int:
    return {"SCALAR": 1, "VEC2": 2, "VEC3": 3, "VEC4": 4, "MAT2": 4, "MAT3": 9, "MAT4": 16}[element_type]


@pytest.fixture
def builder():
    return DocumentBuilder()


@pytest.fixture
def make_context():
    def factory(document, path=None, accessor_data=None) -> InspectContext:
        if accessor_data is None:
            return InspectContext(path=path, document=document)
        return InspectContext(path=path, document=document, accessor_data=accessor_data)

    return factory
