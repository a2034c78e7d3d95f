# tests/test_gltf.py

import json

import numpy as np
import pytest
from pygltflib import GLTF2, Attributes, Mesh, Primitive

from gltf_inspector.core.exceptions import (
    GltfLoadError,
    PointerResolutionError,
    UnsupportedElementTypeError,
)
from gltf_inspector.core.gltf import (
    component_count,
    get_accessor,
    get_accessor_data,
    get_buffer_bytes,
    load_document,
    primitive_attributes,
    resolve_json_pointer,
)


@pytest.mark.parametrize(
    "element_type,expected",
    [("SCALAR", 1), ("VEC2", 2), ("VEC3", 3), ("VEC4", 4), ("MAT2", 4), ("MAT3", 9), ("MAT4", 16)],
)
def test_component_count(element_type, expected):
    assert component_count(element_type) == expected


def test_component_count_rejects_unknown_type():
    with pytest.raises(UnsupportedElementTypeError):
        component_count("MAT5")


def test_resolve_json_pointer_into_pygltflib_document(builder):
    builder.add_accessor(np.array([1, 2], dtype=np.uint8), "SCALAR")
    primitive = Primitive(attributes=Attributes(POSITION=0), mode=0)
    builder.document.meshes.append(Mesh(primitives=[primitive]))
    document = builder.build()

    assert resolve_json_pointer(document, "/accessors/0") is document.accessors[0]
    assert resolve_json_pointer(document, "/meshes/0/primitives/0") is primitive
    assert resolve_json_pointer(document, "/meshes/0/primitives/0/attributes/POSITION") == 0
    assert resolve_json_pointer(document, "") is document


def test_resolve_json_pointer_unescapes_mapping_keys():
    document = {"extras": {"a/b": {"~tilde": 3}}}

    assert resolve_json_pointer(document, "/extras/a~1b/~0tilde") == 3


@pytest.mark.parametrize(
    "pointer",
    ["accessors/0", "/accessors/5", "/accessors/x", "/nothing", "/meshes/0", "/accessors/0/_private"],
)
def test_resolve_json_pointer_failures(builder, pointer):
    builder.add_accessor(np.array([1], dtype=np.uint8), "SCALAR")
    document = builder.build()

    with pytest.raises(PointerResolutionError):
        resolve_json_pointer(document, pointer)


def test_primitive_attributes_from_pygltflib_and_dicts():
    attributes = Attributes(POSITION=0, NORMAL=1)
    attributes._BATCHID = 2

    assert primitive_attributes(Primitive(attributes=attributes)) == {"POSITION": 0, "NORMAL": 1, "_BATCHID": 2}
    assert primitive_attributes({"attributes": {"POSITION": 3, "COLOR_0": 4}}) == {"POSITION": 3, "COLOR_0": 4}
    assert primitive_attributes({}) == {}


def test_get_accessor_bounds(builder):
    builder.add_accessor(np.array([1], dtype=np.uint8), "SCALAR")
    document = builder.build()

    assert get_accessor(document, 0) is document.accessors[0]
    assert get_accessor(document, 1) is None
    assert get_accessor(document, None) is None
    assert get_accessor(document, -1) is None


def test_data_uri_buffer(builder, make_context):
    builder.add_accessor(np.array([3, 1, 4], dtype=np.uint16), "SCALAR")
    document = builder.as_data_uri()

    data = get_accessor_data(make_context(document), document.accessors[0])

    assert data.tolist() == [3, 1, 4]


def test_external_buffer_is_read_next_to_document(tmp_path, builder, make_context):
    builder.add_accessor(np.array([9, 8], dtype=np.uint8), "SCALAR")
    document = builder.build()
    (tmp_path / "mesh data.bin").write_bytes(document.binary_blob())
    document.buffers[0].uri = "mesh%20data.bin"

    context = make_context(document, path=str(tmp_path / "scene.gltf"))

    assert get_accessor_data(context, document.accessors[0]).tolist() == [9, 8]


def test_missing_external_buffer_returns_none(tmp_path, builder, make_context):
    builder.add_accessor(np.array([1], dtype=np.uint8), "SCALAR")
    document = builder.build()
    document.buffers[0].uri = "missing.bin"

    context = make_context(document, path=str(tmp_path / "scene.gltf"))

    assert get_buffer_bytes(context, 0) is None
    assert get_accessor_data(context, document.accessors[0]) is None


def test_truncated_buffer_returns_none(builder, make_context):
    builder.add_accessor(np.array([1, 2], dtype=np.float32), "SCALAR")
    builder.document.accessors[0].count = 10
    document = builder.build()

    assert get_accessor_data(make_context(document), document.accessors[0]) is None


def test_load_document_from_gltf_file(tmp_path):
    path = tmp_path / "empty.gltf"
    path.write_text(json.dumps({"asset": {"version": "2.0"}, "accessors": []}))

    document = load_document(str(path))

    assert isinstance(document, GLTF2)
    assert document.asset.version == "2.0"


def test_load_document_failure(tmp_path):
    path = tmp_path / "broken.gltf"
    path.write_text("{ not json")

    with pytest.raises(GltfLoadError):
        load_document(str(path))
