# tests/test_cli.py

import base64
import json

import numpy as np
import pytest

from gltf_inspector.cli import main


@pytest.fixture
def gltf_path(tmp_path):
    positions = np.array([[0, 0, 0], [1, 0, 0], [0, 1, 0], [1, 1, 0]], dtype=np.float32)
    indices = np.array([0, 1, 2, 2, 1, 3], dtype=np.uint16)
    blob = positions.tobytes() + indices.tobytes()
    document = {
        "asset": {"version": "2.0"},
        "buffers": [
            {
                "byteLength": len(blob),
                "uri": "data:application/octet-stream;base64," + base64.b64encode(blob).decode("ascii"),
            }
        ],
        "bufferViews": [
            {"buffer": 0, "byteOffset": 0, "byteLength": positions.nbytes},
            {"buffer": 0, "byteOffset": positions.nbytes, "byteLength": indices.nbytes},
        ],
        "accessors": [
            {"bufferView": 0, "componentType": 5126, "count": 4, "type": "VEC3"},
            {"bufferView": 1, "componentType": 5123, "count": 6, "type": "SCALAR"},
        ],
        "meshes": [{"primitives": [{"attributes": {"POSITION": 0}, "indices": 1}]}],
    }
    path = tmp_path / "quad.gltf"
    path.write_text(json.dumps(document))
    return path


def test_summary_lists_accessors_and_primitives(gltf_path, capsys):
    assert main([str(gltf_path)]) == 0

    out = capsys.readouterr().out
    assert "Accessors (quad.gltf):" in out
    assert "/accessors/1 [type: SCALAR, componentType: 5123, count: 6]" in out
    assert "/meshes/0/primitives/0 [mode: 4, indexed, attributes: POSITION]" in out


def test_accessor_tree_output(gltf_path, capsys):
    assert main([str(gltf_path), "--accessor", "1"]) == 0

    assert capsys.readouterr().out.splitlines() == ["/accessors/1", "0", "1", "2", "2", "1", "3"]


def test_mesh_primitive_tree_output(gltf_path, capsys):
    assert main([str(gltf_path), "--mesh", "0"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "/meshes/0/primitives/0"
    assert lines[1] == "Vertices"
    assert "    POSITION: [1.00000, 0.00000, 0.00000]" in lines
    assert lines[-3:] == ["Triangles", "  [0, 1, 2]", "  [2, 1, 3]"]


def test_pointer_option_dispatches_to_primitive(gltf_path, capsys):
    assert main([str(gltf_path), "--pointer", "/meshes/0/primitives/0"]) == 0

    assert "Triangles" in capsys.readouterr().out


def test_bad_pointer_exits_with_error(gltf_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(gltf_path), "--pointer", "/accessors/8"])

    assert excinfo.value.code == 2
    assert "/accessors/8" in capsys.readouterr().err


def test_missing_file_exits_with_error(tmp_path):
    with pytest.raises(SystemExit):
        main([str(tmp_path / "nope.gltf")])
