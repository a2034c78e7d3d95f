"""Command-line interface for gltf_inspector."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Iterable, Optional

from .core import GltfAnalyzer
from .core.exceptions import GltfInspectorError
from .core.gltf import primitive_attributes
from .logging_config import setup_logging
from .models import PrimitiveMode
from .session import InspectionSession
from .view.tree import render_tree


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Inspect the accessor and mesh primitive data of glTF files."
    )
    parser.add_argument("path", type=Path, help="Path to the .gltf or .glb file to inspect.")

    target = parser.add_mutually_exclusive_group()
    target.add_argument("--accessor", type=int, metavar="N", help="Decode accessor N.")
    target.add_argument("--mesh", type=int, metavar="M", help="Decode a primitive of mesh M.")
    target.add_argument(
        "--pointer",
        metavar="PTR",
        help="JSON pointer to an accessor or mesh primitive, e.g. /meshes/0/primitives/0.",
    )
    parser.add_argument(
        "--primitive",
        type=int,
        default=0,
        metavar="P",
        help="Primitive index used with --mesh (default: 0).",
    )
    parser.add_argument(
        "--expand",
        action="store_true",
        help="Print the contents of every page instead of only the page ranges.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    parser.add_argument("--log-file", metavar="FILE", help="Also write log output to FILE.")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        setup_logging(logging.DEBUG, args.log_file)
    else:
        setup_logging(log_file=args.log_file)

    path: Path = args.path
    if not path.exists():
        parser.error(f"File not found: {path}")

    try:
        with GltfAnalyzer(str(path)) as analyzer:
            if args.accessor is None and args.mesh is None and args.pointer is None:
                _print_document_summary(analyzer.document, title=path.name)
                return 0

            session = InspectionSession(analyzer)
            if args.accessor is not None:
                session.show_accessor(f"/accessors/{args.accessor}")
            elif args.mesh is not None:
                session.show_mesh_primitive(f"/meshes/{args.mesh}/primitives/{args.primitive}")
            elif "/primitives/" in args.pointer:
                session.show_mesh_primitive(args.pointer)
            else:
                session.show_accessor(args.pointer)

            print(render_tree(session.roots, expand_pages=args.expand))
    except GltfInspectorError as exc:
        parser.error(str(exc))

    return 0


def _print_document_summary(document: Any, *, title: str) -> None:
    accessors = list(document.accessors or [])
    meshes = list(document.meshes or [])

    if not accessors:
        print(f"Accessors ({title}): <none>")
    else:
        print(f"Accessors ({title}):")
        for idx, accessor in enumerate(accessors):
            extras = []
            if accessor.normalized:
                extras.append("normalized")
            if accessor.sparse is not None:
                extras.append("sparse")
            if accessor.bufferView is None:
                extras.append("no buffer view")
            extra_str = f" ({', '.join(extras)})" if extras else ""
            name = f" {accessor.name}" if accessor.name else ""
            print(
                f"  - /accessors/{idx}{name} [type: {accessor.type}, "
                f"componentType: {accessor.componentType}, count: {accessor.count}]{extra_str}"
            )

    if not meshes:
        print(f"Mesh primitives ({title}): <none>")
        return

    print(f"Mesh primitives ({title}):")
    for mesh_idx, mesh in enumerate(meshes):
        for prim_idx, primitive in enumerate(mesh.primitives or []):
            attributes = ", ".join(primitive_attributes(primitive)) or "<none>"
            mode = primitive.mode if primitive.mode is not None else int(PrimitiveMode.TRIANGLES)
            indices = "indexed" if primitive.indices is not None else "non-indexed"
            print(
                f"  - /meshes/{mesh_idx}/primitives/{prim_idx} "
                f"[mode: {mode}, {indices}, attributes: {attributes}]"
            )
