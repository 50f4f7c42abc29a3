"""
COLLADA (.dae) geometry, triangles only.

Reading walks ``COLLADA/library_geometries/geometry/mesh``. Tags are matched
by local name so both bare and namespaced (``xmlns=".../COLLADASchema"``)
documents load. Each ``<mesh>`` contributes the positions of its
``POSITION`` source (or of every source when the mesh has no ``<vertices>``
block) and the VERTEX entries of its ``<triangles>/<p>`` lists.

Writing produces a minimal single-geometry document.
"""
from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Iterator, List, Optional, Sequence
from xml.sax.saxutils import quoteattr

from .. import config
from ..errors import InvalidMeshData
from ..topology import Face, Vertex
from .base import MeshData, add_face, fmt_float, parse_float, parse_index


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def _children(elem: ET.Element, name: str) -> Iterator[ET.Element]:
    for child in elem:
        if _local(child.tag) == name:
            yield child


def _child(elem: Optional[ET.Element], name: str) -> Optional[ET.Element]:
    if elem is None:
        return None
    return next(_children(elem, name), None)


def _position_sources(mesh: ET.Element) -> List[ET.Element]:
    sources = list(_children(mesh, "source"))
    verts = _child(mesh, "vertices")
    if verts is None:
        return sources
    for inp in _children(verts, "input"):
        if inp.get("semantic") == "POSITION":
            ref = (inp.get("source") or "").lstrip("#")
            return [s for s in sources if s.get("id") == ref]
    return sources


def _read_positions(mesh: ET.Element, vertices: List[Vertex]) -> None:
    for source in _position_sources(mesh):
        arr = _child(source, "float_array")
        if arr is None:
            continue
        values = [parse_float(t) for t in (arr.text or "").split()]
        if len(values) % 3 != 0:
            raise InvalidMeshData(f"float_array of {len(values)} values is not a list of triples")
        for i in range(0, len(values), 3):
            vertices.append(Vertex(values[i], values[i + 1], values[i + 2]))


def _read_triangles(mesh: ET.Element, base: int, vertices: List[Vertex], faces: List[Face]) -> None:
    for tris in _children(mesh, "triangles"):
        inputs = list(_children(tris, "input"))
        offsets = [parse_index(i.get("offset", "0")) for i in inputs] or [0]
        if min(offsets) < 0:
            raise InvalidMeshData(f"negative <input> offset in {offsets}")
        stride = max(offsets) + 1
        vertex_offset = 0
        for inp, offset in zip(inputs, offsets):
            if inp.get("semantic") == "VERTEX":
                vertex_offset = offset

        p = _child(tris, "p")
        values = [parse_index(t) for t in ((p.text if p is not None else None) or "").split()]
        if len(values) % (3 * stride) != 0:
            raise InvalidMeshData(f"<p> of {len(values)} values is not a list of triangles")
        corners = values[vertex_offset::stride]
        for i in range(0, len(corners), 3):
            add_face(vertices, faces, (base + corners[i], base + corners[i + 1], base + corners[i + 2]))


def decode(data: bytes) -> MeshData:
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise InvalidMeshData(f"malformed XML: {e}") from None
    if _local(root.tag) != "COLLADA":
        raise InvalidMeshData(f"root element is <{_local(root.tag)}>, expected <COLLADA>")

    vertices: List[Vertex] = []
    faces: List[Face] = []
    library = _child(root, "library_geometries")
    if library is None:
        return MeshData(vertices, faces)
    for geometry in _children(library, "geometry"):
        for mesh in _children(geometry, "mesh"):
            base = len(vertices)
            _read_positions(mesh, vertices)
            _read_triangles(mesh, base, vertices, faces)
    return MeshData(vertices, faces)


def encode(vertices: Sequence[Vertex], faces: Sequence[Face], name: str = "mesh") -> bytes:
    mid = config.COLLADA_MESH_ID
    coords = " ".join(f"{fmt_float(v.x)} {fmt_float(v.y)} {fmt_float(v.z)}" for v in vertices)
    indices = " ".join(f"{a} {b} {c}" for a, b, c in faces)
    doc = (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<COLLADA version="{config.COLLADA_VERSION}">\n'
        "<library_geometries>\n"
        f'<geometry id="{mid}" name={quoteattr(name)}>\n'
        "<mesh>\n"
        f'<source id="{mid}-coords">\n'
        f'<float_array id="{mid}-coords-array" count="{len(vertices) * 3}">{coords}</float_array>\n'
        "<technique_common>\n"
        f'<accessor count="{len(vertices)}" offset="0" source="#{mid}-coords-array" stride="3">\n'
        '<param name="X" type="float"/>\n'
        '<param name="Y" type="float"/>\n'
        '<param name="Z" type="float"/>\n'
        "</accessor>\n"
        "</technique_common>\n"
        "</source>\n"
        f'<vertices id="{mid}-vertices">\n'
        f'<input semantic="POSITION" source="#{mid}-coords"/>\n'
        "</vertices>\n"
        f'<triangles count="{len(faces)}">\n'
        f'<input offset="0" semantic="VERTEX" source="#{mid}-vertices"/>\n'
        f"<p>{indices}</p>\n"
        "</triangles>\n"
        "</mesh>\n"
        "</geometry>\n"
        "</library_geometries>\n"
        "</COLLADA>\n"
    )
    return doc.encode(config.ENCODING)
