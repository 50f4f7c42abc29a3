"""
STL ("facet-list" format), ASCII and binary.

STL repeats the coordinates of shared corners in every facet instead of
indexing them, so both readers deduplicate exact positions: the first
occurrence gets a new vertex index and later repeats reuse it. Without this
the mesh would have three private vertices per triangle and no adjacency.
"""
from __future__ import annotations

import struct
from typing import Dict, List, Sequence

from .. import config
from ..errors import InvalidMeshData
from ..topology import Face, Vertex
from ..vector import Vec3
from .base import MeshData, add_face, face_corners, fmt_float, parse_float

_FACET = struct.Struct("<12fH")
_COUNT = struct.Struct("<I")


class _Builder:
    def __init__(self) -> None:
        self.vertices: List[Vertex] = []
        self.faces: List[Face] = []
        self._index: Dict[Vertex, int] = {}

    def corner(self, x: float, y: float, z: float) -> int:
        v = Vertex(x, y, z)
        i = self._index.get(v)
        if i is None:
            i = len(self.vertices)
            self._index[v] = i
            self.vertices.append(v)
        return i

    def result(self) -> MeshData:
        return MeshData(self.vertices, self.faces)


def is_binary(data: bytes) -> bool:
    header = config.STL_HEADER_SIZE + _COUNT.size
    if len(data) < header:
        return False
    (count,) = _COUNT.unpack_from(data, config.STL_HEADER_SIZE)
    return len(data) == header + count * config.STL_FACET_SIZE


def decode(data: bytes) -> MeshData:
    if is_binary(data):
        return decode_binary(data)
    return decode_ascii(data)


def decode_ascii(data: bytes) -> MeshData:
    text = data.decode(config.ENCODING, errors="replace")

    b = _Builder()
    pending: List[int] = []
    for line in text.splitlines():
        s = line.strip()
        if s.startswith("vertex"):
            parts = s.split()
            if len(parts) < 4:
                raise InvalidMeshData(f"malformed vertex line: {line!r}")
            pending.append(b.corner(parse_float(parts[1]), parse_float(parts[2]), parse_float(parts[3])))
        elif s.startswith("endloop") or s.startswith("endfacet"):
            if len(pending) == 3:
                add_face(b.vertices, b.faces, (pending[0], pending[1], pending[2]))
                pending.clear()
            if s.startswith("endfacet"):
                pending.clear()
    return b.result()


def decode_binary(data: bytes) -> MeshData:
    (count,) = _COUNT.unpack_from(data, config.STL_HEADER_SIZE)
    offset = config.STL_HEADER_SIZE + _COUNT.size
    b = _Builder()
    for _ in range(count):
        vals = _FACET.unpack_from(data, offset)
        offset += config.STL_FACET_SIZE
        # vals[0:3] is the stored normal; the winding already carries it
        a = b.corner(*vals[3:6])
        c1 = b.corner(*vals[6:9])
        c2 = b.corner(*vals[9:12])
        add_face(b.vertices, b.faces, (a, c1, c2))
    return b.result()


def encode(vertices: Sequence[Vertex], faces: Sequence[Face], name: str = "mesh") -> bytes:
    out = [f"solid {name}"]
    for va, vb, vc in face_corners(vertices, faces):
        n = (vb - va).cross(vc - va)
        out.append(f"facet normal {_fmt3(n)}")
        out.append("outer loop")
        out.append(f"vertex {_fmt3(va)}")
        out.append(f"vertex {_fmt3(vb)}")
        out.append(f"vertex {_fmt3(vc)}")
        out.append("endloop")
        out.append("endfacet")
    out.append(f"endsolid {name}")
    return ("\n".join(out) + "\n").encode(config.ENCODING)


def encode_binary(vertices: Sequence[Vertex], faces: Sequence[Face], name: str = "mesh") -> bytes:
    """Binary STL. Normals are per face, unit length."""
    header = config.STL_BINARY_HEADER[:config.STL_HEADER_SIZE]
    chunks = [header + bytes(config.STL_HEADER_SIZE - len(header)), _COUNT.pack(len(faces))]
    for va, vb, vc in face_corners(vertices, faces):
        n = (vb - va).cross(vc - va).normalized()
        chunks.append(_FACET.pack(*n, *va, *vb, *vc, 0))  # attribute byte count
    return b"".join(chunks)


def _fmt3(v: Vec3) -> str:
    return f"{fmt_float(v.x)} {fmt_float(v.y)} {fmt_float(v.z)}"
