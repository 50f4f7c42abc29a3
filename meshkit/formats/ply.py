"""
ASCII PLY ("element-header" format).

Only the ``vertex`` and ``face`` elements are understood. Extra vertex
properties after ``x y z`` are ignored, and polygon faces with more than
three corners are split into a triangle fan.
"""
from __future__ import annotations

from typing import List, Sequence

from .. import config
from ..errors import InvalidMeshData
from ..topology import Face, Vertex
from .base import MeshData, add_face, fmt_float, parse_float, parse_index


def _header_count(line: str, offset: int) -> int:
    tokens = line[offset:].split()
    if not tokens or not tokens[0].isdigit():
        raise InvalidMeshData(f"bad element count in header line {line!r}")
    return int(tokens[0])


def decode(data: bytes) -> MeshData:
    # only ascii tokens are parsed; comment lines may hold any bytes
    lines = data.decode(config.ENCODING, errors="replace").splitlines()

    vertex_count = 0
    face_count = 0
    body_start = None
    for i, line in enumerate(lines):
        if line.startswith("end_header"):
            body_start = i + 1
            break
        if line.startswith(config.PLY_VERTEX_PREFIX):
            vertex_count = _header_count(line, config.PLY_VERTEX_COUNT_OFFSET)
        elif line.startswith(config.PLY_FACE_PREFIX):
            face_count = _header_count(line, config.PLY_FACE_COUNT_OFFSET)
        elif line.startswith("format"):
            parts = line.split()
            if len(parts) < 2 or parts[1] != "ascii":
                raise InvalidMeshData(f"only ascii PLY is supported, got {line!r}")
    if body_start is None:
        raise InvalidMeshData("PLY header has no end_header line")

    rows = [l.split() for l in lines[body_start:] if l.strip()]
    if len(rows) < vertex_count + face_count:
        raise InvalidMeshData(
            f"PLY body truncated: expected {vertex_count + face_count} rows, got {len(rows)}"
        )

    vertices: List[Vertex] = []
    for row in rows[:vertex_count]:
        if len(row) < 3:
            raise InvalidMeshData(f"vertex row needs 3 coordinates: {' '.join(row)!r}")
        vertices.append(Vertex(parse_float(row[0]), parse_float(row[1]), parse_float(row[2])))

    faces: List[Face] = []
    for row in rows[vertex_count:vertex_count + face_count]:
        n = parse_index(row[0])
        idx = [parse_index(t) for t in row[1:]]
        if n < 3 or len(idx) < n:
            raise InvalidMeshData(f"bad face row {' '.join(row)!r}")
        for k in range(1, n - 1):
            add_face(vertices, faces, (idx[0], idx[k], idx[k + 1]))

    return MeshData(vertices, faces)


def encode(vertices: Sequence[Vertex], faces: Sequence[Face], name: str = "mesh") -> bytes:
    out = [
        "ply",
        "format ascii 1.0",
        f"element vertex {len(vertices)}",
        "property float x",
        "property float y",
        "property float z",
        f"element face {len(faces)}",
        "property list uchar int vertex_indices",
        "end_header",
    ]
    for v in vertices:
        out.append(f"{fmt_float(v.x)} {fmt_float(v.y)} {fmt_float(v.z)}")
    for a, b, c in faces:
        out.append(f"3 {a} {b} {c}")
    return ("\n".join(out) + "\n").encode(config.ENCODING)
