"""Pieces shared by the three codecs."""
from __future__ import annotations

from typing import Iterable, List, NamedTuple, Tuple

from ..errors import InvalidMeshData
from ..topology import Face, Vertex, link_face


class MeshData(NamedTuple):
    vertices: List[Vertex]
    faces: List[Face]


def fmt_float(v: float) -> str:
    # shortest text that parses back to the same double
    return repr(float(v))


def parse_float(token: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise InvalidMeshData(f"not a number: {token!r}") from None


def parse_index(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise InvalidMeshData(f"not a vertex index: {token!r}") from None


def add_face(vertices: List[Vertex], faces: List[Face], tri: Tuple[int, int, int]) -> Face:
    """Append a face after checking its indices, and link its adjacency."""
    n = len(vertices)
    for i in tri:
        if i < 0 or i >= n:
            raise InvalidMeshData(f"face index {i} out of range for {n} vertices")
    face = Face(*tri)
    faces.append(face)
    link_face(vertices, face)
    return face


def face_corners(vertices: List[Vertex], faces: Iterable[Face]):
    for face in faces:
        a, b, c = face.indices
        yield vertices[a].position, vertices[b].position, vertices[c].position
