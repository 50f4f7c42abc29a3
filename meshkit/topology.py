"""
Vertex / face records and the index-based adjacency graph.

Faces and adjacency lists refer to vertices by their position in the owning
mesh's vertex list. Nothing here holds a reference to another Vertex object,
so replacing the whole vertex list (as subdivision does) never leaves
dangling pointers, only indices that the caller must rebuild.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .vector import Vec3

Edge = Tuple[int, int]


def edge_key(a: int, b: int) -> Edge:
    return (a, b) if a < b else (b, a)


class Vertex:
    __slots__ = ("x", "y", "z", "_adjacent")

    def __init__(self, x: float, y: float, z: float) -> None:
        self.x = x
        self.y = y
        self.z = z
        self._adjacent: List[int] = []

    @classmethod
    def at(cls, p: Vec3) -> Vertex:
        return cls(p.x, p.y, p.z)

    @property
    def position(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)

    @property
    def adjacency(self) -> Tuple[int, ...]:
        """Indices of neighbouring vertices, in the order they were linked."""
        return tuple(self._adjacent)

    def add_adjacent(self, index: int) -> None:
        if index not in self._adjacent:
            self._adjacent.append(index)

    def clear_adjacency(self) -> None:
        self._adjacent.clear()

    def translate(self, offset: Vec3) -> Vertex:
        self.x += offset.x
        self.y += offset.y
        self.z += offset.z
        return self

    def scale(self, factor: float) -> Vertex:
        self.x *= factor
        self.y *= factor
        self.z *= factor
        return self

    # Position-only equality; the STL reader keys its dedup table on this.
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash(self.x) ^ hash(self.y) ^ hash(self.z)

    def __repr__(self) -> str:
        return f"Vertex({self.x!r}, {self.y!r}, {self.z!r})"


@dataclass
class Face:
    """Triangle as three vertex indices; the order gives the winding."""

    v1: int
    v2: int
    v3: int

    @property
    def indices(self) -> Tuple[int, int, int]:
        return (self.v1, self.v2, self.v3)

    def __iter__(self):
        return iter(self.indices)

    def invert(self) -> Face:
        self.v1, self.v3 = self.v3, self.v1
        return self

    def edges(self) -> Tuple[Edge, Edge, Edge]:
        return (
            edge_key(self.v1, self.v2),
            edge_key(self.v1, self.v3),
            edge_key(self.v2, self.v3),
        )


def link_face(vertices: Sequence[Vertex], face: Face) -> None:
    """Record the three undirected edges of ``face`` in both directions."""
    a, b, c = face.indices
    vertices[a].add_adjacent(b)
    vertices[a].add_adjacent(c)
    vertices[b].add_adjacent(a)
    vertices[b].add_adjacent(c)
    vertices[c].add_adjacent(a)
    vertices[c].add_adjacent(b)


def link_faces(vertices: Sequence[Vertex], faces: Iterable[Face]) -> None:
    for face in faces:
        link_face(vertices, face)
