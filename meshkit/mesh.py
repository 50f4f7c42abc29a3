"""
Triangle mesh container: geometry queries, in-place transforms, and
load/save dispatch to the format codecs by file extension.

Two ways to load::

    mesh = Mesh.from_file("cube.ply")      # raises MeshLoadError

    mesh = Mesh()
    outcome = mesh.read("cube.ply")        # returns a ParseOutcome
    if outcome:
        print(outcome.message)

Both go through the same ``_load`` helper. Saving never raises for I/O
problems either; ``write`` and ``save_*`` return a WriteOutcome.
"""
from __future__ import annotations

import logging
import os
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

import numpy as np

from .errors import ErrorCode, InvalidMeshData, MeshLoadError, ParseOutcome, WriteOutcome
from .formats import Format, MeshData, format_for_path
from .formats import stl as stl_codec
from .topology import Edge, Face, Vertex, edge_key, link_faces
from .vector import ZERO, Vec3

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def _stem(path: str) -> str:
    return os.path.splitext(os.path.basename(path))[0]


def _io_error(path: str) -> ErrorCode:
    # the open already failed; existence tells "missing" from "unreadable"
    return ErrorCode.UNKNOWN_IO_ERROR if os.path.exists(path) else ErrorCode.FILE_NOT_FOUND


def _load(path: PathLike) -> Tuple[ParseOutcome, Optional[MeshData]]:
    p = os.fspath(path)
    if not p:
        return ParseOutcome(ErrorCode.INVALID_FILEPATH), None
    fmt = format_for_path(p)
    if fmt is None:
        return ParseOutcome(ErrorCode.UNSUPPORTED_FORMAT), None
    try:
        with open(p, "rb") as f:
            data = f.read()
    except OSError as e:
        logger.warning(f"Could not open {p}: {e}")
        return ParseOutcome(_io_error(p)), None
    try:
        result = fmt.codec.decode(data)
    except InvalidMeshData as e:
        logger.warning(f"Could not parse {p}: {e}")
        return ParseOutcome(ErrorCode.INVALID_DATA), None
    logger.debug(f"Loaded {p} ({fmt.value}): {len(result.vertices)} vertices, {len(result.faces)} faces")
    return ParseOutcome(), result


# --------------
# Mesh container
# --------------

@dataclass
class Mesh:
    vertices: List[Vertex] = field(default_factory=list)
    faces: List[Face] = field(default_factory=list)
    name: str = "mesh"

    @classmethod
    def from_file(cls, path: PathLike) -> "Mesh":
        """Load a mesh, raising MeshLoadError if anything goes wrong."""
        outcome, data = _load(path)
        if outcome:
            raise MeshLoadError(outcome.code)
        return cls(data.vertices, data.faces, _stem(os.fspath(path)))

    def copy(self) -> "Mesh":
        vertices = []
        for v in self.vertices:
            c = Vertex(v.x, v.y, v.z)
            for i in v.adjacency:
                c.add_adjacent(i)
            vertices.append(c)
        return Mesh(vertices, [Face(*f.indices) for f in self.faces], self.name)

    def rebuild_adjacency(self) -> "Mesh":
        for v in self.vertices:
            v.clear_adjacency()
        link_faces(self.vertices, self.faces)
        return self

    # ---- analysis ----
    def corners(self, face: Face) -> Tuple[Vec3, Vec3, Vec3]:
        a, b, c = face.indices
        return self.vertices[a].position, self.vertices[b].position, self.vertices[c].position

    def face_normal(self, face: Face) -> Vec3:
        a, b, c = self.corners(face)
        return (b - a).cross(c - a).normalized()

    def area(self) -> float:
        total = 0.0
        for face in self.faces:
            a, b, c = self.corners(face)
            total += 0.5 * (b - a).cross(c - a).norm()
        return total

    def volume(self) -> float:
        """
        Signed volume for a closed, consistently oriented mesh.
        Origin-based tetrahedron summation: V = sum(dot(a, cross(b, c))) / 6
        """
        vol6 = 0.0
        for face in self.faces:
            a, b, c = self.corners(face)
            vol6 += a.dot(b.cross(c))
        return vol6 / 6.0

    def edge_incidence(self) -> Dict[Edge, int]:
        counts: Counter = Counter()
        for face in self.faces:
            counts.update(face.edges())
        return dict(counts)

    def is_closed(self) -> bool:
        """True when every edge is shared by exactly two faces."""
        return all(n == 2 for n in self.edge_incidence().values())

    def bounds(self) -> Tuple[Vec3, Vec3]:
        if not self.vertices:
            raise ValueError("bounds of an empty mesh")
        xs = [v.x for v in self.vertices]
        ys = [v.y for v in self.vertices]
        zs = [v.z for v in self.vertices]
        return Vec3(min(xs), min(ys), min(zs)), Vec3(max(xs), max(ys), max(zs))

    # ---- transforms ----
    def translate(self, offset: Vec3) -> "Mesh":
        for v in self.vertices:
            v.translate(offset)
        return self

    def center(self) -> "Mesh":
        """Move the bounding box midpoint to the origin."""
        lo, hi = self.bounds()
        return self.translate(-((lo + hi) * 0.5))

    def invert(self) -> "Mesh":
        for face in self.faces:
            face.invert()
        return self

    def scale(self, factor: float) -> "Mesh":
        for v in self.vertices:
            v.scale(factor)
        return self

    def noise(self, coefficient: float, rng: Optional[np.random.Generator] = None) -> "Mesh":
        """
        Jitter every vertex by a uniform offset in [-coefficient, coefficient]
        per axis. Pass a seeded ``rng`` for reproducible output; by default a
        fresh generator is seeded from OS entropy.
        """
        if rng is None:
            rng = np.random.default_rng()
        offsets = rng.uniform(-coefficient, coefficient, size=(len(self.vertices), 3))
        for v, (dx, dy, dz) in zip(self.vertices, offsets):
            v.translate(Vec3(float(dx), float(dy), float(dz)))
        return self

    def subdivide(self) -> "Mesh":
        """
        One Loop subdivision step. Original vertices are smoothed towards
        their neighbours, every edge gets one shared midpoint vertex and each
        triangle is split into four. Adjacency is rebuilt for the new mesh.
        """
        old = self.vertices
        verts: List[Vertex] = []
        for v in old:
            n = len(v.adjacency)
            if n == 0:
                verts.append(Vertex(v.x, v.y, v.z))
                continue
            beta = 3.0 / 16.0 if n == 3 else 3.0 / (8.0 * n)
            ring = sum((old[i].position for i in v.adjacency), ZERO)
            verts.append(Vertex.at(v.position * (1.0 - n * beta) + ring * beta))

        midpoint: Dict[Edge, int] = {}
        for face in self.faces:
            for a, b in face.edges():
                if (a, b) not in midpoint:
                    midpoint[(a, b)] = len(verts)
                    verts.append(Vertex.at((old[a].position + old[b].position) * 0.5))

        faces: List[Face] = []
        for face in self.faces:
            a, b, c = face.indices
            ab = midpoint[edge_key(a, b)]
            bc = midpoint[edge_key(b, c)]
            ca = midpoint[edge_key(c, a)]
            faces += [
                Face(a, ab, ca), Face(b, bc, ab), Face(c, ca, bc), Face(ab, bc, ca)
            ]
        link_faces(verts, faces)

        self.vertices, self.faces = verts, faces
        return self

    # ---- I/O ----
    def read(self, path: PathLike) -> ParseOutcome:
        """Replace this mesh with the file's contents; untouched on failure."""
        outcome, data = _load(path)
        if outcome:
            return outcome
        self.vertices, self.faces = data.vertices, data.faces
        self.name = _stem(os.fspath(path))
        return outcome

    def write(self, path: PathLike, can_overwrite: bool = False) -> WriteOutcome:
        p = os.fspath(path)
        if not p:
            return WriteOutcome(ErrorCode.INVALID_FILEPATH)
        fmt = format_for_path(p)
        if fmt is None:
            return WriteOutcome(ErrorCode.UNSUPPORTED_FORMAT)
        return self._save(p, fmt, can_overwrite)

    def save_ply(self, path: PathLike, can_overwrite: bool = False) -> WriteOutcome:
        return self._save(os.fspath(path), Format.PLY, can_overwrite)

    def save_stl(self, path: PathLike, can_overwrite: bool = False, binary: bool = False) -> WriteOutcome:
        return self._save(os.fspath(path), Format.STL, can_overwrite, binary=binary)

    def save_collada(self, path: PathLike, can_overwrite: bool = False) -> WriteOutcome:
        return self._save(os.fspath(path), Format.COLLADA, can_overwrite)

    def _save(self, path: str, fmt: Format, can_overwrite: bool, binary: bool = False) -> WriteOutcome:
        if not path:
            return WriteOutcome(ErrorCode.INVALID_FILEPATH)
        if not can_overwrite and os.path.exists(path):
            logger.warning(f"Refusing to overwrite {path}")
            return WriteOutcome(ErrorCode.FILE_ALREADY_EXISTS)
        encode = stl_codec.encode_binary if binary and fmt is Format.STL else fmt.codec.encode
        data = encode(self.vertices, self.faces, _stem(path))
        try:
            with open(path, "wb") as f:
                f.write(data)
        except OSError as e:
            logger.warning(f"Failed to write {path}: {e}")
            return WriteOutcome(_io_error(path))
        logger.debug(f"Saved {path} ({fmt.value}): {len(self.vertices)} vertices, {len(self.faces)} faces")
        return WriteOutcome()

    def __repr__(self) -> str:
        return f"Mesh(name={self.name!r}, vertices={len(self.vertices)}, faces={len(self.faces)})"
