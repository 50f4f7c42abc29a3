"""
meshkit: load, query, transform and save triangle meshes.

Supported formats (picked by extension): ASCII PLY (.ply), ASCII/binary
STL (.stl) and COLLADA geometry (.dae).
"""
from __future__ import annotations

import logging

from .errors import (
    ErrorCode,
    InvalidMeshData,
    MeshError,
    MeshLoadError,
    ParseOutcome,
    WriteOutcome,
    format_error,
)
from .formats import Format, format_for_path
from .mesh import Mesh, PathLike
from .topology import Face, Vertex, edge_key
from .vector import Vec3

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def load(path: PathLike) -> Mesh:
    """Shorthand for ``Mesh.from_file``."""
    return Mesh.from_file(path)


__all__ = [
    "ErrorCode",
    "Face",
    "Format",
    "InvalidMeshData",
    "Mesh",
    "MeshError",
    "MeshLoadError",
    "ParseOutcome",
    "Vec3",
    "Vertex",
    "WriteOutcome",
    "edge_key",
    "format_error",
    "format_for_path",
    "load",
]
