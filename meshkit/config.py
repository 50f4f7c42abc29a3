"""
Constants shared by the mesh container and the format codecs.

Nothing here is read from the environment; the values are fixed so that
files written by one version of meshkit stay byte-identical across runs.
"""
from __future__ import annotations

from typing import Dict

ENCODING = "utf-8"

# PLY header: the element count token starts right after these prefixes
PLY_VERTEX_PREFIX = "element vertex"
PLY_FACE_PREFIX = "element face"
PLY_VERTEX_COUNT_OFFSET = 15
PLY_FACE_COUNT_OFFSET = 13

# STL
STL_BINARY_HEADER = b"meshkit STL export"
STL_HEADER_SIZE = 80
STL_FACET_SIZE = 50

# COLLADA
COLLADA_VERSION = "1.5.0"
COLLADA_MESH_ID = "mesh"

# extension (lower case, with dot) -> format name
EXTENSIONS: Dict[str, str] = {
    ".ply": "ply",
    ".stl": "stl",
    ".dae": "collada",
}
