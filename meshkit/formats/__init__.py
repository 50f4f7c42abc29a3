"""
Format codecs.

Every codec module exposes the same pure pair::

    decode(data: bytes) -> MeshData
    encode(vertices, faces, name) -> bytes

so it can be exercised without touching the filesystem. ``Mesh`` picks the
codec from the file extension once, at the boundary.
"""
from __future__ import annotations

import os
from enum import Enum
from typing import Optional

from .. import config
from . import collada, ply, stl
from .base import MeshData


class Format(Enum):
    PLY = "ply"
    STL = "stl"
    COLLADA = "collada"

    @property
    def codec(self):
        return _CODECS[self]


_CODECS = {
    Format.PLY: ply,
    Format.STL: stl,
    Format.COLLADA: collada,
}


def format_for_path(path: str) -> Optional[Format]:
    ext = os.path.splitext(str(path))[1].lower()
    name = config.EXTENSIONS.get(ext)
    return Format(name) if name is not None else None


__all__ = ["Format", "MeshData", "format_for_path", "collada", "ply", "stl"]
