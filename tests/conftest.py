"""Shared fixtures: the reference cube written to disk in PLY form."""

import pytest

from meshkit import Face, Mesh, Vertex

# corner i sits at bit0 -> x, bit1 -> y, bit2 -> z
CUBE_FACES = [
    (3, 1, 0), (2, 3, 0), (3, 7, 1), (5, 1, 7),
    (6, 5, 7), (5, 6, 4), (4, 6, 2), (4, 2, 0),
    (6, 7, 3), (3, 2, 6), (1, 5, 0), (4, 0, 5),
]

TETRA_VERTICES = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)]
TETRA_FACES = [(0, 2, 1), (0, 1, 3), (0, 3, 2), (1, 2, 3)]


def cube_corners(lo, hi):
    return [
        (hi if i & 1 else lo, hi if i & 2 else lo, hi if i & 4 else lo)
        for i in range(8)
    ]


def ply_text(corners, faces):
    lines = [
        "ply",
        "format ascii 1.0",
        "comment reference cube",
        f"element vertex {len(corners)}",
        "property float x",
        "property float y",
        "property float z",
        f"element face {len(faces)}",
        "property list uchar int vertex_indices",
        "end_header",
    ]
    lines += [f"{x:g} {y:g} {z:g}" for x, y, z in corners]
    lines += [f"3 {a} {b} {c}" for a, b, c in faces]
    return "\n".join(lines) + "\n"


@pytest.fixture
def cube_ply(tmp_path):
    path = tmp_path / "input.ply"
    path.write_text(ply_text(cube_corners(-1.0, 1.0), CUBE_FACES))
    return path


@pytest.fixture
def uncentered_ply(tmp_path):
    path = tmp_path / "uncentered_input.ply"
    path.write_text(ply_text(cube_corners(0.0, 2.0), CUBE_FACES))
    return path


@pytest.fixture
def cube(cube_ply):
    return Mesh.from_file(cube_ply)


@pytest.fixture
def tetra():
    mesh = Mesh([Vertex(*p) for p in TETRA_VERTICES], [Face(*f) for f in TETRA_FACES], "tetra")
    return mesh.rebuild_adjacency()
