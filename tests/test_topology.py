"""Tests for Vertex, Face and adjacency linking."""

from meshkit import Face, Vec3, Vertex, edge_key
from meshkit.topology import link_face


class TestVertex:

    def test_create(self):
        v = Vertex(0.0, 1.0, 2.0)
        assert (v.x, v.y, v.z) == (0.0, 1.0, 2.0)
        assert v.position == Vec3(0.0, 1.0, 2.0)
        assert v.adjacency == ()

    def test_add_adjacent_is_idempotent(self):
        v = Vertex(0.0, 1.0, 2.0)
        v.add_adjacent(1)
        v.add_adjacent(5)
        v.add_adjacent(1)
        assert v.adjacency == (1, 5)

    def test_translate_chains(self):
        v = Vertex(0.0, 1.0, 2.0)
        assert v.translate(Vec3(3.0, 4.0, 5.0)) is v
        assert v.position == Vec3(3.0, 5.0, 7.0)

    def test_scale(self):
        v = Vertex(1.0, -2.0, 0.5).scale(2.0)
        assert v.position == Vec3(2.0, -4.0, 1.0)

    def test_equality_ignores_adjacency(self):
        a = Vertex(1.0, 2.0, 3.0)
        b = Vertex(1.0, 2.0, 3.0)
        b.add_adjacent(7)
        assert a == b
        assert hash(a) == hash(b)
        assert a != Vertex(1.0, 2.0, 3.5)

    def test_usable_as_dict_key(self):
        index = {Vertex(1.0, 2.0, 3.0): 0}
        assert index[Vertex(1.0, 2.0, 3.0)] == 0
        assert Vertex(3.0, 2.0, 1.0) not in index


class TestFace:

    def test_create(self):
        assert Face(0, 1, 2).indices == (0, 1, 2)

    def test_invert(self):
        f = Face(0, 1, 2)
        assert f.invert() is f
        assert f.indices == (2, 1, 0)

    def test_invert_twice_restores(self):
        f = Face(4, 9, 2)
        f.invert().invert()
        assert f.indices == (4, 9, 2)

    def test_edges_are_canonical(self):
        assert Face(5, 1, 3).edges() == ((1, 5), (3, 5), (1, 3))
        assert edge_key(7, 2) == edge_key(2, 7) == (2, 7)


def test_link_face_records_both_directions():
    verts = [Vertex(0.0, 0.0, 0.0), Vertex(1.0, 0.0, 0.0), Vertex(0.0, 1.0, 0.0)]
    link_face(verts, Face(0, 1, 2))
    link_face(verts, Face(0, 1, 2))
    assert verts[0].adjacency == (1, 2)
    assert verts[1].adjacency == (0, 2)
    assert verts[2].adjacency == (0, 1)
