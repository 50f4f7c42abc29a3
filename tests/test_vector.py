"""Tests for Vec3."""

import math

import pytest

from meshkit import Vec3


class TestVec3:

    def test_components(self):
        v = Vec3(0.0, 1.0, 2.0)
        assert (v.x, v.y, v.z) == (0.0, 1.0, 2.0)
        assert list(v) == [0.0, 1.0, 2.0]

    def test_norm(self):
        assert Vec3(0.0, 1.0, 2.0).norm() == pytest.approx(math.sqrt(5.0))
        assert Vec3(3.0, 4.0, 0.0).norm() == 5.0

    def test_cross(self):
        assert Vec3(0.0, 1.0, 2.0).cross(Vec3(3.0, 4.0, 5.0)) == Vec3(-3.0, 6.0, -3.0)

    def test_add_sub_neg(self):
        a = Vec3(0.0, 1.0, 2.0)
        b = Vec3(3.0, 4.0, 5.0)
        assert a + b == Vec3(3.0, 5.0, 7.0)
        assert a - b == Vec3(-3.0, -3.0, -3.0)
        assert -a == Vec3(-0.0, -1.0, -2.0)

    def test_scalar_ops(self):
        a = Vec3(1.0, -2.0, 4.0)
        assert a * 2.0 == Vec3(2.0, -4.0, 8.0)
        assert 2.0 * a == Vec3(2.0, -4.0, 8.0)
        assert a / 2.0 == Vec3(0.5, -1.0, 2.0)

    def test_in_place_ops_rebind(self):
        a = Vec3(0.0, 1.0, 2.0)
        original = a
        a += Vec3(3.0, 4.0, 5.0)
        assert a == Vec3(3.0, 5.0, 7.0)
        a -= Vec3(3.0, 4.0, 5.0)
        assert a == original
        a *= 3.0
        assert a == Vec3(0.0, 3.0, 6.0)
        assert original == Vec3(0.0, 1.0, 2.0)

    def test_immutable(self):
        with pytest.raises(AttributeError):
            Vec3(0.0, 0.0, 0.0).x = 1.0

    def test_exact_equality(self):
        assert Vec3(0.1 + 0.2, 0.0, 0.0) != Vec3(0.3, 0.0, 0.0)
        assert hash(Vec3(1.0, 2.0, 3.0)) == hash(Vec3(1.0, 2.0, 3.0))

    def test_normalized(self):
        assert Vec3(0.0, 0.0, 5.0).normalized() == Vec3(0.0, 0.0, 1.0)
        assert Vec3(0.0, 0.0, 0.0).normalized() == Vec3(0.0, 0.0, 0.0)
