import math

import pytest

from tachyon.vec3 import Vec3

EPS = 1e-5


def test_addition():
    c = Vec3(1.0, 2.0, 3.0) + Vec3(4.0, 5.0, 6.0)
    assert tuple(c) == pytest.approx((5.0, 7.0, 9.0), abs=EPS)


def test_subtraction():
    c = Vec3(5.0, 7.0, 9.0) - Vec3(1.0, 2.0, 3.0)
    assert tuple(c) == pytest.approx((4.0, 5.0, 6.0), abs=EPS)


def test_scalar_multiplication():
    c = Vec3(1.0, -2.0, 0.5) * 2.0
    assert tuple(c) == pytest.approx((2.0, -4.0, 1.0), abs=EPS)


def test_left_scalar_multiplication_matches_right():
    a = Vec3(1.0, -2.0, 0.5)
    assert 2.0 * a == a * 2.0


def test_dot_product_orthogonal():
    assert Vec3(1.0, 0.0, 0.0).dot(Vec3(0.0, 1.0, 0.0)) == pytest.approx(0.0, abs=EPS)


def test_dot_product_general():
    assert Vec3(1.0, 2.0, 3.0).dot(Vec3(4.0, -5.0, 6.0)) == pytest.approx(12.0, abs=EPS)


def test_cross_product():
    c = Vec3(1.0, 0.0, 0.0).cross(Vec3(0.0, 1.0, 0.0))
    assert tuple(c) == pytest.approx((0.0, 0.0, 1.0), abs=EPS)


def test_cross_product_is_anticommutative_and_orthogonal():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(4.0, -5.0, 6.0)
    ab = a.cross(b)
    assert ab == -b.cross(a)
    assert ab.dot(a) == pytest.approx(0.0, abs=EPS)
    assert ab.dot(b) == pytest.approx(0.0, abs=EPS)


def test_magnitude_and_normalization():
    a = Vec3(3.0, 4.0, 0.0)
    assert a.magnitude() == pytest.approx(5.0, abs=EPS)
    a.normalize()
    assert a.magnitude() == pytest.approx(1.0, abs=EPS)


def test_magnitude_squared_matches_magnitude():
    a = Vec3(1.0, 2.0, 3.0)
    assert a.magnitude_squared() == pytest.approx(a.magnitude() ** 2)


def test_normalized_leaves_original_untouched():
    a = Vec3(3.0, 4.0, 0.0)
    n = a.normalized()
    assert a == Vec3(3.0, 4.0, 0.0)
    assert n.magnitude() == pytest.approx(1.0)


def test_normalize_zero_vector_stays_zero():
    a = Vec3()
    a.normalize()
    assert a == Vec3(0.0, 0.0, 0.0)


def test_vector_negation():
    b = -Vec3(1.0, -2.0, 3.0)
    assert tuple(b) == pytest.approx((-1.0, 2.0, -3.0), abs=EPS)


def test_invert_in_place():
    a = Vec3(1.0, -2.0, 3.0)
    a.invert()
    assert a == Vec3(-1.0, 2.0, -3.0)


def test_clear():
    a = Vec3(1.0, 2.0, 3.0)
    a.clear()
    assert a == Vec3()


def test_copy_is_independent():
    a = Vec3(1.0, 2.0, 3.0)
    b = a.copy()
    b.x = 9.0
    assert a.x == 1.0


def test_component_product():
    assert Vec3(1.0, 2.0, 3.0).component_product(Vec3(4.0, -5.0, 6.0)) == Vec3(4.0, -10.0, 18.0)


def test_division_inverts_multiplication():
    a = Vec3(1.0, -2.0, 0.5)
    assert tuple((a * 4.0) / 4.0) == pytest.approx(tuple(a))


def test_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec3(1.0, 2.0, 3.0) / 0


def test_indexing_get_and_set():
    a = Vec3(1.0, 2.0, 3.0)
    assert [a[0], a[1], a[2]] == [1.0, 2.0, 3.0]
    a[1] = 7.0
    assert a.y == 7.0


def test_indexing_out_of_range():
    with pytest.raises(IndexError):
        Vec3()[3]


def test_add_non_vector_raises():
    with pytest.raises(TypeError):
        Vec3() + 1.0


def test_str_format():
    assert str(Vec3(1.0, 2.0, 3.0)) == "(1, 2, 3)"


def test_augmented_add_does_not_alias():
    a = Vec3(1.0, 2.0, 3.0)
    alias = a
    a += Vec3(1.0, 1.0, 1.0)
    assert alias == Vec3(1.0, 2.0, 3.0)
    assert a == Vec3(2.0, 3.0, 4.0)
    assert not math.isnan(a.magnitude())