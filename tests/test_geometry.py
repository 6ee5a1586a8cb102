import math

import pytest

from infinity.geometry import Vec2, Vec2Int


def test_vec2_defaults_to_origin():
    v = Vec2()
    assert v.is_zero()
    assert v == Vec2(0.0, 0.0)


def test_vec2_components_become_floats():
    v = Vec2(3, 4)
    assert isinstance(v.x, float) and isinstance(v.y, float)
    assert tuple(v) == (3.0, 4.0)


def test_vec2_length_of_right_triangle():
    assert Vec2(3, 4).length() == pytest.approx(5.0)


def test_vec2_distance_matches_length_of_difference():
    a, b = Vec2(1.5, -2.0), Vec2(-4.0, 7.25)
    assert a.distance(b) == pytest.approx((a - b).length())
    assert a.distance(b) == pytest.approx(b.distance(a))


def test_vec2_is_zero_false_for_nonzero():
    assert not Vec2(0.0, 1.0).is_zero()


def test_vec2_add_sub_round_trip():
    a, b = Vec2(1.25, -3.5), Vec2(10.0, 0.75)
    assert (a + b) - b == a


def test_vec2_scalar_operations():
    a = Vec2(2.0, 6.0)
    assert a + 1 == Vec2(3.0, 7.0)
    assert a - 2.0 == Vec2(0.0, 4.0)
    assert a * 2 == a + a
    assert (a * 4.0) / 4.0 == a


def test_vec2_componentwise_multiply_and_divide():
    a, b = Vec2(2.0, 3.0), Vec2(4.0, 5.0)
    product = a * b
    assert product.x == a.x * b.x and product.y == a.y * b.y
    assert product / b == a


def test_vec2_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2(1.0, 1.0) / 0.0
    with pytest.raises(ZeroDivisionError):
        Vec2(1.0, 1.0) / Vec2(1.0, 0.0)


def test_vec2_is_immutable():
    v = Vec2(1.0, 2.0)
    with pytest.raises(AttributeError):
        v.x = 5.0
    assert v == Vec2(1.0, 2.0)
    assert v.x == 1.0


def test_vec2_rejects_unrelated_operand():
    with pytest.raises(TypeError):
        Vec2(1.0, 2.0) + "x"


def test_vec2int_length_squared_and_length():
    v = Vec2Int(3, 4)
    assert v.length_squared() == 3 * 3 + 4 * 4
    assert v.length() == pytest.approx(math.sqrt(v.length_squared()))


def test_vec2int_arithmetic_round_trip():
    a, b = Vec2Int(7, -2), Vec2Int(3, 9)
    assert (a + b) - b == a
    assert a * 3 == a + a + a
    assert (a * b) / b == a


def test_vec2int_division_truncates_toward_zero():
    assert Vec2Int(-7, 7) / 2 == Vec2Int(-3, 3)


def test_vec2int_division_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vec2Int(1, 1) / 0
    with pytest.raises(ZeroDivisionError):
        Vec2Int(1, 1) / Vec2Int(0, 1)


def test_vec2int_default_is_origin():
    assert tuple(Vec2Int()) == (0, 0)