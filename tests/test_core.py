import pytest

from hartnoise.core import ConfigurationError, Position, clamp01


def test_position_vector_arithmetic():
    a = Position(1.0, 2.0)
    b = Position(0.5, -4.0)
    assert a + b == Position(1.5, -2.0)
    assert a - b == Position(0.5, 6.0)
    assert a * b == Position(0.5, -8.0)
    assert a / Position(2.0, 4.0) == Position(0.5, 0.5)
    assert -a == Position(-1.0, -2.0)


def test_position_scalar_arithmetic():
    a = Position.of(3, 6)
    assert a * 2.0 == Position(6.0, 12.0)
    assert 2.0 * a == Position(6.0, 12.0)
    assert a / 3.0 == Position(1.0, 2.0)
    assert a + 1 == Position(4.0, 7.0)
    assert Position.zero() == Position(0.0, 0.0)


def test_position_len_sq():
    assert Position(3.0, 4.0).len_sq() == 25.0


def test_clamp01():
    assert clamp01(-0.5) == 0.0
    assert clamp01(0.25) == 0.25
    assert clamp01(7.0) == 1.0


def test_configuration_error_is_value_error():
    with pytest.raises(ValueError):
        raise ConfigurationError("bad")


def test_clamp01_maps_nan_to_zero():
    assert clamp01(float("nan")) == 0.0
    assert clamp01(float("inf")) == 1.0
    assert clamp01(float("-inf")) == 0.0
