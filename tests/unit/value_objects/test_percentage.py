import pytest

from nexus_kernel.domain.value_objects import Money, Percentage
from nexus_kernel.exceptions import InvalidValueError


def test_apply_to_money():
    assert Percentage(50).apply_to(Money(200.00, "BRL")) == Money(100.00, "BRL")


def test_apply_to_truncates_to_the_cent():
    assert Percentage(33.3).apply_to(Money.from_cents(100, "BRL")).cents == 33


@pytest.mark.parametrize("value", [0, 0.0, 12.5, 100])
def test_bounds_are_inclusive(value):
    assert Percentage(value).value == float(value)


@pytest.mark.parametrize("value", [-0.01, 100.01, float("nan"), "50", None, True])
def test_out_of_range_or_wrong_type_rejected(value):
    with pytest.raises(InvalidValueError):
        Percentage(value)


def test_add_and_subtract():
    assert Percentage(40).add(Percentage(10)) == Percentage(50)
    assert Percentage(40).subtract(Percentage(10)) == Percentage(30)


def test_arithmetic_out_of_range_is_signaled_not_clamped():
    with pytest.raises(InvalidValueError):
        Percentage(60).add(Percentage(50))
    with pytest.raises(InvalidValueError):
        Percentage(10).subtract(Percentage(20))


def test_string_and_fraction():
    assert str(Percentage(50)) == "50.00%"
    assert str(Percentage(7.5).fraction) == "0.075"
