"""Tests for family algebra."""

import itertools

import pytest

from phystypes.core.dimensions import (
    ACCELERATION,
    CHARGE,
    CURRENT,
    DIMENSIONLESS,
    ENERGY,
    FORCE,
    LENGTH,
    MASS,
    POWER,
    TIME,
    VELOCITY,
    Family,
    FamilyOp,
)


def test_family_creation_defaults_to_zero():
    current = Family(current=1)
    assert current.current == 1
    assert current.exponents == (0, 0, 0, 1, 0, 0, 0)
    assert not current.is_dimensionless()


def test_apply_uses_named_exponents():
    family = Family.apply(length_exponent=1, time_exponent=-1)
    assert family == VELOCITY
    assert Family.apply(luminous_exponent=1).luminosity == 1


def test_equality_and_hash_follow_exponents():
    assert Family(length=1) == LENGTH
    assert hash(Family(length=1)) == hash(LENGTH)
    assert Family(length=1) != Family(mass=1)
    assert len({Family(length=1), LENGTH, MASS}) == 2


def test_combine_add_and_subtract():
    assert CURRENT.combine(TIME, FamilyOp.ADD) == CHARGE
    assert LENGTH.combine(TIME, FamilyOp.SUBTRACT) == VELOCITY


def test_operators_mirror_combine():
    assert LENGTH * TIME == LENGTH.combine(TIME, FamilyOp.ADD)
    assert LENGTH / TIME == VELOCITY


def test_scale_and_power():
    area = LENGTH.scale(2)
    assert area.length == 2
    assert LENGTH**3 == Family(length=3)
    assert VELOCITY.scale(0) == DIMENSIONLESS


def test_scale_rejects_non_integer():
    with pytest.raises(TypeError):
        LENGTH.scale(1.5)  # type: ignore[arg-type]


def test_derived_families():
    assert FORCE == MASS * ACCELERATION
    assert ENERGY == FORCE * LENGTH
    assert POWER.time == -3


def test_multiply_then_divide_is_identity():
    samples = [DIMENSIONLESS, LENGTH, MASS, TIME, CURRENT, VELOCITY, FORCE, Family(-2, 3, 1, 0, -1, 4, 2)]
    for a, b in itertools.product(samples, repeat=2):
        assert a.combine(b, FamilyOp.ADD).combine(b, FamilyOp.SUBTRACT) == a


def test_dimensionless_check():
    assert DIMENSIONLESS.is_dimensionless()
    assert (LENGTH / LENGTH).is_dimensionless()


def test_string_forms():
    assert str(DIMENSIONLESS) == "dimensionless"
    assert str(VELOCITY) == "L·T^-1"
    assert VELOCITY.si_symbol() == "m·s^-1"
    assert DIMENSIONLESS.si_symbol() == "1"


def test_invalid_exponent():
    with pytest.raises(ValueError):
        Family(length=1.5)  # type: ignore[arg-type]


def test_from_exponents_requires_seven_values():
    assert Family.from_exponents((1, 0, 0, 0, 0, 0, 0)) == LENGTH
    with pytest.raises(ValueError):
        Family.from_exponents((1, 0))


def test_family_immutability():
    family = Family(length=1)
    with pytest.raises(AttributeError):
        family.length = 2  # type: ignore[misc]
