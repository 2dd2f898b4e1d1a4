"""Tests for measure arithmetic and comparison against an explicit registry."""

import copy
import math

import pytest

from phystypes.config import UnresolvedPolicy
from phystypes.core.converters import scaled
from phystypes.core.dimensions import Family
from phystypes.core.errors import (
    DimensionalError,
    DomainError,
    MeasureZeroDivisionError,
    UnresolvedFamilyError,
)
from phystypes.core.quantity import Quantity, anonymous_quantity
from phystypes.core.measure import Measure
from phystypes.core.registry import FamilyRegistry
from phystypes.core.resources import STATIC_NAMES
from phystypes.core.restrictions import NON_NEGATIVE

DISTANCE = Family(length=1)
DURATION = Family(time=1)
SPEED = Family(length=1, time=-1)


@pytest.fixture
def registry():
    reg = FamilyRegistry(UnresolvedPolicy.ANONYMOUS)
    reg.register(Quantity("Scalar", Family(), "", names=STATIC_NAMES))
    reg.register(Quantity("Distance", DISTANCE, "m", names=STATIC_NAMES, restriction=NON_NEGATIVE))
    reg.register(Quantity("Duration", DURATION, "s", names=STATIC_NAMES))
    reg.register(Quantity("Speed", SPEED, "m/s", names=STATIC_NAMES))
    return reg


def q(registry, family):
    return registry.require(family)


def test_add_and_subtract_same_family(registry):
    duration = q(registry, DURATION)
    total = duration.of(2.0) + duration.of(3.0)
    assert total.value == 5.0
    assert total.quantity is duration
    assert (duration.of(2.0) - duration.of(3.0)).value == -1.0


def test_add_rejects_different_families(registry):
    with pytest.raises(DimensionalError):
        q(registry, DURATION).of(1.0).add(q(registry, DISTANCE).of(1.0))
    with pytest.raises(DimensionalError):
        q(registry, DURATION).of(1.0) - q(registry, DISTANCE).of(1.0)


def test_operators_with_foreign_types_raise_type_error(registry):
    duration = q(registry, DURATION).of(1.0)
    with pytest.raises(TypeError):
        duration + 1.0
    with pytest.raises(TypeError):
        duration.add(1.0)  # type: ignore[arg-type]


def test_non_negative_subtraction_underflow_fails(registry):
    distance = q(registry, DISTANCE)
    assert (distance.of(3.0) - distance.of(2.0)).value == 1.0
    with pytest.raises(DomainError):
        distance.of(2.0) - distance.of(3.0)


def test_negate_and_scale(registry):
    duration = q(registry, DURATION)
    assert (-duration.of(4.0)).value == -4.0
    assert duration.of(4.0).scale(0.5).value == 2.0
    assert (3 * duration.of(2.0)).value == 6.0
    assert (duration.of(2.0) * 3).value == 6.0
    with pytest.raises(DomainError):
        -q(registry, DISTANCE).of(1.0)
    with pytest.raises(TypeError):
        duration.of(1.0).scale("2")  # type: ignore[arg-type]


def test_scale_to_non_finite_fails(registry):
    with pytest.raises(DomainError):
        q(registry, DURATION).of(1e308).scale(1e10)


def test_multiply_resolves_registered_family(registry):
    speed = q(registry, SPEED).of(3.0)
    duration = q(registry, DURATION).of(4.0)
    product = speed.multiply(duration, registry)
    assert product.quantity is q(registry, DISTANCE)
    assert product.value == 12.0


def test_divide_resolves_registered_family(registry):
    result = q(registry, DISTANCE).of(10.0).divide(q(registry, DURATION).of(4.0), registry)
    assert result.quantity is q(registry, SPEED)
    assert result.value == 2.5


def test_multiply_unregistered_family_is_anonymous(registry):
    product = q(registry, DISTANCE).of(2.0).multiply(q(registry, DISTANCE).of(3.0), registry)
    assert product.family == Family(length=2)
    assert not product.quantity.is_named
    assert product.value == 6.0


def test_multiply_unregistered_family_raises_under_raise_policy(registry):
    strict = FamilyRegistry(UnresolvedPolicy.RAISE)
    for quantity in registry.quantities():
        strict.register(quantity)
    with pytest.raises(UnresolvedFamilyError):
        q(registry, DISTANCE).of(2.0).multiply(q(registry, DISTANCE).of(3.0), strict)


def test_divide_by_dimensionless_preserves_family(registry):
    result = q(registry, DISTANCE).of(10.0).divide(q(registry, Family()).of(2.0), registry)
    assert result.quantity is q(registry, DISTANCE)
    assert result.value == 5.0


def test_divide_by_exact_zero_fails(registry):
    with pytest.raises(MeasureZeroDivisionError):
        q(registry, DISTANCE).of(1.0).divide(q(registry, DURATION).of(0.0), registry)
    with pytest.raises(ZeroDivisionError):
        q(registry, DISTANCE).of(1.0) / 0


def test_divide_by_scalar(registry):
    assert (q(registry, DISTANCE).of(9.0) / 3).value == 3.0


def test_power(registry):
    area = q(registry, DISTANCE).of(3.0).power(2, registry)
    assert area.family == Family(length=2)
    assert area.value == 9.0
    inverse = q(registry, DURATION).of(4.0).power(-1, registry)
    assert inverse.family == Family(time=-1)
    assert inverse.value == 0.25
    with pytest.raises(MeasureZeroDivisionError):
        q(registry, DURATION).of(0.0).power(-1, registry)
    with pytest.raises(TypeError):
        q(registry, DURATION).of(2.0).power(0.5, registry)  # type: ignore[arg-type]


def test_power_overflow_is_domain_error(registry):
    with pytest.raises(DomainError):
        q(registry, DISTANCE).of(1e200).power(2, registry)
    with pytest.raises(DomainError):
        q(registry, DURATION).of(1e-200).power(-2, registry)


def test_comparison_same_family(registry):
    duration = q(registry, DURATION)
    assert duration.of(1.0) < duration.of(2.0)
    assert duration.of(2.0) >= duration.of(2.0)
    assert duration.of(3.0) > duration.of(2.0)
    assert duration.of(1.0).compare(duration.of(1.0)) == 0
    assert duration.of(1.0).compare(duration.of(5.0)) == -1
    assert max(duration.of(1.0), duration.of(7.0)).value == 7.0


def test_comparison_across_families_fails(registry):
    with pytest.raises(DimensionalError):
        q(registry, DURATION).of(1.0) < q(registry, DISTANCE).of(2.0)
    with pytest.raises(DimensionalError):
        q(registry, DURATION).of(1.0).compare(q(registry, DISTANCE).of(2.0))


def test_equality_and_hash(registry):
    duration = q(registry, DURATION)
    assert duration.of(1.0) == duration.of(1.0)
    assert hash(duration.of(1.0)) == hash(duration.of(1.0))
    assert duration.of(1.0) != q(registry, DISTANCE).of(1.0)
    assert duration.of(1.0) != 1.0


def test_anonymous_result_adopts_named_quantity_on_addition(registry):
    anon = anonymous_quantity(DURATION).of(1.0)
    named = q(registry, DURATION).of(2.0)
    assert (anon + named).quantity is q(registry, DURATION)
    assert (named + anon).quantity is q(registry, DURATION)


def test_named_retags_matching_family(registry):
    anon = anonymous_quantity(SPEED).of(4.0)
    speed = anon.named(q(registry, SPEED))
    assert speed.quantity is q(registry, SPEED)
    with pytest.raises(DimensionalError):
        anon.named(q(registry, DURATION))


def test_in_units_checks_family(registry):
    distance = q(registry, DISTANCE)
    kilo = distance.define_units("km", scaled(1e3))
    measure = distance.of(2500.0)
    assert math.isclose(measure.in_units(kilo), 2.5)
    with pytest.raises(DimensionalError):
        measure.in_units(q(registry, DURATION).si_units)


def test_is_close(registry):
    duration = q(registry, DURATION)
    assert duration.of(1.0).is_close(duration.of(1.0 + 1e-12))
    assert not duration.of(1.0).is_close(duration.of(1.1))
    assert duration.of(1.0).is_close(duration.of(1.05), rel_tol=0.1)


def test_to_string(registry):
    assert q(registry, DISTANCE).of(2.5).to_string() == "2.5 m"
    assert str(q(registry, Family()).of(3.0)) == "3"


def test_measures_are_immutable(registry):
    measure = q(registry, DURATION).of(1.0)
    with pytest.raises(AttributeError):
        measure._value = 2.0  # type: ignore[misc]
    with pytest.raises(AttributeError):
        measure.value = 2.0  # type: ignore[misc]


def test_copy_preserves_value(registry):
    measure = q(registry, DURATION).of(1.5)
    clone = copy.copy(measure)
    assert clone == measure
    assert clone.quantity is measure.quantity


@pytest.mark.parametrize(
    "name", ["add", "subtract", "negate", "scale", "multiply", "divide", "power", "compare"]
)
def test_public_operations_are_documented(name):
    assert getattr(Measure, name).__doc__
