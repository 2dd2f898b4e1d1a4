"""Tests for linear converters."""

import math

import pytest

from phystypes.core.converters import SI_CONVERTER, LinearConverter, affine, scaled
from phystypes.core.errors import ConverterError

SAMPLES = [-1e6, -273.15, -1.0, 0.0, 1e-9, 0.5, 1.0, 42.0, 1e12]


def test_identity_converter():
    assert SI_CONVERTER.is_identity
    assert SI_CONVERTER.to_canonical(5.0) == 5.0
    assert SI_CONVERTER.from_canonical(5.0) == 5.0


def test_scaled_converter():
    milli = scaled(1e-3)
    assert math.isclose(milli.to_canonical(250.0), 0.25)
    assert math.isclose(milli.from_canonical(0.25), 250.0)
    assert not milli.is_identity


def test_affine_converter():
    celsius = affine(1.0, 273.15)
    assert math.isclose(celsius.to_canonical(0.0), 273.15)
    assert math.isclose(celsius.from_canonical(373.15), 100.0)


@pytest.mark.parametrize("converter", [SI_CONVERTER, scaled(1e-3), scaled(1609.344), affine(5.0 / 9.0, 255.372)])
def test_round_trip(converter):
    for value in SAMPLES:
        assert converter.is_invertible(value)


@pytest.mark.parametrize("scale", [0.0, math.inf, math.nan])
def test_invalid_scale(scale):
    with pytest.raises(ConverterError):
        LinearConverter(scale=scale)


def test_invalid_offset():
    with pytest.raises(ConverterError):
        LinearConverter(scale=1.0, offset=math.nan)


def test_converter_equality():
    assert scaled(1e3) == LinearConverter(1e3, 0.0)
    assert scaled(1e3) != affine(1e3, 1.0)
