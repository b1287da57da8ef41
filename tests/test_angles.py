"""Unit tests for angle helpers."""

import math

import pytest

from astroresonance.utils.angles import (
    ZODIAC_SIGNS,
    delta_angle,
    midpoint,
    norm360,
    parse_degrees,
    separation,
    split_degrees,
    zodiac_position,
)


def test_norm360_wraps_negative_and_full_turns():
    assert norm360(-10.0) == 350.0
    assert norm360(720.0) == 0.0
    assert norm360(370.5) == pytest.approx(10.5)


def test_separation_takes_the_short_way_round():
    assert separation(350.0, 10.0) == pytest.approx(20.0)
    assert separation(0.0, 180.0) == 180.0
    assert separation(10.0, 10.0) == 0.0


def test_delta_angle_is_signed():
    assert delta_angle(350.0, 10.0) == pytest.approx(20.0)
    assert delta_angle(10.0, 350.0) == pytest.approx(-20.0)


def test_midpoint_across_aries_point():
    assert midpoint(350.0, 10.0) == pytest.approx(0.0, abs=1e-9)
    assert midpoint(10.0, 30.0) == pytest.approx(20.0)


def test_split_degrees_rounds_seconds():
    assert split_degrees(12.5) == (12, 30, 0)
    assert split_degrees(204.504166667) == (204, 30, 15)
    assert split_degrees(29.99999) == (30, 0, 0)


def test_parse_degrees_accepts_decimal_and_sexagesimal():
    assert parse_degrees("12.5") == 12.5
    assert parse_degrees("12 30") == 12.5
    assert math.isclose(parse_degrees("204 30 15"), 204.0 + 30 / 60 + 15 / 3600)
    assert math.isclose(parse_degrees("204°30'15\""), 204.0 + 30 / 60 + 15 / 3600)


@pytest.mark.parametrize("text", ["", "abc", "1 2 3 4"])
def test_parse_degrees_rejects_garbage(text):
    with pytest.raises(ValueError):
        parse_degrees(text)


def test_zodiac_position_splits_sign_and_degree():
    assert zodiac_position(0.0) == (0, 0, 0)
    assert zodiac_position(42.5) == (1, 12, 30)
    assert zodiac_position(-30.0) == (11, 0, 0)
    assert ZODIAC_SIGNS[zodiac_position(121.0)[0]][0] == "Leo"
