"""Tests du calcul de signe, d'âge et de la validation de la date de naissance."""

import datetime as dt

import pytest

from aura_backend.domain.zodiac import (
    UNKNOWN_ZODIAC,
    ZODIAC_RANGES,
    ZODIAC_SIGNS,
    calculate_age,
    parse_birth_date,
    zodiac_sign,
)


@pytest.mark.parametrize(("sign", "start", "end"), ZODIAC_RANGES)
def test_boundaries_are_inclusive(sign, start, end):
    """Le premier et le dernier jour d'une plage appartiennent au signe."""
    assert zodiac_sign(dt.date(2001, *start)) == sign
    assert zodiac_sign(dt.date(2001, *end)) == sign


@pytest.mark.parametrize(
    ("day", "expected"),
    [
        ((1, 19), "Capricorn"),
        ((1, 20), "Aquarius"),
        ((2, 18), "Aquarius"),
        ((2, 19), "Pisces"),
        ((7, 4), "Cancer"),
        ((12, 21), "Sagittarius"),
        ((12, 22), "Capricorn"),
        ((12, 31), "Capricorn"),
        ((1, 1), "Capricorn"),
    ],
)
def test_known_dates(day, expected):
    assert zodiac_sign(dt.date(1999, *day)) == expected


def test_leap_day_is_pisces():
    assert zodiac_sign(dt.date(2000, 2, 29)) == "Pisces"


def test_every_day_of_leap_year_has_a_sign():
    """Aucune date valide ne tombe sur le signe de repli."""
    day = dt.date(2024, 1, 1)
    while day.year == 2024:
        sign = zodiac_sign(day)
        assert sign != UNKNOWN_ZODIAC
        assert sign in ZODIAC_SIGNS
        day += dt.timedelta(days=1)


def test_age_before_birthday_decrements():
    assert calculate_age(dt.date(2000, 7, 4), today=dt.date(2026, 7, 3)) == 25
    assert calculate_age(dt.date(2000, 7, 4), today=dt.date(2026, 6, 30)) == 25


def test_age_on_birthday_does_not_decrement():
    assert calculate_age(dt.date(2000, 7, 4), today=dt.date(2026, 7, 4)) == 26


def test_age_after_birthday():
    assert calculate_age(dt.date(2000, 7, 4), today=dt.date(2026, 10, 19)) == 26


def test_parse_birth_date_accepts_iso_and_date():
    assert parse_birth_date("2000-07-04") == dt.date(2000, 7, 4)
    assert parse_birth_date(dt.date(2000, 7, 4)) == dt.date(2000, 7, 4)


@pytest.mark.parametrize("value", ["", "   ", "04/07/2000", "2000-13-01", "not a date"])
def test_parse_birth_date_rejects_invalid(value):
    with pytest.raises(ValueError):
        parse_birth_date(value)


def test_parse_birth_date_rejects_future():
    with pytest.raises(ValueError, match="future"):
        parse_birth_date("2030-01-01", today=dt.date(2026, 1, 1))
