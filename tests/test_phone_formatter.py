"""Tests for the phone input mask."""

from __future__ import annotations

import pytest

from wizard.countries import get_country
from wizard.phone import (
    compose_phone_value,
    extract_digits,
    format_phone_input,
    strip_dial_code,
)

BRAZIL = get_country("BR")
PORTUGAL = get_country("PT")


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("", ""),
        ("1", "1"),
        ("11", "11"),
        ("119", "(11) 9"),
        ("119888", "(11) 9888"),
        ("1198888", "(11) 98888-"),
        ("1198888777", "(11) 98888-777"),
        ("11988887777", "(11) 98888-7777"),
        ("11988887777123", "(11) 98888-7777"),
    ],
)
def test_local_mask_shapes(raw: str, expected: str) -> None:
    assert format_phone_input(raw, BRAZIL) == expected


def test_local_mask_strips_non_digits_first() -> None:
    assert format_phone_input("+55 (11) 98888-7777", BRAZIL) == "(55) 11988-8877"
    assert format_phone_input("abc", BRAZIL) == ""
    assert format_phone_input("11 9a8b8", BRAZIL) == "(11) 988"


def test_local_mask_converges_when_reapplied() -> None:
    once = format_phone_input("11988887777", BRAZIL)
    assert format_phone_input(once, BRAZIL) == once
    partial = format_phone_input("1198888", BRAZIL)
    assert format_phone_input(partial, BRAZIL) == partial


def test_local_mask_keeps_typing_into_masked_value() -> None:
    draft = format_phone_input("1198888", BRAZIL)
    assert format_phone_input(draft + "7", BRAZIL) == "(11) 98888-7"


def test_other_countries_only_truncate_digits() -> None:
    assert format_phone_input("912 345 678", PORTUGAL) == "912345678"
    assert format_phone_input("1" * 20, PORTUGAL) == "1" * 15
    assert format_phone_input("(11) 9", PORTUGAL) == "119"


def test_extract_digits_ignores_non_ascii_digits() -> None:
    assert extract_digits("١٢٣ 45") == "45"
    assert extract_digits(None) == ""


def test_compose_and_strip_dial_code_round_trip() -> None:
    stored = compose_phone_value("(11) 98888-7777", BRAZIL)

    assert stored == "+55 (11) 98888-7777"
    assert strip_dial_code(stored, BRAZIL) == "(11) 98888-7777"


def test_strip_dial_code_leaves_foreign_prefix_untouched() -> None:
    assert strip_dial_code("+55 (11) 98888-7777", PORTUGAL) == "+55 (11) 98888-7777"
