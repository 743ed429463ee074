"""Tests for the public formatting entry points."""

from __future__ import annotations

from decimal import Decimal

import pytest

from separable import (
    ASCII_DECIMAL,
    COMMA_SEPARATOR,
    HEX_FOUR,
    Separator,
    SeparatorPolicy,
    locate,
    separate_by_policy,
    separate_text,
    separate_with_commas,
    separate_with_dots,
    separate_with_spaces,
)


class TestConveniencePaths:
    def test_integer_thousands_commas(self) -> None:
        assert separate_with_commas(12345) == "12,345"

    def test_negative_integer(self) -> None:
        assert separate_with_commas(-12345) == "-12,345"

    def test_float(self) -> None:
        assert separate_with_commas(9876.5) == "9,876.5"

    def test_minus_sign_and_decimal_point(self) -> None:
        assert separate_with_commas(-1234.5) == "-1,234.5"
        assert separate_with_commas("-1234.5") == "-1,234.5"

    def test_spaces(self) -> None:
        assert separate_with_spaces(12345) == "12 345"

    def test_dots(self) -> None:
        assert separate_with_dots(12345) == "12.345"

    def test_decimal(self) -> None:
        assert separate_with_commas(Decimal("1234567.50")) == "1,234,567.50"

    def test_big_integer(self) -> None:
        assert separate_with_commas(10**30) == "1," + ",".join(["000"] * 10)


class TestExplicitPolicy:
    def test_three_two_two_two(self) -> None:
        policy = SeparatorPolicy(separator=",", groups=[3, 2], digits=ASCII_DECIMAL)
        assert separate_by_policy(1234567890, policy) == "1,23,45,67,890"

    def test_hex_four(self) -> None:
        assert separate_text("deadbeef", HEX_FOUR) == "dead beef"

    def test_hex_with_custom_conversion(self) -> None:
        assert separate_by_policy(0xDEADBEEF, HEX_FOUR, to_text="{:x}".format) == "dead beef"

    def test_hex_prefix_stops_run(self) -> None:
        """The ``0`` of ``0x`` is a run of its own and nothing is grouped."""
        assert separate_text("0xdeadbeef", HEX_FOUR) == "0xdeadbeef"

    def test_non_ascii_digits_and_separator(self) -> None:
        policy = SeparatorPolicy(separator="٬", groups=[3], digits=set("٠١٢٣٤٥٦٧٨٩"))
        assert separate_text("١٢٣٤٥٦٧", policy) == "١٬٢٣٤٬٥٦٧"

    def test_emoji_digits(self) -> None:
        policy = SeparatorPolicy(separator="\U0001f603" * 2, groups=[1], digits={"\U0001f64f"})
        smile, pray = "\U0001f603" * 2, "\U0001f64f"
        assert separate_text(f"  {pray * 5}  ", policy) == f"  {smile.join(pray * 5)}  "


class TestEdgeCases:
    @pytest.mark.parametrize("text", ["", "abc", "-", "1", "12", "123"])
    def test_unchanged(self, text: str) -> None:
        assert separate_text(text, COMMA_SEPARATOR) == text

    def test_only_first_run_grouped(self) -> None:
        assert separate_text("1234 5678", COMMA_SEPARATOR) == "1,234 5678"

    def test_suffix_unit_preserved(self) -> None:
        assert separate_text("~25000 km/h", COMMA_SEPARATOR) == "~25,000 km/h"


class TestProperties:
    def test_comma_groups_of_three(self) -> None:
        for n in [*range(0, 5000, 7), 65536, 10**6, 10**12 + 1, 2**64]:
            result = separate_with_commas(n)
            assert set(result) <= set("0123456789,")
            assert result.replace(",", "") == str(n)
            head, *rest = result.split(",")
            assert 1 <= len(head) <= 3
            assert all(len(group) == 3 for group in rest)

    @pytest.mark.parametrize("text", ["-1234.5", "$1234567 USD", "(98765)", "x1000000y"])
    def test_relocating_output_keeps_surroundings(self, text: str) -> None:
        original = locate(text, COMMA_SEPARATOR.is_digit)
        result = separate_text(text, COMMA_SEPARATOR)
        relocated = locate(result, COMMA_SEPARATOR.is_digit)
        assert len(result) >= len(text)
        assert relocated.prefix == original.prefix
        assert result.endswith(original.suffix)


class TestSeparatorAdapter:
    def test_default_conversion(self) -> None:
        commas = Separator(COMMA_SEPARATOR)
        assert commas(1234567) == "1,234,567"
        assert commas.policy is COMMA_SEPARATOR

    def test_custom_conversion(self) -> None:
        money = Separator(COMMA_SEPARATOR, to_text="{:.2f}".format)
        assert money(1234567.891) == "1,234,567.89"

    def test_reusable(self) -> None:
        commas = Separator(COMMA_SEPARATOR)
        assert [commas(v) for v in (1, 1000, 1000000)] == ["1", "1,000", "1,000,000"]
