"""Tests for the grouping engine: ceil_div_mod, GroupCursor, SeparatorFlags."""

from __future__ import annotations

import dataclasses

import pytest

from separable.domain.grouping import (
    MAX_GROUP_SIZE,
    GroupCursor,
    SeparatorFlags,
    ceil_div_mod,
    make_plan,
    validate_groups,
)
from separable.domain.render import render


def group_string(groups: list[int], digits: str) -> str:
    """Group a bare digit string; the engine only sees its length."""
    return render("", digits, make_plan(groups, len(digits)), ",", "")


class TestCeilDivMod:
    @pytest.mark.parametrize(
        "n,m,expected",
        [
            (7, 3, (3, 1)),
            (6, 3, (2, 3)),
            (1, 3, (1, 1)),
            (3, 3, (1, 3)),
            (5, 2, (3, 1)),
            (4, 1, (4, 1)),
            (0, 3, (0, 0)),
        ],
    )
    def test_values(self, n: int, m: int, expected: tuple[int, int]) -> None:
        assert ceil_div_mod(n, m) == expected

    def test_remainder_never_zero(self) -> None:
        for n in range(1, 50):
            for m in range(1, 8):
                q, r = ceil_div_mod(n, m)
                assert 1 <= r <= m
                assert (q - 1) * m + r == n

    def test_zero_divisor_rejected(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            ceil_div_mod(5, 0)


class TestValidateGroups:
    def test_returns_tuple(self) -> None:
        assert validate_groups([3, 2]) == (3, 2)

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least one group"):
            validate_groups([])

    @pytest.mark.parametrize("groups", [[0], [3, 0], [-1], [MAX_GROUP_SIZE + 1]])
    def test_out_of_range_rejected(self, groups: list[int]) -> None:
        with pytest.raises(ValueError, match="between 1 and 255"):
            validate_groups(groups)

    @pytest.mark.parametrize("groups", [[True], [3.0], ["3"]])
    def test_non_integers_rejected(self, groups: list[object]) -> None:
        with pytest.raises(ValueError, match="integers"):
            validate_groups(groups)  # type: ignore[arg-type]

    def test_max_size_accepted(self) -> None:
        assert validate_groups([MAX_GROUP_SIZE]) == (MAX_GROUP_SIZE,)


class TestThrees:
    @pytest.mark.parametrize(
        "expected",
        [
            "1",
            "21",
            "321",
            "4,321",
            "54,321",
            "654,321",
            "7,654,321",
            "87,654,321",
            "987,654,321",
        ],
    )
    def test_grouping(self, expected: str) -> None:
        assert group_string([3], expected.replace(",", "")) == expected


class TestIrregularGroups:
    def test_three_then_twos(self) -> None:
        assert group_string([3, 2], "1234567890") == "1,23,45,67,890"

    def test_repeating_tail(self) -> None:
        """The sixth group repeats the last explicit size."""
        assert group_string([1, 2, 3, 4, 5], "KJIHGFEDCBA987654321") == (
            "KJIHG,FEDCB,A987,654,32,1"
        )

    def test_fewer_digits_than_explicit_groups(self) -> None:
        assert group_string([1, 2, 3, 4, 5], "4321") == "4,32,1"

    def test_partial_first_group(self) -> None:
        assert group_string([3, 2], "12") == "12"

    def test_single_digit_groups(self) -> None:
        assert group_string([1], "12345") == "1,2,3,4,5"


class TestSeparatorFlags:
    def test_least_significant_first(self) -> None:
        assert list(make_plan([3], 4)) == [False, False, True, False]

    def test_zero_digits_is_empty(self) -> None:
        flags = make_plan([3], 0)
        assert list(flags) == []
        assert len(flags) == 0
        assert flags.separator_count == 0
        assert flags.group_sizes() == []

    def test_exact_group_has_no_separator(self) -> None:
        assert list(make_plan([3], 3)) == [False, False, False]

    def test_restartable(self) -> None:
        flags = make_plan([3, 2], 10)
        assert list(flags) == list(flags)

    def test_len(self) -> None:
        assert len(make_plan([4], 17)) == 17

    @pytest.mark.parametrize(
        "groups,count,sizes",
        [
            ([3], 6, [3, 3]),
            ([3], 4, [3, 1]),
            ([3, 2], 10, [3, 2, 2, 2, 1]),
            ([3, 2], 4, [3, 1]),
            ([3, 2], 2, [2]),
            ([1, 2, 3, 4, 5], 20, [1, 2, 3, 4, 5, 5]),
            ([1, 2, 3, 4, 5], 16, [1, 2, 3, 4, 5, 1]),
        ],
    )
    def test_group_sizes(self, groups: list[int], count: int, sizes: list[int]) -> None:
        assert make_plan(groups, count).group_sizes() == sizes

    @pytest.mark.parametrize("groups", [[3], [4], [3, 2], [1, 2, 3, 4, 5], [2, 7, 1]])
    def test_structural_invariants(self, groups: list[int]) -> None:
        for count in range(0, 60):
            flags = make_plan(groups, count)
            produced = list(flags)
            assert len(produced) == count
            assert sum(produced) == flags.separator_count
            assert sum(flags.group_sizes()) == count
            assert len(flags.group_sizes()) == (flags.separator_count + 1 if count else 0)
            if count:
                # Nothing precedes the most significant digit.
                assert produced[-1] is False

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            make_plan([3], -1)

    def test_empty_groups_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least one group"):
            SeparatorFlags([], 5)

    def test_repr(self) -> None:
        assert repr(make_plan([3, 2], 4)) == "SeparatorFlags(groups=(3, 2), digit_count=4)"


class TestGroupCursor:
    def test_start(self) -> None:
        assert make_plan([3, 2], 10).start() == GroupCursor(0, 3, 3)

    def test_start_of_partial_group(self) -> None:
        assert make_plan([3], 2).start() == GroupCursor(0, 0, 2)

    def test_step_crosses_group_boundary(self) -> None:
        flags = make_plan([3, 2], 10)
        cursor = flags.start()
        produced = []
        for _ in range(3):
            flag, cursor = flags.step(cursor)
            produced.append(flag)
        assert produced == [False, False, True]
        assert cursor == GroupCursor(1, 3, 2)

    def test_step_through_tail(self) -> None:
        flags = make_plan([3], 7)
        cursor = flags.start()
        for _ in range(6):
            _, cursor = flags.step(cursor)
        assert cursor == GroupCursor(0, 0, 1)
        flag, cursor = flags.step(cursor)
        assert flag is False
        assert cursor.remaining_in_group == 0

    def test_frozen(self) -> None:
        cursor = GroupCursor(0, 0, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            cursor.group_index = 2  # type: ignore[misc]
