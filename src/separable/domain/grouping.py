"""Grouping engine: which digits are followed by a separator.

Group sizes are read right to left. ``groups[0]`` is the size of the
rightmost group, and ``groups[-1]`` repeats for every group beyond the
explicit list. With ``groups=(3, 2)`` ten digits group as ``1,23,45,67,890``.

The engine never sees the digits themselves, only their count. Flags are
produced least significant digit first; ``True`` marks the last digit of a
group that has a more significant group after it.

INVARIANT: no separator before the most significant digit, none after the
least significant one.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

MAX_GROUP_SIZE = 255


def validate_groups(groups: Sequence[int]) -> tuple[int, ...]:
    """Return *groups* as a tuple, rejecting empty lists and non-positive sizes.

    Zero-size groups are rejected outright; a repeating tail of size zero
    would never consume a digit.
    """
    if not groups:
        raise ValueError("must provide at least one group")
    for size in groups:
        if isinstance(size, bool) or not isinstance(size, int):
            raise ValueError(f"group sizes must be integers, got {size!r}")
        if not 0 < size <= MAX_GROUP_SIZE:
            raise ValueError(f"group sizes must be between 1 and {MAX_GROUP_SIZE}, got {size}")
    return tuple(groups)


def ceil_div_mod(n: int, m: int) -> tuple[int, int]:
    """Ceiling division that reports a remainder in ``1..m`` instead of ``0..m-1``.

    Used to size the repeating tail: ``n`` digits in groups of ``m`` take
    ``q`` groups, the most significant holding ``r`` digits. An exact
    multiple yields a full leading group, never an empty one.

    Examples:
        >>> ceil_div_mod(7, 3)
        (3, 1)
        >>> ceil_div_mod(6, 3)
        (2, 3)
        >>> ceil_div_mod(0, 3)
        (0, 0)
    """
    if m <= 0:
        raise ValueError(f"divisor must be positive, got {m}")
    if n == 0:
        return 0, 0
    return (n + m - 1) // m, (n + m - 1) % m + 1


@dataclass(frozen=True)
class GroupCursor:
    """Position within the group sequence of a single number.

    Attributes:
        group_index: Explicit group currently being consumed.
        repeats_remaining: Groups of the repeating tail still to come.
        remaining_in_group: Digits left in the active group.
    """

    group_index: int
    repeats_remaining: int
    remaining_in_group: int


class SeparatorFlags:
    """Per-digit separator flags for one digit count.

    Iterating yields ``digit_count`` booleans, least significant digit first.
    Every ``iter()`` starts from a fresh :class:`GroupCursor`, so the flags
    can be replayed as often as needed.
    """

    def __init__(self, groups: Sequence[int], digit_count: int) -> None:
        if digit_count < 0:
            raise ValueError(f"digit_count must be non-negative, got {digit_count}")
        self.groups = validate_groups(groups)
        self.digit_count = digit_count

        # Walk the explicit groups until one holds the most significant digit.
        covered = 0
        for index, size in enumerate(self.groups):
            if digit_count <= covered + size:
                self._final_index = index
                self._tail_groups = 0
                self._leading_size = digit_count - covered
                return
            covered += size

        self._final_index = len(self.groups) - 1
        self._tail_groups, self._leading_size = ceil_div_mod(
            digit_count - covered, self.groups[-1]
        )

    def __len__(self) -> int:
        return self.digit_count

    def __iter__(self) -> Iterator[bool]:
        if self.digit_count == 0:
            return
        cursor = self.start()
        for _ in range(self.digit_count):
            flag, cursor = self.step(cursor)
            yield flag

    def __repr__(self) -> str:
        return f"SeparatorFlags(groups={self.groups!r}, digit_count={self.digit_count})"

    @property
    def separator_count(self) -> int:
        """Number of ``True`` flags (one less than the number of groups)."""
        if self.digit_count == 0:
            return 0
        return self._final_index + self._tail_groups

    def group_sizes(self) -> list[int]:
        """Effective size of every group, least significant first."""
        if self.digit_count == 0:
            return []
        sizes = [self._group_size(i, self._tail_groups) for i in range(self._final_index + 1)]
        for repeats in range(self._tail_groups - 1, -1, -1):
            sizes.append(self._group_size(self._final_index, repeats))
        return sizes

    def start(self) -> GroupCursor:
        """Cursor positioned on the least significant digit."""
        return GroupCursor(0, self._tail_groups, self._group_size(0, self._tail_groups))

    def step(self, cursor: GroupCursor) -> tuple[bool, GroupCursor]:
        """Consume one digit, returning its flag and the advanced cursor."""
        remaining = cursor.remaining_in_group - 1
        if remaining > 0:
            return False, GroupCursor(cursor.group_index, cursor.repeats_remaining, remaining)

        if cursor.group_index < self._final_index:
            index, repeats = cursor.group_index + 1, cursor.repeats_remaining
        elif cursor.repeats_remaining > 0:
            index, repeats = cursor.group_index, cursor.repeats_remaining - 1
        else:
            return False, GroupCursor(cursor.group_index, 0, 0)

        return True, GroupCursor(index, repeats, self._group_size(index, repeats))

    def _group_size(self, index: int, repeats_remaining: int) -> int:
        # The group holding the most significant digit may be partially filled.
        if index == self._final_index and repeats_remaining == 0:
            return self._leading_size
        return self.groups[index]


def make_plan(groups: Sequence[int], digit_count: int) -> SeparatorFlags:
    """Build the separator flags for *digit_count* digits grouped by *groups*.

    Examples:
        >>> list(make_plan([3], 4))
        [False, False, True, False]
        >>> make_plan([3, 2], 10).group_sizes()
        [3, 2, 2, 2, 1]
    """
    return SeparatorFlags(groups, digit_count)
