"""Sorting stack A with the push_swap operations.

Small inputs (three to five values) get dedicated routines. Larger ones are
pushed onto B in bands of increasing rank and then brought back to A, largest
first.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Sequence

from .stacks import Element, Stacks, is_ascending

INFINITY = float("inf")

# Each band is (low, high): values up to ``high`` are pushed onto B, and those
# up to ``low`` are then rotated to the bottom of B.
SMALL_BANDS: tuple[tuple[float, float], ...] = (
    (0.17, 0.34),
    (0.51, 0.68),
    (0.85, INFINITY),
)
LARGE_BANDS: tuple[tuple[float, float], ...] = (
    (0.056, 0.111),
    (0.167, 0.222),
    (0.278, 0.334),
    (0.389, 0.445),
    (0.500, 0.556),
    (0.612, 0.667),
    (0.723, 0.778),
    (0.834, 0.890),
    (0.954, INFINITY),
)
_LARGE_INPUT = 150


def assign_ranks(stacks: Stacks) -> None:
    """Give every element of A its rank (1 for the smallest) and rank / count."""
    ordered = sorted(element.value for element in stacks.a)
    size = len(ordered)
    for element in stacks.a:
        element.rank = bisect_left(ordered, element.value) + 1
        element.decile = element.rank / size


def position_of_rank(elements: Sequence[Element], rank: int) -> int:
    """Return the index of the first element with ``rank``, or the length if none."""
    return next(
        (index for index, element in enumerate(elements) if element.rank == rank),
        len(elements),
    )


def _position_of_max(elements: Sequence[Element]) -> int:
    return position_of_rank(elements, len(elements))


def _position_of_second_max(elements: Sequence[Element]) -> int:
    if len(elements) <= 1:
        return 0
    return position_of_rank(elements, len(elements) - 1)


def all_at_least(elements: Iterable[Element], threshold: float) -> bool:
    """Tell whether no element has a decile below ``threshold``."""
    return all(element.decile >= threshold for element in elements)


def sort_three(stacks: Stacks) -> int:
    """Sort a stack A of three elements."""
    if is_ascending(stacks.a):
        return 0
    position = _position_of_max(stacks.a)
    moves = 0
    if position == 0:
        moves += stacks.ra()
        if not is_ascending(stacks.a):
            moves += stacks.sa()
    elif position == 1:
        moves += stacks.rra()
        if not is_ascending(stacks.a):
            moves += stacks.sa()
    else:
        moves += stacks.sa()
    return moves


def _park_max_and_sort(stacks: Stacks, sort_rest) -> int:
    position = _position_of_max(stacks.a)
    if is_ascending(stacks.a):
        return 0
    size = len(stacks.a)
    while _position_of_max(stacks.a) != 0:
        if position <= size - position:
            stacks.ra()
        else:
            stacks.rra()
    moves = stacks.pb()
    moves += sort_rest(stacks)
    moves += stacks.pa()
    moves += stacks.ra()
    return moves


def sort_four(stacks: Stacks) -> int:
    """Sort a stack A of four elements, using B to hold the largest."""
    return _park_max_and_sort(stacks, sort_three)


def sort_five(stacks: Stacks) -> int:
    """Sort a stack A of five elements, using B to hold the largest."""
    return _park_max_and_sort(stacks, sort_four)


def push_chunks(stacks: Stacks, bands: Iterable[tuple[float, float]]) -> int:
    """Empty A onto B band by band, keeping lower halves of a band at B's bottom."""
    moves = 0
    for low, high in bands:
        while not all_at_least(stacks.a, high):
            top = stacks.a[0].decile
            if top <= low:
                stacks.pb()
                if stacks.a and stacks.a[0].decile > high:
                    stacks.rr()
                else:
                    stacks.rb()
                moves += 2
            elif top <= high:
                moves += stacks.pb()
            else:
                moves += stacks.ra()
    return moves


def _push_back_max(stacks: Stacks) -> int:
    b = stacks.b
    position = _position_of_max(b)
    if position == 0:
        return stacks.pa()
    if position == 1:
        stacks.sb()
        stacks.pa()
        return 2
    if position <= len(b) - position:
        moves = 0
        while moves < position - 1:
            moves += stacks.rb()
        second = _position_of_second_max(b)
        if second > len(b) - second:
            stacks.sb()
        else:
            stacks.rb()
        stacks.pa()
        return moves + 2
    moves = 0
    while moves < len(b) - position:
        moves += stacks.rrb()
    return moves + stacks.pa()


def push_back_all(stacks: Stacks) -> int:
    """Move every element of B back onto A, largest rank first."""
    moves = 0
    while stacks.b:
        moves += _push_back_max(stacks)
    return moves


def sort_stacks(stacks: Stacks) -> int:
    """Sort A in ascending order; ranks must already be assigned."""
    if is_ascending(stacks.a):
        return 0
    size = len(stacks.a)
    if size == 3:
        return sort_three(stacks)
    if size == 4:
        return sort_four(stacks)
    if size == 5:
        return sort_five(stacks)
    bands = SMALL_BANDS if size < _LARGE_INPUT else LARGE_BANDS
    moves = push_chunks(stacks, bands)
    return moves + push_back_all(stacks)