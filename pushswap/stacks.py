"""The two push_swap stacks and the operations that move values between them."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO


@dataclass(slots=True)
class Element:
    """A value on a stack, with its rank among all values and rank / count."""

    value: int
    rank: int = 0
    decile: float = 0.0


def is_ascending(elements: Iterable[Element]) -> bool:
    """Return True when the values are in strictly increasing order."""
    previous = None
    for element in elements:
        if previous is not None and not previous < element.value:
            return False
        previous = element.value
    return True


class Stacks:
    """Stacks A and B; every successful operation writes its name to ``out``.

    The top of each stack is index 0. Each operation returns the number of
    moves it counts for: 0 when it cannot be applied, otherwise 1 (2 for rr).
    """

    def __init__(self, values: Iterable[int] = (), out: TextIO | None = None) -> None:
        self.a: deque[Element] = deque(Element(value) for value in values)
        self.b: deque[Element] = deque()
        self._out = out

    def _emit(self, name: str) -> None:
        stream = self._out if self._out is not None else sys.stdout
        stream.write(name + "\n")

    @staticmethod
    def _swap(stack: deque[Element]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _rotate(stack: deque[Element], step: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(step)
        return True

    @staticmethod
    def _push(source: deque[Element], target: deque[Element]) -> bool:
        if not source:
            return False
        target.appendleft(source.popleft())
        return True

    def _apply(self, done: bool, name: str) -> int:
        if not done:
            return 0
        self._emit(name)
        return 1

    def sa(self) -> int:
        """Swap the two top elements of A."""
        return self._apply(self._swap(self.a), "sa")

    def sb(self) -> int:
        """Swap the two top elements of B."""
        return self._apply(self._swap(self.b), "sb")

    def ra(self) -> int:
        """Move the top of A to its bottom."""
        return self._apply(self._rotate(self.a, -1), "ra")

    def rb(self) -> int:
        """Move the top of B to its bottom."""
        return self._apply(self._rotate(self.b, -1), "rb")

    def rr(self) -> int:
        """Rotate A and B together; needs two elements on each."""
        if len(self.a) < 2 or len(self.b) < 2:
            return 0
        self.a.rotate(-1)
        self.b.rotate(-1)
        self._emit("rr")
        return 2

    def rra(self) -> int:
        """Move the bottom of A to its top."""
        return self._apply(self._rotate(self.a, 1), "rra")

    def rrb(self) -> int:
        """Move the bottom of B to its top."""
        return self._apply(self._rotate(self.b, 1), "rrb")

    def pa(self) -> int:
        """Move the top of B onto A."""
        return self._apply(self._push(self.b, self.a), "pa")

    def pb(self) -> int:
        """Move the top of A onto B."""
        return self._apply(self._push(self.a, self.b), "pb")

    def describe(self) -> str:
        """Return a readable listing of both stacks, top first."""
        lines = []
        for label, stack in (("A", self.a), ("B", self.b)):
            lines.append(f"Stack {label}:")
            lines.extend(
                f"value {e.value}, rank {e.rank}, decile {e.decile:.2f}" for e in stack
            )
        return "\n".join(lines) + "\n"