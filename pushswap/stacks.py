"""The two push_swap stacks and the moves that act on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass
class Node:
    """One stack element: its value and its rank among all values."""

    val: int
    index: int = 0


class PushSwap:
    """Stacks ``a`` and ``b`` with the push_swap instruction set.

    The top of each stack is the left end of its deque. Every move that
    takes effect is appended to ``moves`` under its instruction name.
    """

    def __init__(self, values: Iterable[int], indexes: Optional[Iterable[int]] = None):
        vals = list(values)
        if indexes is None:
            idx = [0] * len(vals)
        else:
            idx = list(indexes)
            if len(idx) != len(vals):
                raise ValueError("values and indexes differ in length")
        self.a: deque[Node] = deque(Node(v, i) for v, i in zip(vals, idx))
        self.b: deque[Node] = deque()
        self.moves: list[str] = []

    @staticmethod
    def _swap(stack: deque) -> None:
        first = stack.popleft()
        second = stack.popleft()
        stack.appendleft(first)
        stack.appendleft(second)

    @staticmethod
    def _rotate(stack: deque, name: str) -> None:
        if len(stack) < 2:
            raise IndexError(f"{name} needs at least two elements")
        stack.append(stack.popleft())

    @staticmethod
    def _reverse_rotate(stack: deque) -> None:
        stack.appendleft(stack.pop())

    def sa(self) -> None:
        """Swap the top two elements of ``a``; nothing if fewer than two."""
        if len(self.a) < 2:
            return
        self._swap(self.a)
        self.moves.append("sa")

    def sb(self) -> None:
        """Swap the top two elements of ``b``; nothing if fewer than two."""
        if len(self.b) < 2:
            return
        self._swap(self.b)
        self.moves.append("sb")

    def ss(self) -> None:
        """Swap the tops of both stacks; nothing unless both hold two."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        self._swap(self.b)
        self._swap(self.a)
        self.moves.append("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``; nothing if ``b`` is empty."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self.moves.append("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``; nothing if ``a`` is empty."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self.moves.append("pb")

    def ra(self) -> None:
        """Rotate ``a`` up by one; ``a`` must hold at least two elements."""
        self._rotate(self.a, "ra")
        self.moves.append("ra")

    def rb(self) -> None:
        """Rotate ``b`` up by one; nothing if fewer than two."""
        if len(self.b) < 2:
            return
        self._rotate(self.b, "rb")
        self.moves.append("rb")

    def rr(self) -> None:
        """Rotate both stacks up; each must hold at least two elements."""
        if len(self.a) < 2 or len(self.b) < 2:
            raise IndexError("rr needs at least two elements in each stack")
        self._rotate(self.b, "rr")
        self._rotate(self.a, "rr")
        self.moves.append("rr")

    def rra(self) -> None:
        """Rotate ``a`` down by one; nothing if fewer than two."""
        if len(self.a) < 2:
            return
        self._reverse_rotate(self.a)
        self.moves.append("rra")

    def rrb(self) -> None:
        """Rotate ``b`` down by one; nothing if fewer than two."""
        if len(self.b) < 2:
            return
        self._reverse_rotate(self.b)
        self.moves.append("rrb")

    def rrr(self) -> None:
        """Rotate both stacks down; nothing unless both hold two."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        self._reverse_rotate(self.a)
        self._reverse_rotate(self.b)
        self.moves.append("rrr")

    def find_min_position(self) -> int:
        """Position from the top of the first smallest value in ``a``."""
        if not self.a:
            raise IndexError("stack a is empty")
        return min(enumerate(self.a), key=lambda item: item[1].val)[0]

    def search_max(self) -> int:
        """Largest index held in ``a``."""
        if not self.a:
            raise IndexError("stack a is empty")
        return max(node.index for node in self.a)

    def values_a(self) -> list[int]:
        """Values of ``a`` from top to bottom."""
        return [node.val for node in self.a]

    def values_b(self) -> list[int]:
        """Values of ``b`` from top to bottom."""
        return [node.val for node in self.b]