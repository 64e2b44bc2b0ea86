"""Strategies that sort stack ``a`` using the push_swap moves."""

from __future__ import annotations

from collections import deque

from .parsing import is_sorted
from .stacks import Node, PushSwap


def sort_two(stacks: PushSwap) -> None:
    """Order the top two values of ``a``."""
    if stacks.a[0].val > stacks.a[1].val:
        stacks.sa()


def sort_three(stacks: PushSwap) -> None:
    """Order the top three values of ``a`` in at most two moves."""
    if len(stacks.a) < 3:
        raise ValueError("sort_three needs at least three elements")
    a, b, c = (stacks.a[i].val for i in range(3))
    if a > b and b < c and a < c:
        stacks.sa()
    elif a > b and b > c:
        stacks.sa()
        stacks.rra()
    elif a > b and b < c and a > c:
        stacks.ra()
    elif a < b and b > c and a < c:
        stacks.sa()
        stacks.ra()
    elif a < b and b > c and a > c:
        stacks.rra()


def sort_five(stacks: PushSwap) -> None:
    """Sort four or five values: park the two smallest on ``b``."""
    for _ in range(2):
        min_pos = stacks.find_min_position()
        while min_pos > 0:
            if min_pos <= len(stacks.a) // 2:
                stacks.ra()
            else:
                stacks.rra()
            min_pos = stacks.find_min_position()
        stacks.pb()
    if len(stacks.a) >= 3:
        sort_three(stacks)
    else:
        sort_two(stacks)
    while stacks.b:
        stacks.pa()


def in_stack(stack: deque[Node], pivot: int) -> bool:
    """True if some index in ``stack`` is below ``pivot``, or it is empty."""
    if not stack:
        return True
    return any(node.index < pivot for node in stack)


def send_to_b(stacks: PushSwap) -> None:
    """Push all but three elements to ``b`` in rank chunks, then sort ``a``."""
    rem = -1
    pivot_2 = len(stacks.a) // 6
    pivot_1 = len(stacks.a) // 3
    while len(stacks.a) > 3:
        b_low = (
            len(stacks.b) >= 2 and rem < stacks.b[0].index < pivot_2
        )
        if b_low and stacks.a[0].index > pivot_1:
            stacks.rr()
        elif b_low:
            stacks.rb()
        if stacks.a[0].index < pivot_1:
            stacks.pb()
        else:
            stacks.ra()
        if not in_stack(stacks.a, pivot_1):
            size = len(stacks.a)
            rem = pivot_1
            pivot_2 = size // 6 + pivot_1
            pivot_1 += size // 3
    sort_three(stacks)


def _in_first_half(stack: deque[Node], index: int) -> bool:
    half = len(stack) // 2
    return any(stack[pos].index == index for pos in range(half))


def _bring_back(stacks: PushSwap, parking: bool, rotate) -> bool:
    """Move the predecessor of ``a``'s top from ``b``, parking larger ones."""
    while stacks.b and stacks.b[0].index != stacks.a[0].index - 1:
        if stacks.b[0].index > stacks.a[-1].index or not parking:
            stacks.pa()
            stacks.ra()
            parking = True
        else:
            rotate()
    stacks.pa()
    return parking


def send_to_a(stacks: PushSwap) -> None:
    """Return every element of ``b`` to ``a`` in sorted order."""
    parking = False
    while stacks.b:
        target = stacks.a[0].index - 1
        if _in_first_half(stacks.b, target):
            parking = _bring_back(stacks, parking, stacks.rb)
        else:
            parking = _bring_back(stacks, parking, stacks.rrb)
        while stacks.a[-1].index == stacks.a[0].index - 1:
            stacks.rra()
        if stacks.search_max() == stacks.a[-1].index:
            parking = False


def sort_stack(stacks: PushSwap) -> None:
    """Sort ``a`` choosing the strategy by its size."""
    if is_sorted(stacks.values_a()):
        return
    size = len(stacks.a)
    if size == 2:
        sort_two(stacks)
    elif size == 3:
        sort_three(stacks)
    elif size <= 5:
        sort_five(stacks)
    else:
        send_to_b(stacks)
        send_to_a(stacks)