"""Dynamic programming: making change and Fibonacci numbers."""

from __future__ import annotations

from typing import Sequence


def coin_change(coins: Sequence[int], amount: int) -> int:
    """Fewest coins adding up to ``amount``, or -1 when it cannot be made.

    Raises ValueError for a negative amount or a coin that is not positive.
    """
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coins must be positive")
    unreachable = amount + 1
    best = [0] + [unreachable] * amount
    for value in range(1, amount + 1):
        for coin in coins:
            if coin <= value:
                best[value] = min(best[value], best[value - coin] + 1)
    return -1 if best[amount] == unreachable else best[amount]


def fib(n: int) -> int:
    """The n-th Fibonacci number counting from fib(0) = 0, fib(1) = 1.

    Raises ValueError for a negative n.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def fibonacci(n: int) -> int:
    """The n-th Fibonacci number counting from 1, where the first two are both 1.

    Raises ValueError when n is less than 1.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    return fib(n)