"""Greedy algorithms: cookies, fractional knapsack, coin change and stock profit."""

from __future__ import annotations

from collections.abc import Sequence


def find_content_children(greed: Sequence[int], sizes: Sequence[int]) -> int:
    """Return how many children can be content, each with one cookie at least their greed."""
    children = iter(sorted(greed))
    content = 0
    child = next(children, None)
    for size in sorted(sizes):
        if child is None:
            break
        if size >= child:
            content += 1
            child = next(children, None)
    return content


def fractional_knapsack(
    values: Sequence[int], weights: Sequence[int], capacity: int
) -> float:
    """Return the best total value that fits in ``capacity`` when items may be split."""
    items = sorted(
        zip(values, weights), key=lambda item: item[0] / item[1], reverse=True
    )
    profit = 0.0
    for value, weight in items:
        if capacity <= 0:
            break
        if weight <= capacity:
            profit += value
            capacity -= weight
        else:
            profit += (capacity / weight) * value
            break
    return profit


def minimum_coins(coins: Sequence[int], amount: int) -> int | None:
    """Count coins used by greedy change-making, largest coin first.

    Returns ``None`` when the greedy choice leaves an amount that cannot be paid.
    """
    used = 0
    for coin in sorted(coins, reverse=True):
        if amount >= coin:
            used += amount // coin
            amount %= coin
    if amount > 0:
        return None
    return used


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sell."""
    if not prices:
        raise ValueError("prices must not be empty")
    lowest = prices[0]
    profit = 0
    for price in prices[1:]:
        profit = max(profit, price - lowest)
        lowest = min(lowest, price)
    return profit