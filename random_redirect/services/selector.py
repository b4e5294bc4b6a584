"""
Weighted Selector

Picks one URL from a list of (url, weight) pairs with a single random
draw against a cumulative distribution.

Algorithm:
- Only entries with a positive weight take part; their weights are
  normalized to percentages of the positive total
- Percentages are accumulated in list order into thresholds
- A draw r in [0, 100] (two decimal places) selects the first entry
  whose threshold is >= r
- If rounding leaves r above the last threshold, the last positive
  entry is returned
- If no entry has a positive weight, every entry is equally likely

Entries with weight 0 are never picked while any other entry has a
positive weight.
"""

import random
from collections.abc import Sequence
from typing import Optional

# Draw resolution: integer in [0, DRAW_SCALE] divided by 100 gives [0, 100]
DRAW_SCALE = 10000

# SystemRandom has no shared state to corrupt across threads
_system_random = random.SystemRandom()


def build_distribution(
    entries: Sequence[tuple[str, float]],
) -> list[tuple[int, float]]:
    """
    Build the cumulative lookup over positive-weight entries.

    Args:
        entries: (url, weight) pairs

    Returns:
        (index, cumulative_percentage) pairs in ascending index order.
        Empty when no entry has a positive weight.

    Example:
        build_distribution([("a", 70), ("b", 0), ("c", 30)])
        -> [(0, 70.0), (2, 100.0)]
    """
    positive = [
        (index, weight)
        for index, (_, weight) in enumerate(entries)
        if weight > 0
    ]
    if not positive:
        return []

    # Scale by the largest weight so the sum of huge finite weights stays finite
    largest = max(weight for _, weight in positive)
    total = sum(weight / largest for _, weight in positive)
    cumulative = 0.0
    distribution = []
    for index, weight in positive:
        cumulative += (weight / largest / total) * 100.0
        distribution.append((index, cumulative))
    return distribution


def locate(distribution: Sequence[tuple[int, float]], draw: float) -> int:
    """
    Return the entry index selected by a draw.

    Falls back to the last index in the distribution when the draw
    exceeds every threshold (accumulated floating-point error).
    """
    for index, threshold in distribution:
        if draw <= threshold:
            return index
    return distribution[-1][0]


def select_url(
    entries: Sequence[tuple[str, float]],
    rng: Optional[random.Random] = None,
) -> str:
    """
    Select one URL according to the entry weights.

    Args:
        entries: Non-empty sequence of (url, weight) pairs
        rng: Random source (defaults to a shared SystemRandom)

    Returns:
        The selected URL

    Raises:
        ValueError: If entries is empty
    """
    if not entries:
        raise ValueError("Cannot select from an empty entry list")

    rng = rng or _system_random

    distribution = build_distribution(entries)
    if not distribution:
        return rng.choice(entries)[0]

    draw = rng.randint(0, DRAW_SCALE) / 100.0
    return entries[locate(distribution, draw)][0]
