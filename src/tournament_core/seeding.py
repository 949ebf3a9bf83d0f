"""
Seed placement for power-of-two brackets.
"""
from typing import Any, Callable, List, Optional, Tuple

from .exceptions import UnsupportedBracketSizeError


# Bracket sizes with a known balanced order
SUPPORTED_BRACKET_SIZES = (2, 4, 8, 16)


def generate_seed_order(bracket_size: int) -> List[int]:
    """
    Generate the standard tournament bracket order.
    This ensures that if all higher seeds win, they meet in the proper rounds.

    For 8 slots: [1, 8, 4, 5, 2, 7, 3, 6]
    This gives matchups: 1v8, 4v5, 2v7, 3v6
    Winners: 1v4 side, 2v3 side
    Final: 1v2 (if chalk)

    Raises UnsupportedBracketSizeError for any size outside
    SUPPORTED_BRACKET_SIZES.
    """
    if type(bracket_size) is not int or bracket_size not in SUPPORTED_BRACKET_SIZES:
        raise UnsupportedBracketSizeError(
            f"no balanced seed order for bracket size {bracket_size!r}; supported sizes are 2, 4, 8 and 16"
        )
    return _bracket_order(bracket_size)


def _bracket_order(bracket_size: int) -> List[int]:
    if bracket_size == 2:
        return [1, 2]

    half_size = bracket_size // 2
    upper_half = _bracket_order(half_size)

    # Create lower half as complement
    lower_half = [bracket_size + 1 - seed for seed in upper_half]

    # Interleave: pair each upper seed with its complement
    result = []
    for u, l in zip(upper_half, lower_half):
        result.extend([u, l])

    return result


def assign_seeds(participants: List[Any], key: Optional[Callable[[Any], Any]] = None) -> List[Tuple[Any, int]]:
    """
    Assign seeds 1..n to participants.

    With a key (e.g. rating at registration) participants are ordered by
    descending key; ties keep their registration order. Without a key the
    given order is the seeding order.

    Returns list of (participant, seed) tuples.
    """
    ordered = list(participants)
    if key is not None:
        ordered = sorted(ordered, key=key, reverse=True)
        # sorted(reverse=True) keeps ties stable, so registration order survives
    return [(participant, seed) for seed, participant in enumerate(ordered, start=1)]
