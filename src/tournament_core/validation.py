"""
Structural checks for a generated double elimination bracket.

Nothing here raises on a bad structure: problems are returned as a list of
messages so callers and tests can assert on them directly.
"""
from typing import Dict

from .double_elimination import calculate_lb_matches_per_round, calculate_wb_matches_per_round
from .models import WINNERS, LOSERS, FINALS, GRAND_FINALS


def _count_by_round(matches, bracket_type):
    counts = {}
    for match in matches:
        if match.bracket_type == bracket_type:
            counts[match.round] = counts.get(match.round, 0) + 1
    return counts


def validate_double_elimination_structure(structure: Dict) -> Dict:
    """
    Validate double elimination bracket structure.
    Checks match counts per bracket and per round, plus the single finals
    and grand finals matches.

    Returns {'valid': bool, 'errors': [str, ...]}.
    """
    errors = []
    matches = structure['matches']
    bracket_size = structure['bracket_size']
    winners_rounds = structure['winners_rounds']
    losers_rounds = structure['losers_rounds']

    wb_counts = _count_by_round(matches, WINNERS)
    expected_wb = {r: calculate_wb_matches_per_round(bracket_size, r) for r in range(1, winners_rounds + 1)}
    if sum(wb_counts.values()) != sum(expected_wb.values()):
        errors.append(f"WB: expected {sum(expected_wb.values())} matches, got {sum(wb_counts.values())}")
    for round_num in sorted(set(expected_wb) | set(wb_counts)):
        expected, actual = expected_wb.get(round_num, 0), wb_counts.get(round_num, 0)
        if expected != actual:
            errors.append(f"WB round {round_num}: expected {expected} matches, got {actual}")

    lb_counts = _count_by_round(matches, LOSERS)
    expected_lb = {r: calculate_lb_matches_per_round(bracket_size, r) for r in range(1, losers_rounds + 1)}
    if sum(lb_counts.values()) != sum(expected_lb.values()):
        errors.append(f"LB: expected {sum(expected_lb.values())} matches, got {sum(lb_counts.values())}")
    for round_num in sorted(set(expected_lb) | set(lb_counts)):
        expected, actual = expected_lb.get(round_num, 0), lb_counts.get(round_num, 0)
        if expected != actual:
            errors.append(f"LB round {round_num}: expected {expected} matches, got {actual}")

    finals = [m for m in matches if m.bracket_type == FINALS]
    if len(finals) != 1:
        errors.append(f"Finals: expected 1, got {len(finals)}")

    grand_finals = [m for m in matches if m.bracket_type == GRAND_FINALS]
    if len(grand_finals) != 1:
        errors.append(f"Grand Finals: expected 1, got {len(grand_finals)}")

    return {'valid': len(errors) == 0, 'errors': errors}
