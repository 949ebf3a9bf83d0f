"""
Double elimination bracket structure.

In double elimination:
- Players must lose twice to be eliminated
- Winners Bracket: Players that haven't lost yet
- Losers Bracket: Players that have lost once
- Finals: Winners bracket champion vs Losers bracket champion
- Grand Finals (reset): Only played if the losers bracket champion wins the Finals

The bracket always starts at the round of 16. Fields smaller than 16 are
padded with byes: a round-1 match with one player is completed at once, a
round-1 match with no players is skipped and produces neither a winner nor
a loser. Only round 1 is filled here; later slots are filled by whoever
records results, using the routing in advancement.py.
"""
import logging
import math
from collections import OrderedDict
from typing import Dict, List, Optional

from .exceptions import InvalidParticipantCountError
from .models import (
    Match, WINNERS, LOSERS, FINALS, GRAND_FINALS, PENDING, COMPLETED, SKIPPED
)
from .seeding import generate_seed_order

logger = logging.getLogger(__name__)

DOUBLE_ELIMINATION_BRACKET_SIZE = 16
MIN_PARTICIPANTS = 2
MAX_DOUBLE_ELIMINATION_PARTICIPANTS = 16


def get_losers_round_name(round_num: int, total_losers_rounds: int) -> str:
    """Get the name for a losers bracket round (1-indexed)."""
    rounds_from_end = total_losers_rounds - round_num
    if rounds_from_end == 0:
        return "Losers Final"
    elif rounds_from_end == 1:
        return "Losers Semifinal"
    else:
        return f"Losers Round {round_num}"


def get_winners_round_name(round_num: int, bracket_size: int) -> str:
    """Get the name for a winners bracket round (1-indexed)."""
    players_in_round = bracket_size // (2 ** (round_num - 1))
    if players_in_round == 2:
        return "Winners Final"
    elif players_in_round == 4:
        return "Winners Semifinal"
    elif players_in_round == 8:
        return "Winners Quarterfinal"
    else:
        return f"Winners Round of {players_in_round}"


def calculate_winners_bracket_rounds(bracket_size: int) -> int:
    if bracket_size < 2:
        return 0
    return int(math.log2(bracket_size))


def calculate_losers_bracket_rounds(bracket_size: int) -> int:
    """
    Calculate number of rounds in losers bracket.
    For a winners bracket of N slots (power of 2):
    - Winners bracket has log2(N) rounds
    - Losers bracket has 2 * (log2(N) - 1) rounds
    """
    if bracket_size < 2:
        return 0
    return 2 * (calculate_winners_bracket_rounds(bracket_size) - 1)


def calculate_wb_matches_per_round(bracket_size: int, round_num: int) -> int:
    return bracket_size // (2 ** round_num)


def calculate_lb_matches_per_round(bracket_size: int, round_num: int) -> int:
    """
    Matches in a losers bracket round: max(1, bracket_size / 2^floor((round+3)/2)).

    Every other round halves: for 16 slots the rounds hold 4, 4, 2, 2, 1, 1.
    """
    return max(1, bracket_size // (2 ** ((round_num + 3) // 2)))


def validate_double_elimination_participant_count(participant_count: int) -> None:
    if participant_count < MIN_PARTICIPANTS:
        raise InvalidParticipantCountError("at least 2 participants required")
    if participant_count > MAX_DOUBLE_ELIMINATION_PARTICIPANTS:
        raise InvalidParticipantCountError("double elimination supports at most 16 participants")


def resolve_first_round_slot(position: int, seed_a: int, seed_b: int, participant_count: int) -> Match:
    """
    Build a winners round 1 match from two seeds.

    Seeds above participant_count are absent. One absent seed makes a bye
    (completed, present player wins); two absent seeds make a double bye
    (skipped, no winner).
    """
    player_a = seed_a - 1 if seed_a <= participant_count else None
    player_b = seed_b - 1 if seed_b <= participant_count else None

    if player_a is None and player_b is None:
        status, winner_id = SKIPPED, None
    elif player_a is None or player_b is None:
        status = COMPLETED
        winner_id = player_a if player_a is not None else player_b
    else:
        status, winner_id = PENDING, None

    return Match(1, position, WINNERS, player_a, player_b, status, winner_id)


def generate_double_elimination_structure(participant_count: int) -> Dict:
    """
    Generate the complete double elimination skeleton.

    Returns dict with:
    - 'matches': list of Match (winners, losers, finals, grand_finals)
    - 'bracket_size': always 16
    - 'winners_rounds': 4
    - 'losers_rounds': 6
    - 'wb_match_count', 'lb_match_count', 'total_match_count'
    """
    validate_double_elimination_participant_count(participant_count)

    bracket_size = DOUBLE_ELIMINATION_BRACKET_SIZE
    seed_order = generate_seed_order(bracket_size)
    winners_rounds = calculate_winners_bracket_rounds(bracket_size)
    losers_rounds = calculate_losers_bracket_rounds(bracket_size)

    matches = []
    wb_match_count = 0
    lb_match_count = 0

    # Winners bracket
    for round_num in range(1, winners_rounds + 1):
        for position in range(1, calculate_wb_matches_per_round(bracket_size, round_num) + 1):
            if round_num == 1:
                idx = (position - 1) * 2
                match = resolve_first_round_slot(position, seed_order[idx], seed_order[idx + 1], participant_count)
            else:
                match = Match(round_num, position, WINNERS)
            matches.append(match)
            wb_match_count += 1

    # Losers bracket
    for round_num in range(1, losers_rounds + 1):
        for position in range(1, calculate_lb_matches_per_round(bracket_size, round_num) + 1):
            matches.append(Match(round_num, position, LOSERS))
            lb_match_count += 1

    matches.append(Match(1, 1, FINALS))
    matches.append(Match(2, 1, GRAND_FINALS))

    total_match_count = wb_match_count + lb_match_count + 2

    logger.debug(
        "Double elimination for %d participants: %d WB, %d LB, %d total matches",
        participant_count, wb_match_count, lb_match_count, total_match_count
    )

    return {
        'matches': matches,
        'bracket_size': bracket_size,
        'winners_rounds': winners_rounds,
        'losers_rounds': losers_rounds,
        'wb_match_count': wb_match_count,
        'lb_match_count': lb_match_count,
        'total_match_count': total_match_count
    }


def group_matches_by_round(matches: List[Match], bracket_type: str) -> "OrderedDict[int, List[Match]]":
    """Group one bracket's matches by round number, each round sorted by position."""
    rounds = OrderedDict()
    selected = [m for m in matches if m.bracket_type == bracket_type]
    for match in sorted(selected, key=lambda m: (m.round, m.position)):
        rounds.setdefault(match.round, []).append(match)
    return rounds


def find_match(structure: Dict, bracket_type: str, round_num: int, position: int) -> Optional[Match]:
    for match in structure['matches']:
        if match.bracket_type == bracket_type and match.round == round_num and match.position == position:
            return match
    return None
