"""
Round-robin schedule generation using the circle method.

Every participant meets every other participant exactly once. With an odd
number of participants a phantom slot is added, and whoever is paired with
it sits out (a bye) for that round.
"""
import logging
from typing import Dict, List, Optional, Set, Tuple

from .exceptions import InvalidParticipantCountError
from .models import COMPLETED, PENDING

logger = logging.getLogger(__name__)

MIN_PARTICIPANTS = 2


def generate_round_robin_pairings(participant_count: int) -> Dict:
    """
    Generate round-robin pairings using the circle method rotation.

    Returns dict with:
    - 'rounds': list of rounds, each a list of {'a', 'b', 'is_bye'} dicts
      (a/b are 0-based participant indices, b is None for a bye)
    - 'total_matches': number of pairings including byes
    - 'total_rounds': number of rounds
    """
    n = participant_count
    if n < MIN_PARTICIPANTS:
        raise InvalidParticipantCountError("at least 2 participants required")

    has_odd_players = n % 2 == 1
    total_players = n + 1 if has_odd_players else n
    num_rounds = total_players - 1
    half_size = total_players // 2

    positions: List[Optional[int]] = list(range(n))
    if has_odd_players:
        positions.append(None)  # phantom slot

    rounds = []
    total_matches = 0

    for round_num in range(num_rounds):
        round_matches = []

        for i in range(half_size):
            player1 = positions[i]
            player2 = positions[total_players - 1 - i]

            if player1 is not None and player2 is not None:
                round_matches.append({'a': player1, 'b': player2, 'is_bye': False})
            else:
                player_with_bye = player1 if player1 is not None else player2
                round_matches.append({'a': player_with_bye, 'b': None, 'is_bye': True})
            total_matches += 1

        rounds.append(round_matches)

        # Fix position 0, rotate the others one step
        if round_num < num_rounds - 1:
            positions.insert(1, positions.pop())

    logger.debug("Round robin for %d participants: %d rounds, %d pairings", n, num_rounds, total_matches)

    return {
        'rounds': rounds,
        'total_matches': total_matches,
        'total_rounds': num_rounds
    }


def get_round_robin_pairings(rounds: List[List[Dict]]) -> Set[Tuple[int, int]]:
    """Get all unique real pairings as sorted (low, high) tuples."""
    pairings = set()
    for round_matches in rounds:
        for match in round_matches:
            if not match['is_bye']:
                pairings.add(tuple(sorted((match['a'], match['b']))))
    return pairings


def validate_round_robin_completeness(participant_count: int, rounds: List[List[Dict]]) -> Dict:
    """
    Check that every participant plays every other participant exactly once
    and nobody appears twice in the same round.

    Returns {'valid': True} or {'valid': False, 'reason': ...}.
    """
    expected_pairings = participant_count * (participant_count - 1) // 2
    real_matches = [m for r in rounds for m in r if not m['is_bye']]
    pairings = get_round_robin_pairings(rounds)

    if len(pairings) != expected_pairings:
        return {'valid': False, 'reason': f"Expected {expected_pairings} unique pairings, got {len(pairings)}"}
    if len(real_matches) != len(pairings):
        return {'valid': False, 'reason': f"{len(real_matches) - len(pairings)} pairing(s) scheduled more than once"}

    for round_idx, round_matches in enumerate(rounds):
        appearances = {}
        for match in round_matches:
            for player in (match['a'], match['b']):
                if player is not None:
                    appearances[player] = appearances.get(player, 0) + 1
        for player, count in appearances.items():
            if count > 1:
                return {'valid': False, 'reason': f"Player {player} appears {count} times in round {round_idx + 1}"}

    return {'valid': True}


def generate_round_robin_matches(participant_count: int) -> List[Dict]:
    """
    Flatten the round-robin schedule into match rows.

    Byes are resolved immediately: the row is completed with the sitting-out
    participant as winner. match_number runs across the whole schedule.
    """
    schedule = generate_round_robin_pairings(participant_count)
    matches = []

    for round_idx, round_matches in enumerate(schedule['rounds']):
        for pairing in round_matches:
            matches.append({
                'round_number': round_idx + 1,
                'match_number': len(matches) + 1,
                'player_a': pairing['a'],
                'player_b': pairing['b'],
                'status': COMPLETED if pairing['is_bye'] else PENDING,
                'winner_id': pairing['a'] if pairing['is_bye'] else None
            })

    return matches
