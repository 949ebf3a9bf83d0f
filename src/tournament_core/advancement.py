"""
Where results go in a double elimination bracket.

Pure functions: given a match position they compute the slot its winner
advances to and the slot its loser drops to. Nothing here writes a result;
the caller applies the returned target.

Routing summary for a 16 slot bracket:
- WB round r, position p -> WB round r+1, position ceil(p/2), slot a/b
- WB final winner        -> Finals, slot a
- WB round 1 losers      -> LB round 1 (cross-over, slots a and b)
- WB round r>1 losers    -> LB round 2(r-1), slot b (mirrored position)
- LB odd round winners   -> LB next round, same position, slot a
- LB even round winners  -> LB next round, position ceil(p/2), slot a/b
- LB final winner        -> Finals, slot b
"""
import math
from typing import Dict, List, Tuple

from .double_elimination import (
    DOUBLE_ELIMINATION_BRACKET_SIZE,
    calculate_lb_matches_per_round,
    calculate_losers_bracket_rounds,
    calculate_wb_matches_per_round,
    calculate_winners_bracket_rounds,
    resolve_first_round_slot,
    validate_double_elimination_participant_count,
)
from .exceptions import TournamentError
from .models import WINNERS, LOSERS, FINALS
from .seeding import generate_seed_order

SLOT_A = 'a'
SLOT_B = 'b'


def calculate_wb_advancement(position: int) -> Dict:
    """
    Calculate WB advancement position.
    From WB round R, position P -> round R+1, position ceil(P/2), slot a if P is odd, b if even.
    """
    return {
        'next_position': math.ceil(position / 2),
        'slot': SLOT_A if position % 2 == 1 else SLOT_B
    }


def get_wb_feeder_positions(position: int) -> Tuple[int, int]:
    """The two previous-round positions whose winners meet at this position."""
    return (position * 2 - 1, position * 2)


def wb_to_lb_round_mapping(wb_round: int) -> int:
    """WB R1 -> LB R1, WB Rn -> LB R(2n-2) for n>1."""
    if wb_round == 1:
        return 1
    return 2 * (wb_round - 1)


def calculate_cross_over_position(wb_position: int, wb_round: int, num_lb_matches: int) -> Dict:
    """
    Calculate the LB slot for a player dropping out of the winners bracket.

    Round 1 losers from the upper half of the bracket take slot a in order,
    lower half losers take slot b in reverse order, so the two players of a
    round 1 match never meet again straight away. Later rounds always fill
    slot b (slot a holds the LB survivor) at a mirrored position.
    """
    if wb_round == 1:
        matches_in_wb_r1 = num_lb_matches * 2
        half_wb_matches = matches_in_wb_r1 // 2
        is_upper_half = wb_position <= half_wb_matches

        if is_upper_half:
            target_position = wb_position
        else:
            target_position = matches_in_wb_r1 - wb_position + 1

        return {'target_position': target_position, 'slot': SLOT_A if is_upper_half else SLOT_B}

    # LB rounds fed by WB R2+ hold as many matches as the feeding WB round
    matches_in_this_wb_round = num_lb_matches
    half_matches = math.ceil(matches_in_this_wb_round / 2)

    if matches_in_this_wb_round == 1:
        target_position = 1
    elif wb_position <= half_matches:
        target_position = num_lb_matches - wb_position + 1
    else:
        target_position = matches_in_this_wb_round - wb_position + 1

    return {'target_position': target_position, 'slot': SLOT_B}


def calculate_lb_advancement(position: int, current_round: int) -> Dict:
    """
    Calculate LB advancement position.
    Even rounds are followed by a halving round, odd rounds by a round of
    the same size where WB droppers join.
    """
    if current_round % 2 == 0:
        return {'next_position': math.ceil(position / 2)}
    return {'next_position': position}


def _check_position(bracket: str, round_num: int, position: int, matches_in_round: int) -> None:
    if position < 1 or position > matches_in_round:
        raise TournamentError(
            f"{bracket} round {round_num} has {matches_in_round} matches, no position {position}"
        )


def route_wb_winner(wb_round: int, position: int,
                    bracket_size: int = DOUBLE_ELIMINATION_BRACKET_SIZE) -> Dict:
    """Target slot for the winner of a winners bracket match."""
    winners_rounds = calculate_winners_bracket_rounds(bracket_size)
    if wb_round < 1 or wb_round > winners_rounds:
        raise TournamentError(f"winners bracket has no round {wb_round}")
    _check_position('WB', wb_round, position, calculate_wb_matches_per_round(bracket_size, wb_round))

    if wb_round == winners_rounds:
        return {'bracket_type': FINALS, 'round': 1, 'position': 1, 'slot': SLOT_A}

    advancement = calculate_wb_advancement(position)
    return {
        'bracket_type': WINNERS,
        'round': wb_round + 1,
        'position': advancement['next_position'],
        'slot': advancement['slot']
    }


def route_wb_loser(wb_round: int, position: int,
                   bracket_size: int = DOUBLE_ELIMINATION_BRACKET_SIZE) -> Dict:
    """Target slot in the losers bracket for the loser of a winners bracket match."""
    winners_rounds = calculate_winners_bracket_rounds(bracket_size)
    if wb_round < 1 or wb_round > winners_rounds:
        raise TournamentError(f"winners bracket has no round {wb_round}")
    _check_position('WB', wb_round, position, calculate_wb_matches_per_round(bracket_size, wb_round))

    lb_round = wb_to_lb_round_mapping(wb_round)
    cross_over = calculate_cross_over_position(
        position, wb_round, calculate_lb_matches_per_round(bracket_size, lb_round)
    )
    return {
        'bracket_type': LOSERS,
        'round': lb_round,
        'position': cross_over['target_position'],
        'slot': cross_over['slot']
    }


def route_lb_winner(lb_round: int, position: int,
                    bracket_size: int = DOUBLE_ELIMINATION_BRACKET_SIZE) -> Dict:
    """Target slot for the winner of a losers bracket match. LB losers are eliminated."""
    losers_rounds = calculate_losers_bracket_rounds(bracket_size)
    if lb_round < 1 or lb_round > losers_rounds:
        raise TournamentError(f"losers bracket has no round {lb_round}")
    _check_position('LB', lb_round, position, calculate_lb_matches_per_round(bracket_size, lb_round))

    if lb_round == losers_rounds:
        return {'bracket_type': FINALS, 'round': 1, 'position': 1, 'slot': SLOT_B}

    next_position = calculate_lb_advancement(position, lb_round)['next_position']
    if lb_round % 2 == 1:
        slot = SLOT_A
    else:
        slot = SLOT_A if position % 2 == 1 else SLOT_B
    return {'bracket_type': LOSERS, 'round': lb_round + 1, 'position': next_position, 'slot': slot}


def simulate_wb_r1_byes(participant_count: int) -> Dict:
    """
    Replay winners round 1 bye processing without touching any stored bracket.

    Returns dict with:
    - 'wb_r1_results': list of {position, player_a, player_b, winner_id, status}
    - 'wb_r2_slots': list of {position, player_a, player_b} after bye winners advance
    - 'lb_r1_slots': list of {position, player_a, player_b}

    Only matches with two players produce a loser for the losers bracket,
    and those have not been played yet, so the LB round 1 slots stay empty.
    """
    validate_double_elimination_participant_count(participant_count)

    bracket_size = DOUBLE_ELIMINATION_BRACKET_SIZE
    seed_order = generate_seed_order(bracket_size)

    wb_r1_results: List[Dict] = []
    wb_r2_slots = [
        {'position': pos, 'player_a': None, 'player_b': None}
        for pos in range(1, calculate_wb_matches_per_round(bracket_size, 2) + 1)
    ]

    for position in range(1, calculate_wb_matches_per_round(bracket_size, 1) + 1):
        idx = (position - 1) * 2
        match = resolve_first_round_slot(position, seed_order[idx], seed_order[idx + 1], participant_count)
        wb_r1_results.append({
            'position': position,
            'player_a': match.player_a,
            'player_b': match.player_b,
            'winner_id': match.winner_id,
            'status': match.status
        })

        if match.winner_id is not None:
            advancement = calculate_wb_advancement(position)
            wb_r2_slots[advancement['next_position'] - 1]['player_' + advancement['slot']] = match.winner_id

    lb_r1_slots = [
        {'position': pos, 'player_a': None, 'player_b': None}
        for pos in range(1, calculate_lb_matches_per_round(bracket_size, 1) + 1)
    ]

    return {'wb_r1_results': wb_r1_results, 'wb_r2_slots': wb_r2_slots, 'lb_r1_slots': lb_r1_slots}
