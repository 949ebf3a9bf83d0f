import os
import sys
import yaml
from tournament_core.exceptions import InvalidTournamentFileError, TournamentError
from tournament_core.formats import ROUND_ROBIN, DOUBLE_ELIMINATION, generate_schedule, get_tournament_format_name
from tournament_core.models import WINNERS
from tournament_core.seeding import assign_seeds
from tournament_core.validation import validate_double_elimination_structure
from tournament_core.round_robin import validate_round_robin_completeness


def load_tournament(file_path):
    """
    Load a tournament file.

    Expected YAML:
        format: round_robin | double_elimination
        participants: [name, ...]            # already in seeding order
        # or
        participants: {name: rating, ...}    # seeded by rating, highest first

    Returns {'format': str, 'participants': [name, ...]} in seeding order.
    """
    with open(file_path, mode='r', encoding='utf-8') as file:
        data = yaml.safe_load(file) or {}

    if not isinstance(data, dict):
        raise InvalidTournamentFileError(f"{file_path}: expected a mapping with 'format' and 'participants'")

    participants = data.get('participants') or []
    if isinstance(participants, dict):
        for name, rating in participants.items():
            if rating is not None and (isinstance(rating, bool) or not isinstance(rating, (int, float))):
                raise InvalidTournamentFileError(f"{file_path}: rating for {name} must be a number, got {rating!r}")
        # Unrated participants sort as 0
        seeded = assign_seeds(list(participants.items()), key=lambda item: item[1] or 0)
        names = [str(name) for (name, _), _ in seeded]
    elif isinstance(participants, list):
        names = [str(name) for name in participants]
    else:
        raise InvalidTournamentFileError(f"{file_path}: participants must be a list or a name -> rating map")

    return {
        'format': data.get('format', ROUND_ROBIN),
        'participants': names
    }


def print_round_robin(schedule, names):
    for round_idx, round_matches in enumerate(schedule['rounds']):
        if round_idx > 0:
            print()
        print(f"# Round {round_idx + 1}")
        for pairing in round_matches:
            if pairing['is_bye']:
                print(f"{names[pairing['a']]} (bye)")
            else:
                print(f"{names[pairing['a']]} vs {names[pairing['b']]}")
    validation = validate_round_robin_completeness(len(names), schedule['rounds'])
    print()
    print(f"Complete: {validation['valid']}")


def print_double_elimination(structure, names):
    def label(player):
        return names[player] if player is not None else 'BYE'

    print(f"# Winners Round of {structure['bracket_size']}")
    for match in structure['matches']:
        if match.bracket_type != WINNERS or match.round != 1:
            continue
        line = f"M{match.position}: {label(match.player_a)} vs {label(match.player_b)}"
        if match.status != 'pending':
            line += f" [{match.status}]"
        print(line)
    validation = validate_double_elimination_structure(structure)
    print()
    print(f"Matches: {structure['total_match_count']} "
          f"(WB {structure['wb_match_count']}, LB {structure['lb_match_count']}, Finals 2)")
    print(f"Valid: {validation['valid']}")
    for error in validation['errors']:
        print(f"  {error}")


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv

    script_dir = os.path.dirname(__file__)
    base_dir = os.path.dirname(script_dir)

    # Use command line argument if provided, otherwise use default path
    tournament_file = argv[0] if argv else os.path.join(base_dir, 'data', 'tournament.yaml')

    try:
        tournament = load_tournament(tournament_file)
        names = tournament['participants']
        schedule = generate_schedule(tournament['format'], len(names))
    except (OSError, yaml.YAMLError, TournamentError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"{get_tournament_format_name(tournament['format'])} - {len(names)} participants")
    print()
    if tournament['format'] == DOUBLE_ELIMINATION:
        print_double_elimination(schedule, names)
    else:
        print_round_robin(schedule, names)
    return 0


if __name__ == '__main__':
    sys.exit(main())
