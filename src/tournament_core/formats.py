from .double_elimination import generate_double_elimination_structure
from .exceptions import UnknownFormatError
from .round_robin import generate_round_robin_pairings

ROUND_ROBIN = 'round_robin'
DOUBLE_ELIMINATION = 'double_elimination'

FORMAT_NAMES = {
    ROUND_ROBIN: 'Round Robin',
    DOUBLE_ELIMINATION: 'Double Elimination',
}


class TournamentFormat:
    def __init__(self, participant_count):
        self.participant_count = participant_count

    def round_robin(self):
        # Every participant plays every other participant once
        return generate_round_robin_pairings(self.participant_count)

    def double_elimination(self):
        # Winners/losers bracket skeleton, round 1 byes resolved
        return generate_double_elimination_structure(self.participant_count)

    def generate(self, format_name):
        if format_name == ROUND_ROBIN:
            return self.round_robin()
        if format_name == DOUBLE_ELIMINATION:
            return self.double_elimination()
        raise UnknownFormatError(f"unknown tournament format: {format_name!r}")

    def __repr__(self):
        return f"TournamentFormat(participant_count={self.participant_count})"


def generate_schedule(format_name, participant_count):
    return TournamentFormat(participant_count).generate(format_name)


def get_tournament_format_name(format_name):
    return FORMAT_NAMES.get(format_name, format_name)
