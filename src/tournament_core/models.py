WINNERS = 'winners'
LOSERS = 'losers'
FINALS = 'finals'
GRAND_FINALS = 'grand_finals'
BRACKET_TYPES = (WINNERS, LOSERS, FINALS, GRAND_FINALS)

PENDING = 'pending'
COMPLETED = 'completed'
SKIPPED = 'skipped'

# Derived match outcomes
OUTCOME_BYE = 'bye'
OUTCOME_DOUBLE_BYE = 'double_bye'
OUTCOME_DECIDED = 'decided'
OUTCOME_PENDING = 'pending'


class Match:
    def __init__(self, round, position, bracket_type, player_a=None, player_b=None,
                 status=PENDING, winner_id=None):
        self.round = round
        self.position = position
        self.bracket_type = bracket_type
        self.player_a = player_a
        self.player_b = player_b
        self.status = status
        self.winner_id = winner_id

    @property
    def players(self):
        return [p for p in (self.player_a, self.player_b) if p is not None]

    @property
    def outcome(self):
        """Tag the match as bye, double_bye, decided or pending."""
        present = len(self.players)
        if self.status == SKIPPED and present == 0:
            return OUTCOME_DOUBLE_BYE
        if self.status == COMPLETED and present == 1:
            return OUTCOME_BYE
        if self.status == COMPLETED and present == 2 and self.winner_id is not None:
            return OUTCOME_DECIDED
        return OUTCOME_PENDING

    @property
    def is_bye(self):
        return self.outcome in (OUTCOME_BYE, OUTCOME_DOUBLE_BYE)

    def to_dict(self):
        return {
            'round': self.round,
            'position': self.position,
            'bracket_type': self.bracket_type,
            'player_a': self.player_a,
            'player_b': self.player_b,
            'status': self.status,
            'winner_id': self.winner_id,
        }

    def __eq__(self, other):
        if not isinstance(other, Match):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return (f"Match(bracket_type={self.bracket_type}, round={self.round}, position={self.position}, "
                f"player_a={self.player_a}, player_b={self.player_b}, status={self.status}, "
                f"winner_id={self.winner_id})")
