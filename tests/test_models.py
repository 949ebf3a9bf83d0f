"""
Unit tests for the Match model.
"""
import pytest

from tournament_core.models import Match


class TestMatch:
    """Tests for the Match model."""

    def test_defaults(self):
        """A new match is empty and pending."""
        match = Match(round=2, position=3, bracket_type='losers')
        assert match.player_a is None
        assert match.player_b is None
        assert match.status == 'pending'
        assert match.winner_id is None
        assert match.players == []

    def test_outcome_double_bye(self):
        """Skipped with no players is a double bye."""
        assert Match(1, 2, 'winners', status='skipped').outcome == 'double_bye'

    def test_outcome_bye(self):
        """Completed with one player is a bye."""
        match = Match(1, 1, 'winners', player_a=0, status='completed', winner_id=0)
        assert match.outcome == 'bye'
        assert match.is_bye

    def test_outcome_decided(self):
        """Completed with two players and a winner is decided."""
        match = Match(1, 1, 'winners', player_a=0, player_b=15, status='completed', winner_id=15)
        assert match.outcome == 'decided'
        assert not match.is_bye

    def test_outcome_pending(self):
        """Anything unplayed is pending."""
        assert Match(1, 1, 'winners', player_a=0, player_b=15).outcome == 'pending'
        assert Match(3, 1, 'losers').outcome == 'pending'

    def test_to_dict(self):
        """to_dict carries every field."""
        match = Match(1, 5, 'winners', player_a=1, status='completed', winner_id=1)
        assert match.to_dict() == {
            'round': 1,
            'position': 5,
            'bracket_type': 'winners',
            'player_a': 1,
            'player_b': None,
            'status': 'completed',
            'winner_id': 1,
        }

    def test_equality(self):
        """Matches compare by their fields."""
        assert Match(1, 1, 'finals') == Match(1, 1, 'finals')
        assert Match(1, 1, 'finals') != Match(2, 1, 'grand_finals')

    def test_repr(self):
        """repr names the bracket and round."""
        repr_str = repr(Match(2, 1, 'grand_finals'))
        assert "grand_finals" in repr_str
        assert "round=2" in repr_str
