"""
Tests for the double elimination structure validator.
"""
import pytest

from tournament_core.models import Match
from tournament_core.double_elimination import generate_double_elimination_structure
from tournament_core.validation import validate_double_elimination_structure


class TestValidateStructure:
    """Tests for validate_double_elimination_structure."""

    @pytest.mark.parametrize("n", range(2, 17))
    def test_generated_structures_are_valid(self, n):
        """Every generated structure validates cleanly."""
        result = validate_double_elimination_structure(generate_double_elimination_structure(n))
        assert result == {'valid': True, 'errors': []}

    def test_missing_wb_match(self):
        """A missing WB match is reported in total and per round."""
        structure = generate_double_elimination_structure(8)
        structure['matches'] = [
            m for m in structure['matches']
            if not (m.bracket_type == 'winners' and m.round == 2 and m.position == 4)
        ]
        result = validate_double_elimination_structure(structure)
        assert result['valid'] is False
        assert "WB: expected 15 matches, got 14" in result['errors']
        assert "WB round 2: expected 4 matches, got 3" in result['errors']

    def test_extra_lb_match(self):
        """An extra LB match is reported in total and per round."""
        structure = generate_double_elimination_structure(8)
        structure['matches'].append(Match(5, 2, 'losers'))
        result = validate_double_elimination_structure(structure)
        assert result['valid'] is False
        assert "LB: expected 14 matches, got 15" in result['errors']
        assert "LB round 5: expected 1 matches, got 2" in result['errors']

    def test_misplaced_lb_match_reported_per_round(self):
        """Totals can match while individual rounds do not."""
        structure = generate_double_elimination_structure(8)
        moved = next(m for m in structure['matches'] if m.bracket_type == 'losers' and m.round == 1)
        moved.round = 7
        result = validate_double_elimination_structure(structure)
        assert result['valid'] is False
        assert "LB round 1: expected 4 matches, got 3" in result['errors']
        assert "LB round 7: expected 0 matches, got 1" in result['errors']
        assert not any(e.startswith("LB: ") for e in result['errors'])

    def test_duplicate_finals(self):
        """Two finals matches are reported."""
        structure = generate_double_elimination_structure(5)
        structure['matches'].append(Match(1, 1, 'finals'))
        result = validate_double_elimination_structure(structure)
        assert result['errors'] == ["Finals: expected 1, got 2"]

    def test_missing_grand_finals(self):
        """A missing reset match is reported."""
        structure = generate_double_elimination_structure(5)
        structure['matches'] = [m for m in structure['matches'] if m.bracket_type != 'grand_finals']
        result = validate_double_elimination_structure(structure)
        assert result['errors'] == ["Grand Finals: expected 1, got 0"]

    def test_does_not_raise_on_empty(self):
        """An empty match list is reported, not raised."""
        structure = generate_double_elimination_structure(5)
        structure['matches'] = []
        result = validate_double_elimination_structure(structure)
        assert result['valid'] is False
        assert len(result['errors']) > 4
