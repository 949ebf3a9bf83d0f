"""
Flask web application for bracket previews.

Read-only JSON views over tournament_core. Nothing is stored here: results
are recorded and persisted by the club application, which calls the routing
endpoint to learn which slot a result fills.
"""
import os
import yaml
from flask import Flask, request, jsonify
from tournament_core.advancement import route_wb_winner, route_wb_loser, route_lb_winner, simulate_wb_r1_byes
from tournament_core.exceptions import TournamentError
from tournament_core.formats import ROUND_ROBIN, generate_schedule, get_tournament_format_name
from tournament_core.models import WINNERS, LOSERS
from tournament_core.round_robin import generate_round_robin_pairings, validate_round_robin_completeness
from tournament_core.double_elimination import generate_double_elimination_structure
from tournament_core.validation import validate_double_elimination_structure
from generate_bracket import load_tournament

app = Flask(__name__)

BASE_DIR = os.path.dirname(os.path.dirname(__file__))
DATA_DIR = os.environ.get('TOURNAMENT_DATA_DIR', os.path.join(BASE_DIR, 'data'))
TOURNAMENT_FILE = os.path.join(DATA_DIR, 'tournament.yaml')


def _structure_to_json(structure):
    data = dict(structure)
    data['matches'] = [m.to_dict() for m in structure['matches']]
    return data


@app.errorhandler(TournamentError)
def handle_tournament_error(e):
    app.logger.warning(f'Rejected bracket request {request.path}: {e}')
    return jsonify({'success': False, 'error': str(e)}), 400


@app.route('/api/round-robin/<int:participants>', methods=['GET'])
def api_round_robin(participants):
    schedule = generate_round_robin_pairings(participants)
    validation = validate_round_robin_completeness(participants, schedule['rounds'])
    return jsonify({'success': True, 'schedule': schedule, 'validation': validation})


@app.route('/api/double-elimination/<int:participants>', methods=['GET'])
def api_double_elimination(participants):
    structure = generate_double_elimination_structure(participants)
    validation = validate_double_elimination_structure(structure)
    if not validation['valid']:
        app.logger.error(f'Generated bracket failed validation: {validation["errors"]}')
    return jsonify({'success': True, 'structure': _structure_to_json(structure), 'validation': validation})


@app.route('/api/double-elimination/<int:participants>/preview', methods=['GET'])
def api_double_elimination_preview(participants):
    return jsonify({'success': True, 'preview': simulate_wb_r1_byes(participants)})


@app.route('/api/schedule', methods=['GET'])
def api_schedule():
    format_name = request.args.get('format', ROUND_ROBIN)
    participants = request.args.get('participants', type=int)
    if participants is None:
        return jsonify({'success': False, 'error': 'participants must be an integer'}), 400

    schedule = generate_schedule(format_name, participants)
    if 'matches' in schedule:
        schedule = _structure_to_json(schedule)
    return jsonify({
        'success': True,
        'format': format_name,
        'format_name': get_tournament_format_name(format_name),
        'schedule': schedule
    })


@app.route('/api/tournament', methods=['GET'])
def api_tournament():
    """Schedule for the tournament file in DATA_DIR, with participant names."""
    if not os.path.exists(TOURNAMENT_FILE):
        return jsonify({'success': False, 'error': 'No tournament file found'}), 404

    try:
        tournament = load_tournament(TOURNAMENT_FILE)
        schedule = generate_schedule(tournament['format'], len(tournament['participants']))
    except (yaml.YAMLError, TournamentError) as e:
        app.logger.warning(f'Failed to parse {TOURNAMENT_FILE}: {e}')
        return jsonify({'success': False, 'error': str(e)}), 400

    if 'matches' in schedule:
        schedule = _structure_to_json(schedule)
    return jsonify({
        'success': True,
        'format': tournament['format'],
        'participants': tournament['participants'],
        'schedule': schedule
    })


@app.route('/api/double-elimination/route', methods=['POST'])
def api_route_result():
    """Where the winner and loser of a finished match go next."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    bracket_type = data.get('bracket_type')
    round_num = data.get('round')
    position = data.get('position')

    # JSON true/false decode to bool, a subclass of int
    if type(round_num) is not int or type(position) is not int:
        return jsonify({'success': False, 'error': 'round and position must be integers'}), 400

    if bracket_type == WINNERS:
        winner = route_wb_winner(round_num, position)
        loser = route_wb_loser(round_num, position)
    elif bracket_type == LOSERS:
        winner = route_lb_winner(round_num, position)
        loser = None  # second loss, eliminated
    else:
        return jsonify({'success': False, 'error': f'Cannot route matches of bracket type {bracket_type!r}'}), 400

    app.logger.debug(f'Routed {bracket_type} R{round_num}-M{position}: winner {winner}, loser {loser}')
    return jsonify({'success': True, 'winner': winner, 'loser': loser})


if __name__ == '__main__':
    app.run(debug=True)
