from flask import Blueprint, jsonify, request, current_app
from shapegrid import get_session
from shapegrid.services.leaderboard import top_scores

game_api = Blueprint('game_api', __name__)


@game_api.route('/leaderboard', methods=['GET'])
def get_leaderboard():
    """
    Returns the top scores, highest first.
    """
    size = int(current_app.config.get('LEADERBOARD_SIZE', 10))
    limit = request.args.get('limit', type=int)
    if limit is None or limit < 1 or limit > size:
        limit = size
    return jsonify(top_scores(limit))


@game_api.route('/game/state', methods=['GET'])
def get_game_state():
    """
    Returns a snapshot of the current shared game.
    """
    return jsonify(get_session().state.to_dict())
