from flask import Blueprint, jsonify, request, current_app
from courtside import courts
from courtside.exceptions import CourtError, InvalidPayload

courts_api = Blueprint('courts', __name__)


def _payload():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidPayload('request body must be a JSON object')
    return data


def _secret_from(data):
    # Older referee clients call the secret an OTP
    return data.get('secret', data.get('otp'))


@courts_api.errorhandler(CourtError)
def handle_court_error(exc):
    current_app.logger.info(f"[rejected] {request.method} {request.path} error={exc.code} message={exc}")
    return jsonify(exc.to_dict()), exc.status_code


@courts_api.route('/courts', methods=['GET'])
def list_courts():
    return jsonify([court.to_dict() for court in courts.list_courts()])


@courts_api.route('/courts', methods=['POST'])
def create_court():
    data = _payload()
    court = courts.create_court(data.get('courtId'), _secret_from(data), data.get('referees'))
    return jsonify(court.to_dict()), 201


@courts_api.route('/courts/<string:court_id>', methods=['GET'])
def get_court(court_id):
    return jsonify(courts.get_court(court_id).to_dict())


@courts_api.route('/courts/<string:court_id>/scoreboard', methods=['GET'])
def get_scoreboard(court_id):
    # Plain HTTP has no push stream: a viewer join without subscription
    return jsonify(courts.join_as_viewer(court_id))


@courts_api.route('/courts/<string:court_id>/referees/join', methods=['POST'])
def join_referee(court_id):
    data = _payload()
    binding = courts.join_as_referee(data.get('referee'), court_id, _secret_from(data))
    return jsonify(binding.to_dict())


@courts_api.route('/courts/<string:court_id>/scores', methods=['POST'])
def submit_score(court_id):
    data = _payload()
    snapshot = courts.submit_score(data.get('referee'), court_id, data.get('player'), data.get('points'))
    return jsonify(snapshot)


@courts_api.route('/refereeScore', methods=['POST'])
def submit_score_legacy():
    """Flat-body variant used by referee pads that post the court in the body."""
    data = _payload()
    snapshot = courts.submit_score(data.get('referee'), data.get('court'), data.get('player'), data.get('points'))
    return jsonify({'success': True, 'scoreboard': snapshot})
