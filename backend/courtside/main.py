from datetime import datetime, timezone

from flask import Blueprint, jsonify

main = Blueprint('main', __name__)


@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the Courtside scoring server!'})


@main.route('/api/test')
def health():
    return jsonify({
        'message': 'Server is running',
        'time': datetime.now(timezone.utc).isoformat(),
    })
