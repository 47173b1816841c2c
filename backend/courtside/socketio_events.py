from flask import current_app, request
from flask_socketio import emit

from courtside import courts, socketio
from courtside.exceptions import CourtError, InvalidPayload


def _get_sid() -> str:
    # request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _payload(data):
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidPayload('payload must be a JSON object')
    return data


def _secret_from(data):
    return data.get('secret', data.get('otp'))


def _reject(event: str, exc: CourtError) -> None:
    current_app.logger.info(f"[rejected] sid={_get_sid()} error={exc.code} message={exc}")
    emit(event, exc.to_dict())


def handle_connect(auth=None):
    current_app.logger.info(f"[connect] sid={_get_sid()}")
    emit('connected', {'message': f'Connected to {request.namespace}'})


def handle_disconnect(reason=None):
    # Socket.IO drops the client from its court rooms; court state is untouched
    current_app.logger.info(f"[disconnect] sid={_get_sid()}")


def handle_create_court(data=None):
    try:
        data = _payload(data)
        court = courts.create_court(data.get('courtId'), _secret_from(data), data.get('referees'))
    except CourtError as exc:
        _reject('error', exc)
        return
    emit('courtCreated', court.to_dict())


def handle_referee_joined(data=None):
    try:
        data = _payload(data)
        binding = courts.join_as_referee(data.get('referee'), data.get('court'), _secret_from(data), sid=_get_sid())
    except CourtError as exc:
        _reject('joinError', exc)
        return
    emit('joinSuccess', binding.to_dict())


def handle_join_scoreboard(data=None):
    try:
        data = _payload(data)
        # The gate delivers the initial snapshot itself
        courts.join_as_viewer(data.get('court'), sid=_get_sid())
    except CourtError as exc:
        _reject('joinError', exc)


def handle_referee_score(data=None):
    try:
        data = _payload(data)
        courts.submit_score(data.get('referee'), data.get('court'), data.get('player'), data.get('points'))
    except CourtError as exc:
        _reject('error', exc)


def register_socketio_handlers(namespace: str = '/ws') -> None:
    """Register Socket.IO event handlers on ``namespace``.

    Event names match the referee pads and scoreboard displays already in
    use: createCourt, refereeJoined, joinScoreboard and refereeScore.
    """
    socketio.on_event('connect', handle_connect, namespace=namespace)
    socketio.on_event('disconnect', handle_disconnect, namespace=namespace)
    socketio.on_event('createCourt', handle_create_court, namespace=namespace)
    socketio.on_event('refereeJoined', handle_referee_joined, namespace=namespace)
    socketio.on_event('joinScoreboard', handle_join_scoreboard, namespace=namespace)
    socketio.on_event('refereeScore', handle_referee_score, namespace=namespace)
