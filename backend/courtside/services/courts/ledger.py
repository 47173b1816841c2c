"""Per-referee append-only vote ledger.

Only the newest event of each referee counts towards a decision; older
events stay in place for auditing.
"""
from typing import Dict

from courtside.exceptions import InvalidPayload, UnknownReferee
from courtside.models import Court, Player, ScoreEvent


def parse_points(points) -> int:
    # bool is an int subclass; a stray true/false is not a point value
    if isinstance(points, bool) or not isinstance(points, int):
        raise InvalidPayload('points must be an integer')
    return points


def append_vote(court: Court, referee, player, points) -> ScoreEvent:
    """Validate a vote and append it to the referee's ledger.

    Raises UnknownReferee or InvalidPayload without touching the ledger.
    Caller must hold ``court.lock``.
    """
    sequence = court.scores.get(referee) if isinstance(referee, str) else None
    if sequence is None:
        raise UnknownReferee(f'Referee {referee} is not registered on court {court.court_id}')
    event = ScoreEvent(Player.parse(player), parse_points(points))
    sequence.append(event)
    return event


def latest_votes(court: Court) -> Dict[str, ScoreEvent]:
    """Current vote of every referee who has voted at all."""
    return {ref: events[-1] for ref, events in court.scores.items() if events}
