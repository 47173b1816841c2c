import threading
import time
from enum import Enum
from typing import Dict, List, Optional

from courtside.exceptions import InvalidPayload

# bcrypt only looks at the first 72 bytes of a secret
MAX_SECRET_BYTES = 72


class Player(str, Enum):
    """The two competitors on a court: chong (blue) and hong (red)."""

    CHONG = 'chong'
    HONG = 'hong'

    @classmethod
    def parse(cls, value) -> 'Player':
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidPayload(f"player must be one of {', '.join(p.value for p in cls)}")


def zeroed_tally() -> Dict[str, int]:
    return {p.value: 0 for p in Player}


class ScoreEvent:
    """One referee click: a vote for ``player`` worth ``points``."""

    __slots__ = ('player', 'points', 'recorded_at')

    def __init__(self, player: Player, points: int, recorded_at: Optional[float] = None):
        self.player = player
        self.points = points
        self.recorded_at = recorded_at if recorded_at is not None else time.time()

    def __repr__(self):
        return f"ScoreEvent(player={self.player.value!r}, points={self.points})"

    def to_dict(self):
        return {
            'player': self.player.value,
            'points': self.points,
            'recordedAt': self.recorded_at,
        }


class RefereeBinding:
    """Identity handed back to a referee after a successful join."""

    __slots__ = ('referee', 'court_id')

    def __init__(self, referee: str, court_id: str):
        self.referee = referee
        self.court_id = court_id

    def __eq__(self, other):
        if not isinstance(other, RefereeBinding):
            return NotImplemented
        return (self.referee, self.court_id) == (other.referee, other.court_id)

    def to_dict(self):
        return {'referee': self.referee, 'court': self.court_id}


class Court:
    """Live state of one match.

    ``scores`` holds one append-only ledger per referee; list order is
    recency. ``consumed_decision`` remembers the player whose threshold
    decision was already counted, so a standing majority scores only once.
    Mutations must hold ``lock``.
    """

    def __init__(self, court_id: str, secret_hash: str, referees: List[str]):
        self.court_id = court_id
        self.secret_hash = secret_hash
        self.referees = list(referees)
        self.scores: Dict[str, List[ScoreEvent]] = {r: [] for r in self.referees}
        self.round = 1
        self.round_wins = zeroed_tally()
        self.total_score = zeroed_tally()
        self.consumed_decision: Optional[Player] = None
        self.created_at = time.time()
        self.lock = threading.Lock()

    def __repr__(self):
        return f"<Court {self.court_id} referees={len(self.referees)}>"

    def snapshot(self, last_decision: Optional[Player] = None):
        """Scoreboard view pushed to subscribers.

        ``lastDecision`` is the decision realized by the update carrying the
        snapshot, or None when the update realized nothing new.
        """
        return {
            'courtId': self.court_id,
            'totalScore': dict(self.total_score),
            'round': self.round,
            'roundWins': dict(self.round_wins),
            'lastDecision': last_decision.value if last_decision else None,
        }

    def to_dict(self):
        return {
            'courtId': self.court_id,
            'referees': list(self.referees),
            'scores': {r: [e.to_dict() for e in events] for r, events in self.scores.items()},
            'round': self.round,
            'roundWins': dict(self.round_wins),
            'totalScore': dict(self.total_score),
            'createdAt': self.created_at,
        }
