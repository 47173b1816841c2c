import logging
from typing import List, Optional

from courtside.models import Court, RefereeBinding
from .broadcast import BroadcastChannel
from .decision import recompute
from .gate import SessionGate
from .ledger import append_vote
from .registry import CourtRegistry


class CourtService:
    """Flask extension exposing the court operations to every transport.

    Both the HTTP API and the Socket.IO handlers go through
    ``submit_score`` so a vote is always appended, decided and published
    the same way.
    """

    def __init__(self, app=None, socketio=None, hasher=None):
        self.logger = logging.getLogger(__name__)
        self.registry: Optional[CourtRegistry] = None
        self.channel: Optional[BroadcastChannel] = None
        self.gate: Optional[SessionGate] = None
        if app is not None:
            self.init_app(app, socketio, hasher)

    def init_app(self, app, socketio, hasher) -> None:
        # Fresh in-memory state per application; nothing outlives the process
        self.logger = app.logger
        self.registry = CourtRegistry(hasher, logger=app.logger)
        self.channel = BroadcastChannel(socketio, namespace=app.config.get('SOCKETIO_NAMESPACE', '/ws'))
        self.gate = SessionGate(self.registry, self.channel)
        app.extensions['courtside'] = self

    def create_court(self, court_id, secret, referees) -> Court:
        return self.registry.create(court_id, secret, referees)

    def get_court(self, court_id) -> Court:
        return self.registry.get(court_id)

    def list_courts(self) -> List[Court]:
        return self.registry.list()

    def join_as_referee(self, referee, court_id, secret, sid: Optional[str] = None) -> RefereeBinding:
        binding = self.gate.admit_referee(referee, court_id, secret, sid=sid)
        self.logger.info(f"[referee-join] referee={referee} court={court_id}")
        return binding

    def join_as_viewer(self, court_id, sid: Optional[str] = None):
        snapshot = self.gate.admit_viewer(court_id, sid=sid)
        self.logger.info(f"[viewer-join] court={court_id}")
        return snapshot

    def submit_score(self, referee, court_id, player, points):
        """Record a referee vote, decide the round and push the scoreboard.

        Returns the published snapshot. Raises UnknownCourt, UnknownReferee
        or InvalidPayload with the court left unchanged.
        """
        court = self.registry.get(court_id)
        with court.lock:
            event = append_vote(court, referee, player, points)
            self.logger.info(
                f"[score] referee={referee} court={court.court_id} "
                f"player={event.player.value.upper()} points={event.points}"
            )
            decision = recompute(court, self.logger)
            snapshot = court.snapshot(decision)
            self.channel.publish(court.court_id, snapshot)
        return snapshot
