from typing import Optional

from courtside.exceptions import InvalidCredential, UnknownCourt
from courtside.models import RefereeBinding


class SessionGate:
    """Admits referees (with the court secret) and viewers (without) to a
    court's update stream.

    ``sid`` is the caller's Socket.IO session. Callers without a push
    connection pass None and get the result back without a subscription.
    """

    def __init__(self, registry, channel):
        self.registry = registry
        self.channel = channel

    def admit_referee(self, referee, court_id, secret, sid: Optional[str] = None) -> RefereeBinding:
        try:
            court = self.registry.get(court_id)
        except UnknownCourt:
            raise InvalidCredential()
        if not self.registry.check_secret(court, secret):
            raise InvalidCredential()
        if sid is not None:
            self.channel.subscribe(court.court_id, sid)
        return RefereeBinding(referee, court.court_id)

    def admit_viewer(self, court_id, sid: Optional[str] = None):
        court = self.registry.get(court_id)
        # Under the court lock so no publish lands between snapshot and subscribe
        with court.lock:
            snapshot = court.snapshot(None)
            if sid is not None:
                self.channel.subscribe(court.court_id, sid)
                self.channel.send(sid, snapshot)
        return snapshot
