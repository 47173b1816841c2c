SCOREBOARD_EVENT = 'updateScoreboard'


def court_room(court_id: str) -> str:
    return f"court:{court_id}"


class BroadcastChannel:
    """Fan-out of scoreboard snapshots over Socket.IO rooms.

    One room per court. Delivery is fire-and-forget; Socket.IO drops a
    client from its rooms when it disconnects.
    """

    def __init__(self, socketio=None, namespace: str = '/ws'):
        self.socketio = socketio
        self.namespace = namespace

    def subscribe(self, court_id: str, sid: str) -> None:
        self.socketio.server.enter_room(sid, court_room(court_id), namespace=self.namespace)

    def send(self, sid: str, snapshot) -> None:
        self.socketio.emit(SCOREBOARD_EVENT, snapshot, to=sid, namespace=self.namespace)

    def publish(self, court_id: str, snapshot) -> None:
        self.socketio.emit(SCOREBOARD_EVENT, snapshot, to=court_room(court_id), namespace=self.namespace)
