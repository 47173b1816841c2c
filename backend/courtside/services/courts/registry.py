import logging
import threading
from typing import Dict, List

from courtside.exceptions import DuplicateCourt, InvalidPayload, UnknownCourt
from courtside.models import MAX_SECRET_BYTES, Court


def _require_text(value, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidPayload(f'{field} is required')
    return value


def _normalize_referees(referees) -> List[str]:
    if not isinstance(referees, (list, tuple)) or not referees:
        raise InvalidPayload('referees must be a non-empty list')
    seen: List[str] = []
    for ref in referees:
        _require_text(ref, 'referee id')
        if ref not in seen:
            seen.append(ref)
    return seen


class CourtRegistry:
    """Owns every live court, addressed by court id.

    Secrets are stored as bcrypt hashes produced by ``hasher`` (a
    ``flask_bcrypt.Bcrypt``). The registry lock only guards the id map;
    per-court state is guarded by each court's own lock.
    """

    def __init__(self, hasher, logger=None):
        self._hasher = hasher
        self._courts: Dict[str, Court] = {}
        self._lock = threading.Lock()
        self.logger = logger or logging.getLogger(__name__)

    def create(self, court_id, secret, referees) -> Court:
        court_id = _require_text(court_id, 'courtId')
        secret = _require_text(secret, 'secret')
        if len(secret.encode('utf-8')) > MAX_SECRET_BYTES:
            raise InvalidPayload(f'secret must be at most {MAX_SECRET_BYTES} bytes')
        panel = _normalize_referees(referees)
        # Hash outside the lock, bcrypt is deliberately slow
        secret_hash = self._hasher.generate_password_hash(secret).decode('utf-8')
        with self._lock:
            if court_id in self._courts:
                self.logger.info(f"[court-duplicate] court={court_id}")
                raise DuplicateCourt(f'Court {court_id} already exists')
            court = Court(court_id, secret_hash, panel)
            self._courts[court_id] = court
        self.logger.info(f"[court-create] court={court_id} referees={len(panel)}")
        return court

    def get(self, court_id) -> Court:
        with self._lock:
            court = self._courts.get(court_id) if isinstance(court_id, str) else None
        if court is None:
            raise UnknownCourt(f'Court {court_id} not found')
        return court

    def list(self) -> List[Court]:
        with self._lock:
            return list(self._courts.values())

    def check_secret(self, court: Court, secret) -> bool:
        if not isinstance(secret, str) or len(secret.encode('utf-8')) > MAX_SECRET_BYTES:
            return False
        return self._hasher.check_password_hash(court.secret_hash, secret)
