"""Majority decision over the referees' latest votes.

A competitor wins the round as soon as DECISION_THRESHOLD referees
currently vote for them, whatever the size of the panel. A realized
decision is consumed: it is counted once and only counted again after the
majority has dissolved and formed anew.
"""
import logging
from typing import Dict, Optional

from courtside.models import Court, Player
from .ledger import latest_votes

DECISION_THRESHOLD = 2

logger = logging.getLogger(__name__)


def tally(court: Court) -> Dict[Player, int]:
    votes = {p: 0 for p in Player}
    for event in latest_votes(court).values():
        votes[event.player] += 1
    return votes


def recompute(court: Court, log=None) -> Optional[Player]:
    """Apply the decision rule to ``court`` and return a newly realized winner.

    Increments ``total_score`` at most once per formed majority. Returns None
    when nothing new was decided. Caller must hold ``court.lock``.
    """
    log = log or logger
    votes = tally(court)
    reached = [p for p in Player if votes[p] >= DECISION_THRESHOLD]

    if len(reached) > 1:
        # Needs four or more referees; there is no tie-break rule
        log.warning(
            f"[decision-ambiguous] court={court.court_id} "
            + ' '.join(f"{p.value}={votes[p]}" for p in Player)
        )
        return None

    if not reached:
        if court.consumed_decision is not None:
            log.debug(f"[decision-rearm] court={court.court_id} was={court.consumed_decision.value}")
        court.consumed_decision = None
        return None

    winner = reached[0]
    if court.consumed_decision == winner:
        return None

    court.total_score[winner.value] += 1
    court.consumed_decision = winner
    log.info(
        f"[decision] court={court.court_id} round={court.round} winner={winner.value} "
        f"total={court.total_score}"
    )
    return winner
