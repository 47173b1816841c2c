"""Court domain services: registry, ledger, decisions and fan-out.

This package holds the match-state engine. HTTP routes and socket handlers
call into ``CourtService`` only, keeping transport concerns separated from
the scoring rules.
"""
from .service import CourtService

__all__ = ['CourtService']
