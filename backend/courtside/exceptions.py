"""Errors raised by the court scoring engine.

Every error is recoverable: it rejects one operation and leaves court state
untouched. Transports turn them into responses using ``code`` and
``status_code``.
"""


class CourtError(Exception):
    """Base class for all court scoring errors."""

    code = 'CourtError'
    status_code = 400
    default_message = 'Court operation failed'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)

    def to_dict(self):
        return {'error': self.code, 'message': str(self)}


class DuplicateCourt(CourtError):
    """Raised when creating a court whose id is already live."""

    code = 'DuplicateCourt'
    status_code = 409
    default_message = 'Court already exists'


class UnknownCourt(CourtError):
    """Raised when a court id does not name a live court."""

    code = 'UnknownCourt'
    status_code = 404
    default_message = 'Court not found'


class UnknownReferee(CourtError):
    """Raised when a referee is not on the court's panel."""

    code = 'UnknownReferee'
    status_code = 404
    default_message = 'Referee is not registered on this court'


class InvalidCredential(CourtError):
    """Raised when a referee presents a wrong secret or an unknown court."""

    code = 'InvalidCredential'
    status_code = 403
    default_message = 'Invalid court or secret'


class InvalidPayload(CourtError):
    """Raised when a request body or vote is malformed."""

    code = 'InvalidPayload'
    status_code = 400
    default_message = 'Invalid request payload'
