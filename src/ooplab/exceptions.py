"""
Custom exceptions
"""


class OOPLabError(Exception):
    """Base exception"""
    pass


class ReservationError(OOPLabError):
    """A seat reservation could not be made"""
    pass


class InvalidDateError(ReservationError):
    """Reservation date is not in YYYY-MM-DD form"""
    pass


class SeatUnavailableError(ReservationError):
    """Requested seat is outside 1..100"""
    pass


class InvalidCodeError(OOPLabError, ValueError):
    """No access level has the given code"""

    def __init__(self, code: int):
        self.code = code
        super().__init__(f"Cod invalid: {code}")
