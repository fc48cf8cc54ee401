"""
Seat reservations with a hierarchy of failure kinds
"""

import re
import logging
from typing import Optional

from rich.console import Console

from .exceptions import InvalidDateError, ReservationError, SeatUnavailableError
from .output import make_console

logger = logging.getLogger(__name__)

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
FIRST_SEAT = 1
LAST_SEAT = 100


class ReservationService:
    """
    Books seats for a given date
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or make_console()

    def reserve(self, date: str, seat: int) -> None:
        """
        Reserve a seat, checking the date before the seat number

        Raises:
            InvalidDateError: date is not YYYY-MM-DD shaped
            SeatUnavailableError: seat is outside FIRST_SEAT..LAST_SEAT
        """
        if not DATE_PATTERN.fullmatch(date):
            raise InvalidDateError(f"Invalid date: {date}")
        if seat < FIRST_SEAT or seat > LAST_SEAT:
            raise SeatUnavailableError(f"Seat {seat} outside {FIRST_SEAT}..{LAST_SEAT}")

        self.console.print(f"Loc rezervat pentru {date}, la numarul {seat}")


def reserve_with_report(
    service: ReservationService,
    date: str,
    seat: int,
    console: Optional[Console] = None,
    err_console: Optional[Console] = None
) -> bool:
    """
    Attempt a reservation and always print the final report

    Failures are reported on the error console and do not propagate.
    Returns True if the seat was booked.
    """
    console = console or service.console
    err_console = err_console or make_console(stderr=True)

    try:
        service.reserve(date, seat)
        return True
    except InvalidDateError as e:
        logger.debug(f"Reservation rejected: {e}")
        err_console.print("Data invalida!")
    except SeatUnavailableError as e:
        logger.debug(f"Reservation rejected: {e}")
        err_console.print("Loc indisponibil!")
    except ReservationError as e:
        err_console.print(f"Eroare rezervare: {e!r}")
    finally:
        console.print("Raport final rezervare.")
    return False
