from __future__ import annotations

from typing import Tuple

from .errors import InvalidPeriod

PERIODS: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

_PERIOD_INDEX = {name: idx for idx, name in enumerate(PERIODS)}


def validate_period(period: object) -> str:
    """Return `period` unchanged if it belongs to PERIODS, else raise InvalidPeriod."""
    if not isinstance(period, str) or period not in _PERIOD_INDEX:
        raise InvalidPeriod(period)
    return period

