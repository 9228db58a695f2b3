"""Value types for JDE date/time conversion."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import NamedTuple

Clock = Callable[[], datetime]
"""Zero-argument time source returning a naive local ``datetime``."""


class JdeDateTime(NamedTuple):
    """A JDE date and time pair.

    Unpacks as ``(date, time)``.
    """

    date: int
    time: int
