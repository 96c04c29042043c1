"""Support for the progress logs of long running algorithms. Log records
show the time elapsed since the start of the current run rather than since
the start of the program.
"""

import logging
import time
from typing import Optional


def format_delta(seconds: float) -> str:
    """Format a timespan as hours, minutes, and seconds with milliseconds.

    >>> format_delta(0.0)
    '0:00:00.000'
    >>> format_delta(3725.0421)
    '1:02:05.042'
    >>> format_delta(-0.5)
    '-0:00:00.500'
    """
    sign = '-' if seconds < 0 else ''
    millis = round(abs(seconds) * 1000)
    seconds, millis = divmod(millis, 1000)
    minutes, seconds = divmod(seconds, 60)
    hours, minutes = divmod(minutes, 60)
    return f'{sign}{hours}:{minutes:02}:{seconds:02}.{millis:03}'


class Timer:
    """Wall time in seconds since creation or since the last :meth:`.reset`.
    The clock is :func:`time.time`, which is also the clock of
    :attr:`logging.LogRecord.created`.

    >>> timer = Timer()
    >>> timer.get() >= 0.0
    True
    """

    reference_time: float

    def __init__(self) -> None:
        self.reset()

    def get(self) -> float:
        return time.time() - self.reference_time

    def reset(self) -> None:
        self.reference_time = time.time()


class DeltaTimeFormatter(logging.Formatter):
    """A formatter that adds an attribute `delta` to each
    :class:`logging.LogRecord`, which holds the time elapsed between the
    reference time of :attr:`timer` and the creation of the record. Normal
    form extraction resets the reference time at the beginning of each call.

    >>> import sys
    >>> logger = logging.getLogger('demo')
    >>> logger.propagate = False
    >>> handler = logging.StreamHandler(stream=sys.stdout)
    >>> formatter = DeltaTimeFormatter('%(delta)s: %(message)s')
    >>> handler.setFormatter(formatter)
    >>> logger.addHandler(handler)
    >>> formatter.set_reference_time(time.time() - 61.5)
    >>> logger.warning('extracting')  # doctest: +ELLIPSIS
    0:01:01.5...: extracting
    >>> logger.removeHandler(handler)
    """

    timer: Timer

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None,
                 timer: Optional[Timer] = None) -> None:
        super().__init__(fmt, datefmt)
        self.timer = Timer() if timer is None else timer

    def format(self, record: logging.LogRecord) -> str:
        record.delta = format_delta(record.created - self.timer.reference_time)
        return super().format(record)

    def get_reference_time(self) -> float:
        """Get the reference time in seconds since the epoch, compatible with
        :func:`time.time`.
        """
        return self.timer.reference_time

    def set_reference_time(self, reference_time: float) -> None:
        """Set the reference time to `reference_time` seconds since the
        epoch.

        >>> formatter = DeltaTimeFormatter()
        >>> formatter.set_reference_time(1000.0)
        >>> formatter.get_reference_time()
        1000.0
        """
        self.timer.reference_time = reference_time
