"""
Utility functions and classes for the Interstellar package.
"""

from datetime import datetime, timedelta, timezone
from time import perf_counter
import logging
import math
import sys
import warnings
from typing import Optional, Type
from .config import config
from .constants import SECONDS_PER_DAY

# Default logging format
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Julian Date of the Unix epoch, 1970-01-01T00:00:00Z
_UNIX_EPOCH_JD = 2440587.5


class Timer:
    """
    Context manager for timing code execution.

    Examples
    --------
    >>> from interstellar.utils import Timer
    >>> with Timer("Trajectory sampling"):
    ...     states = traj.sample_raw(10000)
    Trajectory sampling: 0.123456 s

    >>> with Timer(verbose=False) as t:
    ...     # ... code ...
    >>> print(f"Took {t.elapsed:.6f} seconds")
    """
    def __init__(self, name="Operation", verbose=True):
        """
        Parameters
        ----------
        name : str, optional
            Name to display when timing completes (default: "Operation")
        verbose : bool, optional
            Whether to log timing automatically (default: True)
        """
        self.name = name
        self.verbose = verbose
        self.elapsed = None

    def __enter__(self):
        self.start = perf_counter()
        return self

    def __exit__(self, *args):
        self.end = perf_counter()
        self.elapsed = self.end - self.start
        if self.verbose:
            get_logger(__name__).info("%s: %.6f s", self.name, self.elapsed)


def configure_logging(level: int = logging.INFO,
                      log_file: Optional[str] = None) -> None:
    """
    Configure logging for applications built on the package.

    The package itself never installs handlers; call this once from a
    script or service entry point.

    Parameters
    ----------
    level : int
        Logging level (e.g., logging.DEBUG, logging.INFO)
    log_file : str, optional
        Path to log file. If None, logs only to console.
    """
    handlers = [logging.StreamHandler(sys.stdout)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Parameters
    ----------
    name : str
        Name of the logger (typically __name__)

    Returns
    -------
    logging.Logger
        Logger instance
    """
    return logging.getLogger(name)


def validation_error(message: str, error_class: Type[Exception] = ValueError):
    """
    Raise error or warn based on config.STRICT_VALIDATION.

    This function provides consistent validation behavior for descriptive
    metadata across the package. When STRICT_VALIDATION is True (default),
    raises the specified exception. When False, issues a UserWarning instead.
    Orbital element invariants do not go through here; they always raise.

    Parameters
    ----------
    message : str
        Validation error message
    error_class : Type[Exception], optional
        Exception class to raise if STRICT_VALIDATION is True.
        Default: ValueError

    Raises
    ------
    Exception (of type error_class)
        If config.STRICT_VALIDATION is True

    Warns
    -----
    UserWarning
        If config.STRICT_VALIDATION is False

    Examples
    --------
    >>> from interstellar.utils import validation_error
    >>> from interstellar import config
    >>> config.STRICT_VALIDATION = True
    >>> validation_error("Mass must be positive")  # Raises ValueError

    >>> config.STRICT_VALIDATION = False
    >>> validation_error("Mass must be positive")  # Issues warning
    """
    if config.STRICT_VALIDATION:
        raise error_class(message)
    else:
        warnings.warn(message, UserWarning, stacklevel=2)


def datetime_to_julian_date(dt: datetime) -> float:
    """
    Convert a Gregorian calendar datetime to a Julian Date.

    Naive datetimes are taken to be UTC; aware datetimes are converted
    to UTC first.

    Parameters
    ----------
    dt : datetime
        Calendar instant

    Returns
    -------
    float
        Julian Date [days]

    Examples
    --------
    >>> datetime_to_julian_date(datetime(2000, 1, 1, 12))
    2451545.0
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)

    # Fliegel-Van Flandern day number for the calendar date
    a = (14 - dt.month) // 12
    y = dt.year + 4800 - a
    m = dt.month + 12 * a - 3
    jdn = (dt.day + (153 * m + 2) // 5 + 365 * y
           + y // 4 - y // 100 + y // 400 - 32045)

    # Julian days start at noon
    fraction = ((dt.hour - 12) / 24.0
                + dt.minute / 1440.0
                + dt.second / SECONDS_PER_DAY
                + dt.microsecond / (SECONDS_PER_DAY * 1e6))
    return jdn + fraction


def julian_date_to_datetime(julian_date: float) -> datetime:
    """
    Convert a Julian Date to a timezone-aware UTC datetime.

    Parameters
    ----------
    julian_date : float
        Julian Date [days]

    Returns
    -------
    datetime
        UTC instant, rounded to the nearest millisecond

    Raises
    ------
    ValueError
        If julian_date is not finite or falls outside the datetime range
    """
    if not math.isfinite(julian_date):
        raise ValueError(f"Julian Date must be finite, got {julian_date}")
    millis = round((julian_date - _UNIX_EPOCH_JD) * SECONDS_PER_DAY * 1000.0)
    unix_epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)
    try:
        return unix_epoch + timedelta(milliseconds=millis)
    except OverflowError as exc:
        raise ValueError(f"Julian Date {julian_date} is out of range for datetime") from exc
