"""Sample duplicate-key detectors for common stores.

Any ``Callable[[BaseException], bool]`` works as a detector; these cover the
error shapes raised by the usual MongoDB and Postgres drivers.
"""

from collections.abc import Callable

from unique_alloc.constants import MONGO_DUPLICATE_KEY_CODE, POSTGRES_UNIQUE_VIOLATION

DuplicateErrorDetector = Callable[[BaseException], bool]

# psycopg2 uses ``pgcode``, psycopg 3 ``sqlstate``, asyncpg ``sqlstate`` too
_POSTGRES_CODE_ATTRS = ("code", "pgcode", "sqlstate")


def is_mongo_duplicate(err: BaseException) -> bool:
    """Return True for a MongoDB E11000 duplicate key error."""
    return getattr(err, "code", None) == MONGO_DUPLICATE_KEY_CODE


def is_postgres_duplicate(err: BaseException) -> bool:
    """Return True for a Postgres unique_violation (SQLSTATE 23505)."""
    return any(
        getattr(err, attr, None) == POSTGRES_UNIQUE_VIOLATION for attr in _POSTGRES_CODE_ATTRS
    )


def any_duplicate(*detectors: DuplicateErrorDetector) -> DuplicateErrorDetector:
    """
    Combine detectors into one that matches when any of them does.

    Args:
        *detectors: Detectors to combine

    Returns:
        Combined detector

    Examples:
        >>> detector = any_duplicate(is_mongo_duplicate, is_postgres_duplicate)
    """

    def _detect(err: BaseException) -> bool:
        return any(detector(err) for detector in detectors)

    return _detect
