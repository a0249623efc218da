"""Insert-and-retry allocation against an atomic unique constraint."""

from collections.abc import Awaitable, Callable

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    RetryError,
    retry_if_exception,
    stop_after_attempt,
)

from unique_alloc.constants import DEFAULT_MAX_ATTEMPTS
from unique_alloc.errors import AllocationExhaustedError
from unique_alloc.strategies.budget import check_budget
from unique_alloc.utils.db_errors import DuplicateErrorDetector
from unique_alloc.utils.logging import get_logger

logger = get_logger(__name__)


def _log_duplicate(retry_state: RetryCallState) -> None:
    """Log a duplicate-key failure before the next attempt."""
    error = retry_state.outcome.exception() if retry_state.outcome else None
    logger.debug(
        "Duplicate key on insert, retrying with a fresh value",
        attempt=retry_state.attempt_number,
        error=str(error),
    )


async def create_with_unique_value[T](
    *,
    generate: Callable[[], str],
    insert: Callable[[str], Awaitable[T]],
    is_duplicate_error: DuplicateErrorDetector,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> T:
    """
    Insert a freshly generated value, retrying on duplicate-key failures.

    Each attempt calls ``generate`` once and ``insert`` once with the new
    value; a rejected value is never retried. The first successful insert
    wins. Errors the detector does not recognize propagate unchanged and end
    the call, and so does cancellation. Only safe under concurrent writers
    when the store enforces uniqueness atomically and ``insert`` leaves
    nothing behind on failure.

    Args:
        generate: Produces a new candidate value
        insert: Persists a candidate, raising on failure
        is_duplicate_error: Recognizes the store's duplicate-key errors
        max_attempts: Retry budget, must be positive

    Returns:
        Whatever ``insert`` returned for the accepted value

    Raises:
        AllocationExhaustedError: If every attempt hit a duplicate
        ValueError: If max_attempts is not positive
    """
    check_budget(max_attempts)

    retrying = AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        retry=retry_if_exception(
            lambda e: isinstance(e, Exception) and is_duplicate_error(e)
        ),
        before_sleep=_log_duplicate,
    )

    try:
        async for attempt in retrying:
            value = generate()
            with attempt:
                return await insert(value)

    except RetryError as e:
        logger.warning("Unique insert exhausted its retry budget", attempts=max_attempts)
        raise AllocationExhaustedError(
            f"Failed to create after {max_attempts} attempts due to duplicates",
            attempts=max_attempts,
            kind="insert",
        ) from e.last_attempt.exception()

    raise AssertionError("unreachable")  # pragma: no cover
