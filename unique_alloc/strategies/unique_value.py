"""Check-then-generate allocation against an existence oracle."""

from collections.abc import Awaitable, Callable

from unique_alloc.constants import DEFAULT_MAX_ATTEMPTS
from unique_alloc.errors import AllocationExhaustedError
from unique_alloc.strategies.budget import check_budget
from unique_alloc.utils.logging import get_logger

logger = get_logger(__name__)

ExistsFn = Callable[[str], Awaitable[bool]]


async def generate_unique_value(
    *,
    generate: Callable[[], str],
    exists: ExistsFn,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> str:
    """
    Generate values until the oracle reports one as free.

    Nothing is claimed here: the caller writes the value afterwards, so two
    concurrent callers can both be handed the same value. Pair with a unique
    constraint and ``create_with_unique_value`` when that matters.

    Args:
        generate: Produces a new candidate value
        exists: Reports whether a value is already taken
        max_attempts: Retry budget, must be positive

    Returns:
        First generated value for which ``exists`` returned False

    Raises:
        AllocationExhaustedError: If every generated value was taken
        ValueError: If max_attempts is not positive
    """
    check_budget(max_attempts)

    for attempt in range(1, max_attempts + 1):
        value = generate()
        if not await exists(value):
            return value

        logger.debug("Generated value already taken", attempt=attempt, value=value)

    logger.warning("Unique value generation exhausted its retry budget", attempts=max_attempts)
    raise AllocationExhaustedError(
        f"Failed to generate unique value after {max_attempts} attempts",
        attempts=max_attempts,
        kind="value",
    )
