"""Deterministic suffix allocation for human-facing slugs."""

from collections.abc import Iterator

from unique_alloc.constants import (
    DEFAULT_SLUG_MAX_ATTEMPTS,
    DEFAULT_SLUG_MAX_LENGTH,
    SLUG_FIRST_SUFFIX,
    SLUG_SEPARATOR,
)
from unique_alloc.errors import AllocationExhaustedError, EmptySlugBaseError
from unique_alloc.strategies.budget import check_budget
from unique_alloc.strategies.unique_value import ExistsFn
from unique_alloc.utils.logging import get_logger
from unique_alloc.utils.slug import slugify_text

logger = get_logger(__name__)


def suffixed_slug(base: str, index: int, max_length: int) -> str:
    """
    Append ``-{index}`` to base, truncating the base so the suffix survives.

    The base keeps at least one character, so when max_length leaves no
    room for it the result is longer than max_length.

    Examples:
        >>> suffixed_slug("john-doe", 3, 60)
        'john-doe-3'
        >>> suffixed_slug("abcdef", 12, 5)
        'ab-12'
    """
    suffix = f"{SLUG_SEPARATOR}{index}"
    cut = max(1, max_length - len(suffix))
    return f"{base[:cut]}{suffix}"


def slug_candidates(base: str, max_length: int, max_attempts: int) -> Iterator[str]:
    """Yield the bare base, then ``base-2`` .. ``base-{max_attempts}``.

    Exactly max_attempts candidates are produced. When feeding them to
    ``create_with_unique_value`` pass the same max_attempts there, or the
    exhausted iterator surfaces as a RuntimeError instead of
    ``AllocationExhaustedError``.
    """
    yield base
    for index in range(SLUG_FIRST_SUFFIX, max_attempts + 1):
        yield suffixed_slug(base, index, max_length)


async def generate_unique_slug(
    *,
    text: str,
    exists: ExistsFn,
    max_length: int = DEFAULT_SLUG_MAX_LENGTH,
    max_attempts: int = DEFAULT_SLUG_MAX_ATTEMPTS,
) -> str:
    """
    Allocate a readable slug for text, numbering it on collision.

    The unsuffixed slug is attempt 1; later attempts append ``-2``,
    ``-3`` and so on. Like ``generate_unique_value`` this only checks, so a
    concurrent caller may claim the same slug before the result is written.

    Args:
        text: Free-form input (e.g., a display name)
        exists: Reports whether a slug is already taken
        max_length: Maximum slug length, suffix included
        max_attempts: Candidates to try, the bare base included

    Returns:
        First free candidate

    Raises:
        EmptySlugBaseError: If text normalizes to an empty slug
        AllocationExhaustedError: If every candidate was taken
        ValueError: If max_length or max_attempts is not positive
    """
    check_budget(max_attempts)

    base = slugify_text(text, max_length=max_length)
    if not base:
        raise EmptySlugBaseError(text)

    for attempt, candidate in enumerate(slug_candidates(base, max_length, max_attempts), start=1):
        if not await exists(candidate):
            return candidate

        logger.debug("Slug already taken", attempt=attempt, slug=candidate)

    logger.warning(
        "Unique slug generation exhausted its retry budget",
        base=base,
        attempts=max_attempts,
    )
    raise AllocationExhaustedError(
        f"Failed to generate unique slug after {max_attempts} attempts",
        attempts=max_attempts,
        kind="slug",
    )
