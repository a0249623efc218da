"""Config-bound entry point to the allocation strategies."""

from collections.abc import Awaitable, Callable

from unique_alloc.models.config import AllocatorConfig
from unique_alloc.strategies.create_with_retry import create_with_unique_value
from unique_alloc.strategies.unique_slug import generate_unique_slug
from unique_alloc.strategies.unique_value import ExistsFn, generate_unique_value
from unique_alloc.utils.db_errors import DuplicateErrorDetector
from unique_alloc.utils.ids import id_generator_from_config
from unique_alloc.utils.logging import get_logger

logger = get_logger(__name__)


class UniqueAllocator:
    """Runs the allocation strategies with budgets taken from an ``AllocatorConfig``.

    Holds no state besides the config; calls are independent and may run
    concurrently. Explicit ``max_attempts``/``max_length`` arguments override
    the configured values for a single call.
    """

    def __init__(self, config: AllocatorConfig | None = None) -> None:
        """
        Initialize allocator.

        Args:
            config: Allocator configuration, defaults when omitted
        """
        self.config = config or AllocatorConfig()
        logger.debug(
            "Allocator initialized",
            max_attempts=self.config.retry.max_attempts,
            slug_max_length=self.config.slug.max_length,
            slug_max_attempts=self.config.slug.max_attempts,
        )

    def new_id_generator(self) -> Callable[[], str]:
        """Id generator using the configured alphabet, length and prefix."""
        return id_generator_from_config(self.config.ids)

    async def create[T](
        self,
        insert: Callable[[str], Awaitable[T]],
        is_duplicate_error: DuplicateErrorDetector,
        generate: Callable[[], str] | None = None,
        max_attempts: int | None = None,
    ) -> T:
        """Insert with a fresh id per attempt; see ``create_with_unique_value``."""
        return await create_with_unique_value(
            generate=generate or self.new_id_generator(),
            insert=insert,
            is_duplicate_error=is_duplicate_error,
            max_attempts=self.config.retry.max_attempts if max_attempts is None else max_attempts,
        )

    async def generate_value(
        self,
        exists: ExistsFn,
        generate: Callable[[], str] | None = None,
        max_attempts: int | None = None,
    ) -> str:
        """Id not reported by ``exists``; see ``generate_unique_value``."""
        return await generate_unique_value(
            generate=generate or self.new_id_generator(),
            exists=exists,
            max_attempts=self.config.retry.max_attempts if max_attempts is None else max_attempts,
        )

    async def generate_slug(
        self,
        text: str,
        exists: ExistsFn,
        max_length: int | None = None,
        max_attempts: int | None = None,
    ) -> str:
        """Numbered slug for text; see ``generate_unique_slug``."""
        return await generate_unique_slug(
            text=text,
            exists=exists,
            max_length=self.config.slug.max_length if max_length is None else max_length,
            max_attempts=self.config.slug.max_attempts if max_attempts is None else max_attempts,
        )
