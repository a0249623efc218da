"""Random id generation.

Uses NanoID for short, URL-safe identifiers drawn from a configurable
alphabet. The generators returned here are the usual ``generate`` argument of
the retry strategies.
"""

from collections.abc import Callable

from nanoid import generate

from unique_alloc.constants import DEFAULT_ID_ALPHABET, DEFAULT_ID_LENGTH
from unique_alloc.models.config import IdConfig


def create_id_generator(
    alphabet: str = DEFAULT_ID_ALPHABET,
    length: int = DEFAULT_ID_LENGTH,
    prefix: str = "",
) -> Callable[[], str]:
    """
    Build a zero-argument id generator.

    Args:
        alphabet: Characters the random part is drawn from
        length: Length of the random part (prefix not counted)
        prefix: String prepended to every id, e.g. ``"usr_"``

    Returns:
        Callable returning a fresh id on every call

    Raises:
        ValueError: If alphabet is empty or length is not positive

    Examples:
        >>> new_id = create_id_generator(prefix="usr_")
        >>> len(new_id())
        14
    """
    if not alphabet:
        raise ValueError("alphabet must not be empty")
    if length < 1:
        raise ValueError(f"length must be positive, got {length}")

    def _generate() -> str:
        return prefix + generate(alphabet, length)

    return _generate


def id_generator_from_config(config: IdConfig) -> Callable[[], str]:
    """Build an id generator from an ``IdConfig``."""
    return create_id_generator(config.alphabet, config.length, config.prefix)
