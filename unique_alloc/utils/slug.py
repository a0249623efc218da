"""URL slug normalization.

Turns free-form text into the base token that the slug allocator suffixes.
"""

from slugify import slugify

from unique_alloc.constants import DEFAULT_SLUG_MAX_LENGTH, SLUG_SEPARATOR

# Anything outside lowercase ASCII letters and digits becomes a separator
_DISALLOWED_PATTERN = r"[^a-z0-9]+"


def slugify_text(text: str, max_length: int = DEFAULT_SLUG_MAX_LENGTH) -> str:
    """Normalize text into a URL-safe slug.

    Lowercases, transliterates non-ASCII letters, collapses every run of
    other characters into a single ``-``, trims separators from both ends and
    caps the result at ``max_length``. The output is deterministic and
    idempotent. HTML entities are not decoded, so ``"&lt;"`` becomes
    ``"lt"``. It is empty when the input has nothing representable.

    Args:
        text: Input text (e.g., a display name or title)
        max_length: Maximum slug length, must be positive

    Returns:
        URL-safe slug, possibly empty

    Raises:
        ValueError: If max_length is not positive

    Examples:
        >>> slugify_text("Hello World")
        'hello-world'
        >>> slugify_text("  Café -- Résumé!  ")
        'cafe-resume'
        >>> slugify_text("!!!")
        ''
    """
    if max_length < 1:
        raise ValueError(f"max_length must be positive, got {max_length}")

    return slugify(
        text,
        max_length=max_length,
        word_boundary=False,
        separator=SLUG_SEPARATOR,
        regex_pattern=_DISALLOWED_PATTERN,
        entities=False,
        decimal=False,
        hexadecimal=False,
    )
