"""Exceptions raised by the allocation strategies."""


class UniqueAllocError(Exception):
    """Base exception for allocation errors."""


class AllocationExhaustedError(UniqueAllocError):
    """Every attempt in the retry budget collided with an existing value."""

    def __init__(self, message: str, attempts: int, kind: str):
        self.attempts = attempts
        self.kind = kind
        super().__init__(message)


class EmptySlugBaseError(UniqueAllocError, ValueError):
    """Input text normalized to an empty slug, so no candidate can be built."""

    def __init__(self, text: str):
        self.text = text
        super().__init__("Slug base is empty")
