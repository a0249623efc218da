"""Retry budget validation shared by the strategies."""


def check_budget(max_attempts: int) -> None:
    """Raise ValueError unless max_attempts is a positive integer."""
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        raise ValueError(f"max_attempts must be an integer, got {max_attempts!r}")
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be positive, got {max_attempts}")
