"""Collision-retry strategies: insert-and-retry, exists check, numbered slugs."""
