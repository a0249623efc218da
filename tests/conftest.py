"""Shared pytest fixtures and configuration."""

import asyncio
from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

import pytest
from loguru import logger


class DuplicateKeyError(Exception):
    """Postgres-style unique violation raised by the in-memory store."""

    def __init__(self, value: str):
        self.code = "23505"
        super().__init__(f"duplicate key value violates unique constraint: {value}")


class InMemoryStore:
    """Async store with an atomic unique constraint on ``value``.

    Records every call so tests can assert on attempt counts.
    """

    def __init__(self, taken: Iterable[str] = ()) -> None:
        self.values: set[str] = set(taken)
        self.insert_calls: list[str] = []
        self.exists_calls: list[str] = []

    async def insert(self, value: str) -> dict[str, str]:
        self.insert_calls.append(value)
        await asyncio.sleep(0)
        # Check and add run without yielding, like a unique index
        if value in self.values:
            raise DuplicateKeyError(value)
        self.values.add(value)
        return {"value": value}

    async def exists(self, value: str) -> bool:
        self.exists_calls.append(value)
        await asyncio.sleep(0)
        return value in self.values


class SequenceGenerator:
    """Generator returning the given values in order, counting calls."""

    def __init__(self, values: Iterable[str]) -> None:
        self._values: Iterator[str] = iter(values)
        self.calls = 0

    def __call__(self) -> str:
        self.calls += 1
        return next(self._values)


@pytest.fixture
def store() -> InMemoryStore:
    """Empty in-memory store."""
    return InMemoryStore()


@pytest.fixture
def make_store() -> Callable[..., InMemoryStore]:
    """Factory for stores pre-filled with taken values."""
    return InMemoryStore


@pytest.fixture
def make_sequence() -> Callable[[Iterable[str]], SequenceGenerator]:
    """Factory for deterministic candidate generators."""
    return SequenceGenerator


@pytest.fixture
def temp_config_dir(tmp_path: Path) -> Path:
    """Create temporary config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture(autouse=True)
def reset_loguru() -> Iterator[None]:
    """Drop sinks added by a test so they don't outlive its streams."""
    yield
    logger.remove()
