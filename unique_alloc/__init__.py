"""Collision-resolution helpers for allocating unique ids and slugs."""

from unique_alloc.allocator import UniqueAllocator
from unique_alloc.errors import AllocationExhaustedError, EmptySlugBaseError, UniqueAllocError
from unique_alloc.strategies.create_with_retry import create_with_unique_value
from unique_alloc.strategies.unique_slug import generate_unique_slug
from unique_alloc.strategies.unique_value import generate_unique_value
from unique_alloc.utils.db_errors import any_duplicate, is_mongo_duplicate, is_postgres_duplicate
from unique_alloc.utils.ids import create_id_generator
from unique_alloc.utils.slug import slugify_text

__version__ = "0.1.0"

__all__ = [
    # Strategies
    "create_with_unique_value",
    "generate_unique_value",
    "generate_unique_slug",
    "UniqueAllocator",
    # Collaborators
    "create_id_generator",
    "slugify_text",
    "is_mongo_duplicate",
    "is_postgres_duplicate",
    "any_duplicate",
    # Errors
    "UniqueAllocError",
    "AllocationExhaustedError",
    "EmptySlugBaseError",
]
