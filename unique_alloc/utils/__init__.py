"""Utility functions and helpers."""

from unique_alloc.utils.config_loader import load_allocator_config, load_yaml_config
from unique_alloc.utils.db_errors import any_duplicate, is_mongo_duplicate, is_postgres_duplicate
from unique_alloc.utils.ids import create_id_generator, id_generator_from_config
from unique_alloc.utils.logging import get_logger, setup_logging
from unique_alloc.utils.slug import slugify_text

__all__ = [
    "setup_logging",
    "get_logger",
    "slugify_text",
    "create_id_generator",
    "id_generator_from_config",
    "is_mongo_duplicate",
    "is_postgres_duplicate",
    "any_duplicate",
    "load_yaml_config",
    "load_allocator_config",
]
