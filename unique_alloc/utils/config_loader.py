"""Configuration loading utilities."""

from pathlib import Path
from typing import TYPE_CHECKING

import yaml
from pydantic import BaseModel, ValidationError

from unique_alloc.utils.logging import get_logger

if TYPE_CHECKING:
    from unique_alloc.models.config import AllocatorConfig

logger = get_logger(__name__)


def load_yaml_config[T: BaseModel](file_path: Path | str, model_class: type[T]) -> T:
    """
    Load and validate YAML configuration file.

    An empty file validates as an empty mapping, so models whose fields all
    have defaults load from it.

    Args:
        file_path: Path to YAML configuration file
        model_class: Pydantic model class to validate against

    Returns:
        Validated configuration instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
        yaml.YAMLError: If YAML is malformed

    Examples:
        >>> from unique_alloc.models.config import AllocatorConfig
        >>> config = load_yaml_config("config/allocator.yaml", AllocatorConfig)
    """
    path = Path(file_path)

    if not path.exists():
        logger.error("Configuration file not found", path=str(path))
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        with path.open("r") as f:
            raw_config = yaml.safe_load(f)

        config = model_class.model_validate(raw_config or {})
        logger.info("Configuration loaded", path=str(path), model=model_class.__name__)
        return config

    except yaml.YAMLError as e:
        logger.error("Invalid YAML syntax", path=str(path), error=str(e))
        raise

    except ValidationError as e:
        logger.error("Configuration validation failed", path=str(path), error=str(e))
        raise


def load_allocator_config(file_path: Path | str = "config/allocator.yaml") -> "AllocatorConfig":
    """
    Load allocator configuration.

    Args:
        file_path: Path to allocator.yaml file

    Returns:
        AllocatorConfig instance
    """
    from unique_alloc.models.config import AllocatorConfig

    return load_yaml_config(file_path, AllocatorConfig)
