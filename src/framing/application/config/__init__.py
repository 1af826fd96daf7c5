"""Configuration schema and loading system for framing orders.

This package provides JSON-based configuration loading and validation for
framing orders: pydantic models for schema validation, a loader with
structured errors, an adapter to domain objects and framing advisory checks.

Public API:
    - FramingConfiguration: Root configuration model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_order: Convert a configuration to an OrderConfiguration
    - config_to_surface: Convert the surface section to a RenderSurface
    - merge_config_with_cli: Apply command line overrides
    - validate_config: Perform full configuration validation

Example:
    >>> from pathlib import Path
    >>> from framing.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("order.json"))
    ...     print(f"Frame: {config.frame}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from framing.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from framing.application.config.schemas import (
    SUPPORTED_VERSIONS,
    CustomWidthsConfig,
    FramingConfiguration,
    ImageConfig,
    LengthConfig,
    MatConfig,
    OutputConfig,
    SurfaceConfig,
)
from framing.application.config.adapter import (
    config_to_image_size,
    config_to_length,
    config_to_mat,
    config_to_order,
    config_to_surface,
    resolve_frame,
    resolve_mat_board,
)
from framing.application.config.merger import merge_config_with_cli
from framing.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_image_advisories,
    check_mat_advisories,
    validate_config,
)

__all__ = [
    # Schema models
    "CustomWidthsConfig",
    "FramingConfiguration",
    "ImageConfig",
    "LengthConfig",
    "MatConfig",
    "OutputConfig",
    "SUPPORTED_VERSIONS",
    "SurfaceConfig",
    # Loading
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
    # Adapters
    "config_to_image_size",
    "config_to_length",
    "config_to_mat",
    "config_to_order",
    "config_to_surface",
    "resolve_frame",
    "resolve_mat_board",
    # Validation
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_image_advisories",
    "check_mat_advisories",
    "validate_config",
]
