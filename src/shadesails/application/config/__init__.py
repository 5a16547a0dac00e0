"""Configuration schema and loading system for shade sail quotes.

This package provides JSON-based configuration loading and validation
for shade sail quote requests. It includes Pydantic models for schema
validation, a loader with comprehensive error handling, measurement
validation producing a ValidationResult, and an adapter to domain
objects.

Public API:
    - ShadeSailConfiguration: Root configuration model
    - SailConfig: Sail options and measurements
    - OutputConfig: Output format configuration
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - ValidationResult: Container for validation results
    - validate_config: Perform full configuration validation
    - config_to_sail: Convert a configuration to a SailConfiguration

Example:
    >>> from pathlib import Path
    >>> from shadesails.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("my-sail.json"))
    ...     print(f"Corners: {config.sail.corners}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from shadesails.application.config.adapter import (
    config_to_dismissed,
    config_to_sail,
    sail_config_to_domain,
)
from shadesails.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from shadesails.application.config.schema import (
    SUPPORTED_VERSIONS,
    OutputConfig,
    SailConfig,
    ShadeSailConfiguration,
)
from shadesails.application.config.validator import (
    TypoSuggestion,
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "ConfigError",
    "OutputConfig",
    "SailConfig",
    "ShadeSailConfiguration",
    "TypoSuggestion",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_dismissed",
    "config_to_sail",
    "load_config",
    "load_config_from_dict",
    "sail_config_to_domain",
    "validate_config",
]
