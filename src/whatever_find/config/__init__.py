"""
Configuration management package for whatever-find.

This package provides configuration parsing, validation, and management
functionality for whatever-find.
"""

from .parser import (
    ConfigParser,
    ConfigParseResult,
    ConfigurationError,
    default_config_path,
    load_config,
    validate_config_file,
    create_config_template
)

__all__ = [
    'ConfigParser',
    'ConfigParseResult',
    'ConfigurationError',
    'default_config_path',
    'load_config',
    'validate_config_file',
    'create_config_template'
]
