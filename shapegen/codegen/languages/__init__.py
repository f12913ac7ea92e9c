"""
Language-specific code generators.

This module contains generators for different programming languages.
"""

from .typescript import (
    TypeScriptGenerator,
    create_typescript_generator,
    create_aws_sdk_generator,
    create_strict_presence_generator,
)

# Available language modules
__all__ = [
    "TypeScriptGenerator",
    "create_typescript_generator",
    "create_aws_sdk_generator",
    "create_strict_presence_generator",
]
