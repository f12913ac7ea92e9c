"""
TypeScript code generator module.

Generates TypeScript interfaces plus companion namespaces (sensitive-log
redactor and type predicate) for Smithy structures.
"""

from .config import AWS_SDK_CONFIG, STRICT_PRESENCE_CONFIG, TypeScriptConfig
from .generator import TypeScriptGenerator, create_typescript_generator
from .members import StructuredMemberWriter
from .naming import create_typescript_sanitizer
from .retryable import write_retryable_trait
from .structure import StructureGenerator
from .types import TypeScriptTypeMapper
from .writer import TypeScriptWriter

__all__ = [
    "TypeScriptGenerator",
    "TypeScriptConfig",
    "TypeScriptTypeMapper",
    "TypeScriptWriter",
    "StructureGenerator",
    "StructuredMemberWriter",
    "write_retryable_trait",
    "create_typescript_sanitizer",
    # Factory functions
    "create_generator",
    "create_typescript_generator",
    "create_aws_sdk_generator",
    "create_strict_presence_generator",
]


def create_generator(**kwargs) -> TypeScriptGenerator:
    """
    Create a TypeScript generator.

    Args:
        **kwargs: Generator options (indent_size, add_comments, runtime_package, ...)

    Returns:
        Configured TypeScriptGenerator instance
    """
    return create_typescript_generator(kwargs)


def create_aws_sdk_generator() -> TypeScriptGenerator:
    """
    Create generator targeting the AWS SDK smithy client runtime.

    Features:
    - Imports helpers from @aws-sdk/smithy-client
    - Errors extend SmithyException
    - Optional members are typed ``T | null``
    """
    return create_typescript_generator(dict(AWS_SDK_CONFIG))


def create_strict_presence_generator() -> TypeScriptGenerator:
    """
    Create generator with explicit presence unions.

    Features:
    - Required members are typed ``T | undefined``
    - Optional members are typed ``T | null``
    """
    return create_typescript_generator(dict(STRICT_PRESENCE_CONFIG))
