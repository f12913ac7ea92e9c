"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .errors import (
    ConfigError,
    GeneratorError,
    InvalidTraitError,
    ModelError,
    PreconditionError,
    UnresolvedReferenceError,
)
from .generator import CodeGenerator, GenerationResult, generate_code
from .model import (
    ErrorStructure,
    ErrorTrait,
    Member,
    MemberList,
    Model,
    PlainStructure,
    RetryableTrait,
    ShapeId,
    StructureShape,
    TypeKind,
    TypeRef,
    load_model,
)
from .naming import NameSanitizer, NamingCase
from .symbols import Symbol, SymbolProvider, SymbolReference
from .writer import CodeWriter
from .config import GeneratorConfig, ConfigManager, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
    # Errors
    "GeneratorError",
    "PreconditionError",
    "ModelError",
    "UnresolvedReferenceError",
    "InvalidTraitError",
    "ConfigError",
    # Model - core data structures
    "Model",
    "ShapeId",
    "StructureShape",
    "PlainStructure",
    "ErrorStructure",
    "ErrorTrait",
    "RetryableTrait",
    "Member",
    "MemberList",
    "TypeKind",
    "TypeRef",
    "load_model",
    # Naming and symbols - language-agnostic
    "NameSanitizer",
    "NamingCase",
    "Symbol",
    "SymbolProvider",
    "SymbolReference",
    # Output
    "CodeWriter",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "load_config",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
