"""
shapegen Code Generation Module

Generates code in various languages from Smithy models.
"""

from .registry import GeneratorRegistry, get_generator, list_supported_languages
from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.model import Model, load_model
from .core.config import GeneratorConfig, ConfigManager, load_config

# Version info
__version__ = "0.1.0"


# Convenience functions
def generate_from_model(model_data, language="typescript", config=None):
    """
    Generate code from a Smithy JSON AST document.

    Args:
        model_data: Parsed JSON AST or an already loaded Model
        language: Target language name
        config: Generator configuration dict or path

    Returns:
        GenerationResult with generated code
    """
    model = model_data if isinstance(model_data, Model) else load_model(model_data)

    # Get generator
    generator = get_generator(language, config)

    # Generate code
    return generate_code(generator, model)


def quick_generate(model_data, language="typescript", **options):
    """
    Quick code generation from a Smithy JSON AST.

    Args:
        model_data: JSON AST (dict or str)
        language: Target language
        **options: Generator options

    Returns:
        Generated code string
    """
    # Convert string to dict if needed
    if isinstance(model_data, str):
        import json

        model_data = json.loads(model_data)

    result = generate_from_model(model_data, language, options)

    if result.success:
        return result.code
    else:
        raise RuntimeError(f"Code generation failed: {result.error_message}")


# Export main interfaces
__all__ = [
    "GeneratorRegistry",
    "CodeGenerator",
    "GenerationResult",
    "Model",
    "GeneratorConfig",
    "ConfigManager",
    "generate_code",
    "generate_from_model",
    "load_config",
    "load_model",
    "quick_generate",
    "get_generator",
    "list_supported_languages",
]
