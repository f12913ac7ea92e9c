"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional
from pathlib import Path

from .config import GeneratorConfig
from .errors import GeneratorError
from .model import ErrorStructure, Model, StructureShape
from .templates import TemplateEngine, create_template_engine
from ...logging_config import get_logger

logger = get_logger(__name__)


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'typescript')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.ts')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.

        Returns:
            Path to template directory or None
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(self, model: Model) -> str:
        """
        Generate code for every structure in the model.

        Args:
            model: Loaded model

        Returns:
            Generated code as a string
        """
        pass

    @abstractmethod
    def generate_single_shape(self, model: Model, shape: StructureShape) -> str:
        """
        Generate code for a single structure.

        Args:
            model: Model the shape belongs to
            shape: Structure to generate code for

        Returns:
            Generated code for this structure only
        """
        pass

    def validate_model(self, model: Model) -> List[str]:
        """
        Validate the model for issues worth reporting.

        Language generators should override this to add language-specific validation.

        Args:
            model: Model to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for shape in model.structures():
            if not shape.members and not shape.mixins:
                warnings.append(f"Structure '{shape.id}' has no members")

            if shape.sensitive:
                warnings.append(
                    f"Structure '{shape.id}' is sensitive; members targeting it are redacted whole"
                )

            if isinstance(shape, ErrorStructure) and shape.retryable and shape.error.fault == "client":
                if not shape.retryable.throttling:
                    warnings.append(
                        f"Client error '{shape.id}' is retryable without throttling"
                    )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        # Basic cleanup - remove excessive blank lines
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines)

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template file name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, model: Model) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Generation is all-or-nothing: any failure yields an error result and no
    code.

    Args:
        generator: Code generator instance
        model: Model to generate code for

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_model(model)
        code = generator.generate(model)
        formatted_code = generator.format_code(code)

        structures = model.structures()
        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "structure_count": len(structures),
            "error_count": sum(isinstance(s, ErrorStructure) for s in structures),
            "sensitive_member_count": sum(
                1 for s in structures for m in s.members if m.sensitive
            ),
        }

        return GenerationResult(formatted_code, warnings, metadata)

    except GeneratorError as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
