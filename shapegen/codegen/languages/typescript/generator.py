"""
TypeScript code generator implementation.

Generates interfaces and companion namespaces from a Smithy model.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from ...core.config import GeneratorConfig, get_config_manager, load_config
from ...core.generator import CodeGenerator
from ...core.model import Model, ShapeId, StructureShape
from ...core.symbols import SymbolProvider
from ....logging_config import get_logger
from .config import TypeScriptConfig
from .naming import create_typescript_sanitizer
from .structure import StructureGenerator
from .types import TypeScriptTypeMapper
from .writer import TypeScriptWriter

logger = get_logger(__name__)

FILE_TEMPLATE = "file.ts.j2"


class TypeScriptGenerator(CodeGenerator):
    """Code generator for TypeScript interfaces and namespaces."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize TypeScript generator with configuration."""
        super().__init__(config)

        self.sanitizer = create_typescript_sanitizer()
        self.ts_config = TypeScriptConfig.from_generator_config(self.config)
        self.add_comments = self.config.add_comments
        self.type_overrides: Dict[str, str] = self.config.custom.get("type_overrides", {})

        # Per-model state, rebuilt by _prepare()
        self.symbol_provider: Optional[SymbolProvider] = None
        self.type_mapper: Optional[TypeScriptTypeMapper] = None
        self._model: Optional[Model] = None

    def get_template_directory(self) -> Optional[Path]:
        """Return the TypeScript templates directory."""
        template_dir = Path(__file__).parent / "templates"
        return template_dir if template_dir.exists() else None

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "typescript"

    @property
    def file_extension(self) -> str:
        """Return TypeScript file extension."""
        return ".ts"

    def _prepare(self, model: Model) -> None:
        """Reset naming state and build resolvers for a model."""
        if self._model is model:
            return
        self.sanitizer.reset_used_names()
        self.symbol_provider = SymbolProvider(
            model, self.sanitizer, interfaces=self.ts_config.interfaces
        )
        self.type_mapper = TypeScriptTypeMapper(self.symbol_provider, self.type_overrides)
        self._model = model

    def _new_writer(self) -> TypeScriptWriter:
        return TypeScriptWriter(
            indent_size=self.config.indent_size,
            use_tabs=self.config.use_tabs,
            line_ending=self.config.line_ending,
        )

    def generate(self, model: Model) -> str:
        """Generate a complete TypeScript file for all structures in the model."""
        self._model = None
        self._prepare(model)

        writer = self._new_writer()
        order = self._get_generation_order(model)
        logger.info("Generating %d structures", len(order))

        for shape_id in order:
            self._render_shape(writer, model.get_shape(shape_id))

        return self._render_file(writer)

    def generate_single_shape(self, model: Model, shape: StructureShape) -> str:
        """Generate the interface and namespace for one structure."""
        self._prepare(model)
        writer = self._new_writer()
        self._render_shape(writer, shape)
        return self._render_file(writer)

    def _render_shape(self, writer: TypeScriptWriter, shape: StructureShape) -> None:
        """Render one structure; on failure the writer is left untouched."""
        try:
            with writer.transaction():
                StructureGenerator(
                    self.symbol_provider,
                    self.type_mapper,
                    writer,
                    shape,
                    ts_config=self.ts_config,
                    add_comments=self.add_comments,
                ).run()
        except Exception:
            logger.error("Failed to generate %s", shape.id)
            raise

    def _render_file(self, writer: TypeScriptWriter) -> str:
        context = {
            "header": self.ts_config.header if self.add_comments else None,
            "imports": writer.import_statements(),
            "body": writer.to_string().rstrip("\n"),
        }
        return self.render_template(FILE_TEMPLATE, context)

    def validate_model(self, model: Model) -> List[str]:
        """Validate the model for TypeScript generation."""
        warnings = super().validate_model(model)
        warnings.extend(get_config_manager().validate_config(self.config, self.language_name))

        self._prepare(model)
        for shape in model.structures():
            name = self.symbol_provider.name_for(shape.id)
            if name != shape.name:
                warnings.append(
                    f"Structure {shape.id} renamed to {name} to avoid TypeScript naming conflicts"
                )

        if not self.template_exists(FILE_TEMPLATE):
            warnings.append(f"Template {FILE_TEMPLATE} not found")

        return warnings

    def _get_generation_order(self, model: Model) -> List[ShapeId]:
        """
        Determine order for generating structures to handle dependencies.
        Mixins and referenced structures are generated before their users.
        """
        visited = set()
        visiting = set()
        ordered = []

        def visit_shape(shape_id: ShapeId):
            if shape_id in visited or shape_id not in model:
                return

            if shape_id in visiting:
                # Recursive structures are legal in TypeScript
                return

            visiting.add(shape_id)
            for reference in model.get_shape(shape_id).references():
                visit_shape(reference)
            visiting.remove(shape_id)
            visited.add(shape_id)
            ordered.append(shape_id)

        for shape in model.structures():
            visit_shape(shape.id)

        return ordered


def create_typescript_generator(config: Optional[Dict[str, Any]] = None) -> TypeScriptGenerator:
    """Create a TypeScript generator with default configuration."""
    return TypeScriptGenerator(load_config("typescript", custom_config=config))
