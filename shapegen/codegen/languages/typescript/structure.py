"""
Structure emission for TypeScript.

Generates an interface plus a companion namespace for each structure. Error
structures extend the base exception interface and carry ``name`` and
``$fault`` literals.
"""

from typing import List

from ...core.errors import PreconditionError
from ...core.model import ErrorStructure, MemberList, PlainStructure, StructureShape
from ...core.symbols import Symbol, SymbolProvider, SymbolReference
from ....logging_config import get_logger
from .config import TypeScriptConfig
from .members import StructuredMemberWriter
from .retryable import write_retryable_trait
from .types import TypeScriptTypeMapper
from .writer import TypeScriptWriter, quote

logger = get_logger(__name__)


class StructureGenerator:
    """Generates normal structures and error structures."""

    def __init__(
        self,
        symbol_provider: SymbolProvider,
        type_mapper: TypeScriptTypeMapper,
        writer: TypeScriptWriter,
        shape: StructureShape,
        ts_config: TypeScriptConfig = None,
        add_comments: bool = True,
    ):
        self.symbol_provider = symbol_provider
        self.type_mapper = type_mapper
        self.writer = writer
        self.shape = shape
        self.ts_config = ts_config or TypeScriptConfig()
        self.add_comments = add_comments

    def run(self) -> None:
        logger.debug("Rendering %s as %s", self.shape.id, type(self.shape).__name__)
        if isinstance(self.shape, ErrorStructure):
            self.render_error_structure()
        else:
            self.render_non_error_structure()

    def render_non_error_structure(self) -> None:
        """
        Render a normal, non-error structure.

        For example, given the following model::

            structure Person {
                @required
                name: String,
                age: Integer,
            }

        The following TypeScript is rendered::

            import { isa as __isa } from "@aws-sdk/smithy-client";

            export interface Person {
              __type?: "Person";
              name: string;
              age?: number | null;
            }

            export namespace Person {
              export const filterSensitiveLog = (obj: Person): any => ({
                name: obj.name,
                age: obj.age,
              });
              export const isa = (o: any): o is Person => __isa(o, "Person");
            }
        """
        if not isinstance(self.shape, PlainStructure):
            raise PreconditionError(
                f"{self.shape.id} is an error structure; use render_error_structure"
            )

        symbol = self.symbol_provider.to_symbol(self.shape)
        self._write_shape_docs()

        extends_from = self._extends_from(symbol)
        if extends_from:
            opening = f"export interface {symbol.name} extends {', '.join(extends_from)} {{"
        else:
            opening = f"export interface {symbol.name} {{"

        with self.writer.open_block(opening, "}"):
            self.writer.write(f"__type?: {quote(self.shape.name)};")
            self._member_writer(self.shape.members).write_members(self.writer)
        self.writer.write("")
        self.render_structure_namespace(symbol)

    def render_error_structure(self) -> None:
        """
        Render an error structure.

        Given the following model::

            @error("client")
            structure NoSuchResource {
                @required
                resourceType: String
            }

        The following TypeScript is generated::

            import { SmithyException as __SmithyException, isa as __isa } from "@aws-sdk/smithy-client";

            export interface NoSuchResource extends __SmithyException {
              name: "NoSuchResource";
              $fault: "client";
              resourceType: string;
            }

            export namespace NoSuchResource {
              ...
            }
        """
        if not isinstance(self.shape, ErrorStructure):
            raise PreconditionError(
                f"{self.shape.id} has no error trait; cannot render it as an error structure"
            )

        symbol = self.symbol_provider.to_symbol(self.shape)
        self._write_shape_docs()

        exception_alias = self.ts_config.exception_alias
        self.writer.add_import(
            self.ts_config.exception_interface, exception_alias, self.ts_config.runtime_package
        )
        extends_from = [exception_alias]
        extends_from.extend(
            alias for alias in self._extends_from(symbol) if alias != exception_alias
        )

        opening = f"export interface {symbol.name} extends {', '.join(extends_from)} {{"
        with self.writer.open_block(opening, "}"):
            self.writer.write(f"name: {quote(self.shape.name)};")
            self.writer.write(f"$fault: {quote(self.shape.error.fault)};")
            write_retryable_trait(self.writer, self.shape, ";")
            self._member_writer(self.shape.members).write_members(self.writer)
        self.writer.write("")
        self.render_structure_namespace(symbol)

    def render_structure_namespace(self, symbol: Symbol = None) -> None:
        """Render the companion namespace with filterSensitiveLog and isa."""
        symbol = symbol or self.symbol_provider.to_symbol(self.shape)
        runtime = self.ts_config.runtime_package
        self.writer.add_import("isa", "__isa", runtime)

        # Inherited mixin members are redacted too
        members = self.symbol_provider.model.all_members(self.shape)
        member_writer = self._member_writer(members)
        if any(member.sensitive or member.target.has_sensitive() for member in members):
            self.writer.add_import(self.ts_config.sensitive_marker, None, runtime)

        object_param = "obj"
        with self.writer.open_block(f"export namespace {symbol.name} {{", "}"):
            with self.writer.open_block(
                f"export const filterSensitiveLog = ({object_param}: {symbol.name}): any => ({{",
                "});",
            ):
                member_writer.write_filter_sensitive_log(self.writer, object_param)
            self.writer.write(
                f"export const isa = (o: any): o is {symbol.name} => "
                f"__isa(o, {quote(self.shape.name)});"
            )
        self.writer.write("")

    def _extends_from(self, symbol: Symbol) -> List[str]:
        """Aliases of the interfaces this structure extends, registering imports."""
        aliases = []
        for ref in symbol.owned_extensions:
            self._import_reference(ref)
            aliases.append(ref.alias)
        return aliases

    def _import_reference(self, ref: SymbolReference) -> None:
        if ref.module:
            self.writer.add_import(ref.name, ref.alias, ref.module)

    def _member_writer(self, members: MemberList) -> StructuredMemberWriter:
        return StructuredMemberWriter(
            self.symbol_provider,
            self.type_mapper,
            self.ts_config,
            self.shape.id,
            members,
            add_comments=self.add_comments,
        )

    def _write_shape_docs(self) -> None:
        if self.add_comments:
            self.writer.write_docs(self.shape.documentation)
