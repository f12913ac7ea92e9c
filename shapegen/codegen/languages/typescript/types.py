"""
TypeScript type system for code generation.

Maps resolved member types to TypeScript type expressions. Structure
references always use the referenced shape's symbol name, never an inline
type.
"""

from typing import Dict, Optional

from ...core.errors import ConfigError
from ...core.model import PrimitiveKind, TypeKind, TypeRef
from ...core.symbols import SymbolProvider


PRIMITIVE_TYPES: Dict[PrimitiveKind, str] = {
    PrimitiveKind.STRING: "string",
    PrimitiveKind.BOOLEAN: "boolean",
    PrimitiveKind.BYTE: "number",
    PrimitiveKind.SHORT: "number",
    PrimitiveKind.INTEGER: "number",
    PrimitiveKind.LONG: "number",
    PrimitiveKind.FLOAT: "number",
    PrimitiveKind.DOUBLE: "number",
    PrimitiveKind.BIG_INTEGER: "bigint",
    PrimitiveKind.BIG_DECIMAL: "number",
    PrimitiveKind.TIMESTAMP: "Date",
    PrimitiveKind.BLOB: "Uint8Array",
    PrimitiveKind.DOCUMENT: "any",
}


def _wrap(type_name: str) -> str:
    """Parenthesize union types before applying a postfix ``[]``."""
    return f"({type_name})" if "|" in type_name else type_name


class TypeScriptTypeMapper:
    """Central engine for mapping member types to TypeScript types."""

    def __init__(self, symbol_provider: SymbolProvider, type_overrides: Optional[Dict[str, str]] = None):
        """
        Args:
            symbol_provider: Resolves referenced shapes to names
            type_overrides: Primitive kind value -> TypeScript type, e.g.
                ``{"timestamp": "string"}``
        """
        self.symbol_provider = symbol_provider
        self.primitive_types = dict(PRIMITIVE_TYPES)
        for kind_name, ts_type in (type_overrides or {}).items():
            try:
                kind = PrimitiveKind(kind_name)
            except ValueError:
                raise ConfigError(f"Unknown type override: {kind_name!r}") from None
            self.primitive_types[kind] = ts_type

    def map_type(self, type_ref: TypeRef, owner: str = "", member: str = None) -> str:
        """
        Map a resolved type to a TypeScript type expression.

        Args:
            type_ref: Member target type
            owner: Shape id of the containing structure, for error messages
            member: Member name, for error messages
        """
        if type_ref.kind == TypeKind.PRIMITIVE:
            return self.primitive_types[type_ref.primitive]

        if type_ref.kind == TypeKind.STRUCTURE:
            return self.symbol_provider.structure_name(type_ref.shape_id, owner, member)

        element = self.map_type(type_ref.element, owner, member)
        if type_ref.sparse:
            element = f"{element} | null"

        if type_ref.is_collection:
            return f"{_wrap(element)}[]"

        return f"{{ [key: string]: {element} }}"
