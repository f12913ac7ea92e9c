"""
TypeScript-specific naming utilities and sanitization.

Handles TypeScript reserved words, global types, and property naming.
"""

import re

from ...core.naming import NameSanitizer


# TypeScript reserved words
TYPESCRIPT_RESERVED_WORDS = {
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "debugger",
    "default",
    "delete",
    "do",
    "else",
    "enum",
    "export",
    "extends",
    "false",
    "finally",
    "for",
    "function",
    "if",
    "import",
    "in",
    "instanceof",
    "new",
    "null",
    "return",
    "super",
    "switch",
    "this",
    "throw",
    "true",
    "try",
    "typeof",
    "var",
    "void",
    "while",
    "with",
    "implements",
    "interface",
    "let",
    "package",
    "private",
    "protected",
    "public",
    "static",
    "yield",
    "any",
    "boolean",
    "number",
    "string",
    "symbol",
    "undefined",
    "never",
    "unknown",
    "object",
}

# Global types that generated interfaces must not shadow
TYPESCRIPT_BUILTIN_TYPES = {
    "Array",
    "ArrayBuffer",
    "Boolean",
    "Date",
    "Error",
    "Function",
    "Map",
    "Number",
    "Object",
    "Promise",
    "Record",
    "RegExp",
    "Set",
    "String",
    "Symbol",
    "Uint8Array",
}

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def create_typescript_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for TypeScript."""
    return NameSanitizer(TYPESCRIPT_RESERVED_WORDS, TYPESCRIPT_BUILTIN_TYPES)


def is_identifier(name: str) -> bool:
    return bool(_IDENTIFIER_RE.match(name))


def property_name(name: str) -> str:
    """Property key for a member: bare if a valid identifier, quoted otherwise."""
    if is_identifier(name):
        return name
    return '"' + name.replace("\\", "\\\\").replace('"', '\\"') + '"'


def property_access(expression: str, name: str) -> str:
    """Expression reading member ``name`` from ``expression``."""
    if is_identifier(name):
        return f"{expression}.{name}"
    return f"{expression}[{property_name(name)}]"
