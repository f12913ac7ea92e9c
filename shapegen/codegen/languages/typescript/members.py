"""
Member emission for TypeScript structures.

Writes interface member declarations and the body of the generated
``filterSensitiveLog`` function. Both walk the member list in declaration
order.
"""

from ...core.model import Member, MemberList, ShapeId, TypeRef
from ...core.symbols import SymbolProvider
from .config import TypeScriptConfig
from .naming import property_access, property_name
from .types import TypeScriptTypeMapper
from .writer import TypeScriptWriter


class StructuredMemberWriter:
    """Writes the members of a structure and their redaction expressions."""

    def __init__(
        self,
        symbol_provider: SymbolProvider,
        type_mapper: TypeScriptTypeMapper,
        ts_config: TypeScriptConfig,
        owner: ShapeId,
        members: MemberList,
        add_comments: bool = True,
    ):
        self.symbol_provider = symbol_provider
        self.type_mapper = type_mapper
        self.ts_config = ts_config
        self.owner = owner
        self.members = members
        self.add_comments = add_comments

    def write_members(self, writer: TypeScriptWriter) -> None:
        """
        Write one declaration per member.

        Required members are mandatory properties; optional members are
        optional properties, unioned with ``null`` unless configured off.
        """
        last = len(self.members) - 1
        for position, member in enumerate(self.members):
            wrote_docs = self.add_comments and writer.write_docs(member.documentation)
            writer.write(self.member_declaration(member))
            if wrote_docs and position < last:
                writer.write("")

    def member_declaration(self, member: Member) -> str:
        name = property_name(member.name)
        ts_type = self.type_mapper.map_type(member.target, str(self.owner), member.name)
        if member.required:
            suffix = " | undefined" if self.ts_config.required_undefined_union else ""
            return f"{name}: {ts_type}{suffix};"
        suffix = " | null" if self.ts_config.optional_null_union else ""
        return f"{name}?: {ts_type}{suffix};"

    def write_filter_sensitive_log(self, writer: TypeScriptWriter, object_param: str) -> None:
        """Write one ``name: expression,`` entry per member."""
        for member in self.members:
            access = property_access(object_param, member.name)
            writer.write(f"{property_name(member.name)}: {self.redaction_expression(member, access)},")

    def redaction_expression(self, member: Member, expression: str) -> str:
        """
        Expression producing the redacted value of one member.

        Sensitive members become the redaction marker, structures and
        containers of structures are redacted recursively, and everything
        else passes through. Absent values stay absent.
        """
        if member.sensitive:
            return _guard(expression, self.ts_config.sensitive_marker)
        if not member.target.needs_redaction():
            return expression
        return _guard(expression, self._redact(member.target, expression, 0, member.name))

    def _redact(self, type_ref: TypeRef, expression: str, depth: int, member_name: str) -> str:
        if type_ref.sensitive:
            return self.ts_config.sensitive_marker

        if type_ref.is_structure:
            name = self.symbol_provider.structure_name(
                type_ref.shape_id, str(self.owner), member_name
            )
            return f"{name}.filterSensitiveLog({expression})"

        if type_ref.element is None or not type_ref.element.needs_redaction():
            return expression

        if type_ref.is_collection:
            item = _variable("item", depth)
            inner = self._element(type_ref, item, depth, member_name)
            return f"{expression}.map(({item}) => {inner})"

        acc = _variable("acc", depth)
        key = _variable("key", depth)
        value = _variable("value", depth)
        inner = self._element(type_ref, value, depth, member_name)
        return (
            f"Object.entries({expression}).reduce("
            f"({acc}: any, [{key}, {value}]: [string, any]) => "
            f"({{ ...{acc}, [{key}]: {inner} }}), {{}})"
        )

    def _element(self, container: TypeRef, variable: str, depth: int, member_name: str) -> str:
        inner = self._redact(container.element, variable, depth + 1, member_name)
        if container.sparse:
            return _guard(variable, inner)
        return inner


def _variable(base: str, depth: int) -> str:
    return base if depth == 0 else f"{base}{depth}"


def _guard(expression: str, result: str) -> str:
    """Keep null/undefined as-is, otherwise use ``result``."""
    return f"{expression} == null ? {expression} : {result}"
