"""
Symbol resolution for generated code.

Maps shapes to target-language identifiers and records, once per shape,
which other interfaces the generated type structurally extends.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from .errors import ConfigError, UnresolvedReferenceError
from .model import Model, ShapeId, StructureShape
from .naming import NameSanitizer, NamingCase
from ...logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SymbolReference:
    """A reference from one symbol to another, optionally imported."""

    name: str
    alias: Optional[str] = None
    module: Optional[str] = None

    def __post_init__(self):
        if self.alias is None:
            object.__setattr__(self, "alias", self.name)


@dataclass(frozen=True)
class Symbol:
    """Resolved target-language identity of a shape."""

    name: str
    namespace: str
    shape_id: ShapeId
    owned_extensions: Tuple[SymbolReference, ...] = ()


class SymbolProvider:
    """
    Resolves shapes to symbols.

    Results are memoized per shape id, so a shape always resolves to the
    same name and two shapes never share one.
    """

    def __init__(
        self,
        model: Model,
        sanitizer: NameSanitizer,
        interfaces: Optional[Dict[str, List[Dict[str, Any]]]] = None,
    ):
        """
        Args:
            model: Model being generated
            sanitizer: Language-specific name sanitizer
            interfaces: Extra interfaces to extend, keyed by shape id or bare
                name. Each entry is ``{"name": ..., "module": ..., "alias": ...}``.
        """
        self.model = model
        self.sanitizer = sanitizer
        self.interfaces = interfaces or {}
        self._symbols: Dict[ShapeId, Symbol] = {}

    def name_for(self, shape_id: ShapeId) -> str:
        """Target-language name of any named shape."""
        return self.sanitizer.sanitize_name(
            shape_id.name, NamingCase.PRESERVE, key=str(shape_id)
        )

    def to_symbol(self, shape: StructureShape) -> Symbol:
        """Resolve a structure to its symbol."""
        if shape.id in self._symbols:
            return self._symbols[shape.id]

        extensions = []
        for mixin_id in shape.mixins:
            self.model.expect_structure(mixin_id, referenced_from=str(shape.id))
            extensions.append(SymbolReference(self.name_for(mixin_id)))
        extensions.extend(self._configured_interfaces(shape))

        symbol = Symbol(
            name=self.name_for(shape.id),
            namespace=shape.id.namespace,
            shape_id=shape.id,
            owned_extensions=tuple(extensions),
        )
        self._symbols[shape.id] = symbol
        logger.debug(
            "Resolved %s -> %s (extends: %s)",
            shape.id,
            symbol.name,
            [ref.alias for ref in symbol.owned_extensions],
        )
        return symbol

    def structure_name(self, shape_id: ShapeId, referenced_from: str, member: str = None) -> str:
        """Name of a referenced structure; the structure must exist."""
        if shape_id not in self.model:
            raise UnresolvedReferenceError(referenced_from, str(shape_id), member)
        return self.name_for(shape_id)

    def _configured_interfaces(self, shape: StructureShape) -> List[SymbolReference]:
        entries = self.interfaces.get(str(shape.id)) or self.interfaces.get(shape.name) or []
        refs = []
        for entry in entries:
            if isinstance(entry, str):
                entry = {"name": entry}
            if not isinstance(entry, dict) or not entry.get("name"):
                raise ConfigError(f"Invalid interface entry for {shape.id}: {entry!r}")
            refs.append(
                SymbolReference(
                    name=entry["name"],
                    alias=entry.get("alias"),
                    module=entry.get("module"),
                )
            )
        return refs
