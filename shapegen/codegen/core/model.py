"""
Core model representation for code generation.

Converts a Smithy JSON AST document into a normalized, read-only set of
structure shapes that generators can work with consistently. Whether a
structure is an error is decided here, once, by choosing the variant class.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Set, Tuple
from enum import Enum

from .errors import InvalidTraitError, ModelError, UnresolvedReferenceError
from ...logging_config import get_logger

logger = get_logger(__name__)

PRELUDE_NAMESPACE = "smithy.api"


class TypeKind(Enum):
    """Kinds of value types a member can target."""

    PRIMITIVE = "primitive"
    STRUCTURE = "structure"
    LIST = "list"
    SET = "set"
    MAP = "map"


class PrimitiveKind(Enum):
    """Simple types shared by every target language."""

    STRING = "string"
    BOOLEAN = "boolean"
    BYTE = "byte"
    SHORT = "short"
    INTEGER = "integer"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BIG_INTEGER = "bigInteger"
    BIG_DECIMAL = "bigDecimal"
    TIMESTAMP = "timestamp"
    BLOB = "blob"
    DOCUMENT = "document"


# Shape "type" values that map onto a primitive
SIMPLE_TYPES = {
    "string": PrimitiveKind.STRING,
    "enum": PrimitiveKind.STRING,
    "boolean": PrimitiveKind.BOOLEAN,
    "byte": PrimitiveKind.BYTE,
    "short": PrimitiveKind.SHORT,
    "integer": PrimitiveKind.INTEGER,
    "intEnum": PrimitiveKind.INTEGER,
    "long": PrimitiveKind.LONG,
    "float": PrimitiveKind.FLOAT,
    "double": PrimitiveKind.DOUBLE,
    "bigInteger": PrimitiveKind.BIG_INTEGER,
    "bigDecimal": PrimitiveKind.BIG_DECIMAL,
    "timestamp": PrimitiveKind.TIMESTAMP,
    "blob": PrimitiveKind.BLOB,
    "document": PrimitiveKind.DOCUMENT,
}

# Prelude shapes usable as targets without being declared
PRELUDE_SHAPES = {
    "String": PrimitiveKind.STRING,
    "Blob": PrimitiveKind.BLOB,
    "Boolean": PrimitiveKind.BOOLEAN,
    "PrimitiveBoolean": PrimitiveKind.BOOLEAN,
    "Byte": PrimitiveKind.BYTE,
    "PrimitiveByte": PrimitiveKind.BYTE,
    "Short": PrimitiveKind.SHORT,
    "PrimitiveShort": PrimitiveKind.SHORT,
    "Integer": PrimitiveKind.INTEGER,
    "PrimitiveInteger": PrimitiveKind.INTEGER,
    "Long": PrimitiveKind.LONG,
    "PrimitiveLong": PrimitiveKind.LONG,
    "Float": PrimitiveKind.FLOAT,
    "PrimitiveFloat": PrimitiveKind.FLOAT,
    "Double": PrimitiveKind.DOUBLE,
    "PrimitiveDouble": PrimitiveKind.DOUBLE,
    "BigInteger": PrimitiveKind.BIG_INTEGER,
    "BigDecimal": PrimitiveKind.BIG_DECIMAL,
    "Timestamp": PrimitiveKind.TIMESTAMP,
    "Document": PrimitiveKind.DOCUMENT,
}


@dataclass(frozen=True, order=True)
class ShapeId:
    """Absolute shape identifier (``namespace#Name``)."""

    namespace: str
    name: str

    @classmethod
    def parse(cls, value: str) -> "ShapeId":
        """Parse an absolute shape id string."""
        if not isinstance(value, str) or value.count("#") != 1:
            raise ModelError(f"Invalid shape id: {value!r}")
        namespace, name = value.split("#")
        if not namespace or not name or "$" in name:
            raise ModelError(f"Invalid shape id: {value!r}")
        return cls(namespace, name)

    def __str__(self) -> str:
        return f"{self.namespace}#{self.name}"


@dataclass(frozen=True)
class TypeRef:
    """
    Resolved value type of a member.

    Structures are references to a named shape and are never inlined. Lists, sets and maps carry their element (or map value) type.
    """

    kind: TypeKind
    primitive: Optional[PrimitiveKind] = None
    shape_id: Optional[ShapeId] = None
    element: Optional["TypeRef"] = None
    sensitive: bool = False
    sparse: bool = False

    @property
    def is_structure(self) -> bool:
        return self.kind == TypeKind.STRUCTURE

    @property
    def is_collection(self) -> bool:
        return self.kind in (TypeKind.LIST, TypeKind.SET)

    @property
    def is_map(self) -> bool:
        return self.kind == TypeKind.MAP

    def needs_redaction(self) -> bool:
        """Whether redacting a value of this type can change it."""
        if self.sensitive or self.is_structure:
            return True
        if self.element is not None:
            return self.element.needs_redaction()
        return False

    def has_sensitive(self) -> bool:
        """Whether this type or any element type is marked sensitive."""
        if self.sensitive:
            return True
        return self.element is not None and self.element.has_sensitive()

    def referenced_structures(self) -> Iterator[ShapeId]:
        """Yield structure ids reachable through this type, outermost first."""
        if self.is_structure:
            yield self.shape_id
        if self.element is not None:
            yield from self.element.referenced_structures()


@dataclass(frozen=True)
class Member:
    """A single named field of a structure."""

    name: str
    target: TypeRef
    required: bool = False
    sensitive: bool = False
    documentation: Optional[str] = None


class MemberList:
    """
    Ordered association list of members.

    Iteration order is declaration order. It is never re-sorted, and both
    the type definition and the redaction function rely on it.
    """

    def __init__(self, members: Iterable[Member] = ()):
        members = tuple(members)
        seen: Set[str] = set()
        for member in members:
            if member.name in seen:
                raise ModelError(f"Duplicate member name: {member.name}")
            seen.add(member.name)
        self._members = members

    def __iter__(self) -> Iterator[Member]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __getitem__(self, index: int) -> Member:
        return self._members[index]

    def __contains__(self, name: object) -> bool:
        return any(member.name == name for member in self._members)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MemberList):
            return NotImplemented
        return self._members == other._members

    def __hash__(self) -> int:
        return hash(self._members)

    def __repr__(self) -> str:
        return f"MemberList({[m.name for m in self._members]!r})"

    def names(self) -> List[str]:
        """Member names in declaration order."""
        return [member.name for member in self._members]

    def get(self, name: str) -> Optional[Member]:
        """Get member by name."""
        for member in self._members:
            if member.name == name:
                return member
        return None


@dataclass(frozen=True)
class ErrorTrait:
    """Marks a structure as an error, with its fault classification."""

    fault: str

    VALID_FAULTS = ("client", "server")

    def __post_init__(self):
        if self.fault not in self.VALID_FAULTS:
            raise ModelError(f"Invalid error fault: {self.fault!r}")


@dataclass(frozen=True)
class RetryableTrait:
    """Marks an error as retryable."""

    throttling: bool = False


@dataclass(frozen=True)
class StructureShape:
    """Base class for structure shapes. Use one of the two variants."""

    id: ShapeId
    members: MemberList = field(default_factory=MemberList)
    mixins: Tuple[ShapeId, ...] = ()
    documentation: Optional[str] = None
    sensitive: bool = False

    @property
    def name(self) -> str:
        """Bare shape name, used as the discriminant value."""
        return self.id.name

    def references(self) -> List[ShapeId]:
        """Structures this shape depends on (mixins, then member targets)."""
        refs: List[ShapeId] = list(self.mixins)
        for member in self.members:
            for shape_id in member.target.referenced_structures():
                if shape_id not in refs:
                    refs.append(shape_id)
        return refs


@dataclass(frozen=True)
class PlainStructure(StructureShape):
    """A structure without the error trait."""

    pass


@dataclass(frozen=True)
class ErrorStructure(StructureShape):
    """A structure carrying the error trait."""

    error: Optional[ErrorTrait] = None
    retryable: Optional[RetryableTrait] = None

    def __post_init__(self):
        if self.error is None:
            raise ModelError(f"Error structure {self.id} requires an error trait")


class Model:
    """Read-only collection of structure shapes, keyed by shape id."""

    def __init__(
        self,
        structures: Iterable[StructureShape] = (),
        metadata: Optional[Dict[str, Any]] = None,
    ):
        self._structures: Dict[ShapeId, StructureShape] = {}
        for shape in structures:
            if shape.id in self._structures:
                raise ModelError(f"Duplicate shape id: {shape.id}")
            self._structures[shape.id] = shape
        self.metadata = metadata or {}

    def __len__(self) -> int:
        return len(self._structures)

    def __contains__(self, shape_id: object) -> bool:
        return shape_id in self._structures

    def structures(self) -> List[StructureShape]:
        """All structures in declaration order."""
        return list(self._structures.values())

    def get_shape(self, shape_id) -> Optional[StructureShape]:
        """Get a structure by id (ShapeId or string)."""
        if isinstance(shape_id, str):
            shape_id = ShapeId.parse(shape_id)
        return self._structures.get(shape_id)

    def expect_structure(self, shape_id, referenced_from: str = "model") -> StructureShape:
        """Get a structure by id or raise UnresolvedReferenceError."""
        shape = self.get_shape(shape_id)
        if shape is None:
            raise UnresolvedReferenceError(referenced_from, str(shape_id))
        return shape

    def all_members(self, shape: StructureShape, _path: Tuple[ShapeId, ...] = ()) -> MemberList:
        """
        Members of ``shape`` including those inherited from its mixins.

        Mixin members come first, in mixin declaration order, followed by the
        shape's own members. A local member that redeclares a mixin member
        keeps the mixin's position and takes the local definition.

        Raises:
            ModelError: If the mixins form a cycle
        """
        if shape.id in _path:
            raise ModelError(f"Mixin cycle through {shape.id}")

        collected: Dict[str, Member] = {}
        for mixin_id in shape.mixins:
            mixin = self.expect_structure(mixin_id, referenced_from=str(shape.id))
            for member in self.all_members(mixin, _path + (shape.id,)):
                collected.setdefault(member.name, member)
        for member in shape.members:
            collected[member.name] = member
        return MemberList(collected.values())


def _get_trait(traits: Dict[str, Any], name: str) -> Any:
    """Look up a prelude trait by absolute or relative name."""
    if f"{PRELUDE_NAMESPACE}#{name}" in traits:
        return traits[f"{PRELUDE_NAMESPACE}#{name}"]
    return traits.get(name)


def _has_trait(traits: Dict[str, Any], name: str) -> bool:
    return f"{PRELUDE_NAMESPACE}#{name}" in traits or name in traits


class _ModelLoader:
    """Resolves a raw JSON AST shape table into TypeRefs and structures."""

    def __init__(self, raw_shapes: Dict[ShapeId, Dict[str, Any]]):
        self.raw_shapes = raw_shapes
        self._type_cache: Dict[ShapeId, TypeRef] = {}

    def load_structures(self) -> List[StructureShape]:
        structures = []
        for shape_id, raw in self.raw_shapes.items():
            if raw.get("type") == "structure":
                structures.append(self._load_structure(shape_id, raw))
        return structures

    def _load_structure(self, shape_id: ShapeId, raw: Dict[str, Any]) -> StructureShape:
        traits = raw.get("traits", {})
        members = []

        for member_name, member_data in raw.get("members", {}).items():
            member_traits = member_data.get("traits", {})
            target = self._resolve_target(
                member_data.get("target"), str(shape_id), member_name
            )
            members.append(
                Member(
                    name=member_name,
                    target=target,
                    required=_has_trait(member_traits, "required"),
                    sensitive=_has_trait(member_traits, "sensitive") or target.sensitive,
                    documentation=_get_trait(member_traits, "documentation"),
                )
            )

        mixins = []
        for mixin in raw.get("mixins", []):
            mixin_id = self._parse_reference(mixin.get("target"), str(shape_id))
            mixin_raw = self.raw_shapes.get(mixin_id)
            if mixin_raw is None or mixin_raw.get("type") != "structure":
                raise UnresolvedReferenceError(str(shape_id), str(mixin_id))
            mixins.append(mixin_id)

        common = dict(
            id=shape_id,
            members=MemberList(members),
            mixins=tuple(mixins),
            documentation=_get_trait(traits, "documentation"),
            sensitive=_has_trait(traits, "sensitive"),
        )

        if not _has_trait(traits, "error"):
            return PlainStructure(**common)

        fault = _get_trait(traits, "error")
        if fault not in ErrorTrait.VALID_FAULTS:
            raise InvalidTraitError(
                str(shape_id), "smithy.api#error", fault, ErrorTrait.VALID_FAULTS
            )

        retryable = None
        if _has_trait(traits, "retryable"):
            retryable_value = _get_trait(traits, "retryable") or {}
            if not isinstance(retryable_value, dict):
                raise InvalidTraitError(
                    str(shape_id), "smithy.api#retryable", retryable_value
                )
            retryable = RetryableTrait(
                throttling=bool(retryable_value.get("throttling", False))
            )

        logger.debug("Loaded error structure %s (fault=%s)", shape_id, fault)
        return ErrorStructure(error=ErrorTrait(fault), retryable=retryable, **common)

    def _parse_reference(self, target: Any, owner: str, member: str = None) -> ShapeId:
        if not target:
            raise UnresolvedReferenceError(owner, str(target), member)
        try:
            return ShapeId.parse(target)
        except ModelError:
            raise UnresolvedReferenceError(owner, str(target), member)

    def _resolve_target(
        self, target: Any, owner: str, member: str, stack: Tuple[ShapeId, ...] = ()
    ) -> TypeRef:
        shape_id = self._parse_reference(target, owner, member)

        if shape_id in self._type_cache:
            return self._type_cache[shape_id]

        if shape_id.namespace == PRELUDE_NAMESPACE and shape_id.name in PRELUDE_SHAPES:
            return TypeRef(TypeKind.PRIMITIVE, primitive=PRELUDE_SHAPES[shape_id.name])

        raw = self.raw_shapes.get(shape_id)
        if raw is None:
            raise UnresolvedReferenceError(owner, str(shape_id), member)

        if shape_id in stack:
            raise ModelError(f"Recursive collection definition through {shape_id}")

        shape_type = raw.get("type")
        traits = raw.get("traits", {})
        sensitive = _has_trait(traits, "sensitive")

        if shape_type in SIMPLE_TYPES:
            type_ref = TypeRef(
                TypeKind.PRIMITIVE,
                primitive=SIMPLE_TYPES[shape_type],
                shape_id=shape_id,
                sensitive=sensitive,
            )
        elif shape_type in ("list", "set"):
            element = self._resolve_target(
                raw.get("member", {}).get("target"),
                str(shape_id),
                "member",
                stack + (shape_id,),
            )
            type_ref = TypeRef(
                TypeKind.LIST if shape_type == "list" else TypeKind.SET,
                shape_id=shape_id,
                element=element,
                sensitive=sensitive,
                sparse=_has_trait(traits, "sparse"),
            )
        elif shape_type == "map":
            value = self._resolve_target(
                raw.get("value", {}).get("target"),
                str(shape_id),
                "value",
                stack + (shape_id,),
            )
            type_ref = TypeRef(
                TypeKind.MAP,
                shape_id=shape_id,
                element=value,
                sensitive=sensitive,
                sparse=_has_trait(traits, "sparse"),
            )
        elif shape_type == "structure":
            type_ref = TypeRef(TypeKind.STRUCTURE, shape_id=shape_id, sensitive=sensitive)
        elif shape_type == "union":
            raise ModelError(
                f"Member {owner}${member} targets union {shape_id}; "
                f"union members are not supported"
            )
        else:
            raise ModelError(
                f"Shape {shape_id} of type '{shape_type}' cannot be used as a member "
                f"target ({owner}${member})"
            )

        self._type_cache[shape_id] = type_ref
        return type_ref


def load_model(data: Dict[str, Any]) -> Model:
    """
    Convert a Smithy JSON AST document to the internal Model representation.

    Args:
        data: Parsed JSON AST (``{"smithy": "2.0", "shapes": {...}}``)

    Returns:
        Model containing every structure in declaration order

    Raises:
        ModelError: If the document is malformed
        UnresolvedReferenceError: If a target or mixin is unknown
        InvalidTraitError: If a trait value is invalid
    """
    if not isinstance(data, dict):
        raise ModelError("Model document must be a JSON object")

    shapes = data.get("shapes")
    if not isinstance(shapes, dict):
        raise ModelError("Model document must contain a 'shapes' object")

    raw_shapes = {}
    for key, value in shapes.items():
        if not isinstance(value, dict) or "type" not in value:
            raise ModelError(f"Shape {key} must be an object with a 'type'")
        raw_shapes[ShapeId.parse(key)] = value

    structures = _ModelLoader(raw_shapes).load_structures()
    logger.info(
        "Loaded model with %d shapes (%d structures)", len(raw_shapes), len(structures)
    )
    return Model(structures, metadata=data.get("metadata"))
