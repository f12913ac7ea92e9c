"""Python counterparts of the generated TypeScript helpers.

``isa`` and ``filter_sensitive_log`` apply the same rules as the emitted
``isa`` predicate and ``filterSensitiveLog`` function, on plain dicts and
lists. They are handy for checking how a model redacts a payload without
running any TypeScript.
"""

import copy
from typing import Any, Mapping, Union

from .codegen.core.model import Model, ShapeId, TypeRef

SENSITIVE_STRING = "***SensitiveInformation***"

DISCRIMINANT = "__type"


def isa(value: Any, *ids: str) -> bool:
    """Shallow discriminant check.

    True when ``value`` is a mapping whose ``__type`` is one of ``ids``.
    Nothing else about the value is inspected.
    """
    if not isinstance(value, Mapping):
        return False
    return value.get(DISCRIMINANT) in ids


def filter_sensitive_log(model: Model, shape_id: Union[ShapeId, str], value: Any) -> Any:
    """Return a redacted copy of a structure value.

    Members inherited from mixins are included. Sensitive members become
    ``SENSITIVE_STRING``, nested structures are redacted recursively (also
    inside lists, sets and map values), and every other member passes
    through unchanged. Members missing from ``value``
    stay missing; keys that are not members are dropped. The result shares no
    mutable objects with the input, which is never modified.

    Raises:
        UnresolvedReferenceError: If ``shape_id`` or a referenced structure
            is not in the model.
        TypeError: If a structure value is not a mapping.
    """
    if value is None:
        return None

    shape = model.expect_structure(shape_id, referenced_from="filter_sensitive_log")
    if not isinstance(value, Mapping):
        raise TypeError(f"Expected a mapping for {shape.id}, got {type(value).__name__}")

    redacted = {}
    for member in model.all_members(shape):
        if member.name not in value:
            continue
        member_value = value[member.name]
        if member_value is None:
            redacted[member.name] = None
        elif member.sensitive:
            redacted[member.name] = SENSITIVE_STRING
        else:
            redacted[member.name] = _redact(model, member.target, member_value)
    return redacted


def _redact(model: Model, type_ref: TypeRef, value: Any) -> Any:
    if type_ref.sensitive:
        return SENSITIVE_STRING

    if type_ref.is_structure:
        return filter_sensitive_log(model, type_ref.shape_id, value)

    if type_ref.element is None or not type_ref.element.needs_redaction():
        return copy.deepcopy(value)

    if type_ref.is_collection:
        return [_element(model, type_ref, item) for item in value]

    return {key: _element(model, type_ref, item) for key, item in value.items()}


def _element(model: Model, container: TypeRef, item: Any) -> Any:
    if item is None:
        # Null elements stay null
        return None
    return _redact(model, container.element, item)
