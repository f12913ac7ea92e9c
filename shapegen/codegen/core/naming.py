"""
Naming utilities for generated identifiers.

Shape names come from the model and may collide with target language
keywords, builtin globals, or each other once namespaces are dropped.
``NameSanitizer`` turns them into stable, unique identifiers.
"""

import re
from enum import Enum
from typing import Dict, Iterable, Optional, Set

_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_INVALID_CHARS = re.compile(r"[^a-zA-Z0-9_$]")


class NamingCase(Enum):
    """Case styles a sanitized name can be converted to."""
    PRESERVE = "preserve"
    SNAKE_CASE = "snake"
    CAMEL_CASE = "camel"
    PASCAL_CASE = "pascal"
    SCREAMING_SNAKE = "screaming_snake"


def to_snake_case(name: str) -> str:
    """``maxItemCount`` / ``max-item count`` -> ``max_item_count``."""
    words = _WORD_BOUNDARY.sub(r"\1_\2", str(name))
    words = re.sub(r"[-\s_]+", "_", words)
    return words.lower().strip("_")


def to_camel_case(name: str) -> str:
    head, *rest = to_snake_case(name).split("_")
    return head + "".join(part.capitalize() for part in rest)


def to_pascal_case(name: str) -> str:
    return "".join(part.capitalize() for part in to_snake_case(name).split("_"))


_CONVERTERS = {
    NamingCase.PRESERVE: lambda name: name,
    NamingCase.SNAKE_CASE: to_snake_case,
    NamingCase.CAMEL_CASE: to_camel_case,
    NamingCase.PASCAL_CASE: to_pascal_case,
    NamingCase.SCREAMING_SNAKE: lambda name: to_snake_case(name).upper(),
}


class NameSanitizer:
    """Produces unique, non-reserved identifiers.

    Results are memoized per ``key`` so that every reference to the same
    shape sees the same name, and a second shape whose name sanitizes to an
    already used identifier gets a numbered suffix instead.
    """

    def __init__(self, reserved_words: Iterable[str] = (), builtin_types: Iterable[str] = ()):
        self.reserved_words: Set[str] = set(reserved_words)
        self.builtin_types: Set[str] = set(builtin_types)
        self._assigned: Dict[str, str] = {}
        self._taken: Set[str] = set()

    def sanitize_name(self, name: str, target_case: NamingCase = NamingCase.PRESERVE,
                      suffix_on_conflict: str = "_", key: Optional[str] = None) -> str:
        """
        Return the identifier for ``name``.

        Args:
            name: Name as written in the model
            target_case: Case style of the result
            suffix_on_conflict: Appended to reserved names and before counters
            key: Identity of the named thing, defaults to ``name``

        Returns:
            An identifier that is not reserved and not used by another key
        """
        memo_key = f"{key or name}|{target_case.value}|{suffix_on_conflict}"
        if memo_key not in self._assigned:
            candidate = _CONVERTERS[target_case](self._clean(name))
            identifier = self._unique(candidate, suffix_on_conflict)
            self._assigned[memo_key] = identifier
            self._taken.add(identifier)
        return self._assigned[memo_key]

    def is_reserved(self, name: str) -> bool:
        return name in self.reserved_words or name in self.builtin_types

    def _clean(self, name: str) -> str:
        cleaned = _INVALID_CHARS.sub("_", name)
        if not cleaned:
            return "field"
        if cleaned[0].isdigit():
            return f"_{cleaned}"
        return cleaned

    def _unique(self, name: str, suffix: str) -> str:
        if self.is_reserved(name):
            name = f"{name}{suffix}"

        candidate, counter = name, 1
        while candidate in self._taken:
            candidate = f"{name}{suffix}{counter}"
            counter += 1
        return candidate

    def reset_used_names(self):
        """Forget every assigned name; used once per generated file."""
        self._taken.clear()
        self._assigned.clear()
