"""
TypeScript-specific code writer.

Adds deduplicated import tracking and JSDoc rendering on top of CodeWriter.
Imports are collected separately from the body and rendered by the driver.
"""

import copy
import json
from typing import Dict, List, Optional

from ...core.errors import GeneratorError
from ...core.writer import CodeWriter


def quote(value: str) -> str:
    """Render a TypeScript double-quoted string literal."""
    return json.dumps(value, ensure_ascii=False)


class TypeScriptWriter(CodeWriter):
    """Code writer for TypeScript modules."""

    def __init__(self, indent_size: int = 2, use_tabs: bool = False, line_ending: str = "\n"):
        super().__init__(indent_size, use_tabs, line_ending)
        # module -> {alias: name}
        self._imports: Dict[str, Dict[str, str]] = {}

    def add_import(self, name: str, alias: Optional[str] = None, module: str = "") -> "TypeScriptWriter":
        """
        Register a named import.

        Registering the same import twice is a no-op. Binding one alias to two
        different names is an error.
        """
        alias = alias or name
        for other_module, bindings in self._imports.items():
            bound = bindings.get(alias)
            if bound is not None and (bound != name or other_module != module):
                raise GeneratorError(
                    f"Import alias '{alias}' already bound to "
                    f"'{bound}' from \"{other_module}\""
                )
        self._imports.setdefault(module, {})[alias] = name
        return self

    @property
    def imports(self) -> Dict[str, Dict[str, str]]:
        """Registered imports as ``{module: {alias: name}}``."""
        return copy.deepcopy(self._imports)

    def import_statements(self) -> List[str]:
        """Render one import statement per module, sorted."""
        statements = []
        for module in sorted(self._imports):
            bindings = self._imports[module]
            specifiers = []
            for alias in sorted(bindings, key=lambda a: (bindings[a], a)):
                name = bindings[alias]
                specifiers.append(name if name == alias else f"{name} as {alias}")
            statements.append(f"import {{ {', '.join(specifiers)} }} from {quote(module)};")
        return statements

    def write_docs(self, docs: Optional[str]) -> bool:
        """Write a JSDoc block. Returns True if anything was written."""
        if not docs or not docs.strip():
            return False
        lines = docs.strip().replace("*/", "*\\/").split("\n")
        self.write("/**")
        for line in lines:
            self.write(f" * {line.rstrip()}".rstrip())
        self.write(" */")
        return True

    def _snapshot_state(self):
        return copy.deepcopy(self._imports)

    def _restore_state(self, state) -> None:
        self._imports = state
