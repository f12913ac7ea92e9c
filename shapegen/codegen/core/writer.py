"""
Append-only code writer.

Tracks indentation, guarantees that opened blocks are closed, and supports
all-or-nothing transactions so a failed emission leaves no partial output.
"""

from contextlib import contextmanager
from typing import Any, Iterator, List


class CodeWriter:
    """Line-oriented text sink with indentation and block scoping."""

    def __init__(self, indent_size: int = 4, use_tabs: bool = False, line_ending: str = "\n"):
        self.indent_text = "\t" if use_tabs else " " * indent_size
        self.line_ending = line_ending
        self._lines: List[str] = []
        self._level = 0

    @property
    def lines(self) -> List[str]:
        """Copy of the lines written so far."""
        return list(self._lines)

    def indent(self, levels: int = 1) -> "CodeWriter":
        self._level += levels
        return self

    def dedent(self, levels: int = 1) -> "CodeWriter":
        self._level = max(0, self._level - levels)
        return self

    def write(self, text: str = "") -> "CodeWriter":
        """Append text at the current indentation, one line per newline."""
        prefix = self.indent_text * self._level
        for line in text.split("\n"):
            self._lines.append(f"{prefix}{line}" if line.strip() else "")
        return self

    @contextmanager
    def open_block(self, opening: str, closing: str = "}") -> Iterator["CodeWriter"]:
        """
        Write ``opening``, indent the body, then write ``closing``.

        The closing line is written even if the body raises.
        """
        self.write(opening)
        self.indent()
        try:
            yield self
        finally:
            self.dedent()
            self.write(closing)

    @contextmanager
    def transaction(self) -> Iterator["CodeWriter"]:
        """
        Roll back everything written inside the block if it raises.

        The exception is re-raised after the rollback.
        """
        line_count = len(self._lines)
        level = self._level
        state = self._snapshot_state()
        try:
            yield self
        except BaseException:
            del self._lines[line_count:]
            self._level = level
            self._restore_state(state)
            raise

    def _snapshot_state(self) -> Any:
        """Hook for subclasses tracking extra state (imports, etc.)."""
        return None

    def _restore_state(self, state: Any) -> None:
        pass

    def to_string(self) -> str:
        """Render the body text."""
        if not self._lines:
            return ""
        return self.line_ending.join(self._lines) + self.line_ending

    def __str__(self) -> str:
        return self.to_string()
