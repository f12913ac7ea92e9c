"""Rendering of the retryable trait on error interfaces."""

from ...core.model import StructureShape
from .writer import TypeScriptWriter


def write_retryable_trait(writer: TypeScriptWriter, shape: StructureShape, separator: str = ";") -> None:
    """
    Write the ``$retryable`` property of an error shape, if it has one.

    Shapes without a retryable trait produce no output.
    """
    retryable = getattr(shape, "retryable", None)
    if retryable is None:
        return
    with writer.open_block("$retryable: {", f"}}{separator}"):
        if retryable.throttling:
            writer.write("throttling: true,")
