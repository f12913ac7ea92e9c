"""shapegen: code generation from Smithy models."""

__version__ = "0.1.0"
