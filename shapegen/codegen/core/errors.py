"""
Exception hierarchy for code generation.

Every failure raised while loading a model or emitting code derives from
GeneratorError so drivers can report it uniformly.
"""


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class PreconditionError(GeneratorError):
    """A generator entry point was called with a shape it cannot handle."""

    pass


class ModelError(GeneratorError):
    """The model document is malformed."""

    pass


class UnresolvedReferenceError(ModelError):
    """A member target or mixin does not resolve to a known shape."""

    def __init__(self, shape_id: str, reference: str, member: str = None):
        self.shape_id = shape_id
        self.reference = reference
        self.member = member
        location = f"{shape_id}${member}" if member else shape_id
        super().__init__(f"Unresolved reference '{reference}' in {location}")


class InvalidTraitError(ModelError):
    """A trait carries a value outside its allowed set."""

    def __init__(self, shape_id: str, trait: str, value, allowed=None):
        self.shape_id = shape_id
        self.trait = trait
        self.value = value
        message = f"Invalid value {value!r} for trait '{trait}' on {shape_id}"
        if allowed:
            message += f" (expected one of: {', '.join(sorted(allowed))})"
        super().__init__(message)


class ConfigError(GeneratorError):
    """Exception raised for configuration-related errors."""

    pass
