"""
TypeScript-specific configuration and validation.

Extends the base configuration system with TypeScript-specific settings.
"""

from typing import Any, Dict, List

from ...core.config import GeneratorConfig
from ...core.errors import ConfigError


class TypeScriptConfig:
    """TypeScript-specific settings read from ``GeneratorConfig.custom``."""

    def __init__(self, **kwargs):
        """Initialize TypeScript configuration with defaults."""
        self.runtime_package = kwargs.get("runtime_package", "@aws-sdk/smithy-client")
        self.exception_interface = kwargs.get("exception_interface", "SmithyException")
        self.sensitive_marker = kwargs.get("sensitive_marker", "SENSITIVE_STRING")
        self.required_undefined_union = kwargs.get("required_undefined_union", False)
        self.optional_null_union = kwargs.get("optional_null_union", True)
        self.interfaces: Dict[str, List[Any]] = kwargs.get("interfaces", {})
        self.header = kwargs.get(
            "header", "Code generated by shapegen. DO NOT EDIT."
        )

        self._validate()

    @property
    def exception_alias(self) -> str:
        return f"__{self.exception_interface}"

    def _validate(self):
        for name in ("runtime_package", "exception_interface", "sensitive_marker"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                raise ConfigError(f"Invalid {name}: {value!r}")
        if not isinstance(self.interfaces, dict):
            raise ConfigError("interfaces must map shape ids to interface lists")

    @classmethod
    def from_generator_config(cls, config: GeneratorConfig) -> "TypeScriptConfig":
        return cls(**config.custom)


# Default configurations for common TypeScript targets
AWS_SDK_CONFIG = {
    "runtime_package": "@aws-sdk/smithy-client",
    "exception_interface": "SmithyException",
    "sensitive_marker": "SENSITIVE_STRING",
}

STRICT_PRESENCE_CONFIG = {
    "required_undefined_union": True,
    "optional_null_union": True,
}
