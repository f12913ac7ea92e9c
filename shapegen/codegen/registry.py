"""
Generator registry.

Maps language names and their aliases to generator classes and builds
configured generator instances on request.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from .core.config import GeneratorConfig, load_config
from .core.errors import GeneratorError
from .core.generator import CodeGenerator

ConfigSource = Union[GeneratorConfig, Dict[str, Any], str, Path, None]


class RegistryError(GeneratorError):
    """Unknown language, bad registration, or a generator that failed to build."""

    pass


class GeneratorRegistry:
    """Language name -> generator class, with case-insensitive aliases."""

    def __init__(self):
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a generator class under a primary name.

        An existing registration is kept unless ``replace`` is set.

        Raises:
            RegistryError: If the class is not a CodeGenerator, or an alias
                is already taken by another language
        """
        if not (isinstance(generator_class, type) and issubclass(generator_class, CodeGenerator)):
            raise RegistryError(f"{generator_class!r} is not a CodeGenerator subclass")

        primary = language.lower()
        if primary in self._generators and not replace:
            return

        for alias in aliases or []:
            alias_key = alias.lower()
            if alias_key == primary or replace:
                continue
            if alias_key in self._generators:
                raise RegistryError(f"Alias '{alias}' conflicts with existing primary language")
            owner = self._aliases.get(alias_key)
            if owner is not None and owner != primary:
                raise RegistryError(f"Alias '{alias}' already points to '{owner}'")

        self._generators[primary] = generator_class
        for alias in aliases or []:
            if alias.lower() != primary:
                self._aliases[alias.lower()] = primary

    def unregister(self, language: str):
        """Remove a language and every alias pointing at it."""
        primary = language.lower()
        self._generators.pop(primary, None)
        self._aliases = {a: p for a, p in self._aliases.items() if p != primary}

    def resolve_language(self, language: str) -> str:
        """
        Map a language name or alias to its primary name.

        Raises:
            RegistryError: If nothing is registered under that name
        """
        key = language.lower()
        if key in self._generators:
            return key
        if key in self._aliases:
            return self._aliases[key]
        raise RegistryError(
            f"No generator registered for language: {language}. "
            f"Available: {', '.join(self.list_languages())}"
        )

    def is_supported(self, language: str) -> bool:
        key = language.lower()
        return key in self._generators or key in self._aliases

    def get_generator_class(self, language: str) -> Type[CodeGenerator]:
        return self._generators[self.resolve_language(language)]

    def create_generator(self, language: str, config: ConfigSource = None) -> CodeGenerator:
        """
        Build a configured generator.

        Args:
            language: Language name or alias
            config: A GeneratorConfig used as is, a dict of overrides, a path
                to a JSON config file, or None for the language defaults

        Raises:
            RegistryError: If the language is unknown or the configuration
                is rejected
        """
        try:
            primary = self.resolve_language(language)

            if isinstance(config, GeneratorConfig):
                final_config = config
            elif isinstance(config, (str, Path)):
                final_config = load_config(primary, config_file=config)
            elif isinstance(config, dict):
                final_config = load_config(primary, custom_config=config)
            elif config is None:
                final_config = load_config(primary)
            else:
                raise RegistryError(f"Invalid config type: {type(config)}")

            return self._generators[primary](final_config)

        except RegistryError:
            raise
        except GeneratorError as e:
            raise RegistryError(f"Failed to create {language} generator: {e}") from e

    def list_languages(self) -> List[str]:
        """Registered primary names, sorted."""
        return sorted(self._generators)

    def get_aliases_for_language(self, language: str) -> List[str]:
        primary = language.lower()
        return sorted(alias for alias, target in self._aliases.items() if target == primary)

    def list_all_names(self) -> Dict[str, List[str]]:
        """Primary name -> [primary name, *aliases]."""
        return {
            language: [language] + self.get_aliases_for_language(language)
            for language in self._generators
        }

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Describe a registered language.

        Builds a throwaway generator with default settings to read its
        language name and file extension.
        """
        primary = self.resolve_language(language)
        generator_class = self._generators[primary]
        generator = generator_class(load_config(primary))

        return {
            "name": generator.language_name,
            "class": generator_class.__name__,
            "file_extension": generator.file_extension,
            "aliases": self.get_aliases_for_language(primary),
            "module": generator_class.__module__,
        }


_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Return the process-wide registry, registering built-in generators first."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _auto_register_generators(_global_registry)
    return _global_registry


def _auto_register_generators(registry: GeneratorRegistry):
    from .languages.typescript import TypeScriptGenerator

    registry.register("typescript", TypeScriptGenerator, aliases=["ts"])


def register_generator(
    language: str,
    generator_class: Type[CodeGenerator],
    aliases: Optional[List[str]] = None,
):
    get_registry().register(language, generator_class, aliases)


def get_generator(language: str, config: ConfigSource = None) -> CodeGenerator:
    """Build a generator from the global registry."""
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    return get_registry().is_supported(language)


def resolve_language(language: str) -> str:
    """Resolve a language name or alias to its primary name."""
    return get_registry().resolve_language(language)


def get_language_info(language: str) -> Dict[str, Any]:
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Info for every registered language, keyed by primary name."""
    return {language: get_language_info(language) for language in list_supported_languages()}
