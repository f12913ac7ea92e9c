import json

import pytest

from shapegen.codegen.core.config import load_config
from shapegen.codegen.languages.typescript import TypeScriptGenerator
from shapegen.codegen.registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
    resolve_language,
)


def test_typescript_is_registered_with_alias():
    assert list_supported_languages() == ["typescript"]
    assert is_language_supported("TypeScript")
    assert is_language_supported("ts")
    assert not is_language_supported("go")
    assert resolve_language("TS") == "typescript"


def test_unknown_language_is_an_error():
    with pytest.raises(RegistryError, match="Available: typescript"):
        resolve_language("cobol")

    with pytest.raises(RegistryError):
        get_generator("cobol")


def test_get_generator_uses_language_defaults():
    generator = get_generator("ts")

    assert isinstance(generator, TypeScriptGenerator)
    assert generator.config.indent_size == 2


def test_get_generator_accepts_dict_config():
    generator = get_generator("typescript", {"sensitive_marker": "HIDDEN"})

    assert generator.ts_config.sensitive_marker == "HIDDEN"


def test_get_generator_accepts_config_path(tmp_path):
    path = tmp_path / "ts.json"
    path.write_text(json.dumps({"indent_size": 8}))

    assert get_generator("typescript", str(path)).config.indent_size == 8


def test_get_generator_accepts_generator_config():
    config = load_config("typescript", {"use_tabs": True})

    assert get_generator("typescript", config).config is config


def test_invalid_settings_raise_registry_error():
    with pytest.raises(RegistryError, match="Invalid runtime_package"):
        get_generator("typescript", {"runtime_package": ""})


def test_invalid_config_type():
    with pytest.raises(RegistryError, match="Invalid config type"):
        get_generator("typescript", 42)


def test_language_info():
    info = get_language_info("ts")

    assert info == {
        "name": "typescript",
        "class": "TypeScriptGenerator",
        "file_extension": ".ts",
        "aliases": ["ts"],
        "module": "shapegen.codegen.languages.typescript.generator",
    }
    assert list_all_language_info() == {"typescript": info}


def test_registry_rejects_non_generators():
    registry = GeneratorRegistry()

    with pytest.raises(RegistryError):
        registry.register("text", dict)


def test_alias_conflicts():
    registry = GeneratorRegistry()
    registry.register("typescript", TypeScriptGenerator, aliases=["ts"])

    with pytest.raises(RegistryError, match="already points to"):
        registry.register("tsx", TypeScriptGenerator, aliases=["ts"])

    with pytest.raises(RegistryError, match="conflicts with existing primary"):
        registry.register("other", TypeScriptGenerator, aliases=["typescript"])


def test_unregister_drops_aliases():
    registry = GeneratorRegistry()
    registry.register("typescript", TypeScriptGenerator, aliases=["ts"])
    registry.unregister("typescript")

    assert registry.list_languages() == []
    assert not registry.is_supported("ts")
    assert registry.list_all_names() == {}
