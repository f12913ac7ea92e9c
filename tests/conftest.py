import pytest

from shapegen.codegen.core.model import load_model
from shapegen.codegen.core.symbols import SymbolProvider
from shapegen.codegen.languages.typescript.config import TypeScriptConfig
from shapegen.codegen.languages.typescript.naming import create_typescript_sanitizer
from shapegen.codegen.languages.typescript.structure import StructureGenerator
from shapegen.codegen.languages.typescript.types import TypeScriptTypeMapper
from shapegen.codegen.languages.typescript.writer import TypeScriptWriter

NS = "smithy.example"


def sid(name: str) -> str:
    """Absolute shape id in the test namespace."""
    return f"{NS}#{name}"


def member(target: str, *traits: str, docs: str = None) -> dict:
    """Build a JSON AST member. Bare names are resolved in the test namespace."""
    if "#" not in target:
        target = sid(target)
    member_traits = {f"smithy.api#{trait}": {} for trait in traits}
    if docs:
        member_traits["smithy.api#documentation"] = docs
    data = {"target": target}
    if member_traits:
        data["traits"] = member_traits
    return data


def structure(members: dict = None, traits: dict = None, mixins: list = None) -> dict:
    data = {"type": "structure", "members": members or {}}
    if traits:
        data["traits"] = traits
    if mixins:
        data["mixins"] = [{"target": sid(name)} for name in mixins]
    return data


def smithy_model(shapes: dict) -> dict:
    """Wrap shapes keyed by bare name into a JSON AST document."""
    return {"smithy": "2.0", "shapes": {sid(name): shape for name, shape in shapes.items()}}


def render(model, name: str, add_comments: bool = True, **ts_options):
    """Run StructureGenerator for one shape; return (body, import statements)."""
    ts_config = TypeScriptConfig(**ts_options)
    provider = SymbolProvider(model, create_typescript_sanitizer(), ts_config.interfaces)
    writer = TypeScriptWriter()
    StructureGenerator(
        provider,
        TypeScriptTypeMapper(provider),
        writer,
        model.get_shape(sid(name)),
        ts_config=ts_config,
        add_comments=add_comments,
    ).run()
    return writer.to_string(), writer.import_statements()


@pytest.fixture
def person_doc():
    return smithy_model(
        {
            "Person": structure(
                {
                    "name": member("smithy.api#String", "required"),
                    "age": member("smithy.api#Integer"),
                }
            )
        }
    )


@pytest.fixture
def person_model(person_doc):
    return load_model(person_doc)


@pytest.fixture
def error_doc():
    return smithy_model(
        {
            "NoSuchResource": structure(
                {"resourceType": member("smithy.api#String", "required")},
                traits={"smithy.api#error": "client"},
            ),
            "Throttled": structure(
                {"message": member("smithy.api#String")},
                traits={
                    "smithy.api#error": "server",
                    "smithy.api#retryable": {"throttling": True},
                },
            ),
            "Unavailable": structure(
                {},
                traits={"smithy.api#error": "server", "smithy.api#retryable": {}},
            ),
        }
    )


@pytest.fixture
def error_model(error_doc):
    return load_model(error_doc)


@pytest.fixture
def account_doc():
    """Nested structures inside lists, maps and sparse containers."""
    return smithy_model(
        {
            "Secret": {"type": "string", "traits": {"smithy.api#sensitive": {}}},
            "StringList": {"type": "list", "member": {"target": "smithy.api#String"}},
            "SecretList": {"type": "list", "member": {"target": sid("Secret")}},
            "ProfileList": {"type": "list", "member": {"target": sid("Profile")}},
            "ProfileGrid": {"type": "list", "member": {"target": sid("ProfileList")}},
            "SparseProfiles": {
                "type": "list",
                "member": {"target": sid("Profile")},
                "traits": {"smithy.api#sparse": {}},
            },
            "ProfileMap": {
                "type": "map",
                "key": {"target": "smithy.api#String"},
                "value": {"target": sid("Profile")},
            },
            "Profile": structure(
                {
                    "ssn": member("Secret"),
                    "email": member("smithy.api#String", "sensitive"),
                    "nickname": member("smithy.api#String"),
                }
            ),
            "Account": structure(
                {
                    "id": member("smithy.api#String", "required"),
                    "profile": member("Profile"),
                    "profiles": member("ProfileList"),
                    "grid": member("ProfileGrid"),
                    "maybe": member("SparseProfiles"),
                    "byName": member("ProfileMap"),
                    "tags": member("StringList"),
                    "secrets": member("SecretList"),
                }
            ),
        }
    )


@pytest.fixture
def account_model(account_doc):
    return load_model(account_doc)
