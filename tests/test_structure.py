import pytest

from shapegen.codegen.core.errors import PreconditionError, UnresolvedReferenceError
from shapegen.codegen.core.model import Member, MemberList, Model, PlainStructure, ShapeId, TypeKind, TypeRef, load_model
from shapegen.codegen.core.symbols import SymbolProvider
from shapegen.codegen.languages.typescript.naming import create_typescript_sanitizer
from shapegen.codegen.languages.typescript.structure import StructureGenerator
from shapegen.codegen.languages.typescript.types import TypeScriptTypeMapper
from shapegen.codegen.languages.typescript.writer import TypeScriptWriter

from conftest import member, render, sid, smithy_model, structure

RUNTIME = '"@aws-sdk/smithy-client"'


def _generator(model, name):
    provider = SymbolProvider(model, create_typescript_sanitizer())
    writer = TypeScriptWriter()
    shape = model.get_shape(sid(name))
    return StructureGenerator(provider, TypeScriptTypeMapper(provider), writer, shape), writer


def test_person_interface_and_namespace(person_model):
    body, imports = render(person_model, "Person")

    assert body == (
        "export interface Person {\n"
        '  __type?: "Person";\n'
        "  name: string;\n"
        "  age?: number | null;\n"
        "}\n"
        "\n"
        "export namespace Person {\n"
        "  export const filterSensitiveLog = (obj: Person): any => ({\n"
        "    name: obj.name,\n"
        "    age: obj.age,\n"
        "  });\n"
        '  export const isa = (o: any): o is Person => __isa(o, "Person");\n'
        "}\n"
        "\n"
    )
    assert imports == [f"import {{ isa as __isa }} from {RUNTIME};"]


def test_error_structure(error_model):
    body, imports = render(error_model, "NoSuchResource")

    assert body.startswith(
        "export interface NoSuchResource extends __SmithyException {\n"
        '  name: "NoSuchResource";\n'
        '  $fault: "client";\n'
        "  resourceType: string;\n"
        "}\n"
    )
    assert "__type" not in body
    assert "$retryable" not in body
    assert '  export const isa = (o: any): o is NoSuchResource => __isa(o, "NoSuchResource");\n' in body
    assert imports == [
        f"import {{ SmithyException as __SmithyException, isa as __isa }} from {RUNTIME};"
    ]


def test_retryable_block_follows_fault(error_model):
    body, _ = render(error_model, "Throttled")

    assert (
        '  $fault: "server";\n'
        "  $retryable: {\n"
        "    throttling: true,\n"
        "  };\n"
        "  message?: string | null;\n"
    ) in body


def test_retryable_without_throttling_is_empty_block(error_model):
    body, _ = render(error_model, "Unavailable")

    assert '  $fault: "server";\n  $retryable: {\n  };\n}\n' in body
    assert "  export const filterSensitiveLog = (obj: Unavailable): any => ({\n  });\n" in body


def test_empty_structure():
    model = load_model(smithy_model({"Empty": structure()}))
    body, _ = render(model, "Empty")

    assert body.startswith('export interface Empty {\n  __type?: "Empty";\n}\n')
    assert "  export const filterSensitiveLog = (obj: Empty): any => ({\n  });\n" in body


def test_error_path_rejects_plain_structure(person_model):
    generator, writer = _generator(person_model, "Person")

    with pytest.raises(PreconditionError):
        generator.render_error_structure()
    assert writer.lines == []


def test_plain_path_rejects_error_structure(error_model):
    generator, _ = _generator(error_model, "NoSuchResource")

    with pytest.raises(PreconditionError):
        generator.render_non_error_structure()


def test_mixins_become_extends_clause():
    model = load_model(
        smithy_model(
            {
                "Timestamps": structure({"createdAt": member("smithy.api#Timestamp")}),
                "Owned": structure({"owner": member("smithy.api#String")}),
                "Article": structure(
                    {"title": member("smithy.api#String", "required")},
                    mixins=["Timestamps", "Owned"],
                ),
            }
        )
    )
    body, _ = render(model, "Article")

    assert body.startswith("export interface Article extends Timestamps, Owned {\n")


def test_configured_interfaces_are_imported(error_model):
    interfaces = {
        sid("NoSuchResource"): [
            {"name": "MetadataBearer", "alias": "$MetadataBearer", "module": "@aws-sdk/types"}
        ]
    }
    body, imports = render(error_model, "NoSuchResource", interfaces=interfaces)

    assert body.startswith(
        "export interface NoSuchResource extends __SmithyException, $MetadataBearer {\n"
    )
    assert 'import { MetadataBearer as $MetadataBearer } from "@aws-sdk/types";' in imports


def test_configured_exception_interface_is_not_repeated(error_model):
    interfaces = {"NoSuchResource": ["__SmithyException"]}
    body, _ = render(error_model, "NoSuchResource", interfaces=interfaces)

    assert body.startswith("export interface NoSuchResource extends __SmithyException {\n")


def test_documentation_is_rendered_as_jsdoc():
    model = load_model(
        smithy_model(
            {
                "Note": structure(
                    {
                        "text": member("smithy.api#String", docs="The note text."),
                        "pinned": member("smithy.api#Boolean"),
                    },
                    traits={"smithy.api#documentation": "A short note."},
                )
            }
        )
    )
    body, _ = render(model, "Note")

    assert body.startswith(
        "/**\n"
        " * A short note.\n"
        " */\n"
        "export interface Note {\n"
        '  __type?: "Note";\n'
        "  /**\n"
        "   * The note text.\n"
        "   */\n"
        "  text?: string | null;\n"
        "\n"
        "  pinned?: boolean | null;\n"
        "}\n"
    )

    plain, _ = render(model, "Note", add_comments=False)
    assert "/**" not in plain


def test_presence_unions_are_configurable(person_model):
    body, _ = render(
        person_model, "Person", required_undefined_union=True, optional_null_union=False
    )

    assert "  name: string | undefined;\n" in body
    assert "  age?: number;\n" in body


def test_reserved_structure_name_is_suffixed():
    model = load_model(
        smithy_model({"Object": structure({"value": member("smithy.api#String")})})
    )
    body, _ = render(model, "Object")

    assert body.startswith('export interface Object_ {\n  __type?: "Object";\n')
    assert 'export const isa = (o: any): o is Object_ => __isa(o, "Object");' in body


def test_non_identifier_member_names_are_quoted():
    model = load_model(
        smithy_model({"Headers": structure({"content-type": member("smithy.api#String")})})
    )
    body, _ = render(model, "Headers")

    assert '  "content-type"?: string | null;\n' in body
    assert '    "content-type": obj["content-type"],\n' in body


def test_unresolved_member_target_names_shape_and_member():
    shape_id = ShapeId.parse(sid("Broken"))
    missing = TypeRef(TypeKind.STRUCTURE, shape_id=ShapeId.parse(sid("Missing")))
    model = Model([PlainStructure(shape_id, MemberList([Member("ref", missing)]))])
    generator, writer = _generator(model, "Broken")

    with pytest.raises(UnresolvedReferenceError) as excinfo:
        generator.run()

    message = str(excinfo.value)
    assert "smithy.example#Broken" in message
    assert "ref" in message
    assert "smithy.example#Missing" in message
