import logging

import pytest

from shapegen.codegen import generate_from_model, quick_generate
from shapegen.codegen.core.errors import ConfigError, UnresolvedReferenceError
from shapegen.codegen.core.generator import generate_code
from shapegen.codegen.core.model import Member, MemberList, Model, PlainStructure, ShapeId, TypeKind, TypeRef, load_model
from shapegen.codegen.languages.typescript import (
    TypeScriptGenerator,
    create_strict_presence_generator,
    create_typescript_generator,
)

from conftest import member, sid, smithy_model, structure

HEADER = "// Code generated by shapegen. DO NOT EDIT.\n\n"


def _broken_model():
    good = PlainStructure(ShapeId.parse(sid("Good")))
    missing = TypeRef(TypeKind.STRUCTURE, shape_id=ShapeId.parse(sid("Missing")))
    broken = PlainStructure(ShapeId.parse(sid("Broken")), MemberList([Member("ref", missing)]))
    return Model([good, broken])


def test_generate_renders_complete_file(person_model):
    code = create_typescript_generator().generate(person_model)

    assert code == (
        HEADER
        + 'import { isa as __isa } from "@aws-sdk/smithy-client";\n'
        "\n"
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
    )


def test_no_header_without_comments(person_model):
    code = create_typescript_generator({"add_comments": False}).generate(person_model)

    assert code.startswith('import { isa as __isa } from "@aws-sdk/smithy-client";\n\n')


def test_imports_are_merged_across_shapes(error_model):
    code = create_typescript_generator().generate(error_model)

    assert code.count("import {") == 1
    assert (
        'import { SmithyException as __SmithyException, isa as __isa } '
        'from "@aws-sdk/smithy-client";'
    ) in code


def test_referenced_structures_come_first():
    model = load_model(
        smithy_model(
            {
                "Outer": structure({"inner": member("Inner")}, mixins=["Base"]),
                "Inner": structure({"value": member("smithy.api#String")}),
                "Base": structure(),
            }
        )
    )
    code = create_typescript_generator().generate(model)

    assert (
        code.index("export interface Base")
        < code.index("export interface Inner")
        < code.index("export interface Outer")
    )


def test_recursive_structures_generate_once():
    model = load_model(
        smithy_model(
            {
                "Node": structure({"children": member("NodeList")}),
                "NodeList": {"type": "list", "member": {"target": sid("Node")}},
            }
        )
    )
    code = create_typescript_generator().generate(model)

    assert code.count("export interface Node ") == 1
    assert "children: obj.children == null ? obj.children : obj.children.map((item) => Node.filterSensitiveLog(item))," in code


def test_failure_propagates_and_is_logged(caplog):
    generator = create_typescript_generator()

    with caplog.at_level(logging.ERROR, logger="shapegen"):
        with pytest.raises(UnresolvedReferenceError):
            generator.generate(_broken_model())

    assert "Failed to generate smithy.example#Broken" in caplog.text


def test_generate_code_wraps_failure():
    result = generate_code(create_typescript_generator(), _broken_model())

    assert result.success is False
    assert result.code == ""
    assert "smithy.example#Broken$ref" in result.error_message
    assert isinstance(result.exception, UnresolvedReferenceError)


def test_generate_code_metadata_and_warnings(error_model):
    result = generate_code(create_typescript_generator(), error_model)

    assert result.success
    assert result.metadata["language"] == "typescript"
    assert result.metadata["file_extension"] == ".ts"
    assert result.metadata["structure_count"] == 3
    assert result.metadata["error_count"] == 3
    assert "Structure 'smithy.example#Unavailable' has no members" in result.warnings
    assert "\n\n\n" not in result.code


def test_generate_code_counts_sensitive_members(account_model):
    result = generate_code(create_typescript_generator(), account_model)

    assert result.metadata["sensitive_member_count"] == 2
    assert result.metadata["error_count"] == 0


def test_validate_model_reports_renamed_structures():
    model = load_model(smithy_model({"Object": structure({"a": member("smithy.api#String")})}))

    warnings = create_typescript_generator().validate_model(model)

    assert any("renamed to Object_" in warning for warning in warnings)


def test_validate_model_reports_bad_config(person_model):
    generator = create_typescript_generator({"optional_null_union": "yes"})

    assert "optional_null_union must be a boolean, got 'yes'" in generator.validate_model(person_model)


def test_generate_single_shape(account_model):
    generator = create_typescript_generator()
    code = generator.generate_single_shape(account_model, account_model.get_shape(sid("Profile")))

    assert "export interface Profile {" in code
    assert "export interface Account" not in code
    assert 'import { SENSITIVE_STRING, isa as __isa } from "@aws-sdk/smithy-client";' in code


def test_strict_presence_generator(person_model):
    code = create_strict_presence_generator().generate(person_model)

    assert "  name: string | undefined;\n" in code


def test_type_overrides(person_model):
    model = load_model(
        smithy_model({"Event": structure({"at": member("smithy.api#Timestamp")})})
    )
    code = create_typescript_generator({"type_overrides": {"timestamp": "string"}}).generate(model)

    assert "  at?: string | null;\n" in code


def test_generate_from_model_accepts_documents(person_doc):
    result = generate_from_model(person_doc, "ts")

    assert result.success
    assert "export interface Person {" in result.code


def test_quick_generate_accepts_json_text():
    code = quick_generate('{"smithy": "2.0", "shapes": {"a#Empty": {"type": "structure"}}}')

    assert "export namespace Empty {" in code


def test_generator_identity():
    generator = TypeScriptGenerator()

    assert generator.language_name == "typescript"
    assert generator.file_extension == ".ts"
    assert generator.template_exists("file.ts.j2")


def test_unknown_type_override_is_a_config_error(person_model):
    generator = create_typescript_generator({"type_overrides": {"datetime": "string"}})

    with pytest.raises(ConfigError, match="datetime"):
        generator.generate(person_model)


def test_bad_settings_raise_config_error():
    with pytest.raises(ConfigError, match="Invalid sensitive_marker"):
        create_typescript_generator({"sensitive_marker": ""})
