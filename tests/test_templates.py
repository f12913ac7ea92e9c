from pathlib import Path

import pytest

from shapegen.codegen.core.templates import TemplateEngine, TemplateError, create_template_engine


def test_case_filters():
    engine = create_template_engine()

    rendered = engine.render_string(
        "{{ name | snake_case }} {{ name | camel_case }} {{ name | pascal_case }}",
        {"name": "getPersonOutput"},
    )

    assert rendered == "get_person_output getPersonOutput GetPersonOutput"


def test_comment_filter_marks_every_line():
    engine = create_template_engine()

    rendered = engine.render_string('{{ text | comment("#") }}', {"text": "one\n\ntwo"})

    assert rendered == "# one\n#\n# two"


def test_in_memory_templates():
    engine = TemplateEngine(Path("/nonexistent/templates"))
    engine.add_template("hello.j2", "Hello {{ who }}\n")

    assert engine.template_exists("hello.j2")
    assert engine.render_template("hello.j2", {"who": "shapes"}) == "Hello shapes\n"


def test_undefined_variables_are_errors():
    engine = create_template_engine()

    with pytest.raises(TemplateError):
        engine.render_string("{{ missing }}", {})


def test_missing_template():
    engine = create_template_engine()

    assert not engine.template_exists("absent.j2")
    with pytest.raises(TemplateError, match="absent.j2"):
        engine.render_template("absent.j2", {})
