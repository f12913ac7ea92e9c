import io
import json

import pytest

from shapegen.cli import build_parser, main


@pytest.fixture
def model_file(tmp_path, person_doc):
    path = tmp_path / "model.json"
    path.write_text(json.dumps(person_doc))
    return path


def test_parser_defaults():
    args = build_parser().parse_args(["model.json"])

    assert args.file == "model.json"
    assert args.language == "typescript"
    assert args.log_level == "WARNING"
    assert args.output is None


def test_file_and_url_are_exclusive():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["model.json", "--url", "http://x/model.json"])


def test_generate_to_file(tmp_path, model_file):
    output = tmp_path / "models.ts"

    assert main([str(model_file), "-o", str(output)]) == 0

    code = output.read_text()
    assert code.startswith("// Code generated by shapegen. DO NOT EDIT.\n")
    assert "export interface Person {" in code


def test_alias_and_no_comments(tmp_path, model_file):
    output = tmp_path / "models.ts"

    assert main([str(model_file), "-l", "ts", "--no-comments", "-o", str(output)]) == 0

    assert output.read_text().startswith("import {")


def test_config_file_is_applied(tmp_path, model_file):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"required_undefined_union": True}))
    output = tmp_path / "models.ts"

    assert main([str(model_file), "--config", str(config), "-o", str(output)]) == 0

    assert "  name: string | undefined;\n" in output.read_text()


def test_piped_output_is_plain_code(model_file, capsys):
    assert main([str(model_file)]) == 0

    out = capsys.readouterr().out
    assert out.startswith("// Code generated by shapegen.")
    assert out.endswith("}\n")


def test_stdin_input(monkeypatch, tmp_path, person_doc):
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(person_doc)))
    output = tmp_path / "models.ts"

    assert main(["--stdin", "-o", str(output)]) == 0
    assert "export namespace Person {" in output.read_text()


def test_missing_input_source(capsys):
    assert main([]) == 1
    assert "Input source required" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.json")]) == 1
    assert "Failed to load input" in capsys.readouterr().err


def test_unsupported_language(model_file, capsys):
    assert main([str(model_file), "-l", "cobol"]) == 1
    assert "Unsupported language 'cobol'" in capsys.readouterr().err


def test_invalid_model_fails(tmp_path, capsys):
    path = tmp_path / "model.json"
    path.write_text(json.dumps({"shapes": {"a#Bad": {"type": "structure", "traits": {"smithy.api#error": "teapot"}}}}))

    assert main([str(path)]) == 1
    assert "Error:" in capsys.readouterr().err


def test_bad_config_file(tmp_path, model_file, capsys):
    assert main([str(model_file), "--config", str(tmp_path / "absent.json")]) == 1
    assert "Configuration file not found" in capsys.readouterr().err


def test_list_languages(capsys):
    assert main(["--list-languages"]) == 0
    assert "typescript" in capsys.readouterr().out


def test_language_info(capsys):
    assert main(["--language-info", "ts"]) == 0
    assert "TypeScriptGenerator" in capsys.readouterr().out


def test_language_info_unknown(capsys):
    assert main(["--language-info", "cobol"]) == 1
