# ==============================================
# Tests for the CLI
# ==============================================

import json

import pytest

from matclass.cli import main


def test_map(capsys):
    assert main(["map", "vector", "double"]) == 0
    assert "class=DOUBLE (6) type=DOUBLE (9)" in capsys.readouterr().out


def test_map_contract_violation(capsys):
    assert main(["map", "unsupported", "double"]) == 2
    assert "Error" in capsys.readouterr().err


def test_map_scalar_kind_with_variable(capsys):
    assert main(["map", "element", "variable"]) == 2


def test_classify(capsys):
    assert main(["classify", "--dims", "1", "1", "--class-code", "cell", "--type-code", "cell"]) == 0
    assert "kind=cell_array value_type=variable" in capsys.readouterr().out


def test_classify_rank_guard(capsys):
    assert main(["classify", "--dims", "5", "--class-code", "6", "--type-code", "9"]) == 0
    assert "kind=unsupported" in capsys.readouterr().out


def test_classify_bad_code(capsys):
    assert main(["classify", "--dims", "1", "1", "--class-code", "nope", "--type-code", "9"]) == 2


def test_table(capsys):
    assert main(["table"]) == 0
    out = capsys.readouterr().out
    assert "utf16" in out
    assert "CHAR" in out


def test_unknown_command():
    with pytest.raises(SystemExit):
        main(["decompress"])


def test_catalog(tmp_path, monkeypatch, fresh_config, sample_headers, capsys):
    metadata_dir = tmp_path / "metadata"
    monkeypatch.setenv("MATCLASS_METADATA_DIR", str(metadata_dir))
    headers_file = tmp_path / "headers.json"
    headers_file.write_text(json.dumps(sample_headers))

    assert main(["catalog", str(headers_file), "--save"]) == 0

    out = capsys.readouterr().out
    assert "9 variables, 2 unsupported" in out
    assert (metadata_dir / "catalog.json").exists()


def test_catalog_requires_a_list(tmp_path, fresh_config):
    headers_file = tmp_path / "headers.json"
    headers_file.write_text(json.dumps({"dims": [1, 1]}))
    assert main(["catalog", str(headers_file)]) == 2


def test_catalog_missing_file(tmp_path, fresh_config, capsys):
    assert main(["catalog", str(tmp_path / "missing.json")]) == 2
    assert "Error" in capsys.readouterr().err


def test_unknown_log_level_does_not_break_commands(monkeypatch, fresh_config, capsys):
    monkeypatch.setenv("MATCLASS_LOG_LEVEL", "VERBOSE")
    assert main(["table"]) == 0
    assert "double" in capsys.readouterr().out
