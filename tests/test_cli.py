"""
Tests for the command-line interface.
"""
import json
import logging

import pytest

from appwrite_typegen.cli import build_parser, main, overrides_from_args


@pytest.fixture(autouse=True)
def restore_root_logging():
    """main() reconfigures the root logger; put the previous handlers back."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_flags_map_to_overrides():
    args = build_parser().parse_args([
        "-i", "schema.json",
        "-o", "out.ts",
        "--no-enums",
        "--no-interfaces",
        "--no-database",
        "--no-collections",
    ])

    assert overrides_from_args(args) == {
        "input_path": "schema.json",
        "output_path": "out.ts",
        "generate_enums": False,
        "generate_interfaces": False,
        "generate_database_constants": False,
        "generate_collection_constants": False,
    }


def test_unset_flags_do_not_override():
    args = build_parser().parse_args([])
    assert overrides_from_args(args) == {}


def test_successful_run_writes_types(schema_file, in_tmp_cwd):
    output_path = in_tmp_cwd / "out" / "types.ts"

    exit_code = main(["-i", str(schema_file), "-o", str(output_path), "--no-color"])

    assert exit_code == 0
    content = output_path.read_text(encoding="utf-8")
    assert content.startswith("// Auto-generated Appwrite Types\n")
    assert "export interface User {" in content


def test_config_file_and_flags(schema_file, in_tmp_cwd):
    config_path = in_tmp_cwd / "typegen.json"
    config_path.write_text(json.dumps({
        "inputPath": str(schema_file),
        "outputPath": "from-config.ts",
    }))

    exit_code = main(["-c", str(config_path), "--no-interfaces", "--no-color"])

    assert exit_code == 0
    content = (in_tmp_cwd / "from-config.ts").read_text(encoding="utf-8")
    assert "export interface" not in content
    assert "export enum UserRole" in content


def test_generation_error_exits_with_1(in_tmp_cwd, capsys):
    exit_code = main(["-i", "missing.json", "-o", "types.ts", "--no-color"])

    assert exit_code == 1
    assert "Generation Error" in capsys.readouterr().err
    assert not (in_tmp_cwd / "types.ts").exists()


def test_missing_config_file_exits_with_1(in_tmp_cwd):
    assert main(["-c", "nope.json", "--no-color"]) == 1


def test_version_flag(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])

    assert exc_info.value.code == 0
    assert "appwrite-typegen" in capsys.readouterr().out
