"""Tests for the command line interface."""

import json
from unittest.mock import patch

import pytest
from sqlalchemy import create_engine, text

from model_codegen.cli.main import build_parser, main
from model_codegen.core.config import config

SCHEMA_DOCUMENT = {
    "tables": [
        {
            "name": "User",
            "columns": [
                {
                    "name": "id",
                    "data_type": "int64",
                    "is_key": True,
                    "is_auto_increment": True,
                },
                {"name": "name", "data_type": "string", "size": 50},
            ],
        },
        {
            "name": "Stock",
            "columns": [
                {"name": "code", "data_type": "string", "is_key": True, "size": 20},
                {"name": "qty", "data_type": "int32"},
            ],
        },
    ]
}


@pytest.fixture(autouse=True)
def no_logging_setup():
    """Keep the CLI from reconfiguring logging during tests."""
    with patch("model_codegen.cli.main.setup_logger"):
        yield


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "tables.json"
    path.write_text(json.dumps(SCHEMA_DOCUMENT), encoding="utf-8")
    return path


class TestParser:
    """Test suite for argument parsing."""

    def test_models_arguments(self):
        args = build_parser().parse_args(["--flavor", "legacy", "models", "A|B", "out"])

        assert args.command == "models"
        assert args.tables == "A|B"
        assert str(args.output) == "out"
        assert args.flavor == "legacy"

    def test_command_is_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_sources_are_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(
                ["--database-url", "sqlite://", "--schema-file", "x.json", "list"]
            )


class TestMain:
    """Test suite for main()."""

    def test_list_tables(self, schema_file, capsys):
        exit_code = main(["--schema-file", str(schema_file), "list"])

        assert exit_code == config.exit_codes.success
        assert capsys.readouterr().out.splitlines() == ["User", "Stock"]

    def test_models_printed(self, schema_file, capsys):
        exit_code = main(["--schema-file", str(schema_file), "models", "User"])

        out = capsys.readouterr().out
        assert exit_code == config.exit_codes.success
        assert "public partial class User : DbObjectModel<User>" in out

    def test_models_written(self, schema_file, tmp_path, capsys):
        output_dir = tmp_path / "Models"

        exit_code = main(
            ["--schema-file", str(schema_file), "models", "User|Stock", str(output_dir)]
        )

        assert exit_code == config.exit_codes.success
        assert (output_dir / "User.cs").exists()
        assert (output_dir / "User_Ex.cs").exists()
        assert "public class Stock : IDbObject" in (output_dir / "Stock.cs").read_text()

    def test_legacy_flavor(self, schema_file, capsys):
        exit_code = main(
            ["--schema-file", str(schema_file), "--flavor", "legacy", "models", "User"]
        )

        assert exit_code == config.exit_codes.success
        assert "public abstract class User : LinqObjectModel<User>" in (
            capsys.readouterr().out
        )

    def test_bad_arguments_return_usage_error(self, schema_file):
        assert main([]) == config.exit_codes.error_usage
        assert (
            main(["--schema-file", str(schema_file), "--flavor", "modern", "list"])
            == config.exit_codes.error_usage
        )

    def test_help_returns_success(self, capsys):
        assert main(["--help"]) == config.exit_codes.success
        assert "model-codegen" in capsys.readouterr().out

    def test_empty_table_list_generates_all_tables(self, schema_file, capsys):
        exit_code = main(["--schema-file", str(schema_file), "models", ""])

        out = capsys.readouterr().out
        assert exit_code == config.exit_codes.success
        assert "DbObjectModel<User>" in out
        assert "public partial class Stock : IDbObject" in out

    def test_missing_schema_file(self, tmp_path):
        exit_code = main(["--schema-file", str(tmp_path / "missing.json"), "list"])

        assert exit_code == config.exit_codes.error_file_not_found

    def test_unknown_table(self, schema_file):
        exit_code = main(["--schema-file", str(schema_file), "models", "Order"])

        assert exit_code == config.exit_codes.error_generation

    def test_invalid_schema_document(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"tables": [{"name": "User"}]}), encoding="utf-8")

        exit_code = main(["--schema-file", str(path), "list"])

        assert exit_code == config.exit_codes.error_generation

    def test_database_url_required(self):
        with patch.object(config, "database_url", None):
            exit_code = main(["list"])

        assert exit_code == config.exit_codes.error_generation

    def test_database_url(self, tmp_path, capsys):
        url = f"sqlite:///{tmp_path / 'app.db'}"
        engine = create_engine(url)
        with engine.begin() as conn:
            conn.execute(text("CREATE TABLE orders (id INTEGER PRIMARY KEY, total REAL)"))
        engine.dispose()

        exit_code = main(["--database-url", url, "models", "orders"])

        assert exit_code == config.exit_codes.success
        assert "public partial class orders : DbObjectModel<orders>" in (
            capsys.readouterr().out
        )
