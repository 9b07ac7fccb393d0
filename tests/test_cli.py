"""Tests for the command-line interface"""

import logging

import pytest

from specfilter.cli.commands import create_parser, main, run_filter
from specfilter.data.models.product import Color, Product


CATALOG_TOML = """
[[products]]
name = "Red Shirt"
color = "red"

[[products]]
name = "Blue Shirt"
color = "blue"

[[products]]
name = "Green Hat"
color = "green"

[[products]]
name = "Red Hat"
color = "red"
"""


@pytest.fixture
def catalog(tmp_path):
    path = tmp_path / "catalog.toml"
    path.write_text(CATALOG_TOML)
    return str(path)


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logger = logging.getLogger("specfilter")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def output_lines(capsys):
    return capsys.readouterr().out.splitlines()


class TestParser:
    """Test cases for argument parsing"""

    def test_filter_arguments(self):
        args = create_parser().parse_args(["filter", "cat.toml", "--color", "red", "--match", "any", "--negate"])
        assert args.command == "filter"
        assert args.catalog == "cat.toml"
        assert args.color == "red"
        assert args.name is None
        assert args.match == "any"
        assert args.negate is True

    def test_invalid_match(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["filter", "cat.toml", "--match", "most"])


class TestFilterCommand:
    """Test cases for the filter command"""

    def test_by_color(self, catalog, capsys):
        assert main(["filter", catalog, "--color", "red"]) == 0
        assert output_lines(capsys) == ["Red Shirt", "Red Hat"]

    def test_by_color_and_name(self, catalog, capsys):
        assert main(["filter", catalog, "--color", "red", "--name", "Shirt"]) == 0
        assert output_lines(capsys) == ["Red Shirt"]

    def test_match_any(self, catalog, capsys):
        assert main(["filter", catalog, "--color", "blue", "--name", "Hat", "--match", "any"]) == 0
        assert output_lines(capsys) == ["Blue Shirt", "Green Hat", "Red Hat"]

    def test_negate(self, catalog, capsys):
        assert main(["filter", catalog, "--color", "red", "--negate"]) == 0
        assert output_lines(capsys) == ["Blue Shirt", "Green Hat"]

    def test_no_criteria_prints_everything(self, catalog, capsys):
        assert main(["filter", catalog]) == 0
        assert output_lines(capsys) == ["Red Shirt", "Blue Shirt", "Green Hat", "Red Hat"]

    def test_no_match(self, catalog, capsys):
        assert main(["filter", catalog, "--color", "green", "--name", "Shirt"]) == 0
        assert output_lines(capsys) == []

    def test_unknown_color(self, catalog, capsys):
        assert main(["filter", catalog, "--color", "purple"]) == 1
        assert "Error: Unknown color" in capsys.readouterr().err

    def test_missing_catalog(self, tmp_path, capsys):
        assert main(["filter", str(tmp_path / "missing.toml")]) == 1
        assert "Error:" in capsys.readouterr().err

    def test_catalog_not_utf8(self, tmp_path, capsys):
        path = tmp_path / "catalog.toml"
        path.write_bytes(b'[[products]]\nname = "\xff"\ncolor = "red"\n')
        assert main(["filter", str(path)]) == 1
        assert "Error: Could not parse" in capsys.readouterr().err

    def test_catalog_is_directory(self, tmp_path, capsys):
        path = tmp_path / "catalog.toml"
        path.mkdir()
        assert main(["filter", str(path), "--name", "Shirt"]) == 1
        assert "Error: Could not read" in capsys.readouterr().err

    def test_config_not_utf8(self, catalog, tmp_path, capsys):
        config = tmp_path / "config.toml"
        config.write_bytes(b'[filter]\nmatch = "\xff"\n')
        assert main(["--config", str(config), "filter", catalog]) == 1
        assert "Error: Could not parse" in capsys.readouterr().err

    def test_match_mode_from_config(self, catalog, tmp_path, capsys):
        config = tmp_path / "config.toml"
        config.write_text('[filter]\nmatch = "any"\n')
        assert main(["--config", str(config), "filter", catalog, "--color", "blue", "--name", "Hat"]) == 0
        assert output_lines(capsys) == ["Blue Shirt", "Green Hat", "Red Hat"]

    def test_command_line_overrides_config(self, catalog, tmp_path, capsys):
        config = tmp_path / "config.toml"
        config.write_text('[filter]\nmatch = "any"\n')
        args = ["--config", str(config), "filter", catalog, "--color", "blue", "--name", "Hat", "--match", "all"]
        assert main(args) == 0
        assert output_lines(capsys) == []

    def test_bad_config(self, catalog, tmp_path, capsys):
        config = tmp_path / "config.toml"
        config.write_text('[filter]\nmatch = "most"\n')
        assert main(["--config", str(config), "filter", catalog]) == 1
        assert "filter.match" in capsys.readouterr().err

    def test_bad_log_level(self, catalog, capsys):
        assert main(["--log-level", "LOUD", "filter", catalog]) == 1


class TestOtherCommands:
    """Test cases for list-specs and the no-command path"""

    def test_list_specs(self, capsys):
        assert main(["list-specs"]) == 0
        lines = output_lines(capsys)
        assert lines[0] == "Available specifications:"
        assert "  - color" in lines
        assert "  - name" in lines

    def test_no_command(self, capsys):
        assert main([]) == 1
        assert "usage:" in capsys.readouterr().out


class TestRunFilter:
    """Test cases for run_filter"""

    def test_returns_copy_without_criteria(self):
        products = [Product(name="Red Shirt", color=Color.RED)]
        result = run_filter(products)
        assert result == products
        assert result is not products
