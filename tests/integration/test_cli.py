"""Integration tests for CLI."""

import json

import pytest
from click.testing import CliRunner

from depstyle.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def style_file(tmp_path, base_style_yaml):
    path = tmp_path / "style.yaml"
    path.write_text(base_style_yaml)
    return path


@pytest.fixture
def override_file(tmp_path, override_style_yaml):
    path = tmp_path / "override.yaml"
    path.write_text(override_style_yaml)
    return path


class TestShowCommand:
    def test_show_default_style(self, runner):
        result = runner.invoke(main, ["show"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["default-node"]["type"] == "box"
        assert "test" in data["edge-styles-by-scope"]

    def test_show_merged_styles(self, runner, style_file, override_file):
        result = runner.invoke(
            main, ["show", "--no-default", str(style_file), str(override_file)]
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["default-node"]["rounded"] is True
        assert list(data["node-styles"]) == [
            "com.example",
            "org.apache::test",
            "com.example:artifact",
        ]

    def test_show_nothing(self, runner):
        result = runner.invoke(main, ["show", "--no-default"])

        assert result.exit_code == 0
        assert json.loads(result.output)["node-styles"] == {}

    def test_style_from_environment(self, runner, style_file):
        result = runner.invoke(
            main, ["show", "--no-default"], env={"DEPSTYLE_STYLE": str(style_file)}
        )

        assert result.exit_code == 0
        assert json.loads(result.output)["default-edge"] == {"color": "black"}

    def test_invalid_style_file(self, runner, tmp_path):
        broken = tmp_path / "broken.yaml"
        broken.write_text("default-node: [unclosed")

        result = runner.invoke(main, ["show", str(broken)])

        assert result.exit_code == 2
        assert "Error loading style" in result.output

    def test_schema_error(self, runner, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("default-node:\n  type: hexagon\n")

        result = runner.invoke(main, ["show", str(bad)])

        assert result.exit_code == 2
        assert "Style validation error" in result.output


class TestNodeCommand:
    def test_matching_rule(self, runner, style_file):
        result = runner.invoke(
            main,
            ["node", "com.example", "lib", "--version", "1.0", "--no-default", str(style_file)],
        )

        assert result.exit_code == 0
        assert "ellipse" in result.output
        assert "label" in result.output

    def test_json_output(self, runner, style_file):
        result = runner.invoke(
            main,
            [
                "node", "org.apache", "lib", "--scope", "test",
                "--format", "json", "--no-default", str(style_file),
            ],
        )

        assert result.exit_code == 0
        data = {item["name"]: item["value"] for item in json.loads(result.output)}
        assert data["color"] == "gray"
        assert data["label"] == "<org.apache<br/>lib<br/>(test)>"


class TestEdgeCommand:
    def test_scope_wins_over_included(self, runner, style_file):
        result = runner.invoke(
            main, ["edge", "included", "--scope", "test", "--no-default", str(style_file)]
        )

        assert result.exit_code == 0
        assert "dashed" in result.output

    def test_no_style(self, runner, style_file):
        result = runner.invoke(
            main, ["edge", "omitted-for-cycle", "--no-default", str(style_file)]
        )

        assert result.exit_code == 0
        assert "(none)" in result.output

    def test_unknown_resolution(self, runner):
        result = runner.invoke(main, ["edge", "excluded"])

        assert result.exit_code == 2
