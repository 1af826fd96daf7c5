"""Integration tests for `framing validate` against fixture files."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from framing.cli.main import app

runner = CliRunner()

FIXTURES_DIR = Path(__file__).parent.parent / "fixtures" / "configs"


class TestValidateFixtures:
    """Exit codes: 0 valid, 1 errors, 2 warnings."""

    def test_valid_single_mat(self) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_DIR / "valid_single_mat.json")])
        assert result.exit_code == 0, result.output
        assert "Validation passed. Configuration is valid." in result.output

    def test_valid_double_mat(self) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_DIR / "valid_double_mat.json")])
        assert result.exit_code == 0, result.output

    def test_warnings(self) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_DIR / "valid_with_warnings.json")])
        assert result.exit_code == 2, result.output
        assert "Validation passed with 2 warning(s)" in result.output
        assert "frame: No frame selected" in result.output
        assert "mat.bottom_board:" in result.output
        assert "Suggestion:" in result.output

    def test_invalid_json(self) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_DIR / "invalid_json.json")])
        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Line 5" in result.output

    def test_unknown_field(self) -> None:
        result = runner.invoke(app, ["validate", str(FIXTURES_DIR / "unknown_field.json")])
        assert result.exit_code == 1
        assert "mat_colour" in result.output
        assert "Validation failed." in result.output


class TestComposeFixtures:
    def test_compose_exports_configured_formats(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app,
            [
                "compose",
                "-c", str(FIXTURES_DIR / "valid_double_mat.json"),
                "--output-dir", str(tmp_path),
            ],
        )
        assert result.exit_code == 0, result.output
        assert (tmp_path / "gallery_svg.svg").exists()
        assert (tmp_path / "gallery_json.json").exists()
