"""Tests for the fix command."""

from click.testing import CliRunner
import pytest

from snfix.cli import main

SCRIPT = "var gr = new GlideRecord('incident');\ngr.addQeury('active', true);\ngs.print('done');\n"


class TestFixCommand:
    """Test suite for fix command."""

    @pytest.fixture
    def runner(self):
        """Create Click test runner."""
        return CliRunner()

    @pytest.fixture
    def script(self, tmp_path):
        """Create a script with a typo and a deprecated call."""
        path = tmp_path / "script.js"
        path.write_text(SCRIPT)
        return path

    def test_fix_to_stdout(self, runner, script):
        """Test corrected text and fix messages are printed."""
        result = runner.invoke(main, ["fix", str(script)])

        assert result.exit_code == 0
        assert "gr.addQuery('active', true);" in result.output
        assert "gs.info('done');" in result.output
        assert "Fixed 1 typo(s): addQeury → addQuery" in result.output

    def test_fix_to_file(self, runner, script, tmp_path):
        """Test -o writes the corrected script."""
        output = tmp_path / "out" / "fixed.js"
        result = runner.invoke(main, ["fix", str(script), "-o", str(output)])

        assert result.exit_code == 0
        assert output.read_text() == (
            "var gr = new GlideRecord('incident');\n"
            "gr.addQuery('active', true);\n"
            "gs.info('done');\n"
        )
        # Input is never modified
        assert script.read_text() == SCRIPT

    def test_no_rules(self, runner, script, tmp_path):
        """Test --no-rules skips rewrite rules."""
        output = tmp_path / "fixed.js"
        result = runner.invoke(main, ["fix", str(script), "--no-rules", "-o", str(output)])

        assert result.exit_code == 0
        assert "gs.print('done');" in output.read_text()
        assert "gr.addQuery(" in output.read_text()

    def test_no_fuzzy(self, runner, script, tmp_path):
        """Test --no-fuzzy applies rewrite rules only."""
        output = tmp_path / "fixed.js"
        result = runner.invoke(main, ["fix", str(script), "--no-fuzzy", "-o", str(output)])

        assert result.exit_code == 0
        assert "gs.info('done');" in output.read_text()
        assert "gr.addQeury(" in output.read_text()
        assert "addQeury → addQuery" not in result.output

    def test_selected_rules(self, runner, script, tmp_path):
        """Test --rules picks specific rules."""
        output = tmp_path / "fixed.js"
        result = runner.invoke(main, ["fix", str(script), "--rules", "gs_print", "-o", str(output)])

        assert result.exit_code == 0
        assert "gs.info('done');" in output.read_text()

    def test_unknown_rule(self, runner, script):
        """Test an unknown rule name aborts with an error."""
        result = runner.invoke(main, ["fix", str(script), "--rules", "nope"])

        assert result.exit_code != 0
        assert "Unknown rules" in result.output

    def test_rules_and_no_rules_conflict(self, runner, script):
        """Test --rules and --no-rules are mutually exclusive."""
        result = runner.invoke(main, ["fix", str(script), "--rules", "gs_print", "--no-rules"])
        assert result.exit_code != 0

    def test_nothing_to_fix(self, runner, tmp_path):
        """Test a clean script is echoed unchanged."""
        path = tmp_path / "clean.js"
        path.write_text("gs.info('ok');\n")
        result = runner.invoke(main, ["fix", str(path)])

        assert result.exit_code == 0
        assert "gs.info('ok');" in result.output
        assert "No changes needed" in result.output

    def test_suggestion_printed(self, runner, tmp_path):
        """Test low confidence suggestions are shown."""
        path = tmp_path / "low.js"
        path.write_text("var gr = new GlideRecord('x');\ngr.rdrBy('a');\n")
        result = runner.invoke(main, ["fix", str(path), "--no-rules"])

        assert result.exit_code == 0
        assert 'did you mean "orderBy"?' in result.output

    def test_missing_file(self, runner, tmp_path):
        """Test a nonexistent input file is rejected."""
        result = runner.invoke(main, ["fix", str(tmp_path / "missing.js")])
        assert result.exit_code != 0
