"""Tests for the code scanner and corrector."""

import pytest

from snfix.analysis.code_corrector import (
    CodeCorrector,
    analyze_code,
    apply_corrections,
    format_fix_messages,
    fuzzy_correct_code,
)
from snfix.analysis.match_types import ConfidenceTier, Correction, CorrectionKind


@pytest.fixture
def corrector(servicenow_dictionary):
    """Create a corrector over the bundled dictionary."""
    return CodeCorrector(servicenow_dictionary)


GLIDE_RECORD_SCRIPT = """var gr = new GlideRecord('incident');
gr.addQuery('active', true);
gr.query();
while (gr.next()) {
    gs.info(gr.getValue('number'));
}
"""


class TestAnalyzeCode:
    """Test finding corrections."""

    def test_valid_code_untouched(self, corrector):
        """Test correct scripts produce no corrections."""
        result = corrector.analyze_code(GLIDE_RECORD_SCRIPT)
        assert result.corrections == []
        assert result.suggestions == []

    def test_empty_input(self, corrector):
        """Test empty text yields nothing."""
        assert corrector.fuzzy_correct_code("").processed == ""

    def test_non_string_rejected(self, corrector):
        """Test non-text input raises TypeError."""
        with pytest.raises(TypeError):
            corrector.analyze_code(None)

    def test_class_correction(self, corrector):
        """Test misspelled class names after 'new' are found."""
        code = "var ga = new GlideAjx('Util');"
        result = corrector.analyze_code(code)

        assert len(result.corrections) == 1
        correction = result.corrections[0]
        assert correction.kind is CorrectionKind.CLASS
        assert correction.original == "GlideAjx"
        assert correction.corrected == "GlideAjax"
        assert code[correction.start : correction.end] == "GlideAjx"
        assert correction.context is None

    def test_method_correction_with_context(self, corrector):
        """Test methods are checked against the inferred receiver type."""
        code = "var gr = new GlideRecord('incident');\ngr.addQeury('active', true);"
        result = corrector.analyze_code(code)

        assert len(result.corrections) == 1
        correction = result.corrections[0]
        assert correction.kind is CorrectionKind.METHOD
        assert correction.context == "GlideRecord"
        assert correction.corrected == "addQuery"
        assert correction.confidence is ConfidenceTier.HIGH
        assert correction.line(code) == 2
        assert correction.column(code) == 4

    def test_sorted_by_descending_start(self, corrector):
        """Test corrections come back in reverse text order."""
        code = (
            "var gr = new GlideRecord('incident');\n"
            "gr.gtValue('a');\n"
            "gr.setVlaue('b', 1);\n"
            "gr.udpate();"
        )
        result = corrector.analyze_code(code)

        starts = [c.start for c in result.corrections]
        assert starts == sorted(starts, reverse=True)
        assert [c.original for c in result.corrections] == ["udpate", "setVlaue", "gtValue"]

    def test_context_precedence(self, corrector):
        """Test a typed receiver resolves what the fallback finds ambiguous."""
        typed = "var gr = new GlideRecord('x');\ngr.getAtribute('x');"
        untyped = "foo.getAtribute('x');"

        assert corrector.fuzzy_correct_code(typed).processed.endswith("gr.getAttribute('x');")
        assert corrector.fuzzy_correct_code(untyped).processed == untyped

    def test_global_object_precedence(self, corrector):
        """Test 'gs' keeps its global type even when rebound locally."""
        code = "var gs = foo();\ngs.addInfoMessge('hi');"
        assert corrector.fuzzy_correct_code(code).processed == (
            "var gs = foo();\ngs.addInfoMessage('hi');"
        )

    def test_factory_types(self, corrector):
        """Test gs.getUser() and gs.getSession() results are typed."""
        code = "var u = gs.getUser();\nu.getDisplayNme();"
        result = corrector.analyze_code(code)
        assert result.corrections[0].context == "GlideUser"
        assert result.corrections[0].corrected == "getDisplayName"

    def test_dollar_receiver(self, corrector):
        """Test receivers such as $sp are recognized."""
        result = corrector.fuzzy_correct_code("$sp.getParamter('id');")
        assert result.processed == "$sp.getParameter('id');"

    def test_ambiguous_neither_fixed_nor_suggested(self, corrector):
        """Test near ties are left alone silently."""
        result = corrector.fuzzy_correct_code("gs.getPrefernce('x');")
        assert result.processed == "gs.getPrefernce('x');"
        assert result.fixes == []
        assert result.suggestions == []

    def test_unknown_class_left_alone(self, corrector):
        """Test names far from every class are not touched."""
        result = corrector.analyze_code("var w = new FooBar();")
        assert result.corrections == []
        assert result.suggestions == []


class TestFuzzyCorrectCode:
    """Test applying corrections and messages."""

    def test_high_confidence_fix(self, corrector):
        """Test the canonical GlideRecord typo."""
        code = "var gr = new GlideRecord('incident');\ngr.addQeury('active', true);"
        result = corrector.fuzzy_correct_code(code)

        assert result.processed == (
            "var gr = new GlideRecord('incident');\ngr.addQuery('active', true);"
        )
        assert result.fixes == ["Fixed 1 typo(s): addQeury → addQuery"]
        assert result.suggestions == []

    def test_messages_grouped_by_tier(self, corrector):
        """Test high and medium fixes get separate messages."""
        code = (
            "var gr = new GlideRecord('incident');\n"
            "gr.gtValue('a');\n"
            "gr.setVlaue('b', 1);\n"
            "gr.udpate();"
        )
        result = corrector.fuzzy_correct_code(code)

        assert result.fixes == [
            "Fixed 2 typo(s): setVlaue → setValue, gtValue → getValue",
            "Auto-corrected 1 likely typo(s): udpate → update",
        ]
        assert "gr.getValue('a');" in result.processed
        assert "gr.setValue('b', 1);" in result.processed
        assert result.processed.endswith("gr.update();")

    def test_low_confidence_suggestion(self, corrector):
        """Test low tier matches are reported and not applied."""
        code = "var gr = new GlideRecord('x');\ngr.rdrBy('a');"
        result = corrector.fuzzy_correct_code(code)

        assert result.processed == code
        assert result.fixes == []
        assert result.suggestions == ['Possible typo: "rdrBy" - did you mean "orderBy"?']

    def test_offsets_survive_length_changes(self, corrector):
        """Test several corrections on one line splice correctly."""
        code = "gs.infoo(gs.debugg('a'));"
        result = corrector.fuzzy_correct_code(code)
        assert result.processed == "gs.info(gs.debug('a'));"

    def test_idempotent(self, corrector):
        """Test correcting corrected output changes nothing."""
        code = (
            "var ga = new GlideAjx('Util');\n"
            "var gr = new GlideRecord('incident');\n"
            "gr.addQeury('active', true);\n"
            "gr.udpate();"
        )
        once = corrector.fuzzy_correct_code(code).processed
        twice = corrector.fuzzy_correct_code(once)
        assert twice.processed == once
        assert twice.fixes == []

    def test_duplicate_labels_reported_once(self, corrector):
        """Test the same typo twice is counted twice but listed once."""
        code = "var gr = new GlideRecord('x');\ngr.udpate();\ngr.udpate();"
        result = corrector.fuzzy_correct_code(code)
        assert result.fixes == ["Auto-corrected 2 likely typo(s): udpate → update"]


class TestModuleFunctions:
    """Test module level helpers."""

    def test_apply_corrections_descending(self):
        """Test splicing in descending order keeps earlier offsets valid."""
        code = "aa bb"
        corrections = [
            Correction("bb", "bbbb", 3, 5, ConfidenceTier.HIGH, CorrectionKind.METHOD),
            Correction("aa", "a", 0, 2, ConfidenceTier.HIGH, CorrectionKind.METHOD),
        ]
        assert apply_corrections(code, corrections) == "a bbbb"

    def test_format_fix_messages_empty(self):
        """Test no messages without corrections."""
        assert format_fix_messages([]) == []

    def test_wrappers(self, small_dictionary):
        """Test analyze_code and fuzzy_correct_code with a custom dictionary."""
        code = "var gr = new GlideRecord('x');\ngr.qurey();"
        assert analyze_code(code, small_dictionary).corrections[0].corrected == "query"
        assert fuzzy_correct_code(code, small_dictionary).processed.endswith("gr.query();")
