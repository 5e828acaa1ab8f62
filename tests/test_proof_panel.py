"""
Tests for rendering.proof_panel - style rules, column split and layout.
"""
import numpy as np
import pytest


class TestStyleRules:
    """First matching rule wins."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("[IMPOSSIBLE] CLAIM STATUS: PHYSICALLY IMPOSSIBLE", "panic"),
            ("CLAIM IS FALSE", "panic"),
            ("🚫 blocked", "panic"),
            ("[COMPLETE] SCIENTIFIC PROOF: COMPLETE", "complete"),
            ("🔬 lab result", "complete"),
            ("OFFICIAL BM-21 ROCKET SPECIFICATIONS:", "heading"),
            ("GEOGRAPHIC DISTANCE VERIFICATION:", "heading"),
            ("=" * 64, "separator"),
            ("═══════", "separator"),
            ("* Rocket Caliber: 122mm", "bullet"),
            ("• Earth curvature ignored", "bullet"),
            ("FINAL VERDICT:", "default"),
            ("", "default"),
        ],
    )
    def test_single_rule(self, text, expected):
        from rendering import style_for

        assert style_for(text).name == expected

    def test_impossible_beats_bullet(self):
        """A bulleted line mentioning IMPOSSIBLE gets the IMPOSSIBLE style."""
        from rendering import style_for
        from rendering.proof_panel import PANIC

        assert style_for("• Attack IMPOSSIBLE from this distance") == PANIC
        assert style_for("* IMPOSSIBLE") == PANIC

    def test_panic_beats_complete(self):
        from rendering import style_for

        assert style_for("PROOF COMPLETE: IMPOSSIBLE").name == "panic"

    def test_complete_beats_heading(self):
        from rendering import style_for

        assert style_for("VERIFICATION COMPLETE").name == "complete"

    def test_heading_beats_bullet(self):
        from rendering import style_for

        assert style_for("* SPECIFICATIONS below").name == "heading"

    def test_rule_order(self):
        """The rule list keeps its priority order."""
        from rendering import STYLE_RULES

        names = [style.name for _, style in STYLE_RULES]
        assert names == ["panic", "complete", "heading", "separator", "bullet"]

    def test_styles(self):
        from rendering.proof_panel import BULLET, DEFAULT, DONE, HEADING, PANIC, SEPARATOR

        assert PANIC.color == (0, 0, 200) and PANIC.scale == 0.8
        assert DONE.color == (0, 150, 0) and DONE.scale == 0.8
        assert HEADING.scale == 0.7
        assert SEPARATOR.scale == 0.6 and BULLET.scale == 0.6
        assert DEFAULT.color == (0, 0, 0) and DEFAULT.scale == 0.7


class TestColumns:
    """Tests for split_columns() and visible_rows()."""

    @pytest.mark.parametrize("n", range(0, 12))
    def test_split_differs_by_at_most_one(self, n):
        from rendering import split_columns

        lines = [f"line {i}" for i in range(n)]
        left, right = split_columns(lines)

        assert abs(len(left) - len(right)) <= 1
        assert left + right == lines

    def test_reference_lines_fit(self, reference_inputs):
        """Both columns of the reference panel fit on a 1080 px canvas."""
        from rendering import split_columns
        from rendering.proof_panel import visible_rows

        left, right = split_columns(reference_inputs.proof_lines)
        assert visible_rows(len(left), 1080) == len(left)
        assert visible_rows(len(right), 1080) == len(right)

    def test_truncates_instead_of_wrapping(self):
        """Rows whose baseline would pass height - 50 are dropped."""
        from rendering.proof_panel import visible_rows

        assert visible_rows(10, 360) == 6
        assert visible_rows(3, 360) == 3
        assert visible_rows(10, 100) == 0


class TestRenderProofPanel:
    """Tests for render_proof_panel()."""

    def test_shape_and_background(self):
        from rendering import render_proof_panel

        panel = render_proof_panel([], "TITLE", 640, 360)

        assert panel.shape == (360, 640, 3)
        assert panel.dtype == np.uint8
        assert tuple(panel[200, 100]) == (255, 255, 255)

    def test_banner_and_divider(self):
        from rendering import render_proof_panel

        panel = render_proof_panel([], "TITLE", 640, 360)

        assert tuple(panel[10, 10]) == (0, 0, 200)
        assert tuple(panel[200, 320]) == (150, 150, 150)
        assert tuple(panel[330, 320]) == (255, 255, 255)

    def test_text_drawn_in_both_columns(self):
        from rendering import render_proof_panel

        lines = ["LEFT SIDE TEXT", "RIGHT SIDE TEXT"]
        panel = render_proof_panel(lines, "TITLE", 640, 360)

        left_band = panel[110:145, 30:300]
        right_band = panel[110:145, 350:620]
        assert (left_band != 255).any()
        assert (right_band != 255).any()

    def test_truncated_rows_not_drawn(self):
        """Nothing is drawn below the last visible row."""
        from rendering import render_proof_panel

        lines = ["* overflow line"] * 40
        panel = render_proof_panel(lines, "TITLE", 640, 360)

        below = panel[320:, :310]
        assert (below == 255).all()
