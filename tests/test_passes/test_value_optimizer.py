"""Tests for the value-optimization pass over whole stylesheets."""

import re

import pytest

from cssshrink.passes import ValueOptimizer
from cssshrink.values import ValueRule


def _optimize(css: str) -> str:
    return ValueOptimizer().apply(css)


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------


class TestHexColors:
    @pytest.mark.parametrize(
        "css, expected",
        [
            ("a{color:#ffffff}", "a{color:#fff}"),
            ("a{color:#AABBCC}", "a{color:#abc}"),
            ("a{color:#ff0000!important}", "a{color:#f00!important}"),
            ("a{color:#ff000000}", "a{color:#f000}"),
            ("a{border:1px solid #000000}", "a{border:1px solid #000}"),
        ],
    )
    def test_shortened(self, css, expected):
        assert _optimize(css) == expected

    @pytest.mark.parametrize(
        "css",
        [
            "a{color:#abcdef}",
            "a{color:#f0f0f0}",
            "a{color:#f0f0f011}",
            "a{color:#fff}",
        ],
    )
    def test_unchanged(self, css):
        assert _optimize(css) == css

    def test_id_selector_untouched(self):
        assert _optimize("#aabbcc{color:red}") == "#aabbcc{color:red}"

    def test_color_in_string_untouched(self):
        css = 'a{content:"#ff0000"}'
        assert _optimize(css) == css


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


class TestZeroUnits:
    def test_units_stripped(self):
        assert _optimize("a{margin:0px 10px 0em 0%}") == "a{margin:0 10px 0 0}"

    def test_rotation(self):
        assert _optimize("a{transform:rotate(0deg)}") == "a{transform:rotate(0)}"

    def test_function_arguments(self):
        assert _optimize("a{transform:translate(0px,0px)}") == "a{transform:translate(0,0)}"

    def test_nonzero_kept(self):
        assert _optimize("a{margin:10px}") == "a{margin:10px}"

    def test_keyframe_selector_kept(self):
        css = "@keyframes f{0%{opacity:0}50%{opacity:1}}"
        assert _optimize(css) == css

    def test_custom_property_kept(self):
        assert _optimize(":root{--x:0px}") == ":root{--x:0px}"

    def test_only_custom_property_kept(self):
        css = ":root{--x:1px;--y:0px;margin:0px}"
        assert _optimize(css) == ":root{--x:1px;--y:0px;margin:0}"

    def test_custom_property_after_string_kept(self):
        css = 'a{--x:"a" 0px;margin:0px}'
        assert _optimize(css) == 'a{--x:"a" 0px;margin:0}'

    def test_custom_property_after_url_kept(self):
        css = "a{--bg:url(x.png) 0px;margin:0px}"
        assert _optimize(css) == "a{--bg:url(x.png) 0px;margin:0}"

    def test_declaration_after_string_optimized(self):
        css = 'a{content:"a" 0px;margin:0px}'
        assert _optimize(css) == 'a{content:"a" 0;margin:0}'

    def test_rgb_percentages_kept(self):
        css = "a{color:rgb(0%,50%,100%)}"
        assert _optimize(css) == css

    def test_math_function_kept(self):
        css = "a{width:calc(0px + 10%)}"
        assert _optimize(css) == css

    def test_hsl_percentage_kept(self):
        css = "a{color:hsl(0,0%,50%)}"
        assert _optimize(css) == css

    def test_url_body_untouched(self):
        css = "a{background:url(0px.png)}"
        assert _optimize(css) == css


class TestLeadingZero:
    def test_dropped(self):
        assert _optimize("a{opacity:0.5}") == "a{opacity:.5}"

    def test_negative(self):
        assert _optimize("a{margin:-0.5em}") == "a{margin:-.5em}"

    def test_inside_function(self):
        css = "a{color:rgba(0,0,0,0.25)}"
        assert _optimize(css) == "a{color:rgba(0,0,0,.25)}"

    def test_larger_number_kept(self):
        assert _optimize("a{line-height:10.5}") == "a{line-height:10.5}"


# ---------------------------------------------------------------------------
# Keywords and keyframes
# ---------------------------------------------------------------------------


class TestKeywords:
    def test_bold(self):
        assert _optimize("a{font-weight:bold}") == "a{font-weight:700}"

    def test_normal(self):
        assert _optimize("a{font-weight:normal;color:red}") == "a{font-weight:400;color:red}"

    def test_bolder_kept(self):
        assert _optimize("a{font-weight:bolder}") == "a{font-weight:bolder}"

    def test_font_shorthand_kept(self):
        css = "a{font:bold 16px Arial}"
        assert _optimize(css) == css

    def test_background_none(self):
        assert _optimize("a{background:none}") == "a{background:0 0}"

    def test_background_transparent_important(self):
        assert _optimize("a{background:transparent!important}") == "a{background:0 0!important}"

    def test_background_with_layers_kept(self):
        css = "a{background:none url(x.png)}"
        assert _optimize(css) == css

    def test_outline_none(self):
        assert _optimize("a{outline:none}") == "a{outline:0}"


class TestKeyframes:
    def test_from_and_hundred(self):
        css = "@keyframes f{from{opacity:0}100%{opacity:1}}"
        assert _optimize(css) == "@keyframes f{0%{opacity:0}to{opacity:1}}"

    def test_to_kept(self):
        css = "@keyframes f{from{opacity:0}to{opacity:1}}"
        assert _optimize(css) == "@keyframes f{0%{opacity:0}to{opacity:1}}"

    def test_hundred_percent_value_kept(self):
        assert _optimize("a{width:100%}") == "a{width:100%}"


# ---------------------------------------------------------------------------
# Transforms
# ---------------------------------------------------------------------------


class TestTransforms:
    @pytest.mark.parametrize(
        "css, expected",
        [
            ("a{transform:translate3d(0,0,5px)}", "a{transform:translateZ(5px)}"),
            ("a{transform:translate3d(0px,0px,5px)}", "a{transform:translateZ(5px)}"),
            ("a{transform:scale3d(1,1,1)}", "a{transform:scaleX(1)}"),
            ("a{transform:rotate3d(0,0,1,45deg)}", "a{transform:rotate(45deg)}"),
            ("a{transform:rotate3d(0,1,0,45deg)}", "a{transform:rotateY(45deg)}"),
            ("a{transform:rotate3d(1,0,0,45deg)}", "a{transform:rotateX(45deg)}"),
        ],
    )
    def test_rewritten(self, css, expected):
        assert _optimize(css) == expected

    def test_general_translate3d_kept(self):
        css = "a{transform:translate3d(1px,0,0)}"
        assert _optimize(css) == css


# ---------------------------------------------------------------------------
# Custom rule tables
# ---------------------------------------------------------------------------


class TestCustomRules:
    def test_only_given_rules_run(self):
        upper = ValueRule("upper-red", re.compile("red"), lambda m: "RED")
        optimizer = ValueOptimizer(rules=[upper])
        assert optimizer.apply('a{color:red;margin:0px;content:"red"}') == (
            'a{color:RED;margin:0px;content:"red"}'
        )

    def test_empty_rule_list(self):
        assert ValueOptimizer(rules=[]).apply("a{color:#ffffff}") == "a{color:#ffffff}"
