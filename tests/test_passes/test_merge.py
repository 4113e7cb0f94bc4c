"""Tests for adjacent rule merging."""

from cssshrink.passes import AdjacentRuleMerger
from cssshrink.passes.merge import is_mergeable, join_bodies


def _merge(css: str) -> str:
    return AdjacentRuleMerger().apply(css)


class TestHelpers:
    def test_is_mergeable(self):
        assert is_mergeable("a")
        assert is_mergeable(".nav a:hover")
        assert not is_mergeable("@font-face")
        assert not is_mergeable("")

    def test_join_bodies(self):
        assert join_bodies("a:b", "c:d") == "a:b;c:d"
        assert join_bodies("", "c:d") == "c:d"
        assert join_bodies("a:b", "") == "a:b"


class TestAdjacentRuleMerger:
    def test_two_rules(self):
        assert _merge("a{color:red}a{font-size:12px}") == "a{color:red;font-size:12px}"

    def test_three_rules(self):
        assert _merge("a{x:1}a{y:2}a{z:3}") == "a{x:1;y:2;z:3}"

    def test_different_selectors(self):
        css = "a{color:red}b{color:blue}"
        assert _merge(css) == css

    def test_non_adjacent_rules(self):
        css = "a{color:red}b{color:blue}a{font-size:12px}"
        assert _merge(css) == css

    def test_selector_text_must_match_exactly(self):
        css = "a,b{x:1}b,a{y:2}"
        assert _merge(css) == css

    def test_empty_body(self):
        assert _merge("a{}a{color:red}") == "a{color:red}"

    def test_at_rule_blocks_never_merge(self):
        css = "@font-face{src:url(a.woff)}@font-face{src:url(b.woff)}"
        assert _merge(css) == css

    def test_media_blocks_never_merge(self):
        css = "@media screen{a{color:red}}@media screen{b{color:blue}}"
        assert _merge(css) == css

    def test_merges_inside_media_block(self):
        css = "@media print{a{color:red}a{margin:0}}"
        assert _merge(css) == "@media print{a{color:red;margin:0}}"

    def test_rule_after_media_block(self):
        css = "a{x:1}@media print{a{y:2}}a{z:3}"
        assert _merge(css) == css

    def test_unterminated_block(self):
        css = "a{color:red}a{margin:0"
        assert _merge(css) == css

    def test_brace_in_string(self):
        assert _merge('a{content:"}"}a{color:red}') == 'a{content:"}";color:red}'

    def test_no_blocks(self):
        assert _merge('@charset "UTF-8";') == '@charset "UTF-8";'
