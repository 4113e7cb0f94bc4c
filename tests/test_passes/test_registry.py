"""Tests for the pass registry and option filtering."""

import logging

from cssshrink.model import MinifyOptions
from cssshrink.passes import BUILTIN_PASSES, apply_passes, build_passes


class TestBuildPasses:
    def test_default_order(self):
        names = [p.name for p in build_passes()]
        assert names == [
            "comments",
            "whitespace",
            "values",
            "quotes",
            "shorthand",
            "duplicates",
            "merge",
        ]

    def test_disabled_passes_removed(self):
        options = MinifyOptions(optimize_values=False, merge_rules=False)
        names = [p.name for p in build_passes(options)]
        assert names == ["comments", "whitespace", "quotes", "shorthand", "duplicates"]

    def test_everything_optional_disabled(self):
        options = MinifyOptions(
            optimize_values=False,
            unquote_tokens=False,
            collapse_shorthands=False,
            remove_duplicates=False,
            merge_rules=False,
        )
        assert [p.name for p in build_passes(options)] == ["comments", "whitespace"]


class TestApplyPasses:
    def test_default_runs_all_builtin_passes(self):
        assert apply_passes("a { color: #ffffff; }") == "a{color:#fff}"

    def test_explicit_pass_list(self):
        whitespace_only = [p for p in BUILTIN_PASSES if p.name == "whitespace"]
        assert apply_passes("a { color: #ffffff; }", whitespace_only) == "a{color:#ffffff}"

    def test_empty_pass_list(self):
        assert apply_passes(" a { } ", []) == " a { } "

    def test_logs_each_pass(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="cssshrink.passes"):
            apply_passes("a { color: red; }")
        messages = [record.getMessage() for record in caplog.records]
        assert "whitespace: 17 -> 12 chars" in messages
        assert len(messages) == len(BUILTIN_PASSES)
