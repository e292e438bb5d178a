"""
Tests for LineClassifier.
"""
from __future__ import annotations

import pytest

from ovpn_config.parser.line_classifier import LineClassifier, LineKind


@pytest.fixture
def classifier():
    return LineClassifier()


# ─────────────────────────────────────────────────────────────────────────────
# Skip lines
# ─────────────────────────────────────────────────────────────────────────────


class TestSkip:
    @pytest.mark.parametrize("line", ["", "   ", "\t", "# comment", "   # indented comment", "#"])
    def test_blank_and_comment_lines(self, classifier, line):
        assert classifier.classify(line).kind is LineKind.SKIP


# ─────────────────────────────────────────────────────────────────────────────
# Commands
# ─────────────────────────────────────────────────────────────────────────────


class TestCommand:
    def test_name_and_args(self, classifier):
        result = classifier.classify("remote vpn.example.com 1194 udp")
        assert result.kind is LineKind.COMMAND
        assert result.name == "remote"
        assert result.args == ("vpn.example.com", "1194", "udp")

    def test_no_args(self, classifier):
        result = classifier.classify("client")
        assert result.name == "client"
        assert result.args == ()

    def test_runs_of_whitespace(self, classifier):
        result = classifier.classify("  keepalive \t 10    120  ")
        assert result.name == "keepalive"
        assert result.args == ("10", "120")

    def test_trailing_comment_stripped(self, classifier):
        result = classifier.classify("cipher AES-256-GCM # data channel")
        assert result.args == ("AES-256-GCM",)

    def test_comment_without_space(self, classifier):
        result = classifier.classify("verb 3#loud")
        assert result.args == ("3",)

    def test_hash_inside_quotes_still_starts_comment(self, classifier):
        result = classifier.classify('setenv NAME "a#b"')
        assert result.args == ("NAME", '"a')

    def test_name_is_case_sensitive(self, classifier):
        assert classifier.classify("REMOTE host").name == "REMOTE"

    def test_semicolon_is_not_a_comment(self, classifier):
        result = classifier.classify("; remote host")
        assert result.kind is LineKind.COMMAND
        assert result.name == ";"


# ─────────────────────────────────────────────────────────────────────────────
# Inline block markers
# ─────────────────────────────────────────────────────────────────────────────


class TestBlockMarkers:
    def test_block_start(self, classifier):
        result = classifier.classify("<ca>")
        assert result.kind is LineKind.BLOCK_START
        assert result.name == "ca"

    def test_block_start_hyphenated(self, classifier):
        assert classifier.classify("<http-proxy-user-pass>").name == "http-proxy-user-pass"

    def test_unknown_block_is_command(self, classifier):
        result = classifier.classify("<connection>")
        assert result.kind is LineKind.COMMAND
        assert result.name == "<connection>"

    def test_indented_marker_not_a_block(self, classifier):
        result = classifier.classify("  <ca>")
        assert result.kind is LineKind.COMMAND

    def test_trailing_whitespace_allowed(self, classifier):
        assert classifier.classify("<key>  ").kind is LineKind.BLOCK_START

    def test_end_marker_without_open_block_is_command(self, classifier):
        result = classifier.classify("</ca>")
        assert result.kind is LineKind.COMMAND

    def test_content_inside_block(self, classifier):
        result = classifier.classify("-----BEGIN CERTIFICATE-----", open_block="ca")
        assert result.kind is LineKind.BLOCK_CONTENT

    def test_comment_inside_block_is_content(self, classifier):
        assert classifier.classify("# not a comment", open_block="ca").kind is LineKind.BLOCK_CONTENT

    def test_blank_inside_block_is_content(self, classifier):
        assert classifier.classify("", open_block="ca").kind is LineKind.BLOCK_CONTENT

    def test_matching_end_marker(self, classifier):
        result = classifier.classify("</ca>", open_block="ca")
        assert result.kind is LineKind.BLOCK_END
        assert result.name == "ca"

    def test_mismatched_end_marker_is_content(self, classifier):
        assert classifier.classify("</cert>", open_block="ca").kind is LineKind.BLOCK_CONTENT

    def test_start_marker_inside_block_is_content(self, classifier):
        assert classifier.classify("<key>", open_block="ca").kind is LineKind.BLOCK_CONTENT

    def test_custom_inline_commands(self):
        classifier = LineClassifier(inline_commands=frozenset({"ca"}))
        assert classifier.classify("<ca>").kind is LineKind.BLOCK_START
        assert classifier.classify("<key>").kind is LineKind.COMMAND


class TestTokenize:
    def test_tokenize(self):
        assert LineClassifier.tokenize("a b  c # d") == ["a", "b", "c"]

    def test_tokenize_all_comment(self):
        assert LineClassifier.tokenize("# x") == []
