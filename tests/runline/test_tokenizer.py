"""Tests for splitting and joining raw argument strings."""

import logging

import pytest

from runline.primitives.tokenizer import join_arguments, quote_argument, split_arguments


class TestSplitArguments:
    """Test split_arguments()."""

    def test_quoted_token(self):
        assert split_arguments('one "two three" four') == ["one", "two three", "four"]

    def test_empty(self):
        assert split_arguments("") == []

    def test_none(self):
        assert split_arguments(None) == []

    def test_whitespace_only(self):
        assert split_arguments(" \t \n ") == []

    def test_whitespace_runs(self):
        """Repeated delimiters never produce empty tokens."""
        assert split_arguments("  -v \t--check\n\nsite.yml  ") == ["-v", "--check", "site.yml"]

    def test_doubled_quote_is_literal(self):
        assert split_arguments('"say ""hi"""') == ['say "hi"']

    def test_bare_empty_quotes_dropped(self):
        assert split_arguments('a "" b') == ["a", "b"]

    def test_adjacent_segments_form_one_token(self):
        assert split_arguments('ab"c d"e') == ["abc de"]

    def test_quoted_whitespace_preserved(self):
        assert split_arguments('"  padded  "') == ["  padded  "]

    def test_option_with_quoted_value(self):
        tokens = split_arguments('-e "key=value other=1" --diff')
        assert tokens == ["-e", "key=value other=1", "--diff"]

    def test_unterminated_quote(self, caplog):
        """Rest of the string becomes the final token."""
        with caplog.at_level(logging.WARNING, logger="runline.primitives.tokenizer"):
            tokens = split_arguments('one "two three')
        assert tokens == ["one", "two three"]
        assert "Unterminated quote" in caplog.text


class TestJoinArguments:
    """Test join_arguments()."""

    def test_quotes_whitespace(self):
        assert join_arguments(["one", "two three"]) == 'one "two three"'

    def test_empty(self):
        assert join_arguments([]) == ""

    def test_plain_tokens(self):
        assert join_arguments(["ansible", "--version"]) == "ansible --version"

    def test_escapes_quotes(self):
        assert quote_argument('a"b') == '"a""b"'

    def test_lone_quote(self):
        assert quote_argument('"') == '""""'

    def test_tab_is_whitespace(self):
        assert quote_argument("a\tb") == '"a\tb"'


class TestRoundTrip:
    """split(join(tokens)) gives back the tokens."""

    @pytest.mark.parametrize(
        "tokens",
        [
            ["one"],
            ["one", "two three"],
            ['"'],
            ['""'],
            ['a"b', "c d"],
            ['"leading', 'trailing"', '"both"'],
            ["  padded  ", "\ttab"],
            ["--extra-vars", 'msg="hello world" n=1'],
            ["x y", "z"],
        ],
    )
    def test_round_trip(self, tokens):
        assert split_arguments(join_arguments(tokens)) == tokens

    def test_empty_tokens_are_dropped(self):
        """Zero-length tokens cannot survive a round trip."""
        assert split_arguments(join_arguments(["a", "", "b"])) == ["a", "b"]
