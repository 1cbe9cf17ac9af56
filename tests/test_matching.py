"""Tests for the sequence compiler and the wildcard scanner."""

from __future__ import annotations

import pytest

from wildcard.utils.matching import END, compile_sequence, match_sequence


def _match(pattern: str, candidate: str, case_sensitive: bool = False) -> bool:
    return match_sequence(
        compile_sequence(pattern, case_sensitive),
        compile_sequence(candidate, case_sensitive),
    )


# === compile_sequence ===


class TestCompileSequence:
    def test_appends_end_marker(self) -> None:
        assert compile_sequence("ab", True) == ("a", "b", END)

    def test_empty_string_is_only_end(self) -> None:
        assert compile_sequence("", False) == (END,)

    def test_lowercases_when_case_insensitive(self) -> None:
        assert compile_sequence("AbC", False) == ("a", "b", "c", END)

    def test_keeps_case_when_case_sensitive(self) -> None:
        assert compile_sequence("AbC", True) == ("A", "b", "C", END)

    def test_wildcards_are_not_collapsed(self) -> None:
        """Runs of '*' are kept as-is; the scanner skips them."""
        assert compile_sequence("a**", True) == ("a", "*", "*", END)

    def test_end_is_distinct_from_nul(self) -> None:
        """END never equals a real character, including NUL."""
        assert END != "\0"
        assert "\0" != END
        assert repr(END) == "END"


# === Literal scan ===


class TestLiteralPatterns:
    @pytest.mark.parametrize(
        "pattern,candidate,expected",
        [
            ("abc", "abc", True),
            ("abc", "abd", False),
            ("abcd", "abc", False),
            ("abc", "abcd", False),
            ("abc", "xabcx", False),
            ("", "", True),
            ("", "x", False),
        ],
    )
    def test_exact_comparison(self, pattern: str, candidate: str, expected: bool) -> None:
        """Without wildcards matching is a whole-string comparison."""
        assert _match(pattern, candidate) is expected

    def test_nul_is_an_ordinary_character(self) -> None:
        assert _match("a\0b", "a\0b") is True
        assert _match("a", "a\0") is False
        assert _match("a*", "a\0") is True


# === Single-character wildcard ===


class TestQuestionMark:
    @pytest.mark.parametrize(
        "candidate,expected",
        [("abc", True), ("ac", False), ("abbc", False), ("a?c", True)],
    )
    def test_consumes_exactly_one_character(self, candidate: str, expected: bool) -> None:
        assert _match("a?c", candidate) is expected

    def test_star_then_question_needs_one_character(self) -> None:
        assert _match("*?", "") is False
        assert _match("*?", "a") is True
        assert _match("*?", "abc") is True

    def test_question_after_star_is_consumed_on_retry(self) -> None:
        assert _match("*?b", "abb") is True


# === Multi-character wildcard ===


class TestStar:
    @pytest.mark.parametrize("candidate", ["", "a", "abc", "*", "?", " spaced out "])
    @pytest.mark.parametrize("pattern", ["*", "**", "*****"])
    def test_star_only_matches_everything(self, pattern: str, candidate: str) -> None:
        assert _match(pattern, candidate) is True

    def test_trailing_star_matches_empty_remainder(self) -> None:
        assert _match("ab*", "ab") is True
        assert _match("ab**", "ab") is True

    def test_trailing_star_matches_any_remainder(self) -> None:
        assert _match("abc*", "abcd") is True

    @pytest.mark.parametrize(
        "pattern,candidate,expected",
        [
            ("a*bc", "ab", False),
            ("ab*c*", "abcd", True),
            ("*bcd*", "abc", False),
            ("a*b*c", "ab", False),
            ("*a*b", "ac", False),
            ("*bc", "abc", True),
            ("*bc", "abcd", False),
            ("*bcd", "abc", False),
        ],
    )
    def test_star_segments(self, pattern: str, candidate: str, expected: bool) -> None:
        assert _match(pattern, candidate) is expected

    def test_retries_from_fallback_after_partial_match(self) -> None:
        """A broken tentative match restarts one position after the last anchor."""
        assert _match("*abc", "ababc") is True
        assert _match("a*c", "abcbc") is True

    def test_whole_string_only(self) -> None:
        assert _match("*b", "abc") is False
        assert _match("b*", "abc") is False


# === Case folding ===


class TestCaseFolding:
    def test_case_insensitive_folds_both_sides(self) -> None:
        assert _match("ABC*", "abcdef") is True
        assert _match("abc*", "ABCDEF") is True

    def test_case_sensitive_keeps_case(self) -> None:
        assert _match("ABC*", "abcdef", case_sensitive=True) is False
        assert _match("ABC*", "ABCdef", case_sensitive=True) is True

    def test_non_ascii_letters_fold(self) -> None:
        assert _match("ÄBC?", "äbcx") is True

    def test_folding_that_changes_length(self) -> None:
        # "İ".lower() is "i" followed by U+0307, two code points
        assert _match("?", "İ") is False
        assert _match("??", "İ") is True
        assert _match("i?", "İ") is True
        assert _match("?", "İ", case_sensitive=True) is True

    def test_folded_sequence_length(self) -> None:
        assert compile_sequence("İ", case_sensitive=False) == ("i", "\u0307", END)
        assert compile_sequence("İ", case_sensitive=True) == ("İ", END)
