"""Tests for the word matchers."""

import pytest

from trasher.adapter.censor import MockWordMatcher, ProfanityWordMatcher, read_wordlist
from trasher.adapter.error import WordListError


class TestTokenMatching:
    """Tokenization shared by all matchers."""

    def test_matches_whole_tokens_case_insensitively(self):
        matcher = MockWordMatcher()

        assert matcher.match("Ты ДУРАК!") == ("дурак",)

    def test_terms_reported_once_in_order_of_appearance(self):
        matcher = MockWordMatcher()

        assert matcher.match("идиот, дурак и снова идиот") == ("идиот", "дурак")

    def test_substrings_do_not_match(self):
        matcher = MockWordMatcher()

        assert matcher.match("дураки и дурачество") == ()

    def test_empty_text(self):
        matcher = MockWordMatcher()

        assert matcher.match("") == ()


class TestProfanityWordMatcher:
    """Tests for the better-profanity backed matcher."""

    def test_default_wordlist(self):
        matcher = ProfanityWordMatcher()

        assert matcher.match("well this is shit") == ("shit",)
        assert matcher.match("what a lovely article") == ()

    def test_allowlist_suppresses_default_word(self):
        matcher = ProfanityWordMatcher(allowlist=["shit"])

        assert matcher.match("well this is shit") == ()

    def test_custom_words_only(self):
        matcher = ProfanityWordMatcher(use_default_wordlist=False, extra_words=["frak"])

        assert matcher.match("Frak this, and shit") == ("frak",)

    def test_no_words_matches_nothing(self):
        matcher = ProfanityWordMatcher(use_default_wordlist=False)

        assert matcher.match("shit") == ()

    def test_wordlist_file(self, tmp_path):
        wordlist = tmp_path / "words.txt"
        wordlist.write_text("# site specific\n\nGorram\n", encoding="utf-8")

        matcher = ProfanityWordMatcher(
            use_default_wordlist=False, wordlist_path=str(wordlist)
        )

        assert matcher.match("the gorram ship") == ("gorram",)

    def test_missing_wordlist_file(self, tmp_path):
        with pytest.raises(WordListError):
            ProfanityWordMatcher(wordlist_path=str(tmp_path / "missing.txt"))


def test_read_wordlist_skips_comments_and_blanks(tmp_path):
    wordlist = tmp_path / "words.txt"
    wordlist.write_text("# header\nДурак\n\n  идиот  \n#идиот2\n", encoding="utf-8")

    assert read_wordlist(wordlist) == ["дурак", "идиот"]
