"""Word matchers backed by word lists."""

import re
from functools import lru_cache
from pathlib import Path
from typing import Callable, Iterable

import logfire
from better_profanity import Profanity

from trasher.adapter.error import WordListError
from trasher.domain.service.word_matcher import WordMatcher

_TOKEN_RE = re.compile(r"\w+")


def read_wordlist(path: str | Path) -> list[str]:
    """Read a word list file.

    One word per line. Blank lines and lines starting with ``#`` are skipped.

    Args:
        path: Path to the word list

    Returns:
        Lowercased words in file order

    Raises:
        WordListError: If the file cannot be read
    """
    try:
        lines = Path(path).read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise WordListError(f"Cannot read word list {path}: {e}") from e

    words = []
    for line in lines:
        word = line.strip().lower()
        if word and not word.startswith("#"):
            words.append(word)
    return words


class TokenWordMatcher(WordMatcher):
    """Base for matchers that judge text word by word."""

    def _is_offensive(self, token: str) -> bool:
        raise NotImplementedError

    def match(self, text: str) -> tuple[str, ...]:
        """Find offensive terms in text, one verdict per distinct token."""
        matched: dict[str, None] = {}
        for token in _TOKEN_RE.findall(text.lower()):
            if token not in matched and self._is_offensive(token):
                matched[token] = None
        return tuple(matched)


class ProfanityWordMatcher(TokenWordMatcher):
    """Word matcher using the better-profanity filter.

    better-profanity also catches common character substitutions
    (e.g. ``sh1t``) for every word in its list.
    """

    def __init__(
        self,
        use_default_wordlist: bool = True,
        wordlist_path: str | None = None,
        extra_words: Iterable[str] = (),
        allowlist: Iterable[str] = (),
        cache_size: int = 10000,
    ) -> None:
        """Build the word set.

        Args:
            use_default_wordlist: Include better-profanity's bundled list
            wordlist_path: Optional file with one word per line
            extra_words: Additional words
            allowlist: Words never reported
            cache_size: Number of token verdicts to memoize

        Raises:
            WordListError: If the word list file cannot be read
        """
        allowed = {w.strip().lower() for w in allowlist}
        custom = [w.strip().lower() for w in extra_words if w.strip()]
        if wordlist_path:
            custom = read_wordlist(wordlist_path) + custom
        custom = [w for w in custom if w not in allowed]

        self._profanity = Profanity()
        self._empty = False
        if use_default_wordlist:
            self._profanity.load_censor_words(whitelist_words=list(allowed))
            if custom:
                self._profanity.add_censor_words(custom)
        elif custom:
            self._profanity.load_censor_words(custom_words=custom)
        else:
            # load_censor_words() falls back to the bundled list when given nothing
            self._empty = True

        self._verdict: Callable[[str], bool] = lru_cache(maxsize=cache_size)(
            self._profanity.contains_profanity
        )

        logfire.info(
            "Profanity word matcher ready",
            default_wordlist=use_default_wordlist,
            wordlist_path=wordlist_path,
            custom_words=len(custom),
            allowlisted=len(allowed),
        )

    def _is_offensive(self, token: str) -> bool:
        if self._empty:
            return False
        return self._verdict(token)


class MockWordMatcher(TokenWordMatcher):
    """Mock word matcher for testing.

    Matches whole tokens against a fixed set of terms.
    """

    DEFAULT_TERMS = ("дурак", "идиот", "fuck", "shit")

    def __init__(self, terms: Iterable[str] = DEFAULT_TERMS) -> None:
        self.terms = frozenset(t.lower() for t in terms)

    def _is_offensive(self, token: str) -> bool:
        return token in self.terms
