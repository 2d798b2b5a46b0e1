"""Word list based offensive language matching."""

from .matcher import (
    MockWordMatcher,
    ProfanityWordMatcher,
    TokenWordMatcher,
    read_wordlist,
)

__all__ = ["TokenWordMatcher", "ProfanityWordMatcher", "MockWordMatcher", "read_wordlist"]
