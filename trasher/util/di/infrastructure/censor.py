"""Word matcher infrastructure providers."""

from dishka import Scope, provide

from trasher.adapter.censor import ProfanityWordMatcher
from trasher.config import CensorSettings
from trasher.domain.service import WordMatcher
from trasher.util.di.base import ProviderBase


class CensorProvider(ProviderBase):
    """Word matcher component base."""

    __mock_component__ = "censor"


class ProdCensorProvider(CensorProvider):
    """Production word matcher provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_word_matcher(self, censor_settings: CensorSettings) -> WordMatcher:
        """Provide profanity word matcher.

        The word list is built once per application.
        """
        return ProfanityWordMatcher(
            use_default_wordlist=censor_settings.use_default_wordlist,
            wordlist_path=censor_settings.wordlist_path,
            extra_words=censor_settings.extra_words,
            allowlist=censor_settings.allowlist,
        )
