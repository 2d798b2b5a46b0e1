"""Mock word matcher providers for testing."""

from dishka import Scope, provide

from trasher.adapter.censor import MockWordMatcher
from trasher.domain.service import WordMatcher
from trasher.util.di.infrastructure.censor import CensorProvider


class MockCensorProvider(CensorProvider):
    """Mock word matcher provider with a fixed term list."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_word_matcher(self) -> WordMatcher:
        """Provide mock word matcher."""
        return MockWordMatcher()
