"""Word matcher interface consumed by the moderation service."""


class WordMatcher:
    """Finds offensive terms in a piece of text.

    Implementations must be deterministic for a fixed input and word list.
    """

    def match(self, text: str) -> tuple[str, ...]:
        """Find offensive terms in text.

        Args:
            text: Arbitrary text

        Returns:
            Distinct matched terms in order of first occurrence,
            empty if nothing matched
        """
        raise NotImplementedError
