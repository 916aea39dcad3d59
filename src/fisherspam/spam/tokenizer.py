# =============================================================================
# Text Tokenizer for Spam Classification
# =============================================================================
# Converts raw text into the set of features the classifier trains on and
# scores with.
#
# A token is a maximal run of ASCII letters at least min_token_length long.
# Tokens are case-sensitive ("Viagra" and "viagra" are different features)
# and each distinct token is reported once per text, however often it
# repeats.
# =============================================================================

import re
from dataclasses import dataclass
from typing import Protocol


@dataclass
class TokenizerConfig:
    """
    Configuration for text tokenization.

    Attributes:
        min_token_length: Shortest letter run kept as a token.
    """
    min_token_length: int = 3


class TokenizerProtocol(Protocol):
    """Anything that can turn text into a set of distinct tokens."""

    def tokenize(self, text: str) -> set[str]:
        ...


class Tokenizer:
    """
    Extracts distinct ASCII-letter tokens from text.

    Usage:
        >>> tokenizer = Tokenizer()
        >>> sorted(tokenizer.tokenize("Buy cheap viagra now, buy NOW!"))
        ['Buy', 'NOW', 'buy', 'cheap', 'now', 'viagra']
    """

    def __init__(self, config: TokenizerConfig | None = None) -> None:
        """
        Initialize the tokenizer.

        Args:
            config: Tokenizer configuration.
        """
        self.config = config or TokenizerConfig()
        self._word_pattern = re.compile(
            r"[A-Za-z]{%d,}" % self.config.min_token_length
        )

    def tokenize(self, text: str) -> set[str]:
        """
        Tokenize text.

        Args:
            text: Raw text to split into features.

        Returns:
            Set of distinct tokens.
        """
        if not text:
            return set()

        # [A-Za-z]{n,} is greedy, so every match is a maximal letter run
        return set(self._word_pattern.findall(text))
