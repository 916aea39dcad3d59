# =============================================================================
# SpamFilter
# =============================================================================
# Convenience wrapper holding a tokenizer, a feature store and scoring
# settings together, for applications that want one object to train and
# query.
#
# The store is the only shared mutable state. Classification interns unseen
# tokens and so writes to the store, which means both training and
# classification take the same exclusive lock.
# =============================================================================

import threading
from dataclasses import dataclass, field

from fisherspam.core import FeatureStore, Label, StoreStats, Verdict
from fisherspam.spam.classifier import classification, extract_features
from fisherspam.spam.scorer import ScoringConfig, score, token_probabilities
from fisherspam.spam.tokenizer import Tokenizer, TokenizerProtocol
from fisherspam.spam.trainer import train


@dataclass
class SpamScore:
    """
    Result of classifying a piece of text.

    Attributes:
        verdict: HAM, SPAM or UNSURE.
        score: Combined spam score (0.0 = ham, 1.0 = spam).
        token_scores: Adjusted spam probability of each trained token that
                      contributed to the score.
    """
    verdict: Verdict
    score: float
    token_scores: dict[str, float] = field(default_factory=dict)

    @property
    def is_spam(self) -> bool:
        return self.verdict is Verdict.SPAM


class SpamFilter:
    """
    Fisher-Robinson spam filter.

    Usage:
        >>> spam_filter = SpamFilter()
        >>> spam_filter.train_spam("buy cheap viagra now")
        >>> spam_filter.train_ham("let's meet for coffee tomorrow")
        >>> result = spam_filter.classify("buy viagra")
        >>> result.verdict
        <Verdict.SPAM: 2>

    Attributes:
        tokenizer: Tokenizer for extracting features from text.
        store: The feature store being trained.
        config: Scoring thresholds and prior.
    """

    def __init__(
        self,
        store: FeatureStore | None = None,
        tokenizer: TokenizerProtocol | None = None,
        config: ScoringConfig | None = None,
    ) -> None:
        """
        Initialize the spam filter.

        Args:
            store: Existing store to wrap. Creates an empty one if None.
            tokenizer: Tokenizer instance. Creates default if None.
            config: Scoring configuration. Uses defaults if None.
        """
        # An empty store is falsy (len 0), so test against None explicitly
        self.store = store if store is not None else FeatureStore()
        self.tokenizer = tokenizer or Tokenizer()
        self.config = config or ScoringConfig()
        self._lock = threading.Lock()

    @property
    def stats(self) -> StoreStats:
        """Get store statistics."""
        with self._lock:
            return self.store.stats

    @property
    def is_trained(self) -> bool:
        """Returns True if both spam and ham have been trained."""
        with self._lock:
            return self.store.is_trained

    def train(self, text: str, label: Label) -> None:
        """
        Train on one message.

        Raises:
            InvalidLabel: If label is not a Label.
        """
        with self._lock:
            train(text, label, self.store, self.tokenizer)

    def train_spam(self, text: str) -> None:
        """Train on one spam message."""
        self.train(text, Label.SPAM)

    def train_ham(self, text: str) -> None:
        """Train on one ham message."""
        self.train(text, Label.HAM)

    def classify(self, text: str, *, intern: bool = True) -> SpamScore:
        """
        Classify text.

        Args:
            text: Text to classify.
            intern: If False, unseen tokens are not added to the store.

        Returns:
            SpamScore with the verdict, the score and per-token evidence.
        """
        with self._lock:
            features = extract_features(text, self.store, self.tokenizer, intern=intern)
            spam_score = score(features, self.store, self.config)
            token_scores = token_probabilities(features, self.store, self.config)

        return SpamScore(
            verdict=classification(spam_score, self.config),
            score=spam_score,
            token_scores=token_scores,
        )
