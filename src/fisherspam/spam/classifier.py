# =============================================================================
# Classifier
# =============================================================================
# Extracts features from text, scores them, and maps the score onto a
# three-way verdict:
#
#   0.0 ............ max_ham_score ...... min_spam_score ............ 1.0
#          HAM                   UNSURE                    SPAM
#
# Both bounds are inclusive on their own side: exactly 0.4 is ham and
# exactly 0.6 is spam with the default thresholds.
# =============================================================================

import logging

from fisherspam.core import FeatureRecord, FeatureStore, Verdict
from fisherspam.spam.scorer import ScoringConfig, score
from fisherspam.spam.tokenizer import Tokenizer, TokenizerProtocol

logger = logging.getLogger(__name__)


def extract_features(
    text: str,
    store: FeatureStore,
    tokenizer: TokenizerProtocol | None = None,
    *,
    intern: bool = True,
) -> list[FeatureRecord]:
    """
    Turn text into the store's records for its tokens.

    Args:
        text: Text to tokenize.
        store: Store to resolve tokens against.
        tokenizer: Tokenizer to use. Creates default if None.
        intern: If True, unseen tokens get zero-count records inserted into
                the store. If False, the store is not modified.

    Returns:
        One record per distinct token.
    """
    tokens = (tokenizer or Tokenizer()).tokenize(text)
    resolve = store.intern if intern else store.lookup
    return [resolve(token) for token in tokens]


def classification(spam_score: float, config: ScoringConfig | None = None) -> Verdict:
    """Map a numeric score onto a verdict."""
    config = config or ScoringConfig()

    if spam_score <= config.max_ham_score:
        return Verdict.HAM
    if spam_score >= config.min_spam_score:
        return Verdict.SPAM
    return Verdict.UNSURE


def classify(
    text: str,
    store: FeatureStore,
    tokenizer: TokenizerProtocol | None = None,
    config: ScoringConfig | None = None,
    *,
    intern: bool = True,
) -> tuple[Verdict, float]:
    """
    Classify text against a trained store.

    Args:
        text: Text to classify.
        store: Trained feature store.
        tokenizer: Tokenizer to use. Creates default if None.
        config: Scoring thresholds and prior. Uses defaults if None.
        intern: See extract_features().

    Returns:
        (verdict, score) where score is in [0, 1].
    """
    if not store.is_trained:
        logger.warning(
            f"Classifying with an incompletely trained store "
            f"({store.total_spam_count} spam, {store.total_ham_count} ham)"
        )

    features = extract_features(text, store, tokenizer, intern=intern)
    spam_score = score(features, store, config)
    verdict = classification(spam_score, config)

    logger.debug(f"Classified text with {len(features)} features: {verdict.name} ({spam_score:.4f})")

    return verdict, spam_score
