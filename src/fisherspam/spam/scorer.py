# =============================================================================
# Fisher-Robinson Spam Scorer
# =============================================================================
# Turns a set of features into a single spam score in [0, 1].
#
# How it works:
#   1. For each trained feature, estimate P(spam | feature) from the ratio of
#      its spam frequency to its total frequency
#   2. Shrink that estimate toward a neutral prior (0.5) in proportion to how
#      little evidence we have, so a token seen once can't dominate
#   3. Combine the per-feature probabilities with Fisher's method twice:
#      once looking for spam evidence, once looking for ham evidence
#   4. Average the two indicators into one score
#
# Features that were never trained carry no evidence and are skipped.
# =============================================================================

import math
from collections.abc import Iterable
from dataclasses import dataclass

from fisherspam.core import FeatureRecord, FeatureStore, InvalidArgument


@dataclass
class ScoringConfig:
    """
    Configuration for scoring and classification.

    Attributes:
        max_ham_score: Scores <= this classify as ham.
        min_spam_score: Scores >= this classify as spam.
        assumed_probability: Prior spam probability for a feature with no
                             evidence.
        weight: How many data points the prior is worth.
    """
    max_ham_score: float = 0.4
    min_spam_score: float = 0.6
    assumed_probability: float = 0.5
    weight: float = 1.0

    def __post_init__(self):
        """Validate configuration parameters"""
        if not (0.0 <= self.max_ham_score <= 1.0):
            raise ValueError("max_ham_score must be between 0 and 1")

        if not (0.0 <= self.min_spam_score <= 1.0):
            raise ValueError("min_spam_score must be between 0 and 1")

        if self.max_ham_score > self.min_spam_score:
            raise ValueError("max_ham_score must not exceed min_spam_score")

        # A prior of exactly 0 or 1 would feed log(0) into the combination
        if not (0.0 < self.assumed_probability < 1.0):
            raise ValueError("assumed_probability must be strictly between 0 and 1")

        # nan and inf would turn every adjusted probability into nan
        if not (math.isfinite(self.weight) and self.weight > 0):
            raise ValueError("weight must be a positive finite number")


def spam_probability(feature: FeatureRecord, store: FeatureStore) -> float:
    """
    Raw probability that a message containing feature is spam.

    The caller must not pass an untrained feature (both counts zero).
    """
    spam_frequency = feature.spam_count / max(1, store.total_spam_count)
    ham_frequency = feature.ham_count / max(1, store.total_ham_count)
    return spam_frequency / (spam_frequency + ham_frequency)


def bayesian_spam_probability(
    feature: FeatureRecord,
    store: FeatureStore,
    assumed_probability: float = 0.5,
    weight: float = 1,
) -> float:
    """
    spam_probability() shrunk toward assumed_probability.

    With few data points the result stays close to the prior; as the
    feature is seen in more messages the raw estimate takes over.
    """
    basic_probability = spam_probability(feature, store)
    data_points = feature.spam_count + feature.ham_count
    return (weight * assumed_probability + data_points * basic_probability) / (
        weight + data_points
    )


def inverse_chi_square(value: float, degrees_of_freedom: int) -> float:
    """
    Return prob(chi-square >= value) with the given degrees of freedom.

    Args:
        value: The chi-square statistic.
        degrees_of_freedom: Non-negative even integer.

    Raises:
        InvalidArgument: If degrees_of_freedom is odd, negative, or not an int.
    """
    if (
        not isinstance(degrees_of_freedom, int)
        or degrees_of_freedom < 0
        or degrees_of_freedom % 2
    ):
        raise InvalidArgument(
            f"degrees_of_freedom must be a non-negative even integer, got {degrees_of_freedom!r}"
        )

    # Zero terms to sum
    if degrees_of_freedom == 0:
        return 0.0

    m = value / 2.0
    total = term = math.exp(-m)
    for i in range(1, degrees_of_freedom // 2):
        term *= m / i
        total += term

    # Roundoff can push the sum a few ULP above 1.0
    return min(total, 1.0)


def fisher(probs: Iterable[float], number_of_probs: int) -> float:
    """
    Combine independent probabilities with Fisher's method.
    """
    chi_square = -2.0 * sum(math.log(p) for p in probs)
    return inverse_chi_square(chi_square, 2 * number_of_probs)


def trained_features(features: Iterable[FeatureRecord]) -> list[FeatureRecord]:
    """Drop features that have never been seen in training."""
    return [feature for feature in features if not feature.untrained]


def score(
    features: Iterable[FeatureRecord],
    store: FeatureStore,
    config: ScoringConfig | None = None,
) -> float:
    """
    Compute the spam score for a set of features.

    Args:
        features: Features extracted from the text being classified.
        store: The store the features belong to.
        config: Scoring parameters. Uses defaults if None.

    Returns:
        Score in [0, 1]. 0.5 when no feature has been trained.
    """
    config = config or ScoringConfig()

    spam_probs: list[float] = []
    ham_probs: list[float] = []
    for feature in trained_features(features):
        probability = bayesian_spam_probability(
            feature, store, config.assumed_probability, config.weight
        )
        spam_probs.append(probability)
        ham_probs.append(1.0 - probability)

    number_of_probs = len(spam_probs)
    h = 1 - fisher(spam_probs, number_of_probs)
    s = 1 - fisher(ham_probs, number_of_probs)
    return ((1 - h) + s) / 2.0


def token_probabilities(
    features: Iterable[FeatureRecord],
    store: FeatureStore,
    config: ScoringConfig | None = None,
) -> dict[str, float]:
    """
    Per-token adjusted spam probability of each trained feature.

    Useful for explaining a score; untrained features are left out.
    """
    config = config or ScoringConfig()
    return {
        feature.token: bayesian_spam_probability(
            feature, store, config.assumed_probability, config.weight
        )
        for feature in trained_features(features)
    }
