# =============================================================================
# Spam Module
# =============================================================================
# Statistical spam filtering with Robinson's Fisher-method combination.
#
# Unlike a plain Naive Bayes filter, this one:
#   - Shrinks rarely seen tokens toward a neutral 0.5 prior
#   - Combines token evidence with an inverse chi-square test
#   - Answers UNSURE when the evidence points both ways
#
# Every function takes the FeatureStore explicitly; SpamFilter bundles a
# store, a tokenizer and a config for callers that want a single object.
# =============================================================================

from fisherspam.spam.classifier import classification, classify, extract_features
from fisherspam.spam.filter import SpamFilter, SpamScore
from fisherspam.spam.scorer import (
    ScoringConfig,
    bayesian_spam_probability,
    fisher,
    inverse_chi_square,
    score,
    spam_probability,
    token_probabilities,
)
from fisherspam.spam.tokenizer import Tokenizer, TokenizerConfig, TokenizerProtocol
from fisherspam.spam.trainer import train

__all__ = [
    "SpamFilter",
    "SpamScore",
    "ScoringConfig",
    "Tokenizer",
    "TokenizerConfig",
    "TokenizerProtocol",
    "train",
    "classify",
    "classification",
    "extract_features",
    "score",
    "spam_probability",
    "bayesian_spam_probability",
    "fisher",
    "inverse_chi_square",
    "token_probabilities",
]
