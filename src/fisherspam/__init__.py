# =============================================================================
# fisherspam: Fisher-Robinson Spam Classification
# =============================================================================
#
# Classifies text as HAM, SPAM or UNSURE from per-token evidence learned
# incrementally from labeled examples.
#
# Pipeline:
#   - Tokenizer: text -> distinct ASCII-letter tokens
#   - FeatureStore: token -> spam/ham message counts, plus totals
#   - Trainer: one labeled message -> updated counts
#   - Scorer: Bayesian-adjusted token probabilities, Fisher combination
#   - Classifier: score -> verdict
#
# =============================================================================

__version__ = "0.1.0"
__app_name__ = "fisherspam"

from fisherspam.core import (
    FeatureRecord,
    FeatureStore,
    FisherSpamError,
    InvalidArgument,
    InvalidLabel,
    Label,
    StoreStats,
    Verdict,
)
from fisherspam.spam import ScoringConfig, SpamFilter, SpamScore, Tokenizer, classify, train

__all__ = [
    "FeatureRecord",
    "FeatureStore",
    "StoreStats",
    "Label",
    "Verdict",
    "FisherSpamError",
    "InvalidArgument",
    "InvalidLabel",
    "ScoringConfig",
    "SpamFilter",
    "SpamScore",
    "Tokenizer",
    "train",
    "classify",
    "__version__",
    "__app_name__",
]
