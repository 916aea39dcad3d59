# =============================================================================
# fisherspam Core Module
# =============================================================================
# Plain data types shared by the training and scoring code. Nothing here
# depends on the rest of the package, so it can be imported from anywhere.
#
#   - Label / Verdict: the two training classes and three classification outcomes
#   - FeatureRecord: per-token spam/ham counts
#   - FeatureStore: the token -> record mapping plus corpus-wide totals
# =============================================================================

from fisherspam.core.errors import FisherSpamError, InvalidArgument, InvalidLabel
from fisherspam.core.feature import FeatureRecord, FeatureStore, StoreStats
from fisherspam.core.label import Label, Verdict

__all__ = [
    "FeatureRecord",
    "FeatureStore",
    "StoreStats",
    "Label",
    "Verdict",
    "FisherSpamError",
    "InvalidArgument",
    "InvalidLabel",
]
