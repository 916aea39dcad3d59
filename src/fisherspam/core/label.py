# =============================================================================
# Labels and Verdicts
# =============================================================================
# Training only knows two classes: a message is either HAM or SPAM.
# Classification adds a third outcome, UNSURE, for scores that land between
# the ham and spam thresholds.
# =============================================================================

from enum import Enum, auto


class Label(Enum):
    """
    The class a training message belongs to.
    """
    HAM = auto()        # Legitimate mail
    SPAM = auto()       # Junk


class Verdict(Enum):
    """
    The outcome of classifying a piece of text.
    """
    HAM = auto()
    SPAM = auto()
    UNSURE = auto()     # Score fell inside the unsure band
