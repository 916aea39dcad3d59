# =============================================================================
# Trainer
# =============================================================================
# Feeds one labeled example into a FeatureStore:
#   1. Tokenize the text into its distinct features
#   2. Intern each feature and count it under the label
#   3. Count the message itself under the label
#
# Training the same text twice counts it twice: every call is one example.
# =============================================================================

import logging

from fisherspam.core import FeatureStore, InvalidLabel, Label
from fisherspam.spam.tokenizer import Tokenizer, TokenizerProtocol

logger = logging.getLogger(__name__)


def train(
    text: str,
    label: Label,
    store: FeatureStore,
    tokenizer: TokenizerProtocol | None = None,
) -> None:
    """
    Train the store on one message.

    Args:
        text: Message text.
        label: Label.SPAM or Label.HAM.
        store: The store to update.
        tokenizer: Tokenizer to use. Creates default if None.

    Raises:
        InvalidLabel: If label is not a Label. The store is left untouched.
    """
    # Validate up front so a bad label can't leave half-counted features
    if not isinstance(label, Label):
        raise InvalidLabel(label)

    tokens = (tokenizer or Tokenizer()).tokenize(text)

    for token in tokens:
        store.intern(token).increment(label)

    store.increment_total(label)

    logger.debug(f"Trained {label.name} message with {len(tokens)} features")
