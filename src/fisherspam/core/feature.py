# =============================================================================
# Feature Records and the Feature Store
# =============================================================================
# A "feature" is a token used as a unit of statistical evidence. For every
# token seen during training we keep one FeatureRecord holding two counts:
# the number of spam messages and the number of ham messages it appeared in.
#
# The FeatureStore owns all records (keyed by token) and the corpus-wide
# totals. Records are created lazily the first time a token is interned and
# are never deleted.
# =============================================================================

from dataclasses import dataclass, field

from fisherspam.core.errors import InvalidLabel
from fisherspam.core.label import Label


@dataclass
class StoreStats:
    """
    Snapshot of a FeatureStore's size.

    Attributes:
        spam_count: Number of spam messages trained on.
        ham_count: Number of ham messages trained on.
        token_count: Number of distinct tokens in the store.
    """
    spam_count: int = 0
    ham_count: int = 0
    token_count: int = 0


@dataclass
class FeatureRecord:
    """
    Training counts for a single token.

    A token is counted at most once per message, so the counts are numbers
    of messages, not numbers of occurrences.

    Attributes:
        token: The token this record represents. Read-only once set.
        spam_count: Spam messages the token appeared in.
        ham_count: Ham messages the token appeared in.
    """
    token: str
    spam_count: int = 0
    ham_count: int = 0

    def __setattr__(self, name: str, value: object) -> None:
        if name == "token" and "token" in self.__dict__:
            raise AttributeError("FeatureRecord.token is read-only")
        super().__setattr__(name, value)

    @property
    def untrained(self) -> bool:
        """True if the token has never been seen in a training message."""
        return self.spam_count == 0 and self.ham_count == 0

    def increment(self, label: Label) -> None:
        """
        Count one more training message of the given label.

        Raises:
            InvalidLabel: If label is not a Label.
        """
        if label is Label.SPAM:
            self.spam_count += 1
        elif label is Label.HAM:
            self.ham_count += 1
        else:
            raise InvalidLabel(label)


@dataclass
class FeatureStore:
    """
    Token -> FeatureRecord mapping plus the number of messages trained
    per label.

    Every operation in the package takes the store explicitly; there is no
    process-wide default store.

    Usage:
        >>> store = FeatureStore()
        >>> record = store.intern("viagra")
        >>> record.increment(Label.SPAM)
        >>> store.increment_total(Label.SPAM)
        >>> store.stats
        StoreStats(spam_count=1, ham_count=0, token_count=1)
    """
    features: dict[str, FeatureRecord] = field(default_factory=dict)
    total_ham_count: int = 0
    total_spam_count: int = 0

    def __len__(self) -> int:
        return len(self.features)

    def __contains__(self, token: object) -> bool:
        return token in self.features

    @property
    def stats(self) -> StoreStats:
        """Get store statistics."""
        return StoreStats(
            spam_count=self.total_spam_count,
            ham_count=self.total_ham_count,
            token_count=len(self.features),
        )

    @property
    def is_trained(self) -> bool:
        """Returns True if at least one message of each label was trained."""
        return self.total_spam_count > 0 and self.total_ham_count > 0

    def intern(self, token: str) -> FeatureRecord:
        """
        Return the record for token, creating a zero-count one if needed.
        """
        record = self.features.get(token)
        if record is None:
            record = FeatureRecord(token)
            self.features[token] = record
        return record

    def lookup(self, token: str) -> FeatureRecord:
        """
        Return the record for token without modifying the store.

        Unknown tokens get a fresh zero-count record that is NOT inserted,
        so classification can run without writing to shared state.
        """
        record = self.features.get(token)
        if record is None:
            return FeatureRecord(token)
        return record

    def increment_total(self, label: Label) -> None:
        """
        Count one more trained message of the given label.

        Raises:
            InvalidLabel: If label is not a Label.
        """
        if label is Label.SPAM:
            self.total_spam_count += 1
        elif label is Label.HAM:
            self.total_ham_count += 1
        else:
            raise InvalidLabel(label)
