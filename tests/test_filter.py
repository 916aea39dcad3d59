# =============================================================================
# SpamFilter Tests
# =============================================================================

import threading

import pytest

from fisherspam.core import FeatureStore, InvalidLabel, Label, StoreStats, Verdict
from fisherspam.spam import SpamFilter, classify


@pytest.fixture
def spam_filter(sample_spam_text, sample_ham_text):
    """Create a SpamFilter trained on one spam and one ham message."""
    spam_filter = SpamFilter()
    spam_filter.train_spam(sample_spam_text)
    spam_filter.train_ham(sample_ham_text)
    return spam_filter


def test_classify_reports_token_evidence(spam_filter):
    result = spam_filter.classify("buy viagra and unseen stuff")

    assert result.verdict is Verdict.SPAM
    assert result.is_spam
    assert result.score == pytest.approx(0.825178, abs=1e-5)
    assert result.token_scores == {
        "buy": pytest.approx(0.75),
        "viagra": pytest.approx(0.75),
    }


def test_matches_module_level_classify(spam_filter, trained_store):
    result = spam_filter.classify("buy coffee tomorrow")
    verdict, spam_score = classify("buy coffee tomorrow", trained_store)

    assert result.verdict is verdict
    assert result.score == pytest.approx(spam_score)


def test_wraps_given_store():
    store = FeatureStore()
    spam_filter = SpamFilter(store=store)

    spam_filter.train_spam("buy cheap viagra now")

    assert spam_filter.store is store
    assert store.total_spam_count == 1


def test_stats(spam_filter):
    assert spam_filter.is_trained
    assert spam_filter.stats == StoreStats(spam_count=1, ham_count=1, token_count=9)


def test_classify_without_interning(spam_filter):
    spam_filter.classify("brand new words", intern=False)
    assert spam_filter.stats.token_count == 9

    spam_filter.classify("brand new words")
    assert spam_filter.stats.token_count == 12


def test_train_rejects_invalid_label():
    spam_filter = SpamFilter()

    with pytest.raises(InvalidLabel):
        spam_filter.train("buy now", "spam")

    assert spam_filter.stats == StoreStats()


def test_concurrent_training_loses_no_counts():
    spam_filter = SpamFilter()
    per_thread = 50

    def worker(label):
        for _ in range(per_thread):
            spam_filter.train("shared token stream", label)
            spam_filter.classify("shared stream unseen")

    threads = [
        threading.Thread(target=worker, args=(label,))
        for label in (Label.SPAM, Label.HAM, Label.SPAM, Label.HAM)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    store = spam_filter.store
    assert store.total_spam_count == 2 * per_thread
    assert store.total_ham_count == 2 * per_thread
    assert store.features["shared"].spam_count == 2 * per_thread
    assert store.features["shared"].ham_count == 2 * per_thread
