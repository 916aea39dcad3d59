# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the fisherspam test suite.
# =============================================================================

import pytest
import tempfile
from pathlib import Path

from fisherspam.core import FeatureStore, Label
from fisherspam.spam import Tokenizer, train


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def store():
    """Create an empty FeatureStore."""
    return FeatureStore()


@pytest.fixture
def tokenizer():
    """Create a default Tokenizer."""
    return Tokenizer()


@pytest.fixture
def sample_spam_text():
    """Sample spam message text."""
    return "buy cheap viagra now"


@pytest.fixture
def sample_ham_text():
    """Sample ham message text."""
    return "let's meet for coffee tomorrow"


@pytest.fixture
def trained_store(store, sample_spam_text, sample_ham_text):
    """Create a store trained on one spam and one ham message."""
    train(sample_spam_text, Label.SPAM, store)
    train(sample_ham_text, Label.HAM, store)
    return store


@pytest.fixture
def corpus_store(store):
    """Create a store trained on a small mixed corpus."""
    spam_messages = [
        "Buy cheap products now",
        "Click here for amazing deals",
        "Free money click now",
        "Urgent limited time offer",
        "Make money fast online",
    ]
    ham_messages = [
        "Hey how are you doing today",
        "Let's meet for coffee tomorrow",
        "The weather is nice today",
        "I finished my homework",
        "What time is the meeting",
    ]
    for text in spam_messages:
        train(text, Label.SPAM, store)
    for text in ham_messages:
        train(text, Label.HAM, store)
    return store
