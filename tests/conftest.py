import pytest

from prediction_service.engines.symptom_matcher import SymptomMatcher
from prediction_service.model_adapters.classifier_adapter import (
    UNAVAILABLE,
    ClassifierAdapter,
    ClassifierScores,
)
from prediction_service.storage.prediction_store import InMemoryPredictionStore


class FixedRandom:
    """Random source pinned to one value."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


class FakeClassifier(ClassifierAdapter):
    """
    Classifier double. `scores=None` means the provider reports UNAVAILABLE;
    `error` makes every call raise.
    """

    def __init__(self, scores=None, configured=True, error=None):
        self.scores = scores
        self.configured = configured
        self.error = error
        self.calls = []

    def is_configured(self) -> bool:
        return self.configured

    async def classify(self, text, candidate_labels):
        self.calls.append((text, list(candidate_labels)))
        if self.error is not None:
            raise self.error
        if self.scores is None:
            return UNAVAILABLE
        return ClassifierScores(labels=list(candidate_labels), scores=self.scores)


@pytest.fixture
def matcher() -> SymptomMatcher:
    return SymptomMatcher()


@pytest.fixture
def store() -> InMemoryPredictionStore:
    return InMemoryPredictionStore()


@pytest.fixture
def fixed_rng():
    """Jitter pinned to zero."""
    return FixedRandom(0.0)
