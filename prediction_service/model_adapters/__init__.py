# Model Adapters Package
"""
Adapters for external AI APIs.
"""

from .classifier_adapter import (
    UNAVAILABLE,
    ClassifierAdapter,
    ClassifierScores,
    HuggingFaceClassifier,
    Scored,
    get_classifier,
)

__all__ = [
    "UNAVAILABLE",
    "ClassifierAdapter",
    "ClassifierScores",
    "HuggingFaceClassifier",
    "Scored",
    "get_classifier",
]
