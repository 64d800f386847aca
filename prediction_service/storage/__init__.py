# Storage Package
"""
Persistence for prediction records.
"""

from .prediction_store import (
    InMemoryPredictionStore,
    PredictionAccessDenied,
    PredictionNotFound,
    PredictionStore,
    RedisPredictionStore,
    build_store,
)

__all__ = [
    "InMemoryPredictionStore",
    "PredictionAccessDenied",
    "PredictionNotFound",
    "PredictionStore",
    "RedisPredictionStore",
    "build_store",
]
