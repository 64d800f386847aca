# Engines Package
"""
Scoring engines for the prediction pipeline.
"""

from .disease_predictor import DiseasePredictor
from .health_stats import summarize_history
from .knowledge_base import DISEASE_KNOWLEDGE_BASE, DiseaseEntry
from .orchestrator import PredictionOrchestrator, PredictionResult, ValidationError
from .recommendations import RecommendationGenerator
from .risk_scorer import MortalityRiskScorer
from .symptom_matcher import SymptomMatcher

__all__ = [
    "DISEASE_KNOWLEDGE_BASE",
    "DiseaseEntry",
    "DiseasePredictor",
    "MortalityRiskScorer",
    "PredictionOrchestrator",
    "PredictionResult",
    "RecommendationGenerator",
    "SymptomMatcher",
    "ValidationError",
    "summarize_history",
]
