"""
Disease Predictor

Picks the top symptom-matcher candidate and, when a classifier is configured,
blends its confidence with the classifier signal:

    final = round(rule_confidence * 0.7 + classifier_confidence * 0.3)

With no candidates the predictor falls back to "Unknown Condition".
"""

import logging
from dataclasses import replace
from typing import Optional, Sequence

from ..model_adapters.classifier_adapter import UNAVAILABLE, ClassifierAdapter
from ..models import DiseaseMatch, SeverityTier, round_half_up
from .symptom_matcher import SymptomMatcher, normalize_symptoms

logger = logging.getLogger(__name__)

UNKNOWN_CONDITION = "Unknown Condition"
FALLBACK_CONFIDENCE = 30

RULE_WEIGHT = 0.7
CLASSIFIER_WEIGHT = 0.3


def fallback_prediction() -> DiseaseMatch:
    return DiseaseMatch(
        disease=UNKNOWN_CONDITION,
        confidence=FALLBACK_CONFIDENCE,
        severity=SeverityTier.LOW,
        matched_symptoms=0,
        keyword_matches=0,
        ml_enhanced=False,
    )


class DiseasePredictor:
    """
    Rule-based disease prediction with optional classifier enhancement.
    """

    def __init__(
        self,
        matcher: Optional[SymptomMatcher] = None,
        classifier: Optional[ClassifierAdapter] = None
    ):
        self.matcher = matcher or SymptomMatcher()
        self.classifier = classifier

    async def predict(self, symptoms: Sequence[str]) -> DiseaseMatch:
        """
        Decide a single prediction for the symptoms.

        Args:
            symptoms: Raw symptom strings

        Returns:
            The decided DiseaseMatch (never raises on classifier failure)
        """
        candidates = self.matcher.match(symptoms)
        if not candidates:
            logger.info("No knowledge-base match, using fallback prediction")
            return fallback_prediction()

        top = candidates[0]

        if self.classifier is None or not self.classifier.is_configured():
            return top

        symptoms_text = " ".join(normalize_symptoms(symptoms))
        try:
            signal = await self.classifier.score_candidate(symptoms_text, top.disease)
        except Exception as e:
            logger.warning(f"Classifier failed: {e}")
            signal = UNAVAILABLE

        if signal is UNAVAILABLE:
            logger.info("ML enhancement unavailable, using rule-based prediction")
            return top

        blended = top.confidence * RULE_WEIGHT + signal.value * CLASSIFIER_WEIGHT
        return replace(top, confidence=int(round_half_up(blended)), ml_enhanced=True)
