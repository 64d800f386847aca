"""
Prediction Orchestrator
=======================

Single entry point for creating a prediction:

    symptoms -> DiseasePredictor -> MortalityRiskScorer -> RecommendationGenerator
             -> PredictionStore.create_record

Storage errors are not handled here; they propagate to the caller.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from ..models import PredictionRecord, VitalSigns
from ..storage.prediction_store import InMemoryPredictionStore, PredictionStore
from .disease_predictor import DiseasePredictor
from .recommendations import RecommendationGenerator
from .risk_scorer import MortalityRiskScorer

logger = logging.getLogger(__name__)

DEFAULT_AGE = 30


class ValidationError(ValueError):
    """Request cannot be scored (no usable symptoms)."""
    pass


@dataclass
class PredictionResult:
    record: PredictionRecord
    ml_enhanced: bool

    def to_dict(self) -> Dict[str, Any]:
        return {**self.record.to_dict(), "ml_enhanced": self.ml_enhanced}


def clean_symptoms(symptoms: Optional[Sequence[str]]) -> List[str]:
    """Drop blank entries; kept entries stay verbatim."""
    return [s for s in (symptoms or []) if isinstance(s, str) and s.strip()]


class PredictionOrchestrator:
    """
    Composes prediction, risk scoring and recommendations into one record.
    """

    def __init__(
        self,
        predictor: Optional[DiseasePredictor] = None,
        risk_scorer: Optional[MortalityRiskScorer] = None,
        recommender: Optional[RecommendationGenerator] = None,
        store: Optional[PredictionStore] = None
    ):
        self.predictor = predictor or DiseasePredictor()
        self.risk_scorer = risk_scorer or MortalityRiskScorer()
        self.recommender = recommender or RecommendationGenerator()
        self.store = store if store is not None else InMemoryPredictionStore()

    async def create_prediction(
        self,
        owner_id: str,
        symptoms: Sequence[str],
        vital_signs: Optional[VitalSigns] = None,
        subject_age: Optional[float] = None
    ) -> PredictionResult:
        """
        Score symptoms and vitals and persist the resulting record.

        Args:
            owner_id: Requesting subject
            symptoms: Free-text symptoms as submitted
            vital_signs: Optional vitals
            subject_age: Age in years (30 when unknown)

        Returns:
            PredictionResult with the stored record and the ml_enhanced flag

        Raises:
            ValidationError: No non-blank symptoms
        """
        cleaned = clean_symptoms(symptoms)
        if not cleaned:
            raise ValidationError("Please enter at least one symptom")

        vitals = vital_signs or VitalSigns()
        age = subject_age if subject_age is not None else DEFAULT_AGE

        prediction = await self.predictor.predict(cleaned)
        mortality_risk = self.risk_scorer.assess(age, vitals, prediction.severity)
        recommendations = self.recommender.generate(prediction.disease, mortality_risk.risk, vitals)

        record = self.store.create_record(PredictionRecord(
            owner_id=owner_id,
            symptoms=cleaned,
            vital_signs=vitals,
            predicted_disease=prediction.disease,
            confidence=prediction.confidence,
            mortality_risk=mortality_risk,
            recommendations=recommendations,
        ))

        logger.info(
            f"Prediction {record.id}: {record.predicted_disease} "
            f"({record.confidence}%), risk {mortality_risk.risk.value}"
        )
        return PredictionResult(record=record, ml_enhanced=prediction.ml_enhanced)
