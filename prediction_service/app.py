"""
Prediction Service API - FastAPI Application

Endpoints:
- POST /predictions - Score symptoms and vitals, store the prediction
- GET /predictions - Prediction history for a user (newest first)
- GET /predictions/stats - Dashboard statistics for a user
- GET /predictions/{prediction_id} - Single prediction (owner only)
- POST /symptoms/analyze - Free-text symptom analysis (HuggingFace, optional)
- GET /health - Liveness check

Authentication is handled upstream; the caller passes user_id.
Predictions are heuristic - NOT a medical diagnosis.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field

from .config import Settings
from .engines.disease_predictor import DiseasePredictor
from .engines.health_stats import summarize_history
from .engines.orchestrator import PredictionOrchestrator, ValidationError
from .engines.symptom_matcher import SymptomMatcher
from .model_adapters.classifier_adapter import get_classifier
from .models import VitalSigns
from .storage.prediction_store import (
    PredictionAccessDenied,
    PredictionNotFound,
    PredictionStore,
    build_store,
)

logger = logging.getLogger(__name__)


# Request/Response models
# Requests accept snake_case or the web client's camelCase field names
class VitalSignsPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    heart_rate: Optional[float] = Field(default=None, alias="heartRate")
    blood_pressure: Optional[str] = Field(default=None, alias="bloodPressure")
    temperature: Optional[float] = None
    oxygen_level: Optional[float] = Field(default=None, alias="oxygenLevel")


class PredictionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    symptoms: List[str]
    vital_signs: Optional[VitalSignsPayload] = Field(default=None, alias="vitalSigns")
    subject_age: Optional[float] = Field(default=None, alias="subjectAge")
    user_id: str = Field(default="anonymous", alias="userId")


class AnalyzeRequest(BaseModel):
    symptoms: List[str]


class VitalSignsResponse(BaseModel):
    heart_rate: Optional[float] = None
    blood_pressure: Optional[str] = None
    temperature: Optional[float] = None
    oxygen_level: Optional[float] = None


class MortalityRiskResponse(BaseModel):
    risk: str
    probability: float
    risk_score: int


class PredictionResponse(BaseModel):
    id: str
    owner_id: str
    symptoms: List[str]
    vital_signs: VitalSignsResponse
    predicted_disease: str
    confidence: int
    mortality_risk: MortalityRiskResponse
    recommendations: List[str]
    created_at: Optional[str] = None
    ml_enhanced: bool = False


class HealthStatsResponse(BaseModel):
    total_predictions: int
    risk_distribution: Dict[str, int]
    common_symptoms: Dict[str, int]
    recent_conditions: List[Dict[str, Any]]
    average_confidence: int


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[PredictionStore] = None,
    orchestrator: Optional[PredictionOrchestrator] = None
) -> FastAPI:
    """
    Build the API with its engines.

    Args:
        settings: Service settings (environment when omitted)
        store: Prediction store (built from settings when omitted)
        orchestrator: Prediction orchestrator (built when omitted)
    """
    settings = settings or Settings.from_env()
    classifier = get_classifier(settings)

    if orchestrator is None:
        store = store or build_store(settings)
        orchestrator = PredictionOrchestrator(
            predictor=DiseasePredictor(matcher=SymptomMatcher(), classifier=classifier),
            store=store,
        )
    store = orchestrator.store

    app = FastAPI(
        title="Health Prediction Service",
        description="Symptom-based disease prediction and mortality risk scoring",
        version="1.0.0"
    )

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.post("/predictions", response_model=PredictionResponse, status_code=201)
    async def create_prediction(request: PredictionRequest):
        vitals_payload = request.vital_signs or VitalSignsPayload()
        try:
            result = await orchestrator.create_prediction(
                owner_id=request.user_id,
                symptoms=request.symptoms,
                vital_signs=VitalSigns(**vitals_payload.model_dump()),
                subject_age=request.subject_age,
            )
            return result.to_dict()
        except ValidationError as e:
            raise HTTPException(status_code=400, detail=str(e))
        except Exception as e:
            logger.exception("Prediction error")
            raise HTTPException(status_code=500, detail=str(e))

    @app.get("/predictions", response_model=List[PredictionResponse])
    async def list_predictions(user_id: str = "anonymous"):
        try:
            records = store.find_by_owner(user_id, limit=settings.history_limit)
            return [record.to_dict() for record in records]
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    @app.get("/predictions/stats", response_model=HealthStatsResponse)
    async def prediction_stats(user_id: str = "anonymous"):
        try:
            return summarize_history(store.find_by_owner(user_id))
        except Exception as e:
            raise HTTPException(status_code=500, detail=str(e))

    @app.get("/predictions/{prediction_id}", response_model=PredictionResponse)
    async def get_prediction(prediction_id: str, user_id: str = "anonymous"):
        try:
            return store.get_for_owner(prediction_id, user_id).to_dict()
        except PredictionNotFound:
            raise HTTPException(status_code=404, detail="Prediction not found")
        except PredictionAccessDenied:
            raise HTTPException(status_code=403, detail="Not authorized")

    @app.post("/symptoms/analyze")
    async def analyze_symptoms(request: AnalyzeRequest):
        """
        Optional free-text analysis. Returns analysis=None when the
        HuggingFace API is not configured or fails.
        """
        analysis = await classifier.analyze_symptoms(request.symptoms)
        return {"analysis": analysis, "available": analysis is not None}

    @app.get("/health")
    async def health():
        return {"status": "ok", "classifier_configured": classifier.is_configured()}

    return app
