"""
Shared data types for the prediction pipeline.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional


class SeverityTier(str, Enum):
    """Disease-level severity tag from the knowledge base."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class RiskTier(str, Enum):
    """Per-prediction mortality risk category."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with .5 going up, e.g. 2.5 -> 3 (Python's round() would give 2)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def is_measured(value: Optional[float]) -> bool:
    """A reading counts only when present and positive (0 means not taken)."""
    return value is not None and value > 0


@dataclass
class VitalSigns:
    """Optional vitals. None means "not measured", never zero."""
    heart_rate: Optional[float] = None
    blood_pressure: Optional[str] = None
    temperature: Optional[float] = None
    oxygen_level: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "VitalSigns":
        data = data or {}
        return cls(
            heart_rate=data.get("heart_rate", data.get("heartRate")),
            blood_pressure=data.get("blood_pressure", data.get("bloodPressure")),
            temperature=data.get("temperature"),
            oxygen_level=data.get("oxygen_level", data.get("oxygenLevel")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "heart_rate": self.heart_rate,
            "blood_pressure": self.blood_pressure,
            "temperature": self.temperature,
            "oxygen_level": self.oxygen_level,
        }


@dataclass
class DiseaseMatch:
    """A scored disease candidate (or the final decided prediction)."""
    disease: str
    confidence: int
    severity: Optional[SeverityTier]
    matched_symptoms: int = 0
    keyword_matches: int = 0
    ml_enhanced: bool = False


@dataclass
class RiskAssessment:
    risk: RiskTier
    probability: float
    risk_score: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "risk": self.risk.value,
            "probability": self.probability,
            "risk_score": self.risk_score,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RiskAssessment":
        return cls(
            risk=RiskTier(data["risk"]),
            probability=data["probability"],
            risk_score=data["risk_score"],
        )


@dataclass
class PredictionRecord:
    """
    One stored prediction. `id` and `created_at` are assigned by the store.
    """
    owner_id: str
    symptoms: List[str]
    vital_signs: VitalSigns
    predicted_disease: str
    confidence: int
    mortality_risk: RiskAssessment
    recommendations: List[str] = field(default_factory=list)
    id: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "owner_id": self.owner_id,
            "symptoms": list(self.symptoms),
            "vital_signs": self.vital_signs.to_dict(),
            "predicted_disease": self.predicted_disease,
            "confidence": self.confidence,
            "mortality_risk": self.mortality_risk.to_dict(),
            "recommendations": list(self.recommendations),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PredictionRecord":
        created_at = data.get("created_at")
        return cls(
            id=data.get("id"),
            owner_id=data["owner_id"],
            symptoms=list(data["symptoms"]),
            vital_signs=VitalSigns.from_dict(data.get("vital_signs")),
            predicted_disease=data["predicted_disease"],
            confidence=data["confidence"],
            mortality_risk=RiskAssessment.from_dict(data["mortality_risk"]),
            recommendations=list(data.get("recommendations", [])),
            created_at=datetime.fromisoformat(created_at) if created_at else None,
        )
