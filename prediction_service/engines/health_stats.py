"""
Health statistics over an owner's prediction history.
"""

from collections import Counter
from typing import Any, Dict, Sequence

from ..models import PredictionRecord, RiskTier, round_half_up

RECENT_CONDITIONS_LIMIT = 5


def summarize_history(records: Sequence[PredictionRecord]) -> Dict[str, Any]:
    """
    Aggregate dashboard statistics.

    Args:
        records: Owner's predictions, newest first

    Returns:
        Dict with total_predictions, risk_distribution, common_symptoms,
        recent_conditions and average_confidence
    """
    risk_distribution = {tier.value: 0 for tier in RiskTier}
    common_symptoms = Counter()
    recent_conditions = []
    total_confidence = 0

    for record in records:
        risk_distribution[record.mortality_risk.risk.value] += 1
        common_symptoms.update(record.symptoms)
        total_confidence += record.confidence

        if len(recent_conditions) < RECENT_CONDITIONS_LIMIT:
            recent_conditions.append({
                "disease": record.predicted_disease,
                "date": record.created_at.isoformat() if record.created_at else None,
                "risk": record.mortality_risk.risk.value,
                "confidence": record.confidence,
            })

    average_confidence = 0
    if records:
        average_confidence = int(round_half_up(total_confidence / len(records)))

    return {
        "total_predictions": len(records),
        "risk_distribution": risk_distribution,
        "common_symptoms": dict(common_symptoms),
        "recent_conditions": recent_conditions,
        "average_confidence": average_confidence,
    }
