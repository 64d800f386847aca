"""
Mortality Risk Scorer
=====================

Additive risk score from age, vital signs and the predicted disease severity.
Each factor contributes independently from its own bracket:

    Age            >75: 35   >65: 30   >50: 20   >35: 10   <18: 5
    Heart rate     >120 or <50: 25       >100 or <60: 15
    Oxygen (%)     <85: 35   <90: 25   <95: 10
    Temperature    >40 or <35: 25   >39.4 or <35.5: 15   >38.5: 5
    Blood pressure sys >180/<90 or dia >120/<60: 20
                   sys >160/<100 or dia >100/<65: 10
    Severity       Critical: 35   High: 25   Medium: 15   Low: 5

Risk tiers (score): >=80 Critical, >=60 High, >=35 Medium, otherwise Low.

The probability is informational and carries a random jitter term; pass a
seeded random source to pin it.
"""

import random
import re
from typing import Optional, Union

from ..models import (
    RiskAssessment,
    RiskTier,
    SeverityTier,
    VitalSigns,
    is_measured,
    round_half_up,
)

BLOOD_PRESSURE_PATTERN = re.compile(r"(\d+)/(\d+)")

SEVERITY_POINTS = {
    SeverityTier.CRITICAL: 35,
    SeverityTier.HIGH: 25,
    SeverityTier.MEDIUM: 15,
    SeverityTier.LOW: 5,
}

# (min score, tier, probability base, max bonus, jitter span)
RISK_BANDS = [
    (80, RiskTier.CRITICAL, 80, 15, 5),
    (60, RiskTier.HIGH, 60, 15, 10),
    (35, RiskTier.MEDIUM, 35, 20, 10),
    (0, RiskTier.LOW, 10, 20, 10),
]

MAX_PROBABILITY = 99.9


def age_points(age: float) -> int:
    if age > 75:
        return 35
    if age > 65:
        return 30
    if age > 50:
        return 20
    if age > 35:
        return 10
    if age < 18:
        return 5
    return 0


def heart_rate_points(heart_rate: Optional[float]) -> int:
    if not is_measured(heart_rate):
        return 0
    if heart_rate > 120 or heart_rate < 50:
        return 25
    if heart_rate > 100 or heart_rate < 60:
        return 15
    return 0


def oxygen_points(oxygen_level: Optional[float]) -> int:
    if not is_measured(oxygen_level):
        return 0
    if oxygen_level < 85:
        return 35
    if oxygen_level < 90:
        return 25
    if oxygen_level < 95:
        return 10
    return 0


def temperature_points(temperature: Optional[float]) -> int:
    if not is_measured(temperature):
        return 0
    if temperature > 40 or temperature < 35:
        return 25
    if temperature > 39.4 or temperature < 35.5:
        return 15
    if temperature > 38.5:
        return 5
    return 0


def parse_blood_pressure(blood_pressure: Optional[str]):
    """
    Extract (systolic, diastolic) from strings like "120/80".

    Returns:
        Tuple of ints, or None when the value does not parse
    """
    if not blood_pressure or not isinstance(blood_pressure, str):
        return None
    match = BLOOD_PRESSURE_PATTERN.search(blood_pressure)
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


def blood_pressure_points(blood_pressure: Optional[str]) -> int:
    parsed = parse_blood_pressure(blood_pressure)
    if parsed is None:
        return 0
    systolic, diastolic = parsed
    if systolic > 180 or systolic < 90 or diastolic > 120 or diastolic < 60:
        return 20
    if systolic > 160 or systolic < 100 or diastolic > 100 or diastolic < 65:
        return 10
    return 0


def severity_points(severity: Union[SeverityTier, str, None]) -> int:
    if severity is None:
        return 0
    try:
        return SEVERITY_POINTS[SeverityTier(severity)]
    except ValueError:
        return 0


def _band_for(score: int):
    for band in RISK_BANDS:
        if score >= band[0]:
            return band
    return RISK_BANDS[-1]


def risk_tier_for(score: int) -> RiskTier:
    return _band_for(score)[1]


class MortalityRiskScorer:
    """
    Scores mortality risk for one prediction.
    """

    def __init__(self, rng=None):
        """
        Args:
            rng: Object with a random() method returning [0, 1). Defaults to
                the random module.
        """
        self.rng = rng or random

    def risk_score(
        self,
        age: float,
        vital_signs: Optional[VitalSigns],
        severity: Union[SeverityTier, str, None]
    ) -> int:
        """Deterministic part of the assessment."""
        vitals = vital_signs or VitalSigns()
        return (
            age_points(age)
            + heart_rate_points(vitals.heart_rate)
            + oxygen_points(vitals.oxygen_level)
            + temperature_points(vitals.temperature)
            + blood_pressure_points(vitals.blood_pressure)
            + severity_points(severity)
        )

    def assess(
        self,
        age: float,
        vital_signs: Optional[VitalSigns],
        severity: Union[SeverityTier, str, None]
    ) -> RiskAssessment:
        """
        Full assessment: score, tier and jittered probability.

        Args:
            age: Subject age in years
            vital_signs: Measured vitals, any field may be None
            severity: Severity tier of the predicted disease

        Returns:
            RiskAssessment
        """
        score = self.risk_score(age, vital_signs, severity)

        min_score, tier, base, max_bonus, jitter_span = _band_for(score)
        bonus = min(score - min_score, max_bonus)
        probability = base + bonus + self.rng.random() * jitter_span

        return RiskAssessment(
            risk=tier,
            probability=min(round_half_up(probability, 1), MAX_PROBABILITY),
            risk_score=score,
        )
