import pytest

from prediction_service.engines.recommendations import (
    DISEASE_ADVICE,
    FEVER_ADVICE,
    FOLLOW_UP_ADVICE,
    GENERAL_ADVICE,
    HEART_RATE_ADVICE,
    LIFESTYLE_ADVICE,
    LOW_OXYGEN_ADVICE,
    URGENT_CARE,
    RecommendationGenerator,
)
from prediction_service.models import RiskTier, VitalSigns


@pytest.fixture
def generator():
    return RecommendationGenerator()


@pytest.mark.parametrize("disease", ["Common Cold", "Pneumonia", "Unknown Condition"])
@pytest.mark.parametrize("risk", [RiskTier.HIGH, RiskTier.CRITICAL])
def test_urgent_care_first(generator, disease, risk):
    recommendations = generator.generate(disease, risk, VitalSigns())
    assert recommendations[:2] == URGENT_CARE
    assert recommendations[0].startswith("⚠️ URGENT")


@pytest.mark.parametrize("risk", [RiskTier.LOW, RiskTier.MEDIUM, "Low"])
def test_no_urgent_care_below_high(generator, risk):
    recommendations = generator.generate("Common Cold", risk, VitalSigns())
    assert recommendations[:2] == GENERAL_ADVICE
    assert URGENT_CARE[0] not in recommendations


def test_golden_order_without_vitals(generator):
    recommendations = generator.generate("Common Cold", RiskTier.LOW)
    expected = GENERAL_ADVICE + DISEASE_ADVICE["Common Cold"] + LIFESTYLE_ADVICE + FOLLOW_UP_ADVICE
    assert recommendations == expected
    assert len(recommendations) == 13


def test_unknown_disease_gets_no_specific_advice(generator):
    recommendations = generator.generate("Anxiety Disorder", RiskTier.MEDIUM, VitalSigns())
    assert recommendations == GENERAL_ADVICE + LIFESTYLE_ADVICE + FOLLOW_UP_ADVICE


def test_golden_order_with_vitals(generator):
    vitals = VitalSigns(temperature=39.0, oxygen_level=92, heart_rate=110)
    recommendations = generator.generate("Influenza", RiskTier.CRITICAL, vitals)
    expected = (
        URGENT_CARE
        + GENERAL_ADVICE
        + DISEASE_ADVICE["Influenza"]
        + FEVER_ADVICE
        + LOW_OXYGEN_ADVICE
        + HEART_RATE_ADVICE
        + LIFESTYLE_ADVICE
        + FOLLOW_UP_ADVICE
    )
    assert recommendations == expected


@pytest.mark.parametrize("vitals, expected", [
    (VitalSigns(temperature=38.5), []),
    (VitalSigns(temperature=38.6), FEVER_ADVICE),
    (VitalSigns(oxygen_level=95), []),
    (VitalSigns(oxygen_level=94), LOW_OXYGEN_ADVICE),
    (VitalSigns(heart_rate=60), []),
    (VitalSigns(heart_rate=100), []),
    (VitalSigns(heart_rate=59), HEART_RATE_ADVICE),
    (VitalSigns(heart_rate=101), HEART_RATE_ADVICE),
    (VitalSigns(heart_rate=0, oxygen_level=0, temperature=0), []),
])
def test_vital_sign_conditions(generator, vitals, expected):
    recommendations = generator.generate("Unknown Condition", RiskTier.LOW, vitals)
    assert recommendations == GENERAL_ADVICE + expected + LIFESTYLE_ADVICE + FOLLOW_UP_ADVICE


def test_generation_is_deterministic(generator):
    vitals = VitalSigns(temperature=40.2, heart_rate=130)
    first = generator.generate("Asthma", RiskTier.HIGH, vitals)
    assert generator.generate("Asthma", RiskTier.HIGH, vitals) == first
