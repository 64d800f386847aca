import pytest

from prediction_service.engines.knowledge_base import DISEASE_KNOWLEDGE_BASE
from prediction_service.engines.symptom_matcher import normalize_symptoms
from prediction_service.models import SeverityTier


def test_normalize_symptoms():
    assert normalize_symptoms(["  Cough ", "RUNNY nose", "   "]) == ["cough", "runny nose"]


def test_common_cold_example(matcher):
    candidates = matcher.match(["cough", "runny nose", "sneezing"])
    top = candidates[0]
    assert top.disease == "Common Cold"
    assert top.severity is SeverityTier.LOW
    # 3 symptoms + 2 * 2 keywords ("runny", "cough") over 10 terms
    assert top.matched_symptoms == 3
    assert top.keyword_matches == 2
    assert top.confidence == 70


def test_candidates_sorted_by_confidence(matcher):
    candidates = matcher.match(["cough", "runny nose", "sneezing"])
    confidences = [c.confidence for c in candidates]
    assert confidences == sorted(confidences, reverse=True)
    by_name = {c.disease: c.confidence for c in candidates}
    assert by_name["Bronchitis"] == 33
    assert by_name["Allergic Rhinitis"] == 20
    assert by_name["COVID-19"] == 8


def test_matching_is_bidirectional(matcher):
    # "dry cough" contains "cough", and "cough" is contained in "persistent cough"
    candidates = {c.disease: c for c in matcher.match(["cough"])}
    assert candidates["COVID-19"].matched_symptoms == 1
    assert candidates["Bronchitis"].matched_symptoms == 1
    assert candidates["Common Cold"].matched_symptoms == 1


def test_no_overlap_gives_no_candidates(matcher):
    assert matcher.match(["xyzzy_no_match"]) == []


def test_case_and_whitespace_ignored(matcher):
    assert matcher.match(["  COUGH  "]) == matcher.match(["cough"])


def test_ties_keep_declaration_order(matcher):
    # "fatigue" alone scores 1/10 for four diseases
    candidates = matcher.match(["fatigue"])
    tied = [c.disease for c in candidates if c.confidence == 10]
    assert tied == ["Influenza", "Pneumonia", "Hypertension", "Anxiety Disorder"]
    assert candidates[0].disease == "Depression"


def test_repeated_calls_identical(matcher):
    symptoms = ["fever", "dry cough", "loss of taste"]
    assert matcher.match(symptoms) == matcher.match(symptoms)


@pytest.mark.parametrize("name", list(DISEASE_KNOWLEDGE_BASE))
def test_full_profile_ranks_disease_first(matcher, name):
    entry = DISEASE_KNOWLEDGE_BASE[name]
    candidates = matcher.match(list(entry.symptoms) + list(entry.keywords))
    assert candidates[0].disease == name
    assert candidates[0].confidence == 95
