"""
Disease Knowledge Base
======================

Static disease table used by the symptom matcher.

Each entry carries canonical symptoms (matched against user input in both
directions), keywords (scanned in the joined symptom text and weighted 2x)
and a severity tier that feeds the mortality risk score.

The table is built once at import time and is read-only afterwards, so it can
be shared across concurrent requests without locking.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from ..models import SeverityTier


@dataclass(frozen=True)
class DiseaseEntry:
    name: str
    symptoms: Tuple[str, ...]
    keywords: Tuple[str, ...]
    severity: SeverityTier

    @property
    def total_terms(self) -> int:
        return len(self.symptoms) + len(self.keywords)


def _entry(name, symptoms, keywords, severity) -> DiseaseEntry:
    return DiseaseEntry(
        name=name,
        symptoms=tuple(symptoms),
        keywords=tuple(keywords),
        severity=severity,
    )


_ENTRIES = (
    _entry(
        "Common Cold",
        ["cough", "runny nose", "sore throat", "sneezing", "mild fever", "congestion"],
        ["cold", "runny", "sneeze", "cough"],
        SeverityTier.LOW,
    ),
    _entry(
        "Influenza",
        ["high fever", "body aches", "fatigue", "cough", "headache", "chills"],
        ["flu", "fever", "ache", "chills"],
        SeverityTier.MEDIUM,
    ),
    _entry(
        "COVID-19",
        ["fever", "dry cough", "fatigue", "loss of taste", "loss of smell",
         "difficulty breathing", "body aches"],
        ["covid", "coronavirus", "taste", "smell", "breath"],
        SeverityTier.HIGH,
    ),
    _entry(
        "Pneumonia",
        ["chest pain", "cough", "fever", "difficulty breathing", "fatigue", "rapid breathing"],
        ["pneumonia", "chest", "breath", "lung"],
        SeverityTier.HIGH,
    ),
    _entry(
        "Migraine",
        ["severe headache", "nausea", "sensitivity to light", "visual disturbances",
         "throbbing pain"],
        ["migraine", "headache", "light", "visual"],
        SeverityTier.MEDIUM,
    ),
    _entry(
        "Hypertension",
        ["headache", "dizziness", "blurred vision", "chest pain", "shortness of breath",
         "fatigue"],
        ["pressure", "hypertension", "dizzy", "chest"],
        SeverityTier.HIGH,
    ),
    _entry(
        "Diabetes",
        ["increased thirst", "frequent urination", "extreme hunger", "fatigue",
         "blurred vision", "slow healing"],
        ["diabetes", "thirst", "urination", "sugar", "hunger"],
        SeverityTier.HIGH,
    ),
    _entry(
        "Gastritis",
        ["stomach pain", "nausea", "vomiting", "bloating", "loss of appetite", "indigestion"],
        ["gastritis", "stomach", "nausea", "bloat"],
        SeverityTier.MEDIUM,
    ),
    _entry(
        "Asthma",
        ["wheezing", "shortness of breath", "chest tightness", "coughing",
         "difficulty breathing"],
        ["asthma", "wheeze", "breath", "chest"],
        SeverityTier.HIGH,
    ),
    _entry(
        "Allergic Rhinitis",
        ["sneezing", "runny nose", "itchy eyes", "nasal congestion", "watery eyes"],
        ["allergy", "rhinitis", "sneeze", "itchy", "eyes"],
        SeverityTier.LOW,
    ),
    _entry(
        "Bronchitis",
        ["persistent cough", "mucus production", "fatigue", "shortness of breath",
         "chest discomfort"],
        ["bronchitis", "cough", "mucus", "chest"],
        SeverityTier.MEDIUM,
    ),
    _entry(
        "Sinusitis",
        ["facial pain", "nasal congestion", "thick nasal discharge",
         "reduced sense of smell", "headache"],
        ["sinus", "facial", "congestion", "nasal"],
        SeverityTier.MEDIUM,
    ),
    _entry(
        "Anxiety Disorder",
        ["excessive worry", "restlessness", "fatigue", "difficulty concentrating",
         "muscle tension", "sleep disturbance"],
        ["anxiety", "worry", "stress", "nervous"],
        SeverityTier.MEDIUM,
    ),
    _entry(
        "Depression",
        ["persistent sadness", "loss of interest", "fatigue", "sleep changes",
         "difficulty concentrating", "appetite changes"],
        ["depression", "sad", "fatigue", "sleep"],
        SeverityTier.MEDIUM,
    ),
)

# Declaration order is significant: it breaks confidence ties in the matcher.
DISEASE_KNOWLEDGE_BASE: Mapping[str, DiseaseEntry] = MappingProxyType(
    {entry.name: entry for entry in _ENTRIES}
)


def get_disease(name: str):
    """Look up an entry by exact name, or None."""
    return DISEASE_KNOWLEDGE_BASE.get(name)
