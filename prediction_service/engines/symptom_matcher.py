"""
Symptom Matcher

Scores every knowledge-base disease against free-text symptoms.

Scoring:
- A canonical symptom counts when it and some input symptom contain one
  another (either direction), e.g. "dry cough" <-> "cough".
- A keyword counts when it occurs anywhere in the space-joined input text.
- score = matched symptoms + 2 * matched keywords
- confidence = round(min(score / (symptoms + keywords) * 100, 95))

Diseases with a zero score are dropped. Candidates are ordered by descending
confidence; ties keep knowledge-base order.
"""

import logging
from typing import List, Mapping, Optional, Sequence

from ..models import DiseaseMatch, round_half_up
from .knowledge_base import DISEASE_KNOWLEDGE_BASE, DiseaseEntry

logger = logging.getLogger(__name__)


def normalize_symptoms(symptoms: Sequence[str]) -> List[str]:
    """Lower-case and trim each symptom, dropping blanks."""
    normalized = [s.lower().strip() for s in symptoms if s is not None]
    return [s for s in normalized if s]


class SymptomMatcher:
    """
    Rule-based disease matcher over a static knowledge base.
    """

    MAX_CONFIDENCE = 95
    KEYWORD_WEIGHT = 2

    def __init__(self, knowledge_base: Optional[Mapping[str, DiseaseEntry]] = None):
        self.knowledge_base = knowledge_base if knowledge_base is not None else DISEASE_KNOWLEDGE_BASE

    def match(self, symptoms: Sequence[str]) -> List[DiseaseMatch]:
        """
        Rank diseases for the given symptoms.

        Args:
            symptoms: Raw symptom strings (normalized here)

        Returns:
            Candidates sorted by confidence, possibly empty
        """
        normalized = normalize_symptoms(symptoms)
        symptoms_text = " ".join(normalized)

        candidates = []
        for entry in self.knowledge_base.values():
            matched = self._count_symptom_matches(entry, normalized)
            keyword_hits = self._count_keyword_matches(entry, symptoms_text)

            score = matched + self.KEYWORD_WEIGHT * keyword_hits
            if score == 0:
                continue

            confidence = min(score / entry.total_terms * 100, self.MAX_CONFIDENCE)
            candidates.append(DiseaseMatch(
                disease=entry.name,
                confidence=int(round_half_up(confidence)),
                severity=entry.severity,
                matched_symptoms=matched,
                keyword_matches=keyword_hits,
            ))

        # sorted() is stable, so equal confidences keep declaration order
        candidates = sorted(candidates, key=lambda m: m.confidence, reverse=True)
        logger.debug(f"Matched {len(candidates)} candidate diseases")
        return candidates

    @staticmethod
    def _count_symptom_matches(entry: DiseaseEntry, normalized: List[str]) -> int:
        count = 0
        for canonical in entry.symptoms:
            if any(s in canonical or canonical in s for s in normalized):
                count += 1
        return count

    @staticmethod
    def _count_keyword_matches(entry: DiseaseEntry, symptoms_text: str) -> int:
        return sum(1 for keyword in entry.keywords if keyword in symptoms_text)
