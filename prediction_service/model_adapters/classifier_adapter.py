"""
Zero-Shot Classifier Adapter

Optional HuggingFace Inference API client that gives the disease predictor a
secondary confidence signal.

The adapter never raises to its caller: a missing credential, a timeout, a
non-2xx response or a malformed body all come back as UNAVAILABLE, and the
pipeline carries on with the rule-based confidence.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Union

import aiohttp

logger = logging.getLogger(__name__)

HF_API_URL = "https://api-inference.huggingface.co/models/"

DEFAULT_CLASSIFIER_MODEL = "facebook/bart-large-mnli"
DEFAULT_ANALYSIS_MODEL = "distilbert-base-uncased-finetuned-sst-2-english"
DEFAULT_TIMEOUT = 10.0

# Broad condition classes the symptom text is scored against
SEVERITY_CLASS_LABELS = [
    "infectious disease",
    "chronic illness",
    "acute condition",
    "minor ailment",
    "serious medical condition",
]


@dataclass(frozen=True)
class Scored:
    """A secondary confidence in [0, 100]."""
    value: float


@dataclass(frozen=True)
class ClassifierScores:
    labels: List[str]
    scores: List[float]


class _Unavailable:
    """No classifier signal for this request."""

    def __repr__(self) -> str:
        return "UNAVAILABLE"

    def __bool__(self) -> bool:
        return False


UNAVAILABLE = _Unavailable()

ClassifierResult = Union[ClassifierScores, _Unavailable]
CandidateScore = Union[Scored, _Unavailable]


class ClassifierAdapter(ABC):
    """Base class for secondary-confidence providers."""

    @abstractmethod
    async def classify(self, text: str, candidate_labels: Sequence[str]) -> ClassifierResult:
        """Score text against labels, or return UNAVAILABLE."""
        pass

    @abstractmethod
    def is_configured(self) -> bool:
        """Check if the provider has what it needs to be called."""
        pass

    async def score_candidate(self, symptoms_text: str, disease: str) -> CandidateScore:
        """
        Secondary confidence for the top candidate.

        The symptom text is classified against broad condition classes and
        the strongest class score (as a percentage) is returned. A zero
        signal counts as unavailable.
        """
        if not self.is_configured():
            return UNAVAILABLE

        result = await self.classify(symptoms_text, SEVERITY_CLASS_LABELS)
        if result is UNAVAILABLE:
            return UNAVAILABLE

        value = max(result.scores) * 100
        if not value:
            return UNAVAILABLE

        logger.debug(f"Classifier signal for {disease}: {value:.1f}")
        return Scored(value)


class HuggingFaceClassifier(ClassifierAdapter):
    """
    Adapter for the HuggingFace Inference API.

    Uses a zero-shot model (bart-large-mnli by default) for the secondary
    confidence, and a sentiment model for the free-text symptom analysis.
    """

    def __init__(
        self,
        api_key: str = "",
        model: str = DEFAULT_CLASSIFIER_MODEL,
        analysis_model: str = DEFAULT_ANALYSIS_MODEL,
        timeout: float = DEFAULT_TIMEOUT,
        base_url: str = HF_API_URL,
    ):
        """
        Args:
            api_key: HuggingFace API token; empty disables the adapter
            model: Zero-shot classification model
            analysis_model: Model used by analyze_symptoms
            timeout: Total request timeout in seconds
            base_url: Inference API root
        """
        self.api_key = api_key or ""
        self.model = model
        self.analysis_model = analysis_model
        self.timeout = timeout
        self.base_url = base_url

    def is_configured(self) -> bool:
        return bool(self.api_key)

    async def classify(self, text: str, candidate_labels: Sequence[str]) -> ClassifierResult:
        """
        Zero-shot classify text against candidate labels.

        Returns:
            ClassifierScores, or UNAVAILABLE on any failure
        """
        if not self.is_configured():
            return UNAVAILABLE

        payload = {
            "inputs": text,
            "parameters": {"candidate_labels": list(candidate_labels)},
        }

        data = await self._safe_post(self.model, payload)
        if data is None:
            return UNAVAILABLE

        scores = data.get("scores") if isinstance(data, dict) else None
        if not scores or not all(isinstance(s, (int, float)) for s in scores):
            logger.warning("Classifier response missing scores, ignoring")
            return UNAVAILABLE

        labels = data.get("labels") or list(candidate_labels)
        return ClassifierScores(labels=list(labels), scores=[float(s) for s in scores])

    async def analyze_symptoms(self, symptoms: Sequence[str]) -> Optional[Any]:
        """
        Free-text assessment of the symptom list.

        Returns:
            Raw API JSON, or None when unconfigured or failing
        """
        if not self.is_configured():
            return None

        payload = {"inputs": f"Patient symptoms: {', '.join(symptoms)}. Medical assessment:"}
        return await self._safe_post(self.analysis_model, payload)

    async def _safe_post(self, model: str, payload: Dict[str, Any]) -> Optional[Any]:
        try:
            return await self._post(model, payload)
        except asyncio.TimeoutError:
            logger.info(f"HuggingFace request to {model} timed out after {self.timeout}s")
        except aiohttp.ClientError as e:
            logger.info(f"HuggingFace API error: {e}")
        except ValueError as e:
            logger.warning(f"HuggingFace API returned malformed body: {e}")
        except Exception as e:
            logger.warning(f"HuggingFace request failed unexpectedly: {e}")
        return None

    async def _post(self, model: str, payload: Dict[str, Any]) -> Any:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        async with aiohttp.ClientSession() as session:
            async with session.post(
                f"{self.base_url}{model}",
                headers=headers,
                json=payload,
                timeout=aiohttp.ClientTimeout(total=self.timeout)
            ) as response:
                response.raise_for_status()
                return await response.json()


def get_classifier(settings) -> HuggingFaceClassifier:
    """Build the classifier from settings."""
    return HuggingFaceClassifier(
        api_key=settings.huggingface_api_key,
        model=settings.classifier_model,
        analysis_model=settings.analysis_model,
        timeout=settings.classifier_timeout,
    )
