# Prediction Service Package
"""
Health Prediction Service

This package provides the symptom-to-diagnosis scoring pipeline:
- Rule-based disease matching against a static knowledge base
- Optional zero-shot classifier blending (HuggingFace Inference API)
- Mortality risk scoring from age, vital signs and disease severity
- Ordered advisory recommendations

Predictions are heuristic and NOT a medical diagnosis.
"""

__version__ = "1.0.0"
