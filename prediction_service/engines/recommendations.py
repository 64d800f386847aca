"""
Recommendation Generator

Builds the ordered advisory list for a prediction. Order is fixed:
urgent care (High/Critical only), general advice, disease-specific advice,
vital-sign advice, lifestyle, follow-up.
"""

from typing import Dict, List, Optional, Union

from ..models import RiskTier, VitalSigns, is_measured

URGENT_CARE = [
    "⚠️ URGENT: Seek immediate medical attention at the nearest hospital or emergency room",
    "Call emergency services (ambulance) if symptoms worsen or you experience severe distress",
]

GENERAL_ADVICE = [
    "Consult a qualified healthcare professional for proper diagnosis and treatment",
    "Monitor your symptoms regularly and keep a health journal",
]

FEVER_ADVICE = [
    "Take fever-reducing medication (acetaminophen or ibuprofen) as directed",
    "Use cool compresses and take lukewarm baths",
]

LOW_OXYGEN_ADVICE = [
    "⚠️ Low oxygen levels detected - seek medical attention immediately",
    "Sit upright and practice deep breathing exercises",
]

HEART_RATE_ADVICE = [
    "Monitor heart rate regularly and record the readings",
    "Avoid caffeine and strenuous activities until evaluated",
]

LIFESTYLE_ADVICE = [
    "Maintain a balanced, nutritious diet rich in fruits and vegetables",
    "Stay physically active within your comfort level",
    "Ensure adequate sleep (7-9 hours per night)",
    "Practice stress management techniques",
]

FOLLOW_UP_ADVICE = [
    "Schedule a follow-up appointment with your doctor within 7-14 days",
    "Keep a record of your symptoms and their progression",
]

# Diseases without an entry get no specific advice
DISEASE_ADVICE: Dict[str, List[str]] = {
    "Common Cold": [
        "Get plenty of rest (7-9 hours of sleep)",
        "Stay well hydrated - drink warm fluids like herbal tea, soup, or warm water",
        "Use over-the-counter cold medications as directed",
        "Gargle with warm salt water for sore throat relief",
        "Use a humidifier to ease congestion",
    ],
    "Influenza": [
        "Complete bed rest is essential for recovery",
        "Drink plenty of fluids to prevent dehydration",
        "Consider antiviral medication if within 48 hours of symptom onset",
        "Isolate yourself to prevent spreading the infection",
        "Monitor temperature regularly",
    ],
    "COVID-19": [
        "🚨 Self-isolate immediately and inform close contacts",
        "Get tested for COVID-19 as soon as possible",
        "Contact your local health department",
        "Monitor oxygen levels with a pulse oximeter if available",
        "Follow current COVID-19 treatment protocols",
        "Avoid contact with high-risk individuals",
    ],
    "Pneumonia": [
        "⚠️ Seek immediate medical attention - pneumonia requires professional treatment",
        "Complete full course of prescribed antibiotics if bacterial",
        "Get plenty of rest and avoid strenuous activities",
        "Stay hydrated with water and clear fluids",
        "Use prescribed inhalers or oxygen therapy as directed",
    ],
    "Migraine": [
        "Rest in a dark, quiet room away from bright lights",
        "Apply cold compress to forehead and temples",
        "Take prescribed migraine medication at first sign of symptoms",
        "Avoid known triggers (certain foods, stress, lack of sleep)",
        "Practice relaxation techniques and stress management",
        "Maintain regular sleep schedule",
    ],
    "Hypertension": [
        "Monitor blood pressure regularly (twice daily)",
        "Reduce salt intake to less than 2,300mg per day",
        "Engage in regular physical activity (30 minutes daily)",
        "Maintain healthy weight through diet and exercise",
        "Take prescribed blood pressure medications as directed",
        "Reduce stress through meditation or yoga",
        "Limit alcohol consumption and quit smoking",
    ],
    "Diabetes": [
        "Monitor blood sugar levels as prescribed by your doctor",
        "Follow a diabetic-friendly diet plan",
        "Take prescribed medications/insulin on schedule",
        "Exercise regularly with your doctor's approval",
        "Check feet daily for cuts or sores",
        "Maintain regular check-ups with endocrinologist",
        "Keep emergency glucose tablets handy",
    ],
    "Gastritis": [
        "Avoid spicy, acidic, and fatty foods",
        "Eat smaller, more frequent meals throughout the day",
        "Take prescribed antacids or proton pump inhibitors",
        "Avoid NSAIDs (ibuprofen, aspirin) unless prescribed",
        "Reduce stress through relaxation techniques",
        "Limit alcohol and caffeine consumption",
        "Don't eat 2-3 hours before bedtime",
    ],
    "Asthma": [
        "Keep rescue inhaler with you at all times",
        "Use prescribed controller medications daily",
        "Avoid known triggers (allergens, smoke, cold air)",
        "Monitor peak flow readings regularly",
        "Have an asthma action plan",
        "Get annual flu vaccination",
        "Keep indoor air clean with air purifiers",
    ],
    "Allergic Rhinitis": [
        "Identify and avoid allergen triggers",
        "Use prescribed antihistamines as directed",
        "Consider nasal corticosteroid sprays",
        "Keep windows closed during high pollen seasons",
        "Use air conditioning with HEPA filters",
        "Shower before bed to remove allergens from hair/skin",
        "Consider immunotherapy (allergy shots) for severe cases",
    ],
    "Bronchitis": [
        "Get plenty of rest to help your body fight infection",
        "Stay hydrated with warm fluids",
        "Use humidifier to loosen mucus",
        "Avoid smoking and secondhand smoke",
        "Take prescribed cough suppressants if needed",
        "Complete full course of antibiotics if prescribed",
    ],
    "Sinusitis": [
        "Use saline nasal rinses 2-3 times daily",
        "Apply warm compresses to face",
        "Stay well hydrated",
        "Use decongestants as directed",
        "Sleep with head elevated",
        "Avoid allergens and irritants",
    ],
}

URGENT_TIERS = (RiskTier.HIGH, RiskTier.CRITICAL)


class RecommendationGenerator:
    """Deterministic advisory list builder."""

    def __init__(self, disease_advice: Optional[Dict[str, List[str]]] = None):
        self.disease_advice = disease_advice if disease_advice is not None else DISEASE_ADVICE

    def generate(
        self,
        disease: str,
        risk: Union[RiskTier, str],
        vital_signs: Optional[VitalSigns] = None
    ) -> List[str]:
        """
        Args:
            disease: Predicted disease name
            risk: Mortality risk tier
            vital_signs: Measured vitals, if any

        Returns:
            Ordered recommendation strings
        """
        recommendations = []

        if RiskTier(risk) in URGENT_TIERS:
            recommendations.extend(URGENT_CARE)

        recommendations.extend(GENERAL_ADVICE)
        recommendations.extend(self.disease_advice.get(disease, []))

        if vital_signs is not None:
            recommendations.extend(self._vital_sign_advice(vital_signs))

        recommendations.extend(LIFESTYLE_ADVICE)
        recommendations.extend(FOLLOW_UP_ADVICE)
        return recommendations

    @staticmethod
    def _vital_sign_advice(vitals: VitalSigns) -> List[str]:
        advice = []
        if is_measured(vitals.temperature) and vitals.temperature > 38.5:
            advice.extend(FEVER_ADVICE)
        if is_measured(vitals.oxygen_level) and vitals.oxygen_level < 95:
            advice.extend(LOW_OXYGEN_ADVICE)
        if is_measured(vitals.heart_rate) and (vitals.heart_rate > 100 or vitals.heart_rate < 60):
            advice.extend(HEART_RATE_ADVICE)
        return advice
