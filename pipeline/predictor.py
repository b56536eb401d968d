"""Single-record risk prediction for the interactive form."""
import logging

from core.clinical_codes import icd10_codes
from core.schema import PatientInput, PredictionResult
from pipeline.ml_pipeline import predict_probability

logger = logging.getLogger(__name__)

HIGH_RISK_RECOMMENDATION = (
    "Recommendation: Please consult with your healthcare provider for further tests and lifestyle changes. "
    "Prescriptions may include Metformin or lifestyle interventions."
)
LOW_RISK_RECOMMENDATION = (
    "Recommendation: Maintain a healthy lifestyle to reduce your risk of diabetes. "
    "Regular check-ups are recommended."
)
NO_CODES_TEXT = "No specific clinical codes relevant to the symptoms provided."


def probability_text(probability: float) -> str:
    return f"The predicted probability of having diabetes is: {probability * 100:.2f} %"


def recommendation_for(probability: float, threshold: float = 0.5) -> str:
    """High-risk advice only when probability is strictly above the threshold."""
    return HIGH_RISK_RECOMMENDATION if probability > threshold else LOW_RISK_RECOMMENDATION


def clinical_codes_text(family_history: bool) -> str:
    if family_history:
        return "Clinical Codes (ICD-10): " + ", ".join(icd10_codes())
    return NO_CODES_TEXT


def predict_risk(model, patient: PatientInput, threshold: float = 0.5) -> PredictionResult:
    """
    Score one patient and derive the three form outputs.
    Pure with respect to the model: nothing is cached or recorded between calls.
    """
    probability = predict_probability(model, patient.to_features())
    logger.debug("Predicted probability %.4f for %s", probability, patient.model_dump())
    return PredictionResult(
        probability=probability,
        probability_text=probability_text(probability),
        recommendation=recommendation_for(probability, threshold),
        clinical_codes=clinical_codes_text(patient.family_history),
    )
