from pydantic import BaseModel, Field
from typing import List, Dict


FEATURE_COLUMNS = ["Glucose", "BloodPressure", "BMI", "Age", "FamilyHistory"]
OUTCOME_COLUMN = "Outcome"


class HealthRecord(BaseModel):
    """One row of the health-indicator table."""
    Pregnancies: float
    Glucose: float
    BloodPressure: float
    SkinThickness: float
    Insulin: float
    BMI: float
    DiabetesPedigreeFunction: float
    Age: float
    FamilyHistory: int = Field(..., ge=0, le=1)
    Outcome: int = Field(..., ge=0, le=1)


class PatientInput(BaseModel):
    glucose: float = Field(100, ge=0, description="Glucose Level")
    blood_pressure: float = Field(70, ge=0, description="Blood Pressure")
    bmi: float = Field(25, ge=0, description="BMI")
    age: float = Field(30, ge=0, description="Age")
    family_history: bool = Field(False, description="Family History of Diabetes")

    def to_features(self) -> Dict[str, float]:
        """Map form fields onto the model's feature columns."""
        return {
            "Glucose": self.glucose,
            "BloodPressure": self.blood_pressure,
            "BMI": self.bmi,
            "Age": self.age,
            "FamilyHistory": 1 if self.family_history else 0,
        }


class PredictionResult(BaseModel):
    probability: float = Field(..., ge=0, le=1)
    probability_text: str
    recommendation: str
    clinical_codes: str


class EvaluationReport(BaseModel):
    confusion_matrix: List[List[int]] = Field(..., description="Rows = actual, columns = predicted, labels [0, 1]")
    fpr: List[float]
    tpr: List[float]
    thresholds: List[float]
    auc: float
    accuracy: float
    sensitivity: float
    specificity: float
    precision: float
    n_test: int
