"""Core schema, configuration, and static lookups for diabetes risk decision support."""

from core.schema import (
    FEATURE_COLUMNS,
    OUTCOME_COLUMN,
    HealthRecord,
    PatientInput,
    PredictionResult,
    EvaluationReport,
)
from core.config import AppConfig, load_config
from core.clinical_codes import CLINICAL_CODES, icd10_codes

__all__ = [
    "FEATURE_COLUMNS",
    "OUTCOME_COLUMN",
    "HealthRecord",
    "PatientInput",
    "PredictionResult",
    "EvaluationReport",
    "AppConfig",
    "load_config",
    "CLINICAL_CODES",
    "icd10_codes",
]
