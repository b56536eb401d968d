"""ML Pipeline: Synthetic data → stratified split → Logistic Reg → evaluation → single-record prediction."""

from pipeline.ml_pipeline import ModelTrainingError, run_ml_pipeline
from pipeline.predictor import predict_risk

__all__ = ["ModelTrainingError", "run_ml_pipeline", "predict_risk"]
