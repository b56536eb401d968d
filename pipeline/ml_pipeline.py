"""
Diabetes Risk Decision Support: ML Pipeline
Implements: Synthetic data → stratified split → Logistic Reg → held-out evaluation
"""
import logging
import warnings
from typing import Any, Dict, Mapping, Optional, Tuple

import numpy as np
import pandas as pd
from sklearn.exceptions import ConvergenceWarning
from sklearn.linear_model import LogisticRegression
from sklearn.model_selection import train_test_split
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import StandardScaler

from core.config import AppConfig
from core.schema import FEATURE_COLUMNS, OUTCOME_COLUMN
from pipeline.dataset import build_extended_dataset, validate_records, zero_value_report
from pipeline.evaluation import evaluate_model

logger = logging.getLogger(__name__)


class ModelTrainingError(RuntimeError):
    """Raised when the logistic regression cannot produce a converged fit."""


def split_dataset(
    df: pd.DataFrame,
    train_fraction: float = 0.7,
    seed: int = 123,
) -> Tuple[pd.DataFrame, pd.DataFrame]:
    """Disjoint train/test frames, stratified on Outcome."""
    if not 0 < train_fraction < 1:
        raise ValueError(f"train_fraction must be in (0, 1), got {train_fraction}")
    train_df, test_df = train_test_split(
        df,
        train_size=train_fraction,
        random_state=seed,
        stratify=df[OUTCOME_COLUMN],
    )
    logger.info("Split %d rows into %d train / %d test", len(df), len(train_df), len(test_df))
    return train_df, test_df


def train_model(train_df: pd.DataFrame, max_iter: int = 1000) -> Pipeline:
    """
    Unpenalised maximum-likelihood binomial logistic regression on the five predictor columns.
    Raises ModelTrainingError if the data has a single class or the solver does not converge.
    """
    missing = [c for c in FEATURE_COLUMNS + [OUTCOME_COLUMN] if c not in train_df.columns]
    if missing:
        raise ModelTrainingError(f"Training data is missing columns: {missing}")
    y = train_df[OUTCOME_COLUMN].astype(int)
    if y.nunique() < 2:
        raise ModelTrainingError(
            f"Training data contains a single outcome class ({y.iloc[0] if len(y) else 'empty'}); "
            "cannot fit a binomial model"
        )

    model = Pipeline([
        ("scaler", StandardScaler()),
        # C=inf disables the penalty
        ("logreg", LogisticRegression(C=np.inf, max_iter=max_iter)),
    ])
    with warnings.catch_warnings():
        warnings.simplefilter("error", ConvergenceWarning)
        try:
            model.fit(train_df[FEATURE_COLUMNS], y)
        except ConvergenceWarning as e:
            raise ModelTrainingError(
                f"Logistic regression did not converge within {max_iter} iterations: {e}"
            ) from e
        except ValueError as e:
            raise ModelTrainingError(f"Logistic regression fit failed: {e}") from e
    logger.info("Trained logistic regression on %d rows", len(train_df))
    return model


def _as_frame(record: Mapping[str, Any]) -> pd.DataFrame:
    return pd.DataFrame([{col: record[col] for col in FEATURE_COLUMNS}], columns=FEATURE_COLUMNS)


def predict_probability(model: Pipeline, record: Mapping[str, Any]) -> float:
    """Probability of Outcome == 1 for a single record holding the five features."""
    return float(model.predict_proba(_as_frame(record))[0, 1])


def predict_class(model: Pipeline, record: Mapping[str, Any]) -> int:
    return int(model.predict(_as_frame(record))[0])


def model_coefficients(model: Pipeline) -> Dict[str, float]:
    """Intercept and per-feature log-odds in the original feature units."""
    scaler: StandardScaler = model.named_steps["scaler"]
    logreg: LogisticRegression = model.named_steps["logreg"]
    coef = logreg.coef_[0] / scaler.scale_
    intercept = float(logreg.intercept_[0] - (coef * scaler.mean_).sum())
    coefficients = {"(Intercept)": intercept}
    coefficients.update({name: float(c) for name, c in zip(FEATURE_COLUMNS, coef)})
    return coefficients


def run_ml_pipeline(config: Optional[AppConfig] = None) -> dict:
    """
    Run full ML pipeline: synthetic data → split → logistic model → evaluation.
    Returns dict with df, train/test frames, model, evaluation report, coefficients and data-quality flags.
    """
    config = config or AppConfig()
    df = build_extended_dataset(config.data.n_rows)
    validate_records(df)  # raises on a malformed row; nothing to keep
    zeros = zero_value_report(df)

    train_df, test_df = split_dataset(df, config.data.train_fraction, config.data.seed)
    model = train_model(train_df, max_iter=config.model.max_iter)

    report = evaluate_model(model, test_df)
    logger.info("Held-out AUC: %.4f", report.auc)

    return {
        "df": df,
        "train_df": train_df,
        "test_df": test_df,
        "model": model,
        "evaluation": report,
        "coefficients": model_coefficients(model),
        "zero_report": zeros,
        "n_train": len(train_df),
        "n_test": len(test_df),
        "features_used": list(FEATURE_COLUMNS),
    }
