"""Synthetic health-indicator table: a 23-row literal sample repeated to a target length."""
import logging
from itertools import cycle, islice

import pandas as pd

from core.schema import HealthRecord

logger = logging.getLogger(__name__)

# Pima-style sample rows, one list per column. FamilyHistory alternates independently.
SAMPLE_COLUMNS = {
    "Pregnancies": [6, 1, 8, 1, 0, 5, 3, 10, 2, 8, 4, 10, 10, 1, 5, 7, 0, 7, 1, 1, 3, 8, 7],
    "Glucose": [148, 85, 183, 89, 137, 116, 78, 115, 197, 125, 110, 168, 139, 189, 166, 100, 118, 107, 103, 115, 126, 99, 196],
    "BloodPressure": [72, 66, 64, 66, 40, 74, 50, 0, 70, 96, 92, 74, 80, 60, 72, 0, 84, 74, 30, 70, 88, 84, 90],
    "SkinThickness": [35, 29, 0, 23, 35, 0, 32, 0, 45, 0, 0, 0, 0, 23, 19, 0, 47, 0, 38, 30, 41, 0, 0],
    "Insulin": [0, 0, 0, 94, 168, 0, 88, 0, 543, 0, 0, 0, 0, 846, 175, 0, 230, 0, 83, 96, 235, 0, 0],
    "BMI": [33.6, 26.6, 23.3, 28.1, 43.1, 25.6, 31.0, 35.3, 30.5, 0, 37.6, 38.0, 27.1, 30.1, 25.8, 30.0, 45.8, 29.6, 43.3, 34.6, 39.3, 35.4, 39.8],
    "DiabetesPedigreeFunction": [0.627, 0.351, 0.672, 0.167, 2.288, 0.201, 0.248, 0.134, 0.158, 0.232, 0.191, 0.537, 1.441, 0.398, 0.587, 0.484, 0.551, 0.254, 0.183, 0.529, 0.704, 0.388, 0.451],
    "Age": [50, 31, 32, 21, 33, 30, 26, 29, 53, 54, 30, 34, 57, 59, 51, 32, 31, 31, 33, 32, 27, 50, 41],
    "Outcome": [1, 0, 1, 0, 1, 0, 1, 0, 1, 1, 0, 1, 0, 1, 1, 1, 1, 1, 0, 1, 0, 0, 1],
    "FamilyHistory": [1, 0],
}

# Columns where 0 stands in for a missing measurement as well as a real zero.
ZERO_PLACEHOLDER_COLUMNS = ["SkinThickness", "Insulin", "BloodPressure", "BMI"]


def build_extended_dataset(n_rows: int = 150) -> pd.DataFrame:
    """Repeat each sample column cyclically until it is n_rows long."""
    if n_rows <= 0:
        raise ValueError(f"n_rows must be positive, got {n_rows}")
    df = pd.DataFrame({
        name: list(islice(cycle(values), n_rows))
        for name, values in SAMPLE_COLUMNS.items()
    })
    df["Outcome"] = df["Outcome"].astype(int)
    df["FamilyHistory"] = df["FamilyHistory"].astype(int)
    logger.info("Built synthetic dataset: %d rows, %d columns", len(df), df.shape[1])
    return df


def zero_value_report(df: pd.DataFrame) -> dict[str, int]:
    """
    Count literal zeros in columns where 0 may mean "not measured".
    Reported only; the data is left untouched.
    """
    report = {
        col: int((df[col] == 0).sum())
        for col in ZERO_PLACEHOLDER_COLUMNS
        if col in df.columns
    }
    flagged = {col: n for col, n in report.items() if n}
    if flagged:
        logger.warning("Zero placeholders (possibly missing values) not imputed: %s", flagged)
    return report


def validate_records(df: pd.DataFrame) -> list[HealthRecord]:
    """Check every row is numeric with binary FamilyHistory/Outcome; raises pydantic.ValidationError otherwise."""
    return [HealthRecord(**row) for row in df.to_dict("records")]
