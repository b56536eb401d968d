"""Console report: train once and print the held-out confusion matrix and AUC."""
import logging
import sys

import pandas as pd

from core.config import load_config
from pipeline.ml_pipeline import ModelTrainingError, run_ml_pipeline

logger = logging.getLogger(__name__)


def format_report(results: dict) -> str:
    report = results["evaluation"]
    cm = pd.DataFrame(
        report.confusion_matrix,
        index=pd.Index(["0", "1"], name="Actual"),
        columns=pd.Index(["0", "1"], name="Predicted"),
    )
    coefficients = pd.Series(results["coefficients"], name="Estimate")
    lines = [
        f"Train / test rows: {results['n_train']} / {results['n_test']}",
        "",
        "Confusion Matrix:",
        cm.to_string(),
        "",
        f"Accuracy: {report.accuracy:.4f}",
        f"Sensitivity: {report.sensitivity:.4f}",
        f"Specificity: {report.specificity:.4f}",
        f"Precision: {report.precision:.4f}",
        "",
        "Coefficients (log-odds per unit):",
        coefficients.to_string(),
        "",
        f"AUC: {report.auc}",
    ]
    return "\n".join(lines)


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    config = load_config()
    try:
        results = run_ml_pipeline(config)
    except ModelTrainingError as e:
        logger.error("Training failed: %s", e)
        return 1
    print(format_report(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
