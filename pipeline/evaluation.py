"""Held-out evaluation: confusion matrix, ROC/AUC, and the plotly figures shown in the UI."""
import numpy as np
import pandas as pd
import plotly.graph_objects as go
from sklearn.metrics import (
    accuracy_score,
    confusion_matrix,
    precision_score,
    recall_score,
    roc_auc_score,
    roc_curve,
)

from core.schema import FEATURE_COLUMNS, OUTCOME_COLUMN, EvaluationReport


def evaluate_model(model, test_df: pd.DataFrame) -> EvaluationReport:
    """Score the model on the held-out frame. Positive class is Outcome == 1."""
    y_true = test_df[OUTCOME_COLUMN].astype(int)
    X_test = test_df[FEATURE_COLUMNS]
    y_pred = model.predict(X_test)
    y_prob = model.predict_proba(X_test)[:, 1]

    fpr, tpr, thresholds = roc_curve(y_true, y_prob)
    # roc_curve prepends an infinite threshold for the (0, 0) point
    thresholds = np.clip(thresholds, 0.0, 1.0)

    return EvaluationReport(
        confusion_matrix=confusion_matrix(y_true, y_pred, labels=[0, 1]).tolist(),
        fpr=fpr.tolist(),
        tpr=tpr.tolist(),
        thresholds=thresholds.tolist(),
        auc=float(roc_auc_score(y_true, y_prob)),
        accuracy=float(accuracy_score(y_true, y_pred)),
        sensitivity=float(recall_score(y_true, y_pred, pos_label=1, zero_division=0)),
        specificity=float(recall_score(y_true, y_pred, pos_label=0, zero_division=0)),
        precision=float(precision_score(y_true, y_pred, pos_label=1, zero_division=0)),
        n_test=len(test_df),
    )


def build_roc_figure(report: EvaluationReport) -> go.Figure:
    """ROC curve of the test split, coloured by decision threshold."""
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=[0, 1],
            y=[0, 1],
            mode="lines",
            line=dict(dash="dash", color="gray"),
            name="Chance",
            hoverinfo="skip",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=report.fpr,
            y=report.tpr,
            mode="lines+markers",
            name=f"ROC (AUC = {report.auc:.3f})",
            line=dict(color="#2E86AB"),
            marker=dict(
                size=8,
                color=report.thresholds,
                colorscale="Rainbow",
                cmin=0,
                cmax=1,
                colorbar=dict(title="Threshold"),
            ),
            customdata=report.thresholds,
            hovertemplate="FPR: %{x:.3f}<br>TPR: %{y:.3f}<br>Threshold: %{customdata:.3f}<extra></extra>",
        )
    )
    fig.update_layout(
        xaxis_title="False positive rate",
        yaxis_title="True positive rate",
        xaxis=dict(range=[0, 1]),
        yaxis=dict(range=[0, 1.02]),
        height=420,
        showlegend=True,
        legend=dict(x=0.55, y=0.05),
    )
    return fig


def build_confusion_figure(report: EvaluationReport) -> go.Figure:
    labels = ["0", "1"]
    fig = go.Figure(
        go.Heatmap(
            z=report.confusion_matrix,
            x=labels,
            y=labels,
            colorscale="Blues",
            text=report.confusion_matrix,
            texttemplate="%{text}",
            showscale=False,
        )
    )
    fig.update_layout(
        xaxis_title="Predicted",
        yaxis_title="Actual",
        yaxis=dict(autorange="reversed"),
        height=320,
    )
    return fig
