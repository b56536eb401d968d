"""Tests for held-out evaluation, figures, and the console report."""

import pytest

from pipeline.evaluation import build_confusion_figure, build_roc_figure, evaluate_model
from pipeline.report import format_report


def test_confusion_matrix_covers_test_split(model, split):
    _, test_df = split
    report = evaluate_model(model, test_df)
    cm = report.confusion_matrix
    assert len(cm) == 2 and all(len(row) == 2 for row in cm)
    assert sum(map(sum, cm)) == len(test_df) == report.n_test
    # rows are actual labels
    assert sum(cm[1]) == int(test_df["Outcome"].sum())


def test_roc_points(model, split):
    _, test_df = split
    report = evaluate_model(model, test_df)
    assert len(report.fpr) == len(report.tpr) == len(report.thresholds)
    assert report.fpr[0] == 0.0 and report.tpr[0] == 0.0
    assert report.fpr[-1] == 1.0 and report.tpr[-1] == 1.0
    assert all(0.0 <= t <= 1.0 for t in report.thresholds)
    assert 0.0 <= report.auc <= 1.0


def test_rates_are_consistent(model, split):
    _, test_df = split
    report = evaluate_model(model, test_df)
    (tn, fp), (fn, tp) = report.confusion_matrix
    assert report.accuracy == pytest.approx((tn + tp) / report.n_test)
    if tp + fn:
        assert report.sensitivity == pytest.approx(tp / (tp + fn))
    if tn + fp:
        assert report.specificity == pytest.approx(tn / (tn + fp))


def test_evaluation_is_pure(model, split):
    _, test_df = split
    before = test_df.copy()
    first = evaluate_model(model, test_df)
    second = evaluate_model(model, test_df)
    assert first == second
    assert test_df.equals(before)


def test_figures(pipeline_results):
    report = pipeline_results["evaluation"]
    roc = build_roc_figure(report)
    assert len(roc.data) == 2
    assert list(roc.data[1].x) == report.fpr
    cm = build_confusion_figure(report)
    assert len(cm.data) == 1


def test_format_report(pipeline_results):
    text = format_report(pipeline_results)
    assert "Confusion Matrix:" in text
    assert "AUC:" in text
    assert "Train / test rows: 105 / 45" in text
