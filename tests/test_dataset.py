"""Tests for the synthetic dataset generator and zero-placeholder report."""

import pytest
from pydantic import ValidationError

from pipeline.dataset import (
    SAMPLE_COLUMNS,
    build_extended_dataset,
    validate_records,
    zero_value_report,
)


def test_dataset_shape(dataset):
    assert dataset.shape == (150, 10)
    assert list(dataset.columns) == list(SAMPLE_COLUMNS.keys())


def test_columns_repeat_every_23_rows(dataset):
    cols = [c for c in dataset.columns if c != "FamilyHistory"]
    first = dataset.loc[0:22, cols].reset_index(drop=True)
    second = dataset.loc[23:45, cols].reset_index(drop=True)
    assert first.equals(second)
    assert dataset.loc[0, "Glucose"] == 148
    assert dataset.loc[149, "Glucose"] == SAMPLE_COLUMNS["Glucose"][149 % 23]


def test_family_history_alternates(dataset):
    assert dataset["FamilyHistory"].tolist()[:6] == [1, 0, 1, 0, 1, 0]
    assert dataset["FamilyHistory"].sum() == 75


def test_dataset_is_deterministic():
    assert build_extended_dataset(150).equals(build_extended_dataset(150))


def test_dataset_custom_length():
    df = build_extended_dataset(10)
    assert len(df) == 10
    assert df["Outcome"].tolist() == SAMPLE_COLUMNS["Outcome"][:10]


@pytest.mark.parametrize("n_rows", [0, -5])
def test_dataset_rejects_non_positive_length(n_rows):
    with pytest.raises(ValueError):
        build_extended_dataset(n_rows)


def test_zero_report_counts(dataset):
    report = zero_value_report(dataset)
    assert set(report) == {"SkinThickness", "Insulin", "BloodPressure", "BMI"}
    assert report["BloodPressure"] == 13
    assert report["BMI"] == 7


def test_zero_report_leaves_data_untouched(dataset):
    before = dataset.copy()
    zero_value_report(dataset)
    assert dataset.equals(before)


def test_validate_records(dataset):
    records = validate_records(dataset)
    assert len(records) == 150
    assert records[0].Glucose == 148


def test_validate_records_rejects_non_binary_outcome(dataset):
    bad = dataset.head(3).copy()
    bad.loc[0, "Outcome"] = 2
    with pytest.raises(ValidationError):
        validate_records(bad)
