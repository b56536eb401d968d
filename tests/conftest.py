"""Shared fixtures: the synthetic dataset, its split, and one fitted model per session."""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest
from pipeline.dataset import build_extended_dataset
from pipeline.ml_pipeline import split_dataset, train_model, run_ml_pipeline


@pytest.fixture(scope="session")
def dataset():
    return build_extended_dataset(150)


@pytest.fixture(scope="session")
def split(dataset):
    return split_dataset(dataset, train_fraction=0.7, seed=123)


@pytest.fixture(scope="session")
def model(split):
    train_df, _ = split
    return train_model(train_df)


@pytest.fixture(scope="session")
def pipeline_results():
    return run_ml_pipeline()
