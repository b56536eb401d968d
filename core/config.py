"""Application configuration loaded from config/config.yaml."""
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

ROOT = Path(__file__).resolve().parent.parent
CONFIG_PATH = ROOT / "config" / "config.yaml"


class DataConfig(BaseModel):
    n_rows: int = Field(150, gt=0)
    train_fraction: float = Field(0.7, gt=0, lt=1)
    seed: int = 123


class ModelConfig(BaseModel):
    max_iter: int = Field(1000, gt=0)
    decision_threshold: float = Field(0.5, ge=0, le=1)


class UIConfig(BaseModel):
    title: str = "Diabetes Risk Prediction"


class AppConfig(BaseModel):
    data: DataConfig = Field(default_factory=DataConfig)
    model: ModelConfig = Field(default_factory=ModelConfig)
    ui: UIConfig = Field(default_factory=UIConfig)


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load config from YAML. A missing file yields the defaults."""
    config_path = Path(path) if path is not None else CONFIG_PATH
    if not config_path.exists():
        return AppConfig()
    with open(config_path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return AppConfig.model_validate(raw)
