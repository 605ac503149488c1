# txanalyzer/config.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, object] = {
    "loaders": {
        "json": "txanalyzer.loaders.json_loader.JSONLoader",
        "csv": "txanalyzer.loaders.csv_loader.CSVLoader",
        "yaml": "txanalyzer.loaders.yaml_loader.YAMLLoader",
    },
    "output_modules": {
        "console": "txanalyzer.outputs.console_output.ConsoleOutput",
        "json": "txanalyzer.outputs.json_output.JSONOutput",
    },
    "output_dir": "data",
    "report": {
        "date_filter": {"year": 2023, "month": 5, "day": 1},
        "transaction_type": "debit",
        "date_range": {"start": "2023-05-01", "end": "2023-05-04"},
        "merchant": "SuperMart",
        "amount_range": {"min": 50, "max": 150},
        "before_date": "2023-05-02",
        "transaction_id": 1,
    },
}


def _merge_defaults(user: Dict[str, object], defaults: Dict[str, object]) -> Dict[str, object]:
    """Fill keys absent from a user config with defaults, descending into
    nested sections such as ``report.date_filter``. User values always win."""
    merged = dict(user)
    for key, default in defaults.items():
        if key not in merged:
            merged[key] = default
        elif isinstance(default, dict) and isinstance(merged[key], dict):
            merged[key] = _merge_defaults(merged[key], default)
    return merged


def load_config(path: str | Path | None = None) -> Dict[str, object]:
    """Load a YAML config file, falling back to DEFAULT_CONFIG for missing keys."""
    if path is None:
        return _merge_defaults({}, DEFAULT_CONFIG)

    with open(path, "r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level")

    logger.debug("Loaded config from %s", path)
    return _merge_defaults(data, DEFAULT_CONFIG)
