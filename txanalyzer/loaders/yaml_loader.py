# txanalyzer/loaders/yaml_loader.py
import yaml
from txanalyzer.loaders.base import BaseLoader, record_to_transaction


class YAMLLoader(BaseLoader):
    """Load transactions from a YAML list of records."""

    def load(self, file_path):
        with open(file_path) as f:
            data = yaml.safe_load(f) or []

        if not isinstance(data, list):
            raise RuntimeError(f"Expected a YAML list of transactions in {file_path}")

        for entry in data:
            # unquoted YYYY-MM-DD values come back from PyYAML as dates
            if hasattr(entry, 'get'):
                for key in ('transaction_date', 'date'):
                    if key in entry and hasattr(entry[key], 'isoformat'):
                        entry[key] = entry[key].isoformat()
            try:
                yield record_to_transaction(entry)
            except ValueError as e:
                raise ValueError(f"{e} in {file_path}")
