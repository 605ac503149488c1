# txanalyzer/loaders/json_loader.py

import json
from txanalyzer.loaders.base import BaseLoader, record_to_transaction


class JSONLoader(BaseLoader):
    """
    Loader for JSON transaction documents.

    The document is either an array of records, or an object whose values
    are records (keys are ignored, value order is kept). Each record carries
    transaction_id, transaction_date (YYYY-MM-DD), transaction_amount,
    transaction_type, transaction_description, merchant_name and card_type.
    """
    def load(self, file_path):
        with open(file_path, encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"Could not parse JSON in {file_path}: {e}")

        if isinstance(data, dict):
            records = list(data.values())
        elif isinstance(data, list):
            records = data
        else:
            raise RuntimeError(f"Expected a JSON array or object in {file_path}")

        for entry in records:
            try:
                yield record_to_transaction(entry)
            except ValueError as e:
                raise ValueError(f"{e} in {file_path}")
