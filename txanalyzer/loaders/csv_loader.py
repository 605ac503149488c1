# txanalyzer/loaders/csv_loader.py
import pandas as pd
from txanalyzer.loaders.base import BaseLoader, FIELD_ALIASES, record_to_transaction


class CSVLoader(BaseLoader):
    def load(self, file_path):
        # Read everything as text, record_to_transaction() does the coercion
        df = pd.read_csv(
            file_path,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
        df.columns = [str(c).strip().lower() for c in df.columns]

        for field, alias in FIELD_ALIASES.items():
            if field not in df.columns and alias not in df.columns:
                raise RuntimeError(
                    f"Missing required column '{alias}' in {file_path}. "
                    f"Found: {list(df.columns)}"
                )

        for _, row in df.iterrows():
            try:
                yield record_to_transaction(row.to_dict())
            except ValueError as e:
                raise ValueError(f"{e} in {file_path}")
