# txanalyzer/core/models.py
import json
from dataclasses import asdict, dataclass

@dataclass(frozen=True)
class Transaction:
    id: int
    date: str
    amount: float
    type: str
    description: str
    merchant_name: str
    card_type: str

    def to_dict(self):
        return asdict(self)

    def to_json(self):
        """Serialize the record as a JSON object string."""
        return json.dumps(self.to_dict())
