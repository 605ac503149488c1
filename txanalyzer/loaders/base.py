# txanalyzer/loaders/base.py
from abc import ABC, abstractmethod

from txanalyzer.core.models import Transaction

# Transaction field -> key used by the original transactions document
FIELD_ALIASES = {
    'id':            'transaction_id',
    'date':          'transaction_date',
    'amount':        'transaction_amount',
    'type':          'transaction_type',
    'description':   'transaction_description',
    'merchant_name': 'merchant_name',
    'card_type':     'card_type',
}


class BaseLoader(ABC):
    @abstractmethod
    def load(self, file_path: str):
        """
        Yield Transaction instances from file_path, in document order.
        """
        pass


def _lookup(entry, field):
    alias = FIELD_ALIASES[field]
    if alias in entry:
        return entry[alias]
    if field in entry:
        return entry[field]
    raise ValueError(f"Missing '{alias}' in transaction record: {entry}")


def _as_number(raw, field, entry):
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Could not parse {field} '{raw}' in transaction record: {entry}")
    return int(value) if field == 'id' and value.is_integer() else value


def record_to_transaction(entry):
    """
    Coerce one plain record (dict-like) into a Transaction.

    Accepts either the original document keys (transaction_id, ...) or the
    Transaction field names. id and amount are coerced to numbers, the
    remaining fields to stripped strings.
    """
    if not hasattr(entry, 'keys'):
        raise ValueError(f"Transaction record is not a mapping: {entry!r}")

    return Transaction(
        id=_as_number(_lookup(entry, 'id'), 'id', entry),
        date=str(_lookup(entry, 'date')).strip(),
        amount=_as_number(_lookup(entry, 'amount'), 'amount', entry),
        type=str(_lookup(entry, 'type')).strip(),
        description=str(_lookup(entry, 'description')).strip(),
        merchant_name=str(_lookup(entry, 'merchant_name')).strip(),
        card_type=str(_lookup(entry, 'card_type')).strip(),
    )
