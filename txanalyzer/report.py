# txanalyzer/report.py
from __future__ import annotations

import logging
from typing import Callable, Dict, List

from txanalyzer.core.errors import EmptyStoreError
from txanalyzer.core.store import TransactionStore

logger = logging.getLogger(__name__)


def _records(transactions) -> List[dict]:
    return [tx.to_dict() for tx in transactions]


def _or_none(label: str, query: Callable[[], object]):
    try:
        return query()
    except EmptyStoreError as e:
        logger.warning("No result for %s: %s", label, e)
        return None


def _date_filter_value(date_filter, key):
    raw = date_filter.get(key)
    if raw is None:
        return None
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Could not parse date_filter.{key} '{raw}' as an integer")


def build_report(store: TransactionStore, options: Dict[str, object]) -> Dict[str, object]:
    """Run the standard set of queries against *store*.

    *options* is the ``report`` section of the config. The result holds only
    plain values (lists, dicts, numbers, strings) so any output module can
    render it. ``date_filter`` values are read as integers, so a quoted
    ``"05"`` selects May just like ``5``. Aggregates with no defined result over an empty selection are
    reported as ``None``.
    """

    date_filter = options.get("date_filter") or {}
    date_range = options.get("date_range") or {}
    amount_range = options.get("amount_range") or {}
    tx_type = options.get("transaction_type", "debit")
    tx_id = options.get("transaction_id")

    found = store.find_by_id(tx_id) if tx_id is not None else None

    return {
        "unique_types": sorted(store.unique_types()),
        "total_amount": store.total_amount(),
        "total_amount_by_date": {
            "filter": dict(date_filter),
            "total": store.total_amount_by_date(
                year=_date_filter_value(date_filter, "year"),
                month=_date_filter_value(date_filter, "month"),
                day=_date_filter_value(date_filter, "day"),
            ),
        },
        "by_type": {
            "type": tx_type,
            "transactions": _records(store.by_type(tx_type)),
        },
        "in_date_range": {
            "start": date_range.get("start"),
            "end": date_range.get("end"),
            "transactions": _records(
                store.in_date_range(date_range.get("start"), date_range.get("end"))
            ),
        },
        "by_merchant": {
            "merchant": options.get("merchant"),
            "transactions": _records(store.by_merchant(options.get("merchant"))),
        },
        "average_amount": _or_none("average_amount", store.average_amount),
        "by_amount_range": {
            "min": amount_range.get("min"),
            "max": amount_range.get("max"),
            "transactions": _records(
                store.by_amount_range(amount_range.get("min"), amount_range.get("max"))
            ),
        },
        "total_debit_amount": store.total_debit_amount(),
        "most_frequent_month": _or_none("most_frequent_month", store.most_frequent_month),
        "most_frequent_debit_month": _or_none(
            "most_frequent_debit_month", store.most_frequent_debit_month
        ),
        "dominant_type": store.dominant_type(),
        "before_date": {
            "date": options.get("before_date"),
            "transactions": _records(store.before_date(options.get("before_date"))),
        },
        "find_by_id": {
            "id": tx_id,
            "transaction": found.to_dict() if found else None,
        },
        "descriptions": store.descriptions(),
    }
