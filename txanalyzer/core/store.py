# txanalyzer/core/store.py
import logging
from collections import Counter
from datetime import date

from txanalyzer.core.errors import EmptyStoreError, InvalidDateError
from txanalyzer.utils import date_components, month_key, parse_calendar_date

logger = logging.getLogger(__name__)

DEBIT = "debit"
CREDIT = "credit"
EQUAL = "equal"


class TransactionStore:
    """
    In-memory, insertion-ordered collection of Transaction records.

    Every query is a pure read and returns results in insertion order.
    Only append() changes the store; nothing is ever removed.
    """

    def __init__(self):
        self._transactions = []

    def __len__(self):
        return len(self._transactions)

    def __iter__(self):
        return iter(self._transactions)

    def append(self, tx):
        # duplicate ids are accepted, find_by_id() returns the first one
        self._transactions.append(tx)
        logger.debug("Appended transaction id=%s (%d total)", tx.id, len(self._transactions))

    def all(self):
        return list(self._transactions)

    def unique_types(self):
        return {tx.type for tx in self._transactions}

    def total_amount(self, subset=None):
        txs = self._transactions if subset is None else subset
        return sum(tx.amount for tx in txs)

    def total_amount_by_date(self, year=None, month=None, day=None):
        """
        Sum amounts of records whose date components match every filter given.

        The date string is split on '-' and each part compared as a number;
        no calendar date is built, so "2023-02-30" still matches day=30.
        """
        wanted = (year, month, day)

        def matches(tx):
            parts = date_components(tx.date)
            return all(w is None or p == w for w, p in zip(wanted, parts))

        return self.total_amount([tx for tx in self._transactions if matches(tx)])

    def by_type(self, tx_type):
        return [tx for tx in self._transactions if tx.type == tx_type]

    def in_date_range(self, start, end):
        """
        Return records with start <= date <= end, both bounds inclusive.

        Bounds are compared as calendar dates. A bound that does not parse
        raises InvalidDateError; a record whose own date does not parse
        never falls inside any range.
        """
        start_d = parse_calendar_date(start)
        end_d = parse_calendar_date(end)
        logger.debug("Filtering transactions between %s and %s", start_d, end_d)

        result = []
        for tx in self._transactions:
            try:
                tx_date = parse_calendar_date(tx.date)
            except InvalidDateError:
                logger.debug("Skipping transaction id=%s with unparsable date %r", tx.id, tx.date)
                continue
            if start_d <= tx_date <= end_d:
                result.append(tx)
        return result

    def by_merchant(self, name):
        return [tx for tx in self._transactions if tx.merchant_name == name]

    def average_amount(self):
        if not self._transactions:
            raise EmptyStoreError("Cannot average the amounts of an empty store")
        return self.total_amount() / len(self._transactions)

    def by_amount_range(self, min_amount, max_amount):
        low = _as_bound(min_amount, "min_amount")
        high = _as_bound(max_amount, "max_amount")
        return [tx for tx in self._transactions if low <= tx.amount <= high]

    def total_debit_amount(self):
        return self.total_amount(self.by_type(DEBIT))

    def most_frequent_month(self, subset=None):
        """
        Return the "MM" month key that occurs most often in subset.

        Ties go to the smallest month key. Raises EmptyStoreError when the
        subset has no records with a month field.
        """
        txs = self._transactions if subset is None else subset
        counts = Counter(m for m in (month_key(tx.date) for tx in txs) if m is not None)
        if not counts:
            raise EmptyStoreError("No transactions to find a most frequent month in")
        return min(counts, key=lambda m: (-counts[m], m))

    def most_frequent_debit_month(self):
        return self.most_frequent_month(self.by_type(DEBIT))

    def dominant_type(self):
        debits = sum(1 for tx in self._transactions if tx.type == DEBIT)
        credits = sum(1 for tx in self._transactions if tx.type == CREDIT)
        if debits > credits:
            return DEBIT
        if credits > debits:
            return CREDIT
        return EQUAL

    def before_date(self, end):
        return self.in_date_range(date.min, end)

    def find_by_id(self, tx_id):
        """Return the first record with the given id, or None."""
        for tx in self._transactions:
            if _same_id(tx.id, tx_id):
                return tx
        return None

    def descriptions(self):
        return [tx.description for tx in self._transactions]


def _as_bound(raw, name):
    try:
        return float(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Could not parse {name} '{raw}' as a number")


def _as_id(value):
    # integral ids compare as int, float() drops precision above 2**53
    try:
        return int(str(value).strip())
    except ValueError:
        pass
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return int(number) if number.is_integer() else number


def _same_id(record_id, wanted):
    record_key, wanted_key = _as_id(record_id), _as_id(wanted)
    return record_key is not None and record_key == wanted_key


def store_from_records(transactions):
    """Build a TransactionStore holding transactions in iteration order."""
    store = TransactionStore()
    for tx in transactions:
        store.append(tx)
    return store
