# txanalyzer/core/errors.py


class TransactionStoreError(Exception):
    """Base class for errors raised by TransactionStore queries."""


class EmptyStoreError(TransactionStoreError):
    """An aggregate has no defined result over zero records."""


# most_frequent_month() and friends report "no data" with the same error.
NoDataError = EmptyStoreError


class InvalidDateError(TransactionStoreError, ValueError):
    """A date argument could not be parsed as YYYY-MM-DD."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid date {value!r}, expected YYYY-MM-DD")
