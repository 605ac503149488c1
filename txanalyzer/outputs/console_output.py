# txanalyzer/outputs/console_output.py

import json
import click
from txanalyzer.outputs.base import BaseOutput

LABELS = {
    'unique_types':              'Unique transaction types',
    'total_amount':              'Total amount',
    'total_amount_by_date':      'Total amount by date',
    'by_type':                   'Transactions by type',
    'in_date_range':             'Transactions in date range',
    'by_merchant':               'Transactions by merchant',
    'average_amount':            'Average amount',
    'by_amount_range':           'Transactions in amount range',
    'total_debit_amount':        'Total debit amount',
    'most_frequent_month':       'Most frequent month',
    'most_frequent_debit_month': 'Most frequent debit month',
    'dominant_type':             'Dominant type',
    'before_date':               'Transactions before date',
    'find_by_id':                'Transaction by id',
    'descriptions':              'Descriptions',
}


class ConsoleOutput(BaseOutput):
    """
    Prints one labelled line per report entry. Structured values are
    printed as compact JSON, missing aggregates as "n/a".
    """
    def __init__(self, config):
        self.config = config

    def write(self, report):
        for key, value in report.items():
            label = LABELS.get(key, key)
            if value is None:
                text = 'n/a'
            elif isinstance(value, (dict, list)):
                text = json.dumps(value)
            else:
                text = str(value)
            click.echo(f"{label}: {text}")
