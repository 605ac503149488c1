import json

import pytest

from txanalyzer.config import load_config
from txanalyzer.loaders import get_loader
from txanalyzer.loaders.base import record_to_transaction
from txanalyzer.loaders.csv_loader import CSVLoader
from txanalyzer.loaders.json_loader import JSONLoader
from txanalyzer.loaders.yaml_loader import YAMLLoader


RECORDS = [
    {
        "transaction_id": "1",
        "transaction_date": "2023-05-01",
        "transaction_amount": 100.0,
        "transaction_type": "debit",
        "transaction_description": "Payment for groceries",
        "merchant_name": "SuperMart",
        "card_type": "Visa",
    },
    {
        "transaction_id": "2",
        "transaction_date": "2023-05-02",
        "transaction_amount": 50.0,
        "transaction_type": "credit",
        "transaction_description": "Refund for returned item",
        "merchant_name": "OnlineShop",
        "card_type": "MasterCard",
    },
]


def write_json_sample(path, data=RECORDS):
    path.write_text(json.dumps(data))
    return path


def test_record_to_transaction_accepts_both_key_styles():
    original = record_to_transaction(RECORDS[0])
    short = record_to_transaction({
        "id": 1,
        "date": "2023-05-01",
        "amount": "100",
        "type": "debit",
        "description": "Payment for groceries",
        "merchant_name": "SuperMart",
        "card_type": "Visa",
    })
    assert original == short
    assert original.id == 1
    assert original.amount == 100.0


def test_record_to_transaction_errors():
    with pytest.raises(ValueError, match="transaction_date"):
        record_to_transaction({k: v for k, v in RECORDS[0].items() if k != "transaction_date"})
    with pytest.raises(ValueError, match="amount"):
        record_to_transaction(dict(RECORDS[0], transaction_amount="lots"))
    with pytest.raises(ValueError):
        record_to_transaction(["not", "a", "mapping"])


def test_json_loader_reads_array(tmp_path):
    path = write_json_sample(tmp_path / "transactions.json")
    txs = list(JSONLoader().load(str(path)))
    assert [tx.id for tx in txs] == [1, 2]
    assert txs[1].merchant_name == "OnlineShop"
    assert txs[1].description == "Refund for returned item"


def test_json_loader_reads_object_values_in_order(tmp_path):
    path = write_json_sample(tmp_path / "transactions.json", {"b": RECORDS[1], "a": RECORDS[0]})
    txs = list(JSONLoader().load(str(path)))
    assert [tx.id for tx in txs] == [2, 1]


def test_json_loader_reports_bad_documents(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(ValueError, match="bad.json"):
        list(JSONLoader().load(str(bad)))

    scalar = tmp_path / "scalar.json"
    scalar.write_text("42")
    with pytest.raises(RuntimeError):
        list(JSONLoader().load(str(scalar)))

    missing = write_json_sample(tmp_path / "missing.json", [{"transaction_id": 1}])
    with pytest.raises(ValueError, match="missing.json"):
        list(JSONLoader().load(str(missing)))


def test_csv_loader(tmp_path):
    path = tmp_path / "transactions.csv"
    path.write_text(
        "transaction_id,transaction_date,transaction_amount,transaction_type,"
        "transaction_description,merchant_name,card_type\n"
        "1,2023-05-01,100.00,debit,Payment for groceries,SuperMart,Visa\n"
        "2,2023-05-02,-12.50,credit,Refund,OnlineShop,MasterCard\n"
    )
    txs = list(CSVLoader().load(str(path)))
    assert [tx.id for tx in txs] == [1, 2]
    assert txs[1].amount == -12.5
    assert txs[0].date == "2023-05-01"


def test_csv_loader_missing_column(tmp_path):
    path = tmp_path / "transactions.csv"
    path.write_text("id,date,amount\n1,2023-05-01,10\n")
    with pytest.raises(RuntimeError, match="Missing required column"):
        list(CSVLoader().load(str(path)))


def test_yaml_loader_converts_dates_to_strings(tmp_path):
    path = tmp_path / "transactions.yaml"
    path.write_text(
        """\
- id: 7
  date: 2023-05-04
  amount: 10
  type: debit
  description: Farmers Market
  merchant_name: CASH
  card_type: none
"""
    )
    txs = list(YAMLLoader().load(str(path)))
    assert len(txs) == 1
    assert txs[0].date == "2023-05-04"
    assert txs[0].amount == 10.0


def test_get_loader_uses_config_paths():
    cfg = load_config()
    assert isinstance(get_loader("json", cfg), JSONLoader)
    assert isinstance(get_loader("csv", cfg), CSVLoader)
    assert isinstance(get_loader("yaml", cfg), YAMLLoader)
