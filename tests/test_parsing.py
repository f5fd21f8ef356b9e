import json

import pytest

from achainkit.models import Amount
from achainkit.parsing import parse_currency_list, parse_trx_results


def _names(asset_id: int) -> str:
    return {0: "ACT", 7: "TOK"}.get(asset_id, "")


def _currency_reply(items):
    return json.dumps({"result": items})


def test_common_asset_comes_first():
    reply = _currency_reply(
        [{"id": 5, "name": "ZED", "contractId": "CON5", "coinType": "Z"}]
    )
    currencies = parse_currency_list(reply, "ACT")
    first = currencies[0]
    assert (first.id, first.contract_id, first.name, first.coin_type) == (0, "0", "ACT", "ACT")
    assert currencies[1].contract_id == "CON5"
    assert currencies[1].coin_type == "Z"


def test_currencies_sorted_by_name_and_ect_skipped():
    reply = _currency_reply(
        [
            {"id": 3, "name": "MMM", "contractId": "c3", "coinType": "t"},
            {"id": 1, "name": "ECT", "contractId": "c1", "coinType": "t"},
            {"id": 2, "name": "BBB", "contractId": "c2", "coinType": "t"},
        ]
    )
    names = [info.name for info in parse_currency_list(reply, "ACT")]
    assert names == ["ACT", "BBB", "MMM"]
    assert "ECT" not in names


@pytest.mark.parametrize("reply", ["", "not json", "[1, 2]", '{"result": 3}', '{"other": []}'])
def test_malformed_currency_reply_gives_only_common_asset(reply):
    currencies = parse_currency_list(reply, "ACT")
    assert [info.name for info in currencies] == ["ACT"]


def test_currency_non_objects_ignored_and_bad_id_is_zero():
    reply = _currency_reply([5, "x", {"id": "9", "name": "QQ"}])
    currencies = parse_currency_list(reply, "ACT")
    assert len(currencies) == 2
    assert currencies[1].name == "QQ"
    assert currencies[1].id == 0


def _trx_reply(**overrides):
    trx = {
        "is_virtual": False,
        "is_confirmed": True,
        "is_market": False,
        "is_market_cancel": True,
        "trx_id": "abc123",
        "block_num": 42,
        "block_position": 3,
        "trx_type": 14,
        "timestamp": "2018-01-01T00:00:00",
        "expiration_timestamp": "2018-01-01T01:00:00",
        "fee": {"amount": 1000, "asset_id": 0},
        "ledger_entries": [
            {
                "from_account": "ADDR_FROM",
                "from_account_name": "alice",
                "to_account": "ADDR_TO",
                "to_account_name": "bob",
                "memo": "hello",
                "running_balances": [
                    ["alice", [[0, {"asset_id": 0, "amount": 500}], [1, {"asset_id": 7, "amount": 20}]]]
                ],
                "amount": {"amount": 250, "asset_id": 0},
            }
        ],
    }
    trx.update(overrides)
    return json.dumps({"result": [trx]})


def test_transaction_fields():
    (trx,) = parse_trx_results(_trx_reply(), _names)
    assert trx.confirmed is True
    assert trx.is_virtual is False
    assert trx.market_cancel is True
    assert trx.trx_id == "abc123"
    assert (trx.block_num, trx.block_position, trx.trx_type) == (42, 3, 14)
    assert trx.timestamp == "2018-01-01T00:00:00"
    assert trx.expiration_timestamp == "2018-01-01T01:00:00"
    assert trx.fee == Amount(amount=1000, asset_id=0)


def test_ledger_entry_and_running_balances():
    (trx,) = parse_trx_results(_trx_reply(), _names)
    (entry,) = trx.entries
    assert entry.from_account_name == "alice"
    assert entry.to_account == "ADDR_TO"
    assert entry.memo == "hello"
    assert entry.amount == Amount(amount=250, asset_id=0)
    assert entry.running_balances == {
        "alice": {"ACT": Amount(amount=500, asset_id=0), "TOK": Amount(amount=20, asset_id=7)}
    }
    assert entry.balance("alice", "TOK") == "20"


@pytest.mark.parametrize("memo", [" ", "deposit toACT123", "deposit toACT"])
def test_memo_cleared(memo):
    reply = _trx_reply(ledger_entries=[{"memo": memo}])
    (trx,) = parse_trx_results(reply, _names)
    assert trx.entries[0].memo == ""


def test_amount_given_as_text_is_truncated():
    reply = _trx_reply(ledger_entries=[{"amount": {"amount": "1500.9", "asset_id": 0}}])
    (trx,) = parse_trx_results(reply, _names)
    assert trx.entries[0].amount.amount == 1500


def test_balance_account_without_amounts_is_left_out():
    reply = _trx_reply(ledger_entries=[{"running_balances": [["carol", []]]}])
    (trx,) = parse_trx_results(reply, _names)
    assert trx.entries[0].running_balances == {}
    assert trx.entries[0].balance("carol", "ACT") == "0"


@pytest.mark.parametrize("reply", ["", "{}", '{"result": {}}', '{"result": [1, "x"]}'])
def test_missing_history_gives_no_transactions(reply):
    assert parse_trx_results(reply, _names) == []


def test_order_of_transactions_kept():
    reply = json.dumps({"result": [{"trx_id": "one"}, {"trx_id": "two"}]})
    ids = [trx.trx_id for trx in parse_trx_results(reply, _names)]
    assert ids == ["one", "two"]