"""Parsing of node replies: the asset list and the transaction history."""

from __future__ import annotations

import json
import math
from collections.abc import Callable
from typing import Any

from achainkit.models import Amount, CurrencyInfo, LedgerEntry, TrxResult

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_SKIPPED_CURRENCY = "ECT"
_CLEARED_MEMO_PREFIX = "deposit toACT"


def _load_object(text: str) -> dict[str, Any]:
    """Decode ``text`` as a JSON object; anything else counts as an empty object."""
    try:
        document = json.loads(text)
    except (TypeError, ValueError):
        return {}
    return document if isinstance(document, dict) else {}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _to_int(value: Any) -> int:
    """A JSON number that is a whole 32-bit integer, otherwise 0."""
    if not _is_number(value):
        return 0
    number = float(value)
    if not math.isfinite(number) or not number.is_integer():
        return 0
    whole = int(number)
    return whole if _INT_MIN <= whole <= _INT_MAX else 0


def _to_double(value: Any) -> float:
    return float(value) if _is_number(value) else 0.0


def _to_str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _to_bool(value: Any) -> bool:
    return value if isinstance(value, bool) else False


def _to_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _to_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _truncate(number: float) -> int:
    """Drop the fraction of ``number``; non-finite values become 0."""
    return int(number) if math.isfinite(number) else 0


def _text_to_double(text: str) -> float:
    """Read a decimal number from text, 0.0 when it is not one."""
    if "_" in text:
        return 0.0
    try:
        number = float(text)
    except ValueError:
        return 0.0
    return number if math.isfinite(number) else 0.0


def _variant_to_int(value: Any) -> int:
    """Convert a loosely typed value to an integer, rounding fractions."""
    if isinstance(value, bool):
        return int(value)
    if _is_number(value):
        number = float(value)
        return int(round(number)) if math.isfinite(number) else 0
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return 0
    return 0


def _variant_to_double(value: Any) -> float:
    if isinstance(value, bool):
        return float(value)
    if _is_number(value):
        return float(value)
    if isinstance(value, str):
        return _text_to_double(value)
    return 0.0


def parse_currency_list(json_str: str, common_asset: str) -> list[CurrencyInfo]:
    """Read the asset list from a reply whose ``result`` is an array of assets.

    Assets named ``ECT`` are left out, the rest are sorted by name, and the
    chain's common asset is put first with id 0 and contract id ``"0"``.
    Malformed input yields just the common asset.
    """
    currencies = [
        CurrencyInfo(
            id=_to_int(item.get("id")),
            contract_id=_to_str(item.get("contractId")),
            name=_to_str(item.get("name")),
            coin_type=_to_str(item.get("coinType")),
        )
        for item in _to_list(_load_object(json_str).get("result"))
        if isinstance(item, dict) and _to_str(item.get("name")) != _SKIPPED_CURRENCY
    ]
    currencies.sort(key=lambda info: info.name)
    common = CurrencyInfo(id=0, contract_id="0", name=common_asset, coin_type=common_asset)
    return [common, *currencies]


def _clean_memo(memo: str) -> str:
    if memo == " " or memo.startswith(_CLEARED_MEMO_PREFIX):
        return ""
    return memo


def _parse_running_balances(
    raw: Any, asset_name_for_id: Callable[[int], str]
) -> dict[str, dict[str, Amount]]:
    balances: dict[str, dict[str, Amount]] = {}
    for pair in _to_list(raw):
        pair = _to_list(pair)
        if len(pair) < 2:
            continue
        account = _to_str(pair[0])
        amounts: dict[str, Amount] = {}
        for amount_pair in _to_list(pair[1]):
            amount_pair = _to_list(amount_pair)
            if len(amount_pair) < 2:
                continue
            amount_obj = _to_dict(amount_pair[1])
            asset_id = _variant_to_int(amount_obj.get("asset_id"))
            value = _truncate(_variant_to_double(amount_obj.get("amount")))
            amounts[asset_name_for_id(asset_id)] = Amount(amount=value, asset_id=asset_id)
        if amounts:
            balances[account] = amounts
    return balances


def _parse_entry(raw: Any, asset_name_for_id: Callable[[int], str]) -> LedgerEntry:
    entry_obj = _to_dict(raw)
    amount_obj = _to_dict(entry_obj.get("amount"))
    raw_amount = amount_obj.get("amount")
    if isinstance(raw_amount, str):
        amount_value = _truncate(_text_to_double(raw_amount))
    else:
        amount_value = _truncate(_to_double(raw_amount))
    return LedgerEntry(
        from_account=_to_str(entry_obj.get("from_account")),
        from_account_name=_to_str(entry_obj.get("from_account_name")),
        to_account=_to_str(entry_obj.get("to_account")),
        to_account_name=_to_str(entry_obj.get("to_account_name")),
        memo=_clean_memo(_to_str(entry_obj.get("memo"))),
        running_balances=_parse_running_balances(
            entry_obj.get("running_balances"), asset_name_for_id
        ),
        amount=Amount(amount=amount_value, asset_id=_to_int(amount_obj.get("asset_id"))),
    )


def _parse_trx(trx_obj: dict[str, Any], asset_name_for_id: Callable[[int], str]) -> TrxResult:
    fee_obj = _to_dict(trx_obj.get("fee"))
    return TrxResult(
        is_virtual=_to_bool(trx_obj.get("is_virtual")),
        confirmed=_to_bool(trx_obj.get("is_confirmed")),
        market=_to_bool(trx_obj.get("is_market")),
        market_cancel=_to_bool(trx_obj.get("is_market_cancel")),
        trx_id=_to_str(trx_obj.get("trx_id")),
        block_num=_to_int(trx_obj.get("block_num")),
        block_position=_to_int(trx_obj.get("block_position")),
        trx_type=_to_int(trx_obj.get("trx_type")),
        timestamp=_to_str(trx_obj.get("timestamp")),
        expiration_timestamp=_to_str(trx_obj.get("expiration_timestamp")),
        fee=Amount(
            amount=_truncate(_to_double(fee_obj.get("amount"))),
            asset_id=_to_int(fee_obj.get("asset_id")),
        ),
        entries=[
            _parse_entry(raw, asset_name_for_id)
            for raw in _to_list(trx_obj.get("ledger_entries"))
        ],
    )


def parse_trx_results(
    trx_json: str, asset_name_for_id: Callable[[int], str]
) -> list[TrxResult]:
    """Read a transaction history reply whose ``result`` is an array of transactions.

    ``asset_name_for_id`` maps an asset id to the name under which running
    balances are keyed. A reply without a ``result`` array yields no transactions.
    """
    return [
        _parse_trx(item, asset_name_for_id)
        for item in _to_list(_load_object(trx_json).get("result"))
        if isinstance(item, dict)
    ]