"""Data records shared by the wallet: currencies, accounts and transactions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class TransactionType(IntEnum):
    """Kinds of transactions recorded on the chain."""

    NORMAL = 0
    WITHDRAW_PAY = 1
    REGISTER_ACCOUNT = 2
    REGISTER_DELEGATE = 3
    UPGRADE_ACCOUNT = 4
    UPDATE_ACCOUNT = 5
    CREATE_ASSET = 6
    ISSUE_ASSET = 7
    TRANSFER_MULTI_ASSET = 8
    REGISTER_CONTRACT = 10
    TRANSFER_CONTRACT = 11
    UPGRADE_CONTRACT = 12
    DESTROY_CONTRACT = 13
    CALL_CONTRACT = 14


class ChainType(IntEnum):
    """Which chain an account lives on."""

    TEST = 1
    FORMAL = 2


@dataclass
class CurrencyInfo:
    """An asset the wallet can show, identified by id and contract id."""

    id: int = 0
    contract_id: str = ""
    name: str = ""
    coin_type: str = ""


@dataclass
class Amount:
    """An integer amount of one asset."""

    amount: int = 0
    asset_id: int = 0


def _format_amount(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@dataclass
class LedgerEntry:
    """One movement of funds inside a transaction."""

    from_account: str = ""
    from_account_name: str = ""
    to_account: str = ""
    to_account_name: str = ""
    memo: str = ""
    running_balances: dict[str, dict[str, Amount]] = field(default_factory=dict)
    amount: Amount = field(default_factory=Amount)

    def balance(self, account: str, asset: str) -> str:
        """Running balance of ``asset`` for ``account`` as text, or ``"0"``."""
        entry = self.running_balances.get(account, {}).get(asset)
        if entry is None:
            return "0"
        return _format_amount(entry.amount)


@dataclass
class TrxResult:
    """A transaction as reported by the wallet's history."""

    is_virtual: bool = False
    confirmed: bool = False
    market: bool = False
    market_cancel: bool = False
    trx_id: str = ""
    block_num: int = 0
    block_position: int = 0
    trx_type: int = 0
    timestamp: str = ""
    expiration_timestamp: str = ""
    fee: Amount = field(default_factory=Amount)
    entries: list[LedgerEntry] = field(default_factory=list)


@dataclass
class CommonAccountInfo:
    """An account held in the wallet with its balances per asset."""

    type: ChainType = ChainType.TEST
    name: str = ""
    address: str = ""
    balances: dict[str, str] = field(default_factory=dict)
    register_time: str = ""
    owner_key: str = ""
    is_delegate: bool = False

    def balance(self, asset: str) -> str:
        """Balance of ``asset`` as text, ``"0"`` when unknown."""
        return self.balances.get(asset, "0")


@dataclass
class TokenAccountInfo:
    """Balance of one contract token held by an account."""

    name: str = ""
    address: str = ""
    balance: str = ""