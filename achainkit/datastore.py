"""Wallet state: application paths, persisted settings, currencies, accounts and tokens."""

from __future__ import annotations

import configparser
import json
from dataclasses import dataclass, field
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from achainkit.models import (
    ChainType,
    CommonAccountInfo,
    CurrencyInfo,
    TokenAccountInfo,
    TrxResult,
)
from achainkit.parsing import parse_currency_list, parse_trx_results

ASSET_INFO_KEY = "/settings/assetInfo"
TEST_ACCOUNT_KEY = "/settings/testCurrentAccount"
FORMAL_ACCOUNT_KEY = "/settings/formalCurrentAccount"
ASSET_PRECISION = 100000
DEFAULT_COMMON_ASSET = "ACT"


@dataclass(frozen=True)
class AppPaths:
    """Where the wallet keeps its data and where the tool keeps its configuration."""

    app_data_path: str = ""
    tool_config_path: str = ""
    work_path: str = ""

    @property
    def config_path(self) -> str:
        """Path of the settings file."""
        return self.tool_config_path + "/config.ini"

    @property
    def log_path(self) -> str:
        """Path of the log file."""
        return self.tool_config_path + "/log.txt"


def resolve_app_paths(environ: Mapping[str, str], platform: str) -> AppPaths:
    """Work out the data and configuration directories for ``platform``.

    ``platform`` follows ``sys.platform``: ``win32`` uses ``APPDATA``,
    ``darwin`` and everything else use ``HOME``. A missing variable
    leaves both paths empty.
    """
    if platform == "win32":
        base = environ.get("APPDATA")
        if base is None:
            return AppPaths()
        return AppPaths(base + "\\ACHAINNew", base + "\\AchainDevelopmentToolNew")
    base = environ.get("HOME")
    if base is None:
        return AppPaths()
    if platform == "darwin":
        support = base + "/Library/Application Support"
        return AppPaths(support + "/ACHAIN", support + "/AchainDevelopmentTool")
    return AppPaths(base + "/ACHAIN", base + "/AchainDevelopmentTool")


def _split_key(key: str) -> tuple[str, str]:
    stripped = key.strip("/")
    if not stripped:
        raise ValueError(f"empty settings key: {key!r}")
    group, sep, name = stripped.partition("/")
    if not sep:
        return "General", group
    if not name:
        raise ValueError(f"settings key has no name: {key!r}")
    return group, name


class Settings:
    """Key/value settings stored in an INI file, keyed as ``/group/name``.

    Without a path the settings live in memory only.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self._parser = configparser.ConfigParser(interpolation=None, delimiters=("=",))
        self._parser.optionxform = str  # type: ignore[assignment, method-assign]
        if self.path is not None and self.path.exists():
            self._parser.read(self.path, encoding="utf-8")

    def value(self, key: str, default: Any = None) -> Any:
        """Stored value of ``key``, or ``default`` when it was never set."""
        group, name = _split_key(key)
        if not self._parser.has_option(group, name):
            return default
        raw = self._parser.get(group, name)
        try:
            return json.loads(raw)
        except ValueError:
            return raw

    def set_value(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key`` and write the file if there is one."""
        group, name = _split_key(key)
        if not self._parser.has_section(group):
            self._parser.add_section(group)
        self._parser.set(group, name, json.dumps(value))
        self._save()

    def __contains__(self, key: str) -> bool:
        group, name = _split_key(key)
        return self._parser.has_option(group, name)

    def _save(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as handle:
            self._parser.write(handle)


def token_transfer_params(to_address: str, amount: float, remark: str) -> str:
    """Parameter string for a token contract's ``transfer_to`` call."""
    return f"{to_address}|{amount:.5f}|{remark}"


@dataclass
class DataStore:
    """Holds the wallet's currencies, accounts and token balances."""

    settings: Settings = field(default_factory=Settings)
    common_asset: str = DEFAULT_COMMON_ASSET
    currencies: list[CurrencyInfo] = field(default_factory=list)
    current_currency: CurrencyInfo = field(
        default_factory=lambda: CurrencyInfo(id=-1, contract_id="-1", name="-1", coin_type="-1")
    )
    accounts: dict[str, CommonAccountInfo] = field(default_factory=dict)
    token_accounts: dict[str, dict[str, TokenAccountInfo]] = field(default_factory=dict)
    trx_results: dict[str, list[TrxResult]] = field(default_factory=dict)
    current_account: str = ""
    language: str = "English"
    updated: bool = False

    def __post_init__(self) -> None:
        if not self.current_account:
            self.current_account = str(self.settings.value(TEST_ACCOUNT_KEY, "") or "")

    @property
    def current_currency_name(self) -> str:
        """Name of the currency currently shown."""
        return self.current_currency.name

    def mark_updated(self) -> None:
        """Record that the wallet has caught up with the chain."""
        self.updated = True

    def load_currencies(self, json_str: str | None = None) -> list[CurrencyInfo]:
        """Replace the currency list from an asset-list reply.

        The reply is saved to the settings; with ``None`` the saved reply is
        read back instead.
        """
        if json_str is None:
            json_str = str(self.settings.value(ASSET_INFO_KEY, "") or "")
        else:
            self.settings.set_value(ASSET_INFO_KEY, json_str)
        self.currencies = parse_currency_list(json_str, self.common_asset)
        return self.currencies

    def currency_by_id(self, currency_id: int) -> CurrencyInfo:
        """First currency with ``currency_id``, or an empty record."""
        return next((c for c in self.currencies if c.id == currency_id), CurrencyInfo())

    def currency_by_contract_id(self, contract_id: str) -> CurrencyInfo:
        """First currency with ``contract_id``, or an empty record."""
        return next(
            (c for c in self.currencies if c.contract_id == contract_id), CurrencyInfo()
        )

    def account_address(self, account: str) -> str:
        """Address of ``account``, empty when unknown."""
        info = self.accounts.get(account)
        return info.address if info is not None else ""

    def account_by_address(self, address: str) -> str:
        """Name of the account holding ``address``, empty when none does."""
        return next(
            (info.name for info in self.accounts.values() if info.address == address), ""
        )

    def delete_account(self, account: str) -> None:
        """Forget ``account``; unknown names are ignored."""
        self.accounts.pop(account, None)

    def _account_token_info(self, account: str) -> TokenAccountInfo:
        info = self.accounts.get(account, CommonAccountInfo())
        return TokenAccountInfo(name=info.name, address=info.address, balance="0")

    def set_token_balance(self, account: str, asset: str, balance: str) -> None:
        """Record a token balance.

        The first token recorded for an account is entered with balance
        ``"0"``; later ones take ``balance``.
        """
        assets = self.token_accounts.setdefault(account, {})
        if not assets:
            token = self._account_token_info(account)
        else:
            existing = assets.get(asset, TokenAccountInfo())
            token = TokenAccountInfo(
                name=existing.name, address=existing.address, balance=balance
            )
        assets[asset] = token

    def token_balance(self, account: str, asset: str) -> str:
        """Balance of ``asset`` for ``account``; an account without tokens gets ``"0"``."""
        assets = self.token_accounts.setdefault(account, {})
        if not assets:
            assets[asset] = self._account_token_info(account)
        return assets.get(asset, TokenAccountInfo()).balance

    def set_current_account(self, name: str, chain_type: ChainType = ChainType.TEST) -> None:
        """Select ``name`` and remember it for ``chain_type``."""
        self.current_account = name
        key = TEST_ACCOUNT_KEY if chain_type == ChainType.TEST else FORMAL_ACCOUNT_KEY
        self.settings.set_value(key, name)

    def parse_transactions(self, trx_json: str) -> list[TrxResult]:
        """Read a history reply, keying running balances by currency name."""
        return parse_trx_results(
            trx_json, lambda asset_id: self.currency_by_contract_id(str(asset_id)).name
        )